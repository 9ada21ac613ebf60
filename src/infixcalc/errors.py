"""Error types with formatted source context."""

from __future__ import annotations

from infixcalc.tokens import Span


class PipelineError(Exception):
    """Base for every failure raised while evaluating one line of input."""

    def __init__(self, message: str, span: Span, source: str) -> None:
        self.message = message
        self.span = span
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "<input>", line: int = 1) -> str:
        source_line = self.source.rstrip("\n").rstrip("\r")
        col = self.span.start + 1

        # Underline the span, at least one char
        underline_len = max(1, self.span.end - self.span.start)

        pad = " " * self.span.start
        carets = "^" * underline_len

        line_num = str(line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class LexError(PipelineError):
    """Raised on the first character the lexer does not recognise."""

    def __init__(self, position: int, character: str, source: str) -> None:
        self.position = position
        self.character = character
        super().__init__(
            f"unrecognized character {character!r}", Span(position, position + 1), source
        )


class ParseError(PipelineError):
    """Raised when the token sequence cannot be reordered into postfix."""


class UnmatchedParenError(ParseError):
    """A ')' with no open '(' before it, or a '(' never closed."""


class EvalError(PipelineError):
    """Raised when a postfix sequence cannot be reduced to a single value."""


class StackUnderflowError(EvalError):
    """An operator was reached with fewer than two operands, or no value was produced."""


class MalformedLiteralError(EvalError):
    """A number span does not parse as a decimal number."""


class MalformedExpressionError(EvalError):
    """More than one value remained after evaluation."""
