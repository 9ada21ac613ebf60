"""Token types, operator table, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    NUMBER = auto()  # maximal run of digits, "." and "_" (optionally led by "-")
    OPERATOR = auto()  # + - * / ^ %
    OPEN_PAREN = auto()  # (
    CLOSE_PAREN = auto()  # )


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"
    MOD = "%"

    @property
    def info(self) -> OperatorInfo:
        return OPERATOR_INFO[self]


class Assoc(Enum):
    LEFT = auto()
    RIGHT = auto()


@dataclass(frozen=True, slots=True)
class OperatorInfo:
    """Binding strength (higher binds tighter) and associativity of an operator."""

    precedence: int
    assoc: Assoc


OPERATOR_INFO: dict[Operator, OperatorInfo] = {
    Operator.POW: OperatorInfo(4, Assoc.RIGHT),
    Operator.MUL: OperatorInfo(3, Assoc.LEFT),
    Operator.DIV: OperatorInfo(3, Assoc.LEFT),
    Operator.MOD: OperatorInfo(3, Assoc.LEFT),
    Operator.ADD: OperatorInfo(2, Assoc.LEFT),
    Operator.SUB: OperatorInfo(2, Assoc.LEFT),
}


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open source range [start, end) of 0-based character offsets."""

    start: int
    end: int


@dataclass(frozen=True, slots=True)
class Token:
    """A lexer token. Literal text is recovered by slicing the source with the span."""

    kind: TokenKind
    start: int
    end: int
    op: Operator | None = None

    @property
    def span(self) -> Span:
        return Span(self.start, self.end)

    def text(self, source: str) -> str:
        return source[self.start : self.end]


# Digit-group separator, stripped before a literal is parsed
SEPARATOR = "_"

_SYMBOLS: dict[str, Operator] = {op.value: op for op in Operator}


def is_digit_char(ch: str) -> bool:
    """Return True if ch can be part of a number run."""
    return ch.isdigit() or ch == "." or ch == SEPARATOR


def operator_for(ch: str) -> Operator | None:
    """Return the operator spelled by ch, or None."""
    return _SYMBOLS.get(ch)
