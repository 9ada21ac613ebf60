"""Lexer: converts one line of text into a flat token sequence."""

from __future__ import annotations

from dataclasses import replace

from infixcalc.errors import LexError
from infixcalc.tokens import Token, TokenKind, is_digit_char, operator_for


class Lexer:
    """Single left-to-right pass over the source.

    The token list is append-only, except that the last ``NUMBER`` token may
    have its ``end`` extended while a digit run continues.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        for pos, ch in enumerate(self._source):
            self._lex_char(pos, ch)
        return self._tokens

    def _last(self) -> Token | None:
        return self._tokens[-1] if self._tokens else None

    def _emit(self, kind: TokenKind, pos: int, **kwargs) -> None:
        self._tokens.append(Token(kind, pos, pos + 1, **kwargs))

    def _lex_char(self, pos: int, ch: str) -> None:
        if ch.isspace():
            return

        if ch == "(":
            self._emit(TokenKind.OPEN_PAREN, pos)
            return

        if ch == ")":
            self._emit(TokenKind.CLOSE_PAREN, pos)
            return

        # Binary minus only where a binary operator can stand, else a negative literal
        if ch == "-":
            last = self._last()
            if last is not None and last.kind in (TokenKind.NUMBER, TokenKind.CLOSE_PAREN):
                self._emit(TokenKind.OPERATOR, pos, op=operator_for(ch))
            else:
                self._emit(TokenKind.NUMBER, pos)
            return

        op = operator_for(ch)
        if op is not None:
            self._emit(TokenKind.OPERATOR, pos, op=op)
            return

        if is_digit_char(ch):
            self._lex_digit(pos)
            return

        raise LexError(pos, ch, self._source)

    def _lex_digit(self, pos: int) -> None:
        last = self._last()
        if last is not None and last.kind == TokenKind.NUMBER and last.end == pos:
            self._tokens[-1] = replace(last, end=pos + 1)
        else:
            self._emit(TokenKind.NUMBER, pos)


def tokenize(source: str) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source).tokenize()
