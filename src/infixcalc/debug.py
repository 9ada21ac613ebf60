"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from infixcalc.tokens import Token, TokenKind


def dump_tokens(
    label: str, tokens: list[Token], source: str, *, file: TextIO | None = None
) -> None:
    """Print one line per token (kind, span, source text) under *label*."""
    f = file if file is not None else sys.stderr
    f.write(f"{label}\n")
    for tok in tokens:
        f.write(f"  {_describe(tok)} {tok.start}..{tok.end} {tok.text(source)!r}\n")


def _describe(tok: Token) -> str:
    if tok.kind == TokenKind.OPERATOR and tok.op is not None:
        return f"Operator({tok.op.name.title()})"
    if tok.kind == TokenKind.NUMBER:
        return "Number"
    if tok.kind == TokenKind.OPEN_PAREN:
        return "OpenParen"
    return "CloseParen"
