"""Shunting-yard conversion of an infix token sequence into postfix order."""

from __future__ import annotations

from infixcalc.errors import UnmatchedParenError
from infixcalc.tokens import Assoc, Operator, Token, TokenKind


def _should_pop(top: Token, o1: Operator) -> bool:
    """True when operator *top* on the stack must be output before *o1* is pushed."""
    if top.kind != TokenKind.OPERATOR or top.op is None:
        return False
    p1 = o1.info.precedence
    p2 = top.op.info.precedence
    return p2 > p1 or (p2 == p1 and o1.info.assoc == Assoc.LEFT)


def to_postfix(tokens: list[Token], source: str = "") -> list[Token]:
    """Reorder *tokens* into postfix, keeping each token's span.

    *source* is only used to give errors their context line.
    """
    stack: list[Token] = []
    output: list[Token] = []

    for tok in tokens:
        if tok.kind == TokenKind.NUMBER:
            output.append(tok)
        elif tok.kind == TokenKind.OPERATOR:
            assert tok.op is not None
            while stack and _should_pop(stack[-1], tok.op):
                output.append(stack.pop())
            stack.append(tok)
        elif tok.kind == TokenKind.OPEN_PAREN:
            stack.append(tok)
        elif tok.kind == TokenKind.CLOSE_PAREN:
            while stack and stack[-1].kind != TokenKind.OPEN_PAREN:
                output.append(stack.pop())
            if not stack:
                raise UnmatchedParenError("unmatched ')'", tok.span, source)
            stack.pop()

    while stack:
        top = stack.pop()
        if top.kind == TokenKind.OPEN_PAREN:
            raise UnmatchedParenError("unclosed '('", top.span, source)
        output.append(top)

    return output
