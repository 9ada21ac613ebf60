"""Postfix evaluator: reduces a postfix token sequence to a single float."""

from __future__ import annotations

import math

from infixcalc.errors import MalformedExpressionError, MalformedLiteralError, StackUnderflowError
from infixcalc.tokens import SEPARATOR, Operator, Span, Token, TokenKind

# ----------------------------------------------------------------------
# IEEE-754 arithmetic
#
# Python raises where hardware floats return inf/nan; these helpers return
# the hardware result instead so evaluation never fails on well-formed input.
# ----------------------------------------------------------------------


def ieee_div(lhs: float, rhs: float) -> float:
    if rhs == 0.0:
        if lhs == 0.0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


def ieee_mod(lhs: float, rhs: float) -> float:
    """Truncated remainder; the result takes the sign of *lhs*."""
    if rhs == 0.0 or math.isinf(lhs) or math.isnan(lhs) or math.isnan(rhs):
        return math.nan
    return math.fmod(lhs, rhs)


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and int(x) % 2 == 1


def ieee_pow(lhs: float, rhs: float) -> float:
    try:
        return math.pow(lhs, rhs)
    except ValueError:
        if lhs == 0.0:
            return _pow_pole(lhs, rhs)
        # Negative base, non-integral exponent
        return math.nan
    except OverflowError:
        if lhs < 0.0 and _is_odd_integer(rhs):
            return -math.inf
        return math.inf


def _pow_pole(lhs: float, rhs: float) -> float:
    if math.copysign(1.0, lhs) < 0.0 and _is_odd_integer(rhs):
        return -math.inf
    return math.inf


_APPLY = {
    Operator.ADD: lambda a, b: a + b,
    Operator.SUB: lambda a, b: a - b,
    Operator.MUL: lambda a, b: a * b,
    Operator.DIV: ieee_div,
    Operator.POW: ieee_pow,
    Operator.MOD: ieee_mod,
}


# ----------------------------------------------------------------------
# Evaluation
# ----------------------------------------------------------------------


def parse_literal(source: str, tok: Token) -> float:
    """Slice a NUMBER token's text, drop separators, and parse it as a float."""
    text = tok.text(source).replace(SEPARATOR, "")
    try:
        return float(text)
    except ValueError:
        raise MalformedLiteralError(
            f"malformed number literal {tok.text(source)!r}", tok.span, source
        ) from None


def evaluate(source: str, postfix: list[Token]) -> float:
    """Evaluate *postfix* against the *source* text its spans point into."""
    # Each entry is (value, span of the sub-expression that produced it)
    stack: list[tuple[float, Span]] = []

    for tok in postfix:
        if tok.kind == TokenKind.NUMBER:
            stack.append((parse_literal(source, tok), tok.span))
            continue

        if tok.kind != TokenKind.OPERATOR or tok.op is None:
            raise MalformedExpressionError("parenthesis in postfix sequence", tok.span, source)

        if len(stack) < 2:
            raise StackUnderflowError(
                f"operator '{tok.op.value}' is missing an operand", tok.span, source
            )
        rhs, rhs_span = stack.pop()
        lhs, lhs_span = stack.pop()
        stack.append((_APPLY[tok.op](lhs, rhs), Span(lhs_span.start, rhs_span.end)))

    if not stack:
        raise StackUnderflowError("empty expression", Span(0, 0), source)
    if len(stack) > 1:
        _, extra_span = stack[1]
        raise MalformedExpressionError(
            "expected an operator between values", extra_span, source
        )
    return stack[0][0]
