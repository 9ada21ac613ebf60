"""Infix arithmetic expression evaluator."""

from __future__ import annotations

__version__ = "0.1.0"


def evaluate_line(text: str) -> float:
    """Tokenize, convert to postfix, and evaluate one line of input.

    Raises a ``PipelineError`` subclass on failure.
    """
    from infixcalc.evaluator import evaluate
    from infixcalc.lexer import tokenize
    from infixcalc.postfix import to_postfix

    tokens = tokenize(text)
    postfix = to_postfix(tokens, text)
    return evaluate(text, postfix)
