"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from infixcalc import evaluate_line
from infixcalc.lexer import tokenize
from infixcalc.postfix import to_postfix
from infixcalc.tokens import Token


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


@pytest.fixture
def postfix_of():
    """Return a helper that renders the postfix order of source as its token texts."""

    def _postfix(source: str) -> list[str]:
        return [t.text(source) for t in to_postfix(tokenize(source), source)]

    return _postfix


@pytest.fixture
def calc():
    """Return the full pipeline."""
    return evaluate_line
