"""Test tokenization: kinds, spans, number runs, and context-sensitive minus."""

import pytest

from infixcalc.errors import LexError
from infixcalc.lexer import tokenize
from infixcalc.tokens import Operator, TokenKind

N = TokenKind.NUMBER
OP = TokenKind.OPERATOR


def kinds(tokens):
    return [t.kind for t in tokens]


def texts(tokens, source):
    return [t.text(source) for t in tokens]


class TestEmpty:
    def test_empty_input(self, lex):
        assert lex("") == []

    def test_whitespace_only(self, lex):
        assert lex("  \t\n") == []


class TestNumbers:
    def test_single_digit(self, lex):
        tokens = lex("7")
        assert kinds(tokens) == [N]
        assert (tokens[0].start, tokens[0].end) == (0, 1)

    def test_maximal_run(self, lex):
        source = "12345"
        tokens = lex(source)
        assert kinds(tokens) == [N]
        assert (tokens[0].start, tokens[0].end) == (0, 5)

    def test_decimal_point(self, lex):
        source = "3.14"
        assert texts(lex(source), source) == ["3.14"]

    def test_leading_point(self, lex):
        source = ".5"
        assert texts(lex(source), source) == [".5"]

    def test_separators_kept_in_span(self, lex):
        source = "1__000_000"
        tokens = lex(source)
        assert kinds(tokens) == [N]
        assert tokens[0].text(source) == "1__000_000"

    def test_whitespace_ends_run(self, lex):
        source = "1 2"
        tokens = lex(source)
        assert texts(tokens, source) == ["1", "2"]

    def test_operator_ends_run(self, lex):
        source = "12+34"
        tokens = lex(source)
        assert kinds(tokens) == [N, OP, N]
        assert texts(tokens, source) == ["12", "+", "34"]


class TestOperators:
    @pytest.mark.parametrize(
        "symbol,op",
        [
            ("+", Operator.ADD),
            ("*", Operator.MUL),
            ("/", Operator.DIV),
            ("^", Operator.POW),
            ("%", Operator.MOD),
        ],
    )
    def test_symbol(self, lex, symbol, op):
        tokens = lex(f"1{symbol}2")
        assert tokens[1].kind == OP
        assert tokens[1].op is op
        assert (tokens[1].start, tokens[1].end) == (1, 2)

    def test_parens(self, lex):
        tokens = lex("(1)")
        assert kinds(tokens) == [TokenKind.OPEN_PAREN, N, TokenKind.CLOSE_PAREN]

    def test_number_token_has_no_operator(self, lex):
        assert lex("1")[0].op is None


class TestMinus:
    def test_leading_minus_is_negative_literal(self, lex):
        source = "-3 + 4"
        tokens = lex(source)
        assert kinds(tokens) == [N, OP, N]
        assert tokens[0].text(source) == "-3"

    def test_after_number_is_subtract(self, lex):
        tokens = lex("4-3")
        assert tokens[1].kind == OP
        assert tokens[1].op is Operator.SUB

    def test_after_close_paren_is_subtract(self, lex):
        tokens = lex("(1) - 2")
        assert tokens[3].op is Operator.SUB

    def test_after_operator_is_negative_literal(self, lex):
        source = "4 - -3"
        tokens = lex(source)
        assert kinds(tokens) == [N, OP, N]
        assert tokens[2].text(source) == "-3"

    def test_after_open_paren_is_negative_literal(self, lex):
        source = "(-2)"
        tokens = lex(source)
        assert tokens[1].kind == N
        assert tokens[1].text(source) == "-2"

    def test_detached_minus_is_its_own_literal(self, lex):
        source = "- 3"
        assert texts(lex(source), source) == ["-", "3"]


class TestLexErrors:
    def test_letter(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("2 + a")
        err = exc_info.value
        assert err.position == 4
        assert err.character == "a"

    def test_first_bad_character_reported(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("1 $ #")
        assert exc_info.value.position == 2

    def test_span_covers_character(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("x")
        assert exc_info.value.span.start == 0
        assert exc_info.value.span.end == 1


class TestRoundTrip:
    @pytest.mark.parametrize("source", ["42", "3.25", "1_000.5", "-17", "0.001"])
    def test_number_text_relexes_to_same_value(self, source):
        from infixcalc.evaluator import parse_literal

        (tok,) = tokenize(source)
        text = tok.text(source)
        (again,) = tokenize(text)
        assert parse_literal(text, again) == parse_literal(source, tok)
