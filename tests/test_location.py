"""Tests for Span and Token."""

import pytest

from templar.location import Span
from templar.tokens import Token, TokenType


class TestSpan:
    def test_length(self) -> None:
        assert len(Span(2, 7)) == 5

    def test_contains(self) -> None:
        span = Span(2, 4)
        assert 2 in span
        assert 3 in span
        assert 4 not in span
        assert "2" not in span

    def test_zero_width_contains_own_offset(self) -> None:
        assert 3 in Span(3, 3)
        assert 4 not in Span(3, 3)

    def test_span_to(self) -> None:
        assert Span(0, 2).span_to(Span(5, 9)) == Span(0, 9)

    @pytest.mark.parametrize(("start", "end"), [(-1, 0), (3, 2)])
    def test_invalid(self, start: int, end: int) -> None:
        with pytest.raises(ValueError):
            Span(start, end)

    def test_str(self) -> None:
        assert str(Span(1, 4)) == "1-4"


class TestToken:
    def test_span(self) -> None:
        assert Token(TokenType.IDENTIFIER, "div", 1, 4).span == Span(1, 4)

    def test_text(self) -> None:
        assert Token(TokenType.TEXT, "hi", 0, 2).text == "hi"
        with pytest.raises(TypeError, match="carries no text"):
            _ = Token(TokenType.SLASH, None, 0, 1).text

    def test_index(self) -> None:
        assert Token(TokenType.EXPRESSION, 3, 5, 5).index == 3
        with pytest.raises(TypeError, match="carries no hole index"):
            _ = Token(TokenType.TEXT, "x", 0, 1).index

    def test_repr(self) -> None:
        assert repr(Token(TokenType.SLASH, None, 4, 5)) == "Token(SLASH, 4:5)"
        assert repr(Token(TokenType.EXPRESSION, 0, 3, 3)) == "Token(EXPRESSION, 0, 3:3)"
        long = Token(TokenType.TEXT, "x" * 30, 0, 30)
        assert repr(long) == f"Token(TEXT, {'x' * 17 + '...'!r}, 0:30)"
