"""Tests for attribute parsing and value reconciliation."""

from __future__ import annotations

import pytest

from templar import parse_template
from templar.location import Span
from templar.nodes import (
    BooleanProp,
    ExpressionProp,
    MixedProp,
    Prop,
    PropKind,
    SpreadProp,
    StaticProp,
)
from templar.tokens import Token, TokenType


def props_of(*chunks: str) -> tuple[Prop, ...]:
    root = parse_template(list(chunks))
    element = root.children[0]
    return element.props  # type: ignore[union-attr]


class TestStaticProps:
    """Zero or one literal run."""

    @pytest.mark.parametrize("quote", ['"', "'"])
    def test_quoted_string(self, quote: str) -> None:
        (prop,) = props_of(f"<div id={quote}app{quote}></div>")
        assert isinstance(prop, StaticProp)
        assert prop.value == "app"
        assert prop.quote == quote
        assert prop.value_tokens == (Token(TokenType.ATTRIBUTE_VALUE, "app", 9, 12),)

    def test_empty_string(self) -> None:
        (prop,) = props_of('<div class=""></div>')
        assert isinstance(prop, StaticProp)
        assert prop.value == ""
        assert prop.value_tokens == ()

    def test_span_covers_name_to_closing_quote(self) -> None:
        (prop,) = props_of('<div id="app"></div>')
        assert prop.span == Span(5, 13)

    def test_url_value(self) -> None:
        url = "https://example.com/path?query=value&other=test#section"
        (prop,) = props_of(f'<a href="{url}"></a>')
        assert isinstance(prop, StaticProp)
        assert prop.value == url


class TestExpressionProps:
    """Exactly one hole and no literal text."""

    def test_unquoted(self) -> None:
        (prop,) = props_of("<div id=", "></div>")
        assert isinstance(prop, ExpressionProp)
        assert prop.quote == ""
        assert prop.close_quote is None
        assert prop.span == Span(5, 8)

    @pytest.mark.parametrize("quote", ['"', "'"])
    def test_quoted(self, quote: str) -> None:
        (prop,) = props_of(f"<div id={quote}", f"{quote}></div>")
        assert isinstance(prop, ExpressionProp)
        assert prop.index == 0
        assert prop.quote == quote
        assert prop.open_quote == Token(TokenType.QUOTE, quote, 8, 9)
        assert prop.close_quote == Token(TokenType.QUOTE, quote, 9, 10)
        assert prop.span == Span(5, 10)

    def test_hole_index_follows_chunk_position(self) -> None:
        props = props_of("<div a=", " b=", "></div>")
        assert [p.index for p in props if isinstance(p, ExpressionProp)] == [0, 1]


class TestMixedProps:
    """Two or more parts, in source order, never merged."""

    def test_literal_then_hole(self) -> None:
        (prop,) = props_of("<div class='btn ", "'></div>")
        assert isinstance(prop, MixedProp)
        assert prop.parts == ("btn ", 0)
        assert prop.quote == "'"

    def test_two_holes_with_whitespace(self) -> None:
        (prop,) = props_of('<div class="', "  ", '"></div>')
        assert isinstance(prop, MixedProp)
        assert prop.parts == (0, "  ", 1)

    def test_adjacent_holes(self) -> None:
        (prop,) = props_of('<div class="', "", '"></div>')
        assert isinstance(prop, MixedProp)
        assert prop.parts == (0, 1)

    def test_literal_on_both_sides(self) -> None:
        (prop,) = props_of('<div class="prefix-', '-suffix"></div>')
        assert isinstance(prop, MixedProp)
        assert prop.parts == ("prefix-", 0, "-suffix")

    def test_value_tokens_in_source_order(self) -> None:
        (prop,) = props_of('<div title="', " ", '"></div>')
        assert isinstance(prop, MixedProp)
        assert [t.type for t in prop.value_tokens] == [
            TokenType.EXPRESSION,
            TokenType.ATTRIBUTE_VALUE,
            TokenType.EXPRESSION,
        ]

    def test_single_part_is_rejected(self) -> None:
        token = Token(TokenType.QUOTE, '"', 0, 1)
        with pytest.raises(ValueError, match="at least two parts"):
            MixedProp(
                name="x",
                parts=("a",),
                quote='"',
                name_token=token,
                equals_token=token,
                open_quote=token,
                close_quote=token,
            )


class TestBooleanAndSpreadProps:
    """Valueless attributes and spreads."""

    def test_boolean_before_close(self) -> None:
        (prop,) = props_of("<button checked></button>")
        assert prop == BooleanProp(
            name="checked",
            name_token=Token(TokenType.IDENTIFIER, "checked", 8, 15),
        )

    def test_spread(self) -> None:
        (prop,) = props_of("<div ...", "></div>")
        assert prop == SpreadProp(
            index=0,
            spread_token=Token(TokenType.SPREAD, None, 5, 8),
            expression_token=Token(TokenType.EXPRESSION, 0, 8, 8),
        )
        assert prop.span == Span(5, 8)

    def test_multiple_spreads(self) -> None:
        props = props_of("<div ...", " ...", "></div>")
        assert [p.index for p in props if isinstance(p, SpreadProp)] == [0, 1]

    def test_mixed_kinds_in_source_order(self) -> None:
        props = props_of('<input type="text" value=', ' disabled ...', " />")
        assert [p.kind for p in props] == [
            PropKind.STATIC,
            PropKind.EXPRESSION,
            PropKind.BOOLEAN,
            PropKind.SPREAD,
        ]

    def test_spread_between_static_and_boolean(self) -> None:
        props = props_of('<div id="static" ...', " required></div>")
        assert [type(p).__name__ for p in props] == ["StaticProp", "SpreadProp", "BooleanProp"]
