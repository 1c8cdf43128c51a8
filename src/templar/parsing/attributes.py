"""Attribute list parsing for opening tags.

Attribute values reconcile to the smallest property shape that holds them:

    <x a>           BooleanProp
    <x a="">        StaticProp("")
    <x a="lit">     StaticProp("lit")
    <x a=${0}>      ExpressionProp(0), unquoted
    <x a="${0}">    ExpressionProp(0), quoted
    <x a="b ${0}">  MixedProp(("b ", 0))
    <x ...${0}>     SpreadProp(0)

Unquoted values support only a single bare hole.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from templar.nodes import (
    BooleanProp,
    ExpressionProp,
    MixedProp,
    Prop,
    SpreadProp,
    StaticProp,
)
from templar.tokens import Token, TokenType

if TYPE_CHECKING:
    from templar.errors import ParseError


class AttributeParsingMixin:
    """Mixin parsing the attribute list of an opening tag.

    Required Host Attributes:
        - _current: Token | None
        - TokenNavigationMixin methods

    """

    _current: Token | None

    def _advance(self) -> Token | None:
        raise NotImplementedError

    def _error(self, message: str, offset: int | None) -> ParseError:
        raise NotImplementedError

    def _expect_current(self, context: str) -> Token:
        raise NotImplementedError

    def _parse_props(self, tag_name: str) -> tuple[Prop, ...]:
        """Parse properties up to (not including) the ``/`` or ``>`` ending the tag.

        Raises:
            ParseError: On an invalid attribute or end of stream.
        """
        props: list[Prop] = []
        while True:
            token = self._expect_current(f"inside <{tag_name}>")
            token_type = token.type
            if token_type is TokenType.SLASH or token_type is TokenType.CLOSE_ANGLE:
                return tuple(props)
            if token_type is TokenType.SPREAD:
                props.append(self._parse_spread(token))
            elif token_type is TokenType.IDENTIFIER:
                props.append(self._parse_named_prop(token, tag_name))
            else:
                raise self._error(
                    f"Invalid attribute in <{tag_name}>: unexpected {token_type.name}",
                    token.start,
                )

    def _parse_spread(self, spread: Token) -> SpreadProp:
        expression = self._advance()
        if expression is None or expression.type is not TokenType.EXPRESSION:
            raise self._error(
                "Spread operator must be followed by an expression",
                spread.start,
            )
        self._advance()
        return SpreadProp(
            index=expression.index,
            spread_token=spread,
            expression_token=expression,
        )

    def _parse_named_prop(self, name_token: Token, tag_name: str) -> Prop:
        name = name_token.text
        equals = self._advance()
        if equals is None or equals.type is not TokenType.EQUALS:
            return BooleanProp(name=name, name_token=name_token)

        self._advance()
        value = self._expect_current(f"in value of attribute '{name}' of <{tag_name}>")
        if value.type is TokenType.EXPRESSION:
            self._advance()
            return ExpressionProp(
                name=name,
                index=value.index,
                quote="",
                name_token=name_token,
                equals_token=equals,
                expression_token=value,
            )
        if value.type is TokenType.QUOTE:
            return self._parse_quoted_value(name_token, equals, value)

        raise self._error(
            f"Invalid value for attribute '{name}': expected a quoted string or an expression",
            value.start,
        )

    def _parse_quoted_value(self, name_token: Token, equals: Token, open_quote: Token) -> Prop:
        """Collect parts up to the closing quote and pick the property shape."""
        name = name_token.text
        parts: list[str | int] = []
        value_tokens: list[Token] = []

        token = self._advance()
        while token is not None and token.type is not TokenType.QUOTE:
            if token.type is TokenType.ATTRIBUTE_VALUE:
                if token.text:
                    parts.append(token.text)
            elif token.type is TokenType.EXPRESSION:
                parts.append(token.index)
            else:
                raise self._error(
                    f"Unexpected {token.type.name} in value of attribute '{name}'",
                    token.start,
                )
            value_tokens.append(token)
            token = self._advance()

        if token is None:
            raise self._error(f"Unterminated value for attribute '{name}'", open_quote.start)
        close_quote = token
        self._advance()

        quote = open_quote.text
        if len(parts) == 1 and isinstance(parts[0], int):
            expression = next(t for t in value_tokens if t.type is TokenType.EXPRESSION)
            return ExpressionProp(
                name=name,
                index=parts[0],
                quote=quote,  # type: ignore[arg-type]
                name_token=name_token,
                equals_token=equals,
                expression_token=expression,
                open_quote=open_quote,
                close_quote=close_quote,
            )
        if len(parts) <= 1:
            return StaticProp(
                name=name,
                value=parts[0] if parts else "",  # type: ignore[arg-type]
                quote=quote,  # type: ignore[arg-type]
                name_token=name_token,
                equals_token=equals,
                open_quote=open_quote,
                close_quote=close_quote,
                value_tokens=tuple(value_tokens),
            )
        return MixedProp(
            name=name,
            parts=tuple(parts),
            quote=quote,  # type: ignore[arg-type]
            name_token=name_token,
            equals_token=equals,
            open_quote=open_quote,
            close_quote=close_quote,
            value_tokens=tuple(value_tokens),
        )
