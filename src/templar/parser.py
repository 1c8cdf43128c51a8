"""Single-pass tree builder producing a typed, immutable AST.

Consumes the token stream from the Lexer and builds a Root of frozen
dataclass nodes. There is no backtracking and no recovery: the first
structural problem raises ParseError and no partial tree is returned.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token stream traversal
- `AttributeParsingMixin`: Attribute lists of opening tags
- `ContainerStack`: Open elements, frozen into nodes when they close

Thread Safety:
- Parser instances are single-use; all state is instance-local
- Configuration is read from ContextVar (thread-local)
- The resulting AST is immutable and safe to share across threads

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from templar.config import get_parse_config
from templar.errors import TemplateSyntaxError
from templar.location import Span
from templar.nodes import Expression, Root, Text
from templar.parsing import (
    AttributeParsingMixin,
    ContainerStack,
    ElementFrame,
    TokenNavigationMixin,
)
from templar.tokens import Token, TokenType
from templar.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    TokenNavigationMixin,
    AttributeParsingMixin,
):
    """Tree builder over a Templar token stream.

    Usage:
            >>> from templar.lexer import tokenize
            >>> root = Parser(tokenize(["<div>Hello</div>"])).parse()
            >>> root.children[0].name
        'div'

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. The resulting AST is immutable and thread-safe.

    """

    __slots__ = (
        "_tokens",
        "_tokens_len",
        "_pos",
        "_current",
        "_void_names",
        "_source_name",
        "_length",
        "_containers",
    )

    def __init__(
        self,
        tokens: Sequence[Token],
        void_names: Iterable[str] | None = None,
        *,
        source_name: str | None = None,
        length: int | None = None,
    ) -> None:
        """Initialize parser with a token stream.

        Args:
            tokens: Tokens produced by the lexer
            void_names: Void tags; defaults to the active ParseConfig
            source_name: Template name for error messages; defaults to the
                active ParseConfig
            length: Length of the concatenated chunks, used for the Root span;
                defaults to the end of the last token
        """
        config = get_parse_config()
        self._tokens = tokens
        self._tokens_len = len(tokens)
        self._pos = 0
        self._current: Token | None = tokens[0] if tokens else None
        self._void_names = (
            config.void_elements if void_names is None else frozenset(void_names)
        )
        self._source_name = config.source_name if source_name is None else source_name
        self._length = length
        self._containers = ContainerStack()

    def parse(self) -> Root:
        """Parse the token stream into a Root.

        Returns:
            Immutable Root node

        Raises:
            ParseError: On mismatched or unclosed tags, invalid attributes or
                any other structural problem.
        """
        try:
            while not self._at_end():
                self._parse_content()

            frame = self._containers.current
            if frame is not None:
                raise self._error(f"Unclosed tag <{frame.name}>", frame.open.start)
        except TemplateSyntaxError as exc:
            logger.debug("Parse failed: %s", exc)
            raise

        length = self._length if self._length is not None else self._end_offset()
        root = self._containers.finish(Span(0, length))
        logger.debug(
            "Parsed %d token(s) into %d top-level node(s)",
            self._tokens_len,
            len(root.children),
        )
        return root

    def _parse_content(self) -> None:
        """Dispatch on the token at content level."""
        token = self._current
        assert token is not None

        match token.type:
            case TokenType.TEXT:
                self._parse_text(token)
            case TokenType.EXPRESSION:
                self._containers.append(Expression(span=token.span, index=token.index))
                self._advance()
            case TokenType.OPEN_ANGLE:
                self._parse_tag(token)
            case _:
                raise self._error(f"Unexpected {token.type.name} token", token.start)

    def _parse_text(self, token: Token) -> None:
        """Append text, dropping whitespace-only runs that border a tag."""
        value = token.text
        if not value.strip() and (
            self._peek_type(-1) is TokenType.CLOSE_ANGLE
            or self._peek_type(1) is TokenType.OPEN_ANGLE
        ):
            self._advance()
            return
        self._containers.append(Text(span=token.span, value=value))
        self._advance()

    def _parse_tag(self, open_token: Token) -> None:
        """Parse a tag starting at ``<``."""
        token = self._advance()
        if token is None:
            raise self._error("Unexpected end of template after '<'", open_token.start)
        if token.type is TokenType.SLASH:
            self._parse_closing_tag(open_token)
        elif token.type is TokenType.IDENTIFIER:
            self._parse_opening_tag(open_token, token)
        else:
            raise self._error(
                f"Expected identifier after '<', got {token.type.name}",
                token.start,
            )

    def _parse_closing_tag(self, open_token: Token) -> None:
        """Parse ``</name>`` and close the innermost open element."""
        name_token = self._advance()
        frame = self._containers.current

        if name_token is None or name_token.type is not TokenType.IDENTIFIER:
            offset = name_token.start if name_token is not None else self._end_offset()
            raise self._error("Mismatched closing tag: expected a tag name after '</'", offset)
        name = name_token.text
        if frame is None:
            raise self._error(
                f"Mismatched closing tag </{name}>: no element is open",
                open_token.start,
            )
        if frame.name != name:
            raise self._error(
                f"Mismatched closing tag </{name}>, expected </{frame.name}>",
                open_token.start,
            )

        close = self._advance()
        if close is None or close.type is not TokenType.CLOSE_ANGLE:
            offset = close.start if close is not None else self._end_offset()
            raise self._error(f"Expected '>' to end closing tag </{name}>", offset)

        self._containers.pop()
        self._containers.append(
            frame.freeze(
                end_tag=Span(open_token.start, close.end),
                discard_children=name in self._void_names,
            )
        )
        self._advance()

    def _parse_opening_tag(self, open_token: Token, name_token: Token) -> None:
        """Parse ``<name props...>`` or ``<name props... />``."""
        name = name_token.text
        self._advance()
        props = self._parse_props(name)

        end = self._current
        assert end is not None
        if end.type is TokenType.SLASH:
            close = self._advance()
            if close is None or close.type is not TokenType.CLOSE_ANGLE:
                offset = close.start if close is not None else self._end_offset()
                raise self._error(f"Expected '>' after '/' in <{name}>", offset)
            frame = ElementFrame(open=open_token, name_token=name_token, props=props, close=close)
            self._containers.append(frame.freeze(slash=end))
        else:
            frame = ElementFrame(open=open_token, name_token=name_token, props=props, close=end)
            self._containers.push(frame)
        self._advance()


def parse(
    tokens: Sequence[Token],
    void_names: Iterable[str] | None = None,
    *,
    source_name: str | None = None,
    length: int | None = None,
) -> Root:
    """Build the AST for a token stream.

    Args:
        tokens: Tokens produced by ``tokenize``
        void_names: Void tags; defaults to the active ParseConfig
        source_name: Template name for error messages
        length: Length of the concatenated chunks (Root span end)

    Returns:
        Immutable Root node

    Raises:
        ParseError: On any structural problem.
    """
    return Parser(tokens, void_names, source_name=source_name, length=length).parse()
