"""Token navigation utilities for the Templar parser.

Provides mixin for token stream navigation and basic parsing operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from templar.errors import ParseError
from templar.tokens import Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Sequence


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _tokens_len: int (cached len(_tokens) for hot loops)
        - _pos: int
        - _current: Token | None
        - _source_name: str | None

    """

    _tokens: Sequence[Token]
    _tokens_len: int
    _pos: int
    _current: Token | None
    _source_name: str | None

    def _at_end(self) -> bool:
        """Check if at end of token stream."""
        return self._current is None

    def _advance(self) -> Token | None:
        """Advance to next token and return it."""
        self._pos += 1
        if self._pos < self._tokens_len:
            self._current = self._tokens[self._pos]
        else:
            self._current = None
        return self._current

    def _peek(self, offset: int = 1) -> Token | None:
        """Peek at token at offset from current position (negative looks back)."""
        pos = self._pos + offset
        if 0 <= pos < self._tokens_len:
            return self._tokens[pos]
        return None

    def _peek_type(self, offset: int = 1) -> TokenType | None:
        token = self._peek(offset)
        return token.type if token is not None else None

    def _end_offset(self) -> int:
        """Offset just past the last token, for end-of-stream errors."""
        if self._tokens_len:
            return self._tokens[-1].end
        return 0

    def _error(self, message: str, offset: int | None) -> ParseError:
        return ParseError(message, offset, self._source_name)

    def _expect_current(self, context: str) -> Token:
        """Return the current token, or fail if the stream has ended."""
        token = self._current
        if token is None:
            raise self._error(f"Unexpected end of template {context}", self._end_offset())
        return token
