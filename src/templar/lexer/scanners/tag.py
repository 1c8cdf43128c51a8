"""TAG mode scanner mixin."""

from __future__ import annotations

from collections.abc import Set

from templar.errors import LexError
from templar.lexer.modes import (
    IDENTIFIER_CHARS,
    IDENTIFIER_START,
    QUOTES,
    SPREAD,
    WHITESPACE,
    LexerMode,
)
from templar.tokens import TokenType


class TagScannerMixin:
    """Mixin providing TAG mode scanning logic.

    Scans one lexical unit per call: whitespace is skipped, punctuation and
    identifiers become tokens, quotes switch to ATTRIBUTE_VALUE and ``>``
    returns to TEXT (or RAW_TEXT for a raw-text element's opening tag).

    """

    # These will be set by the ChunkScanner class
    _chunk: str
    _chunk_len: int
    _pos: int
    _base: int
    _mode: LexerMode
    _quote: str
    _tag_name: str
    _closing_tag: bool
    _last_type: TokenType | None
    _raw_text_names: Set[str]
    _source_name: str | None

    def _emit(
        self,
        token_type: TokenType,
        value: str | int | None,
        start: int,
        end: int,
    ) -> None:
        """Append a token. Implemented by ChunkScanner."""
        raise NotImplementedError

    def _scan_tag(self) -> None:
        """Scan the next unit inside a tag.

        Raises:
            LexError: On a character that cannot appear inside a tag.
        """
        chunk = self._chunk
        pos = self._pos
        char = chunk[pos]

        if char in WHITESPACE:
            self._pos = pos + 1
        elif char == ">":
            self._end_tag(pos)
        elif char == "=":
            self._emit(TokenType.EQUALS, None, pos, pos + 1)
            self._pos = pos + 1
        elif char == "/":
            if not self._tag_name:
                self._closing_tag = True
            self._emit(TokenType.SLASH, None, pos, pos + 1)
            self._pos = pos + 1
        elif char in QUOTES:
            self._emit(TokenType.QUOTE, char, pos, pos + 1)
            self._quote = char
            self._mode = LexerMode.ATTRIBUTE_VALUE
            self._pos = pos + 1
        elif char in IDENTIFIER_START:
            end = pos + 1
            while end < self._chunk_len and chunk[end] in IDENTIFIER_CHARS:
                end += 1
            name = chunk[pos:end]
            if not self._tag_name:
                self._tag_name = name
            self._emit(TokenType.IDENTIFIER, name, pos, end)
            self._pos = end
        elif chunk.startswith(SPREAD, pos):
            self._emit(TokenType.SPREAD, None, pos, pos + len(SPREAD))
            self._pos = pos + len(SPREAD)
        else:
            raise LexError(char, self._base + pos, self._source_name)

    def _end_tag(self, pos: int) -> None:
        """Handle ``>``: leave the tag, entering RAW_TEXT when required.

        Only the opening tag of a registered raw-text element switches to
        RAW_TEXT; its closing tag and self-closing form do not.
        """
        enters_raw_text = (
            self._tag_name in self._raw_text_names
            and not self._closing_tag
            and self._last_type is not TokenType.SLASH
        )
        self._emit(TokenType.CLOSE_ANGLE, None, pos, pos + 1)
        self._pos = pos + 1
        self._closing_tag = False
        if enters_raw_text:
            self._mode = LexerMode.RAW_TEXT
        else:
            self._mode = LexerMode.TEXT
            self._tag_name = ""
