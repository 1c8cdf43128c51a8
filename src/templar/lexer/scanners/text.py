"""TEXT mode scanner mixin."""

from __future__ import annotations

from templar.lexer.modes import COMMENT_OPEN, LexerMode
from templar.tokens import TokenType


class TextScannerMixin:
    """Mixin providing TEXT mode scanning logic.

    Emits the literal run up to the next ``<`` as TEXT, then either opens a
    tag or skips into a comment.

    """

    # These will be set by the ChunkScanner class
    _chunk: str
    _chunk_len: int
    _pos: int
    _mode: LexerMode
    _tag_name: str
    _closing_tag: bool

    def _emit(
        self,
        token_type: TokenType,
        value: str | int | None,
        start: int,
        end: int,
    ) -> None:
        """Append a token. Implemented by ChunkScanner."""
        raise NotImplementedError

    def _scan_text(self) -> None:
        """Scan literal content up to the next tag or comment."""
        self._tag_name = ""
        self._closing_tag = False

        chunk = self._chunk
        pos = self._pos
        next_tag = chunk.find("<", pos)

        if next_tag == -1:
            self._emit(TokenType.TEXT, chunk[pos:], pos, self._chunk_len)
            self._pos = self._chunk_len
            return

        if next_tag > pos:
            self._emit(TokenType.TEXT, chunk[pos:next_tag], pos, next_tag)

        if chunk.startswith(COMMENT_OPEN, next_tag + 1):
            self._mode = LexerMode.COMMENT
            self._pos = next_tag + 1 + len(COMMENT_OPEN)
            return

        self._emit(TokenType.OPEN_ANGLE, None, next_tag, next_tag + 1)
        self._mode = LexerMode.TAG
        self._pos = next_tag + 1
