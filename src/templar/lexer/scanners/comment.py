"""COMMENT mode scanner mixin."""

from __future__ import annotations

from templar.lexer.modes import COMMENT_CLOSE, LexerMode


class CommentScannerMixin:
    """Mixin providing comment skipping. Comment content is never tokenized."""

    # These will be set by the ChunkScanner class
    _chunk: str
    _chunk_len: int
    _pos: int
    _mode: LexerMode

    def _scan_comment(self) -> None:
        end = self._chunk.find(COMMENT_CLOSE, self._pos)
        if end == -1:
            self._pos = self._chunk_len
            return
        self._mode = LexerMode.TEXT
        self._pos = end + len(COMMENT_CLOSE)
