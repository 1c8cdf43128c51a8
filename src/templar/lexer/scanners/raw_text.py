"""RAW_TEXT mode scanner mixin."""

from __future__ import annotations

import re
from functools import lru_cache

from templar.lexer.modes import LexerMode
from templar.tokens import TokenType


@lru_cache(maxsize=64)
def close_tag_pattern(name: str) -> re.Pattern[str]:
    """Pattern for the close tag of ``name``, e.g. ``< / textarea >``.

    Case-sensitive; whitespace is allowed around the slash and the name.
    """
    return re.compile(rf"<\s*/\s*{re.escape(name)}\s*>")


class RawTextScannerMixin:
    """Mixin providing raw-text body scanning logic.

    Everything up to the matching close tag is TEXT, including angle
    brackets. The close tag itself is left for TEXT mode to tokenize.

    """

    # These will be set by the ChunkScanner class
    _chunk: str
    _chunk_len: int
    _pos: int
    _mode: LexerMode
    _tag_name: str

    def _emit(
        self,
        token_type: TokenType,
        value: str | int | None,
        start: int,
        end: int,
    ) -> None:
        """Append a token. Implemented by ChunkScanner."""
        raise NotImplementedError

    def _scan_raw_text(self) -> None:
        """Scan a raw-text body up to its close tag, or to the end of the chunk."""
        chunk = self._chunk
        pos = self._pos
        match = close_tag_pattern(self._tag_name).search(chunk, pos)

        if match is None:
            self._emit(TokenType.TEXT, chunk[pos:], pos, self._chunk_len)
            self._pos = self._chunk_len
            return

        close_start = match.start()
        if close_start > pos:
            self._emit(TokenType.TEXT, chunk[pos:close_start], pos, close_start)
        self._mode = LexerMode.TEXT
        self._tag_name = ""
        self._pos = close_start
