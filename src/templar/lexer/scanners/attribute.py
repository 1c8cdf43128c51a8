"""ATTRIBUTE_VALUE mode scanner mixin."""

from __future__ import annotations

from templar.lexer.modes import LexerMode
from templar.tokens import TokenType


class AttributeScannerMixin:
    """Mixin providing quoted attribute value scanning logic.

    The value may span several chunks: each literal run becomes its own
    ATTRIBUTE_VALUE token and the holes between them become EXPRESSION
    tokens, so the parser sees the parts in source order.

    """

    # These will be set by the ChunkScanner class
    _chunk: str
    _chunk_len: int
    _pos: int
    _mode: LexerMode
    _quote: str

    def _emit(
        self,
        token_type: TokenType,
        value: str | int | None,
        start: int,
        end: int,
    ) -> None:
        """Append a token. Implemented by ChunkScanner."""
        raise NotImplementedError

    def _scan_attribute_value(self) -> None:
        """Scan up to the closing quote, or to the end of the chunk."""
        chunk = self._chunk
        pos = self._pos
        end_quote = chunk.find(self._quote, pos)

        if end_quote == -1:
            self._emit(TokenType.ATTRIBUTE_VALUE, chunk[pos:], pos, self._chunk_len)
            self._pos = self._chunk_len
            return

        if end_quote > pos:
            self._emit(TokenType.ATTRIBUTE_VALUE, chunk[pos:end_quote], pos, end_quote)
        self._emit(TokenType.QUOTE, self._quote, end_quote, end_quote + 1)
        self._quote = ""
        self._mode = LexerMode.TAG
        self._pos = end_quote + 1
