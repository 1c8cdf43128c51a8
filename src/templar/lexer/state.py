"""Resumable lexer state threaded between template chunks.

A template is split into literal chunks at every hole. Scanning a chunk is a
pure function of the chunk and the LexerState left by the previous one, so
a partial quote, raw-text body or comment carries across the hole explicitly
instead of living in a closure or on a shared object.

Thread Safety:
LexerState is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, replace

from templar.lexer.modes import LexerMode
from templar.tokens import TokenType


@dataclass(frozen=True, slots=True)
class LexerState:
    """Lexer state at a chunk boundary.

    Attributes:
        mode: Current lexer mode
        offset: Global offset where the next chunk starts
        quote: Pending quote character while in ATTRIBUTE_VALUE
        tag_name: First identifier of the current tag; while in RAW_TEXT,
            the element whose close tag ends the body
        closing_tag: Current tag started with ``</``
        last_type: Type of the last token emitted, if any

    """

    mode: LexerMode = LexerMode.TEXT
    offset: int = 0
    quote: str = ""
    tag_name: str = ""
    closing_tag: bool = False
    last_type: TokenType | None = None

    @property
    def in_comment(self) -> bool:
        return self.mode is LexerMode.COMMENT

    def after_hole(self) -> LexerState:
        """State after an EXPRESSION token is emitted at this boundary."""
        return replace(self, last_type=TokenType.EXPRESSION)
