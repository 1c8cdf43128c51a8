"""Chunk-aware state-machine lexer for Templar.

Turns the literal chunks of a template into a flat, offset-annotated token
stream, emitting an EXPRESSION token at every hole between chunks.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode, LexerState, tokenize
├── core.py              # ChunkScanner (mixin composition), Lexer, tokenize
├── modes.py             # LexerMode enum, character classes
├── state.py             # LexerState carried across chunk boundaries
└── scanners/            # Mode-specific scanners
    ├── text.py          # TEXT mode
    ├── tag.py           # TAG mode
    ├── attribute.py     # ATTRIBUTE_VALUE mode
    ├── raw_text.py      # RAW_TEXT mode
    └── comment.py       # COMMENT mode

Usage:
    >>> from templar.lexer import tokenize
    >>> for token in tokenize(["<b>", "</b>"]):
    ...     print(token)
Token(OPEN_ANGLE, 0:1)
Token(IDENTIFIER, 'b', 1:2)
Token(CLOSE_ANGLE, 2:3)
Token(EXPRESSION, 0, 3:3)
Token(OPEN_ANGLE, 3:4)
Token(SLASH, 4:5)
Token(IDENTIFIER, 'b', 5:6)
Token(CLOSE_ANGLE, 6:7)

"""

from templar.lexer.core import ChunkScanner, Lexer, as_chunks, scan_chunk, tokenize
from templar.lexer.modes import LexerMode
from templar.lexer.state import LexerState

__all__ = [
    "ChunkScanner",
    "Lexer",
    "LexerMode",
    "LexerState",
    "as_chunks",
    "scan_chunk",
    "tokenize",
]
