"""Lexer operating modes and character classes.

This module defines the finite state machine modes for the lexer and the
character sets used while scanning inside a tag.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer switches between modes based on context:
    - TEXT: Between tags, scanning for the next ``<``
    - TAG: Inside a tag, between ``<`` and ``>``
    - ATTRIBUTE_VALUE: Inside a quoted attribute value
    - RAW_TEXT: Inside a raw-text element body (script, style, textarea)
    - COMMENT: Inside ``<!-- ... -->``

    """

    TEXT = auto()
    TAG = auto()
    ATTRIBUTE_VALUE = auto()
    RAW_TEXT = auto()
    COMMENT = auto()


COMMENT_OPEN = "!--"  # follows "<"
COMMENT_CLOSE = "-->"
SPREAD = "..."
QUOTES = frozenset({'"', "'"})

# \t \n \v \f \r and space
WHITESPACE = frozenset(" \t\n\v\f\r")

_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

IDENTIFIER_START = frozenset(_LETTERS + "_$")
IDENTIFIER_CHARS = IDENTIFIER_START | frozenset("0123456789-.:")
