"""Token and TokenType definitions for the Templar lexer.

The lexer produces a flat stream of Token objects that the parser consumes.
Each Token has a type, a value and a ``[start, end)`` offset range into the
concatenation of all literal chunks.

Values by type:
- IDENTIFIER, ATTRIBUTE_VALUE, TEXT: the scanned text
- QUOTE: the quote character (``"`` or ``'``)
- EXPRESSION: the zero-based hole index
- everything else: None

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from templar.location import Span


class TokenType(Enum):
    """Token types produced by the lexer."""

    # Tag punctuation
    OPEN_ANGLE = auto()  # <
    CLOSE_ANGLE = auto()  # >
    SLASH = auto()  # /
    EQUALS = auto()  # =
    SPREAD = auto()  # ...
    QUOTE = auto()  # " or '

    # Tag content
    IDENTIFIER = auto()  # tag or attribute name
    ATTRIBUTE_VALUE = auto()  # literal text between quotes

    # Content
    TEXT = auto()
    EXPRESSION = auto()  # hole between two chunks


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Text, quote character or hole index; None for punctuation
        start: Start offset (inclusive)
        end: End offset (exclusive)

    """

    type: TokenType
    value: str | int | None
    start: int
    end: int

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.value is None:
            return f"Token({self.type.name}, {self.start}:{self.end})"
        val = self.value
        if isinstance(val, str) and len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.start}:{self.end})"

    @property
    def span(self) -> Span:
        """Offset range as a Span."""
        return Span(self.start, self.end)

    @property
    def text(self) -> str:
        """String value of a text-carrying token."""
        if not isinstance(self.value, str):
            raise TypeError(f"{self.type.name} token carries no text")
        return self.value

    @property
    def index(self) -> int:
        """Hole index of an EXPRESSION token."""
        if self.type is not TokenType.EXPRESSION or not isinstance(self.value, int):
            raise TypeError(f"{self.type.name} token carries no hole index")
        return self.value
