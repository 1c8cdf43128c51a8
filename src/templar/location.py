"""Source span tracking for tokens, nodes and error messages.

Offsets index into the logical concatenation of every literal chunk of a
template. Holes occupy no characters, so an expression sits on a zero-width
span at the boundary between two chunks.

Thread Safety:
Span is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open ``[start, end)`` offset range.

    Examples:
        >>> Span(0, 5)
        Span(start=0, end=5)
        >>> Span(0, 5).span_to(Span(8, 9))
        Span(start=0, end=9)

    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError("Span start must be >= 0")
        if self.end < self.start:
            raise ValueError("Span end must be >= start")

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"

    def __len__(self) -> int:
        return self.end - self.start

    def __contains__(self, offset: object) -> bool:
        """Whether an offset falls inside the span.

        Zero-width spans contain their own position so that holes can be
        located by offset.
        """
        if not isinstance(offset, int):
            return False
        if self.start == self.end:
            return offset == self.start
        return self.start <= offset < self.end

    def span_to(self, end: Span) -> Span:
        """Create a new span from this span's start to ``end``'s end."""
        return Span(self.start, max(self.end, end.end))
