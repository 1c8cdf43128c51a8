"""Exception classes for Templar.

Every failure is fatal to the current parse: there is no recovery mode and no
partial tree. Callers treat any TemplateSyntaxError as "this template is
invalid" and surface the message to the end user.
"""

from __future__ import annotations


class TemplarError(Exception):
    """Base exception for all Templar errors.

    Subclass this for specific error categories.
    """

    pass


class TemplateSyntaxError(TemplarError):
    """Malformed template input.

    Raised when the lexer or parser encounters invalid or unexpected input.
    """

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        source_name: str | None = None,
    ) -> None:
        """Initialize syntax error with optional location.

        Args:
            message: Error description
            offset: Offset into the concatenated chunks where the error occurred
            source_name: Name of the template (optional, for messages)
        """
        self.message = message
        self.offset = offset
        self.source_name = source_name

        location = ""
        if source_name:
            location = f"{source_name}:"
        if offset is not None:
            location += f"{offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class LexError(TemplateSyntaxError):
    """Unrecognized character while scanning inside a tag."""

    def __init__(
        self,
        char: str,
        offset: int | None = None,
        source_name: str | None = None,
    ) -> None:
        """Initialize lexical error.

        Args:
            char: The offending character
            offset: Offset of the character
            source_name: Name of the template (optional)
        """
        self.char = char
        super().__init__(f"Unexpected character {char!r} in tag", offset, source_name)


class ParseError(TemplateSyntaxError):
    """Structural error while building the tree.

    Raised for mismatched or unmatched closing tags, a ``<`` not followed by
    a tag name, a spread without an expression, invalid attributes and
    unclosed tags.
    """

    pass
