"""Conventional tag-name sets and the component naming rule.

The lexer and parser never hardcode these: callers pass their own sets, or
leave them to the active ParseConfig, which defaults to the values below.
"""

from __future__ import annotations

# Elements whose body is captured verbatim until the matching close tag
RAW_TEXT_ELEMENTS = frozenset({"script", "style", "textarea"})

# HTML void elements: never have children
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


def is_component_name(name: str) -> bool:
    """Whether a tag name denotes a component (first letter uppercase).

    Examples:
        >>> is_component_name("Counter")
        True
        >>> is_component_name("div")
        False
        >>> is_component_name("$Slot")
        False
    """
    return bool(name) and "A" <= name[0] <= "Z"


__all__ = [
    "RAW_TEXT_ELEMENTS",
    "VOID_ELEMENTS",
    "is_component_name",
]
