"""Parsing subsystem for the Templar tree builder.

Provides mixin classes and helpers for modular parsing functionality:
- `TokenNavigationMixin`: Token stream traversal
- `AttributeParsingMixin`: Attribute lists and value reconciliation
- `ContainerStack`: Open elements awaiting their close tag

Example:
    >>> from templar.parsing import AttributeParsingMixin, TokenNavigationMixin
    >>> class Parser(TokenNavigationMixin, AttributeParsingMixin):
    ...     pass

"""

from templar.parsing.attributes import AttributeParsingMixin
from templar.parsing.containers import ContainerStack, ElementFrame
from templar.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "AttributeParsingMixin",
    "ContainerStack",
    "ElementFrame",
    "TokenNavigationMixin",
]
