"""Typed AST nodes for Templar.

All AST nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Pattern matching: match statements work naturally

Node Shapes:
Node (base, carries a Span)
├── Root
├── Element (kind: ELEMENT or COMPONENT)
├── Text
└── Expression

Element vs. component is a naming convention, so it is a ``kind``
discriminant on one node shape rather than a subclass.

Properties form a closed union, each class tagged with a ``kind``:
BooleanProp | StaticProp | ExpressionProp | MixedProp | SpreadProp

Every node and property keeps the offsets (and, for tags and properties,
the tokens) it was built from, so tooling can map the tree back onto the
template source.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar, Literal, TypeAlias

from templar.location import Span
from templar.tokens import Token

Quote: TypeAlias = Literal['"', "'", ""]


class NodeKind(Enum):
    """Discriminant for AST nodes."""

    ROOT = auto()
    ELEMENT = auto()
    COMPONENT = auto()
    TEXT = auto()
    EXPRESSION = auto()


class PropKind(Enum):
    """Discriminant for element properties."""

    BOOLEAN = auto()
    STATIC = auto()
    EXPRESSION = auto()
    MIXED = auto()
    SPREAD = auto()


# =============================================================================
# Properties
# =============================================================================


@dataclass(frozen=True, slots=True)
class BooleanProp:
    """Attribute without a value.

    Markup: ``<input checked />``

    """

    kind: ClassVar[PropKind] = PropKind.BOOLEAN

    name: str
    name_token: Token

    @property
    def span(self) -> Span:
        return self.name_token.span


@dataclass(frozen=True, slots=True)
class StaticProp:
    """Attribute whose quoted value is a single literal run (possibly empty).

    Markup: ``<div id="app">`` or ``<div id="">``

    """

    kind: ClassVar[PropKind] = PropKind.STATIC

    name: str
    value: str
    quote: Quote
    name_token: Token
    equals_token: Token
    open_quote: Token
    close_quote: Token
    value_tokens: tuple[Token, ...] = ()

    @property
    def span(self) -> Span:
        return self.name_token.span.span_to(self.close_quote.span)


@dataclass(frozen=True, slots=True)
class ExpressionProp:
    """Attribute whose whole value is one hole.

    Markup: ``<div id=${x}>`` (unquoted, ``quote == ""``) or ``<div id="${x}">``

    """

    kind: ClassVar[PropKind] = PropKind.EXPRESSION

    name: str
    index: int
    quote: Quote
    name_token: Token
    equals_token: Token
    expression_token: Token
    open_quote: Token | None = None
    close_quote: Token | None = None

    @property
    def span(self) -> Span:
        end = self.close_quote if self.close_quote is not None else self.expression_token
        return self.name_token.span.span_to(end.span)


@dataclass(frozen=True, slots=True)
class MixedProp:
    """Quoted attribute value mixing literal runs and holes.

    Markup: ``<div class="btn ${theme}">`` gives ``parts == ("btn ", 0)``.
    Strings are literal runs; ints are hole indexes. Order is source order.

    """

    kind: ClassVar[PropKind] = PropKind.MIXED

    name: str
    parts: tuple[str | int, ...]
    quote: Quote
    name_token: Token
    equals_token: Token
    open_quote: Token
    close_quote: Token
    value_tokens: tuple[Token, ...] = ()

    def __post_init__(self) -> None:
        if len(self.parts) < 2:
            raise ValueError("MixedProp requires at least two parts")

    @property
    def span(self) -> Span:
        return self.name_token.span.span_to(self.close_quote.span)


@dataclass(frozen=True, slots=True)
class SpreadProp:
    """Whole attribute map supplied by a hole.

    Markup: ``<div ...${props}>``

    """

    kind: ClassVar[PropKind] = PropKind.SPREAD

    index: int
    spread_token: Token
    expression_token: Token

    @property
    def span(self) -> Span:
        return self.spread_token.span.span_to(self.expression_token.span)


# PEP 695 type alias for properties
Prop: TypeAlias = BooleanProp | StaticProp | ExpressionProp | MixedProp | SpreadProp


# =============================================================================
# Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes.

    All nodes track their offsets for error messages and tooling.

    """

    span: Span

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def end(self) -> int:
        return self.span.end


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal text content, whitespace preserved verbatim."""

    kind: ClassVar[NodeKind] = NodeKind.TEXT

    value: str


@dataclass(frozen=True, slots=True)
class Expression(Node):
    """A hole in content position. Zero-width at the chunk boundary."""

    kind: ClassVar[NodeKind] = NodeKind.EXPRESSION

    index: int


@dataclass(frozen=True, slots=True)
class Element(Node):
    """Element or component.

    Attributes:
        kind: NodeKind.ELEMENT or NodeKind.COMPONENT
        name: Tag name as written
        props: Properties in source order
        children: Child nodes (always empty for self-closing and void tags)
        open: The ``<`` token of the opening tag
        name_token: The tag name token
        close: The ``>`` token ending the opening tag
        slash: The ``/`` token of a self-closing tag
        end_tag: Span of the explicit closing tag, when there is one

    """

    kind: NodeKind
    name: str
    props: tuple[Prop, ...]
    children: tuple[Child, ...]
    open: Token
    name_token: Token
    close: Token
    slash: Token | None = None
    end_tag: Span | None = None

    def __post_init__(self) -> None:
        if self.kind not in (NodeKind.ELEMENT, NodeKind.COMPONENT):
            raise ValueError(f"Element kind must be ELEMENT or COMPONENT, got {self.kind.name}")

    @property
    def is_component(self) -> bool:
        return self.kind is NodeKind.COMPONENT

    @property
    def self_closing(self) -> bool:
        return self.slash is not None


@dataclass(frozen=True, slots=True)
class Root(Node):
    """Document root. Spans the whole concatenated template."""

    kind: ClassVar[NodeKind] = NodeKind.ROOT

    children: tuple[Child, ...]


# PEP 695 type alias for content nodes
Child: TypeAlias = Element | Text | Expression
