"""Container stack for the tree builder.

Open elements are mutable frames until their close tag arrives; they are
frozen into immutable Element nodes and appended to their parent on close.
Because nothing else is appended to a parent while one of its children is
open, appending on close keeps children in source order.

Usage:
    stack = ContainerStack()  # Initializes with the root frame
    stack.push(ElementFrame(open=lt, name_token=name, props=(), close=gt))
    frame = stack.pop()
    stack.append(frame.freeze(end_tag=span, discard_children=False))
"""

from __future__ import annotations

from dataclasses import dataclass, field

from templar.elements import is_component_name
from templar.location import Span
from templar.nodes import Child, Element, NodeKind, Prop, Root
from templar.tokens import Token


@dataclass(slots=True)
class ElementFrame:
    """An element whose opening tag has been read but which is not yet closed.

    Attributes:
        open: The ``<`` token
        name_token: The tag name token
        props: Parsed properties
        close: The ``>`` ending the opening tag
        children: Children accumulated so far

    """

    open: Token
    name_token: Token
    props: tuple[Prop, ...]
    close: Token
    children: list[Child] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.name_token.text

    def freeze(
        self,
        *,
        slash: Token | None = None,
        end_tag: Span | None = None,
        discard_children: bool = False,
    ) -> Element:
        """Build the immutable Element for this frame.

        Args:
            slash: The ``/`` of a self-closing tag
            end_tag: Span of the explicit closing tag
            discard_children: Drop accumulated children (void elements)
        """
        name = self.name
        end = end_tag.end if end_tag is not None else self.close.end
        return Element(
            span=Span(self.open.start, end),
            kind=NodeKind.COMPONENT if is_component_name(name) else NodeKind.ELEMENT,
            name=name,
            props=self.props,
            children=() if discard_children else tuple(self.children),
            open=self.open,
            name_token=self.name_token,
            close=self.close,
            slash=slash,
            end_tag=end_tag,
        )


class ContainerStack:
    """Stack of open containers, seeded with the root."""

    __slots__ = ("_root_children", "_frames")

    def __init__(self) -> None:
        self._root_children: list[Child] = []
        self._frames: list[ElementFrame] = []

    @property
    def depth(self) -> int:
        """Number of open containers, including the root."""
        return len(self._frames) + 1

    @property
    def current(self) -> ElementFrame | None:
        """Innermost open element, or None at root level."""
        return self._frames[-1] if self._frames else None

    def append(self, node: Child) -> None:
        """Append a child to the innermost open container."""
        if self._frames:
            self._frames[-1].children.append(node)
        else:
            self._root_children.append(node)

    def push(self, frame: ElementFrame) -> None:
        self._frames.append(frame)

    def pop(self) -> ElementFrame:
        if not self._frames:
            raise IndexError("Cannot pop the root container")
        return self._frames.pop()

    def finish(self, span: Span) -> Root:
        """Freeze the root. Only valid once every element is closed."""
        if self._frames:
            raise RuntimeError("Cannot finish with open elements")
        return Root(span=span, children=tuple(self._root_children))
