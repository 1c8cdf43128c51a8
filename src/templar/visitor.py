"""AST Visitor and Transformer for Templar.

Provides a base visitor class with match-based dispatch, a pre-order
``walk``, an immutable ``transform`` for rewriting frozen ASTs, and
``node_at`` for mapping a source offset back to a node.

Example: collect all components:

    class ComponentCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.names: list[str] = []

        def visit_component(self, node: Element) -> None:
            self.names.append(node.name)

    collector = ComponentCollector()
    collector.visit(root)

Example: drop every hole in content position:

    def drop_expressions(node: Node) -> Node | None:
        if isinstance(node, Expression):
            return None
        return node

    new_root = transform(root, drop_expressions)

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread. ``walk``, ``transform``
    and ``node_at`` are pure, safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from templar.nodes import Element, Expression, Node, NodeKind, Root, Text


T = TypeVar("T")


class BaseVisitor(Generic[T]):
    """Base AST visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors).

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method.

        Walks children automatically after the visit method returns.

        """
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method.

        Override this for catch-all behavior. Default returns None
        (suitable for ``BaseVisitor[None]``).

        """
        return None  # type: ignore[return-value]

    def visit_root(self, node: Root) -> T:
        return self.visit_default(node)

    def visit_element(self, node: Element) -> T:
        return self.visit_default(node)

    def visit_component(self, node: Element) -> T:
        return self.visit_default(node)

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_expression(self, node: Expression) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        """Match-based dispatch to visit_* methods."""
        match node:
            case Root():
                return self.visit_root(node)
            case Element(kind=NodeKind.COMPONENT):
                return self.visit_component(node)
            case Element():
                return self.visit_element(node)
            case Text():
                return self.visit_text(node)
            case Expression():
                return self.visit_expression(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        """Recursively visit child nodes."""
        match node:
            case Root(children=children) | Element(children=children):
                for child in children:
                    self.visit(child)
            case _:
                pass  # Leaf nodes: no children


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all of its descendants in pre-order (source order)."""
    stack: list[Node] = [node]
    while stack:
        current = stack.pop()
        yield current
        if isinstance(current, (Root, Element)):
            stack.extend(reversed(current.children))


def node_at(root: Root, offset: int) -> Node | None:
    """Return the deepest node whose span contains ``offset``.

    Zero-width Expression nodes are found at their own offset. The end
    offset of the template maps to the Root unless a hole sits there.
    Returns None when the offset lies outside the template.

    Example:
        >>> root = parse_template(["<p>Hi ", "</p>"])
        >>> node_at(root, 3)
        Text(span=Span(start=3, end=6), value='Hi ')
    """
    if not 0 <= offset <= root.end:
        return None

    found: Node = root
    children = root.children
    while True:
        for child in children:
            if offset in child.span:
                found = child
                break
        else:
            return found
        if not isinstance(found, Element):
            return found
        children = found.children


def transform(root: Root, fn: Callable[[Node], Node | None]) -> Root:
    """Apply a function to every node in the AST, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children. This ensures ``fn``
    always receives nodes with already-transformed children.

    Return ``None`` from ``fn`` to remove a node from the tree. The Root
    cannot be removed; returning None for it raises TypeError.

    Since all nodes are frozen dataclasses, this produces a new immutable tree.
    The original tree is untouched.

    Args:
        root: The tree to transform.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove the node from the tree.

    Returns:
        A new Root with the transformation applied.

    """
    result = _transform_node(root, fn)
    if result is None or not isinstance(result, Root):
        msg = "transform fn must return a Root for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Transform a single node bottom-up: children first, then self."""
    transformed = _transform_children(node, fn)
    return fn(transformed)


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node:
    """Produce a new node with children transformed; filter out None (removed) nodes."""
    match node:
        case Root(children=children) | Element(children=children):
            new_children = tuple(
                result for c in children
                if (result := _transform_node(c, fn)) is not None
            )
            if new_children != children:
                return dataclasses.replace(node, children=new_children)
        case _:
            pass  # Leaf nodes: return as-is

    return node
