"""AST serialization: JSON round-trip for Templar AST nodes.

Converts typed AST nodes to/from JSON-compatible dicts. Useful for:
- Caching parsed templates to disk between processes
- Shipping a compiled template tree to another runtime
- Debugging and inspection

Properties, tokens and spans are serialized with the nodes that own them,
so the restored tree keeps every source position.

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from templar import parse_template
    from templar.serialization import to_json, from_json

    root = parse_template(["<div id=", ">Hi</div>"])
    json_str = to_json(root)
    restored = from_json(json_str)
    assert root == restored

Thread Safety:
    All functions are pure, safe to call from any thread.

"""

from __future__ import annotations

import json
from dataclasses import fields
from enum import Enum
from typing import Any

from templar.location import Span
from templar.nodes import (
    BooleanProp,
    Element,
    Expression,
    ExpressionProp,
    MixedProp,
    Node,
    NodeKind,
    Prop,
    Root,
    SpreadProp,
    StaticProp,
    Text,
)
from templar.tokens import Token, TokenType

# Registry of type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Root": Root,
    "Element": Element,
    "Text": Text,
    "Expression": Expression,
    "BooleanProp": BooleanProp,
    "StaticProp": StaticProp,
    "ExpressionProp": ExpressionProp,
    "MixedProp": MixedProp,
    "SpreadProp": SpreadProp,
}

_PROP_TYPES = (BooleanProp, StaticProp, ExpressionProp, MixedProp, SpreadProp)

# Enum-valued fields, stored by member name
_ENUM_FIELDS: dict[str, type[Enum]] = {"kind": NodeKind}


def to_dict(node: Node | Prop) -> dict[str, Any]:
    """Convert an AST node or property to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes children, properties, tokens and spans.

    Args:
        node: Any Templar AST node or property.

    Returns:
        Dict with ``_type`` and all fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Token):
        return {
            "_type": "Token",
            "type": value.type.name,
            "value": value.value,
            "start": value.start,
            "end": value.end,
        }
    if isinstance(value, Span):
        return {"_type": "Span", "start": value.start, "end": value.end}
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    if isinstance(value, (Node, *_PROP_TYPES)):
        return to_dict(value)
    # Primitives: str, int, None
    return value


def from_dict(data: dict[str, Any]) -> Any:
    """Reconstruct a typed AST node (or property, token, span) from a dict.

    Uses the ``_type`` discriminator to determine the class.

    Args:
        data: Dict with ``_type`` and fields (as produced by to_dict).

    Returns:
        Frozen dataclass instance.

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    if type_name == "Token":
        return Token(
            TokenType[data["type"]],
            data.get("value"),
            data["start"],
            data["end"],
        )
    if type_name == "Span":
        return Span(data["start"], data["end"])

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        enum_cls = _ENUM_FIELDS.get(f.name)
        if enum_cls is not None and isinstance(raw, str):
            kwargs[f.name] = enum_cls[raw]
        else:
            kwargs[f.name] = _deserialize_value(raw)

    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(root: Root, *, indent: int | None = None) -> str:
    """Serialize a Root AST to a JSON string.

    Output is deterministic (sorted keys) for cache-key stability.

    Args:
        root: Root to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(root), sort_keys=True, indent=indent)


def from_json(data: str) -> Root:
    """Deserialize a Root AST from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Root AST node.

    Raises:
        ValueError: If the JSON doesn't represent a Root.

    """
    raw = json.loads(data)
    node = from_dict(raw)
    if not isinstance(node, Root):
        msg = f"Expected Root, got {type(node).__name__}"
        raise ValueError(msg)
    return node

