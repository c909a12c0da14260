"""Document serialization: JSON round-trip for Rivit nodes.

Converts typed nodes to/from JSON-compatible dicts. Useful for:
- Caching parsed documents to disk
- Handing documents to renderers written in other languages
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.
Enum fields serialize by member name.

Example:
    from rivit import parse
    from rivit.serialization import to_json, from_json

    doc = parse("TITLE\\n- **item**")
    json_str = to_json(doc)
    restored = from_json(json_str)
    assert doc == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from enum import Enum
from typing import Any

from rivit.errors import SerializationError
from rivit.nodes import (
    Block,
    Document,
    Embed,
    Header,
    List,
    ListItem,
    NavLink,
    Node,
    Paragraph,
    StyledText,
    TextStyle,
)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    "Document": Document,
    "Header": Header,
    "NavLink": NavLink,
    "Paragraph": Paragraph,
    "Embed": Embed,
    "Block": Block,
    "List": List,
    "ListItem": ListItem,
    "StyledText": StyledText,
}

# Fields holding enum members (serialized by name)
_ENUM_FIELDS: dict[str, type[Enum]] = {
    "style": TextStyle,
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes child nodes.

    Args:
        node: Any Rivit node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed node from a dict.

    Uses the ``_type`` discriminator to determine the node class.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        SerializationError: If ``_type`` is missing or unknown, or an enum
            field names an unknown member.

    """
    if not isinstance(data, dict):
        msg = f"Expected a serialized node, got {type(data).__name__}"
        raise SerializationError(msg)

    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise SerializationError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise SerializationError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name], f.name)

    try:
        return node_cls(**kwargs)
    except TypeError as exc:
        msg = f"Cannot build {type_name}: {exc}"
        raise SerializationError(msg) from exc


def _deserialize_value(value: Any, field_name: str) -> Any:
    """Deserialize a single field value."""
    enum_cls = _ENUM_FIELDS.get(field_name)
    if enum_cls is not None:
        try:
            return enum_cls[value]
        except KeyError:
            msg = f"Unknown {enum_cls.__name__} member: {value!r}"
            raise SerializationError(msg) from None
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item, field_name) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Output is deterministic (sorted keys) for cache-key stability.
    Non-ASCII text is written as-is.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Raises:
        SerializationError: If the data is not valid JSON or doesn't
            represent a Document.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON: {exc}"
        raise SerializationError(msg) from exc

    node = from_dict(raw)
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise SerializationError(msg)
    return node


__all__ = [
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]
