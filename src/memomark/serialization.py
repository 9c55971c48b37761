"""JSON wire form for memomark node trees.

Converts nodes to/from JSON-compatible dicts in the shape the note service
exchanges with its clients: each node is a ``type`` discriminator plus one
payload object named after the kind::

    {"type": "TAG", "tagNode": {"content": "work"}}
    {"type": "ORDERED_LIST_ITEM",
     "orderedListItemNode": {"number": "1", "indent": 0, "children": [...]}}

A document is ``{"nodes": [...]}``. Output is deterministic (sorted keys).

Example:
    from memomark import parse_document
    from memomark.serialization import to_json, from_json

    doc = parse_document("- [ ] call #mom")
    assert from_json(to_json(doc)) == doc

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
import re
from dataclasses import fields
from typing import Any

from memomark.errors import SerializationError
from memomark.nodes import (
    AutoLink,
    Code,
    CodeBlock,
    Document,
    Heading,
    LineBreak,
    Node,
    NodeKind,
    OrderedListItem,
    Paragraph,
    Tag,
    TaskListItem,
    Text,
    UnorderedListItem,
)

# Registry of kinds to classes for deserialization
_NODE_TYPES: dict[NodeKind, type[Node]] = {
    cls.kind: cls
    for cls in (
        Paragraph,
        Heading,
        CodeBlock,
        UnorderedListItem,
        OrderedListItem,
        TaskListItem,
        LineBreak,
        Text,
        Tag,
        AutoLink,
        Code,
    )
}

# Attribute names that differ on the wire, per node class
_WIRE_NAMES: dict[type[Node], dict[str, str]] = {
    Tag: {"name": "content"},
    OrderedListItem: {"marker": "number"},
}

# Bullet symbol reported for unordered and task items (ignored on input)
_LIST_SYMBOL = "-"

# Kinds allowed inside a block's children, and at the document root
_INLINE_KINDS = frozenset(
    {NodeKind.TEXT, NodeKind.TAG, NodeKind.AUTO_LINK, NodeKind.CODE, NodeKind.LINE_BREAK}
)
_BLOCK_KINDS = (frozenset(NodeKind) - _INLINE_KINDS) | {NodeKind.LINE_BREAK}

_DIGITS_RE = re.compile(r"[0-9]+")


def payload_key(kind: NodeKind) -> str:
    """Name of the payload object for a kind, e.g. ``taskListItemNode``."""
    first, *rest = kind.value.lower().split("_")
    return first + "".join(part.capitalize() for part in rest) + "Node"


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node (and its children) to a JSON-compatible dict."""
    wire_names = _WIRE_NAMES.get(type(node), {})
    payload: dict[str, Any] = {}
    for f in fields(node):
        value = getattr(node, f.name)
        if f.name == "children":
            value = [to_dict(child) for child in value]
        payload[wire_names.get(f.name, f.name)] = value

    if isinstance(node, (UnorderedListItem, TaskListItem)):
        payload["symbol"] = _LIST_SYMBOL

    return {"type": node.kind.value, payload_key(node.kind): payload}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_field(name: str, value: Any, path: str) -> None:
    """Validate one scalar payload value against its node field."""
    match name:
        case "level":
            if not _is_int(value) or not 1 <= value <= 6:
                raise SerializationError(f"Expected a heading level from 1 to 6, got {value!r}", path)
        case "indent":
            if not _is_int(value) or value < 0:
                raise SerializationError(f"Expected a non-negative integer, got {value!r}", path)
        case "complete":
            if not isinstance(value, bool):
                raise SerializationError(f"Expected a boolean, got {value!r}", path)
        case "marker":
            if not isinstance(value, str) or not _DIGITS_RE.fullmatch(value):
                raise SerializationError(f"Expected a string of digits, got {value!r}", path)
        case _:
            if not isinstance(value, str):
                raise SerializationError(f"Expected a string, got {type(value).__name__}", path)


def from_dict(data: Any, *, path: str = "$") -> Node:
    """Reconstruct a node from its wire dict.

    Args:
        data: Dict as produced by to_dict.
        path: Location of ``data`` in the enclosing document, used in errors.

    Raises:
        SerializationError: If the type is missing or unknown, the payload is
            missing, a field is absent or ill-typed, or a child belongs to the
            wrong family (a block inside a block, for instance).

    """
    return _node_from_dict(data, path, None)


def _node_from_dict(data: Any, path: str, allowed: frozenset[NodeKind] | None) -> Node:
    if not isinstance(data, dict):
        raise SerializationError(f"Expected an object, got {type(data).__name__}", path)

    type_name = data.get("type")
    if type_name is None:
        raise SerializationError("Missing 'type' field in serialized node", path)
    try:
        kind = NodeKind(type_name)
    except ValueError:
        raise SerializationError(f"Unknown node type: {type_name!r}", path) from None
    if allowed is not None and kind not in allowed:
        raise SerializationError(f"Node type {kind.value!r} is not allowed here", path)

    key = payload_key(kind)
    # LineBreak carries no payload; older clients omit the empty object
    payload = data.get(key, {} if kind is NodeKind.LINE_BREAK else None)
    if not isinstance(payload, dict):
        raise SerializationError(f"Missing '{key}' payload", path)

    node_cls = _NODE_TYPES[kind]
    wire_names = _WIRE_NAMES.get(node_cls, {})
    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        wire_name = wire_names.get(f.name, f.name)
        field_path = f"{path}.{key}.{wire_name}"
        if wire_name not in payload:
            raise SerializationError(f"Missing field '{wire_name}'", field_path)
        value = payload[wire_name]
        if f.name == "children":
            if not isinstance(value, list):
                raise SerializationError("Expected a list of nodes", field_path)
            value = tuple(
                _node_from_dict(child, f"{field_path}[{index}]", _INLINE_KINDS)
                for index, child in enumerate(value)
            )
        else:
            _check_field(f.name, value, field_path)
        kwargs[f.name] = value

    return node_cls(**kwargs)


def document_to_dict(doc: Document) -> dict[str, Any]:
    """Convert a Document to ``{"nodes": [...]}``."""
    return {"nodes": [to_dict(block) for block in doc.children]}


def document_from_dict(data: Any) -> Document:
    """Reconstruct a Document from ``{"nodes": [...]}``.

    Only block nodes (and LineBreak separators) may appear at the root.
    """
    if not isinstance(data, dict) or not isinstance(data.get("nodes"), list):
        raise SerializationError("Expected an object with a 'nodes' list", "$")
    return Document(
        children=tuple(  # type: ignore[arg-type]
            _node_from_dict(node, f"$.nodes[{index}]", _BLOCK_KINDS)
            for index, node in enumerate(data["nodes"])
        )
    )


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Output is deterministic (sorted keys); non-ASCII text is kept as is.

    """
    return json.dumps(document_to_dict(doc), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Raises:
        SerializationError: If the string is not JSON or does not describe a
            document.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc.msg}", f"line {exc.lineno}") from exc
    return document_from_dict(raw)
