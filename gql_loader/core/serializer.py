"""Serialization of GraphQL syntax trees into module source text.

Produces compact JSON-style text in the shape a JavaScript GraphQL client
expects from a document node: ``kind`` names without the ``Node`` suffix,
camelCase keys, and enum members written as their values.

Absent values are not dropped. A per-value mapper runs while the tree is
walked; the default one turns ``None`` into the ``UNDEFINED`` sentinel,
which is written as the bare token ``undefined`` so consumers can tell an
explicitly undefined key from a missing one.
"""

import json
from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable

from graphql import DocumentNode, Location, Node


class _Undefined:
    """Sentinel written as the bare ``undefined`` token."""

    def __repr__(self) -> str:
        return "undefined"


UNDEFINED = _Undefined()

ValueMapper = Callable[[Any], Any]
DocumentMapper = Callable[[DocumentNode], Any]

_SKIPPED_KEYS = ("kind", "loc")

# Keys graphql-js always writes as arrays, even when empty
_LIST_KEYS = frozenset((
    "arguments",
    "definitions",
    "directives",
    "fields",
    "interfaces",
    "locations",
    "operation_types",
    "selections",
    "types",
    "values",
    "variable_definitions",
))


def undefined_for_none(value: Any) -> Any:
    """Default value mapper: None becomes UNDEFINED."""
    return UNDEFINED if value is None else value


def camel_case(name: str) -> str:
    """Convert snake_case to camelCase."""
    first, *rest = name.split("_")
    return first + "".join(word.capitalize() for word in rest)


def node_kind(node: Node) -> str:
    """Return the graphql-js kind for a node, e.g. 'OperationDefinition'."""
    name = type(node).__name__
    return name[:-4] if name.endswith("Node") else name


def _node_items(node: Node, is_root: bool) -> list[tuple[str, Any]]:
    items: list[tuple[str, Any]] = [("kind", node_kind(node))]
    for key in node.keys:
        if key in _SKIPPED_KEYS:
            continue
        value = getattr(node, key, None)
        if value is None and key in _LIST_KEYS:
            value = []
        items.append((camel_case(key), value))
    # Only the document itself keeps its source span
    if is_root and isinstance(node.loc, Location):
        items.append(("loc", {"start": node.loc.start, "end": node.loc.end}))
    return items


def _encode(value: Any, map_value: ValueMapper, is_root: bool = False) -> str:
    value = map_value(value)
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, Node):
        return _encode_items(_node_items(value, is_root), map_value)
    if isinstance(value, Mapping):
        return _encode_items(list(value.items()), map_value)
    if isinstance(value, Enum):
        return _encode(value.value, map_value)
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_encode(item, map_value) for item in value) + "]"
    if value is None or isinstance(value, (str, int, float, bool)):
        return json.dumps(value, ensure_ascii=False)
    raise TypeError(f"Cannot serialize value of type {type(value).__name__}")


def _encode_items(items: list[tuple[str, Any]], map_value: ValueMapper) -> str:
    encoded = (
        f"{json.dumps(str(key), ensure_ascii=False)}:{_encode(item, map_value)}"
        for key, item in items
    )
    return "{" + ",".join(encoded) + "}"


def serialize_document_node(value: Any, map_value: ValueMapper = undefined_for_none) -> str:
    """Serialize a syntax tree (or plain dicts and lists) to source text.

    Args:
        value: A graphql-core node, or a structure of mappings, sequences
               and scalars such as a document transform may return
        map_value: Applied to every value before it is written

    Returns:
        The compact serialized text
    """
    return _encode(value, map_value, is_root=True)


def generate_document_node_string(
    document: DocumentNode,
    map_document_node: DocumentMapper | None = None,
) -> str:
    """Optionally transform a document, then serialize it.

    Exceptions raised by map_document_node propagate unchanged.
    """
    document_to_use = map_document_node(document) if map_document_node else document
    return serialize_document_node(document_to_use)
