"""Reading and writing configuration nodes as JSON."""

from __future__ import annotations

import json
import math
from typing import Any

from confnode.errors import ConfigError
from confnode.node import Node
from confnode.nodetype import NodeType

__all__ = ["JsonError", "DumpError", "ParseError", "dump", "parse"]

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MAX = 2**64 - 1


class JsonError(ConfigError):
    """Base class for JSON format errors."""

    def __init__(self, message: str) -> None:
        super().__init__(self.namespace("JsonError", message))


class DumpError(JsonError):
    """Raised when a node cannot be written as JSON."""

    def __init__(self, message: str) -> None:
        super().__init__(self.qualify("DumpError", message))


class ParseError(JsonError):
    """Raised when text is not valid JSON."""

    def __init__(self, message: str) -> None:
        super().__init__(self.qualify("ParseError", message))


def _to_plain(node: Node) -> Any:
    kind = node.type()
    if kind is NodeType.NULL:
        return None
    if kind is NodeType.STRING:
        return node.as_string()
    if kind is NodeType.BOOLEAN:
        return node.as_boolean()
    if kind is NodeType.INTEGER:
        return node.as_integer()
    if kind is NodeType.FLOATING:
        value = node.as_floating()
        # Non-finite numbers have no JSON form and are written as null.
        return value if math.isfinite(value) else None
    if kind is NodeType.SEQUENCE:
        return [_to_plain(element) for element in node.as_sequence()]
    if kind is NodeType.OBJECT:
        return {field: _to_plain(element) for field, element in node.as_object().items()}
    raise DumpError("Undefined NodeType")


def dump(node: Node) -> str:
    """Serialise *node* as JSON indented by four spaces, keys sorted."""
    try:
        return json.dumps(
            _to_plain(node),
            indent=4,
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (ValueError, TypeError) as error:
        raise DumpError(str(error)) from error


def _parse_int(text: str) -> int | float:
    value = int(text)
    if value < _INT64_MIN or value > _UINT64_MAX:
        return float(text)
    if value > _INT64_MAX:
        # Unsigned values above the signed range wrap around.
        return value - 2**64
    return value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid literal '{name}'")


def _to_node(value: Any) -> Node:
    if isinstance(value, list):
        output = Node()
        for element in value:
            output.push(_to_node(element))
        return output
    if isinstance(value, dict):
        output = Node()
        for field, element in value.items():
            output[field] = _to_node(element)
        return output
    return Node(value)


def parse(content: str) -> Node:
    """Parse JSON text into a node.

    Empty arrays and objects come back as null nodes.
    """
    try:
        data = json.loads(
            content,
            parse_int=_parse_int,
            parse_constant=_reject_constant,
        )
    except (ValueError, TypeError) as error:
        raise ParseError(str(error)) from error
    return _to_node(data)