"""Reading and writing configuration nodes as YAML."""

from __future__ import annotations

from typing import Any

import yaml

from confnode.errors import ConfigError
from confnode.node import Node
from confnode.nodetype import NodeType

__all__ = ["YamlError", "DumpError", "ParseError", "dump", "parse"]

_NULL_TAG = "tag:yaml.org,2002:null"


class YamlError(ConfigError):
    """Base class for YAML format errors."""

    def __init__(self, message: str) -> None:
        super().__init__(self.namespace("YamlError", message))


class DumpError(YamlError):
    """Raised when a node cannot be written as YAML."""

    def __init__(self, message: str) -> None:
        super().__init__(self.qualify("DumpError", message))


class ParseError(YamlError):
    """Raised when text is not valid YAML or cannot become a node."""

    def __init__(self, message: str) -> None:
        super().__init__(self.qualify("ParseError", message))


class _Dumper(yaml.SafeDumper):
    """Safe dumper that writes null as ``~``."""


def _represent_null(dumper: yaml.SafeDumper, _value: None) -> yaml.ScalarNode:
    return dumper.represent_scalar(_NULL_TAG, "~")


_Dumper.add_representer(type(None), _represent_null)


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
        return node.as_floating()
    if kind is NodeType.SEQUENCE:
        return [_to_plain(element) for element in node.as_sequence()]
    if kind is NodeType.OBJECT:
        return {field: _to_plain(element) for field, element in node.as_object().items()}
    raise DumpError("Undefined NodeType")


def dump(node: Node) -> str:
    """Serialise *node* as a block-style YAML document."""
    try:
        text = yaml.dump(
            _to_plain(node),
            Dumper=_Dumper,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as error:
        raise DumpError(str(error)) from error
    if text.endswith("\n...\n"):
        text = text[: -len("...\n")]
    return text


def _is_null(item: yaml.Node) -> bool:
    return isinstance(item, yaml.ScalarNode) and item.tag == _NULL_TAG


def _key(item: yaml.Node) -> str:
    if _is_null(item):
        return "null"
    if not isinstance(item, yaml.ScalarNode):
        raise ParseError("bad conversion")
    return item.value


def _convert(item: yaml.Node | None) -> Node:
    if item is None or _is_null(item):
        return Node()
    if isinstance(item, yaml.ScalarNode):
        # Scalars are kept as their text, whatever they look like.
        return Node(item.value)
    if isinstance(item, yaml.SequenceNode):
        output = Node()
        for element in item.value:
            output.push(_convert(element))
        return output
    if isinstance(item, yaml.MappingNode):
        output = Node()
        for key, value in item.value:
            output[_key(key)] = _convert(value)
        return output
    raise ParseError("UndefinedNodeType")


def parse(content: str) -> Node:
    """Parse the first YAML document in *content* into a node.

    Every scalar becomes a string; null scalars, empty documents and empty
    collections become null nodes.
    """
    try:
        document = next(iter(yaml.compose_all(content, Loader=yaml.SafeLoader)), None)
    except yaml.YAMLError as error:
        raise ParseError(str(error)) from error
    return _convert(document)