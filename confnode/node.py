"""A configuration node holding one value of a fixed set of kinds."""

from __future__ import annotations

import copy
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from confnode.nodetype import NodeError, NodeType

_PYTHON_KINDS: dict[NodeType, tuple[type, ...]] = {
    NodeType.STRING: (str,),
    NodeType.BOOLEAN: (bool,),
    NodeType.INTEGER: (int,),
    NodeType.FLOATING: (float,),
    NodeType.SEQUENCE: (list, Sequence),
    NodeType.OBJECT: (dict, Mapping),
}


def _kind_of_type(kind: type) -> NodeType | None:
    """Map a Python type to the node kind it corresponds to, if any."""
    if issubclass(kind, str):
        return NodeType.STRING
    if issubclass(kind, bool):
        return NodeType.BOOLEAN
    if issubclass(kind, int):
        return NodeType.INTEGER
    if issubclass(kind, float):
        return NodeType.FLOATING
    if issubclass(kind, Mapping):
        return NodeType.OBJECT
    if issubclass(kind, Sequence) and not issubclass(
        kind, (bytes, bytearray, memoryview)
    ):
        return NodeType.SEQUENCE
    return None


class Node:
    """A tree of configuration data.

    A node is null, a string, a boolean, an integer, a float, a sequence
    of nodes or an object mapping field names to nodes.

    Values that define a ``to_node()`` method can be stored in a node, and
    types that define a ``from_node(node)`` class method can be read back
    with :meth:`to`.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Any = None) -> None:
        self._value = self._convert(value)

    @classmethod
    def from_value(cls, value: Any) -> Node:
        """Build a node tree from a plain Python value."""
        return cls(value)

    @staticmethod
    def _convert(value: Any) -> Any:
        if isinstance(value, Node):
            return copy.deepcopy(value._value)
        to_node = getattr(value, "to_node", None)
        if callable(to_node) and not isinstance(value, type):
            return Node._convert(to_node())
        kind = NodeType.of(value)
        if kind is NodeType.SEQUENCE:
            return [Node(element) for element in value]
        if kind is NodeType.OBJECT:
            output: dict[str, Node] = {}
            for field, element in value.items():
                if not isinstance(field, str):
                    raise NodeError(f"Object field names must be strings, got {field!r}.")
                output[field] = Node(element)
            return output
        if kind is NodeType.INTEGER:
            return int(value)
        if kind is NodeType.FLOATING:
            return float(value)
        if kind is NodeType.STRING:
            return str(value)
        return value

    def set(self, value: Any) -> Node:
        """Replace the content of this node and return it."""
        self._value = self._convert(value)
        return self

    def type(self) -> NodeType:
        """Return the kind of value held."""
        value = self._value
        if value is None:
            return NodeType.NULL
        if isinstance(value, str):
            return NodeType.STRING
        if isinstance(value, bool):
            return NodeType.BOOLEAN
        if isinstance(value, int):
            return NodeType.INTEGER
        if isinstance(value, float):
            return NodeType.FLOATING
        if isinstance(value, list):
            return NodeType.SEQUENCE
        if isinstance(value, dict):
            return NodeType.OBJECT
        raise NodeError("Failed to determine node type.")

    def is_(self, kind: NodeType | type) -> bool:
        """Tell whether the node holds a value of *kind*.

        *kind* is a :class:`NodeType` or a Python type such as ``int``.
        """
        if isinstance(kind, NodeType):
            return self.type() is kind
        if isinstance(kind, type):
            mapped = _kind_of_type(kind)
            return mapped is not None and self.type() is mapped
        return False

    def _as(self, kind: NodeType) -> Any:
        if self.type() is not kind:
            raise NodeError(f"Conversion {self.type()} -> {kind} failed.")
        return self._value

    def as_string(self) -> str:
        """Return the string held, or raise NodeError."""
        return self._as(NodeType.STRING)

    def as_boolean(self) -> bool:
        """Return the boolean held, or raise NodeError."""
        return self._as(NodeType.BOOLEAN)

    def as_integer(self) -> int:
        """Return the integer held, or raise NodeError."""
        return self._as(NodeType.INTEGER)

    def as_floating(self) -> float:
        """Return the float held, or raise NodeError."""
        return self._as(NodeType.FLOATING)

    def as_sequence(self) -> list[Node]:
        """Return the list of child nodes, or raise NodeError."""
        return self._as(NodeType.SEQUENCE)

    def as_object(self) -> dict[str, Node]:
        """Return the mapping of fields to child nodes, or raise NodeError."""
        return self._as(NodeType.OBJECT)

    def to(self, kind: NodeType | type) -> Any:
        """Read the node as *kind*.

        Types with a ``from_node`` class method build themselves from the
        node; numeric types are constructed from the stored number.
        """
        if isinstance(kind, NodeType):
            if kind is NodeType.NULL:
                return self._as(NodeType.NULL)
            return self._as(kind)
        if not isinstance(kind, type):
            raise NodeError(f"Cannot convert node to {kind!r}.")
        from_node = getattr(kind, "from_node", None)
        if callable(from_node):
            return from_node(self)
        if issubclass(kind, bool):
            return kind(self.as_boolean())
        if issubclass(kind, int):
            return kind(self.as_integer())
        if issubclass(kind, float):
            return kind(self.as_floating())
        if issubclass(kind, str):
            return self.as_string()
        if issubclass(kind, list):
            return self.as_sequence()
        if issubclass(kind, dict):
            return self.as_object()
        raise NodeError(f"Cannot convert node to {kind.__name__}.")

    def value_or(self, default: Any) -> Any:
        """Return the value if it has the kind of *default*, else *default*."""
        kind = type(default)
        if self.is_(kind):
            return self.to(kind)
        return default

    def contains(self, field: str) -> bool:
        """Tell whether this is an object with the given field."""
        return self.type() is NodeType.OBJECT and field in self._value

    def push(self, node: Any) -> None:
        """Append a value to a sequence; a null node becomes a sequence."""
        kind = self.type()
        if kind is not NodeType.SEQUENCE and kind is not NodeType.NULL:
            raise NodeError("Cannot push to non-sequence node.")
        if kind is NodeType.NULL:
            self._value = []
        self._value.append(Node(node))

    def __len__(self) -> int:
        kind = self.type()
        if kind is NodeType.SEQUENCE or kind is NodeType.OBJECT:
            return len(self._value)
        return 0

    def __iter__(self) -> Iterator[Any]:
        kind = self.type()
        if kind is NodeType.SEQUENCE:
            return iter(list(self._value))
        if kind is NodeType.OBJECT:
            return iter(list(self._value))
        return iter(())

    def _field(self, field: str) -> Node:
        kind = self.type()
        if kind is not NodeType.OBJECT and kind is not NodeType.NULL:
            raise NodeError(f"Cannot access field '{field}' on non-object node.")
        if kind is NodeType.NULL:
            self._value = {}
        return self._value.setdefault(field, Node())

    def _element(self, index: int) -> Node:
        if self.type() is not NodeType.SEQUENCE:
            raise NodeError("Cannot access node. Node is not a sequence")
        length = len(self._value)
        if not 0 <= index < length:
            raise NodeError(
                f"Index out of bounds\nIndex  : {index}\nLength : {length}"
            )
        return self._value[index]

    def __getitem__(self, key: str | int) -> Node:
        """Access a field (created if missing) or a sequence element."""
        if isinstance(key, str):
            return self._field(key)
        if isinstance(key, int) and not isinstance(key, bool):
            return self._element(key)
        raise TypeError(f"Node keys must be str or int, not {type(key).__name__}")

    def __setitem__(self, key: str | int, value: Any) -> None:
        self[key].set(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            try:
                other = Node(other)
            except NodeError:
                return NotImplemented
        return self.type() is other.type() and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Node({self._value!r})"