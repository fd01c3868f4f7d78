"""Kinds of value a configuration node can hold."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from confnode.errors import ConfigError


class NodeError(ConfigError):
    """Raised when a node is used in a way its content does not allow."""

    def __init__(self, message: str) -> None:
        super().__init__(self.qualify("NodeError", message))


class NodeType(Enum):
    """The kind of data stored in a node."""

    NULL = "Null"
    STRING = "String"
    BOOLEAN = "Boolean"
    INTEGER = "Integer"
    FLOATING = "Floating"
    SEQUENCE = "Sequence"
    OBJECT = "Object"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def of(cls, value: Any) -> NodeType:
        """Return the kind of a plain Python value.

        Raises NodeError for values that have no node counterpart.
        """
        if value is None:
            return cls.NULL
        if isinstance(value, str):
            return cls.STRING
        # bool is a subclass of int, so it must be tested first.
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, int):
            return cls.INTEGER
        if isinstance(value, float):
            return cls.FLOATING
        if isinstance(value, Mapping):
            return cls.OBJECT
        if isinstance(value, Sequence) and not isinstance(
            value, (bytes, bytearray, memoryview)
        ):
            return cls.SEQUENCE
        raise NodeError("Failed to determine node type.")