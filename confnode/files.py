"""Loading and saving configuration nodes by file extension."""

from __future__ import annotations

import os
from pathlib import Path

from confnode import json_format, yaml_format
from confnode.errors import ConfigError
from confnode.node import Node

__all__ = ["IoError", "OpenError", "SaveError", "load", "save"]

_JSON_SUFFIXES = frozenset({".json"})
_YAML_SUFFIXES = frozenset({".yml", ".yaml"})


class IoError(ConfigError):
    """Base class for errors raised while reading or writing files."""

    def __init__(self, message: str) -> None:
        super().__init__(self.namespace("IoError", message))


class OpenError(IoError):
    """Raised when a file cannot be loaded as configuration."""

    def __init__(self, message: str) -> None:
        super().__init__(self.qualify("OpenError", message))


class SaveError(IoError):
    """Raised when a node cannot be saved to a file."""

    def __init__(self, message: str) -> None:
        super().__init__(self.qualify("SaveError", message))


def load(path: str | os.PathLike[str]) -> Node:
    """Read the file at *path* and parse it by its extension.

    ``.json`` files are read as JSON, ``.yml`` and ``.yaml`` as YAML.
    Any other extension raises OpenError.
    """
    path = Path(path)
    suffix = path.suffix
    if suffix in _JSON_SUFFIXES:
        return json_format.parse(path.read_text(encoding="utf-8"))
    if suffix in _YAML_SUFFIXES:
        return yaml_format.parse(path.read_text(encoding="utf-8"))
    raise OpenError("Undefined extension")


def save(node: Node, path: str | os.PathLike[str]) -> None:
    """Write *node* to *path* in the format its extension names.

    ``.json`` files are written as JSON, ``.yml`` and ``.yaml`` as YAML.
    Any other extension raises SaveError and nothing is written.
    """
    path = Path(path)
    suffix = path.suffix
    if suffix in _JSON_SUFFIXES:
        text = json_format.dump(node)
    elif suffix in _YAML_SUFFIXES:
        text = yaml_format.dump(node)
    else:
        raise SaveError("Undefined file format")
    path.write_text(text, encoding="utf-8")