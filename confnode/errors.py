"""Base exception for configuration errors."""

from __future__ import annotations


class ConfigError(RuntimeError):
    """Root of every error raised by this package.

    The message is always prefixed with the ``Config`` namespace.
    """

    def __init__(self, message: str) -> None:
        super().__init__(self.namespace("Config", message))

    @property
    def message(self) -> str:
        """The full, namespaced message."""
        return str(self)

    @staticmethod
    def namespace(prefix: str, message: str) -> str:
        """Join *prefix* and *message* as ``prefix::message``."""
        return f"{prefix}::{message}"

    @staticmethod
    def qualify(prefix: str, message: str) -> str:
        """Join *prefix* and *message* as ``prefix: message``."""
        return f"{prefix}: {message}"