"""
Exceptions raised by the configuration loaders.
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "ConfigIOError",
    "DeserializeError",
    "SerializeError",
]

from pathlib import Path
from typing import Generic, TypeVar

E = TypeVar("E")


class ConfigurationError(Exception, Generic[E]):
    """Base class for failures while loading or writing a configuration file.

    The original error is kept on ``error`` so callers can inspect it, and is
    also chained as ``__cause__`` by the loaders.

    Args:
        error: The underlying error.
        path: The configuration file involved, if known.
    """

    prefix = "Configuration error: "

    def __init__(self, error: E, path: Path | None = None) -> None:
        super().__init__(error)
        self.error: E = error
        self.path = path

    def __str__(self) -> str:
        return f"{self.prefix}{self.error}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.error!r})"


class ConfigIOError(ConfigurationError[OSError | UnicodeDecodeError]):
    """The configuration file could not be opened, read or written."""

    prefix = "An error occurred while opening the configuration file: "


class DeserializeError(ConfigurationError[E]):
    """The deserializer rejected the file content."""

    prefix = "Configuration file is incorrect: "


class SerializeError(ConfigurationError[E]):
    """The default value could not be serialized."""

    prefix = "Could not serialize the default configuration: "
