"""
Load a configuration value from a file using caller-supplied codecs.

The loaders never parse anything themselves. The caller passes a
``deserializer`` that turns the file's text into a value (raising on
malformed content) and, for :func:`load_or_write_default`, a ``serializer``
that turns a value back into ``str`` or ``bytes``.

Example::

    import tomllib

    cfg = load_or_default("Config.toml", tomllib.loads, dict)
"""

from __future__ import annotations

__all__ = [
    "load_from_path",
    "load_or_default",
    "load_or_write_default",
]

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from graze.errors import ConfigIOError, DeserializeError, SerializeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Deserializer = Callable[[str], T]
Serializer = Callable[[T], str | bytes]
DefaultFactory = Callable[[], T]


def load_from_path(
    path: str | os.PathLike[str],
    deserializer: Deserializer[T],
    *,
    encoding: str = "utf-8",
) -> T:
    """
    Load a configuration from the file at the given path.

    The content is passed to `deserializer` exactly as stored; line endings
    are not translated.

    Args:
        path: Path to the configuration file.
        deserializer: Callable receiving the whole file content as text.
            Any exception it raises is treated as malformed content.
        encoding: Text encoding of the file.

    Returns:
        The value returned by `deserializer`.

    Raises:
        ConfigIOError: If the file cannot be opened, read or decoded.
        DeserializeError: If `deserializer` raises.
    """
    path = Path(path)
    logger.debug("Loading configuration from: %s", path)

    try:
        with path.open("r", encoding=encoding, newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigIOError(e, path) from e

    try:
        return deserializer(content)
    except Exception as e:
        raise DeserializeError(e, path) from e


def load_or_default(
    path: str | os.PathLike[str],
    deserializer: Deserializer[T],
    default: DefaultFactory[T],
    *,
    encoding: str = "utf-8",
) -> T:
    """
    Load a configuration from the file at the given path, or use the default
    value if the file does not exist.

    No file is created when falling back to the default.

    The existence check and the read are separate filesystem calls. If the
    file is removed in between, the resulting `ConfigIOError` is raised
    as-is; concurrent changes to `path` are not guarded against.

    Args:
        path: Path to the configuration file.
        deserializer: Callable receiving the whole file content as text.
        default: Zero-argument callable producing the fallback value.
            It is expected not to fail.
        encoding: Text encoding of the file.

    Returns:
        The loaded value, or the value returned by `default`.

    Raises:
        ConfigIOError: If the file exists but cannot be read.
        DeserializeError: If the file exists and `deserializer` raises.
    """
    path = Path(path)

    if _exists(path):
        return load_from_path(path, deserializer, encoding=encoding)

    logger.debug("Configuration file not found, using default: %s", path)
    return default()


def load_or_write_default(
    path: str | os.PathLike[str],
    deserializer: Deserializer[T],
    serializer: Serializer[T],
    default: DefaultFactory[T],
    *,
    encoding: str = "utf-8",
    create_parents: bool = False,
) -> T:
    """
    Load a configuration from the file at the given path, or use the default
    value if the file does not exist.

    If the file does not exist, the default value is serialized and written
    to `path`. An existing file is never written to.

    As with :func:`load_or_default`, the existence check is not atomic with
    the following read or write. The write itself is a plain
    create-or-truncate; a crash mid-write can leave a partial file.

    Args:
        path: Path to the configuration file.
        deserializer: Callable receiving the whole file content as text.
        serializer: Callable turning the default value into ``str`` or
            ``bytes``. A ``str`` result is encoded with `encoding`.
        default: Zero-argument callable producing the fallback value.
        encoding: Text encoding of the file.
        create_parents: Create missing parent directories before writing.

    Returns:
        The loaded value, or the default value that was written.

    Raises:
        ConfigIOError: If reading, writing or creating directories fails.
        DeserializeError: If the file exists and `deserializer` raises.
        SerializeError: If `serializer` raises or returns neither ``str``
            nor bytes.
    """
    path = Path(path)

    if _exists(path):
        return load_from_path(path, deserializer, encoding=encoding)

    data = default()
    payload = _serialize(serializer, data, path, encoding)

    try:
        if create_parents:
            path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
    except OSError as e:
        raise ConfigIOError(e, path) from e

    logger.info("Default configuration written to: %s", path)
    return data


def _serialize(
    serializer: Serializer[T],
    data: T,
    path: Path,
    encoding: str,
) -> bytes:
    try:
        out = serializer(data)
        if isinstance(out, str):
            return out.encode(encoding)
        if isinstance(out, bytes | bytearray | memoryview):
            return bytes(out)
    except Exception as e:
        raise SerializeError(e, path) from e

    err = TypeError(
        f"serializer must return str or bytes, got {type(out).__name__}"
    )
    raise SerializeError(err, path)


def _exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError as e:
        raise ConfigIOError(e, path) from e
