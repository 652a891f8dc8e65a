"""
Zero-boilerplate configuration loading with caller-supplied codecs.
"""

__all__ = [
    "load_from_path",
    "load_or_default",
    "load_or_write_default",
    "user_config_file",
    "ConfigurationError",
    "ConfigIOError",
    "DeserializeError",
    "SerializeError",
    "__version__",
]

from .errors import (
    ConfigIOError,
    ConfigurationError,
    DeserializeError,
    SerializeError,
)
from .loader import load_from_path, load_or_default, load_or_write_default
from .paths import user_config_file
from .version import __version__ as __version__

__title__ = "graze"
__description__ = "A zero-boilerplate configuration loading library."
__license__ = "Apache-2.0"
