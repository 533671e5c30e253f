"""Exceptions for aio-config.

Usage:
    from aio_config.exceptions import AioConfigError, ConfigWriteError

    try:
        store.set("a.key", "value")
    except ConfigWriteError as e:
        print(e.to_dict())
"""

from aio_config.exceptions.base import (
    AioConfigError,
    ConfigurationError,
    ConfigWriteError,
    InvalidKeyPathError,
    UnknownLayerError,
)

__all__ = [
    "AioConfigError",
    "ConfigurationError",
    "ConfigWriteError",
    "InvalidKeyPathError",
    "UnknownLayerError",
]
