"""Storage module for aio-config

Provides the file store used for persisted layers and the codecs that turn
layer documents into text and back.
"""

from .base import FileStore
from .codecs import LayerFormat, decode_document, encode_document
from .exceptions import (
    InvalidFormatError,
    PermissionDeniedError,
    ResourceNotFoundError,
    StorageError,
)
from .file_storage import LocalFileStore
from .memory import MemoryFileStore

__all__ = [
    "FileStore",
    "LocalFileStore",
    "MemoryFileStore",
    "LayerFormat",
    "encode_document",
    "decode_document",
    "StorageError",
    "PermissionDeniedError",
    "ResourceNotFoundError",
    "InvalidFormatError",
]
