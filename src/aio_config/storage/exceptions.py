"""Storage exceptions"""

from typing import Optional


class StorageError(Exception):
    """Base class for storage exceptions"""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class PermissionDeniedError(StorageError):
    """Raised when the file cannot be accessed"""
    pass


class ResourceNotFoundError(StorageError):
    """Raised when the file does not exist"""
    pass


class InvalidFormatError(StorageError):
    """Raised when file content cannot be decoded into a document"""
    pass
