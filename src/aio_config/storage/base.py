"""Base file store interface

Defines the abstract interface the configuration store uses for reading and
writing its persisted layers.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union


class FileStore(ABC):
    """Abstract base class for text file storage"""

    @abstractmethod
    def read_text(self, path: Union[str, Path]) -> str:
        """
        Read a whole file as text

        Args:
            path: File to read

        Returns:
            File content

        Raises:
            ResourceNotFoundError: If the file does not exist
            PermissionDeniedError: If the file cannot be accessed
            StorageError: If the read fails for any other reason
        """
        pass

    @abstractmethod
    def write_text(self, path: Union[str, Path], text: str) -> None:
        """
        Replace a file's content with text

        Args:
            path: File to write (parent directories are created)
            text: New content

        Raises:
            PermissionDeniedError: If the file cannot be accessed
            StorageError: If the write fails
        """
        pass
