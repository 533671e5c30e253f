"""Local filesystem file store"""

import os
from pathlib import Path
from typing import Union

from .base import FileStore
from .exceptions import PermissionDeniedError, ResourceNotFoundError, StorageError


class LocalFileStore(FileStore):
    """
    UTF-8 text files on the local filesystem

    Writes are last-writer-wins: no locking is performed, so two processes
    writing the same file may lose each other's updates.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read_text(self, path: Union[str, Path]) -> str:
        file_path = Path(path)
        try:
            with open(file_path, "r", encoding=self.encoding) as f:
                return f.read()
        except FileNotFoundError as e:
            raise ResourceNotFoundError(f"File not found: {file_path}", path=str(file_path)) from e
        except PermissionError as e:
            raise PermissionDeniedError(f"Permission denied: {file_path}", path=str(file_path)) from e
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read {file_path}: {e}", path=str(file_path)) from e

    def write_text(self, path: Union[str, Path], text: str) -> None:
        file_path = Path(path)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, "w", encoding=self.encoding) as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
        except PermissionError as e:
            raise PermissionDeniedError(f"Permission denied: {file_path}", path=str(file_path)) from e
        except OSError as e:
            raise StorageError(f"Failed to write {file_path}: {e}", path=str(file_path)) from e
