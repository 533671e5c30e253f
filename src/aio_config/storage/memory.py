"""In-memory file store for testing.

Keeps file contents in a dict keyed by path. Nothing touches the disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from .base import FileStore
from .exceptions import ResourceNotFoundError, StorageError


class MemoryFileStore(FileStore):
    """Dict-backed file store.

    Records every read and write so tests can assert on file I/O.

    Example:
        store = MemoryFileStore({"/home/me/.config/aio": '{"a": 1}'})
        store.read_text("/home/me/.config/aio")
    """

    def __init__(self, files: Optional[Dict[Union[str, Path], str]] = None) -> None:
        self._files: Dict[Path, str] = {Path(p): text for p, text in (files or {}).items()}
        self.reads: List[Path] = []
        self.writes: List[Tuple[Path, str]] = []
        self.fail_reads: Dict[Path, Exception] = {}
        self.fail_writes: Dict[Path, Exception] = {}

    def read_text(self, path: Union[str, Path]) -> str:
        key = Path(path)
        self.reads.append(key)
        if key in self.fail_reads:
            raise StorageError(f"Failed to read {key}: {self.fail_reads[key]}", path=str(key))
        if key not in self._files:
            raise ResourceNotFoundError(f"File not found: {key}", path=str(key))
        return self._files[key]

    def write_text(self, path: Union[str, Path], text: str) -> None:
        key = Path(path)
        if key in self.fail_writes:
            raise StorageError(f"Failed to write {key}: {self.fail_writes[key]}", path=str(key))
        self.writes.append((key, text))
        self._files[key] = text

    def contents(self, path: Union[str, Path]) -> Optional[str]:
        """Return the stored text for path, or None if never written."""
        return self._files.get(Path(path))

    def clear(self) -> None:
        """Drop all files, recorded I/O and injected failures."""
        self._files.clear()
        self.reads.clear()
        self.writes.clear()
        self.fail_reads.clear()
        self.fail_writes.clear()
