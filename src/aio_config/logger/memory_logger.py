"""
In-memory logger.

Keeps every message with its level and extras. Used by tests to assert on
diagnostics, and handy for callers that want to surface them later.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .interface import Logger


@dataclass
class LogEntry:
    level: str
    message: str
    extra: Dict[str, Any] = field(default_factory=dict)


class MemoryLogger(Logger):
    """Logger that appends entries to a list instead of writing them."""

    def __init__(self) -> None:
        self.entries: List[LogEntry] = []

    @property
    def messages(self) -> List[str]:
        """All recorded messages, oldest first."""
        return [entry.message for entry in self.entries]

    def clear(self) -> None:
        self.entries.clear()

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        self.entries.append(LogEntry(level=level, message=message, extra=dict(kwargs)))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log("CRITICAL", message, **kwargs)
