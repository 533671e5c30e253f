"""Base exception classes for aio-config.

All aio-config exceptions carry structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context (paths, layer names, underlying errors)
"""

from typing import Any, Dict, Optional


class AioConfigError(Exception):
    """Base exception for all aio-config errors.

    Attributes:
        code: Machine-readable error code (e.g., "CONFIG_WRITE_FAILED")
        message: Human-readable error message
        details: Optional additional context for debugging/recovery
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(AioConfigError):
    """Raised when the resolver itself is misconfigured."""

    pass


class UnknownLayerError(AioConfigError):
    """Raised when a layer name is not one of global, local or env."""

    def __init__(self, layer: str, details: Optional[Dict[str, Any]] = None):
        merged = {"layer": layer, **(details or {})}
        super().__init__(
            code="UNKNOWN_LAYER",
            message=f"Unknown configuration layer '{layer}'",
            details=merged,
        )
        self.layer = layer


class ConfigWriteError(AioConfigError):
    """Raised when a persisted layer cannot be written back to its file.

    The in-memory layer has already been restored to its state before the
    failed mutation when this is raised.
    """

    def __init__(self, path: str, layer: str, error: Exception):
        super().__init__(
            code="CONFIG_WRITE_FAILED",
            message=f"Cannot write {layer} configuration to {path}",
            details={"path": path, "layer": layer, "error": str(error)},
        )
        self.path = path
        self.layer = layer
        self.error = error


class InvalidKeyPathError(AioConfigError):
    """Raised when a non-blank key path has no segments, such as "." or ".."."""

    def __init__(self, key_path: str):
        super().__init__(
            code="INVALID_KEY_PATH",
            message=f"Key path '{key_path}' does not name any key",
            details={"key_path": key_path},
        )
        self.key_path = key_path
