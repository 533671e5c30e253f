"""Environment variable overrides

Variables named ``AIO_<PATH>`` override configuration keys. ``<PATH>`` is
split on single underscores into nested keys; a double underscore stands
for a literal underscore inside one key. Keys are lower-cased and values
are always kept as strings:

    AIO_RUNTIME=12              -> {"runtime": "12"}
    AIO_PGB_AUTH__TOKEN=abc     -> {"pgb": {"auth_token": "abc"}}
    AIO_my__config__value=1     -> {"my_config_value": "1"}

Runs of three or more underscores are decoded by taking ``__`` pairs left
to right, so ``A___B`` is ``["a_", "b"]`` and ``A____B`` is ``["a__b"]``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from aio_config.logger import Logger

# Never occurs in environment variable names
_PLACEHOLDER = "\0"


def decode_env_name(name: str, prefix: str = "AIO") -> Optional[List[str]]:
    """Decode a variable name into a key path.

    Returns:
        Path segments, or None if the name is not a configuration override
    """
    marker = f"{prefix}_"
    if not name.startswith(marker):
        return None
    remainder = name[len(marker):]
    if not remainder:
        return None

    escaped = remainder.replace("__", _PLACEHOLDER)
    segments = [part.replace(_PLACEHOLDER, "_").lower() for part in escaped.split("_")]
    if any(not segment for segment in segments):
        return None
    return segments


def _insert(document: Dict[str, Any], segments: List[str], value: str) -> None:
    cursor = document
    for segment in segments[:-1]:
        child = cursor.get(segment)
        if not isinstance(child, dict):
            child = {}
            cursor[segment] = child
        cursor = child
    cursor[segments[-1]] = value


class EnvVarMapper:
    """Build the environment layer from process environment variables.

    Example:
        mapper = EnvVarMapper()
        mapper.map({"AIO_PGB_AUTH__TOKEN": "12", "HOME": "/root"})
        # {"pgb": {"auth_token": "12"}}
    """

    def __init__(self, prefix: str = "AIO", logger: Optional[Logger] = None) -> None:
        self.prefix = prefix
        self.logger = logger

    def map(self, environ: Mapping[str, Any]) -> Dict[str, Any]:
        """Return a fresh document of every override found in environ.

        Names are visited in sorted order, so when ``AIO_A`` and ``AIO_A_B``
        are both set the nested ``a.b`` wins over the scalar ``a``.
        """
        document: Dict[str, Any] = {}
        for name in sorted(environ):
            segments = decode_env_name(name, self.prefix)
            if segments is None:
                if self.logger and name.startswith(f"{self.prefix}_"):
                    self.logger.debug(f"ignoring environment variable {name}: not a valid key path")
                continue
            _insert(document, segments, str(environ[name]))
        return document
