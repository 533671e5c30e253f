"""Parser for .env files.

Line grammar:

    # comment
    NAME=value
    NAME: value
    NAME="double quoted, \\n becomes a newline"
    NAME='single quoted, taken literally'

Blank lines and lines starting with ``#`` are skipped. The name ends at the
first ``=`` or ``:``. Unquoted values are trimmed and kept as-is otherwise:
a ``#`` inside a value is part of the value. A value wrapped in matching
quotes loses the quotes and keeps everything between them untouched,
except that ``\\n`` in a double-quoted value becomes a newline.
"""

from __future__ import annotations

from typing import Dict, Mapping

_SEPARATORS = ("=", ":")
_QUOTES = ('"', "'")
# Line boundaries str.splitlines() honours besides "\n"
_OTHER_LINE_BREAKS = "\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029"


def _split_line(line: str):
    """Return (name, raw_value) or None when the line has no separator."""
    positions = [line.find(sep) for sep in _SEPARATORS if sep in line]
    if not positions:
        return None
    index = min(positions)
    return line[:index].strip(), line[index + 1:]


def _unquote(raw: str) -> str:
    value = raw.strip()
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        inner = value[1:-1]
        if value[0] == '"':
            inner = inner.replace("\\n", "\n")
        return inner
    return value


def parse_env(text: str) -> Dict[str, str]:
    """Parse .env text into a name -> value mapping in file order.

    A name that appears twice keeps its first position and its last value.
    """
    values: Dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        parts = _split_line(stripped)
        if parts is None:
            continue
        name, raw = parts
        if not name:
            continue
        values[name] = _unquote(raw)
    return values


def _format_value(value: str) -> str:
    if any(c in value for c in _OTHER_LINE_BREAKS):
        raise ValueError("value contains a line break other than '\\n'")
    if "\n" in value:
        if "\\n" in value:
            raise ValueError(
                "value mixes newlines with a literal '\\n' and has no .env representation"
            )
        return '"' + value.replace("\n", "\\n") + '"'
    if not value or value != value.strip() or value[0] in _QUOTES:
        return f"'{value}'"
    return value


def format_env(values: Mapping[str, str]) -> str:
    """Write a mapping as .env text that parse_env reads back unchanged.

    Raises:
        ValueError: If a name or value cannot be expressed in the grammar
    """
    lines = []
    for name, value in values.items():
        if (
            not name
            or name != name.strip()
            or name.startswith("#")
            or any(c in name for c in ("=", ":", "\n", "\r"))
        ):
            raise ValueError(f"invalid environment variable name: {name!r}")
        lines.append(f"{name}={_format_value(str(value))}")
    return "\n".join(lines) + ("\n" if lines else "")
