"""Hierarchical documents addressed by dotted key paths.

A document is a dict whose values may be dicts, lists or scalars. A key
path such as ``"pgb.auth_token"`` addresses a value inside it; an empty or
whitespace-only key path addresses the whole document.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

from aio_config.exceptions import InvalidKeyPathError


def split_key_path(key_path: Optional[str]) -> List[str]:
    """Split a dotted key path into segments.

    Returns an empty list (the document root) for None, "" or whitespace.
    Empty segments, as in ``"a..b"``, are dropped.

    Raises:
        InvalidKeyPathError: If a non-blank path has no segments, such as "."
    """
    if key_path is None or not str(key_path).strip():
        return []
    segments = [segment for segment in str(key_path).split(".") if segment]
    if not segments:
        raise InvalidKeyPathError(str(key_path))
    return segments


def get_path(document: Dict[str, Any], key_path: Optional[str]) -> Any:
    """Return the value at key_path, or None if any segment is missing."""
    current: Any = document
    for segment in split_key_path(key_path):
        if not isinstance(current, dict) or segment not in current:
            return None
        current = current[segment]
    return current


def set_path(document: Dict[str, Any], key_path: Optional[str], value: Any) -> Dict[str, Any]:
    """Set value at key_path inside document, in place.

    Missing intermediate keys, and intermediate values that are not
    mappings, are replaced by new mappings. A root key path cannot be set
    in place; callers replace the document instead.

    Returns:
        The same document, for chaining
    """
    segments = split_key_path(key_path)
    if not segments:
        raise ValueError("cannot set a value at the document root")
    cursor = document
    for segment in segments[:-1]:
        child = cursor.get(segment)
        if not isinstance(child, dict):
            child = {}
            cursor[segment] = child
        cursor = child
    cursor[segments[-1]] = copy.deepcopy(value)
    return document


def delete_path(document: Dict[str, Any], key_path: Optional[str]) -> bool:
    """Remove the value at key_path, in place. Parents are left as they are.

    Returns:
        True if a value was removed, False if nothing was there
    """
    segments = split_key_path(key_path)
    if not segments:
        raise ValueError("cannot delete the document root")
    cursor: Any = document
    for segment in segments[:-1]:
        if not isinstance(cursor, dict) or segment not in cursor:
            return False
        cursor = cursor[segment]
    if not isinstance(cursor, dict) or segments[-1] not in cursor:
        return False
    del cursor[segments[-1]]
    return True


def _merge_into(target: Dict[str, Any], override: Dict[str, Any]) -> None:
    for key, value in override.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            _merge_into(existing, value)
        else:
            target[key] = copy.deepcopy(value)


def deep_merge(*documents: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Merge documents in increasing priority into a new document.

    Nested mappings merge key by key; any other value (scalars, lists, or a
    mapping meeting a non-mapping) is replaced by the later document's
    value. Inputs are never modified and share no objects with the result.
    """
    merged: Dict[str, Any] = {}
    for document in documents:
        if document:
            _merge_into(merged, document)
    return merged
