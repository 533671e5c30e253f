"""Document <-> text codecs for persisted layers.

Each layer declares a format. Two are supported:
- json: plain JSON via the standard library
- hjson: the relaxed, comment-friendly Hjson dialect

Both emit keys in sorted order so files diff cleanly, write an empty
document as an empty file, and read a blank file as an empty document.
"""

import json
from enum import Enum
from typing import Any, Dict, Union

import hjson

from aio_config.exceptions import ConfigurationError

from .exceptions import InvalidFormatError


class LayerFormat(str, Enum):
    """Serialization format of a persisted layer"""

    JSON = "json"
    HJSON = "hjson"


def _as_format(fmt: Union[str, LayerFormat]) -> LayerFormat:
    try:
        return LayerFormat(fmt)
    except ValueError as e:
        valid = ", ".join(f.value for f in LayerFormat)
        raise ConfigurationError(
            code="UNKNOWN_FORMAT",
            message=f"Layer format must be one of: {valid}",
            details={"format": str(fmt)},
        ) from e


def encode_document(document: Dict[str, Any], fmt: Union[str, LayerFormat] = LayerFormat.JSON) -> str:
    """Serialize a document to text in the given format.

    Raises:
        InvalidFormatError: If the document holds values the format cannot express
    """
    layer_format = _as_format(fmt)
    if not document:
        return ""
    try:
        if layer_format is LayerFormat.HJSON:
            return hjson.dumps(document, sort_keys=True) + "\n"
        return json.dumps(document, indent=2, sort_keys=True) + "\n"
    except (TypeError, ValueError) as e:
        raise InvalidFormatError(f"Cannot write {layer_format.value} document: {e}") from e


def decode_document(text: str, fmt: Union[str, LayerFormat] = LayerFormat.JSON) -> Dict[str, Any]:
    """Parse text in the given format into a document.

    Raises:
        InvalidFormatError: If the text is malformed or its root is not a mapping
    """
    layer_format = _as_format(fmt)
    if not text.strip():
        return {}
    try:
        if layer_format is LayerFormat.HJSON:
            document = hjson.loads(text, object_pairs_hook=dict)
        else:
            document = json.loads(text)
    except ValueError as e:
        raise InvalidFormatError(f"Invalid {layer_format.value} document: {e}") from e
    if not isinstance(document, dict):
        raise InvalidFormatError(
            f"Invalid {layer_format.value} document: root must be a mapping, "
            f"got {type(document).__name__}"
        )
    return document
