import json
from collections.abc import Mapping
from typing import Any

from shared.exceptions import ParseError, ValidationError

TEXT_TYPES = (str, bytes, bytearray)


def parse_document(text: str | bytes | bytearray) -> dict[str, Any]:
    """Parse a JSON document whose top-level value must be an object."""
    try:
        document = json.loads(text)
    except ValueError as exc:
        raise ParseError(f"Malformed JSON document: {exc}") from exc
    except RecursionError as exc:
        raise ParseError("JSON document is nested too deeply") from exc

    if not isinstance(document, dict):
        raise ParseError(f"Expected a JSON object, got {type(document).__name__}")
    return document


def to_mapping(source: Any) -> dict[str, Any]:
    if source is None:
        return {}
    if isinstance(source, TEXT_TYPES):
        return parse_document(source)
    if isinstance(source, Mapping):
        return dict(source)
    raise ValidationError(
        f"Expected a mapping or JSON text, got {type(source).__name__}",
        [{"field": "__root__", "message": "unsupported payload type"}],
    )
