"""JSON framing of encoded values and edit payloads."""

from __future__ import annotations

import json
from typing import Any

from pydantic_core import PydanticSerializationError, to_json

from cellwire.codec.decoder import make_plain_cell_value
from cellwire.codec.errors import InvalidEditPayloadError


def dumps_wire(value: Any, *, indent: int | None = None) -> bytes:
    """Serialize an encoded cell value (or row) to JSON bytes.

    ``Decimal``, ``UUID`` and raw ``bytes`` scalars are rendered as strings,
    bytes as base64.

    Raises:
        TypeError: On values that have no JSON form.
    """
    try:
        return to_json(value, indent=indent, bytes_mode="base64")
    except PydanticSerializationError as exc:
        raise TypeError(f"Value is not wire serializable: {exc}") from exc


def parse_edit_value(raw: str | bytes) -> Any:
    """Parse a JSON edit payload and reduce it to a plain value.

    Raises:
        InvalidEditPayloadError: If the payload is not valid JSON.
        UnsupportedEditError: If the payload is a display-only envelope.
    """
    try:
        value = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidEditPayloadError(f"Invalid edit payload JSON: {exc}") from exc
    return make_plain_cell_value(value)
