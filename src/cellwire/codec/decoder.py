"""Plain-value decoder for client-submitted edits."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from cellwire.codec.envelopes import ATTR_BINARY, ATTR_TEXT, VALUE_TYPE_ATTR, ValueType
from cellwire.codec.errors import UnsupportedEditError

BINARY_CONTENT = "binary content"


def make_plain_cell_value(value: Any) -> Any:
    """Reduce an edited wire value to something the driver can write.

    Scalars pass through. Only text ``content`` envelopes are reversible;
    every other envelope category is display-only.

    Args:
        value: Edit value as parsed from client JSON.

    Returns:
        The value itself, or the text of a ``content`` envelope.

    Raises:
        UnsupportedEditError: If the envelope is binary content or any
            other category.
    """
    if not isinstance(value, Mapping):
        return value
    value_type = value.get(VALUE_TYPE_ATTR)
    if not isinstance(value_type, str):
        return value
    if value_type == ValueType.CONTENT:
        if value.get(ATTR_BINARY) is not None:
            raise UnsupportedEditError(
                BINARY_CONTENT, "Binary content edit is not supported yet"
            )
        return value.get(ATTR_TEXT)
    raise UnsupportedEditError(
        value_type, f"Type '{value_type}' edit is not supported yet"
    )
