"""Cell value encoder: recursive dispatch over value capabilities."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from cellwire.codec.complex import encode_complex_value
from cellwire.codec.content import StreamContentReader, encode_content
from cellwire.codec.document import encode_document
from cellwire.codec.geometry import encode_geometry
from cellwire.codec.scalars import normalize_scalar
from cellwire.codec.types import (
    ComplexValue,
    ContentReader,
    ContentValue,
    DataFormat,
    DocumentValue,
    DriverValue,
    GeometryTransformer,
    GeometryValue,
    NullProgressMonitor,
    ProgressMonitor,
    TypeDescriptor,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodeContext:
    """Caller-owned collaborators for one encode call.

    Built by the session per request; the codec reads it and never keeps it.
    """

    monitor: ProgressMonitor = field(default_factory=NullProgressMonitor)
    content_reader: ContentReader = field(default_factory=StreamContentReader)
    geometry_transformer: GeometryTransformer | None = None


def make_web_cell_value(
    value: Any,
    type_descriptor: TypeDescriptor | None,
    context: EncodeContext,
    data_format: DataFormat = DataFormat.RESULTSET,
) -> Any:
    """Encode one cell value for the wire.

    Temporal values become ISO-8601 strings. Driver values become tagged
    envelopes (checked in order: document, complex, geometry, content) or
    None when null. Anything else is returned unchanged.

    Args:
        value: Raw cell value from the driver.
        type_descriptor: Declared type of the cell; forwarded, not inspected.
        context: Per-call collaborators (monitor, content reader, transformer).
        data_format: Display mode, threaded through nested values.

    Returns:
        Scalar or envelope mapping.

    Raises:
        SerializationError: If document or content extraction fails, at any
            nesting depth.
    """
    if not isinstance(value, DriverValue):
        return normalize_scalar(value)
    if value.is_null():
        return None

    def encode_item(item: Any, item_type: TypeDescriptor) -> Any:
        return make_web_cell_value(item, item_type, context, data_format)

    if isinstance(value, DocumentValue):
        return encode_document(value, context.monitor)
    if isinstance(value, ComplexValue):
        return encode_complex_value(value, encode_item)
    if isinstance(value, GeometryValue):
        return encode_geometry(value, context.geometry_transformer)
    if isinstance(value, ContentValue):
        return encode_content(value, context.content_reader, context.monitor)
    _LOGGER.debug("Unmodeled driver value %s passed through", type(value).__name__)
    return value


def encode_row(
    values: Sequence[Any],
    type_descriptors: Sequence[TypeDescriptor | None],
    context: EncodeContext,
    data_format: DataFormat = DataFormat.RESULTSET,
) -> list[Any]:
    """Encode one result row positionally.

    Raises:
        ValueError: If values and type descriptors differ in length.
    """
    if len(values) != len(type_descriptors):
        raise ValueError(
            f"Row has {len(values)} values but {len(type_descriptors)} types"
        )
    return [
        make_web_cell_value(value, type_descriptor, context, data_format)
        for value, type_descriptor in zip(values, type_descriptors, strict=True)
    ]
