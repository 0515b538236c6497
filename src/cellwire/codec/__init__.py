"""Typed value web-codec: driver cell values to JSON-safe wire envelopes."""

from cellwire.codec.content import (
    BINARY_MAX_LENGTH,
    BINARY_PREVIEW_LENGTH,
    StreamContentReader,
    encode_content,
    is_text_content_type,
)
from cellwire.codec.decoder import make_plain_cell_value
from cellwire.codec.document import encode_document
from cellwire.codec.encoder import EncodeContext, encode_row, make_web_cell_value
from cellwire.codec.envelopes import (
    VALUE_TYPE_ATTR,
    CollectionEnvelope,
    CompositeEnvelope,
    ContentEnvelope,
    DocumentEnvelope,
    GeometryEnvelope,
    ValueType,
)
from cellwire.codec.errors import (
    CodecError,
    CodecErrorCode,
    ExtractionCanceledError,
    InvalidEditPayloadError,
    SerializationError,
    UnsupportedEditError,
)
from cellwire.codec.geometry import SRID_4326, encode_geometry, same_srid_transformer
from cellwire.codec.scalars import ISO_DATE_FORMAT, format_temporal, normalize_scalar
from cellwire.codec.types import (
    AttributeDescriptor,
    CancellationMonitor,
    CollectionValue,
    ComplexValue,
    CompositeValue,
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
from cellwire.codec.wire import dumps_wire, parse_edit_value

__all__ = [
    "BINARY_MAX_LENGTH",
    "BINARY_PREVIEW_LENGTH",
    "ISO_DATE_FORMAT",
    "SRID_4326",
    "VALUE_TYPE_ATTR",
    "AttributeDescriptor",
    "CancellationMonitor",
    "CodecError",
    "CodecErrorCode",
    "CollectionEnvelope",
    "CollectionValue",
    "ComplexValue",
    "CompositeEnvelope",
    "CompositeValue",
    "ContentEnvelope",
    "ContentReader",
    "ContentValue",
    "DataFormat",
    "DocumentEnvelope",
    "DocumentValue",
    "DriverValue",
    "EncodeContext",
    "ExtractionCanceledError",
    "GeometryEnvelope",
    "GeometryTransformer",
    "GeometryValue",
    "InvalidEditPayloadError",
    "NullProgressMonitor",
    "ProgressMonitor",
    "SerializationError",
    "StreamContentReader",
    "TypeDescriptor",
    "UnsupportedEditError",
    "ValueType",
    "dumps_wire",
    "encode_content",
    "encode_document",
    "encode_geometry",
    "encode_row",
    "format_temporal",
    "is_text_content_type",
    "make_plain_cell_value",
    "make_web_cell_value",
    "normalize_scalar",
    "parse_edit_value",
    "same_srid_transformer",
]
