"""Capability contracts for driver-supplied values and external collaborators.

The codec never constructs these objects. Drivers (or test fakes) implement
the protocols; dispatch checks them structurally at runtime.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Any, BinaryIO, Protocol, runtime_checkable


class DataFormat(StrEnum):
    """Display mode the result set was requested in."""

    RESULTSET = "resultset"
    DOCUMENT = "document"
    GRAPH = "graph"
    TIMESERIES = "timeseries"


class TypeDescriptor(Protocol):
    """Opaque driver type metadata. Forwarded, never inspected."""


@runtime_checkable
class AttributeDescriptor(TypeDescriptor, Protocol):
    """Type metadata of one composite attribute."""

    @property
    def name(self) -> str:
        """Attribute name, unique within its composite."""
        ...


@runtime_checkable
class ProgressMonitor(Protocol):
    """Session-owned cooperative cancellation token."""

    @property
    def is_canceled(self) -> bool:
        """Whether the owning session requested cancellation."""
        ...


class NullProgressMonitor:
    """Monitor that never cancels."""

    @property
    def is_canceled(self) -> bool:
        return False


class CancellationMonitor:
    """Thread-safe monitor backed by a ``threading.Event``."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation of in-flight extraction."""
        self._event.set()

    @property
    def is_canceled(self) -> bool:
        return self._event.is_set()


@runtime_checkable
class DriverValue(Protocol):
    """Any driver-specific value object."""

    def is_null(self) -> bool:
        """Whether the value represents SQL NULL."""
        ...


@runtime_checkable
class ComplexValue(DriverValue, Protocol):
    """Structured value (array, struct, reference and so on)."""

    @property
    def value_type(self) -> TypeDescriptor:
        """Type descriptor of the whole value."""
        ...


@runtime_checkable
class CollectionValue(ComplexValue, Protocol):
    """Array-like value with a declared component type."""

    @property
    def component_type(self) -> TypeDescriptor:
        """Type descriptor shared by every item."""
        ...

    def item_count(self) -> int:
        """Number of items."""
        ...

    def get_item(self, index: int) -> Any:
        """Return the raw item at ``index``."""
        ...


@runtime_checkable
class CompositeValue(ComplexValue, Protocol):
    """Struct-like value with named, ordered attributes."""

    def attributes(self) -> Sequence[AttributeDescriptor]:
        """Attribute descriptors in declaration order."""
        ...

    def get_attribute_value(self, attribute: AttributeDescriptor) -> Any:
        """Return the raw value of one attribute."""
        ...


@runtime_checkable
class DocumentValue(DriverValue, Protocol):
    """Semi-structured value that can serialize itself."""

    @property
    def document_id(self) -> object:
        """Document identity; rendered with ``str``."""
        ...

    @property
    def document_content_type(self) -> str | None:
        """MIME type of the serialized form."""
        ...

    def serialize_document(
        self, monitor: ProgressMonitor, sink: BinaryIO, charset: str
    ) -> None:
        """Write the serialized document to ``sink`` using ``charset``."""
        ...


@runtime_checkable
class ContentValue(DriverValue, Protocol):
    """Large text or binary value (CLOB/BLOB and friends)."""

    @property
    def content_type(self) -> str | None:
        """MIME type of the payload."""
        ...

    @property
    def content_length(self) -> int | None:
        """True payload length in bytes, when known."""
        ...

    @property
    def charset(self) -> str | None:
        """Charset of text payloads, when known."""
        ...

    def open_stream(self, monitor: ProgressMonitor) -> BinaryIO | None:
        """Open the raw payload stream, or return None when there is no data."""
        ...


@runtime_checkable
class GeometryValue(DriverValue, Protocol):
    """Spatial value. ``str(geometry)`` yields its well-known text."""

    @property
    def srid(self) -> int:
        """Spatial reference id."""
        ...

    @property
    def properties(self) -> Mapping[str, Any] | None:
        """Extra geometry properties passed through to the client."""
        ...


class ContentReader(Protocol):
    """Classifies and extracts content payloads."""

    def is_text(self, content: ContentValue) -> bool:
        """Whether the content should be handled as text."""
        ...

    def read_text(self, monitor: ProgressMonitor, content: ContentValue) -> str | None:
        """Read the full text payload."""
        ...

    def read_binary(
        self, monitor: ProgressMonitor, content: ContentValue
    ) -> bytes | None:
        """Read the full raw payload."""
        ...


class GeometryTransformer(Protocol):
    """Reprojects a geometry into another spatial reference system."""

    def __call__(
        self, geometry: GeometryValue, target_srid: int
    ) -> GeometryValue | None:
        """Return the reprojected geometry, the input itself, or None."""
        ...
