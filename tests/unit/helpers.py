"""Test-only fakes of driver value protocols. Not part of the codec API."""

from __future__ import annotations

import io
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, BinaryIO

from cellwire.codec.types import ProgressMonitor


@dataclass(frozen=True)
class FakeType:
    """Opaque type descriptor; ``name`` doubles as attribute name."""

    name: str


@dataclass
class FakeCollection:
    items: list[Any]
    component_type: FakeType = field(default_factory=lambda: FakeType("item"))
    null: bool = False

    @property
    def value_type(self) -> FakeType:
        return FakeType("array")

    def is_null(self) -> bool:
        return self.null

    def item_count(self) -> int:
        return len(self.items)

    def get_item(self, index: int) -> Any:
        return self.items[index]


@dataclass
class FakeComposite:
    values: Sequence[tuple[str, Any]]

    @property
    def value_type(self) -> FakeType:
        return FakeType("struct")

    def is_null(self) -> bool:
        return False

    def attributes(self) -> list[FakeType]:
        return [FakeType(name) for name, _ in self.values]

    def get_attribute_value(self, attribute: FakeType) -> Any:
        return dict(self.values)[attribute.name]


@dataclass
class FakeReference:
    """Complex value that is neither a collection nor a composite."""

    target: str

    @property
    def value_type(self) -> FakeType:
        return FakeType("ref")

    def is_null(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"ref:{self.target}"


@dataclass
class FakeDocument:
    data: bytes
    document_id: object = "doc-1"
    document_content_type: str | None = "application/json"
    error: Exception | None = None
    monitors: list[ProgressMonitor] = field(default_factory=list)
    charsets: list[str] = field(default_factory=list)

    def is_null(self) -> bool:
        return False

    def serialize_document(
        self, monitor: ProgressMonitor, sink: BinaryIO, charset: str
    ) -> None:
        self.monitors.append(monitor)
        self.charsets.append(charset)
        if self.error is not None:
            raise self.error
        sink.write(self.data)


@dataclass
class FakeContent:
    payload: bytes | None
    content_type: str | None = "application/octet-stream"
    content_length: int | None = None
    charset: str | None = None
    null: bool = False

    def __post_init__(self) -> None:
        if self.content_length is None and self.payload is not None:
            self.content_length = len(self.payload)

    def is_null(self) -> bool:
        return self.null

    def open_stream(self, monitor: ProgressMonitor) -> BinaryIO | None:
        if self.payload is None:
            return None
        return io.BytesIO(self.payload)


@dataclass
class FakeGeometry:
    wkt: str
    srid: int = 4326
    properties: Mapping[str, Any] | None = None

    def is_null(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.wkt


class FailingReader:
    """Content reader whose extraction always fails."""

    def __init__(self, error: Exception) -> None:
        self._error = error

    def is_text(self, content: Any) -> bool:
        return False

    def read_text(self, monitor: ProgressMonitor, content: Any) -> str | None:
        raise self._error

    def read_binary(self, monitor: ProgressMonitor, content: Any) -> bytes | None:
        raise self._error
