"""Wire envelope models for non-scalar cell values (pure data, no IO)."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

VALUE_TYPE_ATTR = "$type"

ATTR_VALUE = "value"
ATTR_TEXT = "text"
ATTR_BINARY = "binary"


class ValueType(StrEnum):
    """Discriminator values recognized on the wire."""

    COLLECTION = "collection"
    MAP = "map"
    DOCUMENT = "document"
    CONTENT = "content"
    GEOMETRY = "geometry"


class WireEnvelope(BaseModel):
    """Base for tagged wire envelopes.

    Subclasses declare ``value_type``; ``to_wire`` emits the discriminator first,
    then only the fields that were explicitly set, under their wire aliases.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    value_type: ClassVar[ValueType]

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-compatible mapping sent to the client.

        Returns:
            Mapping with ``$type`` followed by category fields.
        """
        payload = self.model_dump(by_alias=True, exclude_unset=True)
        return {VALUE_TYPE_ATTR: self.value_type.value, **payload}


class CollectionEnvelope(WireEnvelope):
    """Ordered sequence of encoded items."""

    value_type: ClassVar[ValueType] = ValueType.COLLECTION

    value: list[Any]


class CompositeEnvelope(WireEnvelope):
    """Attribute name to encoded value, in declared attribute order."""

    value_type: ClassVar[ValueType] = ValueType.MAP

    value: dict[str, Any]


class DocumentEnvelope(WireEnvelope):
    """Serialized document with identity and content type."""

    value_type: ClassVar[ValueType] = ValueType.DOCUMENT

    id: str
    content_type: str | None = Field(alias="contentType")
    # Document properties are not exposed yet; always empty on the wire.
    properties: dict[str, Any] = Field(default_factory=dict)
    data: str


class ContentEnvelope(WireEnvelope):
    """Large text or binary payload, size-bounded for transport."""

    value_type: ClassVar[ValueType] = ValueType.CONTENT

    text: str | None = None
    binary: bool | str | None = None
    content_type: str | None = Field(default=None, alias="contentType")
    content_length: int | None = Field(default=None, alias="contentLength")


class GeometryEnvelope(WireEnvelope):
    """Geometry text plus optional reprojected text for map display."""

    value_type: ClassVar[ValueType] = ValueType.GEOMETRY

    srid: int
    text: str
    properties: dict[str, Any] = Field(default_factory=dict)
    map_text: str | None = Field(default=None, alias="mapText")
