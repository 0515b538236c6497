"""Collection and composite value encoding."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeAlias

from cellwire.codec.envelopes import CollectionEnvelope, CompositeEnvelope
from cellwire.codec.types import (
    CollectionValue,
    ComplexValue,
    CompositeValue,
    TypeDescriptor,
)

ItemEncoder: TypeAlias = Callable[[Any, TypeDescriptor], Any]


def encode_collection(
    collection: CollectionValue, encode_item: ItemEncoder
) -> dict[str, Any]:
    """Encode every item with the collection's component type, preserving order.

    Args:
        collection: Driver collection value.
        encode_item: Recursive cell encoder bound to the current call.

    Returns:
        ``collection`` envelope mapping.
    """
    component_type = collection.component_type
    items = [
        encode_item(collection.get_item(index), component_type)
        for index in range(collection.item_count())
    ]
    return CollectionEnvelope(value=items).to_wire()


def encode_composite(
    composite: CompositeValue, encode_item: ItemEncoder
) -> dict[str, Any]:
    """Encode attributes in declaration order.

    Args:
        composite: Driver composite value.
        encode_item: Recursive cell encoder bound to the current call.

    Returns:
        ``map`` envelope mapping.
    """
    struct: dict[str, Any] = {}
    for attribute in composite.attributes():
        struct[attribute.name] = encode_item(
            composite.get_attribute_value(attribute), attribute
        )
    return CompositeEnvelope(value=struct).to_wire()


def encode_complex_value(value: ComplexValue, encode_item: ItemEncoder) -> Any:
    """Dispatch a complex value; unmodeled kinds fall back to ``str(value)``."""
    if isinstance(value, CollectionValue):
        return encode_collection(value, encode_item)
    if isinstance(value, CompositeValue):
        return encode_composite(value, encode_item)
    return str(value)
