"""Geometry value encoding."""

from __future__ import annotations

import logging
from typing import Any

from cellwire.codec.envelopes import GeometryEnvelope
from cellwire.codec.types import GeometryTransformer, GeometryValue

_LOGGER = logging.getLogger(__name__)

SRID_4326 = 4326


def same_srid_transformer(
    geometry: GeometryValue, target_srid: int
) -> GeometryValue | None:
    """Transformer that only handles the identity case.

    Returns the input when it is already in ``target_srid``; None otherwise.
    """
    if geometry.srid == target_srid:
        return geometry
    return None


def _reproject(
    geometry: GeometryValue, transformer: GeometryTransformer | None
) -> GeometryValue | None:
    """Reproject to SRID 4326. Never raises; failures yield None."""
    if transformer is None:
        return None
    try:
        return transformer(geometry, SRID_4326)
    except Exception as exc:
        _LOGGER.debug(
            "Geometry reprojection from SRID %s failed: %s", geometry.srid, exc
        )
        return None


def encode_geometry(
    geometry: GeometryValue, transformer: GeometryTransformer | None
) -> dict[str, Any]:
    """Encode a geometry, adding ``mapText`` when reprojection yields a new value.

    Args:
        geometry: Driver geometry value.
        transformer: Optional reprojection function.

    Returns:
        ``geometry`` envelope mapping.
    """
    envelope = GeometryEnvelope(
        srid=geometry.srid,
        text=str(geometry),
        properties=dict(geometry.properties or {}),
    )
    projected = _reproject(geometry, transformer)
    if projected is not None and projected is not geometry:
        envelope.map_text = str(projected)
    return envelope.to_wire()
