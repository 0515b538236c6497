"""Document value encoding."""

from __future__ import annotations

import io
import logging
from typing import Any

from cellwire.codec.envelopes import DocumentEnvelope
from cellwire.codec.errors import SerializationError
from cellwire.codec.types import DocumentValue, ProgressMonitor

_LOGGER = logging.getLogger(__name__)

DOCUMENT_CHARSET = "utf-8"


def encode_document(
    document: DocumentValue, monitor: ProgressMonitor
) -> dict[str, Any]:
    """Serialize a document into a ``document`` envelope.

    Args:
        document: Driver document value.
        monitor: Session progress monitor forwarded to the serializer.

    Returns:
        ``document`` envelope mapping.

    Raises:
        SerializationError: If serialization or UTF-8 decoding fails.
    """
    try:
        sink = io.BytesIO()
        document.serialize_document(monitor, sink, DOCUMENT_CHARSET)
        data = sink.getvalue().decode(DOCUMENT_CHARSET)
    except Exception as exc:
        _LOGGER.debug("Document serialization failed: %s", exc)
        raise SerializationError("Error serializing document", cause=exc) from exc

    document_id = document.document_id
    return DocumentEnvelope(
        id="" if document_id is None else str(document_id),
        content_type=document.document_content_type,
        properties={},
        data=data,
    ).to_wire()
