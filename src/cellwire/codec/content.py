"""Large text/binary content encoding with bounded inline payloads."""

from __future__ import annotations

import base64
import codecs
import logging
from typing import Any

from cellwire.codec.envelopes import ContentEnvelope
from cellwire.codec.errors import ExtractionCanceledError, SerializationError
from cellwire.codec.types import ContentReader, ContentValue, ProgressMonitor

_LOGGER = logging.getLogger(__name__)

BINARY_PREVIEW_LENGTH = 255
BINARY_MAX_LENGTH = 1 * 1024 * 1024

DEFAULT_CHUNK_SIZE = 64 * 1024
DEFAULT_CHARSET = "utf-8"

_TEXT_APPLICATION_TYPES = frozenset(
    {
        "application/json",
        "application/xml",
        "application/javascript",
        "application/x-javascript",
        "application/yaml",
        "application/x-yaml",
        "application/sql",
    }
)


def is_text_content_type(content_type: str | None) -> bool:
    """Return whether a MIME type denotes textual content.

    Args:
        content_type: MIME type, possibly with parameters.

    Returns:
        True for ``text/*``, known textual ``application/*`` types and
        ``+json``/``+xml`` structured suffixes.
    """
    if not content_type:
        return False
    mime = content_type.split(";", 1)[0].strip().lower()
    if mime.startswith("text/"):
        return True
    if mime in _TEXT_APPLICATION_TYPES:
        return True
    return mime.endswith(("+json", "+xml"))


def _resolve_charset(charset: str | None, fallback: str) -> str:
    if not charset:
        return fallback
    try:
        return codecs.lookup(charset).name
    except LookupError:
        _LOGGER.debug("Unknown content charset %r, using %s", charset, fallback)
        return fallback


class StreamContentReader:
    """Default content reader over ``ContentValue.open_stream``.

    Reads in chunks and checks the monitor before each chunk, so a canceled
    session stops extraction between reads.
    """

    def __init__(
        self,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        default_charset: str = DEFAULT_CHARSET,
    ) -> None:
        if chunk_size < 1:
            raise ValueError("chunk_size must be positive")
        self._chunk_size = chunk_size
        self._default_charset = default_charset

    def is_text(self, content: ContentValue) -> bool:
        return is_text_content_type(content.content_type)

    def read_binary(
        self, monitor: ProgressMonitor, content: ContentValue
    ) -> bytes | None:
        stream = content.open_stream(monitor)
        if stream is None:
            return None
        chunks: list[bytes] = []
        with stream:
            while True:
                if monitor.is_canceled:
                    raise ExtractionCanceledError()
                chunk = stream.read(self._chunk_size)
                if not chunk:
                    break
                chunks.append(chunk)
        return b"".join(chunks)

    def read_text(self, monitor: ProgressMonitor, content: ContentValue) -> str | None:
        payload = self.read_binary(monitor, content)
        if payload is None:
            return None
        charset = _resolve_charset(content.charset, self._default_charset)
        return payload.decode(charset)


def binary_to_text(payload: bytes) -> str:
    """Best-effort text projection of raw bytes; undecodable bytes become U+FFFD."""
    return payload.decode("utf-8", errors="replace")


def _inline_payload(payload: bytes) -> bytes:
    # Oversized payloads are cut to the preview bound, not the max bound.
    if len(payload) > BINARY_MAX_LENGTH:
        return payload[:BINARY_PREVIEW_LENGTH]
    return payload


def encode_content(
    content: ContentValue, reader: ContentReader, monitor: ProgressMonitor
) -> dict[str, Any]:
    """Encode text or binary content into a ``content`` envelope.

    Text content is passed through whole. Binary content carries a
    best-effort text projection of the entire payload and a base64 inline
    copy bounded by ``BINARY_MAX_LENGTH``; ``contentLength`` always reports
    the untruncated size.

    Args:
        content: Driver content value.
        reader: Content classifier and extractor.
        monitor: Session progress monitor forwarded to the reader.

    Returns:
        ``content`` envelope mapping.

    Raises:
        SerializationError: If reading the payload fails or is canceled.
    """
    envelope = ContentEnvelope()
    payload: bytes | None = None
    try:
        if reader.is_text(content):
            envelope.text = reader.read_text(monitor, content)
        else:
            envelope.binary = True
            payload = reader.read_binary(monitor, content)
            if payload is not None:
                preview = payload[:BINARY_PREVIEW_LENGTH]
                _LOGGER.debug(
                    "Binary content %d bytes, preview %d bytes",
                    len(payload),
                    len(preview),
                )
                envelope.text = binary_to_text(payload)
                inline = _inline_payload(payload)
                envelope.binary = base64.b64encode(inline).decode("ascii")
            else:
                envelope.text = None
    except Exception as exc:
        _LOGGER.debug("Content extraction failed: %s", exc)
        raise SerializationError("Error reading content value", cause=exc) from exc

    envelope.content_type = content.content_type
    content_length = content.content_length
    if content_length is None and payload is not None:
        content_length = len(payload)
    envelope.content_length = content_length
    return envelope.to_wire()
