"""Deterministic codec error contracts."""

from __future__ import annotations

from enum import StrEnum


class CodecErrorCode(StrEnum):
    """Stable codec error codes."""

    SERIALIZATION_FAILED = "serialization_failed"
    UNSUPPORTED_EDIT = "unsupported_edit"
    INVALID_EDIT_PAYLOAD = "invalid_edit_payload"
    EXTRACTION_CANCELED = "extraction_canceled"


class CodecError(RuntimeError):
    """Codec failure with stable deterministic code."""

    def __init__(
        self,
        code: CodecErrorCode,
        message: str,
        *,
        data: dict[str, object] | None = None,
    ) -> None:
        """Create codec failure.

        Args:
            code: Stable codec error code.
            message: Human-readable error message.
            data: Optional structured payload for diagnostics.
        """
        super().__init__(message)
        self.code = code
        self.data = data or {}


class SerializationError(CodecError):
    """Raised when document or content extraction fails."""

    def __init__(self, message: str, *, cause: BaseException) -> None:
        """Create serialization failure.

        Args:
            message: Human-readable error message.
            cause: Original low-level error.
        """
        super().__init__(
            CodecErrorCode.SERIALIZATION_FAILED,
            message,
            data={"cause": type(cause).__name__},
        )
        self.cause = cause


class UnsupportedEditError(CodecError):
    """Raised when an edit targets a display-only value category."""

    def __init__(self, value_type: str, message: str) -> None:
        """Create unsupported-edit failure.

        Args:
            value_type: Offending discriminator or ``"binary content"``.
            message: Human-readable error message.
        """
        super().__init__(
            CodecErrorCode.UNSUPPORTED_EDIT,
            message,
            data={"value_type": value_type},
        )
        self.value_type = value_type


class InvalidEditPayloadError(CodecError):
    """Raised when a submitted edit payload is not valid JSON."""

    def __init__(self, message: str) -> None:
        super().__init__(CodecErrorCode.INVALID_EDIT_PAYLOAD, message)


class ExtractionCanceledError(CodecError):
    """Raised when the progress monitor cancels content extraction."""

    def __init__(self, message: str = "Content extraction canceled.") -> None:
        super().__init__(CodecErrorCode.EXTRACTION_CANCELED, message)
