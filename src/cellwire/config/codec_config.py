"""Codec config models and loading helpers."""

from __future__ import annotations

import codecs
import json
from enum import StrEnum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cellwire.codec.content import (
    DEFAULT_CHARSET,
    DEFAULT_CHUNK_SIZE,
    StreamContentReader,
)
from cellwire.codec.encoder import EncodeContext
from cellwire.codec.types import (
    GeometryTransformer,
    NullProgressMonitor,
    ProgressMonitor,
)


class LogLevel(StrEnum):
    """Supported logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ContentSettings(BaseModel):
    """Stream content reader configuration."""

    model_config = ConfigDict(extra="forbid")

    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, ge=1)
    default_charset: str = DEFAULT_CHARSET

    @field_validator("default_charset")
    @classmethod
    def _known_charset(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown charset: {value!r}") from exc
        return value


class LoggingSettings(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = LogLevel.INFO


class CodecConfig(BaseModel):
    """Root codec configuration model."""

    model_config = ConfigDict(extra="forbid")

    content: ContentSettings = ContentSettings()
    logging: LoggingSettings = LoggingSettings()


class CodecConfigError(RuntimeError):
    """Raised when codec config cannot be decoded or validated."""


def _decode_config_payload(path: Path) -> dict[str, object]:
    """Decode codec config payload from JSON or YAML.

    Args:
        path: Config file path.

    Returns:
        Parsed mapping payload.

    Raises:
        CodecConfigError: If decode fails or payload is not an object.
    """
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise CodecConfigError(f"Invalid codec config JSON: {exc}") from exc
    else:
        try:
            payload = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise CodecConfigError(f"Invalid codec config YAML: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise CodecConfigError("Invalid codec config payload: root must be an object")
    return payload


def load_codec_config(path: Path) -> CodecConfig:
    """Load codec config from disk, defaulting when missing.

    Args:
        path: Config file path.

    Returns:
        Parsed config, or defaults when the file does not exist.

    Raises:
        CodecConfigError: If payload decode or validation fails.
    """
    if not path.exists():
        return CodecConfig()
    payload = _decode_config_payload(path)
    try:
        return CodecConfig.model_validate(payload)
    except ValidationError as exc:
        raise CodecConfigError(f"Invalid codec config payload: {exc}") from exc


def build_encode_context(
    config: CodecConfig,
    *,
    monitor: ProgressMonitor | None = None,
    geometry_transformer: GeometryTransformer | None = None,
) -> EncodeContext:
    """Build a per-call encode context from config and session collaborators.

    Args:
        config: Loaded codec config.
        monitor: Session progress monitor; never-canceling when omitted.
        geometry_transformer: Optional reprojection function.

    Returns:
        Encode context with a configured stream content reader.
    """
    reader = StreamContentReader(
        chunk_size=config.content.chunk_size,
        default_charset=config.content.default_charset,
    )
    return EncodeContext(
        monitor=monitor or NullProgressMonitor(),
        content_reader=reader,
        geometry_transformer=geometry_transformer,
    )
