"""Codec configuration loading."""

from cellwire.config.codec_config import (
    CodecConfig,
    CodecConfigError,
    ContentSettings,
    LoggingSettings,
    LogLevel,
    build_encode_context,
    load_codec_config,
)

__all__ = [
    "CodecConfig",
    "CodecConfigError",
    "ContentSettings",
    "LogLevel",
    "LoggingSettings",
    "build_encode_context",
    "load_codec_config",
]
