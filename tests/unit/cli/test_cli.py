"""Unit tests for cellwire CLI command entrypoints."""

from __future__ import annotations

import base64
import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cellwire.cli import app

_RUNNER = CliRunner()


@pytest.mark.unit
def test_decode_text_content_prints_plain_value() -> None:
    """`cellwire decode` reduces a text content envelope to its text."""
    # Act - decode inline payload
    result = _RUNNER.invoke(app, ["decode", '{"$type": "content", "text": "hi"}'])

    # Assert - JSON string output
    assert result.exit_code == 0
    assert json.loads(result.stdout) == "hi"


@pytest.mark.unit
def test_decode_reads_file(tmp_path: Path) -> None:
    """Edit payloads can be read from a file."""
    payload_path = tmp_path / "edit.json"
    payload_path.write_text('{"a": [1, 2]}', encoding="utf-8")

    result = _RUNNER.invoke(app, ["decode", "--file", str(payload_path)])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"a": [1, 2]}


@pytest.mark.unit
def test_decode_reads_stdin() -> None:
    """Without an argument the payload comes from stdin."""
    result = _RUNNER.invoke(app, ["decode"], input="123")

    assert result.exit_code == 0
    assert json.loads(result.stdout) == 123


@pytest.mark.unit
def test_decode_unsupported_edit_exits_nonzero() -> None:
    """Display-only envelopes print the stable error code and exit 1."""
    result = _RUNNER.invoke(app, ["decode", '{"$type": "geometry"}'])

    assert result.exit_code == 1
    assert "unsupported_edit" in result.stdout
    assert "geometry" in result.stdout


@pytest.mark.unit
def test_decode_invalid_json_exits_nonzero() -> None:
    """Malformed payloads report invalid_edit_payload."""
    result = _RUNNER.invoke(app, ["decode", "{oops"])

    assert result.exit_code == 1
    assert "invalid_edit_payload" in result.stdout


@pytest.mark.unit
def test_encode_file_binary_content(tmp_path: Path) -> None:
    """`cellwire encode-file` emits a content envelope for binary files."""
    # Arrange - small binary file
    blob = tmp_path / "blob.bin"
    blob.write_bytes(b"\x89PNG\r\n")

    # Act - encode with explicit binary type
    result = _RUNNER.invoke(
        app, ["encode-file", str(blob), "--content-type", "image/png"]
    )

    # Assert - base64 inline payload and true length
    assert result.exit_code == 0
    envelope = json.loads(result.stdout)
    assert envelope["$type"] == "content"
    assert base64.b64decode(envelope["binary"]) == b"\x89PNG\r\n"
    assert envelope["contentLength"] == 6
    assert envelope["contentType"] == "image/png"


@pytest.mark.unit
def test_encode_file_guesses_text_type(tmp_path: Path) -> None:
    """Text files are detected from their name and passed through whole."""
    note = tmp_path / "note.txt"
    note.write_text("hello", encoding="utf-8")

    result = _RUNNER.invoke(app, ["encode-file", str(note)])

    assert result.exit_code == 0
    envelope = json.loads(result.stdout)
    assert envelope["text"] == "hello"
    assert "binary" not in envelope


@pytest.mark.unit
def test_config_command_shows_loaded_values(tmp_path: Path) -> None:
    """`cellwire config` prints the effective configuration."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("content:\n  chunk_size: 128\n", encoding="utf-8")

    result = _RUNNER.invoke(app, ["config", "--config", str(config_path)])

    assert result.exit_code == 0
    shown = json.loads(result.stdout)
    assert shown["content"]["chunk_size"] == 128
    assert shown["logging"]["level"] == "INFO"


@pytest.mark.unit
def test_config_command_reports_invalid_config(tmp_path: Path) -> None:
    """Invalid config files exit with status 1."""
    config_path = tmp_path / "config.json"
    config_path.write_text("{broken", encoding="utf-8")

    result = _RUNNER.invoke(app, ["config", "--config", str(config_path)])

    assert result.exit_code == 1
    assert "Invalid codec config JSON" in result.stdout
