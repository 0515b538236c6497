"""Typer CLI entrypoint for cellwire."""

from __future__ import annotations

import logging
import mimetypes
import sys
from pathlib import Path
from typing import Annotated, BinaryIO

import typer
from rich.console import Console
from rich.json import JSON
from rich.logging import RichHandler
from rich.markup import escape

from cellwire.codec import (
    CodecError,
    ProgressMonitor,
    dumps_wire,
    make_web_cell_value,
    parse_edit_value,
)
from cellwire.config import (
    CodecConfig,
    CodecConfigError,
    build_encode_context,
    load_codec_config,
)

app = typer.Typer(help="cellwire CLI")
_CONSOLE = Console()
_LOGGING_CONFIGURED = False
_DEFAULT_CONFIG_FILE = Path(".cellwire") / "config.yaml"

_ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        file_okay=True,
        dir_okay=False,
        help="Path to codec config YAML/JSON file.",
    ),
]


class FileContent:
    """Local file exposed as a driver content value."""

    def __init__(self, path: Path, content_type: str | None) -> None:
        self._path = path
        self._content_type = content_type

    def is_null(self) -> bool:
        return False

    @property
    def content_type(self) -> str | None:
        return self._content_type

    @property
    def content_length(self) -> int | None:
        return self._path.stat().st_size

    @property
    def charset(self) -> str | None:
        return None

    def open_stream(self, monitor: ProgressMonitor) -> BinaryIO | None:
        return self._path.open("rb")


def _configure_logging(config: CodecConfig) -> None:
    """Configure Rich-backed logging once for CLI commands."""
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if _LOGGING_CONFIGURED:
        return
    logging.basicConfig(
        level=config.logging.level.value,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
    )
    _LOGGING_CONFIGURED = True


def _load_config(config_file: Path | None) -> CodecConfig:
    """Load config or exit with a readable error.

    Args:
        config_file: Optional config file override.

    Returns:
        Loaded config.
    """
    try:
        config = load_codec_config(config_file or _DEFAULT_CONFIG_FILE)
    except CodecConfigError as exc:
        _CONSOLE.print(f"[bold red]{escape(str(exc))}[/bold red]", soft_wrap=True)
        raise typer.Exit(code=1) from exc
    _configure_logging(config)
    return config


def _print_wire(value: object) -> None:
    _CONSOLE.print(JSON(dumps_wire(value).decode("utf-8")), soft_wrap=True)


def _print_codec_error(exc: CodecError) -> None:
    _CONSOLE.print(
        f"[bold red]Error ({exc.code}):[/bold red] {escape(str(exc))}",
        soft_wrap=True,
    )


@app.command("decode")
def decode_command(
    payload: Annotated[
        str | None,
        typer.Argument(help="Edit value JSON; read from stdin when omitted."),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            help="Read the edit value JSON from a file.",
        ),
    ] = None,
    config_file: _ConfigOption = None,
) -> None:
    """Reduce a client edit value to the plain value written to the database.

    Args:
        payload: Inline edit value JSON.
        file: File holding the edit value JSON.
        config_file: Optional codec config file path override.
    """
    _load_config(config_file)
    if file is not None:
        raw: str | bytes = file.read_bytes()
    elif payload is not None:
        raw = payload
    else:
        raw = sys.stdin.read()
    try:
        value = parse_edit_value(raw)
    except CodecError as exc:
        _print_codec_error(exc)
        raise typer.Exit(code=1) from exc
    _print_wire(value)


@app.command("encode-file")
def encode_file_command(
    path: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            help="File to encode as a content value.",
        ),
    ],
    content_type: Annotated[
        str | None,
        typer.Option(help="MIME type; guessed from the file name when omitted."),
    ] = None,
    config_file: _ConfigOption = None,
) -> None:
    """Encode a local file the way a CLOB/BLOB cell would be sent to clients.

    Args:
        path: File to encode.
        content_type: Optional MIME type override.
        config_file: Optional codec config file path override.
    """
    config = _load_config(config_file)
    effective_type = content_type or mimetypes.guess_type(path.name)[0]
    context = build_encode_context(config)
    try:
        value = make_web_cell_value(
            FileContent(path, effective_type or "application/octet-stream"),
            None,
            context,
        )
    except CodecError as exc:
        _print_codec_error(exc)
        raise typer.Exit(code=1) from exc
    _print_wire(value)


@app.command("config")
def config_command(config_file: _ConfigOption = None) -> None:
    """Show the effective codec configuration.

    Args:
        config_file: Optional codec config file path override.
    """
    config = _load_config(config_file)
    _CONSOLE.print(JSON(config.model_dump_json()), soft_wrap=True)


def main() -> None:
    """Console script entrypoint."""
    app()
