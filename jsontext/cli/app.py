"""Main Typer application and shared utilities."""

import json
import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import Any

import typer

from jsontext.cli.console import print_header
from jsontext.version import __version__

APP_NAME = "JSONText"
APP_DESCRIPTION = "Query and update JSON documents with operators or JSONPath"

app = typer.Typer(
    name="jsontext",
    help=APP_DESCRIPTION,
    add_completion=False,
    pretty_exceptions_show_locals=False,
    no_args_is_help=True,
)


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        print_header(f"{APP_NAME} v{__version__}", APP_DESCRIPTION)
        raise typer.Exit()


def configure_logging(level: str, verbose: bool = False):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if verbose:
        logging.getLogger("jsontext").setLevel(logging.DEBUG)


def read_source(source: str) -> str:
    """Read JSON text from a file path, or stdin when source is '-'."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).expanduser().read_text(encoding="utf-8")


def write_source(source: str, text: str) -> None:
    """Atomically replace the file at source with text."""
    path = Path(source).expanduser()
    fd, temp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp", prefix=path.name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(temp_path, path)
    except Exception:
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise


def parse_value(raw: str | None) -> Any:
    """Read a command-line value as JSON if it parses, else as a plain string."""
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


# Common options
ReturnTypeOption = typer.Option(
    None,
    "--return-type", "-r",
    help="Output shape: json, array or typed (defaults to config)",
)

BackendOption = typer.Option(
    None,
    "--backend", "-b",
    help="Operator vocabulary (defaults to config)",
)
