"""Typer-based command line interface for workbook generation.

The ``build`` command reads a product record (JSON or YAML), renders the
five-page workbook and writes it as PDF.  ``filename`` prints the file name a
title maps to.

Exit codes
----------
0 success
3 I/O error (missing file, unsupported extension, malformed product record)
4 configuration error
5 resource error (a font face failed to load)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import LayoutConfig, load_config
from .generate import generate_workbook
from .io import read_product, write_file
from .utils.errors import IOFormatError, ResourceError
from .utils.filenames import workbook_filename
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

logger = get_logger(__name__)

app = typer.Typer(
    name="workbook",
    help="Render product descriptions into printable PDF workbooks.",
)

EXIT_IO = 3
EXIT_CONFIG = 4
EXIT_RESOURCE = 5


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load_cfg(path: Path | None) -> LayoutConfig:
    try:
        return load_config(path)
    except FileNotFoundError:
        _safe_exit(EXIT_CONFIG, f"Config file not found: {path}")
    except (ValidationError, yaml.YAMLError, AttributeError, TypeError) as exc:
        _safe_exit(EXIT_CONFIG, f"Invalid configuration: {exc}")


@app.callback()
def main() -> None:
    """Entry point for the workbook command group."""
    pass


@app.command()
def build(
    in_path: Path = typer.Option(..., "--in", help="Product record (.json, .yml or .yaml)."),
    out_path: Optional[Path] = typer.Option(
        None, "--out", help="Destination PDF. Defaults to a name derived from the title."
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML layout overrides."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Render the workbook for ``--in`` and write it as PDF."""

    configure_logging(verbose)
    cfg = _load_cfg(config)

    try:
        product = read_product(in_path)
    except FileNotFoundError:
        _safe_exit(EXIT_IO, f"Input file not found: {in_path}")
    except (IOFormatError, OSError) as exc:
        _safe_exit(EXIT_IO, f"{in_path}: {exc}")

    try:
        data = generate_workbook(product, config=cfg)
    except ResourceError as exc:
        _safe_exit(EXIT_RESOURCE, f"Font resource error: {exc}")

    target = out_path if out_path is not None else in_path.parent / workbook_filename(product.title)
    try:
        write_file(target, data)
    except (IOFormatError, OSError) as exc:
        _safe_exit(EXIT_IO, f"{target}: {exc}")

    logger.info("wrote %s", target)
    typer.echo(str(target))


@app.command()
def filename(
    title: str = typer.Argument(..., help="Product title."),
    default: str = typer.Option("workbook", "--default", help="Name used when nothing remains."),
) -> None:
    """Print the file name a title maps to."""

    typer.echo(workbook_filename(title, default))


__all__ = ["app"]
