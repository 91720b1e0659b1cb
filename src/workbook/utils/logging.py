"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain package loggers.
    - Allow optional verbose/debug modes for the CLI.

Public contracts:
    - `get_logger(name)`: Return a logger below the ``workbook`` namespace.
    - `configure_logging(verbose)`: Attach a stderr handler once.

Notes/Edge cases:
    - Library code never configures handlers; the root package logger only
      carries a ``NullHandler`` until the CLI calls `configure_logging`.
    - Logging configuration is idempotent.
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "workbook"
_FORMAT = "%(levelname)s %(name)s: %(message)s"

_root = logging.getLogger(ROOT_LOGGER_NAME)
_root.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` nested under the package logger."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Repeated calls only adjust the level.
    """

    level = logging.DEBUG if verbose else logging.WARNING
    if not any(getattr(h, "_workbook_cli", False) for h in _root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._workbook_cli = True  # type: ignore[attr-defined]
        _root.addHandler(handler)
    _root.setLevel(level)
    return _root


__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]
