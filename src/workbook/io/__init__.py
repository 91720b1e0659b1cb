"""Extension based registry for workbook file I/O.

Product records are read from ``.json`` or ``.yml``/``.yaml`` files and
rendered workbooks are written to ``.pdf``.  The registry dispatches based on
the file extension only.

``UnsupportedFormatError`` is raised when attempting to read or write a file
whose extension has no registered handler.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

from ..models import ProductData
from ..utils.errors import UnsupportedFormatError
from .readers.product_reader import read_json_product, read_yaml_product
from .writers.pdf_writer import save_pdf

ReaderFunc = Callable[[str | os.PathLike[str]], ProductData]
WriterFunc = Callable[[str | os.PathLike[str], bytes], None]

_READERS: dict[str, ReaderFunc] = {}
_WRITERS: dict[str, WriterFunc] = {}


def register_reader(ext: str, func: ReaderFunc) -> None:
    """Register a reader for files ending with ``ext``.

    Parameters
    ----------
    ext:
        File extension including the dot (e.g. ``".json"``).  Matching is
        case-insensitive.
    func:
        Callable that reads a file and returns a :class:`ProductData`.
    """

    _READERS[ext.lower()] = func


def register_writer(ext: str, func: WriterFunc) -> None:
    """Register a writer for files ending with ``ext``."""

    _WRITERS[ext.lower()] = func


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot).

    Returns an empty string when the path has no extension.
    """

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def read_product(path: str | os.PathLike[str]) -> ProductData:
    """Read ``path`` using the registered reader for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no reader is registered for the file extension.
    IOFormatError
        If the file cannot be parsed into a product record.
    """

    ext = get_extension(path)
    reader = _READERS.get(ext)
    if reader is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    return reader(path)


def write_file(path: str | os.PathLike[str], data: bytes) -> None:
    """Write ``data`` to ``path`` using the registered writer for its extension."""

    ext = get_extension(path)
    writer = _WRITERS.get(ext)
    if writer is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    writer(path, data)


register_reader(".json", read_json_product)
register_reader(".yml", read_yaml_product)
register_reader(".yaml", read_yaml_product)
register_writer(".pdf", save_pdf)

__all__ = [
    "ReaderFunc",
    "WriterFunc",
    "register_reader",
    "register_writer",
    "get_extension",
    "read_product",
    "write_file",
]
