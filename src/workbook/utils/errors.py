"""Typed exceptions for font resources, text encoding and I/O formats."""


class WorkbookError(Exception):
    """Base class for workbook generation errors."""


class ResourceError(WorkbookError):
    """Raised when a required font face cannot be loaded.

    Fatal for the current generation call; no partial document is produced.
    """


class EncodingError(WorkbookError):
    """Raised when text reaching the sink is not representable by its font.

    Normalization and font coverage are kept in lockstep, so this signals an
    internal invariant violation rather than bad input.
    """


class IOFormatError(ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader or writer is registered for a file format."""
