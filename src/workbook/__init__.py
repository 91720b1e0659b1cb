"""Workbook document engine.

Turns a loosely structured product description into a fixed five-page PDF
workbook: text is normalized to what the embedded fonts can render, wrapped
with real glyph metrics and laid out on hand-authored page templates.
"""

from .generate import build_document, generate_workbook, generate_workbook_async
from .models import NormalizedContent, ProductData
from .utils.errors import EncodingError, ResourceError, WorkbookError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ProductData",
    "NormalizedContent",
    "build_document",
    "generate_workbook",
    "generate_workbook_async",
    "WorkbookError",
    "ResourceError",
    "EncodingError",
]
