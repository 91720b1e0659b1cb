"""PDF document writer.

Purpose:
    Turn a composed :class:`~workbook.layout.document.Document` into PDF bytes.

Key responsibilities:
    - Replay every page's primitives onto a reportlab canvas.
    - Set the document info dictionary (title, author, subject).
    - Check each text run against the font coverage before drawing.

Inputs/Outputs:
    - Inputs: document, loaded :class:`~workbook.fonts.FontResource`.
    - Outputs: immutable ``bytes``; nothing touches the filesystem unless
      :func:`save_pdf` is used.

Notes/Edge cases:
    - The canvas runs in ``invariant`` mode so identical input yields
      byte-identical output.
    - Any exception aborts before bytes are returned; there is no partial
      document.

Dependencies:
    - `reportlab`.
"""

from __future__ import annotations

import io
import os
from pathlib import Path

from reportlab.pdfgen import canvas

from ...fonts import FontResource, FontRole
from ...layout.document import Color, Document
from ...utils.logging import get_logger

logger = get_logger(__name__)

PRODUCER = "workbook"


class CanvasSurface:
    """:class:`~workbook.layout.document.DrawingSurface` over a reportlab canvas."""

    def __init__(self, pdf: canvas.Canvas, fonts: FontResource) -> None:
        self._pdf = pdf
        self._fonts = fonts

    def draw_text(
        self, text: str, *, x: float, y: float, size: float, role: FontRole, color: Color
    ) -> None:
        self._fonts.ensure_encodable(text, role)
        self._pdf.setFont(self._fonts.embed(role), size)
        self._pdf.setFillColorRGB(*color)
        self._pdf.drawString(x, y, text)

    def draw_rectangle(
        self, *, x: float, y: float, width: float, height: float, color: Color
    ) -> None:
        self._pdf.setFillColorRGB(*color)
        self._pdf.rect(x, y, width, height, stroke=0, fill=1)

    def draw_line(
        self,
        *,
        start: tuple[float, float],
        end: tuple[float, float],
        thickness: float,
        color: Color,
    ) -> None:
        self._pdf.setStrokeColorRGB(*color)
        self._pdf.setLineWidth(thickness)
        self._pdf.line(start[0], start[1], end[0], end[1])


def write_pdf(document: Document, fonts: FontResource) -> bytes:
    """Render ``document`` and return the PDF byte stream."""

    buffer = io.BytesIO()
    first = document.pages[0]
    pdf = canvas.Canvas(buffer, pagesize=(first.width, first.height), invariant=1)
    pdf.setTitle(document.title)
    pdf.setAuthor(document.author)
    pdf.setSubject(document.subject)
    pdf.setCreator(PRODUCER)

    surface = CanvasSurface(pdf, fonts)
    for page in document.pages:
        pdf.setPageSize((page.width, page.height))
        page.replay(surface)
        pdf.showPage()
    pdf.save()

    data = buffer.getvalue()
    logger.debug("rendered %d page(s), %d bytes", len(document.pages), len(data))
    return data


def save_pdf(path: str | os.PathLike[str], data: bytes) -> None:
    """Write rendered ``data`` to ``path``, creating parent directories."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(data)


__all__ = ["CanvasSurface", "PRODUCER", "write_pdf", "save_pdf"]
