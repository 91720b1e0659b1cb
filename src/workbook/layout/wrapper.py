"""Greedy, width-aware word wrapping.

Widths come from real glyph metrics supplied by a
:class:`~workbook.layout.document.TextMeasurer`, never from character counts.
Words are never hyphenated or split: a word wider than ``max_width`` is placed
on a line of its own, unmodified.  Joining the returned lines with single
spaces reproduces ``" ".join(text.split())``.
"""

from __future__ import annotations

from .document import TextMeasurer


def wrap_text(text: str, max_width: float, size: float, face: TextMeasurer) -> list[str]:
    """Split ``text`` into lines no wider than ``max_width`` at ``size``."""

    lines: list[str] = []
    current = ""
    for word in text.split():
        if not current:
            current = word
            continue
        candidate = f"{current} {word}"
        if face.width_of(candidate, size) <= max_width:
            current = candidate
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines


__all__ = ["wrap_text"]
