"""Page and document model built by :mod:`workbook.layout.builder`.

Pages record drawing primitives at absolute coordinates with the origin at the
bottom-left corner, the same convention the reportlab canvas uses.  The
builder draws through the narrow :class:`DrawingSurface` protocol and measures
through :class:`TextMeasurer`, so layout can be exercised without a PDF sink.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Union, runtime_checkable

from ..fonts import FontRole

Color = tuple[float, float, float]


@dataclass(slots=True, frozen=True)
class TextBlock:
    """A single line of text placed at its baseline origin."""

    text: str
    x: float
    y: float
    size: float
    role: FontRole
    color: Color


@dataclass(slots=True, frozen=True)
class Rect:
    """A filled rectangle anchored at its bottom-left corner."""

    x: float
    y: float
    width: float
    height: float
    color: Color


@dataclass(slots=True, frozen=True)
class Rule:
    """A stroked straight line."""

    x1: float
    y1: float
    x2: float
    y2: float
    thickness: float
    color: Color


Primitive = Union[TextBlock, Rect, Rule]


@runtime_checkable
class TextMeasurer(Protocol):
    """Measurement-only capability used for wrapping."""

    def width_of(self, text: str, size: float) -> float:
        ...


@runtime_checkable
class DrawingSurface(Protocol):
    """Drawing capability implemented by pages and by the PDF sink."""

    def draw_text(
        self, text: str, *, x: float, y: float, size: float, role: FontRole, color: Color
    ) -> None:
        ...

    def draw_rectangle(
        self, *, x: float, y: float, width: float, height: float, color: Color
    ) -> None:
        ...

    def draw_line(
        self,
        *,
        start: tuple[float, float],
        end: tuple[float, float],
        thickness: float,
        color: Color,
    ) -> None:
        ...


@dataclass(slots=True)
class Page:
    """A fixed-size canvas and its ordered primitives."""

    name: str
    width: float
    height: float
    primitives: list[Primitive] = field(default_factory=list)

    def draw_text(
        self, text: str, *, x: float, y: float, size: float, role: FontRole, color: Color
    ) -> None:
        self.primitives.append(TextBlock(text, x, y, size, FontRole(role), tuple(color)))

    def draw_rectangle(
        self, *, x: float, y: float, width: float, height: float, color: Color
    ) -> None:
        self.primitives.append(Rect(x, y, width, height, tuple(color)))

    def draw_line(
        self,
        *,
        start: tuple[float, float],
        end: tuple[float, float],
        thickness: float,
        color: Color,
    ) -> None:
        self.primitives.append(Rule(start[0], start[1], end[0], end[1], thickness, tuple(color)))

    def texts(self) -> list[TextBlock]:
        """Return the text primitives in drawing order."""

        return [p for p in self.primitives if isinstance(p, TextBlock)]

    def replay(self, surface: DrawingSurface) -> None:
        """Issue every primitive, in order, against ``surface``."""

        for prim in self.primitives:
            if isinstance(prim, TextBlock):
                surface.draw_text(
                    prim.text, x=prim.x, y=prim.y, size=prim.size, role=prim.role, color=prim.color
                )
            elif isinstance(prim, Rect):
                surface.draw_rectangle(
                    x=prim.x, y=prim.y, width=prim.width, height=prim.height, color=prim.color
                )
            else:
                surface.draw_line(
                    start=(prim.x1, prim.y1),
                    end=(prim.x2, prim.y2),
                    thickness=prim.thickness,
                    color=prim.color,
                )


@dataclass(slots=True, frozen=True)
class Document:
    """The five pages of a workbook plus PDF metadata."""

    pages: tuple[Page, ...]
    title: str = ""
    author: str = ""
    subject: str = ""

    @property
    def page_names(self) -> tuple[str, ...]:
        return tuple(page.name for page in self.pages)


__all__ = [
    "Color",
    "TextBlock",
    "Rect",
    "Rule",
    "Primitive",
    "TextMeasurer",
    "DrawingSurface",
    "Page",
    "Document",
]
