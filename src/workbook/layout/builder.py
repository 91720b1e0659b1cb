"""Compose the fixed five-page workbook from normalized content.

Pages are produced in a constant order: cover, introduction, two daily
sections and reflection.  Each template keeps its own vertical cursor ``y``
which starts at a template-specific offset from the top edge and only moves
down.  All geometry, colors and fixed strings come from the immutable
:class:`~workbook.config.schema.LayoutConfig` handed to the builder.

The daily sections stop emitting day blocks once the cursor drops below
``daily.min_remaining``; later days are omitted for that page without any
error.  With the default geometry six of the seven days fit.
"""

from __future__ import annotations

from typing import Protocol

from ..config.schema import LayoutConfig
from ..fonts import FontRole
from ..models import NormalizedContent
from ..preprocess.normalizer import collapse_whitespace
from ..utils.logging import get_logger
from .document import Document, Page, TextMeasurer
from .wrapper import wrap_text

logger = get_logger(__name__)

PAGE_NAMES = ("cover", "introduction", "daily-1", "daily-2", "reflection")

# Cover
BAND_HEIGHT = 150
TITLE_SIZE = 32
TITLE_LINE_GAP = 10
TITLE_TOP = 200
SUBTITLE_SIZE = 18
SUBTITLE_GAP = 40
DIVIDER_Y = 100
DIVIDER_HEIGHT = 2
FOOTER_Y = 70
FOOTER_SIZE = 14
# Lowest baseline the subtitle may take; the title stops short of it.
COVER_FLOOR = DIVIDER_Y + SUBTITLE_SIZE

# Introduction
HEADING_TOP = 100
HEADING_SIZE = 28
HEADING_GAP = 50
BODY_SIZE = 14
BODY_LEADING = 22
SECTION_GAP = 20
SUBHEADING_SIZE = 20
SUBHEADING_GAP = 35
BENEFIT_SIZE = 13
BENEFIT_LEADING = 24
BENEFIT_INDENT = 20
BULLET_OFFSET = 4
BENEFIT_GAP = 6

# Daily sections
BANNER_TOP = 130
BANNER_HEIGHT = 50
BANNER_TITLE_SIZE = 22
BANNER_TEXT_INSET = 15
BANNER_TEXT_RISE = 18
DAYS_TOP = 170
DAY_SIZE = 16
DAY_GAP = 20
LABEL_SIZE = 11
LABEL_GAP = 26
RULE_SPACING = 24
RULE_THICKNESS = 0.75
DAY_BLOCK_GAP = 10

# Reflection
REFLECTION_HEADING_SIZE = 26
PROMPT_SIZE = 13
PROMPT_LEADING = 20
PROMPT_RULE_GAP = 8
PROMPT_BLOCK_GAP = 12
CLOSING_SIZE = 13


class FontMetrics(Protocol):
    """Per-role measurement capability (``FontResource`` satisfies it)."""

    def face(self, role: FontRole) -> TextMeasurer:
        ...


class DocumentBuilder:
    """Lay out :class:`NormalizedContent` onto the fixed page templates."""

    def __init__(self, config: LayoutConfig, fonts: FontMetrics) -> None:
        self.config = config
        self.fonts = fonts

    # -- helpers -------------------------------------------------------------

    @property
    def _width(self) -> float:
        return self.config.page.width

    @property
    def _height(self) -> float:
        return self.config.page.height

    @property
    def _margin(self) -> float:
        return self.config.page.margin

    @property
    def _content_width(self) -> float:
        return self.config.page.content_width

    def _new_page(self, name: str) -> Page:
        return Page(name=name, width=self._width, height=self._height)

    def _wrap(self, text: str, max_width: float, size: float, role: FontRole) -> list[str]:
        return wrap_text(collapse_whitespace(text), max_width, size, self.fonts.face(role))

    def _rule(self, page: Page, y: float) -> None:
        page.draw_line(
            start=(self._margin, y),
            end=(self._margin + self._content_width, y),
            thickness=RULE_THICKNESS,
            color=self.config.colors.rule,
        )

    def _divider(self, page: Page) -> None:
        page.draw_rectangle(
            x=self._margin,
            y=DIVIDER_Y,
            width=self._content_width,
            height=DIVIDER_HEIGHT,
            color=self.config.colors.pink,
        )

    # -- templates -----------------------------------------------------------

    def cover(self, content: NormalizedContent) -> Page:
        colors, text = self.config.colors, self.config.text
        page = self._new_page("cover")
        page.draw_rectangle(x=0, y=0, width=self._width, height=self._height, color=colors.beige)
        page.draw_rectangle(
            x=0,
            y=self._height - BAND_HEIGHT,
            width=self._width,
            height=BAND_HEIGHT,
            color=colors.pink,
        )

        face = self.fonts.face(FontRole.BOLD)
        y = self._height - TITLE_TOP
        lines = self._wrap(content.title, self._content_width, TITLE_SIZE, FontRole.BOLD)
        for index, line in enumerate(lines):
            if index and y - TITLE_SIZE - TITLE_LINE_GAP - SUBTITLE_GAP < COVER_FLOOR:
                logger.warning(
                    "cover title overflow: %d of %d line(s) omitted", len(lines) - index, len(lines)
                )
                break
            line_width = face.width_of(line, TITLE_SIZE)
            page.draw_text(
                line,
                x=(self._width - line_width) / 2,
                y=y,
                size=TITLE_SIZE,
                role=FontRole.BOLD,
                color=colors.text,
            )
            y -= TITLE_SIZE + TITLE_LINE_GAP

        page.draw_text(
            text.subtitle,
            x=self._margin,
            y=y - SUBTITLE_GAP,
            size=SUBTITLE_SIZE,
            role=FontRole.REGULAR,
            color=colors.dark_pink,
        )
        self._divider(page)
        page.draw_text(
            text.brand,
            x=self._margin,
            y=FOOTER_Y,
            size=FOOTER_SIZE,
            role=FontRole.REGULAR,
            color=colors.light_text,
        )
        return page

    def introduction(self, content: NormalizedContent) -> Page:
        colors, text = self.config.colors, self.config.text
        page = self._new_page("introduction")
        margin = self._margin
        skipped = 0

        y = self._height - HEADING_TOP
        page.draw_text(
            text.welcome_heading,
            x=margin,
            y=y,
            size=HEADING_SIZE,
            role=FontRole.BOLD,
            color=colors.dark_pink,
        )
        y -= HEADING_GAP

        for line in self._wrap(content.description, self._content_width, BODY_SIZE, FontRole.REGULAR):
            if y < margin:
                skipped += 1
                continue
            page.draw_text(
                line, x=margin, y=y, size=BODY_SIZE, role=FontRole.REGULAR, color=colors.text
            )
            y -= BODY_LEADING
        y -= SECTION_GAP

        if y >= margin:
            page.draw_text(
                text.benefits_heading,
                x=margin,
                y=y,
                size=SUBHEADING_SIZE,
                role=FontRole.BOLD,
                color=colors.dark_pink,
            )
        y -= SUBHEADING_GAP

        text_x = margin + BENEFIT_INDENT
        text_width = self._content_width - BENEFIT_INDENT
        for benefit in content.benefits:
            lines = self._wrap(benefit, text_width, BENEFIT_SIZE, FontRole.REGULAR)
            for index, line in enumerate(lines):
                if y < margin:
                    skipped += 1
                    continue
                if index == 0:
                    page.draw_text(
                        text.bullet,
                        x=margin + BULLET_OFFSET,
                        y=y,
                        size=BENEFIT_SIZE,
                        role=FontRole.BOLD,
                        color=colors.dark_pink,
                    )
                page.draw_text(
                    line,
                    x=text_x,
                    y=y,
                    size=BENEFIT_SIZE,
                    role=FontRole.REGULAR,
                    color=colors.text,
                )
                y -= BENEFIT_LEADING
            y -= BENEFIT_GAP

        if skipped:
            logger.warning("introduction overflow: %d line(s) below the bottom margin omitted", skipped)
        return page

    def daily_section(self, name: str, title: str) -> Page:
        colors, text = self.config.colors, self.config.text
        page = self._new_page(name)
        margin = self._margin

        banner_y = self._height - BANNER_TOP
        page.draw_rectangle(
            x=margin, y=banner_y, width=self._content_width, height=BANNER_HEIGHT, color=colors.pink
        )
        page.draw_text(
            title,
            x=margin + BANNER_TEXT_INSET,
            y=banner_y + BANNER_TEXT_RISE,
            size=BANNER_TITLE_SIZE,
            role=FontRole.BOLD,
            color=colors.text,
        )

        y = self._height - DAYS_TOP
        for day in text.weekdays:
            if y < self.config.daily.min_remaining:
                logger.debug("%s: cursor at %.2f, omitting %s and later days", name, y, day)
                break
            page.draw_text(
                day, x=margin, y=y, size=DAY_SIZE, role=FontRole.BOLD, color=colors.dark_pink
            )
            y -= DAY_GAP
            page.draw_text(
                text.day_label,
                x=margin,
                y=y,
                size=LABEL_SIZE,
                role=FontRole.ITALIC,
                color=colors.light_text,
            )
            y -= LABEL_GAP
            for _ in range(self.config.daily.rules_per_day):
                self._rule(page, y)
                y -= RULE_SPACING
            y -= DAY_BLOCK_GAP
        return page

    def reflection(self) -> Page:
        colors, text = self.config.colors, self.config.text
        page = self._new_page("reflection")
        margin = self._margin

        y = self._height - HEADING_TOP
        page.draw_text(
            text.reflection_heading,
            x=margin,
            y=y,
            size=REFLECTION_HEADING_SIZE,
            role=FontRole.BOLD,
            color=colors.dark_pink,
        )
        y -= HEADING_GAP

        for prompt in text.reflection_prompts:
            for line in self._wrap(prompt, self._content_width, PROMPT_SIZE, FontRole.BOLD):
                page.draw_text(
                    line, x=margin, y=y, size=PROMPT_SIZE, role=FontRole.BOLD, color=colors.text
                )
                y -= PROMPT_LEADING
            y -= PROMPT_RULE_GAP
            for _ in range(self.config.reflection.rules_per_prompt):
                self._rule(page, y)
                y -= RULE_SPACING
            y -= PROMPT_BLOCK_GAP

        self._divider(page)
        page.draw_text(
            text.closing_line,
            x=margin,
            y=FOOTER_Y,
            size=CLOSING_SIZE,
            role=FontRole.ITALIC,
            color=colors.dark_pink,
        )
        return page

    # -- entry point ---------------------------------------------------------

    def build(self, content: NormalizedContent) -> Document:
        """Return the five-page :class:`Document` for ``content``."""

        first, second = self.config.text.daily_titles
        pages = (
            self.cover(content),
            self.introduction(content),
            self.daily_section("daily-1", first),
            self.daily_section("daily-2", second),
            self.reflection(),
        )
        logger.debug(
            "built document: %s",
            ", ".join(f"{p.name}={len(p.primitives)}" for p in pages),
        )
        return Document(
            pages=pages,
            title=content.title,
            author=self.config.text.brand,
            subject=content.social_caption,
        )


__all__ = ["PAGE_NAMES", "FontMetrics", "DocumentBuilder"]
