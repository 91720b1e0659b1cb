"""Tests for text normalization."""

from __future__ import annotations

import pytest

from workbook.models import ProductData
from workbook.preprocess.normalizer import (
    FALLBACK_TITLE,
    collapse_whitespace,
    is_encodable,
    normalize,
    normalize_content,
)


def test_noop() -> None:
    text = "Simple text"
    assert normalize(text) == text


@pytest.mark.parametrize("value", [None, 42, 3.5, b"bytes", ["a"], {"a": 1}, object()])
def test_non_string_yields_empty(value: object) -> None:
    assert normalize(value) == ""


def test_diacritics_dash_and_quotes() -> None:
    text = "café’s — “plan”"
    assert normalize(text) == 'cafe\'s - "plan"'


def test_ellipsis_and_bullets() -> None:
    assert normalize("Wait… • done") == "Wait... - done"


def test_en_dash_and_single_quotes() -> None:
    assert normalize("‘Mon–Fri’") == "'Mon-Fri'"


def test_emoji_and_cjk_removed() -> None:
    assert normalize("Glow \U0001f338✨ up 日本") == "Glow  up"


def test_controls_removed_newline_and_tab_kept() -> None:
    assert normalize("a\x00b\x07c\nd\te\r\nf") == "abc\nd\te\nf"


@pytest.mark.parametrize("brk", ["\r", "\x0c", "\u2028", "\u2029"])
def test_line_breaks_keep_words_apart(brk: str) -> None:
    assert normalize(f"one{brk}two") == "one\ntwo"
    assert collapse_whitespace(normalize(f"one{brk}two")) == "one two"


def test_nbsp_zero_width_and_soft_hyphen() -> None:
    assert normalize("A\u00a0B\u200bC co\u00adoperate") == "A BC cooperate"


def test_trims_but_keeps_internal_runs() -> None:
    assert normalize("  two  spaces \n") == "two  spaces"


def test_decomposed_input() -> None:
    assert normalize("Cre\u0301me bru\u0302le\u0301e") == "Creme brulee"


def test_collapse_whitespace() -> None:
    assert collapse_whitespace("a\n\n b\t c  ") == "a b c"


def test_output_is_encodable() -> None:
    assert is_encodable(normalize("Ångström ß €5 ™"))
    assert not is_encodable("é")


def test_normalize_content_fallback_and_benefits() -> None:
    product = ProductData(
        title=None,
        description="Line one\nline two",
        benefits=("Clarity", None, "", "  \n ", "Fo\u0301cus"),
        price_label="€15–€25",
        social_caption=7,
    )
    content = normalize_content(product)
    assert content.title == FALLBACK_TITLE
    assert content.description == "Line one\nline two"
    assert content.benefits == ("Clarity", "Focus")
    assert content.price_label == "15-25"
    assert content.social_caption == ""


def test_title_of_only_unencodable_chars_falls_back() -> None:
    content = normalize_content(ProductData(title="\U0001f338✨"))
    assert content.title == FALLBACK_TITLE


def test_custom_fallback_title() -> None:
    content = normalize_content(ProductData(), fallback_title="Sans titre été")
    assert content.title == "Sans titre ete"


def test_benefits_given_as_string_are_ignored() -> None:
    content = normalize_content(ProductData(benefits="not a list"))  # type: ignore[arg-type]
    assert content.benefits == ()


def test_non_iterable_benefits_are_ignored() -> None:
    content = normalize_content(ProductData(benefits=5))  # type: ignore[arg-type]
    assert content.benefits == ()
