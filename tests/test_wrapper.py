"""Tests for greedy width-aware wrapping."""

from __future__ import annotations

import random

import pytest

from workbook.config import load_config
from workbook.fonts import FontResource, FontRole
from workbook.layout.wrapper import wrap_text


class FixedWidth:
    """Measurer where every character is half the font size wide."""

    def __init__(self) -> None:
        self.calls = 0

    def width_of(self, text: str, size: float) -> float:
        self.calls += 1
        return len(text) * size * 0.5


def test_empty_input() -> None:
    assert wrap_text("", 100, 10, FixedWidth()) == []
    assert wrap_text("   \n\t ", 100, 10, FixedWidth()) == []


def test_greedy_breaks() -> None:
    lines = wrap_text("the quick brown fox jumps", 50, 10, FixedWidth())
    assert lines == ["the quick", "brown fox", "jumps"]


def test_exact_fit_stays_on_line() -> None:
    # "ab cd" is 5 characters -> 25 units at size 10.
    assert wrap_text("ab cd", 25, 10, FixedWidth()) == ["ab cd"]
    assert wrap_text("ab cd", 24.9, 10, FixedWidth()) == ["ab", "cd"]


def test_overlong_word_emitted_alone() -> None:
    lines = wrap_text("a supercalifragilistic b", 50, 10, FixedWidth())
    assert lines == ["a", "supercalifragilistic", "b"]


def test_leading_overlong_word() -> None:
    assert wrap_text("unbreakableword x", 20, 10, FixedWidth()) == ["unbreakableword", "x"]


def test_whitespace_is_normalized() -> None:
    text = "  one\ttwo\n\nthree   four "
    lines = wrap_text(text, 1000, 10, FixedWidth())
    assert lines == ["one two three four"]


@pytest.fixture(scope="module")
def fonts() -> FontResource:
    return FontResource.load(load_config().fonts)


def test_rejoin_and_width_bounds_with_real_metrics(fonts: FontResource) -> None:
    rng = random.Random(7)
    vocab = ["a", "glow", "manifest", "productivity", "intention", "side-hustle", "x" * 40]
    face = fonts.face(FontRole.REGULAR)
    for _ in range(100):
        text = " ".join(rng.choice(vocab) for _ in range(rng.randint(0, 40)))
        width = rng.choice([80.0, 150.0, 475.28])
        lines = wrap_text(text, width, 14, face)
        assert " ".join(lines) == " ".join(text.split())
        for line in lines:
            assert face.width_of(line, 14) <= width or " " not in line


def test_deterministic(fonts: FontResource) -> None:
    face = fonts.face(FontRole.BOLD)
    text = "Deterministic wrapping gives identical breaks for identical input " * 3
    assert wrap_text(text, 200, 13, face) == wrap_text(text, 200, 13, face)
