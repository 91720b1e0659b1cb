from __future__ import annotations

import pytest

from workbook.config import LayoutConfig, load_config
from workbook.fonts import FontResource


@pytest.fixture(scope="session")
def config() -> LayoutConfig:
    return load_config(env={})


@pytest.fixture(scope="session")
def fonts(config: LayoutConfig) -> FontResource:
    return FontResource.load(config.fonts)


@pytest.fixture()
def product() -> dict[str, object]:
    return {
        "title": "Manifest Your Morning: A 14-Day Reset ✨",
        "description": (
            "Bonjour! This gentle workbook helps you build a calm morning routine.\n\n"
            "Each day brings a small intention and space to reflect — no pressure."
        ),
        "benefits": [
            "Start each day with clarity",
            None,
            "Build habits that “stick”",
            "",
            "Track your progress over two weeks",
        ],
        "price_range": "€15-€25",
        "social_caption": "Your calmest mornings start here 🌸",
    }
