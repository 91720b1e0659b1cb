"""Typed configuration schema and loader for the workbook package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint, conlist, field_validator

from ..preprocess.normalizer import normalize

FONT_DIR_ENV = "WORKBOOK_FONT_DIR"

Unit = confloat(ge=0.0, le=1.0)
RGB = tuple[Unit, Unit, Unit]

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class PageSettings(BaseModel):
    """Fixed canvas geometry shared by every template."""

    width: confloat(gt=0)
    height: confloat(gt=0)
    margin: confloat(ge=0)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.margin


class ColorSettings(BaseModel):
    """Palette used across templates (RGB components in ``[0, 1]``)."""

    beige: RGB
    pink: RGB
    dark_pink: RGB
    text: RGB
    light_text: RGB
    rule: RGB

    model_config = ConfigDict(extra="forbid", frozen=True)


class FontSpec(BaseModel):
    """One font face: a standard PDF font name or a TrueType program path."""

    name: str
    path: str | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class FontSettings(BaseModel):
    """Font faces for the three roles used by the templates."""

    directory: str | None = None
    regular: FontSpec
    bold: FontSpec
    italic: FontSpec

    model_config = ConfigDict(extra="forbid", frozen=True)

    def resolve_path(self, spec: FontSpec) -> Path | None:
        """Return the absolute program path for ``spec`` or ``None``."""

        if spec.path is None:
            return None
        path = Path(spec.path).expanduser()
        if not path.is_absolute() and self.directory:
            path = Path(self.directory).expanduser() / path
        return path


class TextSettings(BaseModel):
    """Fixed template strings, normalized to the encodable set on load."""

    fallback_title: str
    subtitle: str
    brand: str
    welcome_heading: str
    benefits_heading: str
    bullet: str
    daily_titles: conlist(str, min_length=2, max_length=2)
    weekdays: conlist(str, min_length=7, max_length=7)
    day_label: str
    reflection_heading: str
    reflection_prompts: conlist(str, min_length=4, max_length=4)
    closing_line: str

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("*")
    @classmethod
    def _encodable(cls, value: str | list[str]) -> str | tuple[str, ...]:
        if isinstance(value, str):
            return normalize(value)
        return tuple(normalize(item) for item in value)


class DailySettings(BaseModel):
    """Daily section layout controls."""

    min_remaining: confloat(ge=0)
    rules_per_day: conint(ge=0)

    model_config = ConfigDict(extra="forbid", frozen=True)


class ReflectionSettings(BaseModel):
    """Reflection page layout controls."""

    rules_per_prompt: conint(ge=0)

    model_config = ConfigDict(extra="forbid", frozen=True)


class LayoutConfig(BaseModel):
    """Top-level, immutable configuration owned by the document builder."""

    schema_version: conint(ge=1)
    page: PageSettings
    colors: ColorSettings
    fonts: FontSettings
    text: TextSettings
    daily: DailySettings
    reflection: ReflectionSettings

    model_config = ConfigDict(extra="forbid", frozen=True)


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> LayoutConfig:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    ``WORKBOOK_FONT_DIR`` environment variable for ``fonts.directory``.
    """

    with (
        importlib_resources.files("workbook.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    if environ.get(FONT_DIR_ENV):
        merged = deep_merge_dicts(merged, {"fonts": {"directory": environ[FONT_DIR_ENV]}})

    return LayoutConfig.model_validate(merged)


__all__ = [
    "FONT_DIR_ENV",
    "LayoutConfig",
    "PageSettings",
    "ColorSettings",
    "FontSpec",
    "FontSettings",
    "TextSettings",
    "DailySettings",
    "ReflectionSettings",
    "deep_merge_dicts",
    "load_config",
]
