"""Tests for font loading, metrics and coverage checks."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest
import reportlab

from workbook.config import load_config
from workbook.config.schema import FontSettings
from workbook.fonts import FontResource, FontRole
from workbook.utils.errors import EncodingError, ResourceError

VERA_DIR = Path(reportlab.__file__).parent / "fonts"


def _settings(**overrides: object) -> FontSettings:
    data = load_config().fonts.model_dump()
    data.update(overrides)
    return FontSettings.model_validate(data)


def test_default_faces_load() -> None:
    fonts = FontResource.load(load_config().fonts)
    assert fonts.embed(FontRole.REGULAR) == "Helvetica"
    assert fonts.embed(FontRole.BOLD) == "Helvetica-Bold"
    assert fonts.embed(FontRole.ITALIC) == "Helvetica-Oblique"
    assert not fonts.face(FontRole.REGULAR).embedded


def test_width_queries() -> None:
    fonts = FontResource.load(load_config().fonts)
    regular = fonts.width_of("Workbook", 14, FontRole.REGULAR)
    bold = fonts.width_of("Workbook", 14, FontRole.BOLD)
    assert 0 < regular < bold
    assert fonts.width_of("Workbook", 28) == pytest.approx(regular * 2)
    assert fonts.width_of("", 14) == 0


def test_unknown_standard_font() -> None:
    settings = _settings(regular={"name": "No-Such-Font-Anywhere"})
    with pytest.raises(ResourceError):
        FontResource.load(settings)


def test_missing_truetype_file(tmp_path: Path) -> None:
    settings = _settings(bold={"name": "MissingBold", "path": str(tmp_path / "nope.ttf")})
    with pytest.raises(ResourceError):
        FontResource.load(settings)


def test_invalid_truetype_program(tmp_path: Path) -> None:
    bogus = tmp_path / "bogus.ttf"
    bogus.write_bytes(b"definitely not a font program")
    settings = _settings(italic={"name": "BogusItalic", "path": str(bogus)})
    with pytest.raises(ResourceError):
        FontResource.load(settings)


@pytest.mark.skipif(not (VERA_DIR / "Vera.ttf").exists(), reason="reportlab Vera fonts not bundled")
def test_truetype_faces_embedded_via_directory() -> None:
    settings = _settings(
        directory=str(VERA_DIR),
        regular={"name": "WorkbookVera", "path": "Vera.ttf"},
        bold={"name": "WorkbookVeraBd", "path": "VeraBd.ttf"},
        italic={"name": "WorkbookVeraIt", "path": "VeraIt.ttf"},
    )
    fonts = FontResource.load(settings)
    face = fonts.face(FontRole.REGULAR)
    assert face.embedded
    assert face.program is not None and len(face.program) > 0
    assert face.covers("Plain ASCII ~ text!")
    assert fonts.width_of("Hello", 12) > 0


def _single_program(filename: str, name: str) -> FontSettings:
    face = {"name": name, "path": filename}
    return _settings(directory=str(VERA_DIR), regular=face, bold=face, italic=face)


@pytest.mark.skipif(not (VERA_DIR / "VeraBd.ttf").exists(), reason="reportlab Vera fonts not bundled")
def test_same_face_name_with_different_programs() -> None:
    plain = FontResource.load(_single_program("Vera.ttf", "SharedFace"))
    heavy = FontResource.load(_single_program("VeraBd.ttf", "SharedFace"))
    heavy_alone = FontResource.load(_single_program("VeraBd.ttf", "OtherFace"))

    assert plain.embed(FontRole.REGULAR) != heavy.embed(FontRole.REGULAR)
    assert heavy.embed(FontRole.REGULAR).startswith("SharedFace-")
    assert heavy.width_of("Workbook", 14) == pytest.approx(heavy_alone.width_of("Workbook", 14))
    assert heavy.width_of("Workbook", 14) > plain.width_of("Workbook", 14)

    reloaded = FontResource.load(_single_program("Vera.ttf", "SharedFace"))
    assert reloaded.embed(FontRole.REGULAR) == plain.embed(FontRole.REGULAR)
    assert reloaded.width_of("Workbook", 14) == pytest.approx(plain.width_of("Workbook", 14))


def test_ensure_encodable_raises_for_uncovered_text() -> None:
    fonts = FontResource.load(load_config().fonts)
    fonts.ensure_encodable("plain text", FontRole.REGULAR)
    with pytest.raises(EncodingError):
        fonts.ensure_encodable("café", FontRole.BOLD)


def test_missing_role_rejected() -> None:
    fonts = FontResource.load(load_config().fonts)
    with pytest.raises(ResourceError):
        FontResource({FontRole.REGULAR: fonts.face(FontRole.REGULAR)})


def test_async_load() -> None:
    fonts = asyncio.run(FontResource.aload(load_config().fonts))
    assert fonts.embed(FontRole.ITALIC) == "Helvetica-Oblique"
