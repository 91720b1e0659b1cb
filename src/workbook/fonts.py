"""Font faces and glyph metrics backed by reportlab.

A :class:`FontResource` bundles one :class:`FontFace` per :class:`FontRole`.
Faces are either one of the standard PDF fonts (metrics ship with reportlab,
nothing is embedded) or a TrueType program which is registered with
:mod:`reportlab.pdfbase.pdfmetrics` and subset-embedded by the canvas.
TrueType programs are registered under their face name suffixed with a
digest of the program bytes, so two programs never share a registry entry.

Loading is the only fallible step of generation.  Every failure surfaces as
:class:`~workbook.utils.errors.ResourceError`; afterwards the resource is
read-only and safe to share between concurrent calls.
"""

from __future__ import annotations

import asyncio
import hashlib
import io
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from .config.schema import FontSettings, FontSpec
from .preprocess.normalizer import ENCODABLE_CHARS, is_encodable
from .utils.errors import EncodingError, ResourceError
from .utils.logging import get_logger

logger = get_logger(__name__)

# Characters that never reach a text draw call; wrapping consumes them.
_LAYOUT_ONLY = frozenset("\n\t")


class FontRole(str, Enum):
    """Font role requested by a template."""

    REGULAR = "regular"
    BOLD = "bold"
    ITALIC = "italic"


@dataclass(slots=True, frozen=True)
class FontFace:
    """A loaded face.

    ``codepoints`` is ``None`` for standard fonts, whose coverage is the
    encodable set itself.
    """

    role: FontRole
    font_name: str
    program: bytes | None = None
    codepoints: frozenset[int] | None = None

    @property
    def embedded(self) -> bool:
        return self.program is not None

    def width_of(self, text: str, size: float) -> float:
        """Return the advance width of ``text`` at ``size`` points."""

        return pdfmetrics.stringWidth(text, self.font_name, size)

    def covers(self, text: str) -> bool:
        """Return ``True`` if every character of ``text`` has a glyph."""

        if self.codepoints is None:
            return is_encodable(text)
        return all(ch in _LAYOUT_ONLY or ord(ch) in self.codepoints for ch in text)


def _load_standard(role: FontRole, spec: FontSpec) -> FontFace:
    try:
        pdfmetrics.getFont(spec.name)
    except KeyError as exc:
        raise ResourceError(f"Unknown standard font {spec.name!r} for the {role.value} face") from exc
    return FontFace(role=role, font_name=spec.name)


def _registered_name(spec: FontSpec, program: bytes) -> str:
    """Return the registry name for ``program``, unique per program content."""

    return f"{spec.name}-{hashlib.sha1(program).hexdigest()[:8]}"


def _load_truetype(role: FontRole, spec: FontSpec, path: Path) -> FontFace:
    try:
        program = path.read_bytes()
    except OSError as exc:
        raise ResourceError(f"Cannot read {role.value} font program '{path}': {exc}") from exc
    font_name = _registered_name(spec, program)
    try:
        font = TTFont(font_name, io.BytesIO(program))
    except Exception as exc:
        raise ResourceError(f"Invalid {role.value} font program '{path}': {exc}") from exc

    codepoints = frozenset(font.face.charToGlyph)
    missing = sorted(ch for ch in ENCODABLE_CHARS - _LAYOUT_ONLY if ord(ch) not in codepoints)
    if missing:
        raise ResourceError(
            f"Font program '{path}' lacks glyphs for {''.join(missing)!r} ({role.value} face)"
        )
    pdfmetrics.registerFont(font)
    return FontFace(role=role, font_name=font_name, program=program, codepoints=codepoints)


class FontResource:
    """Immutable set of faces for the regular, bold and italic roles."""

    __slots__ = ("_faces",)

    def __init__(self, faces: Mapping[FontRole, FontFace]) -> None:
        missing = [role.value for role in FontRole if role not in faces]
        if missing:
            raise ResourceError(f"Missing font faces: {', '.join(missing)}")
        self._faces = MappingProxyType(dict(faces))

    @classmethod
    def load(cls, settings: FontSettings) -> "FontResource":
        """Load all three faces described by ``settings``.

        Raises
        ------
        ResourceError
            If any face cannot be read, parsed or does not cover the
            encodable character set.
        """

        faces: dict[FontRole, FontFace] = {}
        for role in FontRole:
            spec: FontSpec = getattr(settings, role.value)
            path = settings.resolve_path(spec)
            if path is None:
                faces[role] = _load_standard(role, spec)
            else:
                faces[role] = _load_truetype(role, spec, path)
            logger.info(
                "loaded %s face %s (%s)",
                role.value,
                spec.name,
                "embedded" if faces[role].embedded else "standard",
            )
        return cls(faces)

    @classmethod
    async def aload(cls, settings: FontSettings) -> "FontResource":
        """Load faces in a worker thread; the only suspension point."""

        return await asyncio.to_thread(cls.load, settings)

    def face(self, role: FontRole) -> FontFace:
        return self._faces[FontRole(role)]

    def width_of(self, text: str, size: float, role: FontRole = FontRole.REGULAR) -> float:
        """Return the width of ``text`` set in ``role`` at ``size``."""

        return self.face(role).width_of(text, size)

    def embed(self, role: FontRole) -> str:
        """Return the handle (registered font name) a canvas uses for ``role``."""

        return self.face(role).font_name

    def ensure_encodable(self, text: str, role: FontRole) -> None:
        """Raise :class:`EncodingError` if ``text`` is not renderable in ``role``."""

        face = self.face(role)
        if not face.covers(text):
            bad = sorted({ch for ch in text if not face.covers(ch)})
            raise EncodingError(
                f"Characters {''.join(bad)!r} are not encodable by the {face.role.value} face"
            )


__all__ = ["FontRole", "FontFace", "FontResource"]
