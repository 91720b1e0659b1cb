"""Filesystem-safe names for rendered workbooks."""

from __future__ import annotations

import re

from ..preprocess.normalizer import normalize

DEFAULT_NAME = "workbook"

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def slugify(title: object, default: str = DEFAULT_NAME) -> str:
    """Return a lowercase, hyphen-separated slug for ``title``.

    Accents are stripped first, so ``"Café Plan"`` becomes ``"cafe-plan"``.
    ``default`` is returned when nothing alphanumeric remains.
    """

    slug = _NON_ALNUM_RE.sub("-", normalize(title).lower()).strip("-")
    return slug or default


def workbook_filename(title: object, default: str = DEFAULT_NAME, ext: str = ".pdf") -> str:
    """Return ``slugify(title)`` with ``ext`` appended."""

    return f"{slugify(title, default)}{ext}"


__all__ = ["DEFAULT_NAME", "slugify", "workbook_filename"]
