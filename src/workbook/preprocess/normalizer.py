"""Safe, deterministic text normalization for the embedded fonts.

The :func:`normalize` function maps arbitrary input onto the narrow character
set every configured font face is guaranteed to render.  It is total: any
object may be passed and a string is always returned.

Rules
-----
The following transforms are applied in order:

1. **Type guard** – anything that is not a ``str`` (``None`` included) becomes
   the empty string.
2. **Unicode NFD** – canonical decomposition, after which combining marks are
   dropped so accented Latin letters collapse to their base letter.
3. **Punctuation mapping** – curly quotes, primes, dashes, the ellipsis and
   bullet glyphs become ASCII equivalents.
4. **Whitespace rationalization** – Unicode space separators become a regular
   space; zero-width characters and the soft hyphen are deleted.
5. **Control stripping** – carriage returns, form feeds and the Unicode line
   and paragraph separators become ``\\n``; other control characters are
   removed except ``\\n`` and ``\\t``.
6. **Range filter** – any code point outside :data:`ENCODABLE_CHARS` is
   removed.
7. **Trim** – leading and trailing whitespace is removed.  Internal runs are
   kept; callers decide when to :func:`collapse_whitespace`.

The output of :func:`normalize` only contains encodable characters, which makes
the function idempotent.

Example
-------

>>> normalize("caf\\u00e9\\u2019s \\u2014 \\u201cplan\\u201d")
'cafe\\'s - "plan"'
"""

from __future__ import annotations

import unicodedata

from ..models import NormalizedContent, ProductData

# Printable ASCII plus the two preserved control characters.
ENCODABLE_CHARS: frozenset[str] = frozenset(
    [chr(cp) for cp in range(0x20, 0x7F)] + ["\n", "\t"]
)

FALLBACK_TITLE = "Untitled Product"

_PUNCT_MAP = {
    "\u2018": "'",  # LEFT SINGLE QUOTATION MARK
    "\u2019": "'",  # RIGHT SINGLE QUOTATION MARK
    "\u201a": "'",  # SINGLE LOW-9 QUOTATION MARK
    "\u201b": "'",  # SINGLE HIGH-REVERSED-9 QUOTATION MARK
    "\u2032": "'",  # PRIME
    "\u201c": '"',
    "\u201d": '"',
    "\u201e": '"',
    "\u201f": '"',
    "\u2033": '"',  # DOUBLE PRIME
    "\u2010": "-",  # HYPHEN
    "\u2011": "-",  # NON-BREAKING HYPHEN
    "\u2012": "-",  # FIGURE DASH
    "\u2013": "-",  # EN DASH
    "\u2014": "-",  # EM DASH
    "\u2015": "-",  # HORIZONTAL BAR
    "\u2212": "-",  # MINUS SIGN
    "\u2026": "...",
    "\u2022": "-",  # BULLET
    "\u00b7": "-",  # MIDDLE DOT
    "\u25e6": "-",  # WHITE BULLET
    "\u25aa": "-",  # BLACK SMALL SQUARE
}

# Line and paragraph breaks other than "\n".
_LINE_BREAKS = {"\r", "\x0b", "\x0c", "\x85"}

# Format characters that would otherwise only be caught by the category check.
_DROP = {
    "\u200b",  # ZERO WIDTH SPACE
    "\u200c",  # ZERO WIDTH NON-JOINER
    "\u200d",  # ZERO WIDTH JOINER
    "\u2060",  # WORD JOINER
    "\ufeff",  # ZERO WIDTH NO-BREAK SPACE
    "\u00ad",  # SOFT HYPHEN
}


def is_encodable(text: str) -> bool:
    """Return ``True`` if every character of ``text`` is encodable."""

    return all(ch in ENCODABLE_CHARS for ch in text)


def _map_char(ch: str) -> str:
    if ch in _PUNCT_MAP:
        return _PUNCT_MAP[ch]
    if ch in _DROP:
        return ""
    if ch in ("\n", "\t"):
        return ch
    if ch in _LINE_BREAKS:
        return "\n"
    category = unicodedata.category(ch)
    if category in ("Zl", "Zp"):
        return "\n"
    if category == "Zs":
        return " "
    if category.startswith("C"):
        return ""
    return ch if ch in ENCODABLE_CHARS else ""


def normalize(text: object) -> str:
    """Return ``text`` restricted to the encodable character set.

    Never raises.  See the module documentation for the applied rules.
    """

    if not isinstance(text, str):
        return ""
    decomposed = unicodedata.normalize("NFD", text.replace("\r\n", "\n"))
    out = "".join(_map_char(ch) for ch in decomposed if not unicodedata.combining(ch))
    return out.strip()


def collapse_whitespace(text: str) -> str:
    """Collapse all whitespace runs (newlines included) to single spaces."""

    return " ".join(text.split())


def _normalize_benefits(benefits: object) -> tuple[str, ...]:
    if not isinstance(benefits, (list, tuple)):
        return ()
    cleaned = (normalize(item) for item in benefits)
    return tuple(item for item in cleaned if item)


def normalize_content(
    product: ProductData, *, fallback_title: str = FALLBACK_TITLE
) -> NormalizedContent:
    """Normalize every field of ``product``.

    Empty benefits are dropped and a missing title resolves to
    ``fallback_title``.
    """

    return NormalizedContent(
        title=normalize(product.title) or normalize(fallback_title) or FALLBACK_TITLE,
        description=normalize(product.description),
        benefits=_normalize_benefits(product.benefits),
        price_label=normalize(product.price_label),
        social_caption=normalize(product.social_caption),
    )


__all__ = [
    "ENCODABLE_CHARS",
    "FALLBACK_TITLE",
    "collapse_whitespace",
    "is_encodable",
    "normalize",
    "normalize_content",
]
