"""Input and normalized content records.

:class:`ProductData` is the loosely typed record supplied by upstream content
generation.  Every field is optional and may hold any value; nothing is
validated here.  :class:`NormalizedContent` is the definite, encodable form
produced by :func:`workbook.preprocess.normalizer.normalize_content`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class ProductData:
    """Structured description of a sellable digital item."""

    title: Any = None
    description: Any = None
    benefits: tuple[Any, ...] | None = None
    price_label: Any = None
    social_caption: Any = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ProductData":
        """Build a record from ``data`` without rejecting anything.

        ``price_range`` is accepted as an alias of ``price_label``.  Benefits
        are kept only when given as a list or tuple.
        """

        benefits = data.get("benefits")
        price = data.get("price_label")
        if price is None:
            price = data.get("price_range")
        return cls(
            title=data.get("title"),
            description=data.get("description"),
            benefits=tuple(benefits) if isinstance(benefits, (list, tuple)) else None,
            price_label=price,
            social_caption=data.get("social_caption"),
        )


@dataclass(slots=True, frozen=True)
class NormalizedContent:
    """Same shape as :class:`ProductData` with definite, encodable strings."""

    title: str
    description: str
    benefits: tuple[str, ...]
    price_label: str
    social_caption: str


def coerce_product(product: ProductData | Mapping[str, Any] | None) -> ProductData:
    """Return ``product`` as a :class:`ProductData`.

    Mappings go through :meth:`ProductData.from_mapping`; ``None`` and other
    values yield an empty record.
    """

    if isinstance(product, ProductData):
        return product
    if isinstance(product, Mapping):
        return ProductData.from_mapping(product)
    return ProductData()


__all__ = ["ProductData", "NormalizedContent", "coerce_product"]
