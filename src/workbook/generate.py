"""Top-level generation pipeline.

``ProductData`` -> normalization -> page templates -> reportlab -> ``bytes``.

Fonts are loaded before any layout work; a :class:`ResourceError` raised there
aborts the call.  Once composition starts it runs to completion without
suspending, so the async entry point only awaits the font load.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .config import LayoutConfig, load_config
from .fonts import FontResource
from .io.writers.pdf_writer import write_pdf
from .layout.builder import DocumentBuilder
from .layout.document import Document
from .models import ProductData, coerce_product
from .preprocess.normalizer import normalize_content
from .utils.logging import get_logger

logger = get_logger(__name__)

ProductInput = ProductData | Mapping[str, Any] | None


def build_document(
    product: ProductInput,
    *,
    config: LayoutConfig,
    fonts: FontResource,
) -> Document:
    """Normalize ``product`` and lay it out without producing PDF bytes."""

    content = normalize_content(
        coerce_product(product), fallback_title=config.text.fallback_title
    )
    return DocumentBuilder(config, fonts).build(content)


def _render(product: ProductInput, config: LayoutConfig, fonts: FontResource) -> bytes:
    document = build_document(product, config=config, fonts=fonts)
    data = write_pdf(document, fonts)
    logger.info("generated workbook %r (%d bytes)", document.title, len(data))
    return data


def generate_workbook(
    product: ProductInput,
    *,
    config: LayoutConfig | None = None,
    fonts: FontResource | None = None,
) -> bytes:
    """Return the five-page workbook PDF for ``product``.

    ``config`` defaults to :func:`load_config`; ``fonts`` are loaded from
    ``config.fonts`` unless an already-loaded resource is shared in.

    Raises
    ------
    ResourceError
        If a font face cannot be loaded.
    """

    cfg = config if config is not None else load_config()
    resource = fonts if fonts is not None else FontResource.load(cfg.fonts)
    return _render(product, cfg, resource)


async def generate_workbook_async(
    product: ProductInput,
    *,
    config: LayoutConfig | None = None,
    fonts: FontResource | None = None,
) -> bytes:
    """Async variant of :func:`generate_workbook`; only the font load awaits."""

    cfg = config if config is not None else load_config()
    resource = fonts if fonts is not None else await FontResource.aload(cfg.fonts)
    return _render(product, cfg, resource)


__all__ = ["ProductInput", "build_document", "generate_workbook", "generate_workbook_async"]
