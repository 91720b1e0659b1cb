"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. ``WORKBOOK_FONT_DIR`` environment variable for ``fonts.directory``
"""

from .schema import FontSettings, LayoutConfig, load_config

__all__ = ["FontSettings", "LayoutConfig", "load_config"]
