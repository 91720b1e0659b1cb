"""Product record readers.

Upstream content generation replies with a JSON object, sometimes wrapped in a
Markdown code fence and sometimes nested under a ``"product"`` key.  Both
shapes are accepted.  Field values are not validated here; that is left to
normalization, which never rejects input.
"""

from __future__ import annotations

import json
import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from ...models import ProductData
from ...utils.errors import IOFormatError

_FENCE_RE = re.compile(r"```(?:json)?\s*(\{.*\})\s*```", re.DOTALL)


def _unwrap(data: Any, source: str) -> ProductData:
    if isinstance(data, Mapping) and isinstance(data.get("product"), Mapping):
        data = data["product"]
    if not isinstance(data, Mapping):
        raise IOFormatError(f"{source}: expected an object with product fields")
    return ProductData.from_mapping(data)


def parse_product_json(text: str, source: str = "<string>") -> ProductData:
    """Parse ``text`` as a product JSON object, tolerating a code fence."""

    match = _FENCE_RE.search(text)
    payload = match.group(1) if match else text
    try:
        data = json.loads(payload.strip())
    except json.JSONDecodeError as exc:
        raise IOFormatError(f"{source}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    return _unwrap(data, source)


def read_json_product(path: str | os.PathLike[str]) -> ProductData:
    """Read a product record from a ``.json`` file."""

    return parse_product_json(Path(path).read_text(encoding="utf-8-sig"), str(path))


def read_yaml_product(path: str | os.PathLike[str]) -> ProductData:
    """Read a product record from a YAML file."""

    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8-sig"))
    except yaml.YAMLError as exc:
        raise IOFormatError(f"{path}: invalid YAML ({exc})") from exc
    return _unwrap(data, str(path))


__all__ = ["parse_product_json", "read_json_product", "read_yaml_product"]
