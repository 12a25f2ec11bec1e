"""
Product Lookup
==============
Maps the second path segment of a documentation URL to a product name.

    https://docs.agora.io/cn/Voice/product_voice  ->  Voice  ->  Audio Call / 语音通话

Matching is exact and case-sensitive.  Anything not in the table resolves
to ``UNKNOWN_PRODUCT``.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping
from urllib.parse import urlparse


@dataclass(frozen=True)
class Product:
    """Display names of a product in English and Chinese."""
    en: str
    cn: str


UNKNOWN_PRODUCT = Product(en="", cn="未知产品")

PRODUCTS: Mapping[str, Product] = MappingProxyType({
    "Voice": Product(en="Audio Call", cn="语音通话"),
    "Video": Product(en="Video Call", cn="视频通话"),
})


def resolve_product(segment: str) -> Product:
    """Look up a path segment, falling back to ``UNKNOWN_PRODUCT``."""
    return PRODUCTS.get(segment, UNKNOWN_PRODUCT)


def path_segment(url: str, index: int) -> str:
    """Return the ``index``-th path segment of ``url`` (1-based), or ''.

    ``/cn/Voice/product_voice`` -> 1: ``cn``, 2: ``Voice``.
    """
    parts = urlparse(url).path.split("/")
    if index < len(parts):
        return parts[index]
    return ""


def product_for_url(url: str) -> Product:
    return resolve_product(path_segment(url, 2))
