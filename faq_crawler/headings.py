"""
Heading Extractor
=================
Turns an article page into heading records.

Work is split at the page boundary:

1. ``ARTICLE_OUTLINE_JS`` runs inside the page and returns a plain outline
   (article title, final page URL, H2/H3 tags and ids in document order).
2. ``compose_records`` is a pure function that turns that outline into
   ``HeadingRecord`` objects.

Title rules::

    H2:  "<article title> - <h2 id> - <product cn>"
    H3:  "<article title> - <enclosing h2 id> - <h3 id> - <product cn>"

The enclosing H2 id starts empty on every page, so an H3 seen before any
H2 gets an empty segment.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List
from urllib.parse import parse_qs, quote, urlsplit

from .models import HeadingRecord
from .products import path_segment, product_for_url

logger = logging.getLogger(__name__)

ARTICLE_OUTLINE_JS = """
({titleSelector, bodySelector}) => {
    const articleTitle = document.querySelector(titleSelector);
    const container = document.querySelector(bodySelector);
    if (!articleTitle || !container) {
        return null;
    }
    return {
        title: articleTitle.innerText,
        url: window.location.href,
        headings: Array.from(container.querySelectorAll('h2, h3')).map(el => ({
            tag: el.tagName.toLowerCase(),
            id: el.id,
        })),
    };
}
"""


def query_param(url: str, name: str) -> str:
    """First value of query parameter ``name``, or '' if absent."""
    values = parse_qs(urlsplit(url).query, keep_blank_values=True).get(name)
    return values[0] if values else ""


# Printable ASCII minus the fragment percent-encode set (space " < > `).
# Controls, DEL and everything non-ASCII are encoded as UTF-8 escapes.
_FRAGMENT_SAFE = "".join(chr(c) for c in range(0x21, 0x7F) if chr(c) not in '"<>`')


def encode_fragment(fragment: str) -> str:
    """Percent-encode a fragment the way ``location.hash = ...`` does."""
    fragment = fragment.replace("\t", "").replace("\n", "").replace("\r", "")
    return quote(fragment, safe=_FRAGMENT_SAFE)


def with_fragment(url: str, fragment: str) -> str:
    """Replace the fragment of ``url``; path and query are left untouched."""
    base = url.split("#", 1)[0]
    return f"{base}#{encode_fragment(fragment)}"


def compose_records(
    article_title: str,
    page_url: str,
    headings: Iterable[Dict[str, Any]],
) -> List[HeadingRecord]:
    """Build one HeadingRecord per H2/H3 heading, in document order."""
    product = product_for_url(page_url)
    language = path_segment(page_url, 1)
    platform = query_param(page_url, "platform")

    records: List[HeadingRecord] = []
    current_h2 = ""
    for heading in headings:
        tag = str(heading.get("tag", "")).lower()
        heading_id = heading.get("id") or ""

        if tag == "h2":
            current_h2 = heading_id
            title = f"{article_title} - {heading_id} - {product.cn}"
        elif tag == "h3":
            title = f"{article_title} - {current_h2} - {heading_id} - {product.cn}"
        else:
            continue

        records.append(HeadingRecord(
            title=title,
            href=with_fragment(page_url, heading_id),
            language=language,
            product=product.en,
            platform=platform,
        ))
    return records


async def extract_headings(
    session,
    url: str,
    title_selector: str = ".page-title",
    body_selector: str = ".article-page-container",
) -> List[HeadingRecord]:
    """
    Load an article page and return its heading records.

    A page without the title or body container yields an empty list.
    That happens now and then and is not reported above debug level.
    """
    await session.goto(url)
    outline = await session.evaluate(
        ARTICLE_OUTLINE_JS,
        {"titleSelector": title_selector, "bodySelector": body_selector},
    )
    if not outline:
        logger.debug(f"[ARTICLE] No title/body on {url}, skipped")
        return []

    records = compose_records(
        outline.get("title") or "",
        outline.get("url") or url,
        outline.get("headings") or [],
    )
    logger.debug(f"[ARTICLE] {len(records)} headings from {url}")
    return records
