"""
Link Collector
==============
Reads the sidebar navigation of each seed page and returns the article
links it contains, in document order.  Duplicates are kept.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

logger = logging.getLogger(__name__)

# null when the sidebar is missing; ``a.href`` is already absolute.
SIDEBAR_LINKS_JS = """
(selector) => {
    const sideBar = document.querySelector(selector);
    if (!sideBar) {
        return null;
    }
    return Array.from(sideBar.querySelectorAll('a')).map(a => a.href);
}
"""


async def collect_sidebar_links(session, url: str, selector: str = ".sidebar-menu") -> List[str]:
    """
    Load a seed page and return every anchor href inside its sidebar.

    A missing sidebar is logged as an error and yields an empty list so
    the remaining seeds are still crawled.
    """
    await session.goto(url)
    hrefs = await session.evaluate(SIDEBAR_LINKS_JS, selector)

    if hrefs is None:
        logger.error(f"[LINKS] Sidebar '{selector}' not found, url: {url}")
        return []

    links = [str(href) for href in hrefs]
    logger.info(f"[LINKS] {len(links)} links in sidebar of {url}")
    return links


async def collect_links(
    session,
    seed_urls: Iterable[str],
    selector: str = ".sidebar-menu",
) -> List[str]:
    """Expand seed URLs into one list: seed order, then sidebar order."""
    result: List[str] = []
    for seed in seed_urls:
        result.extend(await collect_sidebar_links(session, seed, selector))
    return result
