"""Shared fakes for the browser session."""

from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from faq_crawler.links import SIDEBAR_LINKS_JS


class FakeSession:
    """
    Stands in for ``BrowserSession``.

    ``sidebars`` maps seed URL -> list of hrefs (or None for no sidebar).
    ``articles`` maps article URL -> outline dict (or None for no title/body).
    """

    def __init__(self, sidebars: Dict = None, articles: Dict = None, fail_on: str = None):
        self.sidebars = sidebars or {}
        self.articles = articles or {}
        self.fail_on = fail_on
        self.visited: List[str] = []
        self.current: Optional[str] = None
        self.started = False
        self.closed = False

    async def start(self):
        self.started = True
        return self

    async def goto(self, url: str) -> None:
        if url == self.fail_on:
            raise RuntimeError(f"net::ERR_NAME_NOT_RESOLVED at {url}")
        self.visited.append(url)
        self.current = url

    async def evaluate(self, script: str, arg=None):
        if script == SIDEBAR_LINKS_JS:
            return self.sidebars.get(self.current)
        outline = self.articles.get(self.current)
        if outline is None:
            return None
        return dict(outline, url=outline.get("url", self.current))

    async def close(self) -> None:
        self.closed = True


def outline(title: str, *headings):
    """Build an article outline from ("h2", "id") pairs."""
    return {
        "title": title,
        "headings": [{"tag": tag, "id": heading_id} for tag, heading_id in headings],
    }


@pytest.fixture
def fake_session_cls():
    return FakeSession


@pytest.fixture
def make_outline():
    return outline
