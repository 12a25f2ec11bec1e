"""
Browser Session
===============
One async Playwright browser with a single page, reused for the whole run.

The rest of the package only ever sees four operations:

- ``start()``               launch the browser and open a page
- ``goto(url)``             navigate and wait for network idle
- ``evaluate(script, arg)`` run a function in the page, return plain data
- ``close()``               tear everything down

DOM nodes never leave the page; scripts must return JSON-serialisable data.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from playwright.async_api import async_playwright, Browser, BrowserContext, Page

from .run_config import CrawlerRunConfig

logger = logging.getLogger(__name__)


class BrowserSession:
    """
    Usage::

        async with BrowserSession(config) as session:
            await session.goto("https://docs.example.com/")
            data = await session.evaluate("() => document.title")
    """

    def __init__(self, config: CrawlerRunConfig = None):
        self.config = config or CrawlerRunConfig()
        self._playwright = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    @property
    def page(self) -> Page:
        if self._page is None:
            raise RuntimeError("browser session not started")
        return self._page

    async def start(self) -> "BrowserSession":
        """Launch Chromium and open the single page used by the crawl."""
        self._playwright = await async_playwright().start()
        self._browser = await self._playwright.chromium.launch(
            headless=self.config.headless,
        )
        self._context = await self._browser.new_context(viewport=self.config.viewport)
        self._page = await self._context.new_page()
        logger.info(
            f"[BROWSER] Playwright browser initialized "
            f"(headless={self.config.headless}, "
            f"viewport={self.config.viewport_width}x{self.config.viewport_height})"
        )
        return self

    async def goto(self, url: str) -> None:
        """Navigate to ``url`` and wait until the network is idle.

        Navigation errors propagate; nothing is retried.
        """
        kwargs = {"wait_until": self.config.wait_until}
        if self.config.timeout_ms is not None:
            kwargs["timeout"] = self.config.timeout_ms
        logger.debug(f"[BROWSER] goto {url}")
        await self.page.goto(url, **kwargs)

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        """Run ``script`` (a JS function expression) in the page context."""
        if arg is None:
            return await self.page.evaluate(script)
        return await self.page.evaluate(script, arg)

    async def close(self) -> None:
        """Close page, context, browser and Playwright, in that order."""
        if self._page:
            await self._page.close()
            self._page = None
        if self._context:
            await self._context.close()
            self._context = None
        if self._browser:
            await self._browser.close()
            self._browser = None
        if self._playwright:
            await self._playwright.stop()
            self._playwright = None
        logger.info("[BROWSER] Closed")

    async def __aenter__(self) -> "BrowserSession":
        return await self.start()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
