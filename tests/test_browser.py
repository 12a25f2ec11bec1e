"""Tests for faq_crawler.browser (Playwright mocked)."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from faq_crawler.browser import BrowserSession
from faq_crawler.run_config import CrawlerRunConfig


def _build_playwright_mocks():
    """Build async_playwright() -> playwright -> browser -> context -> page."""
    mock_page = MagicMock()
    mock_page.goto = AsyncMock()
    mock_page.evaluate = AsyncMock(return_value=["https://x.io/1"])
    mock_page.close = AsyncMock()

    mock_context = MagicMock()
    mock_context.new_page = AsyncMock(return_value=mock_page)
    mock_context.close = AsyncMock()

    mock_browser = MagicMock()
    mock_browser.new_context = AsyncMock(return_value=mock_context)
    mock_browser.close = AsyncMock()

    mock_pw = MagicMock()
    mock_pw.chromium.launch = AsyncMock(return_value=mock_browser)
    mock_pw.stop = AsyncMock()

    mock_starter = MagicMock()
    mock_starter.start = AsyncMock(return_value=mock_pw)
    return mock_starter, mock_pw, mock_browser, mock_context, mock_page


class TestBrowserSession:
    @pytest.mark.asyncio
    async def test_start_uses_viewport_and_headless(self):
        starter, pw, browser, _, _ = _build_playwright_mocks()
        cfg = CrawlerRunConfig(headless=False)
        with patch("faq_crawler.browser.async_playwright", return_value=starter):
            await BrowserSession(cfg).start()

        pw.chromium.launch.assert_awaited_once_with(headless=False)
        browser.new_context.assert_awaited_once_with(viewport={"width": 1920, "height": 980})

    @pytest.mark.asyncio
    async def test_goto_waits_for_network_idle(self):
        starter, _, _, _, page = _build_playwright_mocks()
        with patch("faq_crawler.browser.async_playwright", return_value=starter):
            session = await BrowserSession().start()
            await session.goto("https://x.io")

        page.goto.assert_awaited_once_with("https://x.io", wait_until="networkidle")

    @pytest.mark.asyncio
    async def test_goto_with_timeout(self):
        starter, _, _, _, page = _build_playwright_mocks()
        with patch("faq_crawler.browser.async_playwright", return_value=starter):
            session = await BrowserSession(CrawlerRunConfig(timeout_ms=5000)).start()
            await session.goto("https://x.io")

        page.goto.assert_awaited_once_with("https://x.io", wait_until="networkidle", timeout=5000)

    @pytest.mark.asyncio
    async def test_evaluate_passes_argument(self):
        starter, _, _, _, page = _build_playwright_mocks()
        with patch("faq_crawler.browser.async_playwright", return_value=starter):
            session = await BrowserSession().start()
            result = await session.evaluate("(s) => s", ".sidebar-menu")

        assert result == ["https://x.io/1"]
        page.evaluate.assert_awaited_once_with("(s) => s", ".sidebar-menu")

    @pytest.mark.asyncio
    async def test_context_manager_closes_everything(self):
        starter, pw, browser, context, page = _build_playwright_mocks()
        with patch("faq_crawler.browser.async_playwright", return_value=starter):
            async with BrowserSession():
                pass

        page.close.assert_awaited_once()
        context.close.assert_awaited_once()
        browser.close.assert_awaited_once()
        pw.stop.assert_awaited_once()

    def test_page_before_start(self):
        with pytest.raises(RuntimeError):
            BrowserSession().page
