"""
Crawl Driver
============
Sequential two-stage crawl over a single browser page:

1. Visit every seed URL and collect its sidebar links.
2. Visit every collected link and extract heading records.

Nothing runs concurrently and nothing is retried.  Any browser error
aborts the run; the session is still closed on the way out, but no
output is produced.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .browser import BrowserSession
from .headings import extract_headings
from .links import collect_links
from .models import HeadingRecord
from .run_config import CrawlerRunConfig

logger = logging.getLogger(__name__)


@dataclass
class CrawlResult:
    """Result of a crawl: the expanded link list and every heading record."""
    links: List[str] = field(default_factory=list)
    records: List[HeadingRecord] = field(default_factory=list)
    stats: Dict = field(default_factory=dict)


class FaqCrawler:
    """
    Usage::

        crawler = FaqCrawler(CrawlerRunConfig())
        result = await crawler.crawl()
        crawler.export_xlsx(result)

        # Or from sync code:
        result = crawler.run()
    """

    def __init__(
        self,
        config: CrawlerRunConfig = None,
        session_factory: Callable[[CrawlerRunConfig], BrowserSession] = BrowserSession,
    ):
        self.config = config or CrawlerRunConfig()
        self._session_factory = session_factory
        self._progress_callback: Optional[Callable] = None
        self._links_callback: Optional[Callable] = None

    def set_progress_callback(self, callback: Callable) -> None:
        """Set callback: callback(index, total, next_url_or_None)"""
        self._progress_callback = callback

    def set_links_callback(self, callback: Callable) -> None:
        """Set callback: callback(links) once the link list is complete."""
        self._links_callback = callback

    # ------------------------------------------------------------------
    # Sync entry point
    # ------------------------------------------------------------------

    def run(self) -> CrawlResult:
        """Sync wrapper around :meth:`crawl`."""
        return asyncio.run(self.crawl())

    # ------------------------------------------------------------------
    # Main async crawl
    # ------------------------------------------------------------------

    async def crawl(self) -> CrawlResult:
        cfg = self.config
        start = time.time()

        logger.info("=" * 65)
        logger.info("FAQ CRAWL STARTED")
        logger.info(f"Seeds: {len(cfg.seed_urls)}")
        logger.info("=" * 65)

        session = self._session_factory(cfg)
        await session.start()
        try:
            links = await collect_links(session, cfg.seed_urls, cfg.sidebar_selector)
            logger.info(f"[LINKS] Link list complete: {len(links)} links")
            if self._links_callback:
                self._links_callback(links)

            records, empty_articles = await self._crawl_articles(session, links)
        finally:
            await session.close()

        elapsed = time.time() - start
        stats = {
            "seeds": len(cfg.seed_urls),
            "links": len(links),
            "articles_without_headings": empty_articles,
            "records": len(records),
            "elapsed_time": round(elapsed, 2),
        }
        logger.info(
            f"Crawl complete: {stats['links']} articles, "
            f"{stats['records']} headings in {elapsed:.1f}s"
        )
        return CrawlResult(links=links, records=records, stats=stats)

    async def _crawl_articles(self, session, links: List[str]):
        """Visit each link in order, accumulating heading records."""
        cfg = self.config
        records: List[HeadingRecord] = []
        empty = 0
        total = len(links)

        for index, link in enumerate(links, 1):
            page_records = await extract_headings(
                session, link, cfg.title_selector, cfg.body_selector,
            )
            if not page_records:
                empty += 1
            records.extend(page_records)

            next_url = links[index] if index < total else None
            if self._progress_callback:
                self._progress_callback(index, total, next_url)

        return records, empty

    # ------------------------------------------------------------------
    # Export helpers
    # ------------------------------------------------------------------

    def export_xlsx(self, result: CrawlResult, filepath: str = None) -> str:
        """Write the spreadsheet (default: ``config.output_xlsx``)."""
        from .tabulator import export_xlsx
        return export_xlsx(
            result.records,
            filepath or self.config.output_xlsx,
            sheet_name=self.config.sheet_name,
        )

    def export_json(self, result: CrawlResult, filepath: str = None) -> str:
        """Export raw heading records and stats to JSON."""
        path = Path(filepath or self.config.output_json)
        path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            'stats': result.stats,
            'links': result.links,
            'records': [r.to_dict() for r in result.records],
        }
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        logger.info(f"[EXPORT] JSON written to {path.absolute()}")
        return str(path.absolute())
