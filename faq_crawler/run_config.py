"""
Run Configuration
=================
Single source of truth for crawler defaults.

The seed URLs are build-time data.  Everything else can be overridden by
``FAQ_CRAWLER_*`` environment variables (a ``.env`` file is honoured by the
CLI) and then by command-line flags.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


DEFAULT_SEED_URLS: Tuple[str, ...] = (
    "https://docs.agora.io/cn/Voice/product_voice?platform=Web",
    "https://docs.agora.io/cn/Video/landing-page?platform=Web",
)

# ---------------------------------------------------------------------------
# Canonical defaults
# ---------------------------------------------------------------------------
_DEFAULTS = {
    "sidebar_selector": ".sidebar-menu",
    "title_selector": ".page-title",
    "body_selector": ".article-page-container",
    "wait_until": "networkidle",
    "timeout_ms": None,              # None = Playwright default
    "headless": True,
    "viewport_width": 1920,
    "viewport_height": 980,
    "output_xlsx": "output.xlsx",
    "output_json": None,
    "sheet_name": "mySheet",
}

_ENV_PREFIX = "FAQ_CRAWLER_"


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class CrawlerRunConfig:
    """
    Configuration consumed by the browser session, the crawl driver and
    the exporters.

    Populate via:
      - ``CrawlerRunConfig()``                 -> all defaults
      - ``CrawlerRunConfig.from_env()``        -> defaults + FAQ_CRAWLER_* env vars
      - ``CrawlerRunConfig.from_cli_args(ns)`` -> env + argparse Namespace
    """

    seed_urls: List[str] = field(default_factory=lambda: list(DEFAULT_SEED_URLS))

    # ---- Page structure ----
    sidebar_selector: str = _DEFAULTS["sidebar_selector"]
    title_selector: str = _DEFAULTS["title_selector"]
    body_selector: str = _DEFAULTS["body_selector"]

    # ---- Browser ----
    wait_until: str = _DEFAULTS["wait_until"]
    timeout_ms: Optional[int] = _DEFAULTS["timeout_ms"]
    headless: bool = _DEFAULTS["headless"]
    viewport_width: int = _DEFAULTS["viewport_width"]
    viewport_height: int = _DEFAULTS["viewport_height"]

    # ---- Output ----
    output_xlsx: str = _DEFAULTS["output_xlsx"]
    output_json: Optional[str] = _DEFAULTS["output_json"]
    sheet_name: str = _DEFAULTS["sheet_name"]

    @property
    def viewport(self) -> dict:
        return {"width": self.viewport_width, "height": self.viewport_height}

    def validate(self) -> "CrawlerRunConfig":
        """Raise ``ValueError`` on a configuration the crawler cannot use."""
        if not self.seed_urls:
            raise ValueError("at least one seed URL is required")
        if self.viewport_width <= 0 or self.viewport_height <= 0:
            raise ValueError(
                f"viewport must be positive, got {self.viewport_width}x{self.viewport_height}"
            )
        if self.timeout_ms is not None and self.timeout_ms < 0:
            raise ValueError(f"timeout_ms must be >= 0, got {self.timeout_ms}")
        if not self.output_xlsx:
            raise ValueError("output_xlsx must not be empty")
        return self

    # -----------------------------------------------------------------------
    # Factory helpers
    # -----------------------------------------------------------------------
    @classmethod
    def from_env(cls, environ=None) -> "CrawlerRunConfig":
        """Build config from ``FAQ_CRAWLER_*`` environment variables."""
        env = os.environ if environ is None else environ
        cfg = cls()

        def get(name: str) -> Optional[str]:
            value = env.get(_ENV_PREFIX + name)
            return value if value not in (None, "") else None

        if get("HEADLESS") is not None:
            cfg.headless = _env_bool(get("HEADLESS"))
        if get("TIMEOUT_MS") is not None:
            cfg.timeout_ms = int(get("TIMEOUT_MS"))
        if get("VIEWPORT_WIDTH") is not None:
            cfg.viewport_width = int(get("VIEWPORT_WIDTH"))
        if get("VIEWPORT_HEIGHT") is not None:
            cfg.viewport_height = int(get("VIEWPORT_HEIGHT"))
        if get("OUTPUT_XLSX") is not None:
            cfg.output_xlsx = get("OUTPUT_XLSX")
        if get("OUTPUT_JSON") is not None:
            cfg.output_json = get("OUTPUT_JSON")
        if get("SHEET_NAME") is not None:
            cfg.sheet_name = get("SHEET_NAME")
        return cfg

    @classmethod
    def from_cli_args(cls, args, environ=None) -> "CrawlerRunConfig":
        """Build config from an argparse Namespace (``__main__.py``).

        Flags left unset fall back to the environment, then to defaults.
        """
        cfg = cls.from_env(environ)
        if getattr(args, "output", None):
            cfg.output_xlsx = args.output
        if getattr(args, "output_json", None):
            cfg.output_json = args.output_json
        if getattr(args, "timeout", None) is not None:
            cfg.timeout_ms = args.timeout * 1000
        if getattr(args, "headed", False):
            cfg.headless = False
        return cfg

    # -----------------------------------------------------------------------
    # Logging helper
    # -----------------------------------------------------------------------
    def log_summary(self) -> None:
        """Emit a structured summary to the logger."""
        logger.info("=" * 60)
        logger.info("FAQ CRAWL RUN CONFIG")
        logger.info("=" * 60)
        for url in self.seed_urls:
            logger.info(f"  Seed:             {url}")
        logger.info(f"  Sidebar:          {self.sidebar_selector}")
        logger.info(f"  Article:          {self.title_selector} / {self.body_selector}")
        logger.info(f"  Wait Until:       {self.wait_until}")
        if self.timeout_ms is not None:
            logger.info(f"  Timeout:          {self.timeout_ms}ms per page")
        logger.info(f"  Viewport:         {self.viewport_width}x{self.viewport_height}")
        logger.info(f"  Headless:         {self.headless}")
        logger.info(f"  Output:           {self.output_xlsx} (sheet '{self.sheet_name}')")
        if self.output_json:
            logger.info(f"  JSON Output:      {self.output_json}")
        logger.info("=" * 60)
