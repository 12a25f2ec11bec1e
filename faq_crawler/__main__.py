#!/usr/bin/env python3
"""
FAQ Crawler CLI
===============
Collects article links from the configured seed sidebars, extracts every
H2/H3 heading, and writes the result to a spreadsheet.

Run with: python -m faq_crawler
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .crawler import FaqCrawler
from .run_config import CrawlerRunConfig

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s | %(levelname)s | %(message)s',
        datefmt='%H:%M:%S'
    )


def _load_env() -> None:
    """Load a .env next to the project, else from the working directory."""
    env_path = Path(__file__).resolve().parent.parent / '.env'
    if env_path.exists():
        load_dotenv(env_path)
    else:
        load_dotenv()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='faq-crawler',
        description='Crawl documentation sidebars and export article headings as FAQ rows',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m faq_crawler                          # write output.xlsx
  python -m faq_crawler --output faq.xlsx --output-json faq.json
  python -m faq_crawler --headed --verbose
        """
    )
    parser.add_argument('--output', type=str, help='Spreadsheet output path (default: output.xlsx)')
    parser.add_argument('--output-json', type=str, help='JSON output path for raw heading records')
    parser.add_argument('--timeout', type=int, help='Navigation timeout in seconds (default: Playwright default)')
    parser.add_argument('--headed', action='store_true', help='Run the browser with a visible window')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    return parser


def print_links(links) -> None:
    print(f"Link list collected: {len(links)} links. Fetching article content...")


def print_progress(index: int, total: int, next_url) -> None:
    status = "Done!" if next_url is None else f"Next: {next_url}"
    print(f"Progress: {index} / {total}. {status}")


def print_summary(stats: dict) -> None:
    """Print crawl summary."""
    print("\n" + "=" * 65)
    print("CRAWL COMPLETE")
    print("=" * 65)
    print(f"  Seeds:               {stats.get('seeds', 0)}")
    print(f"  Articles visited:    {stats.get('links', 0)}")
    if stats.get('articles_without_headings', 0) > 0:
        print(f"  Without headings:    {stats.get('articles_without_headings', 0)}")
    print(f"  Headings exported:   {stats.get('records', 0)}")
    print(f"  Total time:          {stats.get('elapsed_time', 0):.1f}s")
    print("=" * 65)


def main(argv=None) -> int:
    """Parse argv, build CrawlerRunConfig, crawl, export."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    _load_env()

    cfg = CrawlerRunConfig.from_cli_args(args).validate()
    cfg.log_summary()

    crawler = FaqCrawler(cfg)
    crawler.set_links_callback(print_links)
    crawler.set_progress_callback(print_progress)

    try:
        result = crawler.run()
    except KeyboardInterrupt:
        print("\nCrawl cancelled.")
        return 130

    exported = [crawler.export_xlsx(result)]
    if cfg.output_json:
        exported.append(crawler.export_json(result))

    print("\n" + "-" * 40)
    for path in exported:
        print(f"  Exported: {path}")
    print("-" * 40)
    print_summary(result.stats)
    return 0


if __name__ == '__main__':
    sys.exit(main())
