"""
FAQ Crawler Package
Crawls a documentation site's sidebar, extracts article headings as
question rows and writes them to a spreadsheet.

CLI Usage:
    python -m faq_crawler [options]

    Options:
        --output        Spreadsheet path (default: output.xlsx)
        --output-json   Also export raw heading records to JSON
        --timeout       Navigation timeout in seconds (default: Playwright's)
        --headed        Show the browser window
        --verbose       Debug logging
"""

from .crawler import FaqCrawler, CrawlResult
from .models import HeadingRecord, Row, OUTPUT_COLUMNS, COLUMN_WIDTHS
from .products import Product, PRODUCTS, UNKNOWN_PRODUCT, resolve_product
from .headings import compose_records, extract_headings
from .links import collect_links, collect_sidebar_links
from .tabulator import Sheet, tabulate, write_workbook, export_xlsx
from .run_config import CrawlerRunConfig, DEFAULT_SEED_URLS
from .browser import BrowserSession

__all__ = [
    'FaqCrawler',
    'CrawlResult',
    'HeadingRecord',
    'Row',
    'OUTPUT_COLUMNS',
    'COLUMN_WIDTHS',
    'Product',
    'PRODUCTS',
    'UNKNOWN_PRODUCT',
    'resolve_product',
    'compose_records',
    'extract_headings',
    'collect_links',
    'collect_sidebar_links',
    # Spreadsheet
    'Sheet',
    'tabulate',
    'write_workbook',
    'export_xlsx',
    # Config / browser
    'CrawlerRunConfig',
    'DEFAULT_SEED_URLS',
    'BrowserSession',
]

__version__ = '1.0.0'
