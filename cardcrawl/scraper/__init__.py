"""Card Catalog - Scraper Layer"""

from cardcrawl.scraper.crawler import crawl_category
from cardcrawl.scraper.record_builder import build_record, resolve_release
from cardcrawl.scraper.renderer import PageRenderer, PlaywrightRenderer
from cardcrawl.scraper.tables import extract_tables, resolve_field

__all__ = [
    "PageRenderer",
    "PlaywrightRenderer",
    "build_record",
    "crawl_category",
    "extract_tables",
    "resolve_field",
    "resolve_release",
]
