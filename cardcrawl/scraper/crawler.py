"""
Card Catalog - Category Crawler

Walks a paginated wiki category listing and collects every card page link.
The walk ends only when a page no longer offers a "next page" control.
Any navigation or query error propagates: a partial listing is never
returned.
"""

from __future__ import annotations

import structlog

from cardcrawl.errors import ExtractionError
from cardcrawl.scraper.queries import CATEGORY_LINKS, NEXT_PAGE_HREF
from cardcrawl.scraper.renderer import PageRenderer

logger = structlog.get_logger(__name__)


async def crawl_category(renderer: PageRenderer, start_url: str) -> list[str]:
    """
    Collect item links from every page of a category listing.

    Links are kept in discovery order and are not deduplicated; the
    listing does not repeat entries across pages.

    Args:
        renderer: Shared page renderer.
        start_url: First page of the category listing.

    Returns:
        All item links across all listing pages.

    Raises:
        ExtractionError: A listing page has no listing container.
    """
    logger.info("crawl_category_start", start_url=start_url, source="crawler")

    links: list[str] = []
    page_url = start_url
    page_number = 1
    await renderer.navigate(page_url)

    while True:
        page_links = await renderer.evaluate(CATEGORY_LINKS)
        if page_links is None:
            raise ExtractionError(page_url, "category listing container not found")
        links.extend(page_links)

        logger.debug(
            "crawl_category_page",
            page=page_number,
            page_links=len(page_links),
            total_links=len(links),
            source="crawler",
        )

        next_url = await renderer.evaluate(NEXT_PAGE_HREF)
        if not next_url:
            break

        logger.info("crawl_category_next_page", url=next_url, source="crawler")
        page_url = next_url
        page_number += 1
        await renderer.navigate(page_url)

    logger.info(
        "crawl_category_complete",
        pages=page_number,
        total_links=len(links),
        source="crawler",
    )
    return links
