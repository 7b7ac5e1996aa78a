"""
Card Catalog - Index Cache

The index cache is the ordered list of every card page link found in the
category listing. It is either reused verbatim or rebuilt by a full crawl;
there is no incremental merge at this layer.
"""

from __future__ import annotations

from typing import Any

import structlog

from cardcrawl.cache.store import JsonFileStore
from cardcrawl.config import Settings, settings
from cardcrawl.errors import CachePersistError, CacheReadError
from cardcrawl.scraper.crawler import crawl_category
from cardcrawl.scraper.renderer import PageRenderer

logger = structlog.get_logger(__name__)


async def load_or_crawl_index(
    renderer: PageRenderer,
    store: JsonFileStore,
    config: Settings | None = None,
) -> list[str]:
    """
    Return the card link index, crawling only when needed.

    The cached index is used as-is unless FORCE_REFRESH_INDEX is set or the
    cache cannot be read. A fresh crawl replaces the cache file.

    Raises:
        CachePersistError: The fresh index could not be written.
    """
    config = config or settings
    key = config.INDEX_CACHE_FILE

    if config.FORCE_REFRESH_INDEX:
        logger.info("index_cache_refresh_forced", key=key, source="index_cache")
    else:
        try:
            index = _parse_index(key, store.load(key))
            logger.info("index_cache_hit", key=key, links=len(index), source="index_cache")
            return index
        except CacheReadError as e:
            # Fine, the listing is crawled instead.
            logger.warning("index_cache_miss", key=key, error=str(e), source="index_cache")

    index = await crawl_category(renderer, config.CATEGORY_URL)

    try:
        store.save(key, index)
    except CachePersistError as e:
        logger.error(
            "index_cache_persist_failed",
            key=key,
            error=str(e),
            source="index_cache",
        )
        raise

    logger.info("index_cache_saved", key=key, links=len(index), source="index_cache")
    return index


def _parse_index(key: str, raw: Any) -> list[str]:
    if not isinstance(raw, list) or not all(isinstance(link, str) for link in raw):
        raise CacheReadError(key, "expected a JSON array of strings")
    return raw
