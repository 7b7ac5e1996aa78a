"""
Card Catalog - Pipeline

category crawl (or cached index) -> record reconciliation -> sorted records
"""

from __future__ import annotations

import structlog

from cardcrawl.cache import (
    JsonFileStore,
    UpdatePredicate,
    load_or_crawl_index,
    never_update,
    reconcile_records,
)
from cardcrawl.config import Settings, settings
from cardcrawl.models import CatalogRecord
from cardcrawl.scraper.renderer import PageRenderer

logger = structlog.get_logger(__name__)


async def run_pipeline(
    renderer: PageRenderer,
    config: Settings | None = None,
    should_update: UpdatePredicate = never_update,
    store: JsonFileStore | None = None,
) -> list[CatalogRecord]:
    """
    Produce the full, name-sorted card record list.

    Args:
        renderer: The one page renderer shared by every step.
        config: Cache locations, force-refresh flag and fetch delays.
        should_update: Update predicate for cached records.
        store: Cache store; defaults to JSON files under config.CACHE_DIR.

    Returns:
        All card records, sorted by name.
    """
    config = config or settings
    store = store or JsonFileStore(config.CACHE_DIR)

    logger.info(
        "pipeline_start",
        cache_dir=str(config.CACHE_DIR),
        force_refresh_index=config.FORCE_REFRESH_INDEX,
        source="pipeline",
    )

    index = await load_or_crawl_index(renderer, store, config)
    logger.info("pipeline_index_ready", pages=len(index), source="pipeline")

    records = await reconcile_records(renderer, store, index, config, should_update)
    logger.info("pipeline_done", records=len(records), source="pipeline")
    return records
