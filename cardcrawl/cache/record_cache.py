"""
Card Catalog - Record Cache Reconciliation

Decides, per card, whether the previously cached record can be trusted or
the card page must be fetched again, then writes the merged result back.

Steps:
1. Every link in the current index is required.
2. Cached records the update predicate accepts are kept and satisfy their
   link. A predicate that raises counts as "needs update".
3. Nothing pending: the cached records are returned and nothing is written.
4. Pending links are fetched one by one. The first failing fetch stops the
   batch; records fetched before it are kept.
5. The merged records are sorted by name and replace the cache file.
"""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import BaseModel, ValidationError

from cardcrawl.cache.predicates import UpdatePredicate, evaluate_predicate, never_update
from cardcrawl.cache.store import JsonFileStore
from cardcrawl.config import Settings, settings
from cardcrawl.errors import CachePersistError, CacheReadError, PredicateError
from cardcrawl.models import CatalogRecord
from cardcrawl.scraper.record_builder import build_record
from cardcrawl.scraper.renderer import PageRenderer
from cardcrawl.scraper.throttle import FetchThrottle

logger = structlog.get_logger(__name__)


class ReconcileReport(BaseModel):
    """Counters for one reconciliation run."""

    required: int = 0
    retained: int = 0
    pending: int = 0
    fetched: int = 0
    failed_link: str | None = None
    written: bool = False

    @property
    def aborted(self) -> bool:
        return self.failed_link is not None


async def reconcile_records(
    renderer: PageRenderer,
    store: JsonFileStore,
    index: list[str],
    config: Settings | None = None,
    should_update: UpdatePredicate = never_update,
) -> list[CatalogRecord]:
    """
    Bring the record cache in line with the index.

    Args:
        renderer: Shared page renderer, used only for pending links.
        store: Cache file store.
        index: Current card link index.
        config: Cache file names and fetch delays.
        should_update: Returns True for cached records that must be re-fetched.

    Returns:
        Records sorted by name: kept cached records plus newly fetched ones.

    Raises:
        CachePersistError: The merged records could not be written.
    """
    config = config or settings
    key = config.RECORD_CACHE_FILE

    # Ordered set of required links
    required = dict.fromkeys(index)
    report = ReconcileReport(required=len(required))

    records: list[CatalogRecord] = []
    kept_links: set[str] = set()
    for record in _load_cached_records(store, key):
        if record.link in kept_links:
            continue
        try:
            stale = evaluate_predicate(should_update, record)
        except PredicateError as e:
            logger.error(
                "record_update_check_failed",
                link=e.link,
                error=str(e.cause),
                error_type=type(e.cause).__name__,
                source="record_cache",
            )
            stale = True
        if not stale:
            required.pop(record.link, None)
            kept_links.add(record.link)
            records.append(record)

    pending = list(required)
    report.retained = len(records)
    report.pending = len(pending)

    if not pending:
        logger.info(
            "record_cache_unchanged",
            retained=report.retained,
            note="skipping cache write",
            source="record_cache",
        )
        return records

    logger.info(
        "record_cache_fetching",
        retained=report.retained,
        pending=report.pending,
        source="record_cache",
    )

    throttle = FetchThrottle(config)
    for position, link in enumerate(pending):
        if position:
            await throttle.random_delay()
        try:
            record = await build_record(renderer, link)
        except Exception as e:
            logger.error(
                "record_fetch_aborted",
                link=link,
                error=str(e),
                error_type=type(e).__name__,
                skipped=len(pending) - position - 1,
                source="record_cache",
            )
            report.failed_link = link
            break
        records.append(record)
        report.fetched += 1

    records = sort_records(records)

    logger.info("record_cache_saving", items=len(records), source="record_cache")
    try:
        store.save(key, [record.to_cache() for record in records])
    except CachePersistError as e:
        logger.error(
            "record_cache_persist_failed",
            key=key,
            error=str(e),
            source="record_cache",
        )
        raise
    report.written = True

    logger.info(
        "record_cache_reconciled",
        aborted=report.aborted,
        **report.model_dump(),
        source="record_cache",
    )
    return records


def sort_records(records: list[CatalogRecord]) -> list[CatalogRecord]:
    """Order records by name (ordinal string comparison, stable)."""
    return sorted(records, key=lambda record: record.name)


def _load_cached_records(store: JsonFileStore, key: str) -> list[CatalogRecord]:
    """Previously cached records, or [] when the cache is missing or unreadable."""
    try:
        return _parse_records(key, store.load(key))
    except CacheReadError as e:
        # Fine, every required link is fetched instead.
        logger.warning("record_cache_miss", key=key, error=str(e), source="record_cache")
        return []


def _parse_records(key: str, raw: Any) -> list[CatalogRecord]:
    """Valid cached records; entries failing validation are skipped so their links stay pending."""
    if not isinstance(raw, list):
        raise CacheReadError(key, "expected a JSON array of records")
    records: list[CatalogRecord] = []
    for position, item in enumerate(raw):
        try:
            records.append(CatalogRecord.model_validate(item))
        except ValidationError as e:
            logger.warning(
                "record_cache_entry_invalid",
                key=key,
                position=position,
                link=item.get("link") if isinstance(item, dict) else None,
                errors=e.error_count(),
                source="record_cache",
            )
    return records
