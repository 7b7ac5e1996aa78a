"""Card Catalog - Two-Tier Cache"""

from cardcrawl.cache.index_cache import load_or_crawl_index
from cardcrawl.cache.predicates import (
    UpdatePredicate,
    always_update,
    any_of,
    missing_fields,
    never_update,
)
from cardcrawl.cache.record_cache import reconcile_records, sort_records
from cardcrawl.cache.store import JsonFileStore

__all__ = [
    "JsonFileStore",
    "UpdatePredicate",
    "always_update",
    "any_of",
    "load_or_crawl_index",
    "missing_fields",
    "never_update",
    "reconcile_records",
    "sort_records",
]
