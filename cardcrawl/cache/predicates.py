"""
Card Catalog - Update Predicates

An update predicate takes a cached record and returns True when the record
is stale and its page must be fetched again.
"""

from __future__ import annotations

from typing import Callable

from cardcrawl.errors import PredicateError
from cardcrawl.models import CatalogRecord

UpdatePredicate = Callable[[CatalogRecord], bool]


def never_update(record: CatalogRecord) -> bool:
    """Default: trust every cached record."""
    return False


def always_update(record: CatalogRecord) -> bool:
    """Re-fetch every cached record."""
    return True


def missing_fields(*fields: str) -> UpdatePredicate:
    """
    Stale when any of `fields` is absent from the cached record.

    Useful after adding a new scraped field: records cached before the
    field existed are fetched again, the rest are kept.

    Raises:
        ValueError: A field name is not a CatalogRecord field.
    """
    unknown = sorted(set(fields) - set(CatalogRecord.model_fields))
    if unknown:
        raise ValueError(f"unknown record fields: {', '.join(unknown)}")

    def predicate(record: CatalogRecord) -> bool:
        return any(getattr(record, field) is None for field in fields)

    return predicate


def any_of(*predicates: UpdatePredicate) -> UpdatePredicate:
    """Stale when any of the given predicates says so."""

    def predicate(record: CatalogRecord) -> bool:
        return any(check(record) for check in predicates)

    return predicate


def evaluate_predicate(should_update: UpdatePredicate, record: CatalogRecord) -> bool:
    """
    Run an update predicate against a cached record.

    Raises:
        PredicateError: The predicate itself raised.
    """
    try:
        return bool(should_update(record))
    except Exception as e:
        raise PredicateError(record.link, e) from e
