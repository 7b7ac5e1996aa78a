"""
Card Catalog - Error Taxonomy

CacheReadError     recoverable, the caller recomputes from the network
CachePersistError  fatal, propagated to the entrypoint
ExtractionError    per item, aborts the remaining fetch batch
PredicateError     update check failed, resolved as "needs update"
"""

from __future__ import annotations


class CardCrawlError(Exception):
    """Base class for all crawler errors."""


class CacheReadError(CardCrawlError):
    """A cache file is missing, unreadable or does not parse."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"cannot read cache {key!r}: {reason}")
        self.key = key
        self.reason = reason


class CachePersistError(CardCrawlError):
    """A cache file could not be written."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"cannot write cache {key!r}: {reason}")
        self.key = key
        self.reason = reason


class ExtractionError(CardCrawlError):
    """Navigation failed or a mandatory page element is absent."""

    def __init__(self, link: str, reason: str) -> None:
        super().__init__(f"cannot extract {link}: {reason}")
        self.link = link
        self.reason = reason


class PredicateError(CardCrawlError):
    """The update predicate raised for a cached record."""

    def __init__(self, link: str, cause: BaseException) -> None:
        super().__init__(f"update check failed for {link}: {cause}")
        self.link = link
        self.cause = cause
