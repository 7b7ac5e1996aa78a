"""
Card Catalog - Shared pytest Fixtures & Configuration

Provides common fixtures for all test modules:
- FakeRenderer: in-memory pages answering the named in-page queries
- Card page builders (vertical tables, release tables)
- Settings and cache store rooted in tmp_path
- Async test support via pytest-asyncio
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from cardcrawl.cache.store import JsonFileStore
from cardcrawl.config import Settings
from cardcrawl.scraper.queries import PageQuery


# ---------------------------------------------------------------------------
# Fake Renderer
# ---------------------------------------------------------------------------


class FakeRenderer:
    """
    PageRenderer over a dict of URL -> page description.

    A page description may hold:
        links:  category listing links (None = no listing container)
        next:   href of the "next page" control
        tables: raw table dicts as returned by the ALL_TABLES query
        text:   class name -> text of the first element with that class

    Navigating to an unknown URL or one listed in `broken` raises.
    """

    def __init__(self, pages: dict[str, dict[str, Any]], broken: set[str] | None = None) -> None:
        self.pages = pages
        self.broken = broken or set()
        self.visited: list[str] = []
        self.queries: list[str] = []
        self._current: dict[str, Any] = {}

    async def navigate(self, url: str) -> None:
        self.visited.append(url)
        if url in self.broken or url not in self.pages:
            raise RuntimeError(f"net::ERR_CONNECTION_REFUSED at {url}")
        self._current = self.pages[url]

    async def evaluate(self, query: PageQuery, *args: Any) -> Any:
        self.queries.append(query.name)
        page = self._current
        if query.name == "category_links":
            return page.get("links")
        if query.name == "next_page_href":
            return page.get("next")
        if query.name == "all_tables":
            return page.get("tables", [])
        if query.name == "first_text_by_class":
            return page.get("text", {}).get(args[0])
        raise AssertionError(f"unexpected query {query.name}")


# ---------------------------------------------------------------------------
# Page Builders
# ---------------------------------------------------------------------------


def vertical_table(rows: dict[str, str | list[str]]) -> dict[str, Any]:
    """Key/value table: one <th> label and its <td> value cell(s) per row."""
    labels = list(rows)
    data = [value if isinstance(value, list) else [value] for value in rows.values()]
    return {"header": labels, "data": data, "labels": labels}


def release_table(dates: list[str]) -> dict[str, Any]:
    """Printing table: a header row followed by one row per release."""
    header = ["Release", "Number", "Set name"]
    data: list[list[str]] = [[]]
    data.extend([date, f"LOB-EN{i:03d}", "Legend of Blue Eyes White Dragon"] for i, date in enumerate(dates))
    return {"header": header, "data": data, "labels": [None] * len(data)}


def card_page(
    name: str,
    lore: str | None = "Card lore.",
    fields: dict[str, str | list[str]] | None = None,
    releases: list[list[str]] | None = None,
) -> dict[str, Any]:
    text = {"heading": name}
    if lore is not None:
        text["lore"] = lore
    tables = [vertical_table(fields or {})]
    tables.extend(release_table(dates) for dates in releases or [])
    return {"text": text, "tables": tables}


@pytest.fixture
def make_renderer() -> Callable[..., FakeRenderer]:
    return FakeRenderer


@pytest.fixture
def make_card_page() -> Callable[..., dict[str, Any]]:
    return card_page


@pytest.fixture
def make_vertical_table() -> Callable[..., dict[str, Any]]:
    return vertical_table


@pytest.fixture
def make_release_table() -> Callable[..., dict[str, Any]]:
    return release_table


# ---------------------------------------------------------------------------
# Settings & Store
# ---------------------------------------------------------------------------


CATEGORY_URL = "https://wiki.example/Category:Cards"


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings with cache files under tmp_path and no fetch delay."""
    return Settings(
        CACHE_DIR=tmp_path,
        CATEGORY_URL=CATEGORY_URL,
        FORCE_REFRESH_INDEX=False,
        FETCH_DELAY_MIN_SECONDS=0.0,
        FETCH_DELAY_MAX_SECONDS=0.0,
    )


@pytest.fixture
def store(tmp_path: Path) -> JsonFileStore:
    return JsonFileStore(tmp_path)
