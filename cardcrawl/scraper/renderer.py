"""
Card Catalog - Page Renderer Boundary

The crawler never touches the browser directly. It talks to a PageRenderer:
navigate to a URL, then evaluate named queries against the rendered
document. Queries go in as a descriptor plus arguments and come back as
plain cloneable data.

One renderer (one browser page) is created by the entrypoint and handed to
every component. All calls are awaited one at a time.
"""

from __future__ import annotations

from typing import Any, Protocol

import structlog

from cardcrawl.scraper.queries import PageQuery

logger = structlog.get_logger(__name__)


class PageRenderer(Protocol):
    """Loads pages and answers in-page queries. Either call may raise."""

    async def navigate(self, url: str) -> None:
        ...

    async def evaluate(self, query: PageQuery, *args: Any) -> Any:
        ...


class PlaywrightRenderer:
    """
    PageRenderer backed by a Playwright async Page.

    Usage:
        page = await context.new_page()
        renderer = PlaywrightRenderer(page)
        await renderer.navigate(url)
        links = await renderer.evaluate(CATEGORY_LINKS)
    """

    def __init__(self, page: Any, timeout_ms: int = 30000) -> None:
        self._page = page
        self._timeout_ms = timeout_ms

    async def navigate(self, url: str) -> None:
        logger.debug("renderer_navigate", url=url, source="renderer")
        await self._page.goto(url, wait_until="domcontentloaded", timeout=self._timeout_ms)

    async def evaluate(self, query: PageQuery, *args: Any) -> Any:
        logger.debug("renderer_evaluate", query=query.name, source="renderer")
        return await self._page.evaluate(query.script, list(args))
