"""
Card Catalog - Application Entrypoint

Configures structlog, opens one browser page and runs the pipeline with it.

Run via:
    python -m cardcrawl.main
"""

from __future__ import annotations

import asyncio
import logging
import sys

import structlog
from playwright.async_api import async_playwright

from cardcrawl.config import Settings, settings
from cardcrawl.models import CatalogRecord
from cardcrawl.pipeline import run_pipeline
from cardcrawl.scraper.renderer import PlaywrightRenderer
from cardcrawl.scraper.throttle import FetchThrottle


# ---------------------------------------------------------------------------
# Structlog Configuration
# ---------------------------------------------------------------------------


def _configure_logging(log_level: str = "INFO", json_output: bool = True) -> None:
    """
    Set up structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        json_output: JSON lines when True, human-readable console otherwise.
    """
    level = getattr(logging, log_level.upper())

    # Configure stdlib logging first (for third-party libraries)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Application Run
# ---------------------------------------------------------------------------


async def main(config: Settings | None = None) -> list[CatalogRecord]:
    """
    Crawl and cache the card catalog.

    Execution order:
    1. Configure logging
    2. Launch one browser and one page
    3. Run the pipeline on that page
    4. Close the browser, whatever happened
    """
    config = config or settings
    _configure_logging(config.LOG_LEVEL, config.LOG_JSON)
    logger = structlog.get_logger(__name__)

    logger.info("cardcrawl_startup", headless=config.HEADLESS, category_url=config.CATEGORY_URL)

    try:
        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(headless=config.HEADLESS)
            try:
                context = await browser.new_context(user_agent=FetchThrottle.get_random_user_agent())
                page = await context.new_page()
                renderer = PlaywrightRenderer(page, timeout_ms=config.NAVIGATION_TIMEOUT_MS)

                records = await run_pipeline(renderer, config)
            finally:
                await browser.close()
                logger.info("cardcrawl_browser_closed")
    except Exception as e:
        logger.error(
            "cardcrawl_fatal_error",
            error=str(e),
            error_type=type(e).__name__,
        )
        raise

    logger.info("cardcrawl_done", records=len(records))
    return records


# ---------------------------------------------------------------------------
# CLI Entry
# ---------------------------------------------------------------------------


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except Exception:
        sys.exit(1)
