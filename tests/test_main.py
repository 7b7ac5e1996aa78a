"""Tests for the application entrypoint (browser lifecycle around the pipeline)."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from cardcrawl.errors import CachePersistError
from cardcrawl.main import main
from cardcrawl.models import CatalogRecord
from cardcrawl.scraper.renderer import PlaywrightRenderer


@pytest.fixture
def browser() -> AsyncMock:
    page = AsyncMock()
    context = AsyncMock()
    context.new_page = AsyncMock(return_value=page)
    browser = AsyncMock()
    browser.new_context = AsyncMock(return_value=context)
    return browser


@pytest.fixture
def playwright_cm(browser: AsyncMock) -> MagicMock:
    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=browser)
    cm = MagicMock()
    cm.__aenter__ = AsyncMock(return_value=playwright)
    cm.__aexit__ = AsyncMock(return_value=False)
    return cm


class TestMain:
    @pytest.mark.asyncio
    @patch("cardcrawl.main._configure_logging")
    @patch("cardcrawl.main.run_pipeline")
    async def test_runs_pipeline_and_closes_browser(
        self,
        mock_pipeline: AsyncMock,
        mock_logging: MagicMock,
        playwright_cm: MagicMock,
        browser: AsyncMock,
        test_settings,
    ) -> None:
        records = [CatalogRecord(name="Kuriboh", link="https://wiki.example/Kuriboh")]
        mock_pipeline.return_value = records

        with patch("cardcrawl.main.async_playwright", return_value=playwright_cm):
            result = await main(test_settings)

        assert result == records
        renderer, config = mock_pipeline.await_args.args
        assert isinstance(renderer, PlaywrightRenderer)
        assert config is test_settings
        browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    @patch("cardcrawl.main._configure_logging")
    @patch("cardcrawl.main.run_pipeline")
    async def test_fatal_error_closes_browser_and_propagates(
        self,
        mock_pipeline: AsyncMock,
        mock_logging: MagicMock,
        playwright_cm: MagicMock,
        browser: AsyncMock,
        test_settings,
    ) -> None:
        mock_pipeline.side_effect = CachePersistError("card_details.json", "disk full")

        with patch("cardcrawl.main.async_playwright", return_value=playwright_cm):
            with pytest.raises(CachePersistError):
                await main(test_settings)

        browser.close.assert_awaited_once()
