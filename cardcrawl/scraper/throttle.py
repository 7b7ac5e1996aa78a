"""
Card Catalog - Fetch Throttle

Keeps item fetches polite: an optional random pause between consecutive
card pages and a browser user agent picked once per session. Fetching is
strictly sequential; this only spaces the requests out.
"""

from __future__ import annotations

import asyncio
import random

import structlog

from cardcrawl.config import Settings, settings

logger = structlog.get_logger(__name__)


class FetchThrottle:
    """
    Random delay between FETCH_DELAY_MIN_SECONDS and FETCH_DELAY_MAX_SECONDS.

    A zero maximum disables the pause entirely.
    """

    # Realistic user agents for the browser context
    USER_AGENTS = [
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:123.0) Gecko/20100101 Firefox/123.0",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.3 Safari/605.1.15",
    ]

    def __init__(self, config: Settings | None = None) -> None:
        config = config or settings
        self._delay_min: float = config.FETCH_DELAY_MIN_SECONDS
        self._delay_max: float = max(config.FETCH_DELAY_MAX_SECONDS, self._delay_min)

    @property
    def enabled(self) -> bool:
        return self._delay_max > 0

    async def random_delay(self) -> None:
        """Sleep for a random duration between min and max delay."""
        if not self.enabled:
            return
        delay = random.uniform(self._delay_min, self._delay_max)
        logger.debug("fetch_throttle_delay", delay_seconds=round(delay, 2), source="throttle")
        await asyncio.sleep(delay)

    @classmethod
    def get_random_user_agent(cls) -> str:
        """Return a random user agent string."""
        return random.choice(cls.USER_AGENTS)
