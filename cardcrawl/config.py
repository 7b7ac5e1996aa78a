"""
Card Catalog - Configuration & Constants

Every cache location, crawl start page and politeness knob lives here.
No hardcoded values in crawl or cache logic.

Usage:
    from cardcrawl.config import settings
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Central configuration for the card catalog crawler.

    Loads from environment variables with fallback defaults. A Settings
    instance is passed explicitly into run_pipeline(); the module-level
    singleton is only the default.
    """

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # -----------------------------------------------------------------------
    # Index cache
    # -----------------------------------------------------------------------
    FORCE_REFRESH_INDEX: bool = False       # True = re-crawl the category listing
    CATEGORY_URL: str = "https://yugipedia.com/wiki/Category:Duel_Monsters_cards"

    # -----------------------------------------------------------------------
    # Cache files
    # -----------------------------------------------------------------------
    CACHE_DIR: Path = Path(".")
    INDEX_CACHE_FILE: str = "card_urls.json"
    RECORD_CACHE_FILE: str = "card_details.json"

    # -----------------------------------------------------------------------
    # Browser
    # -----------------------------------------------------------------------
    HEADLESS: bool = True
    NAVIGATION_TIMEOUT_MS: int = 30000

    # Pause between item fetches (seconds). 0 disables the pause.
    FETCH_DELAY_MIN_SECONDS: float = 0.0
    FETCH_DELAY_MAX_SECONDS: float = 0.0

    # -----------------------------------------------------------------------
    # Logging
    # -----------------------------------------------------------------------
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True


# Singleton instance
settings = Settings()
