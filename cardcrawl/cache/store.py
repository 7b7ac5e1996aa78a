"""
Card Catalog - JSON File Store

Key/value blob storage for both caches. A key is a file name under the
store root; a value is any JSON-serializable object. Every save replaces
the whole file.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog

from cardcrawl.errors import CachePersistError, CacheReadError

logger = structlog.get_logger(__name__)


class JsonFileStore:
    """
    JSON files in one directory.

    Usage:
        store = JsonFileStore(Path("."))
        store.save("card_urls.json", links)
        links = store.load("card_urls.json")
    """

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root)

    def path_for(self, key: str) -> Path:
        return self._root / key

    def load(self, key: str) -> Any:
        """
        Read and parse a cached value.

        Raises:
            CacheReadError: The file is missing, unreadable or not valid JSON.
        """
        path = self.path_for(key)
        logger.info("cache_read", key=key, path=str(path), source="cache_store")

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise CacheReadError(key, str(e)) from e

        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise CacheReadError(key, f"invalid JSON: {e}") from e

    def save(self, key: str, value: Any) -> Path:
        """
        Replace the cached value for `key`.

        The value is written to a sibling temp file first and moved over the
        old file, so readers never see a half-written cache.

        Raises:
            CachePersistError: The value could not be serialized or written.
        """
        path = self.path_for(key)
        tmp_path = path.with_name(path.name + ".tmp")

        try:
            content = json.dumps(value, ensure_ascii=False)
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(content, encoding="utf-8")
            tmp_path.replace(path)
        except (OSError, TypeError, ValueError) as e:
            tmp_path.unlink(missing_ok=True)
            raise CachePersistError(key, str(e)) from e

        logger.info("cache_written", key=key, path=str(path), source="cache_store")
        return path
