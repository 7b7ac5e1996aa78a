"""
Card Catalog - Catalog Record Model

The persisted unit of the record cache. `link` is the unique key; every
other field except `name` is absent when it does not apply to the card
(spell and trap cards have no level, non-link monsters no link rating).

Values are kept exactly as scraped (strings), no domain validation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class CatalogRecord(BaseModel):
    """
    Structured fields extracted from one card page.

    Keys this model does not know (written by another version of the
    crawler) are kept as extras and written back by `to_cache()`.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    link: str
    description: str | None = None
    category: str | None = None
    attribute: str | None = None
    monster_type: str | None = None
    monster_card_types: list[str] | None = None
    level: str | None = None
    rank: str | None = None
    link_rating: str | None = None
    link_arrows: str | None = None
    pendulum_scale: str | None = None
    attack: str | None = None
    defense: str | None = None
    password: str | None = None
    release: str | None = None
    property: str | None = None

    def to_cache(self) -> dict[str, Any]:
        """Serialize for the record cache file, absent fields omitted."""
        return self.model_dump(exclude_none=True)

    def __repr__(self) -> str:
        return f"<CatalogRecord name={self.name!r} link={self.link!r}>"
