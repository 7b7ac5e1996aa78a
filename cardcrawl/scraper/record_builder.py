"""
Card Catalog - Record Builder

Turns one card page into a CatalogRecord. Most fields are plain label
lookups in the page's vertical tables; a few are composite:

- release:      earliest value in any "Release" column (earliest printing)
- types:        "Dragon / Effect" -> monster_type + monster_card_types
- ATK / DEF:    attack + defense
- ATK / LINK:   attack + link_rating (only when ATK / DEF is absent for attack)

The heading and the lore box are mandatory; a page without either fails
the whole build.
"""

from __future__ import annotations

import structlog

from cardcrawl.errors import ExtractionError
from cardcrawl.models import CatalogRecord, TableMatrix
from cardcrawl.scraper.queries import FIRST_TEXT_BY_CLASS
from cardcrawl.scraper.renderer import PageRenderer
from cardcrawl.scraper.tables import extract_tables, resolve_field, split_field

logger = structlog.get_logger(__name__)

HEADING_CLASS = "heading"
LORE_CLASS = "lore"
RELEASE_HEADER_MARKER = "Release"

# Record field -> vertical table label
DIRECT_FIELDS: dict[str, str] = {
    "category": "Card type",
    "attribute": "Attribute",
    "level": "Level",
    "rank": "Rank",
    "link_arrows": "Link Arrows",
    "pendulum_scale": "Pendulum Scale",
    "password": "Password",
    "property": "Property",
}

TYPES_LABEL = "Types"
ATTACK_DEFENSE_LABEL = "ATK / DEF"
ATTACK_LINK_LABEL = "ATK / LINK"


async def build_record(renderer: PageRenderer, link: str) -> CatalogRecord:
    """
    Navigate to a card page and extract its record.

    Args:
        renderer: Shared page renderer.
        link: Card page URL (the record key).

    Returns:
        The extracted CatalogRecord. Optional fields not on the page are None.

    Raises:
        ExtractionError: Navigation failed, or the heading or lore is missing.
    """
    logger.info("record_extract_start", link=link, source="record_builder")

    try:
        await renderer.navigate(link)
    except Exception as e:
        raise ExtractionError(link, f"navigation failed: {e}") from e

    name = await _first_text(renderer, link, HEADING_CLASS)
    tables = await extract_tables(renderer)

    fields = {field: resolve_field(tables, label) for field, label in DIRECT_FIELDS.items()}

    types = split_field(resolve_field(tables, TYPES_LABEL))
    attack_defense = split_field(resolve_field(tables, ATTACK_DEFENSE_LABEL))
    attack_link = split_field(resolve_field(tables, ATTACK_LINK_LABEL))

    description = await _first_text(renderer, link, LORE_CLASS)

    return CatalogRecord(
        name=name,
        link=link,
        description=description,
        monster_type=types[0] if types else None,
        monster_card_types=types[1:] if types is not None else None,
        attack=_token(attack_defense, 0) or _token(attack_link, 0),
        defense=_token(attack_defense, 1),
        link_rating=_token(attack_link, 1),
        release=resolve_release(tables),
        **fields,
    )


def resolve_release(tables: list[TableMatrix]) -> str | None:
    """
    Earliest release value across every "Release" column of every table.

    Cards printed several times list each printing in release tables, and
    the earliest printing is the card's release. Values are compared as
    strings, so this relies on the source using one sortable date format.

    Returns:
        The lexicographically smallest non-empty value, or None.
    """
    candidates: list[str] = []
    for table in tables:
        for index, header in enumerate(table.header):
            if RELEASE_HEADER_MARKER in header:
                candidates.extend(value for value in table.column(index) if value)
    return min(candidates, default=None)


async def _first_text(renderer: PageRenderer, link: str, class_name: str) -> str:
    """Text of the first element with `class_name`; raises if there is none."""
    text = await renderer.evaluate(FIRST_TEXT_BY_CLASS, class_name)
    if text is None:
        raise ExtractionError(link, f"no element with class {class_name!r}")
    return text


def _token(tokens: list[str] | None, index: int) -> str | None:
    if tokens is None or index >= len(tokens):
        return None
    return tokens[index]
