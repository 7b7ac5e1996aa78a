"""
Card Catalog - Table Extraction & Field Resolution

Card pages have no fixed schema. Fields live in vertical (key/value) tables
whose rows appear in varying order with varying labels, so every table on
the page is pulled out once and fields are looked up by label.
"""

from __future__ import annotations

import structlog

from cardcrawl.models import TableMatrix
from cardcrawl.scraper.queries import ALL_TABLES
from cardcrawl.scraper.renderer import PageRenderer

logger = structlog.get_logger(__name__)


async def extract_tables(renderer: PageRenderer) -> list[TableMatrix]:
    """
    Return one TableMatrix per <table> on the current page, in document order.

    Ragged rows are passed through as-is.
    """
    raw_tables = await renderer.evaluate(ALL_TABLES)
    tables = [TableMatrix.model_validate(raw) for raw in raw_tables or []]

    logger.debug("tables_extracted", count=len(tables), source="tables")
    return tables


def resolve_field(tables: list[TableMatrix], label: str) -> str | None:
    """
    Look up the value of a labeled row across all vertical tables.

    A row is a hit when its label cell equals `label` exactly and it has
    exactly one value cell with non-blank text. Rows with several value
    cells belong to wide layout tables and are skipped.

    Labels are assumed unique per page: the first hit in document order
    wins and a collision in a later table is not reported.

    Returns:
        The trimmed value, or None when no row qualifies.
    """
    for table in tables:
        for row_label, cells in zip(table.labels, table.data):
            if row_label != label or len(cells) != 1:
                continue
            value = cells[0].strip()
            if value:
                return value
    return None


def split_field(value: str | None, separator: str = "/") -> list[str] | None:
    """Split a combined field like 'Dragon / Effect' into trimmed tokens."""
    if value is None:
        return None
    return [token.strip() for token in value.split(separator)]
