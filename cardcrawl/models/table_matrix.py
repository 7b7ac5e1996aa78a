"""
Card Catalog - Table Matrix Model

One HTML table flattened to text, rebuilt on every page visit and never
persisted.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class TableMatrix(BaseModel):
    """
    Text content of a single <table>.

    header: every header cell text of the table, in document order.
    data:   one entry per <tr>, holding the texts of that row's <td> cells.
            Rows without <td> cells (header rows) are empty lists.
    labels: one entry per <tr>, the text of the row's first <th>, or None.
            Aligned with data; this is the label cell of a vertical table.

    Header and row lengths are not checked against each other.
    """

    header: list[str] = Field(default_factory=list)
    data: list[list[str]] = Field(default_factory=list)
    labels: list[str | None] = Field(default_factory=list)

    def column(self, index: int) -> list[str]:
        """Cell texts at position `index` of every row long enough to have one."""
        return [row[index] for row in self.data if index < len(row)]
