"""
Card Catalog - In-Page Query Catalogue

Every query that runs inside the rendered document is declared here as a
named, self-contained script. Scripts take a single array argument and
return only structurally cloneable data (strings, arrays, plain objects,
null). Nothing from the host process is captured.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PageQuery(BaseModel):
    """A query descriptor sent across the renderer boundary."""

    model_config = ConfigDict(frozen=True)

    name: str
    script: str


# Item links of a category listing page, or null when the listing
# container is missing.
CATEGORY_LINKS = PageQuery(
    name="category_links",
    script="""
    (args) => {
        const container = document.getElementById("mw-pages");
        if (!container) {
            return null;
        }
        return Array.from(container.querySelectorAll("li a"), (anchor) => anchor.href);
    }
    """,
)

NEXT_PAGE_HREF = PageQuery(
    name="next_page_href",
    script="""
    (args) => {
        const anchor = document.evaluate(
            "//a[contains(text(), 'next page')]",
            document.body,
            null,
            XPathResult.FIRST_ORDERED_NODE_TYPE,
            null,
        ).singleNodeValue;
        return anchor ? anchor.href : null;
    }
    """,
)

ALL_TABLES = PageQuery(
    name="all_tables",
    script="""
    (args) => Array.from(document.getElementsByTagName("table"), (table) => {
        const rows = Array.from(table.querySelectorAll("tr"));
        return {
            header: Array.from(table.querySelectorAll("tr th"), (cell) => cell.innerText),
            data: rows.map((row) => Array.from(row.querySelectorAll("td"), (cell) => cell.innerText)),
            labels: rows.map((row) => {
                const label = row.querySelector("th");
                return label ? label.innerText : null;
            }),
        };
    })
    """,
)

# args: [className]
FIRST_TEXT_BY_CLASS = PageQuery(
    name="first_text_by_class",
    script="""
    ([className]) => {
        const element = document.getElementsByClassName(className)[0];
        return element ? element.innerText : null;
    }
    """,
)
