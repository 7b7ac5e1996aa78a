from cardcrawl.models.catalog_record import CatalogRecord
from cardcrawl.models.table_matrix import TableMatrix

__all__ = [
    "CatalogRecord",
    "TableMatrix",
]
