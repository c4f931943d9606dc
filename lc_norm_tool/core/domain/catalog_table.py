# lc_norm_tool/core/domain/catalog_table.py

"""In-memory catalog table read from a delimited or spreadsheet export"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class CatalogTable(BaseModel):
    """Header plus rows keyed by header name, in file order"""

    model_config = ConfigDict()

    header: list[str] = Field(default_factory=list, description="Column names in file order")
    rows: list[dict[str, str]] = Field(default_factory=list, description="Data rows")
    source_path: str | None = Field(None, description="File the table was read from")

    def __len__(self) -> int:
        return len(self.rows)

    def has_column(self, name: str) -> bool:
        return name in self.header

    def select(self, keep: list[str] | None, renames: dict[str, str]) -> "CatalogTable":
        """Return a new table restricted to ``keep`` columns, with headers renamed

        Args:
            keep: Columns to keep in their file order, None keeps all
            renames: Mapping of old column name to new column name

        Returns:
            New CatalogTable; the source table is left untouched
        """
        columns = [name for name in self.header if keep is None or name in keep]
        header = [renames.get(name, name) for name in columns]
        rows = [
            {renames.get(name, name): row.get(name, "") for name in columns} for row in self.rows
        ]
        return CatalogTable(header=header, rows=rows, source_path=self.source_path)
