# lc_norm_tool/adapters/exporters/csv_exporter.py

"""CSV export of normalized catalog tables"""

# Standard library imports
from csv import DictWriter
from pathlib import Path

# Local imports
from lc_norm_tool.adapters.exporters.base_exporter import BaseTableExporter
from lc_norm_tool.core.domain.catalog_table import CatalogTable


class CSVExporter(BaseTableExporter):
    """Export a catalog table as a delimited text file

    Columns are written in table header order; every other column is passed
    through exactly as read.
    """

    __slots__ = ("delimiter", "encoding")

    def __init__(
        self,
        table: CatalogTable,
        output_path: str | Path,
        delimiter: str = ",",
        encoding: str = "utf-8",
    ):
        super().__init__(table, output_path)
        self.delimiter = delimiter
        self.encoding = encoding

    def export(self) -> None:
        """Write header and rows to the output file"""
        self._ensure_parent_dir()

        with open(self.output_path, "w", newline="", encoding=self.encoding) as f:
            csv_writer = DictWriter(
                f, fieldnames=self.table.header, delimiter=self.delimiter, extrasaction="ignore"
            )
            csv_writer.writeheader()
            csv_writer.writerows(self.table.rows)
