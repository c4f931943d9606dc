# lc_norm_tool/adapters/exporters/base_exporter.py

"""Base exporter class for catalog tables"""

# Standard library imports
from abc import ABC
from abc import abstractmethod
from pathlib import Path

# Local imports
from lc_norm_tool.core.domain.catalog_table import CatalogTable


class BaseTableExporter(ABC):
    """Base class for exporters that write a CatalogTable to disk

    Subclasses implement ``export``; the output directory is created on
    demand.
    """

    __slots__ = ("table", "output_path")

    def __init__(self, table: CatalogTable, output_path: str | Path):
        """Initialize the exporter

        Args:
            table: Table to write
            output_path: Path for the output file
        """
        self.table = table
        self.output_path = Path(output_path)

    def _ensure_parent_dir(self) -> None:
        self.output_path.parent.mkdir(parents=True, exist_ok=True)

    @abstractmethod
    def export(self) -> None:
        """Write the table to ``output_path``"""
