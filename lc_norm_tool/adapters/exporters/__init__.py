# lc_norm_tool/adapters/exporters/__init__.py

"""Output generation and export functionality"""

# Local imports
from lc_norm_tool.adapters.exporters.base_exporter import BaseTableExporter
from lc_norm_tool.adapters.exporters.csv_exporter import CSVExporter
from lc_norm_tool.adapters.exporters.rejected_exporter import RejectedRowsExporter
from lc_norm_tool.adapters.exporters.xlsx_exporter import XLSXExporter

__all__: list[str] = [
    "BaseTableExporter",
    "CSVExporter",
    "RejectedRowsExporter",
    "XLSXExporter",
]
