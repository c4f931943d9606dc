# lc_norm_tool/adapters/exporters/xlsx_exporter.py

"""XLSX export of normalized catalog tables"""

# Third party imports
from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.styles import PatternFill
from openpyxl.utils import get_column_letter

# Local imports
from lc_norm_tool.adapters.exporters.base_exporter import BaseTableExporter


class XLSXExporter(BaseTableExporter):
    """Export a catalog table as a single-sheet Excel workbook

    Every cell is written as text so call numbers and other identifiers are
    never reinterpreted as numbers, dates or formulas.
    """

    __slots__ = ()

    HEADER_FONT = Font(bold=True, color="FFFFFF")
    HEADER_FILL = PatternFill(start_color="366092", end_color="366092", fill_type="solid")
    SHEET_TITLE = "Normalized"
    MAX_COLUMN_WIDTH = 60

    def export(self) -> None:
        """Write the table to a new workbook"""
        self._ensure_parent_dir()

        wb = Workbook()
        ws = wb.active
        ws.title = self.SHEET_TITLE

        header = self.table.header
        ws.append(header)
        for cell in ws[1]:
            cell.font = self.HEADER_FONT
            cell.fill = self.HEADER_FILL

        widths = [len(name) for name in header]
        for row in self.table.rows:
            values = [row.get(name, "") for name in header]
            ws.append(values)
            for index, value in enumerate(values):
                widths[index] = max(widths[index], len(value))

        for index, width in enumerate(widths, start=1):
            col_letter = get_column_letter(index)
            ws.column_dimensions[col_letter].width = min(width + 2, self.MAX_COLUMN_WIDTH)

        for row_cells in ws.iter_rows():
            for cell in row_cells:
                # openpyxl stores any string starting with "=" as a formula
                if cell.data_type == "f":
                    cell.data_type = "s"
                if cell.row > 1:
                    cell.number_format = "@"

        ws.freeze_panes = "A2"
        wb.save(self.output_path)
