# lc_norm_tool/infrastructure/persistence/_table_loader.py

"""Catalog table loading from CSV, TSV and XLSX exports"""

# Standard library imports
from csv import reader
from logging import getLogger
from pathlib import Path

# Third party imports
from openpyxl import load_workbook

# Local imports
from lc_norm_tool.core.domain.catalog_table import CatalogTable
from lc_norm_tool.shared.utils.text_utils import collapse_spaces

logger = getLogger(__name__)

DELIMITED_SUFFIXES = {".csv", ".tsv", ".txt"}
SPREADSHEET_SUFFIXES = {".xlsx", ".xlsm"}


def _cell_text(value: object) -> str:
    """Render a spreadsheet cell as text the way it reads in the sheet"""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _build_header(raw_names: list[str], source: Path) -> list[str]:
    """Column names with whitespace collapsed

    A blank name becomes "Column N" (1-based position) so its values are
    kept. Two columns with the same name would share one dict key and lose
    data, so duplicates are rejected.

    Raises:
        ValueError: if two columns have the same name
    """
    header = []
    for position, raw_name in enumerate(raw_names, start=1):
        name = collapse_spaces(raw_name)
        if not name:
            name = f"Column {position}"
            logger.warning(f"Column {position} of {source} has no header; using '{name}'")
        header.append(name)

    seen: set[str] = set()
    duplicates = []
    for name in header:
        if name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)
    if duplicates:
        raise ValueError(
            f"Duplicate column names in {source}: {', '.join(repr(n) for n in duplicates)}"
        )

    return header


class CatalogTableLoader:
    """Reads a catalog export into a CatalogTable

    Delimited files are read with the csv module; ``.tsv`` files use a tab
    delimiter unless one was given explicitly. XLSX files are read with
    openpyxl, taking the first row as the header.
    """

    __slots__ = ("path", "delimiter", "encoding", "sheet_name")

    def __init__(
        self,
        path: str | Path,
        delimiter: str | None = None,
        encoding: str = "utf-8-sig",
        sheet_name: str | None = None,
    ) -> None:
        """Initialize the loader

        Args:
            path: Input file
            delimiter: Field delimiter, None picks one from the file extension
            encoding: Text encoding for delimited files
            sheet_name: Worksheet for XLSX files, None for the active sheet
        """
        self.path = Path(path)
        self.delimiter = delimiter
        self.encoding = encoding
        self.sheet_name = sheet_name

    def load(self) -> CatalogTable:
        """Load the whole table

        Returns:
            CatalogTable with header and rows

        Raises:
            FileNotFoundError: if the input file does not exist
            ValueError: if the file type is not supported
        """
        if not self.path.exists():
            raise FileNotFoundError(f"Input file not found: {self.path}")

        suffix = self.path.suffix.lower()
        if suffix in SPREADSHEET_SUFFIXES:
            table = self._load_spreadsheet()
        elif suffix in DELIMITED_SUFFIXES:
            table = self._load_delimited()
        else:
            raise ValueError(f"Unsupported input file type: {self.path.suffix or '(none)'}")

        logger.info(f"Loaded {len(table):,} rows with {len(table.header)} columns from {self.path}")
        return table

    def resolve_delimiter(self) -> str:
        """Delimiter used for delimited files: explicit, else tab for .tsv, else comma"""
        if self.delimiter is not None:
            return self.delimiter
        if self.path.suffix.lower() == ".tsv":
            return "\t"
        return ","

    def _load_delimited(self) -> CatalogTable:
        with open(self.path, "r", newline="", encoding=self.encoding) as f:
            records = reader(f, delimiter=self.resolve_delimiter())
            header = _build_header(next(records, []), self.path)
            rows = []
            for values in records:
                if not values:
                    continue
                values.extend([""] * (len(header) - len(values)))
                rows.append(dict(zip(header, values)))

        return CatalogTable(header=header, rows=rows, source_path=str(self.path))

    def _load_spreadsheet(self) -> CatalogTable:
        workbook = load_workbook(self.path, read_only=True, data_only=True)
        try:
            if self.sheet_name:
                if self.sheet_name not in workbook.sheetnames:
                    raise ValueError(f"Worksheet '{self.sheet_name}' not found in {self.path}")
                worksheet = workbook[self.sheet_name]
            else:
                worksheet = workbook.active

            row_iter = worksheet.iter_rows(values_only=True)
            first_row = next(row_iter, None)
            if first_row is None:
                return CatalogTable(header=[], rows=[], source_path=str(self.path))

            header = _build_header([_cell_text(value) for value in first_row], self.path)
            rows = []
            for values in row_iter:
                if values is None or all(value is None for value in values):
                    continue
                cells = [_cell_text(value) for value in values]
                cells.extend([""] * (len(header) - len(cells)))
                rows.append(dict(zip(header, cells)))
        finally:
            workbook.close()

        return CatalogTable(header=header, rows=rows, source_path=str(self.path))
