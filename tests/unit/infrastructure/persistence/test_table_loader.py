# tests/unit/infrastructure/persistence/test_table_loader.py

"""Tests for CatalogTableLoader"""

# Third party imports
import pytest

# Local imports
from lc_norm_tool.infrastructure.persistence import CatalogTableLoader
from tests.fixtures.call_numbers import SAMPLE_HEADER
from tests.fixtures.call_numbers import write_catalog_csv
from tests.fixtures.call_numbers import write_catalog_xlsx


class TestDelimitedLoading:
    """Test loading CSV and TSV exports"""

    def test_csv(self, catalog_csv, catalog_rows):
        table = CatalogTableLoader(catalog_csv).load()

        assert table.header == SAMPLE_HEADER
        assert table.rows == catalog_rows
        assert table.source_path == str(catalog_csv)
        assert len(table) == 5

    def test_byte_order_mark_is_removed(self, tmp_path):
        path = tmp_path / "bom.csv"
        path.write_bytes("\ufeffLC,Title\nQC 183 .G675,Optics\n".encode("utf-8"))

        table = CatalogTableLoader(path).load()

        assert table.header == ["LC", "Title"]
        assert table.rows == [{"LC": "QC 183 .G675", "Title": "Optics"}]

    def test_header_whitespace_is_collapsed(self, tmp_path):
        path = tmp_path / "spaced.csv"
        path.write_text(" LC ,Call   Title\nQC 183 .G675,Optics\n", encoding="utf-8")

        table = CatalogTableLoader(path).load()

        assert table.header == ["LC", "Call Title"]
        assert table.rows[0]["Call Title"] == "Optics"

    def test_short_rows_are_padded(self, tmp_path):
        path = tmp_path / "short.csv"
        path.write_text("LC,Title\nQC 183 .G675\n", encoding="utf-8")

        table = CatalogTableLoader(path).load()

        assert table.rows == [{"LC": "QC 183 .G675", "Title": ""}]

    def test_tsv_uses_tab_delimiter(self, tmp_path, catalog_rows):
        path = write_catalog_csv(tmp_path / "catalog.tsv", catalog_rows, delimiter="\t")
        loader = CatalogTableLoader(path)

        table = loader.load()

        assert loader.resolve_delimiter() == "\t"
        assert table.rows[0]["LC"] == "TD224.C3 C3723 2004"

    def test_explicit_delimiter(self, tmp_path, catalog_rows):
        path = write_catalog_csv(tmp_path / "catalog.txt", catalog_rows, delimiter=";")

        table = CatalogTableLoader(path, delimiter=";").load()

        assert table.header == SAMPLE_HEADER
        assert table.rows[3]["LC"] == "HD 1695 .K55 .V5 2010"

    def test_blank_header_keeps_its_column(self, tmp_path, caplog):
        path = tmp_path / "blank.csv"
        path.write_text("LC,,Title,\nQC 183 .G675,3910002,Optics,x\n", encoding="utf-8")

        table = CatalogTableLoader(path).load()

        assert table.header == ["LC", "Column 2", "Title", "Column 4"]
        assert table.rows == [
            {"LC": "QC 183 .G675", "Column 2": "3910002", "Title": "Optics", "Column 4": "x"}
        ]
        assert "Column 2 of" in caplog.text

    @pytest.mark.parametrize("header", ["LC,Title,Title", "LC,Title, Title "])
    def test_duplicate_header_raises(self, tmp_path, header):
        path = tmp_path / "duplicate.csv"
        path.write_text(f"{header}\nQC 183 .G675,Optics,Optik\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Duplicate column names .*'Title'"):
            CatalogTableLoader(path).load()

    def test_default_delimiter_is_comma(self, tmp_path):
        assert CatalogTableLoader(tmp_path / "x.csv").resolve_delimiter() == ","


class TestSpreadsheetLoading:
    """Test loading XLSX exports"""

    def test_active_sheet(self, tmp_path):
        path = write_catalog_xlsx(
            tmp_path / "catalog.xlsx",
            [["QC 183 .G675", "Optics", 3910001], [None, "Blank", 3910002]],
            header=["LC", "Title", "Barcode"],
        )

        table = CatalogTableLoader(path).load()

        assert table.header == ["LC", "Title", "Barcode"]
        assert table.rows == [
            {"LC": "QC 183 .G675", "Title": "Optics", "Barcode": "3910001"},
            {"LC": "", "Title": "Blank", "Barcode": "3910002"},
        ]

    def test_named_sheet(self, tmp_path):
        path = write_catalog_xlsx(
            tmp_path / "catalog.xlsx", [["GB 658 .C43 2005"]], header=["LC"], sheet_title="Books"
        )

        table = CatalogTableLoader(path, sheet_name="Books").load()

        assert table.rows == [{"LC": "GB 658 .C43 2005"}]

    def test_missing_sheet_raises(self, tmp_path):
        path = write_catalog_xlsx(tmp_path / "catalog.xlsx", [], header=["LC"])

        with pytest.raises(ValueError, match="Worksheet 'Serials' not found"):
            CatalogTableLoader(path, sheet_name="Serials").load()

    def test_duplicate_sheet_header_raises(self, tmp_path):
        path = write_catalog_xlsx(tmp_path / "catalog.xlsx", [], header=["LC", "LC"])

        with pytest.raises(ValueError, match="Duplicate column names"):
            CatalogTableLoader(path).load()

    def test_header_only_sheet(self, tmp_path):
        path = write_catalog_xlsx(tmp_path / "catalog.xlsx", [], header=["LC", "Title"])

        table = CatalogTableLoader(path).load()

        assert table.header == ["LC", "Title"]
        assert len(table) == 0


class TestLoaderErrors:
    """Test loader error handling"""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            CatalogTableLoader(tmp_path / "missing.csv").load()

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{}", encoding="utf-8")

        with pytest.raises(ValueError, match="Unsupported input file type"):
            CatalogTableLoader(path).load()
