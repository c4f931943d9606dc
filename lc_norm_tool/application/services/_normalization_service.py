# lc_norm_tool/application/services/_normalization_service.py

"""Normalization service for rewriting the call number column of a catalog table.

The service reads each LC cell, parses it, and replaces it with the canonical
form. Every other column is passed through untouched. Rows that carry no call
number, fail to parse, or (optionally) carry a note are reported separately
instead of being written.
"""

# Standard library imports
from concurrent.futures import ProcessPoolExecutor
from concurrent.futures import as_completed
from logging import getLogger
from pathlib import Path
from time import time

# Local imports
from lc_norm_tool.adapters.exporters.csv_exporter import CSVExporter
from lc_norm_tool.adapters.exporters.rejected_exporter import RejectedRowsExporter
from lc_norm_tool.adapters.exporters.xlsx_exporter import XLSXExporter
from lc_norm_tool.application.models.normalization_stats import NormalizationResult
from lc_norm_tool.application.models.normalization_stats import NormalizationStats
from lc_norm_tool.application.models.normalization_stats import RowOutcome
from lc_norm_tool.application.parsing import maybe_parse
from lc_norm_tool.core.domain.catalog_table import CatalogTable
from lc_norm_tool.core.domain.enums import RowStatus
from lc_norm_tool.core.types.results import ParseOutcome
from lc_norm_tool.infrastructure.config import ConfigLoader
from lc_norm_tool.infrastructure.logging import ProgressBarManager
from lc_norm_tool.infrastructure.logging import get_progress_manager
from lc_norm_tool.infrastructure.persistence import CatalogTableLoader
from lc_norm_tool.shared.utils.text_utils import clean_cell

logger = getLogger(__name__)

PARSE_PHASE = "parse"


def _parse_chunk_static(cells: list[str | None], fold_unicode: bool) -> list[ParseOutcome]:
    """Clean and parse a chunk of LC cells

    This must be a module-level function so worker processes can pickle it.
    """
    return [maybe_parse(clean_cell(cell, fold_unicode=fold_unicode)) for cell in cells]


class NormalizationService:
    """Application service for normalizing the LC column of catalog tables.

    Parsing is pure, so chunks of cells may be spread over worker processes;
    results are always reassembled in row order.
    """

    __slots__ = ("_config", "_progress")

    def __init__(
        self, config: ConfigLoader | None = None, progress: ProgressBarManager | None = None
    ) -> None:
        """Initialize the normalization service.

        Args:
            config: Configuration loader, uses default if None
            progress: Progress display, uses the global manager if None
        """
        self._config = config or ConfigLoader()
        self._progress = progress or get_progress_manager()

    @property
    def config(self) -> ConfigLoader:
        return self._config

    def normalize_cell(self, text: str | None) -> ParseOutcome:
        """Clean one LC cell and parse it"""
        return _parse_chunk_static([text], self._config.input.fold_unicode)[0]

    def _parse_cells(self, cells: list[str]) -> list[ParseOutcome]:
        """Parse all cells, in order, in this process or in worker processes"""
        processing = self._config.processing
        fold_unicode = self._config.input.fold_unicode
        chunk_size = processing.chunk_size
        chunks = [cells[i : i + chunk_size] for i in range(0, len(cells), chunk_size)]

        with self._progress.phase_context(
            PARSE_PHASE, total=len(cells), description="Parsing call numbers"
        ):
            if processing.max_workers == 1 or len(chunks) <= 1:
                outcomes: list[ParseOutcome] = []
                for chunk in chunks:
                    outcomes.extend(_parse_chunk_static(chunk, fold_unicode))
                    self._progress.update_task(PARSE_PHASE, advance=len(chunk))
                return outcomes

            logger.debug(
                f"Parsing {len(cells):,} cells in {len(chunks)} chunks "
                f"on {processing.max_workers} worker processes"
            )
            chunk_outcomes: list[list[ParseOutcome]] = [[] for _ in chunks]
            with ProcessPoolExecutor(max_workers=processing.max_workers) as executor:
                future_to_index = {
                    executor.submit(_parse_chunk_static, chunk, fold_unicode): index
                    for index, chunk in enumerate(chunks)
                }

                for future in as_completed(future_to_index):
                    index = future_to_index[future]
                    chunk_outcomes[index] = future.result()
                    self._progress.update_task(PARSE_PHASE, advance=len(chunks[index]))

        return [outcome for outcomes in chunk_outcomes for outcome in outcomes]

    def _classify(
        self, row_number: int, cell: str, outcome: ParseOutcome, stats: NormalizationStats
    ) -> tuple[str | None, RowOutcome | None]:
        """Decide what happens to one row

        Returns:
            Tuple of (canonical text, None) for rows to write, or
            (None, RowOutcome) for rejected rows
        """
        match outcome.type:
            case "record":
                record = outcome.record
                rendered = record.render()
                if record.note is not None and self._config.processing.reject_notes:
                    stats.increment("rejected_notes")
                    return None, RowOutcome(
                        row_number=row_number,
                        status=RowStatus.REJECTED_NOTE,
                        original=cell,
                        detail=f"note {record.note.body!r} in {rendered!r}",
                    )
                stats.increment("normalized")
                if rendered == cell.strip():
                    stats.increment("unchanged")
                return rendered, None
            case "no_record":
                stats.increment("no_record")
                return None, RowOutcome(
                    row_number=row_number, status=RowStatus.NO_RECORD, original=cell
                )
            case "error":
                stats.record_error(outcome.kind)
                return None, RowOutcome(
                    row_number=row_number,
                    status=RowStatus.ERROR,
                    original=cell,
                    kind=outcome.kind,
                    detail=outcome.describe(),
                )

        raise ValueError(f"Unknown parse outcome: {outcome!r}")

    def normalize_table(self, table: CatalogTable) -> NormalizationResult:
        """Normalize the LC column of a table

        Args:
            table: Table as loaded

        Returns:
            NormalizationResult with the rewritten table, rejected rows and statistics

        Raises:
            ValueError: if the table has no LC column
        """
        columns = self._config.columns
        lc_column = columns.lc_column
        if not table.has_column(lc_column):
            raise ValueError(
                f"Column '{lc_column}' not found; available columns: {', '.join(table.header)}"
            )

        start_time = time()
        cells = [row.get(lc_column, "") for row in table.rows]
        outcomes = self._parse_cells(cells)

        stats = NormalizationStats(total_rows=len(table))
        rows: list[dict[str, str]] = []
        rejected: list[RowOutcome] = []

        for row_number, (row, cell, outcome) in enumerate(
            zip(table.rows, cells, outcomes), start=1
        ):
            rendered, row_outcome = self._classify(row_number, cell, outcome, stats)
            if row_outcome is not None:
                rejected.append(row_outcome)
                if row_outcome.status is RowStatus.NO_RECORD:
                    logger.warning(f"Row {row_number} appears to not contain an LC call number")
                else:
                    logger.warning(
                        f"Row {row_number} ({cell!r}) rejected: {row_outcome.detail}"
                    )
                continue

            new_row = dict(row)
            new_row[lc_column] = rendered
            rows.append(new_row)

        normalized = CatalogTable(
            header=list(table.header), rows=rows, source_path=table.source_path
        ).select(columns.keep, columns.renames)

        stats.processing_time = time() - start_time
        logger.info(
            f"Normalized {stats.normalized:,} of {stats.total_rows:,} rows "
            f"({stats.rejected:,} rejected)"
        )

        return NormalizationResult(table=normalized, rejected=rejected, stats=stats)

    def normalize_file(
        self, input_path: str | Path, output_path: str | Path | None = None
    ) -> NormalizationResult:
        """Load a catalog export, normalize it, and write the results

        Output files share one base path: ``<base>.csv`` and/or ``<base>.xlsx``
        for the normalized table, ``<base>_rejected.csv`` for rejected rows.

        Args:
            input_path: CSV, TSV or XLSX catalog export
            output_path: Output base path (an extension is ignored), defaults to
                ``<input stem>_normalized`` beside the input

        Returns:
            NormalizationResult including the paths written
        """
        input_config = self._config.input
        loader = CatalogTableLoader(
            input_path,
            delimiter=input_config.delimiter,
            encoding=input_config.encoding,
            sheet_name=input_config.sheet_name,
        )
        table = loader.load()
        result = self.normalize_table(table)

        base = self.output_base(input_path, output_path)
        delimiter = loader.resolve_delimiter()
        output_paths: list[str] = []

        for output_format in self._config.output.formats:
            if output_format == "xlsx":
                target = base.with_name(f"{base.name}.xlsx")
                XLSXExporter(result.table, target).export()
            else:
                extension = "tsv" if delimiter == "\t" else "csv"
                target = base.with_name(f"{base.name}.{extension}")
                CSVExporter(result.table, target, delimiter=delimiter).export()
            logger.info(f"Wrote {len(result.table):,} rows to {target}")
            output_paths.append(str(target))

        if self._config.output.write_rejected_report:
            target = base.with_name(f"{base.name}_rejected.csv")
            RejectedRowsExporter(
                result.rejected, target, lc_column=self._config.columns.lc_column
            ).export()
            logger.info(f"Wrote {len(result.rejected):,} rejected rows to {target}")
            output_paths.append(str(target))

        result.output_paths = output_paths
        return result

    @staticmethod
    def output_base(input_path: str | Path, output_path: str | Path | None = None) -> Path:
        """Output base path without extension"""
        if output_path is None:
            source = Path(input_path)
            return source.with_name(f"{source.stem}_normalized")

        target = Path(output_path)
        if target.suffix.lower() in {".csv", ".tsv", ".xlsx", ".txt"}:
            return target.with_suffix("")
        return target
