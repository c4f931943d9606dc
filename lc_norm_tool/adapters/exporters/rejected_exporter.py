# lc_norm_tool/adapters/exporters/rejected_exporter.py

"""CSV report of rows that were left out of the normalized output"""

# Standard library imports
from csv import writer
from pathlib import Path

# Local imports
from lc_norm_tool.application.models.normalization_stats import RowOutcome


class RejectedRowsExporter:
    """Write one line per rejected row: where it was, what it held, and why"""

    __slots__ = ("outcomes", "output_path", "lc_column")

    FIELDNAMES = ["row_number", "status", "kind", "original", "detail"]

    def __init__(self, outcomes: list[RowOutcome], output_path: str | Path, lc_column: str = "LC"):
        """Initialize the exporter

        Args:
            outcomes: Rejected row outcomes in row order
            output_path: Path for the report
            lc_column: Name of the call number column, used in the header
        """
        self.outcomes = outcomes
        self.output_path = Path(output_path)
        self.lc_column = lc_column

    def export(self) -> None:
        self.output_path.parent.mkdir(parents=True, exist_ok=True)

        header = [self.lc_column if name == "original" else name for name in self.FIELDNAMES]

        with open(self.output_path, "w", newline="", encoding="utf-8") as f:
            csv_writer = writer(f)
            csv_writer.writerow(header)
            for outcome in self.outcomes:
                csv_writer.writerow(
                    [
                        outcome.row_number,
                        outcome.status.value,
                        outcome.kind.value if outcome.kind else "",
                        outcome.original,
                        outcome.detail,
                    ]
                )
