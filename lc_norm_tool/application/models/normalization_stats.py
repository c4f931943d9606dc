# lc_norm_tool/application/models/normalization_stats.py

"""Pydantic models for table normalization results and statistics"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from lc_norm_tool.core.domain.catalog_table import CatalogTable
from lc_norm_tool.core.domain.enums import FailureKind
from lc_norm_tool.core.domain.enums import RowStatus


class RowOutcome(BaseModel):
    """A row that was not rewritten, with the reason why"""

    model_config = ConfigDict()

    row_number: int = Field(..., ge=1, description="1-based data row number (header excluded)")
    status: RowStatus
    original: str = Field("", description="LC cell as read")
    kind: FailureKind | None = Field(None, description="Fatal failure kind for errors")
    detail: str = Field("", description="Failure description or rendered record")


class NormalizationStats(BaseModel):
    """Statistics from normalizing one catalog table"""

    model_config = ConfigDict()

    total_rows: int = Field(0, description="Rows read")
    normalized: int = Field(0, description="Rows rewritten in canonical form")
    unchanged: int = Field(0, description="Normalized rows whose text was already canonical")
    no_record: int = Field(0, description="Rows with an empty LC cell")
    errors: int = Field(0, description="Rows whose LC cell could not be parsed")
    rejected_notes: int = Field(0, description="Rows rejected because the record had a note")
    error_kinds: dict[str, int] = Field(
        default_factory=dict, description="Error counts keyed by failure kind"
    )
    processing_time: float = Field(0.0, description="Processing time in seconds")

    def increment(self, field: str, value: int = 1) -> None:
        """Increment a statistic field

        Args:
            field: Field name to increment
            value: Amount to increment by
        """
        if hasattr(self, field):
            current = getattr(self, field)
            setattr(self, field, current + value)

    def record_error(self, kind: FailureKind) -> None:
        self.errors += 1
        self.error_kinds[kind.value] = self.error_kinds.get(kind.value, 0) + 1

    @property
    def rejected(self) -> int:
        """Rows left out of the normalized output"""
        return self.no_record + self.errors + self.rejected_notes

    def to_dict(self) -> dict:
        return self.model_dump()


class NormalizationResult(BaseModel):
    """Normalized table, rejected rows, and statistics for one run"""

    model_config = ConfigDict()

    table: CatalogTable
    rejected: list[RowOutcome] = Field(default_factory=list)
    stats: NormalizationStats = Field(default_factory=NormalizationStats)
    output_paths: list[str] = Field(default_factory=list, description="Files written")
