# tests/unit/application/models/test_normalization_stats.py

"""Tests for normalization statistics and row outcome models"""

# Third party imports
from pydantic import ValidationError
import pytest

# Local imports
from lc_norm_tool.application.models import NormalizationResult
from lc_norm_tool.application.models import NormalizationStats
from lc_norm_tool.application.models import RowOutcome
from lc_norm_tool.core.domain.catalog_table import CatalogTable
from lc_norm_tool.core.domain.enums import FailureKind
from lc_norm_tool.core.domain.enums import RowStatus


class TestNormalizationStats:
    """Test the NormalizationStats model"""

    def test_defaults(self):
        stats = NormalizationStats()

        assert stats.total_rows == 0
        assert stats.rejected == 0
        assert stats.error_kinds == {}

    def test_increment(self):
        stats = NormalizationStats()

        stats.increment("normalized")
        stats.increment("normalized", 4)

        assert stats.normalized == 5

    def test_increment_unknown_field_is_ignored(self):
        stats = NormalizationStats()

        stats.increment("not_a_field")

        assert not hasattr(stats, "not_a_field")

    def test_record_error_counts_by_kind(self):
        stats = NormalizationStats()

        stats.record_error(FailureKind.MALFORMED_NUMBER)
        stats.record_error(FailureKind.MALFORMED_NUMBER)
        stats.record_error(FailureKind.UNEXPECTED_END)

        assert stats.errors == 3
        assert stats.error_kinds == {"MalformedNumber": 2, "UnexpectedEnd": 1}

    def test_rejected_total(self):
        stats = NormalizationStats(no_record=2, errors=3, rejected_notes=1)

        assert stats.rejected == 6

    def test_to_dict(self):
        data = NormalizationStats(total_rows=10, normalized=9).to_dict()

        assert data["total_rows"] == 10
        assert data["normalized"] == 9
        assert "processing_time" in data


class TestRowOutcome:
    """Test the RowOutcome model"""

    def test_row_numbers_start_at_one(self):
        with pytest.raises(ValidationError):
            RowOutcome(row_number=0, status=RowStatus.NO_RECORD)

    def test_error_outcome(self):
        outcome = RowOutcome(
            row_number=3,
            status=RowStatus.ERROR,
            original="2010",
            kind=FailureKind.UNEXPECTED_CHARACTER,
        )

        assert outcome.kind is FailureKind.UNEXPECTED_CHARACTER
        assert outcome.detail == ""


class TestNormalizationResult:
    """Test the NormalizationResult container"""

    def test_defaults(self):
        result = NormalizationResult(table=CatalogTable())

        assert result.rejected == []
        assert result.output_paths == []
        assert result.stats.total_rows == 0
