# lc_norm_tool/application/models/__init__.py

"""Application-level result models"""

# Local imports
from lc_norm_tool.application.models.normalization_stats import NormalizationResult
from lc_norm_tool.application.models.normalization_stats import NormalizationStats
from lc_norm_tool.application.models.normalization_stats import RowOutcome

__all__ = ["NormalizationResult", "NormalizationStats", "RowOutcome"]
