# lc_norm_tool/application/services/__init__.py

"""Application services for orchestration.

This module provides the service layer that drives call number parsing
over whole catalog tables.
"""

# Local imports
from lc_norm_tool.application.services._normalization_service import NormalizationService

__all__ = ["NormalizationService"]
