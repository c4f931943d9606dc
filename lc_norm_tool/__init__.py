# lc_norm_tool/__init__.py

"""LC Call Number Normalizer Package

A library for reading free-form Library of Congress call numbers from
catalog exports and rewriting them in a single canonical form, so records
can be compared, sorted, and deduplicated.
"""

# Local imports
# Parsing API
from lc_norm_tool.application.parsing import maybe_parse
from lc_norm_tool.application.parsing import try_parse

# Table-level processing
from lc_norm_tool.application.models import NormalizationResult
from lc_norm_tool.application.models import NormalizationStats
from lc_norm_tool.application.services import NormalizationService

# Data models
from lc_norm_tool.core.domain import CallNumberParseError
from lc_norm_tool.core.domain import ClassNumber
from lc_norm_tool.core.domain import CutterSegment
from lc_norm_tool.core.domain import FailureKind
from lc_norm_tool.core.domain import LCRecord
from lc_norm_tool.core.domain import Note
from lc_norm_tool.core.domain import PositionedFailure
from lc_norm_tool.core.domain import Prefix
from lc_norm_tool.core.domain import Year
from lc_norm_tool.core.types import NoRecord
from lc_norm_tool.core.types import ParseFailed
from lc_norm_tool.core.types import ParsedRecord

# Infrastructure
from lc_norm_tool.infrastructure.config import ConfigLoader

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Parsing
    "maybe_parse",
    "try_parse",
    # Outcomes
    "NoRecord",
    "ParsedRecord",
    "ParseFailed",
    # Data models
    "LCRecord",
    "Prefix",
    "ClassNumber",
    "CutterSegment",
    "Year",
    "Note",
    # Failures
    "CallNumberParseError",
    "FailureKind",
    "PositionedFailure",
    # Table processing
    "NormalizationService",
    "NormalizationResult",
    "NormalizationStats",
    # Configuration
    "ConfigLoader",
    # Version
    "__version__",
]
