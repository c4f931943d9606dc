# lc_norm_tool/core/domain/__init__.py

"""Core domain models and failure types"""

# Local imports
from lc_norm_tool.core.domain.call_number import ClassNumber
from lc_norm_tool.core.domain.call_number import CutterSegment
from lc_norm_tool.core.domain.call_number import LCRecord
from lc_norm_tool.core.domain.call_number import Note
from lc_norm_tool.core.domain.call_number import Prefix
from lc_norm_tool.core.domain.call_number import Year
from lc_norm_tool.core.domain.call_number import format_class_number
from lc_norm_tool.core.domain.catalog_table import CatalogTable
from lc_norm_tool.core.domain.enums import FAILURE_KIND_DESCRIPTIONS
from lc_norm_tool.core.domain.enums import FailureKind
from lc_norm_tool.core.domain.enums import FieldName
from lc_norm_tool.core.domain.enums import RowStatus
from lc_norm_tool.core.domain.errors import CallNumberParseError
from lc_norm_tool.core.domain.errors import PositionedFailure

__all__ = [
    "CallNumberParseError",
    "CatalogTable",
    "ClassNumber",
    "CutterSegment",
    "FAILURE_KIND_DESCRIPTIONS",
    "FailureKind",
    "FieldName",
    "LCRecord",
    "Note",
    "PositionedFailure",
    "Prefix",
    "RowStatus",
    "Year",
    "format_class_number",
]
