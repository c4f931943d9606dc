# lc_norm_tool/core/types/__init__.py

"""Type definitions for the LC normalizer

Result unions returned by the parser and JSON aliases. Domain models live in
``lc_norm_tool.core.domain``.
"""

# Local imports
from lc_norm_tool.core.types.json import JSONDict
from lc_norm_tool.core.types.json import JSONList
from lc_norm_tool.core.types.json import JSONPrimitive
from lc_norm_tool.core.types.json import JSONType
from lc_norm_tool.core.types.results import NoRecord
from lc_norm_tool.core.types.results import ParseFailed
from lc_norm_tool.core.types.results import ParseOutcome
from lc_norm_tool.core.types.results import ParsedRecord
from lc_norm_tool.core.types.results import describe_outcome
from lc_norm_tool.core.types.results import is_parsed

__all__ = [
    "JSONDict",
    "JSONList",
    "JSONPrimitive",
    "JSONType",
    "NoRecord",
    "ParseFailed",
    "ParseOutcome",
    "ParsedRecord",
    "describe_outcome",
    "is_parsed",
]
