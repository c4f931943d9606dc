# lc_norm_tool/application/parsing/__init__.py

"""Call number parsing: field recognizers and the record assembler"""

# Local imports
from lc_norm_tool.application.parsing._assembler import maybe_parse
from lc_norm_tool.application.parsing._assembler import try_parse
from lc_norm_tool.application.parsing._recognizers import find_class_number_end
from lc_norm_tool.application.parsing._recognizers import parse_class_number
from lc_norm_tool.application.parsing._recognizers import parse_cutter
from lc_norm_tool.application.parsing._recognizers import parse_note
from lc_norm_tool.application.parsing._recognizers import parse_prefix
from lc_norm_tool.application.parsing._recognizers import parse_year

__all__ = [
    "find_class_number_end",
    "maybe_parse",
    "parse_class_number",
    "parse_cutter",
    "parse_note",
    "parse_prefix",
    "parse_year",
    "try_parse",
]
