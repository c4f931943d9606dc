# lc_norm_tool/adapters/cli/__init__.py

"""CLI adapter for the LC normalizer"""

# Local imports
from lc_norm_tool.adapters.cli.main import check_call_number
from lc_norm_tool.adapters.cli.main import main
from lc_norm_tool.adapters.cli.parser import config_overrides
from lc_norm_tool.adapters.cli.parser import create_argument_parser

__all__ = [
    "check_call_number",
    "config_overrides",
    "create_argument_parser",
    "main",
]
