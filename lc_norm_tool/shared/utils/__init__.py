# lc_norm_tool/shared/utils/__init__.py

"""Shared utility functions for text cleanup"""

# Local imports
from lc_norm_tool.shared.utils.text_utils import ascii_fold
from lc_norm_tool.shared.utils.text_utils import clean_cell
from lc_norm_tool.shared.utils.text_utils import collapse_spaces

__all__ = ["ascii_fold", "clean_cell", "collapse_spaces"]
