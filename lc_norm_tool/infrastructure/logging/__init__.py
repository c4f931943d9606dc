# lc_norm_tool/infrastructure/logging/__init__.py

"""Logging infrastructure for the LC normalizer.

This module provides centralized logging configuration and progress display.
"""

# Local imports
from lc_norm_tool.infrastructure.logging._progress import ProgressBarManager
from lc_norm_tool.infrastructure.logging._progress import get_progress_manager
from lc_norm_tool.infrastructure.logging._progress import initialize_progress_manager
from lc_norm_tool.infrastructure.logging._setup import get_default_log_path
from lc_norm_tool.infrastructure.logging._setup import log_run_summary
from lc_norm_tool.infrastructure.logging._setup import set_up_logging as setup_logging

__all__ = [
    "ProgressBarManager",
    "get_default_log_path",
    "get_progress_manager",
    "initialize_progress_manager",
    "log_run_summary",
    "setup_logging",
]
