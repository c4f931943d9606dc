# lc_norm_tool/infrastructure/config/__init__.py

"""Configuration infrastructure for the LC normalizer.

This module manages configuration loading, validation, and models.
"""

# Local imports
from lc_norm_tool.infrastructure.config._loader import ConfigLoader
from lc_norm_tool.infrastructure.config._loader import get_config
from lc_norm_tool.infrastructure.config._models import AppConfig
from lc_norm_tool.infrastructure.config._models import ColumnsConfig
from lc_norm_tool.infrastructure.config._models import InputConfig
from lc_norm_tool.infrastructure.config._models import LoggingConfig
from lc_norm_tool.infrastructure.config._models import OutputConfig
from lc_norm_tool.infrastructure.config._models import ProcessingConfig

__all__ = [
    "AppConfig",
    "ColumnsConfig",
    "ConfigLoader",
    "InputConfig",
    "LoggingConfig",
    "OutputConfig",
    "ProcessingConfig",
    "get_config",
]
