# lc_norm_tool/infrastructure/__init__.py

"""System infrastructure components for configuration, logging, and file loading."""

# Local imports
from lc_norm_tool.infrastructure.config import ConfigLoader
from lc_norm_tool.infrastructure.persistence import CatalogTableLoader

__all__ = ["CatalogTableLoader", "ConfigLoader"]
