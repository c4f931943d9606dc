# lc_norm_tool/infrastructure/persistence/__init__.py

"""Persistence layer for reading catalog exports"""

# Local imports
from lc_norm_tool.infrastructure.persistence._table_loader import CatalogTableLoader

__all__ = ["CatalogTableLoader"]
