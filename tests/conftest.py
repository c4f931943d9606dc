# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from logging import Logger
from logging import getLogger
from pathlib import Path
from shutil import rmtree
from tempfile import mkdtemp

# Third party imports
import pytest

# Local imports
from tests.fixtures.call_numbers import SAMPLE_CATALOG_ROWS
from tests.fixtures.call_numbers import write_catalog_csv


# Custom markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - just reset logging"""
    # Reset logging to avoid handler conflicts
    root_logger = getLogger()
    # Remove all handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # Reset logging level
    root_logger.setLevel(30)  # WARNING level

    # Reset all logger instances in place; emptying loggerDict would orphan
    # module-level loggers whose level caches then never get invalidated
    for existing in list(Logger.manager.loggerDict.values()):
        if isinstance(existing, Logger):
            for handler in existing.handlers[:]:
                existing.removeHandler(handler)
                handler.close()
            existing.setLevel(0)  # NOTSET
            existing.propagate = True
            existing.disabled = False
    Logger.manager._clear_cache()

    yield


@pytest.fixture
def temp_test_dir():
    """Provide a temporary directory for tests that need file operations"""
    temp_dir = mkdtemp()
    yield temp_dir
    rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def catalog_rows() -> list[dict[str, str]]:
    """Fresh copy of the sample catalog rows"""
    return [dict(row) for row in SAMPLE_CATALOG_ROWS]


@pytest.fixture
def catalog_csv(tmp_path, catalog_rows) -> Path:
    """Sample catalog written as a CSV export"""
    return write_catalog_csv(tmp_path / "catalog.csv", catalog_rows)
