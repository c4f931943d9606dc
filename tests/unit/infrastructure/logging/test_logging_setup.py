# tests/unit/infrastructure/logging/test_logging_setup.py

"""Tests for logging setup, run summaries and progress display"""

# Standard library imports
from logging import DEBUG
from logging import FileHandler
from logging import INFO
from logging import StreamHandler
from logging import WARNING
from logging import getLogger
from os.path import exists

# Local imports
from lc_norm_tool.application.models import NormalizationStats
from lc_norm_tool.infrastructure.logging import ProgressBarManager
from lc_norm_tool.infrastructure.logging import get_default_log_path
from lc_norm_tool.infrastructure.logging import get_progress_manager
from lc_norm_tool.infrastructure.logging import initialize_progress_manager
from lc_norm_tool.infrastructure.logging import log_run_summary
from lc_norm_tool.infrastructure.logging import setup_logging


class TestSetupLogging:
    """Test the logging configuration entry point"""

    def test_console_only(self):
        result = setup_logging(log_level="WARNING", disable_file_logging=True)

        root_logger = getLogger()
        assert result is None
        assert root_logger.level == WARNING
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0], StreamHandler)
        assert root_logger.handlers[0].level == WARNING

    def test_file_logging(self, tmp_path):
        log_file = str(tmp_path / "run.log")

        result = setup_logging(log_file=log_file, log_level="INFO")

        root_logger = getLogger()
        file_handlers = [h for h in root_logger.handlers if isinstance(h, FileHandler)]
        assert result == log_file
        assert root_logger.level == DEBUG
        assert len(file_handlers) == 1
        assert file_handlers[0].level == DEBUG

        getLogger("lc_norm_tool.test").debug("debug detail")
        for handler in root_logger.handlers:
            handler.flush()
        with open(log_file, encoding="utf-8") as f:
            content = f.read()
        assert "Logging to file" in content
        assert "lc_norm_tool.test - DEBUG - debug detail" in content

    def test_silent_has_no_console_handler(self, tmp_path):
        setup_logging(log_file=str(tmp_path / "run.log"), silent=True)

        handlers = getLogger().handlers
        assert all(isinstance(h, FileHandler) for h in handlers)

    def test_unknown_level_falls_back_to_info(self):
        setup_logging(log_level="CHATTY", disable_file_logging=True)

        assert getLogger().level == INFO

    def test_default_log_path(self, tmp_path):
        log_dir = str(tmp_path / "logs")

        path = get_default_log_path(log_dir)

        assert exists(log_dir)
        assert path.startswith(f"{log_dir}/lc_norm_")
        assert path.endswith(".log")


class TestRunSummary:
    """Test the final run summary"""

    def test_summary_contents(self, caplog):
        caplog.set_level(INFO)
        stats = NormalizationStats(
            total_rows=4,
            normalized=2,
            unchanged=1,
            no_record=1,
            errors=1,
            error_kinds={"MalformedNumber": 1},
        )

        log_run_summary(
            input_path="catalog.csv",
            output_paths=["catalog_normalized.csv"],
            log_file="logs/run.log",
            start_time=0.0,
            end_time=75.0,
            stats=stats,
        )

        assert "NORMALIZATION COMPLETE" in caplog.text
        assert "Input: catalog.csv" in caplog.text
        assert "Processing time: 1m 15.0s" in caplog.text
        assert "Normalized: 2 (50.0%)" in caplog.text
        assert "Rejected: 2 (50.0%)" in caplog.text
        assert "MalformedNumber: 1" in caplog.text
        assert "  catalog_normalized.csv" in caplog.text
        assert "Log: logs/run.log" in caplog.text

    def test_empty_input_summary(self, caplog):
        caplog.set_level(INFO)

        log_run_summary(
            input_path="empty.csv",
            output_paths=[],
            log_file=None,
            start_time=0.0,
            end_time=1.0,
            stats=NormalizationStats(),
        )

        assert "Total rows: 0" in caplog.text
        assert "Row Statistics" not in caplog.text


class TestProgressBarManager:
    """Test the progress display wrapper"""

    def test_disabled_manager_logs_phase(self, caplog):
        caplog.set_level(INFO)
        manager = ProgressBarManager(enabled=False)

        with manager.phase_context("parse", total=10, description="Parsing call numbers"):
            manager.update_task("parse", advance=5)

        assert manager.progress is None
        assert "Parsing call numbers" in caplog.text

    def test_enabled_manager_tracks_tasks(self):
        manager = ProgressBarManager(enabled=True)

        task_id = manager.create_phase_task("parse", total=10, description="Parsing")
        manager.update_task("parse", advance=4)

        assert task_id is not None
        assert manager.tasks["parse"] == task_id
        assert manager.progress.tasks[0].completed == 4

    def test_global_manager(self):
        manager = initialize_progress_manager(enabled=False)

        assert get_progress_manager() is manager
