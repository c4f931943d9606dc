# lc_norm_tool/infrastructure/logging/_setup.py

"""Logging configuration and setup for CLI"""

# Standard library imports
from datetime import datetime
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import INFO
from logging import StreamHandler
from logging import getLevelName
from logging import getLogger
from os import makedirs

# Local imports
from lc_norm_tool.application.models.normalization_stats import NormalizationStats


def get_default_log_path(log_dir: str = "logs") -> str:
    """Generate default log file path with timestamp"""
    makedirs(log_dir, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{log_dir}/lc_norm_{timestamp}.log"


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
    disable_file_logging: bool = False,
) -> str | None:
    """Configure logging for the application

    Args:
        log_file: Path to log file (auto-generated if None and file logging enabled)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        silent: If True, suppress console output
        disable_file_logging: If True, disable file logging

    Returns:
        Path to log file if file logging is enabled, None otherwise
    """
    level = getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = INFO

    root_logger = getLogger()
    root_logger.setLevel(DEBUG if not disable_file_logging else level)

    # Clear any existing handlers
    root_logger.handlers = []

    console_formatter = Formatter("%(asctime)s - %(levelname)s - %(message)s")
    file_formatter = Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not silent:
        console_handler = StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if not disable_file_logging:
        if log_file is None:
            log_file = get_default_log_path()

        file_handler = FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(DEBUG)  # Always log debug to file
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

        logger = getLogger(__name__)
        logger.info(f"Logging to file: {log_file}")

        return log_file

    return None


def log_run_summary(
    input_path: str,
    output_paths: list[str],
    log_file: str | None,
    start_time: float,
    end_time: float,
    stats: NormalizationStats,
) -> None:
    """Log final run summary with statistics

    Args:
        input_path: Catalog file that was read
        output_paths: Files written by the run
        log_file: Path to log file (if any)
        start_time: Processing start time
        end_time: Processing end time
        stats: Statistics collected during normalization
    """
    logger = getLogger(__name__)

    processing_time = end_time - start_time
    minutes = int(processing_time // 60)
    seconds = processing_time % 60

    summary_lines = ["\n" + "=" * 80, "NORMALIZATION COMPLETE", "=" * 80]
    summary_lines.extend(
        [
            f"Input: {input_path}",
            f"Total rows: {stats.total_rows:,}",
            f"Processing time: {minutes}m {seconds:.1f}s",
        ]
    )

    if stats.total_rows > 0:
        normalized_pct = stats.normalized / stats.total_rows * 100
        rejected_pct = stats.rejected / stats.total_rows * 100

        summary_lines.extend(
            [
                "",
                "Row Statistics:",
                f"  Normalized: {stats.normalized:,} ({normalized_pct:.1f}%)",
                f"    Already canonical: {stats.unchanged:,}",
                f"  Rejected: {stats.rejected:,} ({rejected_pct:.1f}%)",
                f"    No call number: {stats.no_record:,}",
                f"    Parse errors: {stats.errors:,}",
            ]
        )
        if stats.rejected_notes:
            summary_lines.append(f"    Notes rejected: {stats.rejected_notes:,}")
        for kind, count in sorted(stats.error_kinds.items()):
            summary_lines.append(f"      {kind}: {count:,}")

    summary_lines.extend(["", "Output:"])
    for path in output_paths:
        summary_lines.append(f"  {path}")
    if log_file:
        summary_lines.append(f"  Log: {log_file}")

    summary_lines.append("=" * 80)

    logger.info("\n".join(summary_lines))
