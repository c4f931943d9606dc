# lc_norm_tool/adapters/cli/main.py

"""
LC Call Number Normalizer - CLI Main Module

Command-line interface that rewrites the LC column of a catalog export in
canonical form and reports rows that could not be normalized.
"""

# Standard library imports
from logging import getLogger
from sys import stderr
from time import time

# Third party imports
from pydantic import ValidationError

# Local imports
from lc_norm_tool.adapters.cli.parser import config_overrides
from lc_norm_tool.adapters.cli.parser import create_argument_parser
from lc_norm_tool.adapters.cli.parser import get_log_level
from lc_norm_tool.application.parsing import maybe_parse
from lc_norm_tool.application.services import NormalizationService
from lc_norm_tool.infrastructure.config import ConfigLoader
from lc_norm_tool.infrastructure.logging import initialize_progress_manager
from lc_norm_tool.infrastructure.logging import log_run_summary
from lc_norm_tool.infrastructure.logging import setup_logging

logger = getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NO_RECORD = 2


def check_call_number(text: str) -> int:
    """Parse one call number and print the canonical form or the failure

    Returns:
        Process exit status
    """
    outcome = maybe_parse(text)
    match outcome.type:
        case "record":
            print(outcome.record.render())
            return EXIT_OK
        case "no_record":
            print("No call number found", file=stderr)
            return EXIT_NO_RECORD
        case _:
            print(outcome.describe(), file=stderr)
            return EXIT_FAILURE


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point"""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if args.check is not None:
        return check_call_number(args.check)

    if not args.input:
        parser.error("an input file is required unless --check is given")

    try:
        config = ConfigLoader(args.config).with_overrides(**config_overrides(args))
    except ValidationError as e:
        parser.error(f"invalid option value: {e}")

    log_file_path = setup_logging(
        log_file=config.logging.log_file,
        log_level=get_log_level(args, config),
        silent=args.silent,
        disable_file_logging=args.disable_file_logging,
    )

    start_time = time()
    logger.info("=== STARTING CALL NUMBER NORMALIZATION ===")
    logger.info(
        f"Configuration: column={config.columns.lc_column}, "
        f"workers={config.processing.max_workers}, formats={config.output.formats}"
    )

    progress = initialize_progress_manager(enabled=args.show_progress)
    service = NormalizationService(config=config, progress=progress)

    progress.start()
    try:
        result = service.normalize_file(args.input, args.output)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Error during processing: {e}")
        return EXIT_FAILURE
    finally:
        progress.stop()

    log_run_summary(
        input_path=args.input,
        output_paths=result.output_paths,
        log_file=log_file_path,
        start_time=start_time,
        end_time=time(),
        stats=result.stats,
    )

    if not args.silent:
        stats = result.stats
        print(
            f"Normalized {stats.normalized:,} of {stats.total_rows:,} rows "
            f"({stats.rejected:,} rejected)"
        )
        for path in result.output_paths:
            print(f"  {path}")

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
