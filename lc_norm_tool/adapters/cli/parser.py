# lc_norm_tool/adapters/cli/parser.py

"""Command-line argument parser configuration"""

# Standard library imports
from argparse import ArgumentParser
from argparse import Namespace

# Local imports
from lc_norm_tool.infrastructure.config import ConfigLoader


def create_argument_parser() -> ArgumentParser:
    """Create and configure argument parser with all CLI options

    Options left unset default to None so values from the configuration
    file are kept; see ``config_overrides``.
    """
    parser = ArgumentParser(
        prog="lc-norm",
        description="Normalize Library of Congress call numbers in catalog exports",
    )

    parser.add_argument(
        "input", nargs="?", help="CSV, TSV or XLSX catalog export with an LC column"
    )
    parser.add_argument(
        "--check",
        metavar="TEXT",
        help="Parse a single call number, print its canonical form and exit",
    )

    # Output options
    parser.add_argument(
        "--output",
        "-o",
        help="Output base path (default: <input stem>_normalized beside the input)",
    )
    parser.add_argument(
        "--formats",
        nargs="+",
        choices=["csv", "xlsx"],
        default=None,
        help="Output formats to generate (space-separated). Default: csv",
    )
    parser.add_argument(
        "--no-rejected-report",
        action="store_true",
        help="Do not write the <output>_rejected.csv report",
    )

    # Input options
    parser.add_argument("--config", help="Path to JSON configuration file")
    parser.add_argument("--lc-column", default=None, help="Name of the call number column")
    parser.add_argument(
        "--delimiter", default=None, help="Field delimiter (default: from file extension)"
    )
    parser.add_argument("--sheet", default=None, help="Worksheet to read from XLSX input")
    parser.add_argument(
        "--fold-unicode",
        action="store_true",
        default=None,
        help="ASCII-fold cells before parsing",
    )

    # Processing options
    parser.add_argument(
        "--max-workers", type=int, default=None, help="Worker processes used for parsing"
    )
    parser.add_argument(
        "--reject-notes",
        action="store_true",
        default=None,
        help="Report call numbers that carry a trailing note instead of rewriting them",
    )

    # Logging options
    parser.add_argument(
        "--log-file", default=None, help="Path to log file (default: logs/lc_norm_[timestamp].log)"
    )
    parser.add_argument("--disable-file-logging", action="store_true", help="Disable file logging")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (default: WARNING, -v: INFO, -vv: DEBUG)",
    )
    parser.add_argument("--silent", action="store_true", help="Suppress console logging")
    parser.add_argument(
        "--show-progress", action="store_true", help="Show a progress bar while parsing"
    )

    return parser


def get_log_level(args: Namespace, config: ConfigLoader) -> str:
    """Map -v count and config debug flag to a logging level name"""
    if args.verbose >= 2 or config.logging.debug:
        return "DEBUG"
    if args.verbose == 1:
        return "INFO"
    return "WARNING"


def config_overrides(args: Namespace) -> dict[str, dict[str, object]]:
    """Collect CLI options that override configuration file values

    Args:
        args: Parsed command-line arguments

    Returns:
        Section name mapped to {field: value}; unset options are None
    """
    return {
        "columns": {"lc_column": args.lc_column},
        "input": {
            "delimiter": parse_delimiter(args.delimiter),
            "sheet_name": args.sheet,
            "fold_unicode": args.fold_unicode,
        },
        "processing": {"max_workers": args.max_workers, "reject_notes": args.reject_notes},
        "output": {
            "formats": args.formats,
            "write_rejected_report": False if args.no_rejected_report else None,
        },
        "logging": {"log_file": args.log_file},
    }


def parse_delimiter(value: str | None) -> str | None:
    """Accept escaped delimiters typed on the command line ("\\t" for tab)"""
    if value is None:
        return None
    escapes = {"\\t": "\t", "tab": "\t", "comma": ",", "semicolon": ";", "pipe": "|"}
    return escapes.get(value, value)
