"""
LC Call Number Normalizer

Main entry point for normalizing Library of Congress call numbers
in catalog exports.

This is a convenience wrapper that calls the main CLI function.
"""

if __name__ == "__main__":
    # Import and run the main CLI function
    # Local imports
    from lc_norm_tool.adapters.cli.main import main

    raise SystemExit(main())
