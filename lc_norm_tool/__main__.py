#!/usr/bin/env python3
"""
LC Call Number Normalizer - Main Entry Point

This module allows the package to be run as a script:
    python -m lc_norm_tool
"""

# Local imports
from lc_norm_tool.adapters.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
