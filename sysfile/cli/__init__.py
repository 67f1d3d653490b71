"""
sysfile.cli

Command-line interface for sysfile.
"""

from sysfile.cli.base import build_base_parser, run_cli
from sysfile.cli.commands import build_parser, main

__all__ = ["build_base_parser", "run_cli", "build_parser", "main"]
