"""
sysfile.cli.base

Shared CLI runner foundation for sysfile.

Provides:
 - Unified argument parsing (log level, config file)
 - Automatic logging setup from the loaded configuration
 - Safe execution wrapper (KeyboardInterrupt, sysfile errors, exceptions)
 - Consistent exit codes
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, Optional, Sequence

import argcomplete

from sysfile.core.config import load_settings
from sysfile.core.errors import SysFileError
from sysfile.core.logging import get_logger, setup_logging

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


# ----------------------------------------------------------------------
# BASE PARSER FACTORY
# ----------------------------------------------------------------------

def build_base_parser(
    prog: str = "sysfile",
    description: str = "File-path and file-size helpers.",
) -> argparse.ArgumentParser:
    """
    Build a base parser preloaded with common global options.
    """
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging verbosity (default: value from config, WARNING if unset).",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help="Path to YAML configuration (defaults to the bundled configs/config.yaml).",
    )
    return parser


# ----------------------------------------------------------------------
# WRAPPER FUNCTION
# ----------------------------------------------------------------------

def run_cli(
    main_func: Callable[[argparse.Namespace], int],
    parser: argparse.ArgumentParser,
    argv: Optional[Sequence[str]] = None,
) -> int:
    """
    Execute a CLI command function safely with unified error handling.

    Args:
        main_func: Function taking the parsed args and returning an exit code.
        parser: Argument parser configured for this CLI.
        argv: Arguments to parse instead of ``sys.argv[1:]``.

    Returns:
        Process exit code.
    """
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)

    setup_logging(args.log_level or "WARNING")
    log = get_logger("cli")

    try:
        settings = load_settings(args.config)
    except (SysFileError, FileNotFoundError) as e:
        log.error("Invalid configuration: %s", e)
        return EXIT_ERROR

    setup_logging(
        args.log_level or settings.level,
        use_rich=settings.use_rich,
        log_dir=settings.log_dir,
        file_prefix=settings.file_prefix,
    )
    args.settings = settings
    log.debug("Arguments: %s", args)

    try:
        return main_func(args)
    except KeyboardInterrupt:
        log.warning("Operation cancelled by user.")
        return EXIT_INTERRUPTED
    except SysFileError as e:
        log.error("%s", e)
        return EXIT_ERROR
    except Exception as e:
        log.error("Unexpected error: %s", e, exc_info=True)
        return EXIT_ERROR


__all__ = ["build_base_parser", "run_cli", "EXIT_OK", "EXIT_ERROR", "EXIT_INTERRUPTED"]
