"""
sysfile.core.logging

Typed logging for sysfile.

Features:
 - Custom SysFileLogger subclass with Rich detection flag
 - Unified setup for Rich + standard logging
 - Optional per-run log file
 - Colorized level output when Rich is disabled
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, cast

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "sysfile"


# ----------------------------------------------------------------------
# LEVEL STYLE METADATA
# ----------------------------------------------------------------------

ANSI_RESET = "\033[0m"

LEVEL_COLORS: Dict[int, str] = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[95m",
}


class ColorFormatter(logging.Formatter):
    """Console formatter that colors the level name with ANSI codes."""

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno, "")
        record.level_display = (  # type: ignore[attr-defined]
            f"{color}{record.levelname}{ANSI_RESET}" if color else record.levelname
        )
        try:
            return super().format(record)
        finally:
            del record.level_display  # type: ignore[attr-defined]


# ----------------------------------------------------------------------
# LOGGER CLASS
# ----------------------------------------------------------------------

class SysFileLogger(logging.Logger):
    """Custom logger with Rich support flag and optional log file."""

    rich_enabled: bool = False
    log_file: Optional[Path] = None


def _normalize_level(value: str | int | None) -> str:
    if isinstance(value, str):
        candidate = value.strip().upper()
        if candidate in logging._nameToLevel:  # type: ignore[attr-defined]
            return candidate
    elif isinstance(value, int):
        label = logging.getLevelName(value)
        if isinstance(label, str) and not label.startswith("Level "):
            return label
    return "INFO"


def _root_logger() -> SysFileLogger:
    logging.setLoggerClass(SysFileLogger)
    try:
        return cast(SysFileLogger, logging.getLogger(ROOT_LOGGER_NAME))
    finally:
        logging.setLoggerClass(logging.Logger)


# ----------------------------------------------------------------------
# BASE LOGGER SETUP
# ----------------------------------------------------------------------

def setup_logging(
    level: str | int | None = "INFO",
    use_rich: Optional[bool] = None,
    log_dir: Optional[Path | str] = None,
    file_prefix: str = "sysfile",
) -> SysFileLogger:
    """
    Configure and return the global sysfile logger.

    Console output goes to stderr so command results on stdout stay clean.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        use_rich: Force-enable/disable RichHandler. None means enabled.
        log_dir: When set, also write a timestamped log file there.
        file_prefix: Prefix for generated log filenames.
    """
    resolved_level = _normalize_level(level)
    logger = _root_logger()
    logger.setLevel(resolved_level)

    # Tear down previous handlers so settings can be rebuilt.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if use_rich is None or use_rich:
        console_handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            markup=False,
            show_time=True,
            show_path=False,
            log_time_format="[%X]",
        )
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.rich_enabled = True
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(
            ColorFormatter(
                fmt="%(asctime)s [%(level_display)s] %(name)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.rich_enabled = False
    logger.addHandler(console_handler)

    logger.log_file = None
    if log_dir is not None:
        resolved_dir = Path(log_dir).expanduser()
        resolved_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        log_file_path = resolved_dir / f"{file_prefix}_{timestamp}.log"

        file_handler = logging.FileHandler(log_file_path, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)
        logger.log_file = log_file_path

    logger.propagate = False
    logger.debug(
        "Logger initialized at level %s (Rich=%s)",
        resolved_level,
        "ON" if logger.rich_enabled else "OFF",
    )
    return logger


# ----------------------------------------------------------------------
# UTILITY ACCESSOR
# ----------------------------------------------------------------------

def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Retrieve a namespaced sysfile logger (configured later via setup_logging)."""
    base = _root_logger()
    if not base.handlers:
        base.addHandler(logging.NullHandler())

    if not name or name == ROOT_LOGGER_NAME:
        return base
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = name[len(ROOT_LOGGER_NAME) + 1:]
    return base.getChild(name)


__all__ = ["SysFileLogger", "setup_logging", "get_logger", "ROOT_LOGGER_NAME"]
