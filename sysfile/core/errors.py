"""
sysfile.core.errors

Exception types raised by sysfile helpers.
"""

from __future__ import annotations

from pathlib import Path


class SysFileError(Exception):
    """Base class for all sysfile errors."""


class DirectoryNotFoundError(SysFileError):
    """Raised when a target directory does not exist."""

    def __init__(self, directory: Path | str):
        self.directory = str(directory)
        super().__init__(f"Directory not found: {self.directory}")


class ConfigError(SysFileError, ValueError):
    """Raised when a configuration file holds invalid content."""


__all__ = ["SysFileError", "DirectoryNotFoundError", "ConfigError"]
