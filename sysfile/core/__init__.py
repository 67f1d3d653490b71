"""
sysfile.core

Unified interface for the sysfile helpers:
  - Paths (concatenation, components, available names)
  - Sizes
  - Errors
  - Logging and configuration
"""

from sysfile.core.errors import ConfigError, DirectoryNotFoundError, SysFileError
from sysfile.core.logging import SysFileLogger, get_logger, setup_logging
from sysfile.core.paths import (
    PathInfo,
    available_name,
    concat_paths,
    extension,
    path_info,
)
from sysfile.core.sizes import SIZE_UNITS, human_size

__all__ = [
    # Paths
    "PathInfo",
    "concat_paths",
    "available_name",
    "path_info",
    "extension",

    # Sizes
    "SIZE_UNITS",
    "human_size",

    # Errors
    "SysFileError",
    "DirectoryNotFoundError",
    "ConfigError",

    # Logging
    "SysFileLogger",
    "setup_logging",
    "get_logger",
]
