"""
sysfile: file-path and file-size helpers
----------------------------------------

Modules:
  core/paths.py    : concat_paths, available_name, path_info, extension
  core/sizes.py    : human_size
  core/errors.py   : SysFileError, DirectoryNotFoundError, ConfigError
  core/logging.py  : Rich-backed logger setup
  core/config.py   : YAML settings for the command-line tool
  cli/             : `sysfile` command-line interface
"""

from sysfile.core import (
    DirectoryNotFoundError,
    PathInfo,
    SysFileError,
    available_name,
    concat_paths,
    extension,
    human_size,
    path_info,
)

__version__ = "1.0.0"

__all__ = [
    "PathInfo",
    "concat_paths",
    "available_name",
    "path_info",
    "extension",
    "human_size",
    "SysFileError",
    "DirectoryNotFoundError",
    "__version__",
]
