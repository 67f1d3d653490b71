"""
sysfile.core.paths

Path helpers working on ``/``-separated path strings.

Provides:
 - `concat_paths`: join segments into one normalized path
 - `available_name`: pick a filename that does not exist yet in a directory
 - `path_info` / `extension`: split a path into its components
"""

from __future__ import annotations

import os
import posixpath
import re
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Union

from sysfile.core.errors import DirectoryNotFoundError
from sysfile.core.logging import get_logger

log = get_logger(__name__)

PathSegment = Union[str, "os.PathLike[str]"]
PathSegments = Union[PathSegment, Sequence[PathSegment]]

DEFAULT_STEM = "file"
DEFAULT_MAX_ATTEMPTS = 100

_SEPARATOR_RUN = re.compile(r"/+")


# ----------------------------------------------------------------------
# CONCATENATION
# ----------------------------------------------------------------------

def _as_text(value: object) -> str:
    if isinstance(value, os.PathLike):
        return os.fspath(value)
    return str(value)


def _flatten(segments: Iterable[PathSegments]) -> List[str]:
    fragments: List[str] = []
    for segment in segments:
        if isinstance(segment, (str, os.PathLike)):
            fragments.append(_as_text(segment))
        else:
            # one level only: nested items are taken as-is
            fragments.extend(_as_text(item) for item in segment)
    return fragments


def concat_paths(*segments: PathSegments) -> str:
    """
    Join path segments with a single ``/``.

    Each argument is a string or a sequence of strings; sequences are
    expanded one level. Empty fragments are skipped, repeated separators are
    collapsed and a trailing separator is dropped (except for the root ``/``).

    >>> concat_paths("dir1", "/dir2", "test.txt")
    'dir1/dir2/test.txt'
    >>> concat_paths(["a///b", "//c/"])
    'a/b/c'
    """
    fragments = [fragment for fragment in _flatten(segments) if fragment]
    joined = _SEPARATOR_RUN.sub("/", "/".join(fragments))
    if len(joined) > 1 and joined.endswith("/"):
        joined = joined[:-1]
    return joined


# ----------------------------------------------------------------------
# PATH COMPONENTS
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class PathInfo:
    """Components of a path: ``/a/b/c.tar.gz`` -> ``/a/b``, ``c.tar.gz``, ``gz``, ``c.tar``."""

    directory: str = ""
    basename: str = ""
    extension: str = ""
    stem: str = ""

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)


def _split_extension(name: str) -> tuple[str, str]:
    stem, dot, ext = name.rpartition(".")
    if not dot:
        return name, ""
    return stem, ext


def path_info(path: PathSegment) -> PathInfo:
    """
    Split ``path`` into directory, basename, extension and stem.

    Missing parts are returned as empty strings; trailing separators are
    ignored when picking the basename.
    """
    text = _as_text(path)
    trimmed = text.rstrip("/")
    if not trimmed:
        return PathInfo(directory="/" if text else "")

    directory, basename = posixpath.split(trimmed)
    if directory and not directory.strip("/"):
        # posixpath keeps a leading "//"
        directory = "/"
    stem, ext = _split_extension(basename)
    return PathInfo(directory=directory, basename=basename, extension=ext, stem=stem)


def extension(path: PathSegment) -> str:
    """Return the extension of ``path`` without its leading dot (``""`` if none)."""
    return path_info(path).extension


# ----------------------------------------------------------------------
# AVAILABLE NAMES
# ----------------------------------------------------------------------

def _candidate_basename(stem: str, ext: str, attempt: int) -> str:
    name = f"{stem}_{attempt}" if attempt > 0 else stem
    return ".".join(part for part in (name, ext) if part)


def available_name(
    directory: PathSegment,
    ref_name: str = "",
    ref_extension: str = "",
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> str:
    """
    Return a path under ``directory`` that is not taken by an existing file.

    The first candidate is ``<stem>.<ext>``, followed by ``<stem>_1.<ext>``,
    ``<stem>_2.<ext>`` and so on. A directory sharing a candidate's name does
    not block it. When every candidate is taken the last one is returned
    anyway, so callers must not assume the result is free in that case.

    Nothing is reserved: two concurrent callers may receive the same name.

    Args:
        directory: Existing directory to place the file in.
        ref_name: Reference filename; only its last component is used.
            Defaults to ``file`` when blank.
        ref_extension: Extension overriding the one found in ``ref_name``.
        max_attempts: Number of candidates to probe.

    Raises:
        DirectoryNotFoundError: If ``directory`` is not an existing directory.
    """
    directory = _as_text(directory).strip()
    # Path("") means the working directory; a blank name is never a directory
    if not directory or not Path(directory).is_dir():
        raise DirectoryNotFoundError(directory)

    name = ref_name.strip() or DEFAULT_STEM
    name = posixpath.basename(name.rstrip("/")) or DEFAULT_STEM
    stem, ext = _split_extension(name)
    override = ref_extension.strip()
    if override:
        ext = override
    ext = ext.lstrip(".")

    candidate = concat_paths(directory, _candidate_basename(stem, ext, 0))
    for attempt in range(max_attempts):
        candidate = concat_paths(directory, _candidate_basename(stem, ext, attempt))
        if not Path(candidate).is_file():
            log.debug("available_name picked %s after %d probe(s)", candidate, attempt + 1)
            return candidate
        log.debug("available_name: %s is taken", candidate)

    log.warning(
        "available_name: no free name for %r in %s after %d attempts; returning %s",
        name,
        directory,
        max_attempts,
        candidate,
    )
    return candidate


__all__ = [
    "PathInfo",
    "concat_paths",
    "available_name",
    "path_info",
    "extension",
    "DEFAULT_STEM",
    "DEFAULT_MAX_ATTEMPTS",
]
