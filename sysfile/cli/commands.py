"""
sysfile.cli.commands

Subcommands of the `sysfile` console script.
"""

from __future__ import annotations

import argparse
import json
from typing import Optional, Sequence

from sysfile import __version__
from sysfile.cli.base import EXIT_OK, build_base_parser, run_cli
from sysfile.core.logging import get_logger
from sysfile.core.paths import available_name, concat_paths, extension, path_info
from sysfile.core.sizes import human_size

log = get_logger(__name__)


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {value}")
    return value


# ----------------------------------------------------------------------
# COMMAND HANDLERS
# ----------------------------------------------------------------------

def cmd_concat(args: argparse.Namespace) -> int:
    print(concat_paths(*args.segments))
    return EXIT_OK


def cmd_size(args: argparse.Namespace) -> int:
    precision = args.precision if args.precision is not None else args.settings.precision
    print(human_size(args.bytes, precision))
    return EXIT_OK


def cmd_avail(args: argparse.Namespace) -> int:
    result = available_name(
        args.directory,
        args.name,
        args.ext,
        max_attempts=args.settings.max_attempts,
    )
    log.info("Available name: %s", result)
    print(result)
    return EXIT_OK


def cmd_info(args: argparse.Namespace) -> int:
    info = path_info(args.path)
    if args.json:
        print(json.dumps(info.as_dict(), indent=2, ensure_ascii=False))
        return EXIT_OK
    for key, value in info.as_dict().items():
        print(f"{key}: {value}")
    return EXIT_OK


def cmd_ext(args: argparse.Namespace) -> int:
    print(extension(args.path))
    return EXIT_OK


def cmd_version(args: argparse.Namespace) -> int:
    print(f"sysfile {__version__}")
    return EXIT_OK


# ----------------------------------------------------------------------
# PARSER
# ----------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = build_base_parser()
    sub = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    p = sub.add_parser("concat", help="Join path segments into one normalized path.")
    p.add_argument("segments", nargs="+", help="Path segments to join.")
    p.set_defaults(handler=cmd_concat)

    p = sub.add_parser("size", help="Format a byte count as a human-readable size.")
    p.add_argument("bytes", type=_non_negative_int, help="Size in bytes.")
    p.add_argument(
        "--precision",
        "-p",
        type=_non_negative_int,
        default=None,
        help="Decimal digits to keep (default: value from config, 1 if unset).",
    )
    p.set_defaults(handler=cmd_size)

    p = sub.add_parser("avail", help="Print a filename that is not taken yet in a directory.")
    p.add_argument("directory", help="Existing target directory.")
    p.add_argument("name", nargs="?", default="", help="Reference filename (default: 'file').")
    p.add_argument("--ext", default="", help="Extension overriding the one in NAME.")
    p.set_defaults(handler=cmd_avail)

    p = sub.add_parser("info", help="Show directory, basename, extension and stem of a path.")
    p.add_argument("path", help="Path to inspect.")
    p.add_argument("--json", action="store_true", help="Print the components as JSON.")
    p.set_defaults(handler=cmd_info)

    p = sub.add_parser("ext", help="Print the extension of a path.")
    p.add_argument("path", help="Path to inspect.")
    p.set_defaults(handler=cmd_ext)

    p = sub.add_parser("version", help="Show the sysfile version.")
    p.set_defaults(handler=cmd_version)

    return parser


def _dispatch(args: argparse.Namespace) -> int:
    return args.handler(args)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the `sysfile` console script."""
    return run_cli(_dispatch, build_parser(), argv)


__all__ = ["build_parser", "main"]
