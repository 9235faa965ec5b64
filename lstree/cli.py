"""Command-line front door for lstree.

Parses CLI options, merges them with config-file defaults, validates the target
directory, and streams the rendered tree to stdout.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import TextIO

from . import __author__, __version__
from .config import load_max_depth, load_no_color, load_theme_name
from .errors import ConfigurationError, RootReadError
from .log import setup_logging
from .options import TreeOptions
from .tree_model import format_tip, render_tree_lines
from .ui_theme import UITheme, available_theme_names, resolve_theme

PROG = "lstree"
EXIT_BROKEN_PIPE = 141


def _non_negative_int(value: str) -> int:
    """argparse type for depth values; ``0`` means unlimited."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid value {value!r}, expected a number") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def version_text() -> str:
    return f"{PROG} v{__version__} © 2024 by {__author__}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="List the contents of a directory as an indented tree.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="The directory to list (default: current directory).",
    )
    parser.add_argument(
        "-L",
        "--depth",
        type=_non_negative_int,
        default=None,
        metavar="DEPTH",
        help="Set the maximum depth of the tree (default: 0, unlimited).",
    )
    parser.add_argument("-a", "--all", action="store_true", help="Show hidden files and directories.")
    parser.add_argument("-d", "--directory", dest="directory_only", action="store_true", help="List directories only.")
    parser.add_argument("--fileonly", dest="file_only", action="store_true", help="List files only.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-V", "--version", action="version", version=version_text())
    return parser


def options_from_args(args: argparse.Namespace) -> TreeOptions:
    """Merge parsed flags over config defaults; flags always win."""
    return TreeOptions(
        max_depth=args.depth if args.depth is not None else load_max_depth(),
        show_hidden=args.all,
        directory_only=args.directory_only,
        file_only=args.file_only,
        target_directory=Path(args.directory) if args.directory is not None else None,
    )


def color_enabled(stream: TextIO, no_color: bool) -> bool:
    """Colorize only TTY streams unless disabled by flag, ``NO_COLOR``, or config."""
    if no_color or os.environ.get("NO_COLOR") or load_no_color():
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _theme_for(stream: TextIO, args: argparse.Namespace) -> UITheme:
    return resolve_theme(args.theme or load_theme_name(), no_color=not color_enabled(stream, args.no_color))


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments and print the tree.

    Returns the process exit status: ``0`` on success, ``1`` when the options are
    unusable or the root cannot be listed, ``141`` when the reader of stdout goes
    away early. Invalid flag values are reported by argparse itself (status ``2``).
    """
    setup_logging()
    args = build_parser().parse_args(argv)
    err_theme = _theme_for(sys.stderr, args)

    try:
        options = options_from_args(args).validate()
    except ConfigurationError as exc:
        sys.stderr.write(format_tip(str(exc), err_theme) + "\n")
        return 1

    theme = _theme_for(sys.stdout, args)
    out = sys.stdout
    try:
        for line in render_tree_lines(options, theme):
            out.write(line + "\n")
        out.flush()
    except RootReadError as exc:
        sys.stderr.write(format_tip(str(exc), err_theme) + "\n")
        return 1
    except BrokenPipeError:
        _silence_stdout()
        return EXIT_BROKEN_PIPE
    return 0


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's exit-time flush cannot fail again."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, fd)
    finally:
        os.close(devnull)


if __name__ == "__main__":
    sys.exit(main())
