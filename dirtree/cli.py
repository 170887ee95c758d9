"""Command-line front door for dirtree.

Parses ``tree``-style flags into a ``TraversalConfig``, resolves display
preferences from the persisted config, and runs one traversal. Usage errors
exit with status 1 before anything is traversed.
"""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from . import config
from .errors import PROGRAM_NAME, DepthLimitExceeded, UsageError
from .options import TraversalConfig, validate_extension_filter
from .theme import PLAIN_THEME, TreeTheme, available_theme_names, get_theme
from .tree import available_charset_names, glyphs_for_charset, render_tree

DEFAULT_START_PATH = "."


class _UsageErrorParser(argparse.ArgumentParser):
    """ArgumentParser that raises ``UsageError`` instead of exiting with status 2."""

    def error(self, message: str):
        raise UsageError(message)


def _extension_filter(value: str) -> str:
    """argparse type for ``-F`` values."""
    try:
        return validate_extension_filter(value)
    except UsageError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _nonnegative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = _UsageErrorParser(
        prog=PROGRAM_NAME,
        description="List a directory subtree as a tree diagram.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="path",
        help="Root of the traversal. The last one given wins. Defaults to the current directory.",
    )
    parser.add_argument("-F", dest="extension_filter", type=_extension_filter, metavar=".EXT",
                        help="Only show, count, and search for files ending in this exact suffix.")
    parser.add_argument("-S", dest="show_size", action="store_true", help="Append file sizes in bytes.")
    parser.add_argument("-C", dest="show_count", action="store_true",
                        help="Show per-directory directory/file counts instead of names.")
    parser.add_argument("-L", dest="max_depth", type=_nonnegative_int, metavar="DEPTH",
                        help="Do not descend deeper than DEPTH levels.")
    parser.add_argument("--charset", choices=available_charset_names(), default=None,
                        help="Branch glyphs (default: persisted setting, else unicode).")
    parser.add_argument("--theme", choices=available_theme_names(), default=None,
                        help="Color theme (default: persisted setting, else default).")
    parser.add_argument("--color", dest="color", action="store_const", const=True, default=None,
                        help="Enable color output on TTY, overriding a saved --no-color.")
    parser.add_argument("--no-color", dest="color", action="store_const", const=False,
                        help="Disable color output even on TTY.")
    parser.add_argument("--summary", action="store_true",
                        help="Print a final 'N directories, M files' line.")
    parser.add_argument("--save-defaults", action="store_true",
                        help="Persist --charset/--theme/--color/--no-color as defaults.")
    return parser


def build_config(args: argparse.Namespace) -> TraversalConfig:
    return TraversalConfig(
        extension_filter=args.extension_filter,
        show_size=args.show_size,
        show_count=args.show_count,
        max_depth=args.max_depth,
    )


def resolve_theme(args: argparse.Namespace, out: TextIO) -> TreeTheme:
    """Pick the color theme: plain unless color is enabled and ``out`` is a TTY."""
    color = args.color if args.color is not None else config.load_color_enabled()
    if not color:
        return PLAIN_THEME
    isatty = getattr(out, "isatty", None)
    if isatty is None or not isatty():
        return PLAIN_THEME
    return get_theme(args.theme or config.load_theme_name())


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse ``argv`` (default ``sys.argv[1:]``); raises ``UsageError``."""
    parser = build_parser()
    return parser.parse_intermixed_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the tree rooted at the chosen path."""
    try:
        args = parse_args(argv)
        traversal_config = build_config(args)
    except UsageError as exc:
        raise SystemExit(f"{PROGRAM_NAME}: {exc}") from exc

    if args.save_defaults:
        config.save_display_defaults(
            charset=args.charset,
            color=args.color,
            theme=args.theme,
        )

    out = sys.stdout
    start_path = args.paths[-1] if args.paths else DEFAULT_START_PATH
    glyphs = glyphs_for_charset(args.charset or config.load_charset())
    try:
        renderer = render_tree(
            start_path,
            traversal_config,
            out=out,
            err=sys.stderr,
            glyphs=glyphs,
            theme=resolve_theme(args, out),
        )
    except DepthLimitExceeded as exc:
        out.flush()
        raise SystemExit(f"{PROGRAM_NAME}: {exc}") from exc

    if args.summary:
        out.write(f"\n{renderer.summary_line()}\n")
    out.flush()


if __name__ == "__main__":
    main()
