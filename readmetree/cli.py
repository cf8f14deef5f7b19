"""Command-line front door for readmetree.

Parses CLI options, resolves the target directory and ignore set, optionally
runs the interactive gate, then builds the tree and updates the README.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import config
from .errors import ReadmeTreeError
from .ignore import build_ignore_set
from .prompt import prompt_for_ignores
from .readme import DEFAULT_README_NAME, confirmation_message, is_bare_filename, write_or_update_readme
from .tree_model import ORDER_DIRS_FIRST, ORDERS, build_directory_structure


def _readme_filename(value: str) -> str:
    """argparse type for a bare filename inside the target directory."""
    stripped = value.strip()
    if not is_bare_filename(stripped):
        raise argparse.ArgumentTypeError(f"invalid README filename: {value!r}")
    return stripped


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readmetree",
        description="Write a directory tree diagram into a README between marker comments.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to describe. Defaults to current directory.")
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Ask for extra ignored names and confirm before running.",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="NAME",
        help="Extra file or directory name to skip at every depth (repeatable).",
    )
    parser.add_argument(
        "--no-default-ignores",
        action="store_true",
        help="Do not skip the built-in names (.git, node_modules, ...).",
    )
    parser.add_argument(
        "--order",
        choices=ORDERS,
        default=None,
        help=f"Listing order (default: {ORDER_DIRS_FIRST}).",
    )
    parser.add_argument("--hide-dotfiles", action="store_true", help="Skip names starting with '.'.")
    parser.add_argument(
        "--readme",
        type=_readme_filename,
        default=None,
        metavar="FILENAME",
        help=f"Document to update inside the target directory (default: {DEFAULT_README_NAME}).",
    )
    parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Print the tree to stdout without touching any document.",
    )
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments, build the tree, and update the README.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Errors exit with status 1 and an ``Error:`` message;
    declining the interactive confirmation exits with status 0.
    """
    args = build_parser().parse_args()

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path
    if not path.exists():
        raise SystemExit(f'Error: Path "{path}" does not exist.')
    if not path.is_dir():
        raise SystemExit(f'Error: Path "{path}" is not a directory.')

    ignored = build_ignore_set(
        [*config.load_extra_ignores(), *args.ignore],
        include_defaults=not args.no_default_ignores,
    )
    order = args.order or config.load_order() or ORDER_DIRS_FIRST
    readme_name = args.readme or config.load_readme_name() or DEFAULT_README_NAME

    if args.interactive:
        confirmed = prompt_for_ignores(ignored)
        if confirmed is None:
            sys.stdout.write("Aborted.\n")
            return
        ignored = confirmed

    try:
        structure = build_directory_structure(
            path,
            ignored,
            order=order,
            show_hidden=not args.hide_dotfiles,
        )
        if args.print_only:
            sys.stdout.write(structure + "\n" if structure else "")
            return
        update = write_or_update_readme(path, structure, readme_name)
    except ReadmeTreeError as exc:
        raise SystemExit(f"Error: {exc}") from exc

    sys.stdout.write(confirmation_message(update) + "\n")


if __name__ == "__main__":
    main()
