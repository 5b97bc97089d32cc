"""Command line interface with ``organize`` and ``search`` subcommands."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import yaml

from forg.bydate import organize_by_date
from forg.bytype import categorize_by_type
from forg.duplicates import detect_duplicates, relocate_duplicates, remove_duplicates
from forg.renaming import bulk_rename
from forg.search import search_files

_ERRORS = (OSError, ValueError, yaml.YAMLError)


class _UsageError(Exception):
    """Raised instead of exiting when the command line cannot be parsed."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        raise _UsageError(message)


def _run_organize(args: argparse.Namespace) -> None:
    if not args.dir:
        print("Please specify a directory using the --dir flag.")
        return
    try:
        if args.date:
            organize_by_date(args.dir)
        else:
            categorize_by_type(args.dir, args.config)
    except _ERRORS as exc:
        print(f"Error organizing files: {exc}")

    if args.prefix or args.suffix or args.start_number != 0:
        try:
            bulk_rename(args.dir, args.prefix, args.suffix, args.start_number)
        except _ERRORS as exc:
            print(f"Error organizing files: {exc}")

    if args.remove or args.relocate:
        try:
            duplicates = detect_duplicates(args.dir)
        except _ERRORS as exc:
            print(f"Error detecting duplicates: {exc}")
            return
        if args.remove:
            try:
                remove_duplicates(duplicates)
            except _ERRORS as exc:
                print(f"Error removing duplicates: {exc}")
        else:
            try:
                relocate_duplicates(duplicates, args.relocate)
            except _ERRORS as exc:
                print(f"Error detecting duplicates: {exc}")


def _run_search(args: argparse.Namespace) -> None:
    try:
        search_files(
            args.paths,
            args.name,
            args.extension,
            args.before,
            args.after,
            args.min_size,
            args.max_size,
        )
    except _ERRORS as exc:
        print(f"Error: {exc}")


def _build_parser() -> _Parser:
    parser = _Parser(
        prog="file-organizer",
        description=(
            "A Command Line Interface (CLI) tool to organize files in a "
            "directory based on file type, date, or custom rules."
        ),
    )
    commands = parser.add_subparsers(dest="command")

    organize = commands.add_parser(
        "organize",
        help="Organize files in a directory by type",
        description=(
            "Organize files in the specified directory by their type, such as "
            "images, documents, videos, and music."
        ),
    )
    organize.add_argument("--dir", default="", help="Directory to organize")
    organize.add_argument(
        "-c", "--config", default="",
        help="Path to the configuration file (optional)",
    )
    organize.add_argument(
        "-d", "--date", action="store_true", help="Organize by date"
    )
    organize.add_argument(
        "-p", "--prefix", default="", help="Prefix to add to file names"
    )
    organize.add_argument(
        "-s", "--suffix", default="", help="Suffix to add to file names"
    )
    organize.add_argument(
        "-n", "--start-number", dest="start_number", type=int, default=0,
        help="Starting number for sequential renaming",
    )
    organize.add_argument(
        "--remove", action="store_true", help="Remove duplicate files"
    )
    organize.add_argument(
        "--relocate", default="", help="Directory to relocate duplicate files"
    )
    organize.set_defaults(handler=_run_organize)

    search = commands.add_parser(
        "search",
        help="Search and filter files",
        description=(
            "Search and filter files based on name, extension, size, and "
            "modification date."
        ),
    )
    search.add_argument("paths", nargs="+", help="Files or directories to search")
    search.add_argument("-n", "--name", default="", help="Filter by file name")
    search.add_argument(
        "-e", "--extension", default="", help="Filter by file extension"
    )
    search.add_argument(
        "--min-size", dest="min_size", default="",
        help="Minimum file size (e.g., 3b, 50kb, 100mb)",
    )
    search.add_argument(
        "--max-size", dest="max_size", default="",
        help="Maximum file size (e.g., 3b, 50kb, 100mb)",
    )
    search.add_argument(
        "--before", default="",
        help="Filter files modified before this date (YYYY-MM-DD)",
    )
    search.add_argument(
        "--after", default="",
        help="Filter files modified after this date (YYYY-MM-DD)",
    )
    search.set_defaults(handler=_run_search)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the process exit status."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except _UsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.command is None:
        parser.print_help()
        return 0
    args.handler(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())