"""CLI entry point for nls — I/O boundary only."""

from __future__ import annotations

import argparse
import io
import sys
from typing import TextIO

from neols.options import ListOptions
from neols.scanner import list_path


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser for the ``nls`` command.
    """
    parser = argparse.ArgumentParser(
        prog="nls",
        description="list directory contents",
        add_help=False,
    )
    parser.add_argument(
        "--help",
        action="help",
        help="Show this help message and exit",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Files or directories to list (default: current directory)",
    )
    parser.add_argument(
        "-l",
        action="store_true",
        dest="long_format",
        help="Use long listing format",
    )
    parser.add_argument(
        "-s",
        action="store_true",
        dest="show_size",
        help="Print the allocated size of each entry in KB and a per-directory total",
    )
    parser.add_argument(
        "-R",
        action="store_true",
        dest="recursive",
        help="List subdirectories recursively",
    )
    parser.add_argument(
        "-d",
        action="store_true",
        dest="dirs_as_files",
        help="List directories themselves, not their contents",
    )
    parser.add_argument(
        "-a",
        action="store_true",
        dest="all_files",
        help="Include entries starting with .",
    )
    return parser


def build_options(args: argparse.Namespace) -> ListOptions:
    """Translate parsed CLI flags into listing options."""
    return ListOptions(
        long_format=args.long_format,
        all_files=args.all_files,
        recursive=args.recursive,
        dirs_as_files=args.dirs_as_files,
        show_size=args.show_size,
    )


def _run_with_args(args: argparse.Namespace, out: TextIO, err: TextIO) -> int:
    """List every path argument and aggregate the exit status.

    Returns:
        int: ``1`` if any path failed, otherwise ``0``.
    """
    options = build_options(args)
    status = 0
    for path in args.paths or ["."]:
        if not list_path(path, options, out, err):
            status = 1
    return status


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI args, rejecting every unknown dash option before listing.

    argparse takes tokens that look like negative numbers (``-1``, ``-.5``)
    as positionals when no option looks like one. Any dash token before
    ``--`` is an option here, so those are rejected as well.

    Raises:
        SystemExit: On an unknown option.
    """
    parser = build_parser()
    tokens = sys.argv[1:] if argv is None else argv
    for token in tokens:
        if token == "--":
            break
        if len(token) > 1 and token[0] == "-" and token[1] != "-":
            if token[1].isdigit() or token[1] == ".":
                parser.error(f"unknown option '{token}'")
    return parser.parse_intermixed_args(tokens)


def _default_stdout() -> TextIO:
    # Undecodable file names are written back as their original bytes.
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(errors="surrogateescape")
    return sys.stdout


def run_ls(
    argv: list[str] | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Run nls with provided CLI args, writing to the given streams.

    This is the primary test target for CLI behavior.

    Args:
        argv: Command-line argument list without program name. If ``None``,
            uses process arguments.
        out: Stream for listing output. Defaults to ``sys.stdout``.
        err: Stream for diagnostics. Defaults to ``sys.stderr``.

    Returns:
        int: Process exit status.

    Raises:
        SystemExit: On an unknown option, before anything is listed.
    """
    args = parse_args(argv)  # single parse
    return _run_with_args(
        args,
        _default_stdout() if out is None else out,
        sys.stderr if err is None else err,
    )


def main() -> None:
    """Run the CLI entry point with process arguments and exit."""
    sys.exit(run_ls())
