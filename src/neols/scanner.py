"""Directory traversal engine and top-level path dispatch.

Each directory is listed in two phases: its filtered entries are sorted
and rendered, then (with ``-R``) its subdirectories are collected, sorted
and listed one after another, each behind a blank line and a ``path:``
header.
"""

from __future__ import annotations

import logging
import os
import stat
from typing import TextIO

from neols import LsError
from neols.fs import block_kb, join_path, lstat_entry, stat_path, strerror
from neols.options import ListOptions
from neols.render import render_entry
from neols.strlist import StrList

logger = logging.getLogger(__name__)


def is_listed(name: str, all_files: bool) -> bool:
    """Return whether a directory entry passes the hidden-name filter.

    ``.`` and ``..`` are never listed. Other names starting with ``.`` are
    listed only when ``all_files`` is set.
    """
    if name in (".", ".."):
        return False
    return all_files or not name.startswith(".")


def report(err: TextIO, exc: LsError) -> None:
    """Write a per-path diagnostic to ``err``."""
    logger.debug("Reporting: %s", exc)
    err.write(f"nls: {exc}\n")


def read_names(path: str, options: ListOptions) -> StrList:
    """Enumerate the direct entries of ``path`` that pass the name filter.

    Returns:
        StrList: Unsorted names in enumeration order. The caller owns it.

    Raises:
        LsError: If the directory cannot be opened or read.
    """
    names = StrList()
    try:
        with os.scandir(path) as it:
            for dir_entry in it:
                if is_listed(dir_entry.name, options.all_files):
                    names.append(dir_entry.name)
                else:
                    logger.debug("Skipping hidden entry: %s", dir_entry.name)
    except OSError as exc:
        names.release()
        raise LsError(f"cannot open directory '{path}': {strerror(exc)}") from exc
    return names


def block_total(path: str, names: StrList) -> int:
    """Sum the size in KB of every entry in ``names`` under ``path``.

    Raises:
        LsError: If any entry cannot be stat'ed.
    """
    return sum(block_kb(lstat_entry(join_path(path, name))) for name in names)


def _list_frame(
    path: str,
    options: ListOptions,
    out: TextIO,
    err: TextIO,
) -> tuple[bool, list[str]]:
    """List one directory and return its sorted subdirectories.

    Returns:
        tuple[bool, list[str]]: Whether the frame succeeded, and the
        subdirectory paths to descend into (empty unless recursive).
    """
    try:
        names = read_names(path, options)
    except LsError as exc:
        report(err, exc)
        return False, []

    logger.debug("Listing %s (%d entries)", path, len(names))
    ok = True

    with names:
        if options.show_size:
            try:
                out.write(f"total {block_total(path, names)}\n")
            except LsError as exc:
                report(err, exc)
                ok = False

        names.sort()
        for name in names:
            try:
                out.write(render_entry(path, name, options) + "\n")
            except LsError as exc:
                report(err, exc)
                ok = False

        if not options.recursive:
            return ok, []

        with StrList() as subdirs:
            for name in names:
                child = join_path(path, name)
                try:
                    st = stat_path(child)
                except LsError as exc:
                    # Abandon the recursive step for this directory only.
                    report(err, exc)
                    return False, []
                if stat.S_ISDIR(st.st_mode):
                    subdirs.append(child)

            subdirs.sort()
            return ok, list(subdirs)


def list_dir(path: str, options: ListOptions, out: TextIO, err: TextIO) -> bool:
    """List the contents of directory ``path``, recursing with ``-R``.

    Subdirectories are visited depth-first in sorted order using an
    explicit stack, so output matches plain recursion without being bound
    by the interpreter recursion limit.

    Args:
        path: Directory to list.
        options: Listing options.
        out: Stream receiving listing lines.
        err: Stream receiving diagnostics.

    Returns:
        bool: ``True`` when every directory in the walk listed cleanly.
    """
    ok = True

    # Stack items: (directory_path, print_header)
    # Children are pushed in reverse so the first one (sorted) is popped first.
    stack: list[tuple[str, bool]] = [(path, False)]

    while stack:
        current, header = stack.pop()
        if header:
            out.write(f"\n{current}:\n")

        frame_ok, subdirs = _list_frame(current, options, out, err)
        ok = ok and frame_ok

        for child in reversed(subdirs):
            stack.append((child, True))

    return ok


def list_path(path: str, options: ListOptions, out: TextIO, err: TextIO) -> bool:
    """List one command-line path argument.

    Directories are expanded unless ``dirs_as_files`` is set; anything else
    is rendered as a single entry. A trailing ``/`` makes a symlink to a
    directory count as a directory.

    Returns:
        bool: ``True`` on success, ``False`` if the path (or anything under
        it) failed.
    """
    try:
        st = stat_path(path)
    except LsError as exc:
        report(err, exc)
        return False

    if stat.S_ISDIR(st.st_mode) and not options.dirs_as_files:
        if options.recursive:
            out.write(f"\n{path}:\n")
        return list_dir(path, options, out, err)

    try:
        out.write(render_entry(None, path, options) + "\n")
    except LsError as exc:
        report(err, exc)
        return False
    return True
