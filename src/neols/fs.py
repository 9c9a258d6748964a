"""Path joining and stat helpers shared by the renderer and scanner."""

from __future__ import annotations

import os

from neols import LsError


def strerror(exc: OSError) -> str:
    """Return the system error text for ``exc``."""
    return exc.strerror or str(exc)


def join_path(dirname: str, name: str) -> str:
    """Join a directory and a child name with a single ``/``.

    The filesystem root is special-cased so children of ``/`` render as
    ``/name`` rather than ``//name``.
    """
    if dirname == "/":
        return f"/{name}"
    return f"{dirname}/{name}"


def lstat_entry(path: str) -> os.stat_result:
    """Stat ``path`` without following a final symlink.

    Raises:
        LsError: If the stat call fails.
    """
    try:
        return os.lstat(path)
    except OSError as exc:
        raise LsError(f"lstat '{path}' failed: {strerror(exc)}") from exc


def stat_path(path: str) -> os.stat_result:
    """Stat ``path`` using the trailing-slash convention.

    A path ending in ``/`` is resolved through symlinks so a symlink to a
    directory is treated as that directory. Any other path is ``lstat``'ed.

    Raises:
        LsError: If the stat call fails.
    """
    try:
        if path.endswith("/"):
            return os.stat(path)
        return os.lstat(path)
    except OSError as exc:
        raise LsError(f"{path}: {strerror(exc)}") from exc


def block_kb(st: os.stat_result) -> int:
    """Convert 512-byte ``st_blocks`` into whole kilobytes."""
    return st.st_blocks // 2
