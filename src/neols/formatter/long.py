"""Long-format (``-l``) metadata line formatter.

Column layout::

    MMMMMMMMMM UUUUUUUU GGGGGGGG XXXXXXXX YYYY-MM-DD HH:MM NAME [-> LINK]

``X`` is the byte size for regular files, ``major, minor`` for block and
character devices, and blank for everything else.
"""

from __future__ import annotations

import grp
import os
import pwd
import stat
import time
from typing import Final

from neols import LsError
from neols.formatter.mode import mode_to_str
from neols.fs import lstat_entry, strerror

LINK_TARGET_MAX: Final[int] = 255
_ELLIPSIS: Final[bytes] = b"..."

SIZE_FIELD_WIDTH: Final[int] = 8
DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M"


def user_to_str(uid: int) -> str:
    """Return the user name for ``uid``, or the decimal id if unknown."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def group_to_str(gid: int) -> str:
    """Return the group name for ``gid``, or the decimal id if unknown."""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def format_mtime(mtime: float) -> str:
    """Render a modification time as local ``YYYY-MM-DD HH:MM``."""
    return time.strftime(DATE_FORMAT, time.localtime(mtime))


def read_link_target(path: str) -> str:
    """Read a symlink target, truncating it to 255 bytes.

    Targets longer than :data:`LINK_TARGET_MAX` bytes keep their first 252
    bytes followed by ``...``.

    Raises:
        LsError: If the link cannot be read.
    """
    try:
        raw = os.readlink(os.fsencode(path))
    except OSError as exc:
        raise LsError(f"readlink '{path}' failed: {strerror(exc)}") from exc

    if len(raw) > LINK_TARGET_MAX:
        raw = raw[: LINK_TARGET_MAX - len(_ELLIPSIS)] + _ELLIPSIS
    return os.fsdecode(raw)


def format_size_field(st: os.stat_result) -> str:
    """Return the fixed-width size or device column for ``st``."""
    kind = stat.S_IFMT(st.st_mode)
    if kind in (stat.S_IFBLK, stat.S_IFCHR):
        return f"{os.major(st.st_rdev):>3}, {os.minor(st.st_rdev):>3}"
    if kind == stat.S_IFREG:
        return f"{st.st_size:>{SIZE_FIELD_WIDTH}}"
    return " " * SIZE_FIELD_WIDTH


def format_long(path: str) -> str:
    """Render one long-format line for ``path``.

    The displayed name is everything after the final ``/`` of ``path``.

    Args:
        path: Path to the entry, stat'ed without following symlinks.

    Returns:
        str: Formatted line without a trailing newline.

    Raises:
        LsError: If the entry cannot be stat'ed or its link target read.
    """
    name = path.rpartition("/")[2]
    st = lstat_entry(path)

    user = user_to_str(st.st_uid)
    group = group_to_str(st.st_gid)
    line = (
        f"{mode_to_str(st.st_mode)} {user:<8} {group:<8} "
        f"{format_size_field(st)} {format_mtime(st.st_mtime)} {name}"
    )
    if stat.S_ISLNK(st.st_mode):
        line += f" -> {read_link_target(path)}"
    return line
