"""Type and permission string for long-format output."""

from __future__ import annotations

import stat
from typing import Final

KIND_GLYPHS: Final[dict[int, str]] = {
    stat.S_IFSOCK: "s",
    stat.S_IFLNK: "l",
    stat.S_IFREG: "-",
    stat.S_IFDIR: "d",
    stat.S_IFBLK: "b",
    stat.S_IFCHR: "c",
    stat.S_IFIFO: "p",
}


def mode_kind(mode: int) -> str:
    """Return the one-character file type glyph, ``?`` when unknown."""
    return KIND_GLYPHS.get(stat.S_IFMT(mode), "?")


def _triplet(
    mode: int, read: int, write: int, execute: int, special: int, glyph: str
) -> str:
    if mode & special:
        last = glyph if mode & execute else glyph.upper()
    else:
        last = "x" if mode & execute else "-"
    return ("r" if mode & read else "-") + ("w" if mode & write else "-") + last


def mode_to_str(mode: int) -> str:
    """Render ``st_mode`` as a 10-character ``drwxr-xr-x`` style string.

    setuid and setgid show as ``s``/``S`` in the user and group execute
    slots, the sticky bit as ``t``/``T`` in the other execute slot. The
    lowercase form means the execute bit underneath is also set.

    Args:
        mode: Raw ``st_mode`` value.

    Returns:
        str: Type glyph followed by nine permission characters.
    """
    return (
        mode_kind(mode)
        + _triplet(mode, stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR, stat.S_ISUID, "s")
        + _triplet(mode, stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP, stat.S_ISGID, "s")
        + _triplet(mode, stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH, stat.S_ISVTX, "t")
    )
