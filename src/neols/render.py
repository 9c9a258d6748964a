"""Single-entry renderer: bare name, size-prefixed, or long format."""

from __future__ import annotations

from neols.formatter.long import format_long
from neols.fs import block_kb, join_path, lstat_entry
from neols.options import ListOptions


def format_size(path: str, filename: str) -> str:
    """Render ``<KB> <filename>`` using the allocated block count of ``path``.

    Raises:
        LsError: If ``path`` cannot be stat'ed.
    """
    return f"{block_kb(lstat_entry(path))} {filename}"


def render_entry(dirname: str | None, filename: str, options: ListOptions) -> str:
    """Render one output line for ``filename``.

    Args:
        dirname: Directory containing the entry, or ``None`` when
            ``filename`` is a path given on the command line.
        filename: Entry name (or path when ``dirname`` is ``None``).
        options: Listing options.

    Returns:
        str: Rendered line without a trailing newline.

    Raises:
        LsError: If metadata is needed and cannot be read.
    """
    if not (options.long_format or options.show_size):
        return filename

    path = filename if dirname is None else join_path(dirname, filename)

    if options.long_format:
        return format_long(path)
    return format_size(path, filename)
