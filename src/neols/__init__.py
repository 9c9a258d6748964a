"""neols — list directory contents with sorted, optionally recursive output."""

__version__ = "0.1.0"


class LsError(Exception):
    """Per-path listing error.

    Raised when a path cannot be opened, stat'ed, or read as a symlink.
    The message names the path and the system error text; it is printed
    to stderr and only the affected path is marked as failed.
    """
