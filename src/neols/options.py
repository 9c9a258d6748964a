"""Listing configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ListOptions:
    """Options controlling what is listed and how it is rendered.

    Attributes:
        long_format: Render metadata lines (``-l``).
        all_files: Include entries whose name starts with ``.`` (``-a``).
        recursive: Descend into subdirectories (``-R``).
        dirs_as_files: Render directory arguments as single entries
            instead of listing their contents (``-d``).
        show_size: Prefix entries with their size in KB and print a
            ``total N`` line for every listed directory (``-s``).
    """

    long_format: bool = False
    all_files: bool = False
    recursive: bool = False
    dirs_as_files: bool = False
    show_size: bool = False
