"""Owned, explicitly sorted list of strings backed by :class:`DynArray`."""

from __future__ import annotations

import os

from neols.dynarray import DynArray


class StrList(DynArray[str]):
    """Growable list that owns a copy of every string appended to it.

    Order is insertion order until :meth:`sort` is called. Duplicates are
    kept.
    """

    __slots__ = ()

    def append(self, item: str | bytes | bytearray | memoryview) -> None:  # type: ignore[override]
        """Append a copy of ``item``.

        Bytes-like values are decoded with the filesystem encoding so that
        undecodable names survive as surrogate escapes.
        """
        if isinstance(item, str):
            text = item
        else:
            text = os.fsdecode(bytes(item))
        super().append(text)

    def sort(self) -> None:
        """Sort in place by byte-wise comparison of the encoded strings."""
        if self._count > 0:
            live = self._items[: self._count]
            live.sort(key=os.fsencode)  # type: ignore[arg-type]
            self._items[: self._count] = live

    def release(self) -> None:
        """Drop every owned string, then the backing storage."""
        for index in range(self._count):
            self._items[index] = None
        super().release()
