"""Growable array of opaque item handles with explicit capacity control."""

from __future__ import annotations

import struct
import sys
from collections.abc import Iterator
from types import TracebackType
from typing import Generic, TypeVar

T = TypeVar("T")

# Largest number of item handles addressable on this platform.
MAX_CAPACITY = sys.maxsize // struct.calcsize("P")


class DynArray(Generic[T]):
    """Append-only array growing by about 1.25x plus a small constant.

    Items are held by reference only: :meth:`release` drops the backing
    storage but does not release the items themselves.

    Running out of room is fatal. Growth past :data:`MAX_CAPACITY` or a
    failed allocation raises :class:`MemoryError`, which callers are not
    expected to handle.
    """

    __slots__ = ("_count", "_items")

    def __init__(self) -> None:
        self._count = 0
        self._items: list[T | None] = []

    @property
    def count(self) -> int:
        """Number of items appended so far."""
        return self._count

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated."""
        return len(self._items)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        for index in range(self._count):
            yield self._items[index]  # type: ignore[misc]

    def __getitem__(self, index: int) -> T:
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError("DynArray index out of range")
        return self._items[index]  # type: ignore[return-value]

    def __enter__(self) -> DynArray[T]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    def reserve_more(self, count: int) -> None:
        """Ensure room for ``count`` more items.

        Args:
            count: Number of additional items. Non-positive values are
                ignored.

        Raises:
            MemoryError: If the array would exceed :data:`MAX_CAPACITY`.
        """
        if count <= 0:
            return
        if count > MAX_CAPACITY - self._count:
            raise MemoryError(f"DynArray cannot hold more than {MAX_CAPACITY} items")

        new_count = self._count + count
        new_cap = self.capacity
        while new_cap < new_count:
            new_cap += (new_cap >> 2) + 4
            if new_cap > MAX_CAPACITY:
                new_cap = MAX_CAPACITY

        self._items.extend([None] * (new_cap - self.capacity))

    def append(self, item: T) -> None:
        """Append ``item``, growing the backing storage when full."""
        if self._count >= self.capacity:
            self.reserve_more(1)
        self._items[self._count] = item
        self._count += 1

    def release(self) -> None:
        """Drop the backing storage and reset count and capacity to zero."""
        self._items = []
        self._count = 0
