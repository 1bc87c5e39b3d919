"""Pooled scratch buffers used while collecting element parts.

Element construction runs on every render, so the working arrays that hold
attributes and children are rented from a shared pool and handed back as soon
as the exact-sized tuples for the node have been copied out.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional


@dataclass(frozen=True)
class PoolStats:
    rented: int
    returned: int
    allocated: int
    retained: int


class BufferPool:
    """Thread-safe free-list of storage arrays bucketed by power-of-two size."""

    def __init__(self, initial_capacity: int = 6, max_retained: int = 32) -> None:
        if initial_capacity < 1:
            raise ValueError(f"initial_capacity must be >= 1, got {initial_capacity}")
        if max_retained < 0:
            raise ValueError(f"max_retained must be >= 0, got {max_retained}")
        self.initial_capacity = initial_capacity
        self.max_retained = max_retained
        self._lock = threading.Lock()
        self._free: Dict[int, List[List[Any]]] = {}
        self._rented = 0
        self._returned = 0
        self._allocated = 0

    @staticmethod
    def bucket_size(capacity: int) -> int:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        return 1 << (capacity - 1).bit_length()

    def rent_storage(self, capacity: int) -> List[Any]:
        size = self.bucket_size(capacity)
        with self._lock:
            self._rented += 1
            free = self._free.get(size)
            if free:
                return free.pop()
            self._allocated += 1
        return [None] * size

    def return_storage(self, storage: List[Any]) -> None:
        size = len(storage)
        storage[:] = [None] * size
        with self._lock:
            self._returned += 1
            free = self._free.setdefault(size, [])
            if len(free) < self.max_retained:
                free.append(storage)

    def rent(self, capacity: Optional[int] = None) -> "ScratchBuffer":
        return ScratchBuffer(self, capacity or self.initial_capacity)

    def release(self, buffer: "ScratchBuffer") -> None:
        buffer.release()

    @contextmanager
    def acquire(self, capacity: Optional[int] = None) -> Iterator["ScratchBuffer"]:
        """Rent a buffer for the duration of a ``with`` block."""
        buffer = self.rent(capacity)
        try:
            yield buffer
        finally:
            buffer.release()

    def stats(self) -> PoolStats:
        with self._lock:
            retained = sum(len(free) for free in self._free.values())
            return PoolStats(self._rented, self._returned, self._allocated, retained)


class ScratchBuffer:
    """Append-only working array backed by pooled storage."""

    __slots__ = ("_pool", "_items", "_count")

    def __init__(self, pool: BufferPool, capacity: int) -> None:
        self._pool = pool
        self._items: Optional[List[Any]] = pool.rent_storage(capacity)
        self._count = 0

    def _storage(self) -> List[Any]:
        if self._items is None:
            raise RuntimeError("scratch buffer used after release")
        return self._items

    @property
    def capacity(self) -> int:
        return len(self._storage())

    def append(self, item: Any) -> None:
        items = self._storage()
        if self._count == len(items):
            grown = self._pool.rent_storage(len(items) * 2)
            grown[: self._count] = items
            self._pool.return_storage(items)
            items = self._items = grown
        items[self._count] = item
        self._count += 1

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._count:
            raise IndexError(f"index {index} out of range for {self._count} items")

    def __getitem__(self, index: int) -> Any:
        items = self._storage()
        self._check_index(index)
        return items[index]

    def __setitem__(self, index: int, item: Any) -> None:
        items = self._storage()
        self._check_index(index)
        items[index] = item

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        items = self._storage()
        for index in range(self._count):
            yield items[index]

    def to_tuple(self) -> tuple:
        """Copy the used portion into an exactly-sized tuple."""
        return tuple(self._storage()[: self._count])

    @property
    def released(self) -> bool:
        return self._items is None

    def release(self) -> None:
        if self._items is None:
            return
        items, self._items = self._items, None
        self._count = 0
        self._pool.return_storage(items)


default_pool = BufferPool()


__all__ = ["BufferPool", "PoolStats", "ScratchBuffer", "default_pool"]
