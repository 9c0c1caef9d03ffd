from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

import numpy as np

from .indexing import newest_slot, physical_slot

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InvalidCapacityError(ValueError):
    """Raised when a buffer is configured with a capacity below one."""


class RollingBuffer(Generic[T]):
    """
    Fixed-capacity rolling buffer holding the newest ``capacity`` values.

    Storage is allocated once and filled with ``default``; once full, every
    :meth:`add` overwrites the oldest value. Logical index 0 is the oldest
    valid value, ``len(buf) - 1`` the newest.

    The ``default`` only fills never-written slots. It is never counted by
    ``len()`` nor returned by :meth:`values`, but :meth:`get` can reach it
    when an out-of-range index is probed before the buffer is full.
    """

    __slots__ = ("_capacity", "_storage", "_write_cursor", "_valid_count", "_mutations")

    def __init__(self, capacity: int, default: T | None = None) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an int, got {type(capacity).__name__}")
        if capacity <= 0:
            raise InvalidCapacityError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._storage: list[T | None] = [default] * capacity
        self._write_cursor = 0
        self._valid_count = 0
        self._mutations = 0
        logger.debug("Allocated rolling buffer with capacity %d", capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def add(self, value: T) -> bool:
        """Insert ``value`` and return whether the buffer is now full."""
        self._storage[self._write_cursor] = value
        self._write_cursor = (self._write_cursor + 1) % self._capacity
        self._valid_count = min(self._valid_count + 1, self._capacity)
        self._mutations += 1
        return self.is_full()

    def __len__(self) -> int:
        return self._valid_count

    def is_full(self) -> bool:
        return self._valid_count == self._capacity

    def get(self, index: int) -> T:
        """
        Return the value at logical ``index`` (0 is the oldest).

        Indices ``>= capacity`` are clamped to ``capacity - 1`` rather than
        raising, so on a full buffer ``get(1000)`` is the newest value.
        """
        slot = physical_slot(self._write_cursor, self._valid_count, self._capacity, index)
        return self._storage[slot]  # type: ignore[return-value]

    def values(self) -> list[T]:
        """Return the valid values as a new list, oldest first."""
        return [self.get(i) for i in range(self._valid_count)]

    def values_iter(self) -> Iterator[T]:
        """
        Lazily yield the valid values, oldest first.

        The iterator reflects the buffer as of this call. Calling :meth:`add`
        before it is exhausted makes the next step raise ``RuntimeError``,
        as ``collections.deque`` does.
        """
        return self._iter_slots(self._write_cursor, self._valid_count, self._mutations)

    def _iter_slots(self, write_cursor: int, valid_count: int, mutations: int) -> Iterator[T]:
        for i in range(valid_count):
            if self._mutations != mutations:
                raise RuntimeError("RollingBuffer mutated during iteration")
            yield self._storage[physical_slot(write_cursor, valid_count, self._capacity, i)]  # type: ignore[misc]

    def __iter__(self) -> Iterator[T]:
        return self.values_iter()

    def latest(self) -> T | None:
        """Return the newest value, or ``None`` if nothing was added yet."""
        if self._valid_count == 0:
            return None
        return self._storage[newest_slot(self._write_cursor, self._capacity)]

    def values_array(self, dtype: Any = None) -> np.ndarray:
        """Return :meth:`values` as a NumPy array (oldest first)."""
        if self._valid_count == 0:
            return np.empty(0, dtype=dtype if dtype is not None else np.float64)
        return np.asarray(self.values(), dtype=dtype)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"len={self._valid_count}, values={self.values()!r})"
        )
