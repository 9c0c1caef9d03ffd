"""Slot arithmetic shared by :class:`~rollbuf.core.rolling_buffer.RollingBuffer`.

Everything here is a pure function of ``(write_cursor, valid_count, capacity,
logical_index)`` so the mapping from logical to physical positions can be
checked without touching a buffer.
"""

from __future__ import annotations

import operator


def clamp_index(logical_index: int, capacity: int) -> int:
    """
    Clamp ``logical_index`` into ``[0, capacity - 1]``.

    Indices past the end resolve to ``capacity - 1`` instead of failing.
    Negative indices are rejected.
    """
    index = operator.index(logical_index)
    if index < 0:
        raise IndexError(f"logical index must be >= 0, got {index}")
    if index >= capacity:
        return capacity - 1
    return index


def physical_slot(write_cursor: int, valid_count: int, capacity: int, logical_index: int) -> int:
    """
    Map a logical position onto a storage slot.

    Logical index 0 is the oldest valid value and ``valid_count - 1`` the
    newest. Out-of-range indices are clamped with :func:`clamp_index`; on a
    full buffer that is the newest value, on a partially filled one it is a
    slot that may never have been written.
    """
    index = clamp_index(logical_index, capacity)
    return (write_cursor + index + capacity - valid_count) % capacity


def newest_slot(write_cursor: int, capacity: int) -> int:
    """Slot holding the most recently inserted value."""
    return (write_cursor - 1 + capacity) % capacity


def oldest_slot(write_cursor: int, valid_count: int, capacity: int) -> int:
    """Slot holding the oldest valid value."""
    return physical_slot(write_cursor, valid_count, capacity, 0)


__all__ = ["clamp_index", "physical_slot", "newest_slot", "oldest_slot"]
