"""Core container: the rolling buffer and its slot arithmetic."""

from .indexing import clamp_index, newest_slot, oldest_slot, physical_slot
from .rolling_buffer import InvalidCapacityError, RollingBuffer

__all__ = [
    "RollingBuffer",
    "InvalidCapacityError",
    "clamp_index",
    "physical_slot",
    "newest_slot",
    "oldest_slot",
]
