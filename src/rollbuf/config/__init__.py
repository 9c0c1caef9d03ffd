"""Configuration objects for sizing rolling buffers.

Buffers are described by a small YAML document (or a plain mapping) holding
either an explicit ``capacity`` or a ``window_seconds``/``sample_rate_hz``
pair. The typed :class:`~rollbuf.config.runtime.BufferConfig` dataclass is the
single place where that description is turned into a capacity.
"""

from .runtime import (
    DEFAULT_CAPACITY,
    BufferConfig,
    build_buffer,
    calculate_capacity,
    config_from_mapping,
    load_config,
)

__all__ = [
    "DEFAULT_CAPACITY",
    "BufferConfig",
    "build_buffer",
    "calculate_capacity",
    "config_from_mapping",
    "load_config",
]
