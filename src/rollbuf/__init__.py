"""Fixed-capacity rolling buffer for sliding windows of recent values.

:class:`RollingBuffer` keeps the newest ``capacity`` values and overwrites the
oldest one once full. Buffers can also be sized from YAML descriptors through
:mod:`rollbuf.config`.
"""

from .core import InvalidCapacityError, RollingBuffer
from .config import BufferConfig, build_buffer, load_config

__all__ = [
    "RollingBuffer",
    "InvalidCapacityError",
    "BufferConfig",
    "build_buffer",
    "load_config",
]

__version__ = "0.1.0"
