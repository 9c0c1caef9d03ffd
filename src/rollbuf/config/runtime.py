"""Runtime configuration helpers for building rolling buffers."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping, TypeVar

import yaml

from ..core.rolling_buffer import InvalidCapacityError, RollingBuffer

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CAPACITY = 20
CONFIG_ENV_VAR = "ROLLBUF_CONFIG"


def calculate_capacity(window_seconds: float, sample_rate_hz: float, *, margin: float = 1.0) -> int:
    """
    Compute how many samples are needed to cover ``window_seconds`` at
    ``sample_rate_hz`` with an optional ``margin``.
    """
    samples = float(window_seconds) * float(sample_rate_hz) * float(margin)
    return max(1, int(math.ceil(samples)))


@dataclass(slots=True)
class BufferConfig:
    """
    Describes how large a :class:`RollingBuffer` should be.

    An explicit ``capacity`` takes precedence. Otherwise the capacity is
    derived from ``window_seconds`` and ``sample_rate_hz`` (times
    ``capacity_margin``), falling back to :data:`DEFAULT_CAPACITY`.
    """

    capacity: int | None = None
    window_seconds: float | None = None
    sample_rate_hz: float | None = None
    capacity_margin: float = 1.0

    def resolved_capacity(self) -> int:
        if self.capacity is not None:
            capacity = self.capacity
            if isinstance(capacity, bool) or not isinstance(capacity, int):
                raise TypeError(f"capacity must be an int, got {type(capacity).__name__}")
            if capacity <= 0:
                raise InvalidCapacityError(f"capacity must be positive, got {capacity}")
            return capacity
        if self.window_seconds is not None and self.sample_rate_hz is not None:
            margin = max(1.0, float(self.capacity_margin))
            return calculate_capacity(self.window_seconds, self.sample_rate_hz, margin=margin)
        return DEFAULT_CAPACITY


def _recognized_fields() -> set[str]:
    """Return the dataclass field names accepted by :class:`BufferConfig`."""
    return {f.name for f in fields(BufferConfig)}


def _normalize_mapping(data: Mapping[str, Any]) -> MutableMapping[str, Any]:
    """Flatten a top-level ``buffer`` block into the surrounding mapping."""
    if "buffer" in data and isinstance(data["buffer"], Mapping):
        merged: MutableMapping[str, Any] = {}
        for key, value in data.items():
            if key == "buffer":
                merged.update(value)
            else:
                merged[key] = value
        return merged
    return dict(data)


def config_from_mapping(data: Mapping[str, Any] | None) -> BufferConfig:
    """Build :class:`BufferConfig` from ``data`` (ignoring unknown keys)."""
    if not data:
        return BufferConfig()
    normalized = _normalize_mapping(data)
    known = _recognized_fields()
    unknown = sorted(normalized.keys() - known)
    if unknown:
        logger.debug("Ignoring unknown buffer config keys: %s", ", ".join(unknown))
    payload = {key: normalized[key] for key in normalized.keys() & known}
    return BufferConfig(**payload)


def load_config(path: str | Path | None = None) -> BufferConfig:
    """
    Load configuration from ``path``.

    When ``path`` is None the ``ROLLBUF_CONFIG`` environment variable is
    used. Missing files fall back to default :class:`BufferConfig`.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None
    if path is None:
        return BufferConfig()
    cfg_path = Path(path).expanduser()
    if not cfg_path.exists():
        logger.info("Buffer config %s not found, using defaults", cfg_path)
        return BufferConfig()
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    return config_from_mapping(raw)


def build_buffer(config: BufferConfig | None = None, *, default: T | None = None) -> RollingBuffer[T]:
    """Create a :class:`RollingBuffer` sized according to ``config``."""
    cfg = config or BufferConfig()
    capacity = cfg.resolved_capacity()
    logger.debug("Building rolling buffer (capacity=%d) from %r", capacity, cfg)
    return RollingBuffer(capacity, default=default)


__all__ = [
    "DEFAULT_CAPACITY",
    "BufferConfig",
    "build_buffer",
    "calculate_capacity",
    "config_from_mapping",
    "load_config",
]
