"""Fill a rolling buffer with integers and show how it wraps.

After every insertion the eager :meth:`RollingBuffer.values` snapshot and the
lazy :meth:`RollingBuffer.values_iter` output are logged side by side and
compared; the run ends with the final buffer state and the elapsed time.
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import Sequence

import yaml

from ..config import BufferConfig, build_buffer, load_config
from ..core import InvalidCapacityError, RollingBuffer

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rolling buffer demonstration run")
    parser.add_argument(
        "-c",
        "--capacity",
        type=int,
        default=None,
        help="Buffer capacity (default: from --config, else 20)",
    )
    parser.add_argument(
        "-n",
        "--count",
        type=int,
        default=40,
        help="Number of integers to insert (default: 40)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML buffer config (default: $ROLLBUF_CONFIG if set)",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser


def run(buffer: RollingBuffer[int], count: int) -> bool:
    """Insert ``0..count-1`` into ``buffer``; return False on a values/iter mismatch."""
    for num in range(count):
        buffer.add(num)
        vec_out = buffer.values()
        iter_out = list(buffer.values_iter())
        logger.info("len: %d - %s", len(buffer), vec_out)
        logger.debug("len: %d - %s (iter)", len(buffer), iter_out)
        if vec_out != iter_out:
            logger.error("values() and values_iter() disagree: %s != %s", vec_out, iter_out)
            return False
    return True


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.capacity is not None:
        config = BufferConfig(capacity=args.capacity)
    else:
        try:
            config = load_config(args.config)
        except (ValueError, yaml.YAMLError) as exc:
            parser.error(str(exc))
    try:
        buffer: RollingBuffer[int] = build_buffer(config, default=0)
    except (InvalidCapacityError, TypeError) as exc:
        parser.error(str(exc))

    start = time.perf_counter()
    ok = run(buffer, max(0, args.count))
    elapsed = time.perf_counter() - start

    print(f"capacity: {buffer.capacity} | len: {len(buffer)} | full: {buffer.is_full()}")
    print(f"values: {buffer.values()}")
    print(f"runtime: {elapsed * 1000.0:.3f} ms")
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
