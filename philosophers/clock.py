"""Millisecond clock and a busy-waiting sleep."""

from __future__ import annotations

import time

_POLL_SECONDS = 0.0001


def now_ms() -> int:
    """Return the current wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


def precision_sleep(duration: int) -> None:
    """Sleep for ``duration`` milliseconds in short polling steps."""
    start = now_ms()
    while now_ms() - start < duration:
        time.sleep(_POLL_SECONDS)