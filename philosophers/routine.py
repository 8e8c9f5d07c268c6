"""The life of one philosopher: eat, sleep, think, until the table stops."""

from __future__ import annotations

import time

from .clock import now_ms, precision_sleep
from .table import Philosopher

_POLL_SECONDS = 0.0001
_THINK_PAUSE_SECONDS = 0.001


def _wait_for_start(philosopher: Philosopher) -> None:
    table = philosopher.table
    with table.start_lock:
        table.ready_count += 1
    while True:
        with table.start_lock:
            if table.started:
                return
        time.sleep(_POLL_SECONDS)


def _cycle(philosopher: Philosopher) -> bool:
    """Run one eat-sleep-think cycle; return False if the forks could not be taken."""
    table = philosopher.table
    if not philosopher.pick_up_forks():
        return False
    philosopher.record_meal_start()
    precision_sleep(table.config.time_to_eat)
    philosopher.finish_meal()
    philosopher.put_down_forks()
    table.print_status(philosopher, "is sleeping")
    precision_sleep(table.config.time_to_sleep)
    table.print_status(philosopher, "is thinking")
    time.sleep(_THINK_PAUSE_SECONDS)
    return True


def run_philosopher(philosopher: Philosopher) -> None:
    """Wait for the common start, then loop through meals until the table stops."""
    _wait_for_start(philosopher)
    with philosopher.meal_lock:
        philosopher.t_last = now_ms()
    while True:
        if philosopher.num % 2:
            time.sleep(_POLL_SECONDS)
        if not philosopher.table.is_running():
            break
        if not _cycle(philosopher):
            break