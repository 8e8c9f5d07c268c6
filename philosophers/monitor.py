"""The watcher that detects starvation and satisfied appetites."""

from __future__ import annotations

import time

from .clock import now_ms
from .table import Philosopher, Table

_POLL_SECONDS = 0.0001


def report_death(table: Table, philosopher: Philosopher) -> bool:
    """Stop the simulation and announce the death, unless it already stopped.

    Returns whether the death was announced.
    """
    with table.msg_lock, table.alive_lock:
        if not table.running:
            return False
        table.running = False
        table.out.write(f"{now_ms() - table.t_start} {philosopher.num} died\n")
        table.out.flush()
        return True


def watch(table: Table) -> Philosopher | None:
    """Poll the table until someone starves or everyone has eaten enough.

    Returns the philosopher who died, or None when all finished their meals.
    """
    while True:
        for philosopher in table.philosophers:
            if philosopher.starved(now_ms()):
                report_death(table, philosopher)
                return philosopher
        if table.all_ate():
            table.stop()
            return None
        time.sleep(_POLL_SECONDS)