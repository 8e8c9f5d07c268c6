"""Running a whole simulation and the command-line entry point."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Sequence
from typing import TextIO

from .args import ArgumentError, Config, parse_config
from .clock import now_ms
from .monitor import watch
from .routine import run_philosopher
from .table import Table

_POLL_SECONDS = 0.0001


def solo(table: Table) -> None:
    """A lone philosopher takes the only fork and starves waiting for a second."""
    philosopher = table.philosophers[0]
    with philosopher.fork_left:
        table.out.write(f"{now_ms() - table.t_start} {philosopher.num} has taken a fork\n")
        table.out.flush()
        time.sleep(table.config.time_to_die / 1000)
        table.out.write(f"{now_ms() - table.t_start} {philosopher.num} died\n")
        table.out.flush()


def _wait_for_all(table: Table) -> None:
    while True:
        with table.start_lock:
            if table.ready_count == len(table.philosophers):
                table.started = True
                return
        time.sleep(_POLL_SECONDS)


def _abort(table: Table, threads: list[threading.Thread]) -> None:
    table.stop()
    with table.start_lock:
        table.started = True
    for thread in threads:
        thread.join()


def run(config: Config, out: TextIO | None = None) -> Table:
    """Run a simulation to its end and return the final table."""
    table = Table(config, out)
    table.set_start()
    if config.philosophers == 1:
        solo(table)
        return table

    threads: list[threading.Thread] = []
    try:
        for philosopher in table.philosophers:
            thread = threading.Thread(
                target=run_philosopher, args=(philosopher,), daemon=True
            )
            thread.start()
            threads.append(thread)
    except RuntimeError:
        _abort(table, threads)
        raise

    _wait_for_all(table)
    monitor = threading.Thread(target=watch, args=(table,), daemon=True)
    try:
        monitor.start()
    except RuntimeError:
        _abort(table, threads)
        raise
    for thread in threads:
        thread.join()
    monitor.join()
    return table


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = parse_config(args)
    except ArgumentError as err:
        for message in err.messages:
            print(message)
        return 1
    try:
        run(config, sys.stdout)
    except RuntimeError:
        return 1
    return 0