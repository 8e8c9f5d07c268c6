"""The shared table: forks, philosophers and the locks guarding them."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, field
from typing import TextIO

from .args import Config
from .clock import now_ms


@dataclass(eq=False)
class Philosopher:
    """One diner, seated between two forks."""

    num: int
    table: Table
    fork_left: threading.Lock
    fork_right: threading.Lock
    ate: int = 0
    t_last: int = 0
    meal_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def _pick(self, first: threading.Lock, second: threading.Lock) -> bool:
        first.acquire()
        self.table.print_status(self, "has taken a fork")
        if not self.table.is_running():
            first.release()
            return False
        second.acquire()
        self.table.print_status(self, "has taken a fork")
        return True

    def pick_up_forks(self) -> bool:
        """Take both forks; odd seats start left, even seats start right.

        Returns False, holding no fork, if the simulation stopped in between.
        """
        if self.num % 2:
            return self._pick(self.fork_left, self.fork_right)
        return self._pick(self.fork_right, self.fork_left)

    def put_down_forks(self) -> None:
        self.fork_left.release()
        self.fork_right.release()

    def record_meal_start(self) -> None:
        """Note the time of the meal and announce it."""
        with self.meal_lock:
            self.t_last = now_ms()
            self.table.print_status(self, "is eating")

    def finish_meal(self) -> None:
        with self.meal_lock:
            self.ate += 1

    def starved(self, now: int) -> bool:
        """Whether more than the time to die has passed since the last meal."""
        with self.meal_lock:
            hungry_for = now - self.t_last
        return hungry_for > self.table.config.time_to_die


class Table:
    """Shared state of a simulation."""

    def __init__(self, config: Config, out: TextIO | None = None) -> None:
        self.config = config
        self.out = out if out is not None else sys.stdout
        self.msg_lock = threading.Lock()
        self.alive_lock = threading.Lock()
        self.start_lock = threading.Lock()
        self.running = True
        self.ready_count = 0
        self.started = False
        self.t_start = 0
        count = config.philosophers
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(
                num=i + 1,
                table=self,
                fork_left=self.forks[i],
                fork_right=self.forks[(i + 1) % count],
            )
            for i in range(count)
        ]

    def print_status(self, philosopher: Philosopher, message: str) -> None:
        """Write a timestamped status line while the simulation runs."""
        with self.msg_lock, self.alive_lock:
            if self.running:
                timestamp = now_ms() - self.t_start
                self.out.write(f"{timestamp} {philosopher.num} {message}\n")
                self.out.flush()

    def is_running(self) -> bool:
        with self.alive_lock:
            return self.running

    def stop(self) -> bool:
        """End the simulation; return whether it was still running."""
        with self.alive_lock:
            was_running = self.running
            self.running = False
            return was_running

    def set_start(self) -> int:
        """Start the clock and treat every philosopher as just fed."""
        self.t_start = now_ms()
        for philosopher in self.philosophers:
            with philosopher.meal_lock:
                philosopher.t_last = self.t_start
        return self.t_start

    def all_ate(self) -> bool:
        """Whether every philosopher has eaten the required number of meals."""
        must_eat = self.config.must_eat
        if must_eat is None:
            return False
        for philosopher in self.philosophers:
            with philosopher.meal_lock:
                if philosopher.ate < must_eat:
                    return False
        return True