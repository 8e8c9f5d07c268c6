"""Command-line argument validation and simulation settings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import takewhile

MAX_PHILOSOPHERS = 2048

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")


class ArgumentError(ValueError):
    """Raised when the command-line arguments are not acceptable."""

    def __init__(self, *messages: str) -> None:
        super().__init__("\n".join(messages))
        self.messages = list(messages)


@dataclass(frozen=True)
class Config:
    """Settings of one simulation; times are in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: int | None = None


def parse_long(text: str) -> int:
    """Read a signed decimal prefix of ``text``, skipping leading whitespace.

    Parsing stops at the first non-digit; no digits at all give 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, rest))
    return sign * int(digits) if digits else 0


def _token_problem(token: str) -> str | None:
    if not token:
        return "# empty argument"
    body = token[1:] if token[0] in "+-" else token
    if any(ch not in _DIGITS for ch in body):
        return "# invalid argument"
    return None


def check_args(args: Iterable[str]) -> None:
    """Check the argument count and that every argument is a signed integer."""
    args = list(args)
    if not 4 <= len(args) <= 5:
        raise ArgumentError("# wrong amount of arguments")
    problems = [msg for token in reversed(args) if (msg := _token_problem(token))]
    if problems:
        raise ArgumentError(*problems)


def _positive(text: str) -> int:
    value = parse_long(text)
    if value < 1:
        raise ArgumentError("# invalid argument!", "# set a positive value.")
    return value


def parse_config(args: Iterable[str]) -> Config:
    """Validate the arguments and build the simulation settings."""
    args = list(args)
    check_args(args)
    count = parse_long(args[0])
    if not 1 <= count <= MAX_PHILOSOPHERS:
        raise ArgumentError(
            "# invalid number_of_philosophers!",
            f"# pick a number between 1 and {MAX_PHILOSOPHERS}.",
        )
    time_to_die = _positive(args[1])
    time_to_eat = _positive(args[2])
    time_to_sleep = _positive(args[3])
    must_eat = _positive(args[4]) if len(args) == 5 else None
    return Config(count, time_to_die, time_to_eat, time_to_sleep, must_eat)