"""Command-line arguments of the simulation and their validation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from philo.chars import atoi

PHILO_MAX = 250


class ArgumentError(ValueError):
    """Raised when the simulation arguments are missing or invalid."""


@dataclass(frozen=True)
class SimulationConfig:
    """Settings of one run; times are in milliseconds.

    ``meals_to_eat`` is None when the philosophers eat without limit.
    """

    philosopher_count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_to_eat: int | None = None


def is_numeric(text: str) -> bool:
    """Return True if every character of ``text`` is a decimal digit."""
    return all("0" <= char <= "9" for char in text)


def _positive(text: str, message: str, upper: int | None = None) -> int:
    if not is_numeric(text):
        raise ArgumentError(message)
    value = atoi(text)
    if value <= 0 or (upper is not None and value > upper):
        raise ArgumentError(message)
    return value


def parse_args(args: Sequence[str]) -> SimulationConfig:
    """Build a configuration from the four or five command-line arguments.

    The arguments are: number of philosophers, time to die, time to eat,
    time to sleep and, optionally, the number of meals each must eat.
    """
    if not 4 <= len(args) <= 5:
        raise ArgumentError("Wrong number of arguments")
    count = _positive(args[0], "Invalid philosophers number", PHILO_MAX)
    time_to_die = _positive(args[1], "Invalid time to die")
    time_to_eat = _positive(args[2], "Invalid time to eat")
    time_to_sleep = _positive(args[3], "Invalid time to sleep")
    meals = None
    if len(args) == 5:
        if not is_numeric(args[4]) or atoi(args[4]) < 0:
            raise ArgumentError("Invalid number of times each philo must eat")
        meals = atoi(args[4])
    return SimulationConfig(count, time_to_die, time_to_eat, time_to_sleep, meals)