"""The dining philosophers simulation: one thread per philosopher plus a monitor."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from philo.config import SimulationConfig

_SLEEP_STEP = 0.00005
_MONITOR_STEP = 0.0005


def current_time_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(eq=False)
class Philosopher:
    """One seat at the table: its forks and its meal bookkeeping."""

    id: int
    left_fork: threading.Lock
    right_fork: threading.Lock
    last_meal: int
    meals_eaten: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def forks_in_order(self) -> tuple[threading.Lock, threading.Lock]:
        """The forks in the order this philosopher picks them up."""
        if self.id % 2 == 0:
            return self.right_fork, self.left_fork
        return self.left_fork, self.right_fork


class Simulation:
    """Runs philosophers who eat, sleep and think until one dies or all have eaten."""

    def __init__(self, config: SimulationConfig, output: TextIO | None = None) -> None:
        self.config = config
        self.output = sys.stdout if output is None else output
        self._print_lock = threading.RLock()
        self._dead = threading.Event()
        self._all_ate = threading.Event()
        self.start = current_time_ms()
        forks = [threading.Lock() for _ in range(config.philosopher_count)]
        self.philosophers = [
            Philosopher(
                id=index + 1,
                left_fork=fork,
                right_fork=forks[index - 1],
                last_meal=current_time_ms(),
            )
            for index, fork in enumerate(forks)
        ]

    def _running(self) -> bool:
        return not self._dead.is_set() and not self._all_ate.is_set()

    def _start_thread(self, target, args, message: str) -> threading.Thread:
        thread = threading.Thread(target=target, args=args, daemon=True)
        try:
            thread.start()
        except RuntimeError as exc:
            self._dead.set()
            raise RuntimeError(message) from exc
        return thread

    def run(self) -> None:
        """Start the monitor and every philosopher, and wait for them all."""
        threads = [self._start_thread(self.monitor, (), "Error creating monitor thread")]
        threads.extend(
            self._start_thread(self.routine, (philosopher,), "Error creating philo thread")
            for philosopher in self.philosophers
        )
        for thread in threads:
            thread.join()

    def someone_died(self) -> bool:
        """Return True once a philosopher has died."""
        return self._dead.is_set()

    def all_ate(self) -> bool:
        """Return True once every philosopher has eaten the required meals."""
        return self._all_ate.is_set()

    def sleep_ms(self, duration: int, philosopher: Philosopher | None = None) -> None:
        """Wait ``duration`` milliseconds, returning early when the run is over."""
        if duration <= 0:
            return
        began = time.monotonic()
        while (time.monotonic() - began) * 1000 < duration:
            if not self._running():
                return
            time.sleep(_SLEEP_STEP)

    def report(self, philosopher: Philosopher, message: str) -> None:
        """Print a timestamped state change, unless someone has already died."""
        with self._print_lock:
            elapsed = current_time_ms() - self.start
            if self._dead.is_set():
                return
            self.output.write(f"{elapsed} philosopher {philosopher.id} {message}\n")

    def routine(self, philosopher: Philosopher) -> None:
        """The life of one philosopher: eat, sleep, think, until the run is over."""
        count = self.config.philosopher_count
        if count % 2 != 0 and count != 1 and philosopher.id == 1:
            self.sleep_ms(self.config.time_to_eat * 2, philosopher)
        if philosopher.id % 2 == 0:
            self.sleep_ms(self.config.time_to_eat, philosopher)
        while self._running():
            self.eat(philosopher)
            if self._running():
                self.sleep(philosopher)
            if self._running():
                self.think(philosopher)

    def eat(self, philosopher: Philosopher) -> None:
        """Take both forks, eat, and put the forks back."""
        if not self._running():
            return
        first, second = philosopher.forks_in_order
        with first:
            self.report(philosopher, "has taken a fork")
            if self.config.philosopher_count == 1:
                self.sleep_ms(self.config.time_to_die, philosopher)
                with self._print_lock:
                    self.report(philosopher, "died")
                    self._dead.set()
                return
            with second:
                self.report(philosopher, "has taken a fork")
                with philosopher.lock:
                    philosopher.last_meal = current_time_ms()
                    philosopher.meals_eaten += 1
                    self.report(philosopher, "is eating")
                self.sleep_ms(self.config.time_to_eat, philosopher)

    def sleep(self, philosopher: Philosopher) -> None:
        """Report sleeping and sleep for the configured time."""
        self.report(philosopher, "is sleeping")
        self.sleep_ms(self.config.time_to_sleep, philosopher)

    def think(self, philosopher: Philosopher) -> None:
        """Report thinking and wait long enough for the neighbours to eat."""
        self.report(philosopher, "is thinking")
        if self.config.philosopher_count % 2 == 0:
            wait = self.config.time_to_eat - self.config.time_to_sleep
        else:
            wait = self.config.time_to_eat * 2 - self.config.time_to_sleep
        self.sleep_ms(wait, philosopher)

    def check_death(self) -> bool:
        """Mark the run over and return True if any philosopher has starved."""
        for philosopher in self.philosophers:
            with philosopher.lock:
                starving = current_time_ms() - philosopher.last_meal > self.config.time_to_die
            if starving:
                with self._print_lock:
                    if self.config.philosopher_count != 1:
                        self.report(philosopher, "died")
                    self._dead.set()
                return True
        return False

    def check_meals(self) -> bool:
        """Mark the run over and return True once everyone ate enough meals."""
        required = self.config.meals_to_eat
        if required is None:
            return False
        for philosopher in self.philosophers:
            with philosopher.lock:
                if philosopher.meals_eaten < required:
                    return False
        self._all_ate.set()
        return True

    def monitor(self) -> None:
        """Watch the table until someone dies or everyone has eaten."""
        while not self.check_death() and not self.check_meals():
            time.sleep(_MONITOR_STEP)