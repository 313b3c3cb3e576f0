"""The table: forks, philosophers and the shared end flag."""

import threading
from dataclasses import dataclass, field

from philosophers.sync import Guarded


@dataclass(eq=False)
class Fork:
    """A fork guarded by its own lock."""

    fork_id: int
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


@dataclass(eq=False)
class Philosopher:
    """A diner with a fork on each side."""

    id: int
    right_fork: Fork
    left_fork: Fork
    table: "Table" = field(repr=False)
    meals_count: int = 0
    is_full: bool = False
    last_time_eat: int = 0
    thread: threading.Thread | None = field(default=None, repr=False)


@dataclass(eq=False)
class Table:
    """Everything the simulation shares."""

    config: object
    forks: list = field(default_factory=list)
    philosophers: list = field(default_factory=list)
    start: int = 0
    _end: Guarded = field(default_factory=lambda: Guarded(False), repr=False)

    def ended(self):
        """Whether the simulation has been marked as finished."""
        return self._end.value()

    def end(self):
        """Mark the simulation as finished."""
        self._end.update(lambda _: True)


def build_table(config):
    """Create forks and seat philosophers; philosopher ``i`` takes forks ``i`` and ``i+1``."""
    count = config.num_philos
    table = Table(config=config)
    table.forks = [Fork(fork_id=i) for i in range(count)]
    table.philosophers = [
        Philosopher(
            id=i + 1,
            right_fork=table.forks[i],
            left_fork=table.forks[(i + 1) % count],
            table=table,
        )
        for i in range(count)
    ]
    return table