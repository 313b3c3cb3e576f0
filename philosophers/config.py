"""Command-line settings for the dinner simulation."""

from dataclasses import dataclass

from philosophers.utils import parse_number

_US_PER_MS = 1000


class ConfigError(ValueError):
    """Raised when the simulation arguments are not acceptable."""


@dataclass(frozen=True)
class Config:
    """Simulation settings; times are in microseconds, ``min_meals`` is -1 if unset."""

    num_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    min_meals: int


def parse_args(args):
    """Build a Config from four or five argument strings (program name excluded)."""
    args = list(args)
    if len(args) not in (4, 5):
        raise ConfigError("Invalid args count")
    values = [parse_number(arg) for arg in args]
    if len(values) == 4:
        values.append(parse_number(None))
    if any(value == 0 for value in values):
        raise ConfigError("Invalid Number")
    num_philos, die, eat, sleep, min_meals = values
    return Config(
        num_philos=num_philos,
        time_to_die=die * _US_PER_MS,
        time_to_eat=eat * _US_PER_MS,
        time_to_sleep=sleep * _US_PER_MS,
        min_meals=min_meals,
    )