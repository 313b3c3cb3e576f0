"""Command-line entry point for the dinner simulation."""

import sys

from philosophers.config import ConfigError, parse_args
from philosophers.dinner import start_dinner
from philosophers.table import build_table

_START_TIMESTAMP = 0


def format_config(config, ended):
    """Render the settings summary printed before the dinner starts."""
    rows = [
        ("Number of philosophers", config.num_philos),
        ("Time to die (ms)", config.time_to_die),
        ("Time to eat (ms)", config.time_to_eat),
        ("Time to sleep (ms)", config.time_to_sleep),
        ("Minimum meals per philos", config.min_meals),
        ("Start timestamp (ms)", _START_TIMESTAMP),
        ("Simulation ended?", "yes" if ended else "no"),
    ]
    lines = ["Data:"] + [f"\t{label:<27}: {value}" for label, value in rows]
    return "\n".join(lines) + "\n"


def main(argv=None):
    """Run the simulation from command-line arguments; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_args(args)
    except ConfigError as exc:
        print(exc)
        return 1
    table = build_table(config)
    print(format_config(config, table.ended()), end="")
    for thread in start_dinner(table):
        thread.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())