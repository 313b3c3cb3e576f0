# philosophers

The set-up stage of a dining philosophers simulation. It reads the
simulation parameters from the command line, seats the philosophers around a
table with one fork between each pair of neighbours, and starts one thread
per philosopher.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_meals]
```

Four or five arguments are accepted; any other count prints
`Invalid args count` and exits with status 1.

Each argument must be a positive whole number no larger than 2147483647.
Leading spaces and a single `+` sign are allowed; anything else (other
characters, an empty string, zero, or a value that is too large) prints
`Invalid Number` and exits with status 1.

The three times are given in milliseconds and are stored in microseconds
(multiplied by 1000). When `number_of_meals` is left out, it is stored as -1.

Example:

```
philo 5 800 200 200 7
```

On success the command prints a summary of the settings, for example:

```
Data:
	Number of philosophers     : 5
	Time to die (ms)           : 800000
	Time to eat (ms)           : 200000
	Time to sleep (ms)         : 200000
	Minimum meals per philos   : 7
	Start timestamp (ms)       : 0
	Simulation ended?          : no
```

The time rows show the stored values, which are in microseconds despite the
"(ms)" labels. The command then builds the table, starts the philosophers'
threads, waits for them to finish and exits with status 0.

## Library use

```python
from philosophers.config import ConfigError, parse_args
from philosophers.table import build_table
from philosophers.dinner import start_dinner

config = parse_args(["5", "800", "200", "200", "7"])
table = build_table(config)
for thread in start_dinner(table):
    thread.join()
```

- `philosophers.config.parse_args(args)` takes the four or five argument
  strings (without the program name) and returns a frozen `Config` with
  `num_philos`, `time_to_die`, `time_to_eat`, `time_to_sleep` and
  `min_meals`. It raises `ConfigError` (a `ValueError`) when the arguments
  are rejected.
- `philosophers.table.build_table(config)` returns a `Table` holding a list
  of `Fork` objects and a list of `Philosopher` objects. Philosopher ids run
  from 1. The philosopher at position *n* (counting from 0) has fork *n* as
  its right fork and fork *n + 1* as its left fork, wrapping round to fork 0
  for the last one. Each fork carries its own `threading.Lock`.
- `Table.end()` marks the simulation as finished and `Table.ended()` reports
  whether it has been; both are safe to call from any thread.
- `philosophers.dinner.start_dinner(table)` starts one thread per
  philosopher and returns the started threads. It starts nothing, and returns
  an empty list, when no meal count was given or when only one philosopher is
  seated.
- `philosophers.cli.format_config(config, ended)` returns the summary text
  shown above.
- `philosophers.sync.Guarded` holds a value behind a lock: `value()` reads
  it and `update(fn)` replaces it with `fn(value)` and returns the result.
- `philosophers.utils` has `parse_number(text)` (the strict number parser
  behind `parse_args`: it returns -1 for `None` and 0 for anything invalid),
  `now_ms()` (wall-clock time in milliseconds) and `sleep_ms(ms)` (sleeps for
  at least `ms` milliseconds).

## What it does not do

The philosophers' threads do not yet do anything: nobody picks up forks,
eats, sleeps or thinks, no state changes are printed, and no philosopher
ever dies or becomes full. The start timestamp is always reported as 0 and
the end flag is never set by the dinner itself. The package covers argument
handling, building the table and starting the threads only.

## Running the tests

```
pip install .[test]
pytest
```