# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread and shares a fork with each neighbour. The philosophers take forks,
eat, sleep and think, while a monitor watches for a philosopher who has gone
too long without starting a meal.

## Installation

```
pip install .
```

## Usage

```
philo <philnum> <die> <eat> <sleep> [<meals>]
```

- `philnum`: the number of philosophers, which is also the number of forks
- `die`: the time in milliseconds a philosopher may go without starting a meal
- `eat`: the time in milliseconds a meal takes
- `sleep`: the time in milliseconds a philosopher sleeps after eating
- `meals`: optional; the simulation stops once every philosopher has eaten this many times

Every argument has to be a string of digits giving a positive integer no
larger than 2147483647. Signs, spaces and zero are rejected.

Example:

```
philo 5 800 200 200 7
```

The same command can be started with `python -m philosophers.cli`.

Each event goes to standard output as one line: the milliseconds since the
start of the simulation, the philosopher's number (from 1) and what happened.

```
<time> <id> has taken a fork
<time> <id> is eating
<time> <id> is sleeping
<time> <id> is thinking
```

Odd-numbered philosophers reach for the fork on their right first;
even-numbered ones reach for the fork on their left first. A lone philosopher
takes one fork, can never eat, and starves.

The simulation ends on the first of these:

- a philosopher starves, which prints `<time> <id> died`
- every philosopher has eaten `meals` times, which prints
  `<time> Everyone finished <meals> meals`

Nothing is printed after the closing line. The command then waits for every
philosopher thread to stop and exits with status 0.

If the number of arguments is wrong, the usage line goes to standard error; if
an argument is out of range, `Invalid argument. Only positive integers accepted`
goes to standard error. Either way the command exits with status 1.

## Library use

```python
import sys

from philosophers.parse import parse_arguments
from philosophers.simulation import Simulation

settings = parse_arguments(["4", "410", "200", "200", "3"])
Simulation(settings, sys.stdout).run()
```

- `philosophers.parse.parse_arguments(args)` takes the arguments that follow
  the program name and returns a `Settings` with `philo_count`, `time_to_die`,
  `time_to_eat`, `time_to_sleep` and `meals_to_eat` (`None` when no meal limit
  was given).
- `philosophers.parse.parse_positive(text)` checks a single argument.
- `philosophers.simulation.Simulation(settings, out)` writes its event lines to
  `out` (standard output when `out` is `None`); `run()` blocks until the
  simulation has ended.
- `philosophers.clock.now_ms()` returns the wall-clock time in milliseconds.

`parse_arguments` raises `philosophers.errors.UsageError` when the number of
arguments is wrong, and `philosophers.errors.InvalidArgumentError` when an
argument is not a positive integer in range. Both derive from
`philosophers.errors.PhiloError`.