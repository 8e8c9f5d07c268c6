# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in a
thread of its own and needs the two forks beside it, which are locks shared
with its neighbours. Philosophers in odd seats take the left fork first, those
in even seats the right fork first. With both forks a philosopher eats, puts
the forks down, sleeps, then thinks, and starts over. A monitor thread polls
the table and stops the simulation when a philosopher has gone longer than the
time to die without starting a meal, or when every philosopher has eaten the
required number of meals.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

- `number_of_philosophers`: a number from 1 to 2048.
- `time_to_die`, `time_to_eat`, `time_to_sleep`: times in milliseconds, each
  positive.
- `number_of_times_each_philosopher_must_eat` (optional, positive): the
  simulation stops once every philosopher has eaten this many times.

Each argument must be digits with at most one leading `+` or `-`.

Each event is printed on a line of its own, giving the milliseconds since the
start, the philosopher's number (counting from 1) and what happened:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
...
```

The events are `has taken a fork`, `is eating`, `is sleeping`, `is thinking`
and `died`. Once the simulation has stopped, no further status lines are
printed. When everyone has eaten enough, the simulation ends without a final
message.

A single philosopher takes the only fork, waits for the time to die and dies.

If the arguments are wrong, the command prints one or more lines beginning
with `#` and exits with status 1. It also exits with status 1 if a thread
cannot be started.

## Use from Python

```python
import io

from philosophers.args import parse_config
from philosophers.runner import run

config = parse_config(["5", "800", "200", "200", "3"])
out = io.StringIO()
table = run(config, out)
print(out.getvalue())
print([p.ate for p in table.philosophers])
```

- `philosophers.args`: `parse_config(args)` validates the arguments (without
  the program name) and returns a `Config`; it raises `ArgumentError`, whose
  `messages` hold the lines the command prints. `check_args(args)` checks only
  the count and form of the arguments; `parse_long(text)` reads a signed
  decimal prefix.
- `philosophers.runner`: `run(config, out)` runs a simulation to its end,
  writing to `out` (standard output by default), and returns the final
  `Table`. `main(argv)` takes the command's arguments and returns its exit
  status.
- `philosophers.table`: `Table` and `Philosopher`, the shared state.
- `philosophers.monitor`: `watch(table)` returns the philosopher who died, or
  `None` when all finished their meals.
- `philosophers.clock`: `now_ms()` and `precision_sleep(duration)`.

## Tests

```
pip install .[test]
pytest
```