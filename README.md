# philo

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread. A philosopher picks up the two forks on either side, eats,
sleeps and thinks, and then starts again. A monitor thread watches the
table. The run ends when a philosopher goes longer than the time to die
without starting a meal, or when every philosopher has eaten the required
number of meals.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Usage

```
philo NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

You can also run it with `python -m philo.cli` and the same arguments.

- `NUMBER_OF_PHILOSOPHERS`: how many philosophers sit at the table, from 1
  to 250.
- `TIME_TO_DIE`: milliseconds a philosopher may go without starting a meal.
- `TIME_TO_EAT`: milliseconds a meal takes.
- `TIME_TO_SLEEP`: milliseconds a philosopher sleeps after a meal.
- `MEALS` (optional): the run ends once every philosopher has eaten at
  least this many times. It may be 0.

Each argument may contain only the digits 0 to 9, with no sign and no
spaces. The first four arguments must be greater than zero. If the count
of arguments is wrong, or an argument is invalid, the program writes a
message such as `Invalid time to die` to standard error and exits with
status 1. It exits with status 0 once the simulation ends.

Each state change goes to standard output as one line:

```
<milliseconds since start> philosopher <id> <state>
```

The states are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. Once a philosopher has died, no further lines are
printed. A lone philosopher has only one fork. It takes that fork, waits
for the time to die, and then dies.

Example:

```
philo 5 800 200 200 7
```

## Library use

```python
import io
from philo.config import parse_args
from philo.simulation import Simulation

config = parse_args(["4", "410", "200", "200", "3"])
out = io.StringIO()
simulation = Simulation(config, out)
simulation.run()
print(out.getvalue())
print(simulation.someone_died(), simulation.all_ate())
```

`parse_args` raises `philo.config.ArgumentError`, a subclass of
`ValueError`, on invalid input. It returns a frozen `SimulationConfig`. In
that config, `meals_to_eat` is `None` when no meal count was given.

## Helper modules

The package also includes some small utilities:

- `philo.chars`: ASCII character tests (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`), `to_lower`, `to_upper`, `atoi`
  (leading-integer parsing with 32-bit wrap-around) and `itoa`.
- `philo.memory`: operations on a `bytearray`: `memset`, `bzero`,
  `calloc`, `memchr`, `memcmp`, `memcpy` and `memmove`. `memmove` copies
  between offsets within one buffer.
- `philo.strings`: string routines that return indices or `None` instead
  of pointers: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `strdup`, `substr`, `strjoin`, `strtrim`, `split`,
  `strmapi` and `striteri`.
- `philo.linked_list`: `LinkedList` of `Node` objects. It supports
  `add_front`, `add_back`, `last`, `len()`, iteration, `clear`, `for_each`
  and `map`.
- `philo.lines`: `LineReader`, which reads a text or binary stream line by
  line through a fixed-size read buffer (42 by default).
- `philo.printf`: `format_string` and `printf` for the `%c %s %p %d %i %u
  %x %X %%` directives, plus `put_char`, `put_str`, `put_endl`,
  `put_number`, `digit_count`, `is_conversion` and `unsigned_itoa`.