"""Command-line entry point of the simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from philo.config import ArgumentError, parse_args
from philo.simulation import Simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the simulation and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_args(args)
        Simulation(config).run()
    except (ArgumentError, RuntimeError) as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())