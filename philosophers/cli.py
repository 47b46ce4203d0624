"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from philosophers.errors import PhiloError
from philosophers.parse import parse_arguments
from philosophers.simulation import Simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the simulation and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        settings = parse_arguments(args)
    except PhiloError as error:
        print(error.message, file=sys.stderr)
        return 1
    Simulation(settings, sys.stdout).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())