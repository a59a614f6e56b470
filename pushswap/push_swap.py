"""Command that prints the instructions sorting the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.parsing import InputError, parse_input
from pushswap.sorting import solve


def run(args: Iterable[str]) -> list[str]:
    """Validate ``args`` and return the instructions that sort them.

    The first argument is the top of stack a. Raises InputError on bad input.
    """
    return solve(parse_input(args))


def main(argv: Sequence[str] | None = None) -> int:
    """Print one instruction per line; print ``Error`` to stderr on bad input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        instructions = run(args)
    except InputError:
        print("Error", file=sys.stderr)
        return 1
    for instruction in instructions:
        print(instruction)
    return 0


if __name__ == "__main__":
    sys.exit(main())