"""Command that checks whether a list of instructions sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.operations import Machine, UnknownInstructionError
from pushswap.parsing import InputError, parse_input
from pushswap.stack import Stack, fill_stack


def _instruction_name(line: str) -> str:
    if not line.endswith("\n"):
        raise UnknownInstructionError(f"unknown instruction: {line!r}")
    return line[:-1]


def check(args: Iterable[str], instructions: Iterable[str]) -> bool:
    """Run ``instructions`` on the numbers in ``args`` and report success.

    Each instruction is a line as read from input, newline included. The
    result is true when a ends sorted and b ends empty. Raises InputError
    for bad numbers and UnknownInstructionError for a bad line.
    """
    values = parse_input(args)
    machine = Machine(fill_stack(values), Stack(len(values)))
    for line in instructions:
        machine.execute(_instruction_name(line))
    return machine.a.is_sorted() and machine.b.is_empty()


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from stdin and print ``OK`` or ``KO``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        sorted_ok = check(args, sys.stdin)
    except (InputError, UnknownInstructionError):
        print("Error", file=sys.stderr)
        return 1
    print("OK" if sorted_ok else "KO")
    return 0


if __name__ == "__main__":
    sys.exit(main())