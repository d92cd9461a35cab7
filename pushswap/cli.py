"""Command line entry: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorter import push_swap
from pushswap.stack import Machine


def main(argv: Sequence[str] | None = None) -> int:
    """Run on the given arguments (without the program name); return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        numbers = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    machine = Machine(numbers, out=sys.stdout)
    if not machine.a.is_sorted():
        push_swap(machine)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())