"""Command line entry point: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import assign_ranks, sort_stacks
from pushswap.stacks import PushSwap


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort the integers in argv and print each operation; 1 on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    stacks = PushSwap(values)
    assign_ranks(stacks)
    sort_stacks(stacks)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())