"""Checking that a list of operations sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from stackswap.parsing import InputError, parse_arguments
from stackswap.stacks import Stacks

_INSTRUCTIONS = frozenset(
    {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}
)


def parse_instruction(line: str) -> str:
    """Return the operation named by ``line``, which must end in a newline."""
    if not line.endswith("\n"):
        raise InputError()
    name = line[:-1]
    if name not in _INSTRUCTIONS:
        raise InputError()
    return name


def run_checker(values: Sequence[int], lines: Iterable[str]) -> bool:
    """Apply each instruction line to ``values`` and report whether they end sorted.

    An empty ``values`` or an unknown instruction raises :class:`InputError`.
    """
    if not values:
        raise InputError()
    stacks = Stacks(values)
    for line in lines:
        stacks.apply(parse_instruction(line))
    return len(stacks.stack_a) == len(values) and stacks.is_sorted()


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print ``OK`` or ``KO``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
        result = run_checker(values, sys.stdin)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if result else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())