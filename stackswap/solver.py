"""Choosing a strategy and producing the operations that sort stack ``a``."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from stackswap.complex_sort import sort_complex
from stackswap.parsing import InputError, parse_arguments, rank
from stackswap.simple_sort import sort_simple
from stackswap.stacks import Stacks, State, get_state


def sort_stacks(stacks: Stacks) -> None:
    """Sort the ranks held in ``a``, recording every operation on ``stacks``.

    Nothing is done for an empty, single or already ascending stack; two
    elements take one swap; up to five use the fixed strategy and larger
    stacks the partition strategy.
    """
    state = get_state(stacks.stack_a)
    if state in (State.SORTED_ASC, State.NO_ACT):
        return
    if len(stacks.stack_a) == 2:
        stacks.execute("sa")
        return
    if len(stacks.stack_a) <= 5:
        sort_simple(stacks)
    else:
        sort_complex(stacks)


def solve(values: Iterable[int]) -> list[str]:
    """Return the operations that sort the distinct integers ``values``."""
    stacks = Stacks(rank(list(values)))
    sort_stacks(stacks)
    return list(stacks.operations)


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line that sorts the numbers given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        ranks = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    stacks = Stacks(ranks)
    sort_stacks(stacks)
    for name in stacks.operations:
        sys.stdout.write(f"{name}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())