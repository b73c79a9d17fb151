"""Fixed strategies for sorting three to five elements."""

from __future__ import annotations

from stackswap.stacks import Stacks, State, get_state


def sort_three(stacks: Stacks) -> None:
    """Sort a three-element stack ``a`` with at most two recorded operations."""
    stack = stacks.stack_a
    state = get_state(stack)
    if state in (State.SORTED_ASC, State.NO_ACT):
        return
    if state is State.SORTED_DES:
        stacks.execute("sa")
        stacks.execute("rra")
        return
    first, second, third = stack[0], stack[1], stack[2]
    if third > first > second:
        stacks.execute("sa")
    elif first > third > second:
        stacks.execute("ra")
    elif second > first > third:
        stacks.execute("rra")
    else:
        stacks.execute("sa")
        stacks.execute("ra")


def sort_simple(stacks: Stacks) -> None:
    """Sort up to five ranked elements.

    The smallest ranks are pushed to ``b`` until three remain in ``a``; those
    three are sorted, and ``b`` is pushed back on top.
    """
    smallest = 1
    while len(stacks.stack_a) > 3:
        stacks.move_to_b(smallest)
        smallest += 1
    sort_three(stacks)
    while stacks.stack_b:
        stacks.execute("pa")