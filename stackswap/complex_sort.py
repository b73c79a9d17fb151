"""Partition-and-insert strategy for sorting more than five elements.

Stack ``a`` is emptied into ``b`` partition by partition, leaving two
elements behind. Each element of ``b`` is then priced by how many rotations
put it in its place in ``a``, and the cheapest one is pushed back. A final
rotation brings rank 1 to the top of ``a``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from stackswap.stacks import Stacks


@dataclass
class Move:
    """Rotations that bring one element of ``b`` to its place in ``a``.

    ``total`` is the number of rotations, not counting the final push.
    """

    elem: int
    ra: int = 0
    rra: int = 0
    rb: int = 0
    rrb: int = 0
    rr: int = 0
    rrr: int = 0
    total: int = 0


def get_factor(length: int) -> int:
    """Partition size used for ``length`` elements."""
    if length < 20:
        return 10
    if length < 200:
        return 20
    return 50


def get_limits(length: int) -> list[int]:
    """Upper rank of each partition: multiples of the factor, then ``length``."""
    factor = get_factor(length)
    full, remainder = divmod(length, factor)
    limits = [(part + 1) * factor for part in range(full)]
    if remainder:
        limits.append(full * factor + remainder)
    return limits


def is_border(elem: int, stack: Sequence[int]) -> bool:
    """True when ``elem`` is below every value of ``stack`` or above every value."""
    if elem < stack[0]:
        return all(elem <= value for value in stack)
    return all(elem >= value for value in stack)


def get_target(stack: Sequence[int], elem: int, use_min: bool) -> int:
    """Value of ``stack`` that must be on top for ``elem`` to be pushed into place.

    With ``use_min`` the smallest value is the target. Otherwise it is the
    value just after the last neighbouring pair that ``elem`` fits between,
    or the top of the stack when there is no such pair.
    """
    if use_min:
        return min(stack)
    target = stack[0]
    for before, after in zip(stack, stack[1:]):
        if before < elem < after:
            target = after
    return target


def _settle(move: Move) -> None:
    """Merge the candidate rotations into the cheapest combination."""
    if move.rrb == 0:
        if move.rb + move.rra < max(move.rb, move.ra):
            move.ra = move.rr = move.rrr = 0
            move.total = move.rb + move.rra
        else:
            move.rra = move.rrr = 0
            move.total = max(move.rb, move.ra)
            if move.rb == move.total:
                move.rb -= move.ra
                move.rr, move.ra = move.ra, 0
            else:
                move.ra -= move.rb
                move.rr, move.rb = move.rb, 0
    else:
        if move.rrb + move.ra < max(move.rrb, move.rra):
            move.rra = move.rr = move.rrr = 0
            move.total = move.rrb + move.ra
        else:
            move.ra = move.rr = 0
            move.total = max(move.rrb, move.rra)
            if move.rrb == move.total:
                move.rrb -= move.rra
                move.rrr, move.rra = move.rra, 0
            else:
                move.rra -= move.rrb
                move.rrr, move.rrb = move.rrb, 0


def plan_move(stacks: Stacks, index: int) -> Move:
    """Price pushing the element at ``index`` of ``b`` into place in ``a``."""
    stack_a, stack_b = stacks.stack_a, stacks.stack_b
    elem = stack_b[index]
    move = Move(elem=elem)

    target = get_target(stack_a, elem, use_min=is_border(elem, stack_a))
    position = stack_a.index(target)
    move.ra = position
    move.rra = len(stack_a) - position

    position = stack_b.index(elem)
    if position <= (len(stack_b) - 1) - position:
        move.rb, move.rrb = position, 0
    else:
        move.rb, move.rrb = 0, len(stack_b) - position

    _settle(move)
    return move


def choose_move(moves: Sequence[Move]) -> Move:
    """Pick the cheapest move; among equals, the one with fewest combined rotations.

    A tied candidate with no combined rotations is replaced by any later tied
    candidate.
    """
    if not moves:
        raise ValueError("no moves to choose from")
    best_total = min(move.total for move in moves)
    candidates = [move for move in moves if move.total == best_total]
    if len(candidates) == 1:
        return candidates[0]
    chosen = candidates[0]
    shared = 0
    for move in candidates:
        combined = move.rr + move.rrr
        if shared == 0 or shared > combined:
            shared = combined
            chosen = move
    return chosen


def apply_move(stacks: Stacks, move: Move) -> None:
    """Run the rotations of ``move`` and push its element onto ``a``."""
    for name, count in (
        ("ra", move.ra),
        ("rb", move.rb),
        ("rr", move.rr),
        ("rra", move.rra),
        ("rrb", move.rrb),
        ("rrr", move.rrr),
    ):
        for _ in range(count):
            stacks.execute(name)
    stacks.execute("pa")


def begin_sort(stacks: Stacks) -> None:
    """Push every element of ``b`` back to ``a``, cheapest first."""
    while stacks.stack_b:
        moves = [plan_move(stacks, index) for index in range(len(stacks.stack_b))]
        apply_move(stacks, choose_move(moves))


def decide_push(stacks: Stacks, top: int, bottom: int) -> None:
    """Push to ``b`` whichever of ``top`` and ``bottom`` is cheaper to reach."""
    if top == bottom:
        stacks.move_to_b(top)
        return
    move_top = stacks.stack_a.index(top)
    move_bottom = len(stacks.stack_a) - stacks.stack_a.index(bottom)
    if move_top == move_bottom:
        stacks.move_to_b(bottom if top > bottom else top)
    elif move_top > move_bottom:
        stacks.move_to_b(bottom)
    else:
        stacks.move_to_b(top)


def push_partition(stacks: Stacks, limit: int) -> None:
    """Push elements not above ``limit`` to ``b`` until ``b`` holds ``limit`` of them.

    Two elements are always left in ``a``.
    """
    while len(stacks.stack_b) != limit and len(stacks.stack_a) > 2:
        top = next((value for value in stacks.stack_a if value <= limit), None)
        bottom = next(
            (value for value in reversed(stacks.stack_a) if value <= limit), None
        )
        if top is None or bottom is None:
            raise ValueError(f"no element of a is within limit {limit}")
        decide_push(stacks, top, bottom)


def final_adjust(stacks: Stacks) -> None:
    """Rotate ``a`` the shorter way until rank 1 is on top."""
    stack = stacks.stack_a
    position = stack.index(1)
    if position <= (len(stack) - 1) - position:
        steps, name = position, "ra"
    else:
        steps, name = len(stack) - position, "rra"
    for _ in range(steps):
        stacks.execute(name)


def sort_complex(stacks: Stacks) -> None:
    """Sort the ranks in ``a`` using partitions and cheapest-first insertion."""
    for limit in get_limits(len(stacks.stack_a)):
        push_partition(stacks, limit)
    begin_sort(stacks)
    final_adjust(stacks)