"""The two stacks and the eleven operations that act on them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import IntEnum


class State(IntEnum):
    """Ordering of a sequence as seen from its top."""

    UNSORTED = -1
    NO_ACT = 0
    SORTED_ASC = 1
    SORTED_DES = 2


def get_state(stack: Sequence[int]) -> State:
    """Classify ``stack`` as unsorted, ascending, descending or trivially ordered."""
    if len(stack) < 2:
        return State.NO_ACT
    pairs = list(zip(stack, stack[1:]))
    if stack[0] > stack[1]:
        if any(first < second for first, second in pairs):
            return State.UNSORTED
        return State.SORTED_DES
    if any(first > second for first, second in pairs):
        return State.UNSORTED
    return State.SORTED_ASC


_OPERATION_NAMES = frozenset(
    {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}
)


class Stacks:
    """Stacks ``a`` and ``b``; index 0 of each list is the top.

    Operations run through :meth:`execute` are recorded in ``operations``.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.stack_a: list[int] = list(values)
        self.stack_b: list[int] = []
        self.operations: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.stack_a!r}, b={self.stack_b!r})"

    @staticmethod
    def _swap(stack: list[int]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _rotate(stack: list[int]) -> None:
        if len(stack) >= 2:
            stack.append(stack.pop(0))

    @staticmethod
    def _reverse_rotate(stack: list[int]) -> None:
        if len(stack) >= 2:
            stack.insert(0, stack.pop())

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        self._swap(self.stack_a)

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        self._swap(self.stack_b)

    def ss(self) -> None:
        """Do ``sa`` and ``sb`` together."""
        self.sa()
        self.sb()

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if self.stack_b:
            self.stack_a.insert(0, self.stack_b.pop(0))

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if self.stack_a:
            self.stack_b.insert(0, self.stack_a.pop(0))

    def ra(self) -> None:
        """Rotate ``a`` up: the top becomes the bottom."""
        self._rotate(self.stack_a)

    def rb(self) -> None:
        """Rotate ``b`` up: the top becomes the bottom."""
        self._rotate(self.stack_b)

    def rr(self) -> None:
        """Do ``ra`` and ``rb`` together."""
        self.ra()
        self.rb()

    def rra(self) -> None:
        """Rotate ``a`` down: the bottom becomes the top."""
        self._reverse_rotate(self.stack_a)

    def rrb(self) -> None:
        """Rotate ``b`` down: the bottom becomes the top."""
        self._reverse_rotate(self.stack_b)

    def rrr(self) -> None:
        """Do ``rra`` and ``rrb`` together."""
        self.rra()
        self.rrb()

    def apply(self, name: str) -> None:
        """Run the operation called ``name`` without recording it."""
        if name not in _OPERATION_NAMES:
            raise ValueError(f"unknown operation: {name!r}")
        getattr(self, name)()

    def execute(self, name: str) -> None:
        """Run the operation called ``name`` and record it."""
        self.apply(name)
        self.operations.append(name)

    def _bring_to_top(self, stack: list[int], elem: int, forward: str, backward: str) -> None:
        index = stack.index(elem)
        if index <= (len(stack) - 1) - index:
            steps, name = index, forward
        else:
            steps, name = len(stack) - index, backward
        for _ in range(steps):
            self.execute(name)

    def move_to_b(self, elem: int) -> None:
        """Rotate ``a`` the shorter way until ``elem`` is on top, then push it to ``b``."""
        self._bring_to_top(self.stack_a, elem, "ra", "rra")
        self.execute("pb")

    def move_to_a(self, elem: int) -> None:
        """Rotate ``b`` the shorter way until ``elem`` is on top, then push it to ``a``."""
        self._bring_to_top(self.stack_b, elem, "rb", "rrb")
        self.execute("pa")

    def is_sorted(self) -> bool:
        """True when ``b`` is empty and ``a`` is in ascending order."""
        return not self.stack_b and get_state(self.stack_a) in (
            State.SORTED_ASC,
            State.NO_ACT,
        )