"""Generating distinct random numbers to feed the solver."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence

from stackswap.parsing import atoi

LOWER = 1
UPPER = 1000


def generate_numbers(count: int, rng: random.Random | None = None) -> list[int]:
    """Return ``count`` distinct integers between 1 and 1000 inclusive.

    A count that is zero or negative gives an empty list; a count above the
    size of the range raises :class:`ValueError`.
    """
    if count <= 0:
        return []
    generator = rng if rng is not None else random.Random()
    return generator.sample(range(LOWER, UPPER + 1), count)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the requested number of distinct random numbers on one line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 0
    numbers = generate_numbers(atoi(args[0]))
    sys.stdout.write("".join(f"{number} " for number in numbers) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())