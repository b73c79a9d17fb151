"""Reading the numbers to sort from command-line arguments."""

from __future__ import annotations

import re
from collections.abc import Container, Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \t\n\v\f\r"
_SEPARATORS = re.compile(r"[ \t\n\v\f\r]+")


class InputError(ValueError):
    """Raised when the arguments do not describe a valid set of integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def atoi(text: str) -> int:
    """Read a leading integer the way C's ``atoi`` does.

    Leading whitespace is skipped, one optional sign is read, then as many
    decimal digits as follow. Anything after them is ignored; no digits gives 0.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    match = re.match(r"[0-9]*", stripped)
    digits = match.group(0) if match else ""
    return sign * int(digits) if digits else 0


def split_whitespace(text: str) -> list[str]:
    """Split ``text`` on runs of ASCII whitespace, dropping empty pieces."""
    return [piece for piece in _SEPARATORS.split(text) if piece]


def _check_digits(token: str) -> None:
    body = token
    if token[:1] in ("+", "-"):
        if len(token) == 1:
            raise InputError()
        body = token[1:]
    if not all("0" <= char <= "9" for char in body):
        raise InputError()


def check_token(token: str, seen: Container[int]) -> int:
    """Validate one token and return its value.

    The token must be an optionally signed run of digits, fit in a 32-bit
    signed integer, and not already be in ``seen``.
    """
    _check_digits(token)
    value = atoi(token)
    if value < INT_MIN or value > INT_MAX:
        raise InputError()
    if value in seen:
        raise InputError()
    return value


def rank(values: Sequence[int]) -> list[int]:
    """Replace each value by its 1-based position in sorted order."""
    positions = {value: position for position, value in enumerate(sorted(values), start=1)}
    return [positions[value] for value in values]


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the program's arguments into the ranks of the numbers they hold.

    Each argument may hold several whitespace-separated numbers. An empty
    argument, a malformed number, an out-of-range number or a duplicate
    raises :class:`InputError`. No arguments at all gives an empty list.
    """
    if not args:
        return []
    if any(arg == "" for arg in args):
        raise InputError()
    tokens = split_whitespace(" ".join(args))
    values: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        value = check_token(token, seen)
        seen.add(value)
        values.append(value)
    return rank(values)