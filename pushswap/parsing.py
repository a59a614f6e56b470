"""Validation and conversion of the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import takewhile

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_WHITESPACE = "\t\n\v\f\r "


class InputError(ValueError):
    """Raised when the numbers given are malformed, out of range or repeated."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def atoll(text: str) -> int:
    """Read a leading decimal integer, stopping at the first non-digit.

    Leading whitespace is skipped and a single ``-`` is honoured; a ``+``
    sign is not consumed, so text starting with one reads as zero.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(_is_digit, rest))
    return sign * int(digits) if digits else 0


def _is_number_word(text: str) -> bool:
    for char, following in zip(text, text[1:] + "\0"):
        if not _is_digit(char) and char != "-":
            return False
        if char == "-" and not _is_digit(following):
            return False
    return True


def is_all_digits(args: Iterable[str]) -> bool:
    """True when every argument holds only digits and minus signs before digits."""
    return all(_is_number_word(text) for text in args)


def has_duplicates(values: Iterable[int]) -> bool:
    values = list(values)
    return len(set(values)) != len(values)


def parse_input(args: Iterable[str]) -> list[int]:
    """Turn the arguments into integers, raising InputError on any bad input."""
    args = list(args)
    if not is_all_digits(args):
        raise InputError()
    values = []
    for text in args:
        number = atoll(text)
        if number > INT_MAX or number <= INT_MIN:
            raise InputError()
        values.append(number)
    if has_duplicates(values):
        raise InputError()
    return values