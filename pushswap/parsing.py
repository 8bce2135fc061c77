"""Reading the list of integers from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable

INT_MAX = 2_147_483_647

_DIGITS = frozenset("0123456789")
_SIGNS = ("+", "-")


class InputError(ValueError):
    """Raised when the arguments do not form a valid list of distinct integers."""


def _char(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


def join_arguments(args: Iterable[str]) -> str:
    """Join all arguments into one space-separated string with a leading blank."""
    return " " + "".join(" " + arg for arg in args)


def count_numbers(text: str) -> int:
    """Count the numbers in ``text``, rejecting anything that is not one."""
    count = 0
    index = 0
    while index < len(text):
        while _char(text, index) == " ":
            index += 1
        if _char(text, index) in _SIGNS:
            index += 1
        current = _char(text, index)
        if current in _DIGITS:
            while _char(text, index) in _DIGITS:
                index += 1
            count += 1
            if _char(text, index) not in (" ", ""):
                raise InputError(f"unexpected character after number at {index}")
        elif current:
            raise InputError(f"unexpected character {current!r} at {index}")
        while _char(text, index) == " ":
            index += 1
    return count


def parse_numbers(text: str) -> list[int]:
    """Convert the numbers in ``text`` to integers within the 32-bit range."""
    numbers = []
    index = 0
    while index < len(text):
        while _char(text, index) in (" ", "+", "-"):
            index += 1
        negative = _char(text, index - 1) == "-"
        if index >= len(text):
            break
        if _char(text, index) not in _DIGITS:
            raise InputError(f"unexpected character {text[index]!r} at {index}")
        value = 0
        while _char(text, index) in _DIGITS:
            value = value * 10 + int(text[index])
            index += 1
            if value > INT_MAX + negative:
                raise InputError("number out of range")
        numbers.append(-value if negative else value)
    return numbers


def check_duplicates(values: Iterable[int]) -> None:
    """Raise InputError if any value occurs twice."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise InputError(f"duplicate number {value}")
        seen.add(value)


def parse_arguments(argv: Iterable[str]) -> list[int]:
    """Parse the program arguments (without the program name) into integers."""
    args = list(argv)
    if not args:
        raise InputError("no arguments given")
    text = join_arguments(args)
    if count_numbers(text) == 0:
        raise InputError("no numbers given")
    values = parse_numbers(text)
    check_duplicates(values)
    return values