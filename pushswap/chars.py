"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

INT_MAX = 2_147_483_647
INT_MIN = -2_147_483_648

_WHITESPACE = frozenset(" \t\n\r\v\f")
_DIGITS = frozenset("0123456789")


def _code(c: int | str) -> int:
    """Code point of ``c``, given either as an integer or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: int | str) -> bool:
    """Whether ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """Whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """Whether ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """Whether ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """Whether ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: int | str, first: str, last: str, shift: int) -> int | str:
    code = _code(c)
    if ord(first) <= code <= ord(last):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Upper-case form of an ASCII lower-case letter; anything else unchanged."""
    return _convert(c, "a", "z", -32)


def to_lower(c: int | str) -> int | str:
    """Lower-case form of an ASCII upper-case letter; anything else unchanged."""
    return _convert(c, "A", "Z", 32)


def atoi(text: str) -> int:
    """Read a leading decimal integer, after optional whitespace and one sign.

    Reading stops at the first non-digit. A value above the 32-bit maximum
    gives -1 and one below the 32-bit minimum gives 0.
    """
    index = 0
    while index < len(text) and text[index] in _WHITESPACE:
        index += 1
    sign = 1
    if index < len(text) and text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1
    result = 0
    for char in text[index:]:
        if char not in _DIGITS:
            break
        result = result * 10 + int(char)
        if result * sign > INT_MAX:
            return -1
        if result * sign < INT_MIN:
            return 0
    return result * sign


def itoa(number: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= number <= INT_MAX:
        raise ValueError(f"{number} does not fit in a 32-bit signed integer")
    return str(number)