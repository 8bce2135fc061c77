import string

import pytest

from pushswap.chars import (
    INT_MAX,
    INT_MIN,
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)

ALL_CODES = range(0, 256)


def test_is_alpha_matches_ascii_letters():
    letters = {ord(c) for c in string.ascii_letters}
    assert {code for code in ALL_CODES if is_alpha(code)} == letters


def test_is_digit_matches_ascii_digits():
    digits = {ord(c) for c in string.digits}
    assert {code for code in ALL_CODES if is_digit(code)} == digits


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in ALL_CODES:
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_is_print_bounds():
    assert is_print(" ")
    assert is_print("~")
    assert not is_print(31)
    assert not is_print(127)


def test_predicates_accept_strings():
    assert is_alpha("q")
    assert is_digit("7")
    assert not is_digit("x")


def test_single_character_required():
    with pytest.raises(ValueError):
        is_alpha("ab")


@pytest.mark.parametrize("char", list(string.ascii_lowercase))
def test_case_round_trip(char):
    upper = to_upper(char)
    assert upper == char.upper()
    assert to_lower(upper) == char


def test_case_conversion_leaves_others_alone():
    for char in string.digits + string.punctuation + " ":
        assert to_upper(char) == char
        assert to_lower(char) == char


def test_case_conversion_keeps_integer_type():
    assert to_upper(ord("m")) == ord("M")
    assert to_lower(ord("M")) == ord("m")


@pytest.mark.parametrize("value", [0, 42, -17, 1000, INT_MAX, INT_MIN])
def test_itoa_atoi_round_trip(value):
    assert atoi(itoa(value)) == value


def test_itoa_minimum():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(ValueError):
        itoa(INT_MAX + 1)


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n-17abc") == -17
    assert atoi("+42 7") == 42


def test_atoi_without_digits():
    assert atoi("abc") == 0
    assert atoi("--5") == 0


def test_atoi_overflow():
    assert atoi("2147483648") == -1
    assert atoi("-2147483649") == 0