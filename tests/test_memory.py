import pytest

from pushswap.memory import (
    bzero,
    calloc,
    memccpy,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buffer = bytearray(b"abcdefgh")
    result = memset(buffer, ord("z"), 5)
    assert result is buffer
    assert buffer[:5] == b"z" * 5
    assert buffer[5:] == b"fgh"


def test_memset_truncates_value_to_byte():
    buffer = bytearray(4)
    memset(buffer, 0x141, 4)
    assert set(buffer) == {0x41}


def test_memset_length_too_long():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, 3)


def test_bzero_clears_prefix():
    buffer = bytearray(b"\xff" * 6)
    bzero(buffer, 4)
    assert buffer[:4] == bytes(4)
    assert buffer[4:] == b"\xff\xff"


@pytest.mark.parametrize("count,size", [(0, 8), (3, 4), (10, 1)])
def test_calloc_is_zeroed(count, size):
    buffer = calloc(count, size)
    assert len(buffer) == count * size
    assert not any(buffer)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memcpy_copies_and_returns_dest():
    dest = bytearray(8)
    src = b"payload!"
    assert memcpy(dest, src, 4) is dest
    assert dest[:4] == src[:4]
    assert dest[4:] == bytes(4)


def test_memcpy_both_none():
    assert memcpy(None, None, 3) is None


def test_memcpy_one_none():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), None, 1)


def test_memccpy_stops_after_stop_byte():
    src = b"hello world"
    dest = bytearray(len(src))
    position = memccpy(dest, src, ord(" "), len(src))
    assert position == src.index(b" ") + 1
    assert dest[:position] == src[:position]
    assert dest[position:] == bytes(len(src) - position)


def test_memccpy_without_stop_copies_everything():
    src = b"abcdef"
    dest = bytearray(len(src))
    assert memccpy(dest, src, ord("x"), len(src)) is None
    assert dest == src


def test_memmove_overlapping_forward():
    buffer = bytearray(b"abcdef")
    view = memoryview(buffer)
    target = view[2:]
    result = memmove(target, view[:4], 4)
    assert result is target
    assert bytes(result) == b"abcd"
    assert buffer == b"ababcd"


def test_memmove_overlapping_backward():
    original = b"0123456789"
    buffer = bytearray(original)
    view = memoryview(buffer)
    target = view[:7]
    result = memmove(target, view[3:], 7)
    assert result is target
    assert bytes(result) == original[3:]
    assert buffer[:7] == original[3:]
    assert buffer[7:] == original[7:]


def test_memchr_finds_first():
    data = b"banana"
    assert memchr(data, ord("n"), len(data)) == data.index(b"n")


def test_memchr_respects_length():
    data = b"banana"
    assert memchr(data, ord("n"), data.index(b"n")) is None


def test_memcmp_equal():
    assert memcmp(b"same", b"same", 4) == 0
    assert memcmp(b"abcX", b"abcY", 3) == 0


@pytest.mark.parametrize("first,second", [(b"a", b"b"), (b"zz", b"za"), (b"\x00", b"\xff")])
def test_memcmp_sign_matches_ordering(first, second):
    result = memcmp(first, second, len(first))
    assert (result < 0) == (first < second)
    assert result == first[-1] - second[-1]
    assert memcmp(second, first, len(first)) == -result


def test_memcmp_length_too_long():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)