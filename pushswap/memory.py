"""Byte-buffer operations over bytearrays, bytes and memoryviews."""

from __future__ import annotations

from collections.abc import Sequence

Buffer = bytearray | bytes | memoryview


def _check(length: int, *buffers: Sequence[int]) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    for buffer in buffers:
        if length > len(buffer):
            raise ValueError(f"length {length} exceeds buffer of {len(buffer)} bytes")


def memset(buffer: bytearray | memoryview, value: int, length: int) -> bytearray | memoryview:
    """Set the first ``length`` bytes to ``value`` (taken modulo 256)."""
    _check(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray | memoryview, length: int) -> None:
    """Set the first ``length`` bytes to zero."""
    memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(
    dest: bytearray | memoryview | None, src: Buffer | None, length: int
) -> bytearray | memoryview | None:
    """Copy ``length`` bytes from ``src`` to the start of ``dest``."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise ValueError("both buffers are needed")
    _check(length, dest, src)
    dest[:length] = src[:length]
    return dest


def memccpy(
    dest: bytearray | memoryview, src: Buffer, stop: int, length: int
) -> int | None:
    """Copy up to ``length`` bytes, stopping after the first byte equal to ``stop``.

    Returns the index in ``dest`` just past the copied stop byte, or None
    when it was not found within ``length`` bytes.
    """
    _check(length, dest, src)
    found = bytes(src[:length]).find(stop & 0xFF)
    count = length if found < 0 else found + 1
    dest[:count] = src[:count]
    return None if found < 0 else count


def memmove(
    dest: bytearray | memoryview | None, src: Buffer | None, length: int
) -> bytearray | memoryview | None:
    """Copy ``length`` bytes, correct even when the two regions overlap."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise ValueError("both buffers are needed")
    _check(length, dest, src)
    dest[:length] = bytes(src[:length])
    return dest


def memchr(data: Buffer, value: int, length: int) -> int | None:
    """Index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    _check(length, data)
    found = bytes(data[:length]).find(value & 0xFF)
    return None if found < 0 else found


def memcmp(first: Buffer, second: Buffer, length: int) -> int:
    """Difference of the first differing bytes within ``length``, or 0."""
    _check(length, first, second)
    for left, right in zip(first[:length], second[:length]):
        if left != right:
            return left - right
    return 0