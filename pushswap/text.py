"""String helpers: bounded copies, searching, comparison, slicing and splitting."""

from __future__ import annotations

from collections.abc import Callable

_TERMINATOR = ("", "\0")


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``. The length lets
    the caller see whether the copy was truncated.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` so that the result stays under ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have had. When ``dst`` already fills ``size``, it is returned unchanged
    together with ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size < len(dst) + 1:
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def find_char(text: str, c: str) -> int | None:
    """Index of the first ``c`` in ``text``, or None.

    Searching for the terminator (``""`` or ``"\\0"``) gives ``len(text)``.
    """
    if c in _TERMINATOR:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def find_last_char(text: str, c: str) -> int | None:
    """Index of the last ``c`` in ``text``, or None.

    Searching for the terminator (``""`` or ``"\\0"``) gives ``len(text)``.
    """
    if c in _TERMINATOR:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def find_substring(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0. A match that runs past ``length``
    ends the search.
    """
    if not needle:
        return 0
    for start, char in enumerate(haystack):
        if start >= length:
            break
        if char != needle[0]:
            continue
        matched = 0
        while (
            matched < len(needle)
            and start + matched < len(haystack)
            and haystack[start + matched] == needle[matched]
        ):
            matched += 1
        if start + matched > length:
            return None
        if matched == len(needle):
            return start
    return None


def compare(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code-point difference at the first mismatch, 0 when equal,
    and -1 or 1 when one string ends before the other within ``n``.
    """
    if n <= 0:
        return 0
    count = 0
    for left, right in zip(first, second):
        if count >= n:
            return 0
        if left != right:
            return ord(left) - ord(right)
        count += 1
    if count >= n:
        return 0
    first_ended = count >= len(first)
    second_ended = count >= len(second)
    if first_ended and not second_ended:
        return -1
    if second_ended and not first_ended:
        return 1
    return 0


def substring(text: str | None, start: int, length: int) -> str | None:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    if text is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start : start + length]


def join(first: str | None, second: str | None) -> str | None:
    """Concatenate two strings; a missing one is treated as absent."""
    if first is None:
        return second
    if second is None:
        return first
    return first + second


def trim(text: str | None, charset: str) -> str | None:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if text is None:
        return None
    return text.strip(charset)


def split(text: str | None, separator: str) -> list[str] | None:
    """Split ``text`` on ``separator``, dropping empty pieces.

    With the terminator as separator (``""`` or ``"\\0"``) the whole text is
    one piece.
    """
    if text is None:
        return None
    if not text:
        return []
    if separator in _TERMINATOR:
        return [text]
    if len(separator) != 1:
        raise ValueError(f"separator must be a single character: {separator!r}")
    return [piece for piece in text.split(separator) if piece]


def map_indexed(text: str | None, func: Callable[[int, str], str]) -> str | None:
    """Apply ``func(index, char)`` to every character and join the results."""
    if text is None:
        return None
    return "".join(func(index, char) for index, char in enumerate(text))