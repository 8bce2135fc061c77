"""Ordering helpers for the input numbers."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import pairwise

EMPTY = 99_999_999_999


def sorted_values(values: Iterable[int]) -> list[int]:
    """Distinct values in ascending order, padded with EMPTY to the input length."""
    items = list(values)
    ordered = sorted({value for value in items if -EMPTY < value < EMPTY})
    return ordered + [EMPTY] * (len(items) - len(ordered))


def is_sorted(values: Iterable[int], size: int | None = None) -> bool:
    """Whether the first ``size`` values are present and in ascending order."""
    items = list(values)
    if size is None:
        size = len(items)
    head = items[:size]
    if len(head) < size or (head and head[-1] == EMPTY):
        return False
    return all(left <= right for left, right in pairwise(head))