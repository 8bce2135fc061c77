"""Sorting routines for short lists of numbers."""

from __future__ import annotations

from collections.abc import Sequence

from pushswap.log import BLANK, OperationLog
from pushswap.stacks import Towers


def two_numbers(values: Sequence[int]) -> OperationLog:
    """Operations that sort a list of two numbers."""
    log = OperationLog()
    log.add("sa" if values[0] > values[1] else BLANK)
    return log


def three_numbers(values: Sequence[int]) -> OperationLog:
    """Operations that sort the first three numbers of stack a."""
    first, second, third = values[0], values[1], values[2]
    log = OperationLog()
    if first < second < third:
        log.add(BLANK)
    elif first < second:
        log.add("Ra")
        if first < third:
            log.add("sa")
    elif second > third:
        log.extend(["sa", "Ra"])
    elif first < third and second < third:
        log.add("sa")
    elif first > third and second < third:
        log.add("ra")
    return log


def _bring_partner_up(towers: Towers) -> tuple[int, ...]:
    """Rotate a so that the partner of the value pushed to b is on top.

    Returns the pair of values (both smallest or both largest) that end up in b.
    """
    corr = towers.corr
    pushed = towers.b[0]
    pair: tuple[int, ...] = ()
    if pushed in (corr[0], corr[1]):
        pair = (corr[0], corr[1])
    if pushed in (corr[3], corr[4]):
        pair = (corr[3], corr[4])
    if towers.a[3] in pair:
        towers.record("Ra")
    elif towers.a[2] in pair:
        towers.record("ra")
    if towers.a[1] in pair:
        towers.record("ra")
    return pair


def five_numbers(towers: Towers) -> Towers:
    """Sort five numbers by parking an extreme pair on b."""
    if towers.size != 5 or len(towers.a) != 5:
        raise ValueError("five_numbers needs exactly five numbers on stack a")
    corr = towers.corr
    if towers.a[0] == corr[2]:
        towers.record("ra")
    towers.record("pb")
    pair = _bring_partner_up(towers)
    towers.record("pb")
    for operation in three_numbers(towers.a).entries:
        towers.record(operation)
    if towers.b[0] < towers.b[1]:
        towers.record("sb")
    towers.record("pa")
    towers.record("pa")
    if pair and pair[0] == corr[3]:
        towers.record("ra")
        towers.record("ra")
    return towers


def bubble_sort(towers: Towers) -> Towers:
    """Sort stack a with repeated swap-and-rotate passes."""
    size = towers.size
    for _ in range(size):
        for _ in range(size - 1):
            if towers.a[0] > towers.a[1]:
                towers.record("sa")
            towers.record("ra")
        towers.record("ra")
    return towers