"""Sorting large inputs by moving value ranges through stack b."""

from __future__ import annotations

from pushswap.stacks import Towers


def _move_to_b(towers: Towers, low: int, high: int) -> None:
    """Push every value of a within [low, high] onto b, rotating past the rest."""
    while any(low <= value <= high for value in towers.a):
        if low <= towers.a[0] <= high:
            towers.record("pb")
        else:
            towers.record("ra")


def _bring_to_top(towers: Towers, targets: set[int]) -> None:
    """Rotate b the short way until one of ``targets`` is on top."""
    stack = towers.b
    last = len(stack) - 1
    for depth in range(len(stack)):
        if stack[depth] in targets:
            operation, times = "rb", depth
            break
        if stack[last - depth] in targets:
            operation, times = "Rb", depth + 1
            break
    else:
        raise ValueError("stack b holds none of the values searched for")
    for _ in range(times):
        towers.record(operation)


def return_to_a(towers: Towers, low: int, high: int) -> Towers:
    """Move all of b back onto a in order.

    ``low`` and ``high`` index ``towers.corr``; b must hold exactly the values
    between them. The largest values are stacked on top of a, the smallest
    rotated to its bottom.
    """
    corr = towers.corr
    while towers.b:
        _bring_to_top(towers, {corr[low], corr[high]})
        towers.record("pa")
        if towers.a[0] == corr[high]:
            high -= 1
        else:
            towers.record("ra")
            low += 1
    return towers


def chunk_sort(towers: Towers) -> Towers:
    """Sort a by sending it through b in chunks of about ``towers.div`` values."""
    if towers.div <= 0:
        raise ValueError("the chunk divisor must be positive")
    size = towers.size
    corr = towers.corr
    groups = size // towers.div + (size % towers.div != 0)
    step = size // groups
    for round_ in range(groups, 0, -1):
        high = size - 1 if round_ == groups else step * round_
        low = step * (round_ - 1)
        _move_to_b(towers, corr[low], corr[high])
        return_to_a(towers, low, high)
    while towers.a[0] != corr[0]:
        towers.record("Ra")
    return towers