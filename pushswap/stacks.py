"""The two stacks and the operations that move numbers between them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from pushswap.log import BLANK, OperationLog
from pushswap.order import sorted_values


def swap(stack: list[int]) -> None:
    """Exchange the two top elements."""
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def push(source: list[int], target: list[int], capacity: int) -> bool:
    """Move the top of ``source`` onto ``target`` if there is one and room for it."""
    if source and len(target) < capacity:
        target.insert(0, source.pop(0))
        return True
    return False


def rotate(stack: list[int]) -> None:
    """Move the top element to the bottom."""
    if len(stack) >= 2:
        stack.append(stack.pop(0))


def reverse_rotate(stack: list[int]) -> None:
    """Move the bottom element to the top."""
    if len(stack) >= 2:
        stack.insert(0, stack.pop())


@dataclass
class Towers:
    """Stacks ``a`` and ``b`` (top at index 0), the sorted target and the log."""

    a: list[int]
    b: list[int] = field(default_factory=list)
    corr: list[int] | None = None
    size: int | None = None
    log: OperationLog = field(default_factory=OperationLog)
    div: int = 0

    def __post_init__(self) -> None:
        self.a = list(self.a)
        self.b = list(self.b)
        if self.size is None:
            self.size = len(self.a) + len(self.b)
        if self.corr is None:
            self.corr = sorted_values(self.a + self.b)

    def apply(self, operation: str) -> None:
        """Carry out one operation code on the stacks."""
        try:
            action = _ACTIONS[operation]
        except KeyError:
            raise ValueError(f"unknown operation {operation!r}") from None
        action(self)

    def record(self, operation: str) -> None:
        """Carry out an operation and append it to the log."""
        self.apply(operation)
        self.log.add(operation)


def _both(func: Callable[[list[int]], None]) -> Callable[[Towers], None]:
    def action(towers: Towers) -> None:
        func(towers.a)
        func(towers.b)

    return action


_ACTIONS: dict[str, Callable[[Towers], None]] = {
    BLANK: lambda towers: None,
    "sa": lambda towers: swap(towers.a),
    "sb": lambda towers: swap(towers.b),
    "ss": _both(swap),
    "pa": lambda towers: push(towers.b, towers.a, towers.size),
    "pb": lambda towers: push(towers.a, towers.b, towers.size),
    "ra": lambda towers: rotate(towers.a),
    "rb": lambda towers: rotate(towers.b),
    "rr": _both(rotate),
    "Ra": lambda towers: reverse_rotate(towers.a),
    "Rb": lambda towers: reverse_rotate(towers.b),
    "RR": _both(reverse_rotate),
}