"""Recording of stack operations and their conversion to printed commands."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

BLANK = "  "


def _is_fixed(entry: str) -> bool:
    """Entries that are never merged: pushes and already merged operations."""
    return entry[0] == "p" or entry[1] in ("s", "r")


@dataclass
class OperationLog:
    """Sequence of two-character operation codes.

    Codes are ``sa``, ``sb``, ``ss``, ``pa``, ``pb``, ``ra``, ``rb``, ``rr``;
    a leading ``R`` marks a reverse rotation (``Ra`` prints as ``rra``), and
    ``"  "`` is an empty slot that prints nothing.
    """

    entries: list[str] = field(default_factory=list)

    def add(self, operation: str) -> None:
        """Append one operation code."""
        if len(operation) != 2:
            raise ValueError(f"operation codes are two characters long: {operation!r}")
        self.entries.append(operation)

    def extend(self, other: OperationLog | Iterable[str]) -> None:
        """Append every code of another log, in order."""
        codes = other.entries if isinstance(other, OperationLog) else other
        for code in list(codes):
            self.add(code)

    def improve(self) -> None:
        """Merge matching operations on both stacks into combined ones.

        A swap or rotation of one stack is merged with the next operation of
        the same kind on the other stack, looking past operations on the same
        stack; the merged partner is blanked out.
        """
        entries = self.entries
        index = 0
        while index < len(entries):
            if _is_fixed(entries[index]):
                index += 2
                continue
            other = index + 1
            while other < len(entries):
                candidate = entries[other]
                current = entries[index]
                if _is_fixed(candidate):
                    break
                if candidate[1] == current[1]:
                    other += 1
                    continue
                if candidate[0] != current[0]:
                    break
                entries[index] = current[0] * 2
                entries[other] = BLANK
                break
            index += 1

    def lines(self) -> list[str]:
        """The commands as they are printed, one per entry, blanks skipped."""
        result = []
        for entry in self.entries:
            if entry == BLANK:
                continue
            first = "rr" if entry[0] == "R" else entry[0]
            second = "r" if entry[1] == "R" else entry[1]
            result.append(first + second)
        return result

    def count(self) -> int:
        """Number of operations that would be printed."""
        return sum(1 for entry in self.entries if entry != BLANK)