"""Command-line entry point: print operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.chunks import chunk_sort
from pushswap.order import is_sorted
from pushswap.parsing import InputError, parse_arguments
from pushswap.small import bubble_sort, five_numbers, three_numbers, two_numbers
from pushswap.stacks import Towers


def chunk_divisor(size: int) -> int:
    """Chunk size used for sorting ``size`` numbers."""
    if size > 2000:
        return 500
    if size > 1000:
        return 250
    if size > 550:
        return 150
    if size > 300:
        return 90
    if size > 100:
        return 70
    if size >= 50:
        return 40
    if size >= 30:
        return 20
    return 10


def solve(values: Iterable[int]) -> list[str]:
    """Commands, as printed, that sort ``values`` on stack a."""
    towers = Towers(list(values))
    size = towers.size
    if is_sorted(towers.a, size):
        return []
    if size == 2:
        towers.log = two_numbers(towers.a)
    elif size == 3:
        towers.log = three_numbers(towers.a)
    elif size == 5:
        five_numbers(towers)
    elif size < 20:
        bubble_sort(towers)
    else:
        towers.div = chunk_divisor(size)
        chunk_sort(towers)
    towers.log.improve()
    return towers.log.lines()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments and print one command per line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stdout.write("Error \n")
        return 0
    for line in solve(values):
        sys.stdout.write(line + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())