# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of moves. It prints the moves, one per line, so that applying
them to stack `a` (whose top is the first number given) leaves it sorted
in ascending order.

## Installation

```
pip install .
```

## Usage

Give the numbers as separate arguments, as one quoted string, or as a
mix of both:

```
push-swap 3 1 2
push-swap "5 4 3 2 1"
push-swap 8 "7 6" 5
```

Numbers may carry a `+` or `-` sign. Already-sorted input produces no
output. Invalid input (anything that is not a number, values outside the
32-bit signed range, duplicates, or no numbers at all) prints `Error`
and the command still exits with status 0.

## Moves

| Move                | Effect                                       |
|---------------------|----------------------------------------------|
| `sa`, `sb`, `ss`    | swap the top two elements of a, b, or both   |
| `pa`, `pb`          | push the top of one stack onto the other     |
| `ra`, `rb`, `rr`    | rotate up: the top goes to the bottom        |
| `rra`, `rrb`, `rrr` | rotate down: the bottom goes to the top      |

Two numbers and three numbers use fixed move sequences, five numbers
park the two smallest or two largest values on `b`, other inputs of
fewer than 20 numbers use a bubble sort on stack `a`, and larger inputs
are sent through `b` in chunks whose size grows with the input. Before
printing, a swap or rotation of one stack is merged with the next one of
the same kind on the other stack (into `ss`, `rr` or `rrr`) when only
moves on the same stack lie between them.

## Library use

```python
from pushswap.cli import solve

print(solve([3, 1, 2]))   # ['rra', 'sa'] style list of moves
```

The main pieces:

- `pushswap.cli`: `solve(values)` returns the moves as strings,
  `chunk_divisor(size)` gives the chunk size used for a given input size,
  and `main(argv=None)` is the `push-swap` command.
- `pushswap.parsing`: `parse_arguments(argv)` turns arguments into
  integers and raises `InputError` on bad input; `join_arguments`,
  `count_numbers`, `parse_numbers` and `check_duplicates` are its steps.
- `pushswap.stacks`: the `Towers` dataclass holding both stacks, the
  sorted target values and the move log, with `apply(operation)` and
  `record(operation)`; plus `swap`, `push`, `rotate` and
  `reverse_rotate` on plain lists.
- `pushswap.log`: `OperationLog` with `add`, `extend`, `improve`,
  `lines` and `count`.
- `pushswap.order`: `sorted_values` and `is_sorted`.
- `pushswap.small`: `two_numbers`, `three_numbers`, `five_numbers` and
  `bubble_sort`.
- `pushswap.chunks`: `chunk_sort` and `return_to_a`.

The package also carries small general helpers: `pushswap.chars`
(character tests, case conversion, `atoi`, `itoa`), `pushswap.memory`
(byte-buffer operations such as `memset`, `memcpy`, `memmove`,
`memchr`, `memcmp`), `pushswap.text` (bounded copy and concatenation,
searching, comparison, `substring`, `join`, `trim`, `split`,
`map_indexed`), `pushswap.linked` (a singly linked `Node` list with
`add_front`, `add_back`, `list_size`, `list_last`, `delete_one`, `clear`,
`iterate`) and `pushswap.output` (`put_char`, `put_str`, `put_endl`,
`put_number` writing to a text stream, standard output by default).

## Running the tests

```
pip install .[test]
pytest
```