# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small set of allowed operations. The sequence of operations is printed,
one per line, so it can be replayed or checked by another tool.

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up (top goes to the bottom)              |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down (bottom comes to the top)           |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

The same entry point can also be started with `python -m pushswap.cli`.

Arguments may be given separately or several to a quoted argument,
separated by spaces. The first value given is the top of stack `a`.

Input is rejected with `Error` on standard error and exit status 1 when:

- an argument is empty or holds only whitespace,
- a value is not an integer (an optional `+` or `-` followed by digits),
- a value appears more than once (`0`, `+0`, `-0` and `00` all count as zero),
- a value lies outside the 32-bit signed range.

With no arguments, or with input that is already sorted, nothing is
printed and the exit status is 0.

## Library use

```python
from pushswap.sorter import sort_numbers

moves = sort_numbers([3, 2, 5, 1, 4])
print(moves)  # list of operation names
```

- `pushswap.parsing.parse_arguments` takes command-line style strings and
  returns the integers in order, raising `pushswap.parsing.InputError` (a
  `ValueError`) on bad input.
- `pushswap.stack.Machine` holds the two stacks as `a` and `b`. Each
  operation method (`sa`, `pb`, `rrr`, ...) changes the stacks, appends its
  name to `operations`, and, if an output stream was passed as `out`, writes
  the name and a newline to it.
- `pushswap.stack.Stack` is a stack whose top is its first element; `values()`
  lists the numbers from top to bottom.
- `pushswap.sorter.push_swap` sorts stack `a` of a `Machine` in place.

## Algorithm

Values are pushed from `a` to `b` until three remain, each time choosing
the value whose placement next to its target in `b` costs the fewest
rotations. The three left in `a` are sorted directly, the rest are brought
back to their place above the next bigger value in `a`, and `a` is finally
rotated so its smallest value is on top.

## What it does not do

There is no command that reads a list of operations and checks whether
they sort a given input; only the sorter is provided.

## Tests

```
pip install ".[test]"
pytest
```