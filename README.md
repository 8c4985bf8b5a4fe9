# pushswap

Sorts a list of distinct integers using only the operations of the
push_swap puzzle. It prints the operations it used, one per line.

The puzzle has two stacks, `a` and `b`. The numbers start on `a` with
the first argument on top. `b` starts empty. The allowed operations are:

| op    | effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up, so the top goes to the bottom  |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb` together                        |
| `rra` | rotate `a` down, so the bottom goes to the top|
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb` together                      |

The goal is `a` in ascending order from top to bottom, with `b` empty.

## Installation

```
pip install .
```

## Usage

```
push_swap 3 1 2
```

prints

```
ra
```

`python -m pushswap.cli 3 1 2` does the same.

Every argument must be a decimal integer in the 32-bit signed range. A
leading `-` is allowed. A `+` sign, spaces and empty arguments are not
allowed. If an argument is invalid or a value appears twice, `Error` is
written to standard error and the exit status is 1.

Before sorting, the numbers are replaced by their ranks, with 1 for the
smallest. A single number needs no operations. Lists of two to five
numbers use fixed sequences. Longer lists are sorted by moving runs back
and forth between the stacks. For four or more numbers the result then
goes through a clean-up: adjacent `pa`/`pb` pairs are removed, and
adjacent `rra`+`rrb` and `ra`+`rb` pairs are merged into `rrr` and `rr`.

## Library use

```python
from pushswap.cli import solve
from pushswap.ops import format_ops

ops = solve(["3", "1", "2"])
print(format_ops(ops), end="")
```

`solve` raises `pushswap.cli.InputError` (a `ValueError`) for invalid or
duplicate arguments.

- `pushswap.numstr.less_than` compares integers written as strings.
- `pushswap.validation` checks the arguments.
- `pushswap.ops` defines the `Op` enumeration, the clean-up passes
  (`remove_nops`, `merge_reverse_rotations`, `merge_rotations`,
  `optimize_ops`) and the output helpers `format_ops` and `write_ops`.
- `pushswap.small` (`sort_two`, `sort_three`, `sort_four`),
  `pushswap.five` (`sort_five`) and `pushswap.merge` (`merge_sort`,
  `is_sorted`) take a list of ranks, top first, and return the
  operations that sort it.
- `pushswap.cli.sort_stack` chooses the right strategy for the list's length.

## Limitations

The package has no command that reads a list of operations and checks
whether they sort the stack. It only produces operations. It never reads
them back.

## Tests

```
pip install .[test]
pytest
```