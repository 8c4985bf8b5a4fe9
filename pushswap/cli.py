"""Command-line entry point: rank the arguments, sort them, print the operations."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import Optional

from .five import sort_five
from .merge import merge_sort
from .numstr import less_than
from .ops import Op, write_ops
from .small import sort_four, sort_three, sort_two
from .validation import is_valid_all

_SMALL_SORTS: dict[int, Callable[[Sequence[int]], list[Op]]] = {
    2: sort_two,
    3: sort_three,
    4: sort_four,
    5: sort_five,
}


class InputError(ValueError):
    """The arguments are not distinct integers within the 32-bit signed range."""


def rank_arguments(args: Sequence[str]) -> list[int]:
    """Replace each argument by its rank, 1 being the smallest.

    The rank is the number of arguments minus the number of arguments greater
    than it, so equal arguments share a rank.
    """
    total = len(args)
    return [total - sum(less_than(arg, other) for other in args) for arg in args]


def has_duplicates(stack: Sequence[int]) -> bool:
    """Return whether any value appears more than once."""
    return len(set(stack)) != len(stack)


def sort_stack(stack: Sequence[int]) -> list[Op]:
    """Return the operations that sort a stack of distinct ranks (top first)."""
    if len(stack) == 1:
        return []
    small_sort = _SMALL_SORTS.get(len(stack))
    if small_sort is not None:
        return small_sort(stack)
    return merge_sort(stack)


def solve(args: Sequence[str]) -> list[Op]:
    """Validate the arguments and return the operations that sort them.

    Raises InputError when an argument is not an in-range integer or when two
    arguments are equal.
    """
    if not is_valid_all(args):
        raise InputError("arguments must be integers in the 32-bit signed range")
    stack = rank_arguments(args)
    if has_duplicates(stack):
        raise InputError("arguments must be distinct")
    return sort_stack(stack)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program on ``argv`` (the arguments after the program name)."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        ops = solve(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    write_ops(ops, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())