"""Operation sequence that sorts a stack holding the ranks 1 to 5."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .ops import Op, optimize_ops
from .small import sort_three_base

_SIZE = 5
_MARKER = 0b100000

# Keyed by the mask of positions holding ranks 1 and 2 (position 0 is the
# highest of the five low bits). Each sequence moves both ranks to stack b.
_STASH_OPS: dict[int, tuple[Op, ...]] = {
    0b100011: (Op.RRA, Op.PB, Op.RRA, Op.PB),
    0b100101: (Op.RRA, Op.PB, Op.RRA, Op.RRA, Op.PB),
    0b101001: (Op.RRA, Op.PB, Op.SA, Op.PB),
    0b110001: (Op.PB, Op.RRA, Op.PB),
    0b100110: (Op.RRA, Op.RRA, Op.PB, Op.RRA, Op.PB),
    0b101010: (Op.SA, Op.PB, Op.RRA, Op.RRA, Op.PB),
    0b110010: (Op.PB, Op.RRA, Op.RRA, Op.PB),
    0b101100: (Op.RA, Op.PB, Op.PB),
    0b110100: (Op.PB, Op.RA, Op.PB),
    0b111000: (Op.PB, Op.PB),
}


def _swap(a: list[int], b: list[int]) -> None:
    a[0], a[1] = a[1], a[0]


def _rotate(a: list[int], b: list[int]) -> None:
    a.append(a.pop(0))


def _reverse_rotate(a: list[int], b: list[int]) -> None:
    a.insert(0, a.pop())


def _push_b(a: list[int], b: list[int]) -> None:
    b.insert(0, a.pop(0))


_APPLY: dict[Op, Callable[[list[int], list[int]], None]] = {
    Op.SA: _swap,
    Op.RA: _rotate,
    Op.RRA: _reverse_rotate,
    Op.PB: _push_b,
}


def smallest_pair_mask(stack: Sequence[int]) -> int:
    """Return a bit mask of the positions holding ranks 1 and 2.

    Position 0 (the top) is bit 4, position 4 is bit 0, and bit 5 is always set.
    """
    if len(stack) != _SIZE:
        raise ValueError("smallest_pair_mask needs exactly five values")
    mask = 0
    for value in stack:
        mask = mask * 2 + (value in (1, 2))
    return mask | _MARKER


def sort_five(stack: Sequence[int]) -> list[Op]:
    """Return the operations that sort a stack holding the ranks 1 to 5."""
    if sorted(stack) != list(range(1, _SIZE + 1)):
        raise ValueError(f"stack {list(stack)!r} is not a permutation of 1 to 5")
    a = list(stack)
    b: list[int] = []
    ops = list(_STASH_OPS[smallest_pair_mask(a)])
    for op in ops:
        _APPLY[op](a, b)
    ops.extend(sort_three_base(a, 3))
    if b[0] < b[1]:
        ops.append(Op.SB)
    ops.extend((Op.PA, Op.PA))
    return optimize_ops(ops)