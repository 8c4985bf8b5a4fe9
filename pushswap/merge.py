"""General sort for stacks of any size, by repeatedly moving runs between stacks."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from .ops import Op, optimize_ops


def is_sorted(stack: Sequence[int]) -> bool:
    """Return whether the values are strictly ascending from the top."""
    return all(low < high for low, high in zip(stack, stack[1:]))


@dataclass(frozen=True)
class _Moves:
    """Operations that move one value from a source stack to the other stack."""

    head: tuple[Op, ...]
    end: tuple[Op, ...]
    second: tuple[Op, ...]


_FROM_A = _Moves(head=(Op.PB,), end=(Op.RRA, Op.PB), second=(Op.SA, Op.PB))
_FROM_B = _Moves(head=(Op.PA,), end=(Op.RRB, Op.PA), second=(Op.SB, Op.PA))

_HEAD, _END, _SECOND = 0, 1, 2


def _transfer(source: list[int], target: list[int], choice: int, moves: _Moves) -> tuple[Op, ...]:
    if choice == _HEAD:
        target.insert(0, source.pop(0))
        return moves.head
    if choice == _END:
        target.insert(0, source.pop())
        return moves.end
    target.insert(0, source.pop(1))
    return moves.second


def _pick(source: list[int], top: int, direction: int) -> Optional[int]:
    """Choose the candidate nearest to ``top`` in ``direction``, or None to turn around."""
    gaps = [(top - source[0]) * direction, (top - source[-1]) * direction]
    if len(source) > 1:
        gaps.append((top - source[1]) * direction)
    best = 0
    for index, gap in enumerate(gaps):
        if 0 < gap < gaps[best] or gaps[best] < 0 < gap:
            best = index
    return None if gaps[best] < 0 else best


def _move_all(source: list[int], target: list[int], moves: _Moves) -> list[Op]:
    first = _END if source[0] < source[-1] else _HEAD
    ops = list(_transfer(source, target, first, moves))
    direction = 1
    while source:
        choice = _pick(source, target[0], direction)
        if choice is None:
            direction = -direction
        else:
            ops.extend(_transfer(source, target, choice, moves))
    return ops


def merge_sort(stack: Sequence[int]) -> list[Op]:
    """Return the operations that sort ``stack`` (top first) in ascending order.

    Values must be distinct; otherwise the stack could never become strictly
    ascending.
    """
    if len(set(stack)) != len(stack):
        raise ValueError("merge_sort needs distinct values")
    a = list(stack)
    b: list[int] = []
    ops: list[Op] = []
    while not is_sorted(a):
        ops.extend(_move_all(a, b, _FROM_A))
        ops.extend(_move_all(b, a, _FROM_B))
    return optimize_ops(ops)