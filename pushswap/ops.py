"""Stack operations, their peephole optimisation and their textual output."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from enum import IntEnum
from typing import Optional, TextIO


class Op(IntEnum):
    """An operation on the two stacks."""

    SA = 0
    SB = 1
    SS = 2
    PA = 3
    PB = 4
    RA = 5
    RB = 6
    RR = 7
    RRA = 8
    RRB = 9
    RRR = 10

    @property
    def mnemonic(self) -> str:
        return self.name.lower()


_NOP_PAIRS = frozenset({(Op.PA, Op.PB), (Op.PB, Op.PA)})
_REVERSE_PAIRS = frozenset({(Op.RRA, Op.RRB), (Op.RRB, Op.RRA)})
_ROTATE_PAIRS = frozenset({(Op.RA, Op.RB), (Op.RB, Op.RA)})


def _find_pair(ops: Iterable[int], pairs: frozenset) -> Optional[int]:
    sequence = list(ops)
    for index, pair in enumerate(zip(sequence, sequence[1:])):
        if pair in pairs:
            return index
    return None


def find_nop(ops: Iterable[int]) -> Optional[int]:
    """Index of the first ``pa pb`` or ``pb pa`` pair, or None."""
    return _find_pair(ops, _NOP_PAIRS)


def find_reverse_pair(ops: Iterable[int]) -> Optional[int]:
    """Index of the first ``rra rrb`` or ``rrb rra`` pair, or None."""
    return _find_pair(ops, _REVERSE_PAIRS)


def find_rotate_pair(ops: Iterable[int]) -> Optional[int]:
    """Index of the first ``ra rb`` or ``rb ra`` pair, or None."""
    return _find_pair(ops, _ROTATE_PAIRS)


def remove_nops(ops: Iterable[Op]) -> list[Op]:
    """Drop adjacent pushes that cancel out, repeatedly, until none remain."""
    kept: list[Op] = []
    for op in ops:
        if kept and (kept[-1], op) in _NOP_PAIRS:
            kept.pop()
        else:
            kept.append(op)
    return kept


def _merge_pairs(ops: Iterable[Op], pairs: frozenset, merged: Op) -> Iterator[Op]:
    pending: Optional[Op] = None
    for op in ops:
        if pending is None:
            pending = op
        elif (pending, op) in pairs:
            yield merged
            pending = None
        else:
            yield pending
            pending = op
    if pending is not None:
        yield pending


def merge_reverse_rotations(ops: Iterable[Op]) -> list[Op]:
    """Replace each adjacent ``rra``/``rrb`` pair with ``rrr``."""
    return list(_merge_pairs(ops, _REVERSE_PAIRS, Op.RRR))


def merge_rotations(ops: Iterable[Op]) -> list[Op]:
    """Replace each adjacent ``ra``/``rb`` pair with ``rr``."""
    return list(_merge_pairs(ops, _ROTATE_PAIRS, Op.RR))


def optimize_ops(ops: Iterable[Op]) -> list[Op]:
    """Apply all peephole rules: cancel pushes, then merge reverse rotations, then rotations."""
    return merge_rotations(merge_reverse_rotations(remove_nops(ops)))


def _line(value: int) -> str:
    try:
        return Op(value).mnemonic + "\n"
    except ValueError:
        return "Error!\n"


def format_ops(ops: Iterable[int]) -> str:
    """Render operations one per line; unknown codes render as ``Error!``."""
    return "".join(_line(op) for op in ops)


def write_ops(ops: Iterable[int], stream: Optional[TextIO] = None) -> None:
    """Write the rendered operations to ``stream`` (standard output by default)."""
    (sys.stdout if stream is None else stream).write(format_ops(ops))