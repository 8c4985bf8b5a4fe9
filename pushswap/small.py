"""Fixed operation sequences that sort stacks of two, three or four ranks."""

from __future__ import annotations

from collections.abc import Sequence

from .ops import Op, optimize_ops

# For three distinct ranks, the first two (relative to the smallest) decide the order.
_THREE_RANK_OPS: dict[tuple[int, int], tuple[Op, ...]] = {
    (0, 1): (),
    (0, 2): (Op.SA, Op.RA),
    (1, 0): (Op.SA,),
    (1, 2): (Op.RRA,),
    (2, 0): (Op.RA,),
    (2, 1): (Op.SA, Op.RRA),
}

# Operations that bring the smallest rank to the top, keyed by its position,
# then push it to stack b.
_FOUR_STASH_OPS: dict[int, tuple[Op, ...]] = {
    0: (Op.PB,),
    1: (Op.RA, Op.PB),
    2: (Op.RA, Op.RA, Op.PB),
    3: (Op.RRA, Op.PB),
}


def _is_ascending(stack: Sequence[int]) -> bool:
    return all(low < high for low, high in zip(stack, stack[1:]))


def sort_two(stack: Sequence[int]) -> list[Op]:
    """Return the operations that sort a stack of two values (top first)."""
    if len(stack) < 2:
        raise ValueError("sort_two needs at least two values")
    first, second = stack[0], stack[1]
    return [Op.SA] if first > second else []


def sort_three_base(stack: Sequence[int], base: int) -> list[Op]:
    """Return the operations that sort three ranks ``base``, ``base + 1``, ``base + 2``."""
    if len(stack) < 3:
        raise ValueError("sort_three_base needs at least three values")
    key = (stack[0] - base, stack[1] - base)
    try:
        return list(_THREE_RANK_OPS[key])
    except KeyError:
        raise ValueError(
            f"stack {list(stack[:3])!r} is not a permutation of ranks starting at {base}"
        ) from None


def sort_three(stack: Sequence[int]) -> list[Op]:
    """Return the operations that sort a stack holding the ranks 1, 2 and 3."""
    return sort_three_base(stack, 1)


def _rest_after_stash(stack: Sequence[int], position: int) -> list[int]:
    """What stays on stack a once the smallest rank has been moved away."""
    items = list(stack)
    if position == 3:
        rotated = items[-1:] + items[:-1]
    else:
        rotated = items[position:] + items[:position]
    return rotated[1:]


def sort_four(stack: Sequence[int]) -> list[Op]:
    """Return the operations that sort a stack holding the ranks 1 to 4."""
    if len(stack) != 4:
        raise ValueError("sort_four needs exactly four values")
    if _is_ascending(stack):
        return []
    try:
        position = list(stack).index(1)
    except ValueError:
        raise ValueError(f"stack {list(stack)!r} does not hold rank 1") from None
    ops = list(_FOUR_STASH_OPS[position])
    ops.extend(sort_three_base(_rest_after_stash(stack, position), 2))
    ops.append(Op.PA)
    return optimize_ops(ops)