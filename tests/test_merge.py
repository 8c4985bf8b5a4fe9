import random

import pytest

from pushswap.merge import is_sorted, merge_sort
from pushswap.ops import Op


def _run(ops, stack):
    a = list(stack)
    b = []

    def swap(s):
        if len(s) > 1:
            s[0], s[1] = s[1], s[0]

    def rot(s):
        if s:
            s.append(s.pop(0))

    def rrot(s):
        if s:
            s.insert(0, s.pop())

    def push(src, dst):
        if src:
            dst.insert(0, src.pop(0))

    for op in ops:
        if op in (Op.SA, Op.SS):
            swap(a)
        if op in (Op.SB, Op.SS):
            swap(b)
        if op == Op.PA:
            push(b, a)
        if op == Op.PB:
            push(a, b)
        if op in (Op.RA, Op.RR):
            rot(a)
        if op in (Op.RB, Op.RR):
            rot(b)
        if op in (Op.RRA, Op.RRR):
            rrot(a)
        if op in (Op.RRB, Op.RRR):
            rrot(b)
    return a, b


@pytest.mark.parametrize(
    "stack, expected",
    [
        ([], True),
        ([7], True),
        ([1, 2, 3], True),
        ([-5, 0, 9], True),
        ([2, 1], False),
        ([1, 1], False),
        ([1, 3, 2, 4], False),
    ],
)
def test_is_sorted(stack, expected):
    assert is_sorted(stack) is expected


def test_merge_sort_sorted_input_needs_nothing():
    assert merge_sort([1, 2, 3, 4, 5, 6]) == []
    assert merge_sort([]) == []


@pytest.mark.parametrize(
    "stack",
    [
        [3, 1, 2, 6, 4, 5],
        [2, 1],
        [3, 1, 2],
        [1, 5, 2, 4, 3],
        [10, -3, 7, 0, 42, 5, 8],
    ],
)
def test_merge_sort_sorts_fixed_inputs(stack):
    a, b = _run(merge_sort(stack), stack)
    assert a == sorted(stack)
    assert b == []


@pytest.mark.parametrize("size", [6, 7, 10, 20, 50, 100])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_merge_sort_sorts_random_permutations(size, seed):
    stack = random.Random(seed).sample(range(1, size + 1), size)
    ops = merge_sort(stack)
    a, b = _run(ops, stack)
    assert a == list(range(1, size + 1))
    assert b == []


@pytest.mark.parametrize("seed", [3, 4])
def test_merge_sort_output_is_optimized(seed):
    stack = random.Random(seed).sample(range(1, 31), 30)
    ops = merge_sort(stack)
    pairs = set(zip(ops, ops[1:]))
    for pair in [(Op.PA, Op.PB), (Op.PB, Op.PA), (Op.RA, Op.RB), (Op.RB, Op.RA),
                 (Op.RRA, Op.RRB), (Op.RRB, Op.RRA)]:
        assert pair not in pairs


def test_merge_sort_does_not_mutate_input():
    stack = [4, 2, 6, 1, 5, 3]
    merge_sort(stack)
    assert stack == [4, 2, 6, 1, 5, 3]


def test_merge_sort_rejects_duplicates():
    with pytest.raises(ValueError):
        merge_sort([3, 1, 3, 2])