import itertools

import pytest

from pushswap.numstr import less_than


def test_documented_example():
    assert less_than("-100", "21309") is True
    assert less_than("21309", "-100") is False


VALUES = ["-2147483649", "-2147483648", "-100", "-12", "-7", "-1", "0",
          "1", "7", "12", "100", "21309", "2147483647", "2147483648"]


@pytest.mark.parametrize("a,b", list(itertools.product(VALUES, repeat=2)))
def test_agrees_with_integer_order(a, b):
    assert less_than(a, b) == (int(a) < int(b))


@pytest.mark.parametrize("value", VALUES)
def test_irreflexive(value):
    assert less_than(value, value) is False


def test_leading_zeros_are_ignored():
    assert less_than("007", "7") is False
    assert less_than("7", "007") is False
    assert less_than("007", "8") is True


def test_huge_values_beyond_machine_integers():
    big = "9" * 40
    bigger = "1" + "0" * 40
    assert less_than(big, bigger) is True
    assert less_than("-" + bigger, "-" + big) is True


def test_negative_zero_sorts_below_zero():
    assert less_than("-0", "0") is True
    assert less_than("0", "-0") is False