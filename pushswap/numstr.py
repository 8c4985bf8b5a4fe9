"""Comparison of decimal integers given as strings, without converting them."""

from __future__ import annotations


def _split_sign(text: str) -> tuple[bool, str]:
    if text.startswith("-"):
        return True, text[1:]
    return False, text


def _zero_padded(a: str, b: str) -> tuple[str, str]:
    width = max(len(a), len(b))
    return a.rjust(width, "0"), b.rjust(width, "0")


def less_than(a: str, b: str) -> bool:
    """Return whether the integer written in ``a`` is smaller than that in ``b``.

    Both strings may carry a leading ``-``. Magnitudes are compared digit by
    digit after padding the shorter one with leading zeros, so arbitrarily
    large values work. A negative sign always sorts first, so ``"-0"`` is
    less than ``"0"``.
    """
    a_negative, a_digits = _split_sign(a)
    b_negative, b_digits = _split_sign(b)
    if a_negative != b_negative:
        return a_negative
    a_padded, b_padded = _zero_padded(a_digits, b_digits)
    if a_negative:
        return a_padded > b_padded
    return a_padded < b_padded