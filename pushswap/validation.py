"""Checks that command-line arguments are integers in the 32-bit signed range."""

from __future__ import annotations

from collections.abc import Iterable

from .numstr import less_than

_DIGITS = frozenset("0123456789")
_BELOW_MIN = "-2147483649"
_ABOVE_MAX = "2147483648"


def is_valid_string(text: str) -> bool:
    """Return whether ``text`` is an optional ``-`` followed by one or more ASCII digits."""
    body = text[1:] if text.startswith("-") else text
    return bool(body) and all(char in _DIGITS for char in body)


def is_in_int_range(text: str) -> bool:
    """Return whether the integer in ``text`` fits a signed 32-bit integer."""
    return less_than(_BELOW_MIN, text) and less_than(text, _ABOVE_MAX)


def is_valid_all(args: Iterable[str]) -> bool:
    """Return whether every argument (program name excluded) is a valid in-range integer."""
    return all(is_valid_string(arg) and is_in_int_range(arg) for arg in args)