"""Solve the push_swap stack-sorting puzzle and print the operations used."""

__version__ = "0.1.0"
__all__ = ["__version__"]