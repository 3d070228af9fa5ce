"""Bit-exact software IEEE-754 arithmetic and emulated sub-word atomics."""

__version__ = "0.1.0"

__all__ = ["add", "atomics", "cmp", "conv", "div", "extend", "formats", "mul", "pow"]