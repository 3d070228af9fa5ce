"""Software comparisons following the libgcc comparison ABI."""

from __future__ import annotations

from enum import Enum

from .formats import FloatFormat


class Ordering(Enum):
    """Outcome of comparing two floating-point values."""

    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"
    UNORDERED = "unordered"

    def to_le_abi(self) -> int:
        """Integer result where an unordered comparison counts as greater."""
        return {
            Ordering.LESS: -1,
            Ordering.EQUAL: 0,
            Ordering.GREATER: 1,
            Ordering.UNORDERED: 1,
        }[self]

    def to_ge_abi(self) -> int:
        """Integer result where an unordered comparison counts as less."""
        return {
            Ordering.LESS: -1,
            Ordering.EQUAL: 0,
            Ordering.GREATER: 1,
            Ordering.UNORDERED: -1,
        }[self]


def _signed(fmt: FloatFormat, rep: int) -> int:
    return rep - (1 << fmt.bits) if rep & fmt.sign_mask else rep


def _is_unordered(fmt: FloatFormat, a_rep: int, b_rep: int) -> bool:
    abs_mask = fmt.sign_mask - 1
    inf_rep = fmt.exponent_mask
    return (a_rep & abs_mask) > inf_rep or (b_rep & abs_mask) > inf_rep


def compare(fmt: FloatFormat, a: float, b: float) -> Ordering:
    """Compare ``a`` and ``b`` through their bit patterns in ``fmt``."""
    a_rep = fmt.to_bits(a)
    b_rep = fmt.to_bits(b)
    if _is_unordered(fmt, a_rep, b_rep):
        return Ordering.UNORDERED

    abs_mask = fmt.sign_mask - 1
    if (a_rep & abs_mask) | (b_rep & abs_mask) == 0:
        return Ordering.EQUAL

    a_srep = _signed(fmt, a_rep)
    b_srep = _signed(fmt, b_rep)

    # With both signs set, integer order is the reverse of float order.
    if a_srep & b_srep < 0:
        a_srep, b_srep = b_srep, a_srep
    if a_srep < b_srep:
        return Ordering.LESS
    if a_srep == b_srep:
        return Ordering.EQUAL
    return Ordering.GREATER


def unordered(fmt: FloatFormat, a: float, b: float) -> bool:
    """True if either operand is NaN."""
    return _is_unordered(fmt, fmt.to_bits(a), fmt.to_bits(b))


def le(fmt: FloatFormat, a: float, b: float) -> int:
    """Non-positive exactly when ``a <= b``."""
    return compare(fmt, a, b).to_le_abi()


def ge(fmt: FloatFormat, a: float, b: float) -> int:
    """Non-negative exactly when ``a >= b``."""
    return compare(fmt, a, b).to_ge_abi()


def eq(fmt: FloatFormat, a: float, b: float) -> int:
    """Zero exactly when ``a == b``."""
    return compare(fmt, a, b).to_le_abi()


def lt(fmt: FloatFormat, a: float, b: float) -> int:
    """Negative exactly when ``a < b``."""
    return compare(fmt, a, b).to_le_abi()


def ne(fmt: FloatFormat, a: float, b: float) -> int:
    """Non-zero exactly when ``a != b``."""
    return compare(fmt, a, b).to_le_abi()


def gt(fmt: FloatFormat, a: float, b: float) -> int:
    """Positive exactly when ``a > b``."""
    return compare(fmt, a, b).to_ge_abi()