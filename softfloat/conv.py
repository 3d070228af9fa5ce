"""Conversions between integers and floating-point formats."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .formats import FloatFormat


@dataclass(frozen=True)
class IntType:
    """A fixed-width two's complement or unsigned integer type."""

    name: str
    bits: int
    signed: bool

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.min <= value <= self.max


I32 = IntType("i32", 32, True)
I64 = IntType("i64", 64, True)
I128 = IntType("i128", 128, True)
U32 = IntType("u32", 32, False)
U64 = IntType("u64", 64, False)
U128 = IntType("u128", 128, False)


def int_to_float(fmt: FloatFormat, value: int, int_type: IntType) -> float:
    """Convert an integer of ``int_type`` to ``fmt``, rounding to nearest even."""
    if value not in int_type:
        raise ValueError(f"{value} does not fit in {int_type.name}")
    if value == 0:
        return 0.0

    sign = value < 0
    x = abs(value)
    i_sd = x.bit_length()
    f_sd = fmt.significand_bits + 1
    exponent = i_sd - 1

    if int_type.bits < f_sd:
        return fmt.from_parts(
            sign, exponent + fmt.exponent_bias, x << (f_sd - exponent - 1)
        )

    if i_sd > f_sd:
        # Keep f_sd + 2 bits: the significand, a round bit and a sticky bit.
        wide = f_sd + 2
        if i_sd == f_sd + 1:
            x <<= 1
        elif i_sd > wide:
            dropped = i_sd - wide
            x = (x >> dropped) | int(x & ((1 << dropped) - 1) != 0)
        x |= int(x & 4 != 0)
        x += 1
        x >>= 2
        if x & (1 << f_sd):
            x >>= 1
            exponent += 1
    else:
        x <<= f_sd - i_sd

    return fmt.from_parts(sign, exponent + fmt.exponent_bias, x)


def float_to_int(fmt: FloatFormat, value: float, int_type: IntType) -> int:
    """Truncate a value of ``fmt`` toward zero into ``int_type``, saturating."""
    if math.isnan(value):
        raise ValueError("cannot convert NaN to an integer")

    sign = fmt.sign(value)
    exponent = fmt.exponent(value)
    bias = fmt.exponent_bias

    if exponent < bias or (sign and not int_type.signed):
        return 0
    exponent -= bias

    limit = int_type.bits - 1 if int_type.signed else int_type.bits
    if exponent >= limit:
        return int_type.min if sign else int_type.max

    significand = fmt.implicit_fraction(value)
    significand_bits = fmt.significand_bits
    if exponent < significand_bits:
        magnitude = significand >> (significand_bits - exponent)
    else:
        magnitude = significand << (exponent - significand_bits)
    return -magnitude if sign else magnitude