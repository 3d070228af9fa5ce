"""Raising a float to an integer power by repeated squaring."""

from __future__ import annotations

import math

from .formats import F32, F64, FloatFormat

_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


def _reciprocal(fmt: FloatFormat, x: float) -> float:
    if x == 0.0:
        return math.copysign(math.inf, x)
    return fmt.round(1.0 / x)


def powi(fmt: FloatFormat, a: float, b: int) -> float:
    """Return ``a`` raised to the 32-bit integer power ``b`` in ``fmt``."""
    if not _I32_MIN <= b <= _I32_MAX:
        raise ValueError(f"exponent {b} does not fit in 32 bits")
    base = fmt.round(a)
    remaining = abs(b)
    result = 1.0
    while True:
        if remaining & 1:
            result = fmt.round(result * base)
        remaining >>= 1
        if remaining == 0:
            break
        base = fmt.round(base * base)
    return _reciprocal(fmt, result) if b < 0 else result


def powi_f32(a: float, b: int) -> float:
    return powi(F32, a, b)


def powi_f64(a: float, b: int) -> float:
    return powi(F64, a, b)