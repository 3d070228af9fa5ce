"""Software division with round-to-nearest-even and flushed subnormal results."""

from __future__ import annotations

from .formats import F32, F64, FloatFormat

_M32 = (1 << 32) - 1
_M64 = (1 << 64) - 1
_RECIPROCAL_SEED = 0x7504F333


def _negate32(value: int) -> int:
    return -value & _M32


def _refine32(reciprocal: int, q31b: int) -> int:
    """Three Newton-Raphson steps on a Q32 reciprocal estimate."""
    for _ in range(3):
        correction = _negate32((reciprocal * q31b) >> 32)
        reciprocal = ((reciprocal * correction) >> 31) & _M32
    return reciprocal


def _quotient32(a_significand: int, b_significand: int) -> int:
    q31b = (b_significand << 8) & _M32
    reciprocal = _refine32((_RECIPROCAL_SEED - q31b) & _M32, q31b)
    # Bias the estimate so it is strictly below the true reciprocal.
    reciprocal = (reciprocal - 2) & _M32
    return ((a_significand << 1) * reciprocal) >> 32


def _quotient64(a_significand: int, b_significand: int) -> int:
    q31b = (b_significand >> 21) & _M32
    recip32 = _refine32((_RECIPROCAL_SEED - q31b) & _M32, q31b)
    # Avoid a reciprocal that overflowed to exactly zero.
    recip32 = (recip32 - 1) & _M32

    # One more step in extra precision brings the estimate to 56 bits.
    q63blo = (b_significand << 11) & _M32
    correction = -((recip32 * q31b + ((recip32 * q63blo) >> 32)) & _M64) & _M64
    c_hi = correction >> 32
    c_lo = correction & _M32
    reciprocal = (recip32 * c_hi + ((recip32 * c_lo) >> 32)) & _M64
    reciprocal = (reciprocal - 2) & _M64
    return ((a_significand << 2) * reciprocal) >> 64


_QUOTIENT = {32: _quotient32, 64: _quotient64}


def _div_bits(fmt: FloatFormat, a_rep: int, b_rep: int) -> int:
    try:
        estimate = _QUOTIENT[fmt.bits]
    except KeyError:
        raise ValueError(f"division is not supported for {fmt.name}") from None

    significand_bits = fmt.significand_bits
    max_exponent = fmt.exponent_max
    implicit_bit = fmt.implicit_bit
    significand_mask = fmt.significand_mask
    sign_bit = fmt.sign_mask
    abs_mask = sign_bit - 1
    inf_rep = fmt.exponent_mask
    quiet_bit = implicit_bit >> 1
    qnan_rep = inf_rep | quiet_bit
    mask = fmt.int_mask

    a_exponent = (a_rep >> significand_bits) & max_exponent
    b_exponent = (b_rep >> significand_bits) & max_exponent
    quotient_sign = (a_rep ^ b_rep) & sign_bit

    a_significand = a_rep & significand_mask
    b_significand = b_rep & significand_mask
    scale = 0

    # Zero, subnormal, infinity or NaN on either side.
    if not (0 < a_exponent < max_exponent and 0 < b_exponent < max_exponent):
        a_abs = a_rep & abs_mask
        b_abs = b_rep & abs_mask

        if a_abs > inf_rep:
            return a_rep | quiet_bit
        if b_abs > inf_rep:
            return b_rep | quiet_bit
        if a_abs == inf_rep:
            return qnan_rep if b_abs == inf_rep else a_abs | quotient_sign
        if b_abs == inf_rep:
            return quotient_sign
        if a_abs == 0:
            return qnan_rep if b_abs == 0 else quotient_sign
        if b_abs == 0:
            return inf_rep | quotient_sign

        if a_abs < implicit_bit:
            exponent, a_significand = fmt.normalize(a_significand)
            scale += exponent
        if b_abs < implicit_bit:
            exponent, b_significand = fmt.normalize(b_significand)
            scale -= exponent

    a_significand |= implicit_bit
    b_significand |= implicit_bit
    quotient_exponent = a_exponent - b_exponent + scale

    quotient = estimate(a_significand, b_significand)

    # The estimate lies in [0.5, 2); the residual decides the final rounding.
    if quotient < (implicit_bit << 1):
        quotient_exponent -= 1
        residual = (
            ((a_significand << (significand_bits + 1)) & mask)
            - quotient * b_significand
        ) & mask
    else:
        quotient >>= 1
        residual = (
            ((a_significand << significand_bits) & mask) - quotient * b_significand
        ) & mask

    written_exponent = quotient_exponent + fmt.exponent_bias

    if written_exponent >= max_exponent:
        return inf_rep | quotient_sign
    if written_exponent < 1:
        # Results that would be subnormal are flushed to zero.
        return quotient_sign

    round_up = int(((residual << 1) & mask) > b_significand)
    abs_result = (quotient & significand_mask) | (written_exponent << significand_bits)
    abs_result = (abs_result + round_up) & mask
    return abs_result | quotient_sign


def div(fmt: FloatFormat, a: float, b: float) -> float:
    """Return ``a / b`` computed in ``fmt`` (32- or 64-bit formats only)."""
    return fmt.from_bits(_div_bits(fmt, fmt.to_bits(a), fmt.to_bits(b)))


def div_f32(a: float, b: float) -> float:
    return div(F32, a, b)


def div_f64(a: float, b: float) -> float:
    return div(F64, a, b)