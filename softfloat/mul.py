"""Software multiplication with round-to-nearest-even."""

from __future__ import annotations

from .formats import F32, F64, FloatFormat


def _mul_bits(fmt: FloatFormat, a_rep: int, b_rep: int) -> int:
    bits = fmt.bits
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
    product_sign = (a_rep ^ b_rep) & sign_bit

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
            return a_abs | product_sign if b_abs else qnan_rep
        if b_abs == inf_rep:
            return b_abs | product_sign if a_abs else qnan_rep
        if a_abs == 0 or b_abs == 0:
            return product_sign

        if a_abs < implicit_bit:
            exponent, a_significand = fmt.normalize(a_significand)
            scale += exponent
        if b_abs < implicit_bit:
            exponent, b_significand = fmt.normalize(b_significand)
            scale += exponent

    a_significand |= implicit_bit
    b_significand |= implicit_bit

    # Left-align one operand so the product's top bits sit in the high word.
    product = a_significand * (b_significand << fmt.exponent_bits)
    low = product & mask
    high = product >> bits

    product_exponent = a_exponent + b_exponent + scale - fmt.exponent_bias

    if high & implicit_bit:
        product_exponent += 1
    else:
        high = ((high << 1) | (low >> (bits - 1))) & mask
        low = (low << 1) & mask

    if product_exponent >= max_exponent:
        return inf_rep | product_sign

    if product_exponent <= 0:
        shift = 1 - product_exponent
        if shift >= bits:
            return product_sign
        sticky = (low << (bits - shift)) & mask
        low = ((high << (bits - shift)) & mask) | (low >> shift) | sticky
        high >>= shift
    else:
        high = (high & significand_mask) | (product_exponent << significand_bits)

    high |= product_sign

    if low > sign_bit:
        high += 1
    elif low == sign_bit:
        high += high & 1

    return high & mask


def mul(fmt: FloatFormat, a: float, b: float) -> float:
    """Return ``a * b`` computed in ``fmt``."""
    return fmt.from_bits(_mul_bits(fmt, fmt.to_bits(a), fmt.to_bits(b)))


def mul_f32(a: float, b: float) -> float:
    return mul(F32, a, b)


def mul_f64(a: float, b: float) -> float:
    return mul(F64, a, b)