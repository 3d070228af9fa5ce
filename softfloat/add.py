"""Software addition and subtraction with round-to-nearest-even."""

from __future__ import annotations

from .formats import F32, F64, FloatFormat


def _add_bits(fmt: FloatFormat, a_rep: int, b_rep: int) -> int:
    bits = fmt.bits
    significand_bits = fmt.significand_bits
    implicit_bit = fmt.implicit_bit
    significand_mask = fmt.significand_mask
    sign_bit = fmt.sign_mask
    abs_mask = sign_bit - 1
    inf_rep = fmt.exponent_mask
    quiet_bit = implicit_bit >> 1
    qnan_rep = inf_rep | quiet_bit
    mask = fmt.int_mask

    a_abs = a_rep & abs_mask
    b_abs = b_rep & abs_mask

    # Zero, infinity or NaN on either side.
    if a_abs == 0 or a_abs >= inf_rep or b_abs == 0 or b_abs >= inf_rep:
        if a_abs > inf_rep:
            return a_abs | quiet_bit
        if b_abs > inf_rep:
            return b_abs | quiet_bit
        if a_abs == inf_rep:
            return qnan_rep if (a_rep ^ b_rep) == sign_bit else a_rep
        if b_abs == inf_rep:
            return b_rep
        if a_abs == 0:
            return a_rep & b_rep if b_abs == 0 else b_rep
        if b_abs == 0:
            return a_rep

    if b_abs > a_abs:
        a_rep, b_rep = b_rep, a_rep

    a_exponent = (a_rep & inf_rep) >> significand_bits
    b_exponent = (b_rep & inf_rep) >> significand_bits
    a_significand = a_rep & significand_mask
    b_significand = b_rep & significand_mask

    if a_exponent == 0:
        a_exponent, a_significand = fmt.normalize(a_significand)
    if b_exponent == 0:
        b_exponent, b_significand = fmt.normalize(b_significand)

    result_sign = a_rep & sign_bit
    subtraction = (a_rep ^ b_rep) & sign_bit != 0

    # Three extra low bits: round, guard, sticky.
    a_significand = (a_significand | implicit_bit) << 3
    b_significand = (b_significand | implicit_bit) << 3

    align = a_exponent - b_exponent
    if align:
        if align < bits:
            sticky = int((b_significand << (bits - align)) & mask != 0)
            b_significand = (b_significand >> align) | sticky
        else:
            b_significand = 1

    if subtraction:
        a_significand -= b_significand
        if a_significand == 0:
            return 0
        top = implicit_bit << 3
        if a_significand < top:
            shift = top.bit_length() - a_significand.bit_length()
            a_significand <<= shift
            a_exponent -= shift
    else:
        a_significand += b_significand
        if a_significand & (implicit_bit << 4):
            sticky = a_significand & 1
            a_significand = (a_significand >> 1) | sticky
            a_exponent += 1

    if a_exponent >= fmt.exponent_max:
        return inf_rep | result_sign

    if a_exponent <= 0:
        shift = 1 - a_exponent
        if shift < bits:
            sticky = int((a_significand << (bits - shift)) & mask != 0)
            a_significand = (a_significand >> shift) | sticky
        else:
            a_significand = int(a_significand != 0)
        a_exponent = 0

    round_guard_sticky = a_significand & 0x7
    result = (a_significand >> 3) & significand_mask
    result |= a_exponent << significand_bits
    result |= result_sign

    if round_guard_sticky > 0x4:
        result += 1
    if round_guard_sticky == 0x4:
        result += result & 1

    return result & mask


def add(fmt: FloatFormat, a: float, b: float) -> float:
    """Return ``a + b`` computed in ``fmt``."""
    return fmt.from_bits(_add_bits(fmt, fmt.to_bits(a), fmt.to_bits(b)))


def sub(fmt: FloatFormat, a: float, b: float) -> float:
    """Return ``a - b`` computed in ``fmt``."""
    negated_b = fmt.to_bits(b) ^ fmt.sign_mask
    return fmt.from_bits(_add_bits(fmt, fmt.to_bits(a), negated_b))


def add_f32(a: float, b: float) -> float:
    return add(F32, a, b)


def add_f64(a: float, b: float) -> float:
    return add(F64, a, b)


def sub_f32(a: float, b: float) -> float:
    return sub(F32, a, b)


def sub_f64(a: float, b: float) -> float:
    return sub(F64, a, b)