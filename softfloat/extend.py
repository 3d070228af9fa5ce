"""Widening conversion between floating-point formats."""

from __future__ import annotations

from .formats import F32, F64, FloatFormat


def extend(src: FloatFormat, dst: FloatFormat, value: float) -> float:
    """Convert ``value`` from ``src`` to the wider format ``dst`` exactly."""
    if (
        dst.significand_bits < src.significand_bits
        or dst.exponent_bits <= src.exponent_bits
    ):
        raise ValueError(f"{dst.name} is not wider than {src.name}")

    src_rep = src.to_bits(value)
    src_sign_mask = src.sign_mask
    src_abs_mask = src_sign_mask - 1
    src_min_normal = src.implicit_bit
    src_infinity = src.exponent_mask
    src_qnan = src.significand_mask
    src_nan_code = src_qnan - 1

    dst_significand_bits = dst.significand_bits
    dst_mask = dst.int_mask

    significand_delta = dst_significand_bits - src.significand_bits
    bias_delta = dst.exponent_bias - src.exponent_bias
    a_abs = src_rep & src_abs_mask
    abs_result = 0

    if src_min_normal <= a_abs < src_infinity:
        abs_result = (a_abs << significand_delta) + (bias_delta << dst_significand_bits)
    elif a_abs >= src_infinity:
        # Infinity or NaN: keep the payload, right-aligned in the wider field.
        abs_result = dst.exponent_max << dst_significand_bits
        abs_result |= (a_abs & src_qnan) << significand_delta
        abs_result |= (a_abs & src_nan_code) << significand_delta
    elif a_abs:
        # Subnormal in the source, normal in the destination.
        scale = src_min_normal.bit_length() - a_abs.bit_length()
        abs_result = (a_abs << (significand_delta + scale)) & dst_mask
        abs_result = (abs_result ^ dst.implicit_bit) | (
            (bias_delta - scale + 1) << dst_significand_bits
        )

    sign_result = (src_rep & src_sign_mask) << (dst.bits - src.bits)
    return dst.from_bits((abs_result | sign_result) & dst_mask)


def extend_f32_to_f64(value: float) -> float:
    return extend(F32, F64, value)