import math

from hypothesis import given
from hypothesis import strategies as st

from softfloat.add import add, add_f32, add_f64, sub, sub_f32, sub_f64
from softfloat.formats import F32, F64


@given(st.floats(), st.floats())
def test_add_f64_matches_native(a, b):
    assert F64.eq_repr(add_f64(a, b), a + b)


@given(st.floats(), st.floats())
def test_sub_f64_matches_native(a, b):
    assert F64.eq_repr(sub_f64(a, b), a - b)


@given(st.floats(width=32), st.floats(width=32))
def test_add_f32_matches_rounded_native(a, b):
    assert F32.eq_repr(add_f32(a, b), F32.round(a + b))


@given(st.floats(width=32), st.floats(width=32))
def test_sub_f32_matches_rounded_native(a, b):
    assert F32.eq_repr(sub_f32(a, b), F32.round(a - b))


@given(st.floats(allow_nan=False), st.floats(allow_nan=False))
def test_add_is_commutative(a, b):
    assert F64.eq_repr(add(F64, a, b), add(F64, b, a))


def test_opposite_infinities_give_nan():
    assert math.isnan(add_f64(math.inf, -math.inf))
    assert math.isnan(sub_f32(math.inf, math.inf))


def test_zero_signs():
    assert not F64.sign(add_f64(0.0, -0.0))
    assert F64.sign(add_f64(-0.0, -0.0))
    assert F64.sign(sub(F64, -0.0, 0.0))


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_x_minus_x_is_positive_zero(x):
    result = sub_f64(x, x)
    assert result == 0.0
    assert not F64.sign(result)


def test_signaling_nan_is_quieted():
    snan_bits = F64.exponent_mask | 1
    result = add_f64(F64.from_bits(snan_bits), 1.0)
    assert F64.to_bits(result) == snan_bits | (F64.implicit_bit >> 1)


def test_subnormal_sum():
    tiny = F64.from_bits(1)
    assert F64.to_bits(add_f64(tiny, tiny)) == 2