import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from softfloat.formats import F32, F64
from softfloat.pow import powi, powi_f32, powi_f64


def test_powers_of_two():
    assert powi_f64(2.0, 10) == 1024.0
    assert powi_f64(2.0, -2) == 0.25


@given(st.floats(allow_nan=False))
def test_zero_power_is_one(x):
    assert powi_f64(x, 0) == 1.0


@given(st.floats())
def test_first_power_is_identity(x):
    assert F64.eq_repr(powi_f64(x, 1), x)


@given(st.floats())
def test_square_matches_native(x):
    assert F64.eq_repr(powi_f64(x, 2), x * x)


@given(st.floats(width=32))
def test_square_f32_matches_rounded(x):
    assert F32.eq_repr(powi_f32(x, 2), F32.round(x * x))


@given(st.floats(allow_nan=False, allow_infinity=False).filter(lambda v: v != 0.0))
def test_negative_one_power_is_reciprocal(x):
    assert F64.eq_repr(powi_f64(x, -1), 1.0 / x)


def test_reciprocal_of_zero_is_signed_infinity():
    assert powi_f64(0.0, -1) == math.inf
    assert powi_f64(-0.0, -1) == -math.inf


@given(st.floats(width=32, allow_nan=False), st.integers(min_value=-40, max_value=40))
def test_f32_results_are_representable(x, n):
    result = powi_f32(x, n)
    assert F32.eq_repr(F32.round(result), result)


def test_overflow_goes_to_infinity():
    assert powi(F32, 10.0, 100) == math.inf


def test_exponent_range_checked():
    with pytest.raises(ValueError):
        powi_f64(2.0, 1 << 31)
    with pytest.raises(ValueError):
        powi_f64(2.0, -(1 << 31) - 1)