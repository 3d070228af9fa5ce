import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from softfloat.conv import (
    I32,
    I64,
    I128,
    U32,
    U64,
    U128,
    float_to_int,
    int_to_float,
)
from softfloat.formats import F32, F64


def _ints(int_type):
    return st.integers(min_value=int_type.min, max_value=int_type.max)


def _truncate(x, int_type):
    return max(int_type.min, min(int_type.max, int(x)))


@given(_ints(I32))
def test_i32_to_f32_matches_rounded(value):
    assert int_to_float(F32, value, I32) == F32.round(float(value))


@given(_ints(U32))
def test_u32_to_f32_matches_rounded(value):
    assert int_to_float(F32, value, U32) == F32.round(float(value))


@given(_ints(I32))
def test_i32_to_f64_is_exact(value):
    assert int_to_float(F64, value, I32) == float(value)


@pytest.mark.parametrize("int_type", [I64, U64, I128, U128])
@given(data=st.data())
def test_wide_ints_to_f64_match_python(int_type, data):
    value = data.draw(_ints(int_type))
    result = int_to_float(F64, value, int_type)
    assert F64.to_bits(result) == F64.to_bits(float(value))


def test_zero_is_positive_zero():
    result = int_to_float(F64, 0, I64)
    assert result == 0.0
    assert math.copysign(1.0, result) == 1.0


def test_u128_max_rounds_to_infinity_in_f32():
    assert int_to_float(F32, U128.max, U128) == math.inf


def test_extremes_of_i64():
    assert int_to_float(F64, I64.min, I64) == float(I64.min)
    assert int_to_float(F64, I64.max, I64) == float(I64.max)


@pytest.mark.parametrize(
    "value,int_type", [(U32.max + 1, U32), (-1, U64), (I32.min - 1, I32)]
)
def test_out_of_range_int_rejected(value, int_type):
    with pytest.raises(ValueError):
        int_to_float(F64, value, int_type)


@pytest.mark.parametrize("int_type", [I32, I64, I128, U32, U64, U128])
@given(data=st.data())
def test_f64_to_int_truncates_and_saturates(int_type, data):
    x = data.draw(st.floats(allow_nan=False, allow_infinity=False))
    assert float_to_int(F64, x, int_type) == _truncate(x, int_type)


@pytest.mark.parametrize("int_type", [I32, I64, U32, U64])
@given(data=st.data())
def test_f32_to_int_truncates_and_saturates(int_type, data):
    x = data.draw(st.floats(width=32, allow_nan=False, allow_infinity=False))
    assert float_to_int(F32, x, int_type) == _truncate(x, int_type)


@pytest.mark.parametrize("int_type", [I32, I64, U32, U64, I128, U128])
def test_infinities_saturate(int_type):
    assert float_to_int(F64, math.inf, int_type) == int_type.max
    expected_low = int_type.min
    assert float_to_int(F64, -math.inf, int_type) == expected_low


def test_negative_to_unsigned_is_zero():
    assert float_to_int(F64, -1.0, U32) == 0
    assert float_to_int(F32, -0.0, U64) == 0


def test_nan_rejected():
    with pytest.raises(ValueError):
        float_to_int(F64, math.nan, I32)


@given(_ints(I32))
def test_i32_round_trip_through_f64(value):
    assert float_to_int(F64, int_to_float(F64, value, I32), I32) == value