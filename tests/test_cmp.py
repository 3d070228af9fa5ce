import math

from hypothesis import given
from hypothesis import strategies as st

from softfloat.cmp import Ordering, compare, eq, ge, gt, le, lt, ne, unordered
from softfloat.formats import F32, F64


def test_abi_mappings_for_unordered():
    assert Ordering.UNORDERED.to_le_abi() == 1
    assert Ordering.UNORDERED.to_ge_abi() == -1
    assert Ordering.LESS.to_le_abi() == Ordering.LESS.to_ge_abi()


@given(st.floats(), st.floats())
def test_predicates_match_native_f64(a, b):
    assert (lt(F64, a, b) < 0) == (a < b)
    assert (le(F64, a, b) <= 0) == (a <= b)
    assert (gt(F64, a, b) > 0) == (a > b)
    assert (ge(F64, a, b) >= 0) == (a >= b)
    assert (eq(F64, a, b) == 0) == (a == b)
    assert (ne(F64, a, b) != 0) == (a != b)


@given(st.floats(width=32), st.floats(width=32))
def test_predicates_match_native_f32(a, b):
    assert (lt(F32, a, b) < 0) == (a < b)
    assert (ge(F32, a, b) >= 0) == (a >= b)
    assert (eq(F32, a, b) == 0) == (a == b)


@given(st.floats(), st.floats())
def test_unordered_iff_nan(a, b):
    assert unordered(F64, a, b) == (math.isnan(a) or math.isnan(b))


def test_zeros_compare_equal():
    assert compare(F64, 0.0, -0.0) is Ordering.EQUAL


def test_negative_values_ordered():
    assert compare(F64, -2.0, -1.0) is Ordering.LESS
    assert compare(F64, -1.0, -2.0) is Ordering.GREATER
    assert compare(F32, -math.inf, 1.0) is Ordering.LESS


def test_nan_compare():
    assert compare(F64, math.nan, 1.0) is Ordering.UNORDERED
    assert le(F64, math.nan, 1.0) > 0
    assert ge(F64, math.nan, 1.0) < 0


@given(st.floats(allow_nan=False), st.floats(allow_nan=False))
def test_compare_is_antisymmetric(a, b):
    forward = compare(F64, a, b).to_le_abi()
    backward = compare(F64, b, a).to_le_abi()
    assert forward == -backward