# softfloat

Bit-exact software implementations of IEEE-754 single (`f32`) and double
(`f64`) precision arithmetic in pure Python. Every operation works on the raw
bit patterns of the format, so results are reproducible on any host and can
serve as a reference for runtime floating-point routines.

The package also contains a small model of word-addressed memory that
emulates 8-, 16- and 32-bit atomic read-modify-write operations on top of a
word-sized compare-and-swap.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Formats

`softfloat.formats.FloatFormat` describes a binary interchange format. The
module provides two instances, `F32` and `F64`. Values are carried as Python
floats and rounded to the format wherever they are taken in.

```python
from softfloat.formats import F32, F64

F32.to_bits(1.0)            # 0x3F800000
F32.from_bits(0x40490FDB)   # 3.1415927410125732
F32.round(0.1)              # 0.1 rounded to single precision
F32.to_signed_bits(-0.0)    # bit pattern as a two's complement integer
F64.exponent(1.0)           # biased exponent field: 1023
F32.from_parts(False, 127, 0)  # 1.0
F32.normalize(1)            # (-22, 0x800000)
```

Other members: `eq_repr` (same bit pattern, or both NaN), `sign`, `fraction`,
`implicit_fraction`, `is_subnormal`, and the derived properties
`exponent_bits`, `exponent_max`, `exponent_bias`, `sign_mask`,
`significand_mask`, `implicit_bit`, `exponent_mask` and `int_mask`.
`from_bits` raises `ValueError` for a pattern wider than the format.

## Arithmetic

```python
from softfloat.add import add_f32, sub_f64
from softfloat.mul import mul_f32
from softfloat.div import div_f64
from softfloat.pow import powi_f64
from softfloat.extend import extend_f32_to_f64

add_f32(2.0, 3.0)       # 5.0
sub_f64(1.0, 0.25)      # 0.75
mul_f32(1.5, 2.0)       # 3.0
div_f64(1.0, 3.0)       # 0.3333333333333333
powi_f64(2.0, -2)       # 0.25
extend_f32_to_f64(0.5)  # 0.5
```

The generic forms take the format first: `add(F64, a, b)`, `sub`, `mul`,
`div`, `powi`, and `extend(F32, F64, value)`.

- Addition, subtraction and multiplication round to nearest, ties to even,
  and produce subnormal results.
- `div` supports only 32- and 64-bit formats (others raise `ValueError`) and
  flushes results that would be subnormal to a signed zero.
- `powi` raises by repeated squaring, rounding after each step; the exponent
  must fit in a signed 32-bit integer, otherwise `ValueError`.
- `extend` raises `ValueError` unless the destination format is wider.

## Comparisons

`softfloat.cmp.compare(fmt, a, b)` returns an `Ordering` (`LESS`, `EQUAL`,
`GREATER`, `UNORDERED`); `unordered(fmt, a, b)` is true when either operand
is NaN. The helpers `le`, `ge`, `eq`, `lt`, `ne` and `gt` return the integer
results of the usual runtime comparison routines: `-1`, `0` or `1`, with
unordered operands reported as `1` by `le`/`eq`/`lt`/`ne` and `-1` by
`ge`/`gt`. Positive and negative zero compare equal.

## Conversions

`softfloat.conv` converts between floats and fixed-width integers described
by `IntType`; the module provides `I32`, `I64`, `I128`, `U32`, `U64` and
`U128`.

```python
from softfloat.conv import I32, U64, float_to_int, int_to_float
from softfloat.formats import F32, F64

int_to_float(F32, 16777217, I32)   # 16777216.0, ties to even
float_to_int(F64, -2.9, I32)       # -2, toward zero
float_to_int(F64, 1e30, U64)       # 18446744073709551615, saturated
float_to_int(F64, -1.0, U64)       # 0
```

`int_to_float` raises `ValueError` for a value outside the integer type;
`float_to_int` raises `ValueError` for NaN.

## Emulated atomics

```python
from softfloat.atomics import WordMemory

mem = WordMemory()
mem.store(0x1001, 1, 0x7F)
mem.fetch_add(0x1001, 1, 1)               # returns 0x7F, stores 0x80
mem.compare_and_swap(0x1001, 1, 0x80, 0)  # returns 0x80, stores 0
mem.fetch_max(0x1001, 1, 0xFF)            # signed: max(0, -1) keeps 0, returns 0
```

Memory starts zeroed. Accesses are 1, 2 or 4 bytes wide and must be naturally
aligned; otherwise `ValueError`. Byte and half-word operations are carried
out on the containing aligned 32-bit word, little-endian by default
(`WordMemory(big_endian=True)` for big-endian placement). Available
operations: `load`, `store`, `fetch_and_modify`, `compare_and_swap`,
`fetch_add`, `fetch_sub`, `fetch_and`, `fetch_or`, `fetch_xor`,
`fetch_nand`, `fetch_max`, `fetch_min` (signed, returning the old value as
signed), `fetch_umax`, `fetch_umin`, `lock_test_and_set` and `synchronize`.

## What it does not do

- Only round-to-nearest-even is available; there are no other rounding modes
  and no floating-point exception flags.
- There is no narrowing conversion between float formats, and division does
  not produce subnormal results.
- There is no command-line program; the package is a library.