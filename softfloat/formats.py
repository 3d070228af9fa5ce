"""IEEE-754 binary interchange formats and bit-level helpers."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field


@dataclass(frozen=True)
class FloatFormat:
    """A binary floating-point format described by its width and significand size.

    Values are carried as Python floats; every method that takes a value
    first rounds it to the nearest value of this format.
    """

    name: str
    bits: int
    significand_bits: int
    struct_code: str = field(repr=False)

    @property
    def exponent_bits(self) -> int:
        return self.bits - self.significand_bits - 1

    @property
    def exponent_max(self) -> int:
        return (1 << self.exponent_bits) - 1

    @property
    def exponent_bias(self) -> int:
        return self.exponent_max >> 1

    @property
    def int_mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def sign_mask(self) -> int:
        return 1 << (self.bits - 1)

    @property
    def significand_mask(self) -> int:
        return (1 << self.significand_bits) - 1

    @property
    def implicit_bit(self) -> int:
        return 1 << self.significand_bits

    @property
    def exponent_mask(self) -> int:
        return self.int_mask & ~(self.sign_mask | self.significand_mask)

    def _pack(self, value: float) -> bytes:
        code = "<" + self.struct_code
        try:
            return struct.pack(code, value)
        except OverflowError:
            return struct.pack(code, math.copysign(math.inf, value))

    def to_bits(self, value: float) -> int:
        """Return the unsigned bit pattern of ``value`` in this format."""
        return int.from_bytes(self._pack(value), "little")

    def from_bits(self, bits: int) -> float:
        """Return the value whose bit pattern in this format is ``bits``."""
        if not 0 <= bits <= self.int_mask:
            raise ValueError(f"{bits:#x} is not a {self.bits}-bit pattern")
        raw = bits.to_bytes(self.bits // 8, "little")
        return struct.unpack("<" + self.struct_code, raw)[0]

    def to_signed_bits(self, value: float) -> int:
        """Return the bit pattern of ``value`` read as a two's complement integer."""
        bits = self.to_bits(value)
        return bits - (1 << self.bits) if bits & self.sign_mask else bits

    def eq_repr(self, a: float, b: float) -> bool:
        """True if both are NaN or both have the same bit pattern."""
        if math.isnan(a) and math.isnan(b):
            return True
        return self.to_bits(a) == self.to_bits(b)

    def sign(self, value: float) -> bool:
        """True if the sign bit is set."""
        return self.to_signed_bits(value) < 0

    def exponent(self, value: float) -> int:
        """Return the biased exponent field."""
        return (self.to_bits(value) & self.exponent_mask) >> self.significand_bits

    def fraction(self, value: float) -> int:
        """Return the significand field without the implicit bit."""
        return self.to_bits(value) & self.significand_mask

    def implicit_fraction(self, value: float) -> int:
        """Return the significand field with the implicit bit set."""
        return self.fraction(value) | self.implicit_bit

    def from_parts(self, sign: bool, exponent: int, significand: int) -> float:
        """Assemble a value from a sign, a biased exponent and a significand field."""
        bits = (
            (int(bool(sign)) << (self.bits - 1))
            | ((exponent << self.significand_bits) & self.exponent_mask)
            | (significand & self.significand_mask)
        )
        return self.from_bits(bits)

    def normalize(self, significand: int) -> tuple[int, int]:
        """Shift a significand so its top bit lands on the implicit bit.

        Returns the matching exponent and the shifted significand.
        """
        shift = self.implicit_bit.bit_length() - significand.bit_length()
        if shift < 0:
            raise ValueError("significand is wider than the format")
        return 1 - shift, (significand << shift) & self.int_mask

    def is_subnormal(self, value: float) -> bool:
        """True if the exponent field is zero (subnormals and zeros)."""
        return self.to_bits(value) & self.exponent_mask == 0

    def round(self, value: float) -> float:
        """Round a float to the nearest value of this format."""
        return self.from_bits(self.to_bits(value))


F32 = FloatFormat("f32", 32, 23, "f")
F64 = FloatFormat("f64", 64, 52, "d")