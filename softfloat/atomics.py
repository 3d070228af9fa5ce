"""Sub-word atomic operations built on a word-sized compare-and-exchange.

Byte and halfword atomics are emulated by reading the aligned 32-bit word
that holds them, splicing in the new value, and retrying a word-wide
compare-and-exchange until it succeeds.
"""

from __future__ import annotations

import threading
from typing import Callable

_WORD_MASK = 0xFFFFFFFF
_WIDTH_MASKS = {1: 0xFF, 2: 0xFFFF, 4: 0xFFFFFFFF}


def _to_signed(value: int, width: int) -> int:
    bits = width * 8
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >> (bits - 1) else value


class WordMemory:
    """Zero-initialised memory made of 32-bit words, addressed by byte.

    Accesses of 1, 2 or 4 bytes must be naturally aligned. The byte order
    of values inside a word is little-endian unless ``big_endian`` is set.
    """

    def __init__(self, *, big_endian: bool = False) -> None:
        self.big_endian = big_endian
        self._words: dict[int, int] = {}
        self._lock = threading.Lock()

    def _locate(self, address: int, width: int) -> tuple[int, int, int]:
        try:
            mask = _WIDTH_MASKS[width]
        except KeyError:
            raise ValueError(f"unsupported access width {width}") from None
        if address < 0:
            raise ValueError(f"negative address {address}")
        if address % width:
            raise ValueError(f"address {address:#x} is not {width}-byte aligned")
        aligned = address & ~3
        offset_mask = 3 & (4 - width)
        endian_adjust = 4 - width if self.big_endian else 0
        shift = ((address & offset_mask) ^ endian_adjust) * 8
        return aligned, shift, mask

    def _cmpxchg_word(self, aligned: int, expected: int, new: int) -> bool:
        with self._lock:
            if self._words.get(aligned, 0) != expected:
                return False
            self._words[aligned] = new & _WORD_MASK
            return True

    def load(self, address: int, width: int) -> int:
        """Return the unsigned value of ``width`` bytes at ``address``."""
        aligned, shift, mask = self._locate(address, width)
        return (self._words.get(aligned, 0) >> shift) & mask

    def store(self, address: int, width: int, value: int) -> None:
        """Write ``value``, truncated to ``width`` bytes, at ``address``."""
        self.fetch_and_modify(address, width, lambda _current: value)

    def fetch_and_modify(
        self, address: int, width: int, op: Callable[[int], int]
    ) -> int:
        """Atomically replace the value with ``op(old)`` and return ``old``.

        ``op`` receives the unsigned old value; its result is truncated to
        ``width`` bytes.
        """
        aligned, shift, mask = self._locate(address, width)
        while True:
            current_word = self._words.get(aligned, 0)
            current = (current_word >> shift) & mask
            new = op(current)
            new_word = (current_word & ~(mask << shift) & _WORD_MASK) | (
                (new & mask) << shift
            )
            if self._cmpxchg_word(aligned, current_word, new_word):
                return current

    def compare_and_swap(
        self, address: int, width: int, oldval: int, newval: int
    ) -> int:
        """Store ``newval`` if the value equals ``oldval``; return the value seen."""
        aligned, shift, mask = self._locate(address, width)
        oldval &= mask
        while True:
            current_word = self._words.get(aligned, 0)
            current = (current_word >> shift) & mask
            if current != oldval:
                return current
            new_word = (current_word & ~(mask << shift) & _WORD_MASK) | (
                (newval & mask) << shift
            )
            if self._cmpxchg_word(aligned, current_word, new_word):
                return oldval

    def fetch_add(self, address: int, width: int, value: int) -> int:
        """Wrapping add; returns the old unsigned value."""
        return self.fetch_and_modify(address, width, lambda x: x + value)

    def fetch_sub(self, address: int, width: int, value: int) -> int:
        """Wrapping subtract; returns the old unsigned value."""
        return self.fetch_and_modify(address, width, lambda x: x - value)

    def fetch_and(self, address: int, width: int, value: int) -> int:
        return self.fetch_and_modify(address, width, lambda x: x & value)

    def fetch_or(self, address: int, width: int, value: int) -> int:
        return self.fetch_and_modify(address, width, lambda x: x | value)

    def fetch_xor(self, address: int, width: int, value: int) -> int:
        return self.fetch_and_modify(address, width, lambda x: x ^ value)

    def fetch_nand(self, address: int, width: int, value: int) -> int:
        return self.fetch_and_modify(address, width, lambda x: ~(x & value))

    def fetch_max(self, address: int, width: int, value: int) -> int:
        """Signed maximum; returns the old value read as signed."""
        operand = _to_signed(value, width)
        old = self.fetch_and_modify(
            address, width, lambda x: max(_to_signed(x, width), operand)
        )
        return _to_signed(old, width)

    def fetch_umax(self, address: int, width: int, value: int) -> int:
        operand = value & _WIDTH_MASKS.get(width, 0)
        return self.fetch_and_modify(address, width, lambda x: max(x, operand))

    def fetch_min(self, address: int, width: int, value: int) -> int:
        """Signed minimum; returns the old value read as signed."""
        operand = _to_signed(value, width)
        old = self.fetch_and_modify(
            address, width, lambda x: min(_to_signed(x, width), operand)
        )
        return _to_signed(old, width)

    def fetch_umin(self, address: int, width: int, value: int) -> int:
        operand = value & _WIDTH_MASKS.get(width, 0)
        return self.fetch_and_modify(address, width, lambda x: min(x, operand))

    def lock_test_and_set(self, address: int, width: int, value: int) -> int:
        """Atomically exchange the value; returns the old unsigned value."""
        return self.fetch_and_modify(address, width, lambda _x: value)

    def synchronize(self) -> None:
        """Full memory barrier: waits for any in-flight exchange to finish."""
        with self._lock:
            pass