"""Bit-exact port of ``java.util.Random``.

Bedrock generation has to stay in lockstep with the game's generator, so none of
Python's ``random`` facilities can be used here.
"""

from __future__ import annotations

MULTIPLIER = 0x5DEECE66D
ADDEND = 0xB
MASK = (1 << 48) - 1
DOUBLE_UNIT = 1.0 / (1 << 53)
FLOAT_UNIT = 1.0 / (1 << 24)


def _int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - (1 << 32) if n & 0x80000000 else n


def int64(n: int) -> int:
    n &= 0xFFFFFFFFFFFFFFFF
    return n - (1 << 64) if n & 0x8000000000000000 else n


class JavaRandom:
    """48-bit linear congruential generator matching the JVM implementation."""

    def __init__(self, seed: int) -> None:
        self._seed = 0
        self.set_seed(seed)

    def set_seed(self, seed: int) -> None:
        self._seed = (seed ^ MULTIPLIER) & MASK

    def next_bits(self, bits: int) -> int:
        self._seed = (self._seed * MULTIPLIER + ADDEND) & MASK
        return _int32(self._seed >> (48 - bits))

    def next_int(self, bound: int | None = None) -> int:
        if bound is None:
            return self.next_bits(32)
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")

        if bound & -bound == bound:
            return _int32((bound * self.next_bits(31)) >> 31)

        while True:
            bits = self.next_bits(31)
            value = bits % bound
            # Java rejects samples where this sum overflows a signed int.
            if bits - value + (bound - 1) < (1 << 31):
                return value

    def next_long(self) -> int:
        return int64((self.next_bits(32) << 32) + self.next_bits(32))

    def next_double(self) -> float:
        return ((self.next_bits(26) << 27) + self.next_bits(27)) * DOUBLE_UNIT

    def next_float(self) -> float:
        return self.next_bits(24) * FLOAT_UNIT

    def next_boolean(self) -> bool:
        return self.next_bits(1) != 0
