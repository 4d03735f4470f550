from __future__ import annotations

from typing import Optional

_MULTIPLIER = 0x5DEECE66D
_ADDEND = 0xB
_MASK = (1 << 48) - 1


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


class JavaRandom:
    """
    48-bit linear congruential generator, bit-compatible with java.util.Random.

    Same seed -> same sequence as the JVM, so buffers built from it match
    buffers built by any other implementation of that algorithm.
    """

    def __init__(self, seed: int):
        self.set_seed(seed)

    def set_seed(self, seed: int) -> None:
        self._seed = (seed ^ _MULTIPLIER) & _MASK

    def next(self, bits: int) -> int:
        self._seed = (self._seed * _MULTIPLIER + _ADDEND) & _MASK
        return _to_int32(self._seed >> (48 - bits))

    def next_int(self, bound: Optional[int] = None) -> int:
        if bound is None:
            return self.next(32)
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")

        r = self.next(31)
        m = bound - 1
        if bound & m == 0:
            # power of two: take the high-order bits
            return (bound * r) >> 31

        u = r
        r = u % bound
        # reject draws from the incomplete last bucket (int overflow in Java)
        while u - r + m >= (1 << 31):
            u = self.next(31)
            r = u % bound
        return r
