"""SplitMix64 seeding and the xoshiro256** pseudo-random generator."""

from __future__ import annotations

import struct
from typing import Any, MutableSequence

_MASK = (1 << 64) - 1


def _rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & _MASK


class SplitMix64:
    """SplitMix64 generator, used to spread a seed over larger states."""

    def __init__(self, seed: int) -> None:
        self._state = seed & _MASK

    def next_u64(self) -> int:
        self._state = (self._state + 0x9E3779B97F4A7C15) & _MASK
        z = self._state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK
        return z ^ (z >> 31)


class Xoshiro256:
    """xoshiro256** generator seeded through SplitMix64."""

    def __init__(self, seed: int) -> None:
        mixer = SplitMix64(seed)
        self._s = [mixer.next_u64() for _ in range(4)]

    def next_u64(self) -> int:
        s0, s1, s2, s3 = self._s
        result = (_rotl((s1 * 5) & _MASK, 7) * 9) & _MASK
        t = (s1 << 17) & _MASK
        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3
        s2 ^= t
        s3 = _rotl(s3, 45)
        self._s = [s0, s1, s2, s3]
        return result

    def gen_usize(self, lower: int, upper: int) -> int:
        """Integer in ``[lower, upper)``."""
        if lower >= upper:
            raise ValueError("lower must be less than upper")
        return self.next_u64() % (upper - lower) + lower

    def gen_i64(self, lower: int, upper: int) -> int:
        """Signed integer in ``[lower, upper)``."""
        if lower >= upper:
            raise ValueError("lower must be less than upper")
        return self.next_u64() % (upper - lower) + lower

    def gen_f64(self) -> float:
        """Float in ``[0, 1)`` built from 52 random mantissa bits."""
        bits = 0x3FF0000000000000 | (self.next_u64() & 0xFFFFFFFFFFFFF)
        (value,) = struct.unpack("<d", struct.pack("<Q", bits))
        return value - 1.0

    def gen_bool(self, prob: float) -> bool:
        """True with probability ``prob``."""
        return self.gen_f64() < prob

    def shuffle(self, items: MutableSequence[Any]) -> None:
        """Fisher-Yates shuffle of ``items`` in place."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_u64() % (i + 1)
            items[i], items[j] = items[j], items[i]