"""Mersenne Twister generator and process-wide random helpers."""

from __future__ import annotations

import os

STATE_LEN = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER_MASK = 0x80000000
_LOWER_MASK = 0x7FFFFFFF
_MASK32 = 0xFFFFFFFF


class MersenneTwister:
    """MT19937 generator producing 32-bit words.

    Constructed without a seed, the state is all zeros, which yields zeros
    until the generator is seeded.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._key = [0] * STATE_LEN
        self._pos = 0
        if seed is not None:
            self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the state from a 32-bit seed."""
        value = seed & _MASK32
        for pos in range(STATE_LEN):
            self._key[pos] = value
            value = (1812433253 * (value ^ (value >> 30)) + pos + 1) & _MASK32
        self._pos = STATE_LEN

    def _twist(self) -> None:
        key = self._key
        for i in range(STATE_LEN):
            y = (key[i] & _UPPER_MASK) | (key[(i + 1) % STATE_LEN] & _LOWER_MASK)
            key[i] = key[(i + _M) % STATE_LEN] ^ (y >> 1) ^ (_MATRIX_A if y & 1 else 0)
        self._pos = 0

    def random_u32(self) -> int:
        """Next tempered 32-bit output."""
        if self._pos == STATE_LEN:
            self._twist()
        y = self._key[self._pos]
        self._pos += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32

    def random_double(self) -> float:
        """Uniform double in [0, 1) built from two 32-bit outputs."""
        a = self.random_u32() >> 5
        b = self.random_u32() >> 6
        return (a * 67108864.0 + b) / 9007199254740992.0


_local_state = MersenneTwister()


def rseed(seed: int) -> None:
    """Seed the shared generator."""
    _local_state.seed(seed)


def rndl() -> int:
    """Random 64-bit value from the OS, falling back to the shared generator."""
    try:
        return int.from_bytes(os.urandom(8), "little")
    except (OSError, NotImplementedError):
        return _local_state.random_u32()


def rnd() -> float:
    """Uniform double in [0, 1) from the shared generator."""
    return _local_state.random_double()