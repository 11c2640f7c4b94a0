"""Fixed-width two's complement integer helpers (320-bit words)."""

from __future__ import annotations

import math

from keyforge.rng import rndl

WIDTH = 320
MASK = (1 << WIDTH) - 1
_SIGN_BIT = 1 << (WIDTH - 1)
_BYTES32_MASK = (1 << 256) - 1


def wrap(value: int) -> int:
    """Reduce ``value`` to its unsigned 320-bit two's complement form."""
    return value & MASK


def to_signed(value: int) -> int:
    """Interpret the low 320 bits of ``value`` as a signed integer."""
    value = wrap(value)
    return value - (1 << WIDTH) if value & _SIGN_BIT else value


def bit_length(value: int) -> int:
    """Number of significant bits of the magnitude of a signed 320-bit value."""
    return abs(to_signed(value)).bit_length()


def div_mod(value: int, divisor: int) -> tuple[int, int]:
    """Unsigned 320-bit division returning ``(quotient, remainder)``."""
    dividend = wrap(value)
    div = wrap(divisor)
    if div > dividend:
        return 0, dividend
    if div == 0:
        raise ZeroDivisionError("division by zero")
    return divmod(dividend, div)


def to_bytes32(value: int) -> bytes:
    """Low 256 bits of ``value`` as 32 big-endian bytes."""
    return (value & _BYTES32_MASK).to_bytes(32, "big")


def from_bytes32(data: bytes) -> int:
    """Read 32 big-endian bytes as an unsigned integer."""
    raw = bytes(data)
    if len(raw) != 32:
        raise ValueError(f"expected 32 bytes, got {len(raw)}")
    return int.from_bytes(raw, "big")


def binary_gcd(a: int, b: int) -> int:
    """Greatest common divisor of two signed 320-bit values.

    When one argument is zero the other is returned unchanged (as a signed
    value); otherwise the result is non-negative.
    """
    u = to_signed(a)
    v = to_signed(b)
    if u == 0:
        return v
    if v == 0:
        return u
    return math.gcd(u, v)


def random_bits(nbit: int) -> int:
    """Random non-negative integer of at most ``nbit`` bits."""
    if not 0 <= nbit <= WIDTH:
        raise ValueError(f"bit count must be between 0 and {WIDTH}, got {nbit}")
    full_words, left_bits = divmod(nbit, 32)
    value = 0
    for word in range(full_words):
        value |= (rndl() & 0xFFFFFFFF) << (32 * word)
    if left_bits:
        value |= (rndl() & ((1 << left_bits) - 1)) << (32 * full_words)
    return value


def random_in_range(low: int, high: int) -> int:
    """Random integer in ``[low, high)`` from 256 random bits."""
    diff = wrap(high - low)
    if diff == 0 or high <= low:
        raise ValueError(f"empty range [{low}, {high})")
    _, remainder = div_mod(random_bits(256), diff)
    return wrap(remainder + low)