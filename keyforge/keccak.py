"""The Keccak-f[1600] permutation."""

from __future__ import annotations

from collections.abc import Sequence

_MASK64 = (1 << 64) - 1
_ROUNDS = 24

# (lane, rotation) walk of the combined rho and pi steps, starting at lane 1.
_RHO_PI = (
    (10, 1), (7, 3), (11, 6), (17, 10), (18, 15), (3, 21), (5, 28), (16, 36),
    (8, 45), (21, 55), (24, 2), (4, 14), (15, 27), (23, 41), (19, 56), (13, 8),
    (12, 25), (2, 43), (20, 62), (14, 18), (22, 39), (9, 61), (6, 20), (1, 44),
)


def _rc_bit(t: int) -> int:
    """Bit t of the round-constant LFSR over x^8 + x^6 + x^5 + x^4 + 1."""
    register = 1
    for _ in range(t % 255):
        register <<= 1
        if register & 0x100:
            register ^= 0x171
    return register & 1


def _round_constant(i: int) -> int:
    return sum(_rc_bit(j + 7 * i) << ((1 << j) - 1) for j in range(7))


_RC = tuple(_round_constant(i) for i in range(_ROUNDS))


def rol64(value: int, count: int) -> int:
    """Rotate a 64-bit value left by ``count`` bits."""
    value &= _MASK64
    count %= 64
    return ((value << count) | (value >> (64 - count))) & _MASK64


def _theta(a: list[int]) -> None:
    c = [a[x] ^ a[x + 5] ^ a[x + 10] ^ a[x + 15] ^ a[x + 20] for x in range(5)]
    d = [c[(x - 1) % 5] ^ rol64(c[(x + 1) % 5], 1) for x in range(5)]
    for lane in range(25):
        a[lane] ^= d[lane % 5]


def _rho_pi(a: list[int]) -> None:
    carried = a[1]
    for lane, rotation in _RHO_PI:
        carried, a[lane] = a[lane], rol64(carried, rotation)


def _chi(a: list[int]) -> None:
    for row in range(0, 25, 5):
        b = a[row:row + 5]
        for x in range(5):
            a[row + x] = b[x] ^ (~b[(x + 1) % 5] & b[(x + 2) % 5] & _MASK64)


def keccakf1600(state: Sequence[int]) -> list[int]:
    """Apply the 24-round permutation to 25 lanes and return the new lanes."""
    if len(state) != 25:
        raise ValueError(f"state must have 25 lanes, got {len(state)}")
    lanes = [lane & _MASK64 for lane in state]
    for constant in _RC:
        _theta(lanes)
        _rho_pi(lanes)
        _chi(lanes)
        lanes[0] ^= constant
    return lanes