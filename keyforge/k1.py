"""Fast arithmetic specialised for the secp256k1 prime and group order."""

from __future__ import annotations

from collections.abc import Sequence

from keyforge.arith import to_signed, wrap

SECP256K1_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# 2^256 - P: folding constant used to reduce a product modulo P.
_FOLD = 0x1000003D1
_MASK64 = (1 << 64) - 1
_MASK256 = (1 << 256) - 1
_ORDER_WORDS = 4


def mod_mul_k1(a: int, b: int) -> int:
    """a * b modulo the secp256k1 prime, folded into 256 bits.

    Only the low 256 bits of each operand are used. The result is congruent
    to a * b but, like the folding it mirrors, is not forced below P.
    """
    product = (a & _MASK256) * (b & _MASK256)
    low = product & _MASK256
    high = product >> 256

    folded = high * _FOLD
    partial = low + (folded & _MASK256)
    carry = partial >> 256
    partial &= _MASK256

    tail = ((folded >> 256) + carry) * _FOLD
    return (partial + tail) & _MASK256


def mod_square_k1(a: int) -> int:
    """a^2 modulo the secp256k1 prime, folded into 256 bits."""
    return mod_mul_k1(a, a)


def mod_add_order(a: int, b: int, order: int) -> int:
    """a + b modulo ``order`` for operands in [0, order)."""
    result = wrap(a + b - order)
    if to_signed(result) < 0:
        result = wrap(result + order)
    return result


def _montgomery(a: int, b: int, modulus: int, neg_inv: int) -> int:
    """a * b * 2^-256 (mod modulus) over four 64-bit words of ``b``."""
    t = 0
    for word in range(_ORDER_WORDS):
        b_word = (b >> (64 * word)) & _MASK64
        t += a * b_word
        ml = (t * neg_inv) & _MASK64
        t = (t + ml * modulus) >> 64
    return t - modulus if t >= modulus else t


def mod_mul_order(a: int, b: int, order: int = SECP256K1_ORDER) -> int:
    """a * b modulo an odd 256-bit ``order`` via Montgomery multiplication."""
    if order <= 1 or order % 2 == 0:
        raise ValueError("order must be an odd integer greater than 1")
    if order.bit_length() > 256:
        raise ValueError("order must fit in 256 bits")
    neg_inv = (-pow(order, -1, 1 << 64)) & _MASK64
    r2 = pow(2, 512, order)
    reduced = _montgomery(a & _MASK256, b & _MASK256, order, neg_inv)
    return _montgomery(r2, reduced, order, neg_inv)


def _inverse(value: int, p: int) -> int:
    try:
        return pow(value, -1, p)
    except ValueError:
        return 0


def batch_inverse(values: Sequence[int], p: int = SECP256K1_P) -> list[int]:
    """Inverses of all ``values`` modulo ``p`` with a single modular inversion.

    If the product of the values has no inverse, every result is zero.
    """
    if p < 2:
        raise ValueError(f"modulus must be at least 2, got {p}")
    items = [v % p for v in values]
    if not items:
        return []

    prefix = [items[0]]
    for value in items[1:]:
        prefix.append((prefix[-1] * value) % p)

    inverse = _inverse(prefix[-1], p)
    result = [0] * len(items)
    for i in range(len(items) - 1, 0, -1):
        result[i] = (prefix[i - 1] * inverse) % p
        inverse = (inverse * items[i]) % p
    result[0] = inverse
    return result