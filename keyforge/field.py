"""Arithmetic modulo a prime, including square roots and Montgomery products."""

from __future__ import annotations


class PrimeField:
    """Integers modulo ``p``; operands are expected to lie in ``[0, p)``."""

    def __init__(self, p: int) -> None:
        if p < 2:
            raise ValueError(f"field characteristic must be at least 2, got {p}")
        self.p = p
        words32 = max(1, (p.bit_length() + 31) // 32)
        self.montgomery_words = max(1, words32 // 2)
        self._r_full = 1 << (64 * self.montgomery_words)
        self.r = self._r_full % p

    def add(self, a: int, b: int) -> int:
        """a + b (mod p)."""
        total = a + b
        return total - self.p if total >= self.p else total

    def sub(self, a: int, b: int) -> int:
        """a - b (mod p)."""
        diff = a - b
        return diff + self.p if diff < 0 else diff

    def neg(self, a: int) -> int:
        """p - a; note that zero maps to p itself."""
        return self.p - a

    def double(self, a: int) -> int:
        """2a (mod p)."""
        return self.add(a, a)

    def mul(self, a: int, b: int) -> int:
        """a * b (mod p)."""
        return (a * b) % self.p

    def square(self, a: int) -> int:
        """a^2 (mod p)."""
        return (a * a) % self.p

    def cube(self, a: int) -> int:
        """a^3 (mod p)."""
        return (a * a * a) % self.p

    def exp(self, a: int, e: int) -> int:
        """a^e (mod p) by square-and-multiply over the bits of ``e``."""
        if e < 0:
            raise ValueError(f"exponent must not be negative, got {e}")
        result = 1
        base = a
        while e:
            if e & 1:
                result = self.mul(result, base)
            base = self.square(base)
            e >>= 1
        return result

    def inv(self, a: int) -> int:
        """Inverse of a (mod p), or 0 when none exists."""
        try:
            return pow(a, -1, self.p)
        except ValueError:
            return 0

    def has_sqrt(self, a: int) -> bool:
        """Euler's criterion: True when a is a non-zero quadratic residue."""
        return self.exp(a, (self.p - 1) >> 1) == 1

    def sqrt(self, a: int) -> int:
        """A square root of a (mod p), or 0 when p is even or none exists."""
        p = self.p
        if p % 2 == 0 or not self.has_sqrt(a):
            return 0
        if p % 4 == 3:
            return self.exp(a, (p + 1) >> 2)

        # Tonelli-Shanks
        s = p - 1
        e = 0
        while s % 2 == 0:
            s >>= 1
            e += 1
        q = 2
        while self.has_sqrt(q):
            q += 1
        c = self.exp(q, s)
        t = self.exp(a, s)
        r = self.exp(a, (s + 1) >> 1)
        m = e
        while t != 1:
            t2 = t
            i = 0
            while t2 != 1:
                t2 = self.square(t2)
                i += 1
            b = c
            for _ in range(m - i - 1):
                b = self.square(b)
            m = i
            c = self.square(b)
            t = self.mul(t, c)
            r = self.mul(r, b)
        return r

    def montgomery_mult(self, a: int, b: int) -> int:
        """a * b * R^-1 (mod p), with R = 2^(64 * montgomery_words); p must be odd."""
        if self.p % 2 == 0:
            raise ValueError("Montgomery multiplication needs an odd modulus")
        r_inv = pow(self._r_full, -1, self.p)
        return (a * b * r_inv) % self.p