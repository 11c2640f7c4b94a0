"""Elliptic-curve points in projective coordinates."""

from __future__ import annotations

from dataclasses import dataclass

from keyforge.field import PrimeField


@dataclass(frozen=True)
class Point:
    """A point (x, y, z); affine points have z == 1."""

    x: int = 0
    y: int = 0
    z: int = 0

    @classmethod
    def cleared(cls) -> Point:
        """The all-zero point."""
        return cls(0, 0, 0)

    def is_zero(self) -> bool:
        """True when both x and y are zero."""
        return self.x == 0 and self.y == 0

    def equals(self, other: Point) -> bool:
        """True when all three coordinates match exactly."""
        return self.x == other.x and self.y == other.y and self.z == other.z

    def reduce(self, field: PrimeField) -> Point:
        """Affine form of this point: (x/z, y/z, 1) in ``field``."""
        inverse = field.inv(self.z)
        return Point(field.mul(self.x, inverse), field.mul(self.y, inverse), 1)