"""The secp256k1 curve: point arithmetic, key encoding and address hashes."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from enum import IntEnum

from Crypto.Hash import RIPEMD160

from keyforge.arith import to_bytes32
from keyforge.field import PrimeField
from keyforge.k1 import SECP256K1_ORDER, SECP256K1_P
from keyforge.point import Point
from keyforge.textutil import hex_to_bytes

_GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
_GY = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8
_MASK256 = (1 << 256) - 1
_TABLE_ROWS = 32
_TABLE_COLS = 256


class AddressType(IntEnum):
    """Kind of address a hash160 is computed for."""

    P2PKH = 0
    P2SH = 1
    BECH32 = 2


class InvalidPublicKeyError(ValueError):
    """A public key string could not be parsed or is not on the curve."""


def _hash160(data: bytes) -> bytes:
    return RIPEMD160.new(hashlib.sha256(data).digest()).digest()


class Secp256k1:
    """secp256k1 with a precomputed table of multiples of the generator."""

    def __init__(self) -> None:
        self.P = SECP256K1_P
        self.order = SECP256K1_ORDER
        self.field = PrimeField(self.P)
        self.G = Point(_GX, _GY, 1)
        self._table = self._build_table()

    def _build_table(self) -> list[Point]:
        table: list[Point] = []
        n = self.G
        for _ in range(_TABLE_ROWS):
            base = n
            table.append(base)
            n = self.double_direct(n)
            for _ in range(1, _TABLE_COLS - 1):
                table.append(n)
                n = self.add_direct(n, base)
            table.append(n)
        return table

    # -- key derivation -------------------------------------------------

    def compute_public_key(self, priv_key: int) -> Point:
        """Affine public point for the low 256 bits of ``priv_key``."""
        raw = priv_key & _MASK256
        if raw == 0:
            raise ValueError("private key must not be zero")
        q: Point | None = None
        for i, byte in enumerate(raw.to_bytes(32, "little")):
            if not byte:
                continue
            entry = self._table[_TABLE_COLS * i + byte - 1]
            q = entry if q is None else self.add2(q, entry)
        assert q is not None
        return q.reduce(self.field)

    def next_key(self, key: Point) -> Point:
        """key + G; ``key`` must be affine and different from G."""
        return self.add_direct(key, self.G)

    def is_on_curve(self, point: Point) -> bool:
        """True when y^2 == x^3 + 7 (mod P) for the affine coordinates."""
        return (point.y * point.y - (point.x ** 3 + 7)) % self.P == 0

    def scalar_multiplication(self, point: Point, scalar: int) -> Point:
        """scalar * point by double-and-add, returned in affine form.

        A zero scalar yields the point (0, 0, 1).
        """
        if scalar == 0:
            return Point(0, 0, 1).reduce(self.field)
        acc: Point | None = point if scalar & 1 else None
        q = point
        for bit in range(1, scalar.bit_length()):
            q = self.double(q)
            if (scalar >> bit) & 1:
                acc = q if acc is None else self.add(acc, q)
        assert acc is not None
        return acc.reduce(self.field)

    # -- encoding -------------------------------------------------------

    def public_key_raw(self, compressed: bool, point: Point) -> bytes:
        """SEC encoding: 33 bytes compressed or 65 bytes uncompressed."""
        if compressed:
            prefix = b"\x02" if point.y % 2 == 0 else b"\x03"
            return prefix + to_bytes32(point.x)
        return b"\x04" + to_bytes32(point.x) + to_bytes32(point.y)

    def public_key_hex(self, compressed: bool, point: Point) -> str:
        """Lower-case hexadecimal SEC encoding of ``point``."""
        return self.public_key_raw(compressed, point).hex()

    def parse_public_key_hex(self, text: str) -> tuple[Point, bool]:
        """Parse a SEC public key; returns the affine point and whether it was compressed."""
        if len(text) < 2:
            raise InvalidPublicKeyError("public key must be 66 or 130 characters long")
        try:
            data = hex_to_bytes(text if len(text) % 2 == 0 else text[:2])
        except ValueError as exc:
            raise InvalidPublicKeyError(f"unexpected hexadecimal digit: {exc}") from None
        prefix = data[0]
        if prefix in (0x02, 0x03):
            if len(text) != 66:
                raise InvalidPublicKeyError("compressed public key must be 66 characters long")
            x = int.from_bytes(data[1:33], "big")
            point = Point(x, self.get_y(x, prefix == 0x02), 1)
            compressed = True
        elif prefix == 0x04:
            if len(text) != 130:
                raise InvalidPublicKeyError("uncompressed public key must be 130 characters long")
            x = int.from_bytes(data[1:33], "big")
            y = int.from_bytes(data[33:65], "big")
            point = Point(x, y, 1)
            compressed = False
        else:
            raise InvalidPublicKeyError("unexpected prefix, only 02, 03 or 04 allowed")
        if not self.is_on_curve(point):
            raise InvalidPublicKeyError("point does not lie on the curve")
        return point, compressed

    # -- hashing --------------------------------------------------------

    def hash160(self, address_type: AddressType, compressed: bool, point: Point) -> bytes:
        """RIPEMD160(SHA256(...)) of the key, or of its 1-to-1 redeem script for P2SH."""
        kind = AddressType(address_type)
        key_hash = _hash160(self.public_key_raw(compressed, point))
        if kind is AddressType.P2SH:
            return _hash160(b"\x00\x14" + key_hash)
        return key_hash

    def hash160_batch(
        self, address_type: AddressType, compressed: bool, points: Iterable[Point]
    ) -> list[bytes]:
        """hash160 of each point, in order."""
        return [self.hash160(address_type, compressed, point) for point in points]

    def hash160_from_x(
        self, address_type: AddressType, prefix: int, xs: Iterable[int]
    ) -> list[bytes]:
        """P2PKH hash160 of compressed keys built from ``prefix`` and each x."""
        if AddressType(address_type) is not AddressType.P2PKH:
            raise ValueError(f"unsupported address type for x-only hashing: {address_type}")
        if not 0 <= prefix <= 0xFF:
            raise ValueError(f"prefix must be a byte, got {prefix}")
        head = bytes([prefix])
        return [_hash160(head + to_bytes32(x)) for x in xs]

    # -- point arithmetic ----------------------------------------------

    def add_direct(self, p1: Point, p2: Point) -> Point:
        """Affine addition of two distinct affine points."""
        f = self.field
        dy = f.sub(p2.y, p1.y)
        dx = f.inv(f.sub(p2.x, p1.x))
        s = f.mul(dy, dx)
        rx = f.sub(f.sub(f.square(s), p1.x), p2.x)
        ry = f.sub(f.mul(f.sub(p2.x, rx), s), p2.y)
        return Point(rx, ry, 1)

    def add2(self, p1: Point, p2: Point) -> Point:
        """Projective addition where ``p2`` is affine (z == 1)."""
        f = self.field
        u1 = f.mul(p2.y, p1.z)
        v1 = f.mul(p2.x, p1.z)
        u = f.sub(u1, p1.y)
        v = f.sub(v1, p1.x)
        us2 = f.square(u)
        vs2 = f.square(v)
        vs3 = f.mul(vs2, v)
        us2w = f.mul(us2, p1.z)
        vs2v2 = f.mul(vs2, p1.x)
        a = f.sub(f.sub(us2w, vs3), f.add(vs2v2, vs2v2))
        rx = f.mul(v, a)
        vs3u2 = f.mul(vs3, p1.y)
        ry = f.sub(f.mul(f.sub(vs2v2, a), u), vs3u2)
        rz = f.mul(vs3, p1.z)
        return Point(rx, ry, rz)

    def add(self, p1: Point, p2: Point) -> Point:
        """General projective addition of two distinct points."""
        f = self.field
        u1 = f.mul(p2.y, p1.z)
        u2 = f.mul(p1.y, p2.z)
        v1 = f.mul(p2.x, p1.z)
        v2 = f.mul(p1.x, p2.z)
        u = f.sub(u1, u2)
        v = f.sub(v1, v2)
        w = f.mul(p1.z, p2.z)
        us2 = f.square(u)
        vs2 = f.square(v)
        vs3 = f.mul(vs2, v)
        us2w = f.mul(us2, w)
        vs2v2 = f.mul(vs2, v2)
        a = f.sub(f.sub(us2w, vs3), f.add(vs2v2, vs2v2))
        rx = f.mul(v, a)
        vs3u2 = f.mul(vs3, u2)
        ry = f.sub(f.mul(f.sub(vs2v2, a), u), vs3u2)
        rz = f.mul(vs3, w)
        return Point(rx, ry, rz)

    def double_direct(self, point: Point) -> Point:
        """Affine doubling of an affine point."""
        f = self.field
        x2 = f.square(point.x)
        s = f.mul(f.add(f.add(x2, x2), x2), f.inv(f.add(point.y, point.y)))
        rx = f.sub(f.square(s), f.add(point.x, point.x))
        ry = f.sub(0, f.add(f.mul(f.sub(rx, point.x), s), point.y))
        return Point(rx, ry, 1)

    def double(self, point: Point) -> Point:
        """Projective doubling (curve coefficient a = 0)."""
        f = self.field
        x2 = f.square(point.x)
        w = f.add(f.add(x2, x2), x2)
        s = f.mul(point.y, point.z)
        b = f.mul(f.mul(point.y, s), point.x)
        h = f.sub(f.square(w), f.mul(8, b))
        rx = f.double(f.mul(h, s))
        s2 = f.square(s)
        y2 = f.square(point.y)
        eight_y2s2 = f.mul(8, f.mul(y2, s2))
        ry = f.sub(f.mul(f.sub(f.mul(4, b), h), w), eight_y2s2)
        rz = f.mul(8, f.mul(s2, s))
        return Point(rx, ry, rz)

    def negation(self, point: Point) -> Point:
        """(x, P - y, 1)."""
        return Point(point.x, self.P - point.y, 1)

    def get_y(self, x: int, is_even: bool) -> int:
        """The y coordinate for ``x`` with the requested parity."""
        f = self.field
        y = f.sqrt(f.add(f.cube(x), 7))
        if (y % 2 == 0) != is_even:
            y = f.neg(y)
        return y