"""secp256k1 curve arithmetic, the Keccak-f[1600] permutation and text helpers."""

__version__ = "0.1.0"
__all__ = [
    "arith",
    "curve",
    "field",
    "k1",
    "keccak",
    "numfmt",
    "point",
    "rng",
    "textutil",
]