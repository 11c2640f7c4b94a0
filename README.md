# keyforge

Pure-Python secp256k1 elliptic-curve arithmetic, with the Keccak-f[1600]
permutation and small helpers for text and hexadecimal strings.

## Installation

```
pip install keyforge
```

Run the test suite after installing the test extra:

```
pip install "keyforge[test]"
pytest
```

## Modules

- `keyforge.textutil`: trimming (`ltrim`, `rtrim`, `trim`), `index_of`, a
  `Tokenizer` that trims a line and splits it on spaces, tabs and colons, and
  hex helpers (`to_hex`, `hex_to_bytes`, `hex_digit_value`, `is_valid_hex`).
- `keyforge.rng`: a `MersenneTwister` (MT19937) generator plus `rseed`, `rnd`
  (uniform double from the shared generator) and `rndl` (64 random bits from
  the operating system, falling back to the shared generator).
- `keyforge.keccak`: the Keccak-f[1600] permutation. `keccakf1600(state)`
  takes 25 64-bit lanes and returns the permuted lanes as a new list;
  `rol64` rotates a 64-bit value.
- `keyforge.arith`: 320-bit two's complement helpers (`wrap`, `to_signed`,
  `bit_length`, `div_mod`, `to_bytes32`, `from_bytes32`, `binary_gcd`,
  `random_bits`, `random_in_range`).
- `keyforge.numfmt`: `parse_base`, `parse_base10`, `parse_base16`,
  `format_base`, `format_base10`, `format_base16`, `format_base2`,
  `block_string` and `c64_string`.
- `keyforge.field`: `PrimeField` for arithmetic modulo a prime: `add`, `sub`,
  `neg`, `double`, `mul`, `square`, `cube`, `exp`, `inv` (0 when there is no
  inverse), `has_sqrt`, `sqrt` (Tonelli-Shanks where needed) and
  `montgomery_mult`.
- `keyforge.k1`: arithmetic specific to secp256k1 (`mod_mul_k1`,
  `mod_square_k1`, `mod_add_order`, `mod_mul_order`), `batch_inverse`, and the
  constants `SECP256K1_P` and `SECP256K1_ORDER`.
- `keyforge.point`: the frozen `Point` dataclass with `x`, `y`, `z`,
  `cleared()`, `is_zero()`, `equals()` and `reduce(field)`.
- `keyforge.curve`: `Secp256k1`, `AddressType` (`P2PKH`, `P2SH`, `BECH32`)
  and `InvalidPublicKeyError`.

## Example

```python
from keyforge.curve import AddressType, Secp256k1

curve = Secp256k1()
pub = curve.compute_public_key(1)
print(curve.public_key_hex(True, pub))
# 0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798

print(curve.hash160(AddressType.P2PKH, True, pub).hex())
# 751e76e8199196d454941c45d1b3a323f1433bd6

point, compressed = curve.parse_public_key_hex(curve.public_key_hex(False, pub))
assert compressed is False
assert curve.is_on_curve(point)

doubled = curve.scalar_multiplication(curve.G, 2)
assert doubled.equals(curve.compute_public_key(2))
```

`Secp256k1` builds a table of generator multiples when it is created, so
constructing it takes a moment; reuse one instance. A public key that cannot
be parsed, or that does not lie on the curve, raises `InvalidPublicKeyError`.
For `P2SH`, `hash160` hashes the 1-to-1 redeem script `00 14 <key hash>`;
`hash160_from_x` supports `P2PKH` only and raises `ValueError` otherwise.

## What it does not do

- There are no SHA-3, SHAKE or Keccak-256 hash functions; `keyforge.keccak`
  offers only the raw permutation, so a sponge with padding would have to be
  built on top of it.
- There is no command-line program and no key search; the package is a
  library of building blocks.