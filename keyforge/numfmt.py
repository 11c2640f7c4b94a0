"""Parsing and formatting of 320-bit integers in various bases and layouts."""

from __future__ import annotations

from keyforge.arith import to_signed, wrap

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_WORDS32 = 10
_WORDS64 = 5
_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1


def _check_base(base: int) -> None:
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}, got {base}")


def parse_base(text: str, base: int) -> int:
    """Parse ``text`` as an unsigned number in ``base``, wrapped to 320 bits.

    Digits are case-insensitive; an empty string parses as zero.
    Raises ValueError on a character outside the base's digit set.
    """
    _check_base(base)
    charset = _DIGITS[:base]
    value = 0
    for char in text:
        digit = charset.find(char.lower())
        if digit < 0:
            raise ValueError(f"invalid digit {char!r} for base {base}")
        value = value * base + digit
    return wrap(value)


def parse_base10(text: str) -> int:
    """Parse a decimal string."""
    return parse_base(text, 10)


def parse_base16(text: str) -> int:
    """Parse a hexadecimal string (either case)."""
    return parse_base(text, 16)


def format_base(value: int, base: int) -> str:
    """Format a signed 320-bit value in ``base`` with lower-case digits."""
    _check_base(base)
    signed = to_signed(value)
    magnitude = abs(signed)
    digits = []
    while True:
        magnitude, digit = divmod(magnitude, base)
        digits.append(_DIGITS[digit])
        if magnitude == 0:
            break
    sign = "-" if signed < 0 else ""
    return sign + "".join(reversed(digits))


def format_base10(value: int) -> str:
    """Signed decimal representation."""
    return format_base(value, 10)


def format_base16(value: int) -> str:
    """Signed lower-case hexadecimal representation."""
    return format_base(value, 16)


def _words32(value: int) -> list[int]:
    raw = wrap(value)
    return [(raw >> (32 * i)) & _MASK32 for i in range(_WORDS32)]


def format_base2(value: int) -> str:
    """Bits of the nine low 32-bit words, lowest word first, each word MSB first."""
    return "".join(f"{word:032b}" for word in _words32(value)[: _WORDS32 - 1])


def block_string(value: int) -> str:
    """The low 256 bits as eight upper-case 32-bit blocks, most significant first."""
    words = _words32(value)[:8]
    return " ".join(f"{word:08X}" for word in reversed(words))


def c64_string(value: int, digits: int) -> str:
    """A brace-enclosed list of the lowest ``digits`` 64-bit words as C literals."""
    if not 0 <= digits <= _WORDS64:
        raise ValueError(f"digit count must be between 0 and {_WORDS64}, got {digits}")
    raw = wrap(value)
    parts = []
    for i in range(digits):
        word = (raw >> (64 * i)) & _MASK64
        parts.append(f"0x{word:x}ULL" if word else "0ULL")
    return "{" + ",".join(parts) + "}"