import pytest
from hypothesis import given
from hypothesis import strategies as st

from keyforge.arith import MASK, wrap
from keyforge.numfmt import (
    block_string,
    c64_string,
    format_base,
    format_base2,
    format_base10,
    format_base16,
    parse_base,
    parse_base10,
    parse_base16,
)

P_HEX = "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F"


def test_parse_and_format_secp_prime():
    p = parse_base16(P_HEX)
    assert format_base16(p) == P_HEX.lower()


def test_parse_base16_is_case_insensitive():
    assert parse_base16(P_HEX.lower()) == parse_base16(P_HEX)


def test_parse_empty_is_zero():
    assert parse_base10("") == 0


def test_format_zero():
    assert format_base10(0) == "0"


def test_parse_rejects_invalid_digit():
    with pytest.raises(ValueError):
        parse_base16("12G4")
    with pytest.raises(ValueError):
        parse_base10("12a")


def test_invalid_base():
    with pytest.raises(ValueError):
        format_base(5, 1)
    with pytest.raises(ValueError):
        parse_base("1", 37)


def test_parse_wraps_to_320_bits():
    assert parse_base16("1" + "0" * 80) == 0


def test_negative_values_have_sign():
    assert format_base10(-5) == "-5"
    assert format_base10(wrap(-5)) == "-5"


@given(st.integers(min_value=0, max_value=(1 << 319) - 1))
def test_decimal_round_trip(value):
    assert parse_base10(format_base10(value)) == value


@given(st.integers(min_value=0, max_value=(1 << 319) - 1), st.integers(min_value=2, max_value=36))
def test_any_base_round_trip(value, base):
    assert parse_base(format_base(value, base), base) == value


@given(st.integers(min_value=0, max_value=MASK))
def test_block_string_matches_hex(value):
    text = block_string(value)
    assert len(text) == 71
    low = value & ((1 << 256) - 1)
    assert parse_base16(text.replace(" ", "")) == low


def test_block_string_of_prime():
    assert block_string(parse_base16(P_HEX)).replace(" ", "") == P_HEX


def test_base2_layout():
    bits = format_base2(1)
    assert len(bits) == 288
    assert bits[31] == "1"
    assert bits.count("1") == 1


@given(st.integers(min_value=0, max_value=(1 << 288) - 1))
def test_base2_words_round_trip(value):
    bits = format_base2(value)
    words = [int(bits[i:i + 32], 2) for i in range(0, 288, 32)]
    assert sum(word << (32 * i) for i, word in enumerate(words)) == value


def test_c64_string_zero():
    assert c64_string(0, 3) == "{0ULL,0ULL,0ULL}"


def test_c64_string_one():
    assert c64_string(1, 1) == "{0x1ULL}"


def test_c64_string_prime_words():
    p = parse_base16(P_HEX)
    text = c64_string(p, 4)
    words = [int(part[:-3], 16) for part in text[1:-1].split(",")]
    assert sum(word << (64 * i) for i, word in enumerate(words)) == p


def test_c64_string_rejects_too_many_digits():
    with pytest.raises(ValueError):
        c64_string(1, 6)