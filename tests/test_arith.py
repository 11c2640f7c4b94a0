import pytest
from hypothesis import given
from hypothesis import strategies as st

from keyforge.arith import (
    MASK,
    WIDTH,
    binary_gcd,
    bit_length,
    div_mod,
    from_bytes32,
    random_bits,
    random_in_range,
    to_bytes32,
    to_signed,
    wrap,
)

signed320 = st.integers(min_value=-(1 << 319), max_value=(1 << 319) - 1)
unsigned320 = st.integers(min_value=0, max_value=MASK)


def test_wrap_minus_one_is_all_ones():
    assert wrap(-1) == MASK


def test_to_signed_all_ones_is_minus_one():
    assert to_signed(MASK) == -1


@given(signed320)
def test_signed_round_trip(value):
    assert to_signed(wrap(value)) == value


def test_bit_length_values():
    assert bit_length(0) == 0
    assert bit_length(255) == 8
    assert bit_length(-1) == 1


@given(signed320)
def test_bit_length_matches_magnitude(value):
    assert bit_length(value) == abs(value).bit_length()


def test_div_mod_small_dividend():
    assert div_mod(3, 10) == (0, 3)


def test_div_mod_equal():
    assert div_mod(42, 42) == (1, 0)


def test_div_mod_zero_raises():
    with pytest.raises(ZeroDivisionError):
        div_mod(5, 0)


@given(unsigned320, st.integers(min_value=1, max_value=MASK))
def test_div_mod_invariant(value, divisor):
    q, r = div_mod(value, divisor)
    assert q * divisor + r == value
    assert 0 <= r < divisor


def test_to_bytes32_minus_one():
    assert to_bytes32(-1) == b"\xff" * 32


def test_to_bytes32_is_big_endian():
    assert to_bytes32(1) == bytes(31) + b"\x01"


@given(st.binary(min_size=32, max_size=32))
def test_bytes32_round_trip(data):
    assert to_bytes32(from_bytes32(data)) == data


def test_from_bytes32_wrong_length():
    with pytest.raises(ValueError):
        from_bytes32(b"\x00" * 31)


def test_gcd_with_zero_returns_other():
    assert binary_gcd(0, 12) == 12
    assert binary_gcd(-7, 0) == -7


@given(signed320.filter(bool), signed320.filter(bool))
def test_gcd_divides_both(a, b):
    g = binary_gcd(a, b)
    assert g > 0
    assert a % g == 0
    assert b % g == 0
    assert binary_gcd(a // g, b // g) == 1


@given(st.integers(min_value=0, max_value=WIDTH))
def test_random_bits_in_range(nbit):
    assert 0 <= random_bits(nbit) < (1 << nbit)


def test_random_bits_zero():
    assert random_bits(0) == 0


def test_random_bits_rejects_negative():
    with pytest.raises(ValueError):
        random_bits(-1)


@given(st.integers(min_value=0, max_value=1 << 200), st.integers(min_value=1, max_value=1 << 100))
def test_random_in_range_bounds(low, span):
    value = random_in_range(low, low + span)
    assert low <= value < low + span


def test_random_in_range_empty_raises():
    with pytest.raises(ValueError):
        random_in_range(5, 5)