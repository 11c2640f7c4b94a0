import pytest
from hypothesis import given
from hypothesis import strategies as st

from keyforge.textutil import (
    Tokenizer,
    hex_digit_value,
    hex_to_bytes,
    index_of,
    is_valid_hex,
    ltrim,
    rtrim,
    to_hex,
    trim,
)


def test_ltrim_default_whitespace():
    assert ltrim(" \t\n\v\f\rabc  ") == "abc  "


def test_rtrim_default_whitespace():
    assert rtrim("  abc \t\n\v\f\r") == "  abc"


def test_trim_custom_separators():
    assert trim("::ab:c::", ":") == "ab:c"


def test_trim_all_separators_gives_empty():
    assert trim(" \t \n ") == ""


def test_empty_separators_trim_nothing():
    assert trim("  x  ", "") == "  x  "


@given(st.text(alphabet="ab \t", max_size=20))
def test_trim_result_has_no_edge_whitespace(text):
    result = trim(text)
    assert not result.startswith((" ", "\t"))
    assert not result.endswith((" ", "\t"))
    assert result in text


def test_index_of_found_and_missing():
    items = ["xpoint", "address", "bsgs"]
    assert index_of("bsgs", items) == 2
    assert index_of("rmd160", items) == -1


def test_index_of_returns_first_match():
    assert index_of("a", ["b", "a", "a"]) == 1


def test_tokenizer_splits_on_separators():
    tokenizer = Tokenizer("  one two:three\tfour \n")
    assert list(tokenizer) == ["one", "two", "three", "four"]
    assert len(tokenizer) == 4


def test_tokenizer_next_token_until_exhausted():
    tokenizer = Tokenizer("a:b")
    assert tokenizer.has_more_tokens()
    assert tokenizer.next_token() == "a"
    assert tokenizer.next_token() == "b"
    assert not tokenizer.has_more_tokens()
    assert tokenizer.next_token() is None


def test_tokenizer_empty_input():
    tokenizer = Tokenizer(" :\r\n")
    assert len(tokenizer) == 0
    assert list(tokenizer) == []


def test_tokenizer_iteration_consumes():
    tokenizer = Tokenizer("x y z")
    assert tokenizer.next_token() == "x"
    assert list(tokenizer) == ["y", "z"]


def test_to_hex_lowercase():
    assert to_hex(b"\x00\xab\xff") == "00abff"


@given(st.binary(min_size=1, max_size=64))
def test_hex_round_trip(data):
    assert hex_to_bytes(to_hex(data)) == data
    assert hex_to_bytes(to_hex(data).upper()) == data


def test_hex_to_bytes_rejects_odd_length():
    with pytest.raises(ValueError):
        hex_to_bytes("abc")


def test_hex_to_bytes_rejects_bad_digit():
    with pytest.raises(ValueError):
        hex_to_bytes("0g")


def test_hex_to_bytes_rejects_empty():
    with pytest.raises(ValueError):
        hex_to_bytes("")


def test_hex_digit_value():
    assert hex_digit_value("0") == 0
    assert hex_digit_value("a") == hex_digit_value("A") == 10
    assert hex_digit_value("F") == 15
    with pytest.raises(ValueError):
        hex_digit_value("z")


def test_is_valid_hex():
    assert is_valid_hex("0123456789abcdefABCDEF")
    assert is_valid_hex("")
    assert not is_valid_hex("12x4")