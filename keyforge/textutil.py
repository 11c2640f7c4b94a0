"""String trimming, tokenizing and hexadecimal helpers."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence

DEFAULT_SEPARATORS = "\t\n\v\f\r "
TOKEN_TRIM = "\t\n\r :"
TOKEN_SEPARATORS = " \t:"

_TOKEN_SPLIT = re.compile("[" + re.escape(TOKEN_SEPARATORS) + "]+")
_HEX_VALUES = {
    **{c: i for i, c in enumerate("0123456789")},
    **{c: 10 + i for i, c in enumerate("ABCDEF")},
    **{c: 10 + i for i, c in enumerate("abcdef")},
}


def ltrim(text: str, seps: str | None = None) -> str:
    """Remove leading characters found in ``seps`` (whitespace by default)."""
    return text.lstrip(DEFAULT_SEPARATORS if seps is None else seps)


def rtrim(text: str, seps: str | None = None) -> str:
    """Remove trailing characters found in ``seps`` (whitespace by default)."""
    return text.rstrip(DEFAULT_SEPARATORS if seps is None else seps)


def trim(text: str, seps: str | None = None) -> str:
    """Remove leading and trailing characters found in ``seps``."""
    return ltrim(rtrim(text, seps), seps)


def index_of(text: str, items: Sequence[str]) -> int:
    """Return the position of the first item equal to ``text``, or -1."""
    return next((i for i, item in enumerate(items) if item == text), -1)


class Tokenizer:
    """Splits a line on spaces, tabs and colons after trimming its ends."""

    def __init__(self, data: str) -> None:
        cleaned = trim(data, TOKEN_TRIM)
        self._tokens = [token for token in _TOKEN_SPLIT.split(cleaned) if token]
        self._current = 0

    def next_token(self) -> str | None:
        """Return the next token, or None when all have been consumed."""
        if self._current >= len(self._tokens):
            return None
        token = self._tokens[self._current]
        self._current += 1
        return token

    def has_more_tokens(self) -> bool:
        """True while unread tokens remain."""
        return self._current < len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        while self.has_more_tokens():
            token = self.next_token()
            assert token is not None
            yield token

    def __len__(self) -> int:
        return len(self._tokens)


def to_hex(data: bytes) -> str:
    """Lower-case hexadecimal representation of ``data``."""
    return bytes(data).hex()


def hex_digit_value(char: str) -> int:
    """Value of a single hexadecimal digit; ValueError if it is not one."""
    try:
        return _HEX_VALUES[char]
    except (KeyError, TypeError):
        raise ValueError(f"not a hexadecimal digit: {char!r}") from None


def hex_to_bytes(text: str) -> bytes:
    """Decode a hexadecimal string with no separators."""
    if not text:
        raise ValueError("empty hexadecimal string")
    if len(text) % 2:
        raise ValueError("hexadecimal string has odd length")
    values = [hex_digit_value(c) for c in text]
    return bytes((high << 4) | low for high, low in zip(values[::2], values[1::2]))


def is_valid_hex(text: str) -> bool:
    """True if every character of ``text`` is a hexadecimal digit."""
    return all(c in _HEX_VALUES for c in text)