from __future__ import annotations

import string

_WEIGHTS = (7, 3, 1)
_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)


def char_value(char: str) -> int:
    if char in _DIGITS:
        return int(char)
    if char in _LETTERS:
        return ord(char.upper()) - 55
    # Filler and anything outside [0-9A-Za-z] weigh nothing.
    return 0


def check_digit(value: str) -> int:
    """ICAO 9303 7-3-1 check digit of ``value``."""
    total = 0
    for i, ch in enumerate(value):
        total += char_value(ch) * _WEIGHTS[i % 3]
    return total % 10


def matches(value: str, expected: int) -> bool:
    return check_digit(value) == expected
