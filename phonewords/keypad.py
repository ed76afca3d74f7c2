from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

KEYPAD: Mapping[str, str] = MappingProxyType({
    "0": "",
    "1": "",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
})


class InvalidDigitsError(ValueError):
    """Raised when a phone number contains something other than 0-9."""


def letters_of(digit: str | int, keypad: Mapping[str, str] = KEYPAD) -> str:
    """Letters printed on the key for `digit`, in keypad order. Empty for 0 and 1."""
    key = str(digit)
    try:
        return keypad[key]
    except KeyError:
        raise InvalidDigitsError(f"Not a keypad digit: {key!r}") from None


def validate_digits(digits: str, keypad: Mapping[str, str] = KEYPAD) -> str:
    if not isinstance(digits, str):
        raise InvalidDigitsError(f"Expected a string of digits, got {type(digits).__name__}")
    for pos, ch in enumerate(digits):
        if ch not in keypad:
            raise InvalidDigitsError(f"Invalid character {ch!r} at position {pos} in {digits!r}")
    return digits


def word_to_digits(word: str, keypad: Mapping[str, str] = KEYPAD) -> str:
    """Dial a lowercase word back into the digits that spell it."""
    reverse = {letter: digit for digit, letters in keypad.items() for letter in letters}
    digits = []
    for ch in word:
        if ch not in reverse:
            raise InvalidDigitsError(f"No key carries the letter {ch!r} (word {word!r})")
        digits.append(reverse[ch])
    return "".join(digits)
