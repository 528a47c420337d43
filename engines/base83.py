"""Base-83 integer/string transcoding."""

from typing import Optional

from utils.constants import BASE83_ALPHABET, BASE83_INDEX


def decode83(encoded: str) -> Optional[int]:
    """Parse a base-83 string, most significant digit first.

    Returns None if the string is empty or holds a character outside
    the alphabet.
    """
    if not encoded:
        return None
    value = 0
    for char in encoded:
        digit = BASE83_INDEX.get(char)
        if digit is None:
            return None
        value = value * 83 + digit
    return value


def encode83(value: int, length: int) -> str:
    """Encode a non-negative integer as exactly `length` base-83 characters."""
    value = int(value)
    if value < 0:
        raise ValueError(f"Cannot base-83 encode negative value {value}")
    if value >= 83 ** length:
        raise ValueError(f"Value {value} does not fit in {length} base-83 digits")

    digits = []
    for _ in range(length):
        value, digit = divmod(value, 83)
        digits.append(BASE83_ALPHABET[digit])
    return ''.join(reversed(digits))
