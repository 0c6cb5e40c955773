"""
RFC 2045 Base64 alphabet, lookup tables and character classification.

Both tables are built once at import time and are read-only afterwards:

    LOOKUP_TABLE  - 6-bit value (0-63) -> alphabet character
    REVERSE_TABLE - character code (0-127) -> 6-bit value, or INVALID

Characters whose code falls outside REVERSE_TABLE are never data characters.
"""

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PAD = '='
WHITESPACE = frozenset(' \r\n\t')

BASE_LENGTH = 128
LOOKUP_LENGTH = 64
INVALID = -1


def _build_reverse_table():
    table = [INVALID] * BASE_LENGTH
    for value, char in enumerate(ALPHABET):
        table[ord(char)] = value
    return tuple(table)


LOOKUP_TABLE = tuple(ALPHABET)
REVERSE_TABLE = _build_reverse_table()


def is_whitespace(char: str) -> bool:
    """True for space, carriage return, line feed and horizontal tab."""
    return char in WHITESPACE


def is_pad(char: str) -> bool:
    return char == PAD


def is_data(char: str) -> bool:
    """True if char maps to a 6-bit value in the alphabet."""
    code = ord(char)
    return code < BASE_LENGTH and REVERSE_TABLE[code] != INVALID


def is_base64_char(char: str) -> bool:
    """True for any character that may appear in encoded text."""
    return is_whitespace(char) or is_pad(char) or is_data(char)


def value_of(char: str) -> int:
    """Returns the 6-bit value of a data character."""
    return REVERSE_TABLE[ord(char)]
