"""
RFC 2045 Base64 encoding and decoding.

This module implements the codec on top of the lookup tables in
b64codec.alphabet. Both directions work on fully materialized input:
- encode: bytes-like -> str, never fails on valid input
- decode: str -> bytes, raises a DecodingError subclass on malformed input

Whitespace (space, CR, LF, tab) is ignored anywhere in encoded text, as MIME
transports may wrap lines. Encoded output never contains whitespace.

Absent input (None) propagates as None in both directions.
"""

from dataclasses import dataclass
from typing import Optional

from b64codec import errors
from b64codec.alphabet import LOOKUP_TABLE, PAD, is_data, is_pad, is_whitespace, value_of

QUADRUPLE = 4
TRIPLET = 3


@dataclass(frozen=True)
class DecodeResult:
    """
    Outcome of decode_result().

    Exactly one of data / error is set, except for absent input where both
    are None.
    """
    data: Optional[bytes] = None
    error: Optional[errors.DecodingError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _as_bytes(data) -> bytes:
    if isinstance(data, str):
        raise TypeError("encode() expects bytes, not str; encode the text first")
    if isinstance(data, int):
        raise TypeError("encode() expects a byte sequence, not int")
    return bytes(data)


def encode(data) -> Optional[str]:
    """
    Encode a byte sequence to Base64 text.

    Args:
        data: bytes-like object or iterable of ints in 0-255, or None

    Returns:
        str: Encoded text (length is always a multiple of 4), None for None
    """
    if data is None:
        return None

    data = _as_bytes(data)
    if not data:
        return ""

    number_triplets, remainder = divmod(len(data), TRIPLET)
    encoded = []

    for i in range(0, number_triplets * TRIPLET, TRIPLET):
        b1, b2, b3 = data[i], data[i + 1], data[i + 2]
        encoded.append(LOOKUP_TABLE[b1 >> 2])
        encoded.append(LOOKUP_TABLE[((b1 & 0x03) << 4) | (b2 >> 4)])
        encoded.append(LOOKUP_TABLE[((b2 & 0x0F) << 2) | (b3 >> 6)])
        encoded.append(LOOKUP_TABLE[b3 & 0x3F])

    # form integral number of 6-bit groups
    if remainder == 1:
        b1 = data[-1]
        encoded.append(LOOKUP_TABLE[b1 >> 2])
        encoded.append(LOOKUP_TABLE[(b1 & 0x03) << 4])
        encoded.append(PAD)
        encoded.append(PAD)
    elif remainder == 2:
        b1, b2 = data[-2], data[-1]
        encoded.append(LOOKUP_TABLE[b1 >> 2])
        encoded.append(LOOKUP_TABLE[((b1 & 0x03) << 4) | (b2 >> 4)])
        encoded.append(LOOKUP_TABLE[(b2 & 0x0F) << 2])
        encoded.append(PAD)

    return ''.join(encoded)


def remove_whitespace(text) -> str:
    """
    Remove MIME whitespace from encoded text, keeping the order of the rest.

    Args:
        text: Encoded text, possibly wrapped or indented (None gives "")

    Returns:
        str: Text with every space, CR, LF and tab removed
    """
    if text is None:
        return ""
    return ''.join(char for char in text if not is_whitespace(char))


def _check_data(text: str, position: int) -> int:
    char = text[position]
    if not is_data(char):
        raise errors.InvalidCharacterError(char, position)
    return value_of(char)


def decode(text) -> Optional[bytes]:
    """
    Decode Base64 text to bytes.

    Args:
        text: Encoded str (bytes are read as Latin-1), or None

    Returns:
        bytes: Decoded data, None for None

    Raises:
        InvalidLengthError: stripped length is not a multiple of 4
        InvalidCharacterError: non-data character, or padding out of place
        InvalidPaddingError: unused bits of the last data character are set
    """
    if text is None:
        return None
    if isinstance(text, (bytes, bytearray)):
        text = text.decode('latin-1')

    text = remove_whitespace(text)
    length = len(text)

    if length % QUADRUPLE != 0:
        raise errors.InvalidLengthError(length)

    number_quadruples = length // QUADRUPLE
    if number_quadruples == 0:
        return b''

    decoded = bytearray()
    last = (number_quadruples - 1) * QUADRUPLE

    for i in range(0, last, QUADRUPLE):
        b1 = _check_data(text, i)
        b2 = _check_data(text, i + 1)
        b3 = _check_data(text, i + 2)
        b4 = _check_data(text, i + 3)

        decoded.append(((b1 << 2) | (b2 >> 4)) & 0xFF)
        decoded.append(((b2 & 0x0F) << 4) | (b3 >> 2))
        decoded.append(((b3 << 6) | b4) & 0xFF)

    # The final quadruple may carry one or two padding characters
    b1 = _check_data(text, last)
    b2 = _check_data(text, last + 1)
    d3, d4 = text[last + 2], text[last + 3]

    if is_data(d3) and is_data(d4):
        b3, b4 = value_of(d3), value_of(d4)
        decoded.append(((b1 << 2) | (b2 >> 4)) & 0xFF)
        decoded.append(((b2 & 0x0F) << 4) | (b3 >> 2))
        decoded.append(((b3 << 6) | b4) & 0xFF)
    elif is_pad(d3) and is_pad(d4):
        # e.g. "3c==": last 4 bits of the second character must be zero
        if b2 & 0x0F:
            raise errors.InvalidPaddingError(text[last + 1], last + 1)
        decoded.append(((b1 << 2) | (b2 >> 4)) & 0xFF)
    elif is_data(d3) and is_pad(d4):
        # e.g. "3cQ=": last 2 bits of the third character must be zero
        b3 = value_of(d3)
        if b3 & 0x03:
            raise errors.InvalidPaddingError(d3, last + 2)
        decoded.append(((b1 << 2) | (b2 >> 4)) & 0xFF)
        decoded.append(((b2 & 0x0F) << 4) | (b3 >> 2))
    elif not is_data(d3):
        # "3c=r", "3cXd", "3cXX" where X is neither data nor padding
        raise errors.InvalidCharacterError(d3, last + 2)
    else:
        raise errors.InvalidCharacterError(d4, last + 3)

    return bytes(decoded)


def decode_result(text) -> DecodeResult:
    """Decode without raising; the failure cause is in result.error.kind."""
    try:
        return DecodeResult(data=decode(text))
    except errors.DecodingError as err:
        return DecodeResult(error=err)


def encoded_length(size: int) -> int:
    """Length of the encoded text for `size` input bytes."""
    return -(-size // TRIPLET) * QUADRUPLE


def decoded_length(text) -> int:
    """
    Number of bytes a valid encoded text decodes to.

    The text is not validated; only whitespace and trailing padding are
    taken into account.
    """
    text = remove_whitespace(text)
    if not text:
        return 0
    padding = len(text) - len(text.rstrip(PAD))
    return len(text) // QUADRUPLE * TRIPLET - min(padding, 2)
