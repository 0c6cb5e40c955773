"""
RFC 2045 Base64 codec.

    >>> from b64codec import encode, decode
    >>> encode(b"Man")
    'TWFu'
    >>> decode("TQ==")
    b'M'
"""

from b64codec.codec import DecodeResult, decode, decode_result, encode, remove_whitespace
from b64codec.errors import (
    DecodingError,
    ErrorKind,
    InvalidCharacterError,
    InvalidLengthError,
    InvalidPaddingError,
)

__all__ = [
    "DecodeResult",
    "DecodingError",
    "ErrorKind",
    "InvalidCharacterError",
    "InvalidLengthError",
    "InvalidPaddingError",
    "decode",
    "decode_result",
    "encode",
    "remove_whitespace",
]
