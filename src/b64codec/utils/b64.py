"""
Base64 helpers for text with UTF-8 support.

Thin wrappers around b64codec.codec that handle the UTF-8 step, useful for
storing text in ASCII-only formats.
"""

from b64codec import codec


def base64_encode(to_encode: str) -> str:
    """
    Encode a string to base64 using UTF-8 encoding.

    Args:
        to_encode: String to encode

    Returns:
        str: Base64 encoded text
    """
    return codec.encode(to_encode.encode('utf-8'))


def base64_decode(encoded: str) -> str:
    """
    Decode base64 text to a UTF-8 string.

    Args:
        encoded: Base64 encoded text to decode

    Returns:
        str: Decoded UTF-8 string
    """
    return codec.decode(encoded).decode('utf-8')
