"""
Custom exception classes for reporting malformed Base64 input.

This module defines the hierarchy of exceptions raised by the decoder so
callers can branch on the failure cause without inspecting messages:

    CustomError
        DecodingError (also a ValueError)
            InvalidLengthError    - stripped length not a multiple of 4
            InvalidCharacterError - non alphabet character / misplaced padding
            InvalidPaddingError   - unused bits before the padding are not zero
"""

from enum import Enum

### Legacy error codes ###
'''
decoding.divisible.four: Encoded text length is not divisible by four
decoding.general:        Any other malformed input (characters or padding)
'''
CODE_DIVISIBLE_FOUR = 'decoding.divisible.four'
CODE_GENERAL = 'decoding.general'


class ErrorKind(Enum):
    """Cause of a decoding failure."""
    INVALID_LENGTH = 'InvalidLength'
    INVALID_CHARACTER = 'InvalidCharacter'
    INVALID_PADDING = 'InvalidPadding'


class CustomError(Exception):
    """Base class for all custom exceptions in the package."""
    def __init__(self, message):
        super().__init__(message)
        self.message = message


class DecodingError(CustomError, ValueError):
    """
    Raised when encoded text is rejected by the decoder.

    Attributes:
        kind: ErrorKind describing the failure cause
        code: Coarse legacy code (CODE_DIVISIBLE_FOUR or CODE_GENERAL)
        position: Index into the whitespace-stripped text, or None
    """
    kind = None
    code = CODE_GENERAL

    def __init__(self, message, position=None):
        super().__init__(message)
        self.position = position


class InvalidLengthError(DecodingError):
    """Raised when the stripped input length is not a multiple of 4."""
    kind = ErrorKind.INVALID_LENGTH
    code = CODE_DIVISIBLE_FOUR

    def __init__(self, length):
        super().__init__(f"Encoded length {length} is not a multiple of 4.")
        self.length = length


class InvalidCharacterError(DecodingError):
    """Raised when a position holds neither a data character nor permitted padding."""
    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, char, position):
        super().__init__(f"Invalid character {char!r} at position {position}.", position)
        self.char = char


class InvalidPaddingError(DecodingError):
    """Raised when padding is well placed but the unused low-order bits are set."""
    kind = ErrorKind.INVALID_PADDING

    def __init__(self, char, position):
        super().__init__(f"Non-zero padding bits in {char!r} at position {position}.", position)
        self.char = char
