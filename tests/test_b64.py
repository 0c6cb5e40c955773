import pytest

from b64codec import errors
from b64codec.utils.b64 import base64_decode, base64_encode


def test_encode_basic():
    assert base64_encode("hello world") == "aGVsbG8gd29ybGQ="


def test_encode_empty():
    assert base64_encode("") == ""


def test_unicode_round_trip():
    assert base64_decode(base64_encode("café ☕")) == "café ☕"


def test_decode_basic():
    assert base64_decode("aGVsbG8g\nd29ybGQ=") == "hello world"


def test_decode_invalid_base64():
    with pytest.raises(errors.InvalidCharacterError):
        base64_decode("bad!")


def test_decode_invalid_utf8():
    with pytest.raises(UnicodeDecodeError):
        base64_decode("//8=")
