import pytest

from b64codec.alphabet import (
    ALPHABET,
    INVALID,
    LOOKUP_TABLE,
    REVERSE_TABLE,
    is_base64_char,
    is_data,
    is_pad,
    is_whitespace,
    value_of,
)


def test_alphabet_is_a_bijection():
    assert len(set(ALPHABET)) == 64
    assert sorted(v for v in REVERSE_TABLE if v != INVALID) == list(range(64))
    for value, char in enumerate(LOOKUP_TABLE):
        assert value_of(char) == value


def test_tables_are_immutable():
    with pytest.raises(TypeError):
        REVERSE_TABLE[ord('A')] = 5
    with pytest.raises(TypeError):
        LOOKUP_TABLE[0] = 'B'


@pytest.mark.parametrize("char", [' ', '\r', '\n', '\t'])
def test_whitespace(char):
    assert is_whitespace(char)
    assert not is_data(char)
    assert is_base64_char(char)


@pytest.mark.parametrize("char", ['\f', '\v', 'A', '='])
def test_not_whitespace(char):
    assert not is_whitespace(char)


def test_pad_is_not_data():
    assert is_pad('=')
    assert not is_data('=')
    assert is_base64_char('=')


@pytest.mark.parametrize("char", ['A', 'z', '0', '9', '+', '/'])
def test_data(char):
    assert is_data(char)
    assert not is_pad(char)


@pytest.mark.parametrize("char", ['#', '-', '_', '\x00', '\x7f', '\x80', 'é', '€'])
def test_non_data(char):
    assert not is_data(char)
    assert not is_base64_char(char)
