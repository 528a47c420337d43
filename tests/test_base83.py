"""Tests for base-83 transcoding."""

import pytest
from engines.base83 import decode83, encode83
from utils.constants import BASE83_ALPHABET


def test_alphabet_has_83_unique_symbols():
    assert len(BASE83_ALPHABET) == 83
    assert len(set(BASE83_ALPHABET)) == 83


def test_known_ac_value():
    """Neutral AC term (9, 9, 9) encodes as 'fQ'."""
    assert encode83(3429, 2) == "fQ"
    assert decode83("fQ") == 3429


@pytest.mark.parametrize("length", [1, 2, 4])
def test_roundtrip_at_range_edges(length):
    for value in [0, 1, 82, 83 ** length - 1]:
        assert decode83(encode83(value, length)) == value


def test_encode_pads_to_length():
    assert encode83(0, 4) == "0000"
    assert encode83(82, 2) == "0~"


def test_encode_rejects_value_too_large():
    with pytest.raises(ValueError):
        encode83(83, 1)


def test_encode_rejects_negative():
    with pytest.raises(ValueError):
        encode83(-1, 2)


def test_decode_rejects_unknown_character():
    assert decode83("@@@!") is None
    assert decode83("ab c") is None


def test_decode_empty_string():
    assert decode83("") is None
