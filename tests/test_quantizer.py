"""Tests for color quantization and the sRGB transfer function."""

import numpy as np
import pytest
from engines.color_space import srgb_to_linear, linear_to_srgb, to_uint8, drop_alpha
from engines.quantizer import (
    sign_pow, decode_max_ac, encode_max_ac,
    decode_average_color, encode_average_color,
    decode_ac, encode_ac
)


def test_sign_pow_keeps_sign():
    assert sign_pow(-4.0, 0.5) == pytest.approx(-2.0)
    assert sign_pow(4.0, 0.5) == pytest.approx(2.0)
    assert sign_pow(0.0, 0.5) == 0.0
    assert np.allclose(sign_pow(np.array([-0.5, 0.5]), 2.0), [-0.25, 0.25])


def test_srgb_8bit_roundtrip_is_exact():
    """Every 8-bit level survives sRGB -> linear -> sRGB."""
    levels = np.arange(256)
    recovered = to_uint8(linear_to_srgb(srgb_to_linear(levels / 255.0)))
    assert np.array_equal(recovered, levels)


def test_linear_to_srgb_clamps():
    assert np.allclose(linear_to_srgb(np.array([-0.5, 1.5])), [0.0, 1.0])


def test_drop_alpha_shapes():
    rgba = np.zeros((4, 5, 4), dtype=np.uint8)
    gray = np.zeros((4, 5), dtype=np.uint8)
    assert drop_alpha(rgba).shape == (4, 5, 3)
    assert drop_alpha(gray).shape == (4, 5, 3)
    with pytest.raises(ValueError):
        drop_alpha(np.zeros((4, 5, 2)))


def test_max_ac_roundtrip_within_quantization():
    for value in np.linspace(0.01, 0.49, 25):
        assert abs(decode_max_ac(encode_max_ac(value)) - value) <= 1.0 / 166.0


def test_max_ac_clamps():
    assert encode_max_ac(0.0) == 0
    assert encode_max_ac(-1.0) == 0
    assert encode_max_ac(10.0) == 82
    assert decode_max_ac(0) == pytest.approx(1.0 / 166.0)
    assert decode_max_ac(82) == pytest.approx(0.5)


@pytest.mark.parametrize("value", [0x000000, 0xFFFFFF, 0x808080, 0x123456])
def test_average_color_roundtrip(value):
    assert encode_average_color(decode_average_color(value)) == value


def test_decode_average_color_channels():
    assert np.allclose(decode_average_color(0xFF8000), [1.0, 128 / 255.0, 0.0])


def test_decode_ac_digits():
    assert np.allclose(decode_ac(3429, 1.0), [0.0, 0.0, 0.0])
    assert np.allclose(decode_ac(0, 0.5), [-0.5, -0.5, -0.5])
    assert np.allclose(decode_ac(6858, 0.5), [0.5, 0.5, 0.5])
    # digits (18, 9, 0)
    assert np.allclose(decode_ac(18 * 361 + 9 * 19, 1.0), [1.0, 0.0, -1.0])


@pytest.mark.parametrize("value", [0, 1, 100, 3429, 5000, 6858])
def test_ac_roundtrip(value):
    max_ac = decode_max_ac(20)
    assert encode_ac(decode_ac(value, max_ac), max_ac) == value


def test_encode_ac_clamps_digits():
    assert encode_ac(np.array([10.0, -10.0, 0.0]), 1.0) == 18 * 361 + 0 * 19 + 9
