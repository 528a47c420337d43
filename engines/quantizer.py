"""Quantization of the average color, AC terms and max AC scale."""

import numpy as np

from engines.color_space import to_uint8
from utils.constants import MAX_AC_LEVELS, MAX_AC_QUANT, AC_LEVELS


def sign_pow(value, exp: float):
    """pow() on |value| that keeps the sign of value."""
    return np.sign(value) * np.power(np.abs(value), exp)


def decode_max_ac(value: int) -> float:
    return (value + 1) / MAX_AC_LEVELS


def encode_max_ac(value: float) -> int:
    quantized = int(np.floor(value * MAX_AC_LEVELS - 0.5))
    return max(0, min(MAX_AC_QUANT, quantized))


def decode_average_color(value: int) -> np.ndarray:
    """24-bit packed RGB to sRGB channels in [0,1]."""
    r = (value >> 16) & 255
    g = (value >> 8) & 255
    b = value & 255
    return np.array([r, g, b], dtype=np.float64) / 255.0


def encode_average_color(color: np.ndarray) -> int:
    """sRGB channels in [0,1] to a 24-bit packed integer."""
    r, g, b = (int(c) for c in to_uint8(color))
    return (r << 16) + (g << 8) + b


def decode_ac(value: int, max_ac: float) -> np.ndarray:
    """Three base-19 digits to a signed linear RGB triple scaled by max_ac."""
    digits = np.array([
        value // (AC_LEVELS * AC_LEVELS),
        (value // AC_LEVELS) % AC_LEVELS,
        value % AC_LEVELS
    ], dtype=np.float64)
    half = (AC_LEVELS - 1) / 2.0
    return sign_pow((digits - half) / half, 2.0) * max_ac


def encode_ac(color: np.ndarray, max_ac: float) -> int:
    """Signed linear RGB triple to a value in [0, 19**3)."""
    half = (AC_LEVELS - 1) / 2.0
    normalized = np.asarray(color, dtype=np.float64) / max_ac
    digits = np.floor(sign_pow(normalized, 0.5) * half + half + 0.5)
    d0, d1, d2 = (int(d) for d in np.clip(digits, 0, AC_LEVELS - 1))
    return d0 * AC_LEVELS * AC_LEVELS + d1 * AC_LEVELS + d2
