"""sRGB transfer function and 8-bit conversion."""

import numpy as np


def srgb_to_linear(srgb: np.ndarray) -> np.ndarray:
    """sRGB [0,1] to linear light [0,1]."""
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4)
    )


def linear_to_srgb(linear: np.ndarray) -> np.ndarray:
    """Linear light to sRGB [0,1], clamping out-of-gamut values."""
    linear = np.clip(np.asarray(linear, dtype=np.float64), 0.0, 1.0)
    return np.where(
        linear <= 0.0031308,
        linear * 12.92,
        1.055 * np.power(linear, 1 / 2.4) - 0.055
    )


def to_uint8(srgb: np.ndarray) -> np.ndarray:
    """sRGB [0,1] to 0-255 integers, rounding half up."""
    scaled = np.floor(np.asarray(srgb, dtype=np.float64) * 255.0 + 0.5)
    return np.clip(scaled, 0, 255).astype(np.uint8)


def drop_alpha(image: np.ndarray) -> np.ndarray:
    """Return an (H, W, 3) view: greyscale is broadcast, alpha discarded."""
    if image.ndim == 2:
        return np.repeat(image[:, :, np.newaxis], 3, axis=2)
    if image.ndim != 3 or image.shape[2] not in (3, 4):
        raise ValueError(f"Expected (H, W), (H, W, 3) or (H, W, 4) image, got {image.shape}")
    return image[:, :, :3]
