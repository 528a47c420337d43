"""BlurHash encode/decode pipeline."""

import numbers

import numpy as np
from typing import Optional, Tuple

from models.blurhash_params import BlurHashParams
from models.blurhash_result import BlurHashResult
from models.components import Components
from engines.base83 import decode83, encode83
from engines.color_space import srgb_to_linear, linear_to_srgb, to_uint8, drop_alpha
from engines.components import pack_components, unpack_components
from engines.dct_engine import image_to_coefficients, coefficients_to_image
from engines.quantizer import (
    decode_max_ac, encode_max_ac,
    decode_average_color, encode_average_color,
    decode_ac, encode_ac
)
from utils.constants import (
    SIZE_FLAG_WIDTH, MAX_AC_WIDTH, AVERAGE_COLOR_WIDTH, AC_WIDTH, HEADER_WIDTH
)
from utils.image_io import shrink_to_max_side
from utils.metrics import compute_psnr_ssim, Timer, hash_size_stats


def blurhash_encode(
    image: np.ndarray,
    components_x: int = 4,
    components_y: int = 4,
    linear: bool = False
) -> str:
    """Encode an image into a blurhash string.

    `image` is (H, W), (H, W, 3) or (H, W, 4) sRGB uint8; alpha is ignored.
    With `linear=True` it must already hold linear-light floats in [0,1].

    Raises ValueError for out-of-range component counts, an empty image or
    non-finite pixel values.
    """
    if not (isinstance(components_x, numbers.Integral)
            and isinstance(components_y, numbers.Integral)):
        raise ValueError(
            f"Components must be integers, got {components_x!r}x{components_y!r}"
        )
    components = Components(components_x, components_y)
    if not components.is_valid():
        raise ValueError(
            f"Components must be 1-9 on each axis, got {components_x}x{components_y}"
        )
    if image is None:
        raise ValueError("Cannot encode a null image")
    image = np.asarray(image)
    if image.size == 0:
        raise ValueError("Cannot encode an empty image")

    rgb = drop_alpha(image).astype(np.float64)
    pixels = rgb if linear else srgb_to_linear(rgb / 255.0)
    if not np.all(np.isfinite(pixels)):
        raise ValueError("Cannot encode an image with non-finite pixel values")

    coeffs = image_to_coefficients(pixels, components_x, components_y)
    dc = coeffs[0, 0]
    ac = coeffs.reshape(-1, 3)[1:]

    # === HEADER ===
    blurhash = encode83(pack_components(components), SIZE_FLAG_WIDTH)

    if len(ac) > 0:
        quantized_max_ac = encode_max_ac(float(np.max(np.abs(ac))))
        max_ac = decode_max_ac(quantized_max_ac)
    else:
        quantized_max_ac = 0
        max_ac = 1.0
    blurhash += encode83(quantized_max_ac, MAX_AC_WIDTH)

    blurhash += encode83(encode_average_color(linear_to_srgb(dc)), AVERAGE_COLOR_WIDTH)

    # === AC TERMS (row-major, x fastest) ===
    for term in ac:
        blurhash += encode83(encode_ac(term, max_ac), AC_WIDTH)

    return blurhash


def _is_positive_whole(value) -> bool:
    return (isinstance(value, numbers.Real) and np.isfinite(value)
            and value >= 1 and int(value) == value)


def _expected_length(components: Components) -> int:
    return HEADER_WIDTH + AC_WIDTH * (components.count - 1)


def _decode_field(blurhash: str, start: int, width: int) -> int:
    value = decode83(blurhash[start:start + width])
    if value is None:
        raise ValueError(
            f"Invalid base-83 character in {blurhash[start:start + width]!r} at offset {start}"
        )
    return value


def _parse_components(blurhash: str) -> Components:
    if blurhash is None or len(blurhash) < HEADER_WIDTH:
        raise ValueError(f"Blurhash must be at least {HEADER_WIDTH} characters")
    if (len(blurhash) - HEADER_WIDTH) % AC_WIDTH != 0:
        raise ValueError(f"Blurhash length {len(blurhash)} is not a valid field layout")

    components = unpack_components(_decode_field(blurhash, 0, SIZE_FLAG_WIDTH))
    if not components.is_valid():
        raise ValueError(f"Size flag decodes to invalid components {components.x}x{components.y}")
    expected = _expected_length(components)
    if len(blurhash) != expected:
        raise ValueError(
            f"Blurhash with {components.x}x{components.y} components must be "
            f"{expected} characters, got {len(blurhash)}"
        )
    return components


def blurhash_decode(
    blurhash: str,
    size: Tuple[int, int],
    punch: float = 1.0
) -> np.ndarray:
    """Decode a blurhash into an (height, width, 3) uint8 RGB image.

    `size` is (width, height). `punch` scales the AC terms to raise or
    lower contrast.

    Raises ValueError for a malformed string or an invalid size.
    """
    width, height = size
    if not (_is_positive_whole(width) and _is_positive_whole(height)):
        raise ValueError(f"Output size must be positive integers, got {size}")
    if not (np.isfinite(punch) and punch > 0):
        raise ValueError(f"Punch must be positive, got {punch}")
    width, height = int(width), int(height)

    components = _parse_components(blurhash)

    offset = SIZE_FLAG_WIDTH
    max_ac = decode_max_ac(_decode_field(blurhash, offset, MAX_AC_WIDTH)) * punch
    offset += MAX_AC_WIDTH

    coeffs = np.zeros((components.count, 3), dtype=np.float64)
    average = decode_average_color(_decode_field(blurhash, offset, AVERAGE_COLOR_WIDTH))
    coeffs[0] = srgb_to_linear(average)
    offset += AVERAGE_COLOR_WIDTH

    for index in range(1, components.count):
        coeffs[index] = decode_ac(_decode_field(blurhash, offset, AC_WIDTH), max_ac)
        offset += AC_WIDTH

    grid = coeffs.reshape(components.y, components.x, 3)
    linear = coefficients_to_image(grid, width, height)
    return to_uint8(linear_to_srgb(linear))


def encode(
    image: np.ndarray,
    components_x: int = 4,
    components_y: int = 4,
    linear: bool = False
) -> str:
    """Like blurhash_encode, but returns an empty string on failure."""
    try:
        return blurhash_encode(image, components_x, components_y, linear)
    except (ValueError, TypeError, OverflowError):
        return ""


def decode(
    blurhash: str,
    size: Tuple[int, int],
    punch: float = 1.0
) -> Optional[np.ndarray]:
    """Like blurhash_decode, but returns None for malformed input."""
    try:
        return blurhash_decode(blurhash, size, punch)
    except (ValueError, TypeError, OverflowError):
        return None


def components_of(blurhash: str) -> Optional[Components]:
    """Read the component counts of a well-formed blurhash, or None."""
    try:
        return _parse_components(blurhash)
    except (ValueError, TypeError):
        return None


def average_color_of(blurhash: str) -> Optional[Tuple[int, int, int]]:
    """The 8-bit sRGB average color of a well-formed blurhash, or None."""
    if components_of(blurhash) is None:
        return None
    start = SIZE_FLAG_WIDTH + MAX_AC_WIDTH
    value = decode83(blurhash[start:start + AVERAGE_COLOR_WIDTH])
    if value is None:
        return None
    r, g, b = (int(c) for c in to_uint8(decode_average_color(value)))
    return r, g, b


def encode_preview(image_rgb: np.ndarray, params: BlurHashParams) -> BlurHashResult:
    """Encode an image, decode the hash back at full size and measure it."""
    timer = Timer()
    image_rgb = drop_alpha(np.asarray(image_rgb))
    original_shape = image_rgb.shape[:2]
    if image_rgb.size == 0:
        raise ValueError("Cannot encode an empty image")

    # === ENCODING ===
    source = shrink_to_max_side(image_rgb, params.max_side)
    blurhash = timer.measure_encode(
        blurhash_encode, source, params.components_x, params.components_y, params.linear
    )

    # === DECODING ===
    h, w = original_shape
    preview = timer.measure_decode(blurhash_decode, blurhash, (w, h), params.punch)

    # === METRICS ===
    if params.linear:
        reference = to_uint8(linear_to_srgb(image_rgb))
    else:
        reference = image_rgb.astype(np.uint8)
    metrics = compute_psnr_ssim(reference, preview)
    size_info = hash_size_stats(blurhash, original_shape)

    return BlurHashResult(
        original_image=image_rgb,
        preview_image=preview,
        blurhash=blurhash,
        components=params.components,
        psnr_rgb=metrics['psnr_rgb'],
        ssim_rgb=metrics['ssim_rgb'],
        hash_length=size_info['hash_length'],
        compression_ratio=size_info['compression_ratio'],
        encode_time_ms=timer.encode_time_ms,
        decode_time_ms=timer.decode_time_ms
    )
