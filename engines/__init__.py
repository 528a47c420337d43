"""Codec engines - pure computation, no I/O."""

from .base83 import decode83, encode83
from .components import pack_components, unpack_components
from .color_space import srgb_to_linear, linear_to_srgb, to_uint8, drop_alpha
from .quantizer import (
    sign_pow,
    decode_max_ac,
    encode_max_ac,
    decode_average_color,
    encode_average_color,
    decode_ac,
    encode_ac,
)
from .dct_engine import calculate_weights, image_to_coefficients, coefficients_to_image
from .pipeline import (
    blurhash_encode,
    blurhash_decode,
    encode,
    decode,
    components_of,
    average_color_of,
    encode_preview,
)

__all__ = [
    'decode83',
    'encode83',
    'pack_components',
    'unpack_components',
    'srgb_to_linear',
    'linear_to_srgb',
    'to_uint8',
    'drop_alpha',
    'sign_pow',
    'decode_max_ac',
    'encode_max_ac',
    'decode_average_color',
    'encode_average_color',
    'decode_ac',
    'encode_ac',
    'calculate_weights',
    'image_to_coefficients',
    'coefficients_to_image',
    'blurhash_encode',
    'blurhash_decode',
    'encode',
    'decode',
    'components_of',
    'average_color_of',
    'encode_preview',
]
