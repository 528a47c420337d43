"""Shared utilities."""

from .constants import BASE83_ALPHABET, BASE83_INDEX
from .metrics import compute_psnr_ssim, Timer, hash_size_stats
from .test_images import (
    generate_flat_color,
    generate_gradient,
    generate_split,
    generate_colored_checkerboard,
    generate_demo_image,
)
from .image_io import load_image, save_image, shrink_to_max_side

__all__ = [
    'BASE83_ALPHABET',
    'BASE83_INDEX',
    'compute_psnr_ssim',
    'Timer',
    'hash_size_stats',
    'generate_flat_color',
    'generate_gradient',
    'generate_split',
    'generate_colored_checkerboard',
    'generate_demo_image',
    'load_image',
    'save_image',
    'shrink_to_max_side',
]
