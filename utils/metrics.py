"""Metrics: PSNR, SSIM, hash size."""

import time
import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity
from typing import Dict


def compute_psnr_ssim(original_rgb: np.ndarray, preview_rgb: np.ndarray) -> Dict[str, float]:
    """Compute PSNR and SSIM between an image and its blurhash preview."""
    if np.array_equal(original_rgb, preview_rgb):
        psnr_rgb = float('inf')
    else:
        psnr_rgb = peak_signal_noise_ratio(original_rgb, preview_rgb, data_range=255)
    
    # SSIM needs an odd window no larger than the image
    win_size = min(7, *original_rgb.shape[:2])
    if win_size % 2 == 0:
        win_size -= 1
    if win_size < 3:
        ssim_rgb = float('nan')
    else:
        ssim_rgb = structural_similarity(
            original_rgb, preview_rgb, channel_axis=2, data_range=255, win_size=win_size
        )
    
    return {
        'psnr_rgb': float(psnr_rgb),
        'ssim_rgb': float(ssim_rgb)
    }


class Timer:
    """Simple timer for encode/decode runtime."""
    
    def __init__(self):
        self.encode_time_ms = 0.0
        self.decode_time_ms = 0.0
    
    def measure_encode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.encode_time_ms = (time.perf_counter() - start) * 1000.0
        return result
    
    def measure_decode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.decode_time_ms = (time.perf_counter() - start) * 1000.0
        return result


def hash_size_stats(blurhash: str, original_shape: tuple) -> Dict:
    """Raw RGB size versus the ASCII hash size."""
    h, w = original_shape[:2]
    original_bytes = h * w * 3
    hash_bytes = len(blurhash)
    return {
        'hash_length': hash_bytes,
        'compression_ratio': float(original_bytes / max(hash_bytes, 1))
    }
