"""Preview result with metrics."""

from dataclasses import dataclass
import numpy as np

from models.components import Components


@dataclass
class BlurHashResult:
    """Results from the encode/preview pipeline."""
    
    original_image: np.ndarray
    preview_image: np.ndarray
    blurhash: str
    components: Components
    
    # Quality metrics
    psnr_rgb: float
    ssim_rgb: float
    
    # Size stats
    hash_length: int
    compression_ratio: float
    
    # Runtime
    encode_time_ms: float
    decode_time_ms: float
