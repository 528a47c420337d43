"""Image I/O using OpenCV."""

from typing import Optional

import cv2
import numpy as np


def load_image(path: str) -> np.ndarray:
    """Load image as RGB uint8."""
    img = cv2.imread(path)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)


def save_image(image: np.ndarray, path: str) -> None:
    """Save RGB image."""
    if not cv2.imwrite(path, cv2.cvtColor(image, cv2.COLOR_RGB2BGR)):
        raise ValueError(f"Could not write image to {path}")


def shrink_to_max_side(image: np.ndarray, max_side: Optional[int]) -> np.ndarray:
    """Downscale so the longer side is at most max_side. Never upscales."""
    h, w = image.shape[:2]
    if max_side is None or max(h, w) <= max_side:
        return image
    scale = max_side / max(h, w)
    size = (max(1, round(w * scale)), max(1, round(h * scale)))
    return cv2.resize(np.ascontiguousarray(image), size, interpolation=cv2.INTER_AREA)
