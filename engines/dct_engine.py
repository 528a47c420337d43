"""Cosine basis projection and reconstruction.

The basis is cos(pi * i * x / N) over whole pixel positions, which is
not the half-sample-shifted DCT-II of scipy.fft, so the sums are
written out with numpy.
"""

import numpy as np


def calculate_weights(dimension: int, component_count: int) -> np.ndarray:
    """Basis weights, shape (component_count, dimension)."""
    j = np.arange(component_count, dtype=np.float64)[:, np.newaxis]
    i = np.arange(dimension, dtype=np.float64)[np.newaxis, :]
    return np.cos(np.pi * j * i / dimension)


def image_to_coefficients(
    linear: np.ndarray,
    components_x: int,
    components_y: int
) -> np.ndarray:
    """Project a linear (H, W, 3) image onto the basis.

    Returns coefficients shaped (components_y, components_x, 3). Entry
    [0, 0] is the average color; AC entries carry a factor of 2.
    """
    height, width = linear.shape[:2]
    weights_x = calculate_weights(width, components_x)
    weights_y = calculate_weights(height, components_y)

    coeffs = np.einsum('jy,ix,yxc->jic', weights_y, weights_x, linear)
    norm = np.full((components_y, components_x, 1), 2.0)
    norm[0, 0] = 1.0
    return coeffs * norm / (width * height)


def coefficients_to_image(coeffs: np.ndarray, width: int, height: int) -> np.ndarray:
    """Expand a coefficient grid back into a linear (H, W, 3) image (unclamped)."""
    components_y, components_x = coeffs.shape[:2]
    weights_x = calculate_weights(width, components_x)
    weights_y = calculate_weights(height, components_y)
    return np.einsum('jy,ix,jic->yxc', weights_y, weights_x, coeffs)
