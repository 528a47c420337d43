"""Tests for the cosine basis transform."""

import numpy as np
from engines.dct_engine import calculate_weights, image_to_coefficients, coefficients_to_image


def test_weights_shape_and_values():
    weights = calculate_weights(8, 4)
    assert weights.shape == (4, 8)
    assert np.allclose(weights[0], 1.0)
    assert np.isclose(weights[2, 4], -1.0)
    assert np.isclose(weights[1, 0], 1.0)


def test_matches_direct_summation():
    """Vectorized projection equals the per-pixel double sum."""
    rng = np.random.default_rng(0)
    image = rng.random((5, 7, 3))
    height, width = image.shape[:2]
    coeffs = image_to_coefficients(image, 3, 2)

    for j in range(2):
        for i in range(3):
            norm = 1.0 if (i == 0 and j == 0) else 2.0
            expected = np.zeros(3)
            for y in range(height):
                for x in range(width):
                    basis = np.cos(np.pi * i * x / width) * np.cos(np.pi * j * y / height)
                    expected += basis * image[y, x]
            expected *= norm / (width * height)
            assert np.allclose(coeffs[j, i], expected, atol=1e-12)


def test_dc_is_mean():
    image = np.random.rand(16, 12, 3)
    coeffs = image_to_coefficients(image, 4, 4)
    assert coeffs.shape == (4, 4, 3)
    assert np.allclose(coeffs[0, 0], image.mean(axis=(0, 1)))


def test_horizontal_edge_goes_to_horizontal_term():
    image = np.zeros((32, 32, 3))
    image[:, :16] = 1.0
    coeffs = image_to_coefficients(image, 4, 4)
    assert abs(coeffs[0, 1, 0]) > 10 * abs(coeffs[1, 0, 0])


def test_dc_only_reconstructs_constant():
    coeffs = np.zeros((3, 4, 3))
    coeffs[0, 0] = [0.2, 0.4, 0.6]
    image = coefficients_to_image(coeffs, 10, 6)
    assert image.shape == (6, 10, 3)
    assert np.allclose(image, [0.2, 0.4, 0.6])
