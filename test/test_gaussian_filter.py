import pytest
import numpy as np
from ptgeom.smoothing.gaussian import gaussian_filter, gaussian_kernel


def test_kernel_sums_to_one():
    for sigma in (0.3, 1.0, 2.5):
        for window_size in (1, 3, 5, 8, 21):
            kernel = gaussian_kernel(sigma, window_size)
            assert np.sum(kernel) == pytest.approx(1.0, abs=1e-12)


def test_kernel_is_symmetric_and_peaked():
    kernel = gaussian_kernel(1.5, 7)
    assert kernel.shape == (7,)
    np.testing.assert_allclose(kernel, kernel[::-1])
    assert np.argmax(kernel) == 3


def test_even_window_is_incremented():
    assert gaussian_kernel(1.0, 4).shape == (5,)


def test_kernel_values():
    kernel = gaussian_kernel(1.0, 3)
    raw = np.exp(-np.array([1.0, 0.0, 1.0]) / 2.0)
    np.testing.assert_allclose(kernel, raw / raw.sum())


def test_three_point_values():
    """
    Edge points only use the in-range part of the kernel, renormalized.
    """
    points = np.array([[0.0, 0.0, 0.0], [3.0, 0.0, 0.0], [6.0, 0.0, 0.0]])
    w0, w1 = 1.0, np.exp(-0.5)
    result = gaussian_filter(points, 1.0, 3)
    expected_x = [
        (w0 * 0.0 + w1 * 3.0) / (w0 + w1),
        (w1 * 0.0 + w0 * 3.0 + w1 * 6.0) / (w0 + 2 * w1),
        (w1 * 3.0 + w0 * 6.0) / (w0 + w1),
    ]
    np.testing.assert_allclose(result[:, 0], expected_x)
    np.testing.assert_allclose(result[:, 1:], 0.0)


def test_constant_sequence_is_not_attenuated():
    """
    Renormalizing by the weights actually used keeps the end points in place.
    """
    points = np.tile([1.0, -2.0, 3.0], (6, 1))
    result = gaussian_filter(points, 2.0, 9)
    np.testing.assert_allclose(result, points, atol=1e-12)


def test_length_is_preserved():
    points = np.random.default_rng(1).normal(size=(12, 3))
    assert gaussian_filter(points, 1.0, 5).shape == (12, 3)


def test_smoothing_reduces_noise():
    rng = np.random.default_rng(2)
    t = np.linspace(0, 1, 200)
    clean = np.column_stack((t, t ** 2, np.zeros_like(t)))
    noisy = clean + 0.02 * rng.normal(size=clean.shape)
    smoothed = gaussian_filter(noisy, 2.0, 11)
    assert np.linalg.norm(smoothed - clean) < np.linalg.norm(noisy - clean)


def test_empty_input_returns_empty():
    assert gaussian_filter([], 1.0, 5).shape == (0, 3)


def test_invalid_sigma():
    with pytest.raises(ValueError, match="sigma"):
        gaussian_filter([(0, 0, 0)], 0.0, 3)
