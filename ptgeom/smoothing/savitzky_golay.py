import warnings

import numpy as np

from ptgeom.smoothing.polynomial import polynomial_fit, evaluate_polynomial
from ptgeom.utils.validation import as_point_sequence, check_window_size


def savitzky_golay(points, window_size, degree):
    """
    Smooth an ordered point sequence with a Savitzky–Golay filter.

    For every index ``i`` the neighbours within ``±window_size // 2`` are
    collected (clipped at the ends of the sequence) and a polynomial of the
    requested degree is fitted to each coordinate axis independently by
    unweighted least squares. The local abscissa of the k-th point in the
    clipped window is ``k - len(window) // 2`` and the fit is evaluated at
    zero, the middle of the clipped window.

    An even ``window_size`` is incremented by one, and a window smaller than
    ``degree + 1`` is enlarged to ``degree + 1``. When a clipped window still
    holds fewer than ``degree + 1`` points the input point is copied.

    Parameters
    ----------
    points : array-like of shape (N, 3)
        Ordered points.
    window_size : int
        Nominal window length.
    degree : int
        Degree of the local polynomial.

    Returns
    -------
    np.ndarray
        Smoothed points of shape (N, 3).
    """
    points = as_point_sequence(points)
    window_size = check_window_size(window_size)
    if int(degree) != degree or degree < 0:
        raise ValueError("degree must be a non-negative integer, got {}.".format(degree))
    degree = int(degree)
    if window_size % 2 == 0:
        window_size += 1
    if window_size < degree + 1:
        window_size = degree + 1
    half = window_size // 2

    n = points.shape[0]
    smoothed = np.empty_like(points)
    copied = 0
    for i in range(n):
        window = points[max(0, i - half):min(n, i + half + 1)]
        if window.shape[0] < degree + 1:
            smoothed[i] = points[i]
            copied += 1
            continue
        t = np.arange(window.shape[0]) - window.shape[0] // 2
        weights = np.ones(window.shape[0])
        for axis in range(3):
            coefficients = polynomial_fit(t, window[:, axis], degree, weights)
            smoothed[i, axis] = evaluate_polynomial(coefficients, 0.0)
    if copied:
        warnings.warn("Savitzky-Golay window too short for degree {} at {} of {} points; "
                      "original points were kept.".format(degree, copied, n))
    return smoothed
