import numpy as np

from ptgeom.utils.validation import as_point_sequence, check_window_size


def gaussian_kernel(sigma, window_size):
    r"""
    Build a discrete, normalized Gaussian kernel.

    .. math::

        w(x) = \frac{1}{\sigma \sqrt{2\pi}} \exp\left(-\frac{x^2}{2\sigma^2}\right),
        \qquad x = -h, \dots, h

    with ``h = window_size // 2`` after an even ``window_size`` has been
    incremented by one. The weights are rescaled to sum to one.

    Returns
    -------
    kernel : ndarray of shape (2h + 1,)
    """
    if sigma <= 0:
        raise ValueError("sigma must be positive, got {}.".format(sigma))
    window_size = check_window_size(window_size)
    if window_size % 2 == 0:
        window_size += 1
    half = window_size // 2
    x = np.arange(-half, half + 1, dtype=float)
    kernel = np.exp(-(x * x) / (2.0 * sigma * sigma)) / (sigma * np.sqrt(2.0 * np.pi))
    return kernel / np.sum(kernel)


def gaussian_filter(points, sigma, window_size):
    """
    Smooth an ordered point sequence by Gaussian kernel convolution.

    Kernel entries that fall outside the sequence are skipped and the
    weighted sum is divided by the total weight actually used, so points near
    the ends are not pulled towards the origin.

    Parameters
    ----------
    points : array-like of shape (N, 3)
        Ordered points.
    sigma : float
        Standard deviation of the kernel, in samples.
    window_size : int
        Kernel length; forced odd.

    Returns
    -------
    np.ndarray
        Smoothed points of shape (N, 3).
    """
    points = as_point_sequence(points)
    kernel = gaussian_kernel(sigma, window_size)
    half = kernel.shape[0] // 2
    n = points.shape[0]
    smoothed = np.zeros_like(points)
    for i in range(n):
        start = max(0, i - half)
        stop = min(n, i + half + 1)
        weights = kernel[start - i + half:stop - i + half]
        weight_sum = np.sum(weights)
        if weight_sum > 0:
            smoothed[i] = (weights @ points[start:stop]) / weight_sum
    return smoothed
