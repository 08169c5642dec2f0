import numpy as np

from ptgeom.utils.validation import as_point_sequence, check_window_size


def moving_average(points, window_size, symmetric=False):
    """
    Smooth an ordered point sequence with a moving average.

    Each output point is the coordinate-wise mean of the input points whose
    index ``j`` satisfies ``max(0, i - h) <= j < min(N, i + h)`` with
    ``h = window_size // 2``. The trailing bound is half-open, so the window
    is one sample shorter after ``i`` than before it. With ``symmetric=True``
    the trailing bound is inclusive and the window is centred on ``i``.

    Windows are clipped at the ends of the sequence rather than padded. If a
    window is empty (``window_size == 1`` with the half-open bound) the input
    point is copied.

    Parameters
    ----------
    points : array-like of shape (N, 3)
        Ordered points.
    window_size : int
        Nominal window length.
    symmetric : bool, optional
        Use the inclusive trailing bound. Defaults to False.

    Returns
    -------
    np.ndarray
        Smoothed points of shape (N, 3).
    """
    points = as_point_sequence(points)
    window_size = check_window_size(window_size)
    n = points.shape[0]
    half = window_size // 2
    smoothed = np.empty_like(points)
    for i in range(n):
        start = max(0, i - half)
        if symmetric:
            stop = min(n, i + half + 1)
        else:
            stop = min(n, i + half)
        if stop <= start:
            smoothed[i] = points[i]
            continue
        smoothed[i] = np.mean(points[start:stop], axis=0)
    return smoothed
