from ptgeom.smoothing.base import BaseFilter
from ptgeom.smoothing.gaussian import gaussian_filter, gaussian_kernel
from ptgeom.smoothing.moving_average import moving_average
from ptgeom.smoothing.savitzky_golay import savitzky_golay
from ptgeom.utils.validation import check_window_size


class MovingAverageFilter(BaseFilter):
    """
    Moving-average smoothing.

    Parameters
    ----------
    window_size : int
        Nominal window length.
    symmetric : bool, optional
        Use an inclusive trailing window bound. Defaults to False, which
        keeps the half-open window of :func:`moving_average`.
    """

    def __init__(self, window_size, symmetric=False):
        self.window_size = check_window_size(window_size)
        self.symmetric = bool(symmetric)

    @property
    def parameters(self):
        return {'window_size': self.window_size, 'symmetric': self.symmetric}

    def apply(self, points):
        return moving_average(points, self.window_size, symmetric=self.symmetric)


class SavitzkyGolayFilter(BaseFilter):
    """
    Savitzky–Golay smoothing by local polynomial regression.

    Parameters
    ----------
    window_size : int
        Nominal window length (forced odd, at least ``degree + 1``).
    degree : int
        Degree of the local polynomial.
    """

    def __init__(self, window_size, degree=2):
        self.window_size = check_window_size(window_size)
        if int(degree) != degree or degree < 0:
            raise ValueError("degree must be a non-negative integer.")
        self.degree = int(degree)

    @property
    def parameters(self):
        return {'window_size': self.window_size, 'degree': self.degree}

    def apply(self, points):
        return savitzky_golay(points, self.window_size, self.degree)


class GaussianFilter(BaseFilter):
    """
    Gaussian kernel smoothing.

    Parameters
    ----------
    sigma : float
        Standard deviation of the kernel, in samples.
    window_size : int
        Kernel length (forced odd).
    """

    def __init__(self, sigma, window_size):
        if sigma <= 0:
            raise ValueError("sigma must be positive.")
        self.sigma = float(sigma)
        self.window_size = check_window_size(window_size)

    @property
    def parameters(self):
        return {'sigma': self.sigma, 'window_size': self.window_size}

    @property
    def kernel(self):
        """The normalized kernel weights applied around each point."""
        return gaussian_kernel(self.sigma, self.window_size)

    def apply(self, points):
        return gaussian_filter(points, self.sigma, self.window_size)
