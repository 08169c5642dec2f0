"""
The `smoothing` module provides filters that denoise ordered sequences of 3D points such as digitized paths,
centerlines or cross-section outlines.

- **moving_average**: Coordinate-wise mean over a clipped window of neighbouring points.
- **savitzky_golay**: Local least-squares polynomial fit evaluated at the middle of the window.
- **gaussian_filter**: Convolution with a normalized Gaussian kernel, renormalized at the sequence ends.
- **polynomial**: Weighted polynomial fitting and evaluation shared by the Savitzky–Golay filter.

Every filter returns a new array with the same number of points as its input. Windows are clipped at the ends of
the sequence, never padded or reflected, so the first and last points always receive a smoothed value.

The same filters are available as objects (:class:`MovingAverageFilter`, :class:`SavitzkyGolayFilter`,
:class:`GaussianFilter`) that carry their parameters, and through the :class:`Filter` dispatcher which selects a
filter by name.
"""
from ptgeom.smoothing.moving_average import moving_average
from ptgeom.smoothing.savitzky_golay import savitzky_golay
from ptgeom.smoothing.gaussian import gaussian_filter, gaussian_kernel
from ptgeom.smoothing.polynomial import polynomial_fit, evaluate_polynomial, gaussian_elimination
from ptgeom.smoothing.base import BaseFilter
from ptgeom.smoothing.filters import MovingAverageFilter, SavitzkyGolayFilter, GaussianFilter
from ptgeom.smoothing.filter import Filter, smooth
