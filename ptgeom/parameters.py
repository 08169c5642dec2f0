from typing import Optional

_FILTER_TYPES = ('MovingAverage', 'SavitzkyGolay', 'Gaussian')
_EIGENVECTOR_METHODS = ('deterministic', 'random')


class SmoothingParameters(object):
    """Default settings used when smoothing a point sequence.

    Attributes
    ----------
    filter_type : str
        One of ``'MovingAverage'``, ``'SavitzkyGolay'`` or ``'Gaussian'``.
    window_size : int
        Number of neighbouring samples considered around each point.
    degree : int
        Local polynomial degree for the Savitzky–Golay filter.
    sigma : float
        Standard deviation (in samples) of the Gaussian kernel.
    symmetric : bool
        Use the inclusive (symmetric) moving-average window instead of the
        half-open one.
    """

    def __init__(self):
        self.filter_type = 'Gaussian'
        self.window_size = 5
        self.degree = 2
        self.sigma = 1.0
        self.symmetric = False

    def __str__(self):
        return (
            "Smoothing Parameters:\n"
            "---------------------\n"
            f"Filter Type: {self.filter_type}\n"
            f"Window Size: {self.window_size}\n"
            f"Degree: {self.degree}\n"
            f"Sigma: {self.sigma}\n"
            f"Symmetric Window: {self.symmetric}"
        )

    def __repr__(self):
        return self.__str__()

    def set(self, parameter, value):
        """Update a named parameter.

        Parameters
        ----------
        parameter : str
            One of ``{'filter_type', 'window_size', 'degree', 'sigma', 'symmetric'}``.
        value : Any
            New value assigned to the corresponding attribute.
        """
        if parameter == 'filter_type':
            if value not in _FILTER_TYPES:
                raise ValueError("Unsupported filter type: {}.".format(value))
            self.filter_type = value
        elif parameter == 'window_size':
            if int(value) != value or value < 1:
                raise ValueError("window_size must be a positive integer.")
            self.window_size = int(value)
        elif parameter == 'degree':
            if int(value) != value or value < 0:
                raise ValueError("degree must be a non-negative integer.")
            self.degree = int(value)
        elif parameter == 'sigma':
            if value <= 0:
                raise ValueError("sigma must be positive.")
            self.sigma = float(value)
        elif parameter == 'symmetric':
            self.symmetric = bool(value)
        else:
            raise ValueError("Invalid parameter: {}.".format(parameter))
        return None

    def kwargs(self, filter_type: Optional[str] = None):
        """Return the keyword arguments understood by the given filter type."""
        filter_type = filter_type or self.filter_type
        if filter_type == 'MovingAverage':
            return {'window_size': self.window_size, 'symmetric': self.symmetric}
        elif filter_type == 'SavitzkyGolay':
            return {'window_size': self.window_size, 'degree': self.degree}
        elif filter_type == 'Gaussian':
            return {'sigma': self.sigma, 'window_size': self.window_size}
        raise ValueError("Unsupported filter type: {}.".format(filter_type))


class PCAParameters(object):
    """Settings for the principal component analysis of a point cloud.

    Attributes
    ----------
    eigenvector_method : str
        ``'deterministic'`` extracts each eigenvector from the null space of
        the shifted covariance matrix; ``'random'`` uses the legacy randomized
        approximation.
    seed : int or None
        Seed for the random generator used by the ``'random'`` method.
    discriminant_tolerance : float
        Relative tolerance under which the cubic discriminant is treated as
        zero (repeated eigenvalue).
    pivot_epsilon : float
        Substitute divisor for a zero diagonal entry in the ``'random'``
        method.
    """

    def __init__(self):
        self.eigenvector_method = 'deterministic'
        self.seed = None
        self.discriminant_tolerance = 1e-12
        self.pivot_epsilon = 1e-10

    def __str__(self):
        return (
            "PCA Parameters:\n"
            "---------------\n"
            f"Eigenvector Method: {self.eigenvector_method}\n"
            f"Seed: {self.seed}\n"
            f"Discriminant Tolerance: {self.discriminant_tolerance}\n"
            f"Pivot Epsilon: {self.pivot_epsilon}"
        )

    def __repr__(self):
        return self.__str__()

    def set(self, parameter, value):
        """Update a named parameter.

        Parameters
        ----------
        parameter : str
            One of ``{'eigenvector_method', 'seed', 'discriminant_tolerance',
            'pivot_epsilon'}``.
        value : Any
            New value assigned to the corresponding attribute.
        """
        if parameter == 'eigenvector_method':
            if value not in _EIGENVECTOR_METHODS:
                raise ValueError("Unsupported eigenvector method: {}.".format(value))
            self.eigenvector_method = value
        elif parameter == 'seed':
            self.seed = value
        elif parameter == 'discriminant_tolerance':
            if value < 0:
                raise ValueError("discriminant_tolerance must be non-negative.")
            self.discriminant_tolerance = float(value)
        elif parameter == 'pivot_epsilon':
            if value <= 0:
                raise ValueError("pivot_epsilon must be positive.")
            self.pivot_epsilon = float(value)
        else:
            raise ValueError("Invalid parameter: {}.".format(parameter))
        return None
