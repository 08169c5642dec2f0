from ptgeom.parameters import SmoothingParameters
from ptgeom.smoothing.filters import MovingAverageFilter, SavitzkyGolayFilter, GaussianFilter


class Filter:
    def __init__(self, filter_type="Gaussian", **kwargs):
        """
        Initializes the Filter object for the specified filter type.

        Parameters
        ----------
        filter_type : str, optional
            The type of filter to instantiate ('MovingAverage', 'SavitzkyGolay', 'Gaussian').
            Default is 'Gaussian'.
        **kwargs : Additional arguments to be passed to the corresponding filter constructor.
        """
        self.filter_type = filter_type

        if filter_type == "MovingAverage":
            self.filter = MovingAverageFilter(**kwargs)
        elif filter_type == "SavitzkyGolay":
            self.filter = SavitzkyGolayFilter(**kwargs)
        elif filter_type == "Gaussian":
            self.filter = GaussianFilter(**kwargs)
        else:
            raise ValueError("Unsupported filter type")

    def apply(self, points):
        return self.filter.apply(points)

    def residuals(self, points):
        return self.filter.residuals(points)

    def __call__(self, points):
        return self.filter.apply(points)

    @property
    def parameters(self):
        return self.filter.parameters

    def __str__(self):
        return f"Filter type: {self.filter.__class__.__name__}, Parameters: {self.filter.parameters}"


def smooth(points, filter_type=None, parameters=None, **kwargs):
    """
    Smooth an ordered point sequence in a single call.

    Filter settings are taken from ``parameters`` (a
    :class:`~ptgeom.parameters.SmoothingParameters`, defaults when omitted)
    and individually overridden by keyword arguments.

    Examples
    --------
    .. code-block:: python

        from ptgeom.smoothing import smooth

        smoothed = smooth(path, filter_type="SavitzkyGolay", window_size=7, degree=3)
    """
    parameters = parameters or SmoothingParameters()
    filter_type = filter_type or parameters.filter_type
    options = parameters.kwargs(filter_type)
    options.update(kwargs)
    return Filter(filter_type, **options).apply(points)
