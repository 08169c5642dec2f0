from abc import ABC, abstractmethod

import numpy as np


class BaseFilter(ABC):
    """
    A base abstract class for smoothing filters over ordered 3D point sequences.

    Subclasses hold only their parameters; applying a filter never modifies
    the filter or its input, so one instance can be reused across sequences
    and threads.
    """

    @abstractmethod
    def apply(self, points):
        """
        Smooth an ordered sequence of points.
        Parameters
        ----------
        points : array-like of shape (N, 3)
            Ordered points along a curve or path.
        Returns
        -------
        np.ndarray
            Smoothed points of shape (N, 3).
        """
        pass

    @property
    @abstractmethod
    def parameters(self):
        """
        Return the filter parameters as a dictionary.
        """
        pass

    def __call__(self, points):
        return self.apply(points)

    def residuals(self, points):
        """
        Return the per-point displacement introduced by the filter.
        """
        points = np.asarray(points, dtype=float)
        return self.apply(points) - points.reshape(-1, 3)

    def __repr__(self):
        args = ", ".join("{}={!r}".format(k, v) for k, v in self.parameters.items())
        return "{}({})".format(self.__class__.__name__, args)
