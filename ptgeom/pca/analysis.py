import warnings
from dataclasses import dataclass

import numpy as np

from ptgeom.parameters import PCAParameters
from ptgeom.pca.eigen import compute_eigenvalues, compute_eigenvectors
from ptgeom.utils.validation import as_vertex_buffer


def compute_centroid(vertices):
    """
    Arithmetic mean of the points in a vertex buffer.

    Parameters
    ----------
    vertices : array-like
        Flat buffer of length 3N or an array of shape (N, 3).

    Returns
    -------
    np.ndarray of shape (3,)
    """
    vertices = as_vertex_buffer(vertices)
    return np.sum(vertices, axis=0) / vertices.shape[0]


def compute_covariance(vertices, center=None):
    r"""
    Population covariance matrix of a point cloud.

    .. math::

        C = \frac{1}{N} \sum_i (p_i - \bar{p})(p_i - \bar{p})^\top

    The diagonal and upper triangle are accumulated and the lower triangle is
    mirrored, so the result is exactly symmetric.

    Parameters
    ----------
    vertices : array-like
        Flat buffer of length 3N or an array of shape (N, 3).
    center : array-like of shape (3,), optional
        Centroid to measure from. Computed when omitted.

    Returns
    -------
    np.ndarray of shape (3, 3)
    """
    vertices = as_vertex_buffer(vertices)
    if center is None:
        center = compute_centroid(vertices)
    offsets = vertices - np.asarray(center, dtype=float)
    covariance = np.zeros((3, 3))
    for i in range(3):
        for j in range(i, 3):
            covariance[i, j] = np.dot(offsets[:, i], offsets[:, j])
            covariance[j, i] = covariance[i, j]
    return covariance / vertices.shape[0]


@dataclass(frozen=True, eq=False)
class PCAResult:
    """Principal axes of a point cloud.

    Attributes
    ----------
    eigenvalues : np.ndarray of shape (3,)
        Variances along the principal axes, in descending order.
    eigenvectors : np.ndarray of shape (3, 3)
        Unit principal axes; row ``i`` belongs to ``eigenvalues[i]``.
    center : np.ndarray of shape (3,)
        Centroid of the cloud.
    covariance : np.ndarray of shape (3, 3)
        Covariance matrix the decomposition was computed from.
    """

    eigenvalues: np.ndarray
    eigenvectors: np.ndarray
    center: np.ndarray
    covariance: np.ndarray

    @property
    def axes(self):
        return self.eigenvectors

    @property
    def explained_variance_ratio(self):
        """Fraction of the total variance carried by each principal axis."""
        total = np.sum(self.eigenvalues)
        if total <= 0:
            return np.zeros_like(self.eigenvalues)
        return self.eigenvalues / total

    def transform(self, points):
        """Express points in the principal frame (centred on :attr:`center`)."""
        points = np.asarray(points, dtype=float).reshape(-1, 3)
        return (points - self.center) @ self.eigenvectors.T

    def inverse_transform(self, coordinates):
        """Map principal-frame coordinates back to the original frame."""
        coordinates = np.asarray(coordinates, dtype=float).reshape(-1, 3)
        return coordinates @ self.eigenvectors + self.center


def compute_pca(vertices, method=None, rng=None, parameters=None):
    """
    Principal component analysis of an unordered point cloud.

    The centroid, the covariance matrix, its eigenvalues and its eigenvectors
    are computed in that order.

    Parameters
    ----------
    vertices : array-like
        Flat vertex buffer of length 3N (consecutive x, y, z) or an array of
        shape (N, 3).
    method : str, optional
        Eigenvector method, ``'deterministic'`` or ``'random'``. Defaults to
        ``parameters.eigenvector_method``.
    rng : None, int or numpy.random.Generator, optional
        Random source for the ``'random'`` method. Defaults to
        ``parameters.seed``.
    parameters : :class:`~ptgeom.parameters.PCAParameters`, optional
        Solver settings.

    Returns
    -------
    PCAResult

    Examples
    --------
    .. code-block:: python

        from ptgeom.pca import compute_pca

        result = compute_pca([0, 0, 0, 1, 0, 0, 2, 0, 0, 3, 0, 0])
        result.center          # array([1.5, 0. , 0. ])
        result.eigenvectors[0] # array([1., 0., 0.])
    """
    parameters = parameters or PCAParameters()
    method = method or parameters.eigenvector_method
    if rng is None:
        rng = parameters.seed
    vertices = as_vertex_buffer(vertices)
    center = compute_centroid(vertices)
    covariance = compute_covariance(vertices, center)
    if vertices.shape[0] < 3 or not np.any(covariance):
        warnings.warn("Point cloud with {} points is degenerate; principal axes "
                      "are not uniquely defined.".format(vertices.shape[0]))
    eigenvalues = compute_eigenvalues(covariance, tolerance=parameters.discriminant_tolerance)
    eigenvectors = compute_eigenvectors(covariance, eigenvalues, method=method, rng=rng,
                                        pivot_epsilon=parameters.pivot_epsilon)
    return PCAResult(eigenvalues=eigenvalues, eigenvectors=eigenvectors,
                     center=center, covariance=covariance)
