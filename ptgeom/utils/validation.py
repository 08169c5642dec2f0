import numpy as np


class PointCloudError(ValueError):
    """Raised when point data does not have the expected layout."""


def as_point_sequence(points):
    """
    Coerce an ordered sequence of 3D points into a float array.

    Parameters
    ----------
    points : array-like of shape (N, 3)
        Ordered points. An empty sequence is accepted.

    Returns
    -------
    np.ndarray
        A new array of shape (N, 3) with dtype float. The caller's data is
        never aliased.

    Raises
    ------
    PointCloudError
        If the input is not a two-dimensional array of triples or contains
        non-finite values.
    """
    points = np.array(points, dtype=float)
    if points.size == 0:
        return np.zeros((0, 3))
    if points.ndim != 2 or points.shape[1] != 3:
        raise PointCloudError("points must be of shape (N, 3), got {}.".format(points.shape))
    if not np.all(np.isfinite(points)):
        raise PointCloudError("points contain non-finite coordinates.")
    return points


def as_vertex_buffer(vertices):
    """
    Interpret a flat vertex buffer as an unordered (N, 3) point cloud.

    A flat buffer of length 3N is read as consecutive (x, y, z) triples. An
    array that is already shaped (N, 3) is accepted as-is.
    """
    vertices = np.array(vertices, dtype=float)
    if vertices.ndim == 1:
        if vertices.shape[0] % 3 != 0:
            raise PointCloudError("vertex buffer length {} is not divisible by 3.".format(vertices.shape[0]))
        vertices = vertices.reshape(-1, 3)
    elif vertices.ndim != 2 or vertices.shape[1] != 3:
        raise PointCloudError("vertices must be a flat buffer or of shape (N, 3), got {}.".format(vertices.shape))
    if vertices.shape[0] == 0:
        raise PointCloudError("vertex buffer is empty.")
    if not np.all(np.isfinite(vertices)):
        raise PointCloudError("vertices contain non-finite coordinates.")
    return vertices


def check_window_size(window_size):
    if int(window_size) != window_size or window_size < 1:
        raise ValueError("window_size must be a positive integer, got {}.".format(window_size))
    return int(window_size)
