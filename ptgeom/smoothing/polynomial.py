import numpy as np


def gaussian_elimination(a, b):
    r"""
    Solve the square linear system :math:`A x = b` by Gaussian elimination
    with partial pivoting.

    At every elimination step the row holding the largest absolute entry in
    the pivot column (at or below the diagonal) is swapped into the pivot
    position. The pivot is never compared against zero; an ill-conditioned
    system yields a numerically poor solution rather than an exception.

    Parameters
    ----------
    a : array-like of shape (n, n)
        Coefficient matrix. It is copied and left unmodified.
    b : array-like of shape (n,)
        Right-hand side.

    Returns
    -------
    x : ndarray of shape (n,)
        Solution vector.
    """
    a = np.array(a, dtype=float)
    b = np.array(b, dtype=float)
    n = a.shape[0]
    augmented = np.column_stack((a, b))
    for i in range(n):
        max_row = i + int(np.argmax(np.abs(augmented[i:, i])))
        if max_row != i:
            augmented[[i, max_row]] = augmented[[max_row, i]]
        for j in range(i + 1, n):
            factor = augmented[j, i] / augmented[i, i]
            augmented[j, i:] -= factor * augmented[i, i:]
    x = np.zeros(n)
    for i in range(n - 1, -1, -1):
        x[i] = (augmented[i, n] - np.dot(augmented[i, i + 1:n], x[i + 1:])) / augmented[i, i]
    return x


def polynomial_fit(x, y, degree, weights=None):
    r"""
    Weighted least-squares fit of a polynomial of the given degree.

    The normal equations

    .. math::

        A_{pq} = \sum_k w_k x_k^{p+q}, \qquad b_p = \sum_k w_k y_k x_k^p

    are assembled for :math:`p, q = 0, \dots, degree` and solved with
    :func:`gaussian_elimination`.

    Parameters
    ----------
    x, y : array-like of shape (n,)
        Sample abscissae and ordinates.
    degree : int
        Polynomial degree.
    weights : array-like of shape (n,), optional
        Per-sample weights. Defaults to unit weights.

    Returns
    -------
    coefficients : ndarray of shape (degree + 1,)
        Coefficients in increasing power order, suitable for
        :func:`evaluate_polynomial`.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if weights is None:
        weights = np.ones_like(x)
    else:
        weights = np.asarray(weights, dtype=float)
    m = degree + 1
    powers = x[:, None] ** np.arange(2 * m - 1)
    moments = weights @ powers
    a = np.empty((m, m))
    for p in range(m):
        a[p, :] = moments[p:p + m]
    b = (weights * y) @ powers[:, :m]
    return gaussian_elimination(a, b)


def evaluate_polynomial(coefficients, x):
    """Evaluate ``sum(coefficients[i] * x**i)`` at a scalar or array ``x``."""
    x = np.asarray(x, dtype=float)
    result = np.zeros_like(x)
    for i, coefficient in enumerate(coefficients):
        result = result + coefficient * x ** i
    if result.ndim == 0:
        return float(result)
    return result
