"""
Eigen-decomposition of symmetric 3×3 matrices.

Eigenvalues come from the analytic solution of the characteristic cubic.
Eigenvectors are recovered one eigenvalue at a time as a null vector of the
shifted matrix :math:`C - \\lambda I`, either deterministically or with the
legacy randomized approximation.
"""
import numpy as np

from ptgeom.pca.cubic import characteristic_coefficients, depress_cubic, solve_cubic

EIGENVECTOR_METHODS = ('deterministic', 'random')


def compute_eigenvalues(matrix, tolerance=1e-12):
    """
    Eigenvalues of a symmetric 3×3 matrix, sorted in descending order.

    The matrix is scaled by its largest absolute entry before the
    characteristic cubic is formed and the roots are scaled back afterwards.

    Parameters
    ----------
    matrix : array-like of shape (3, 3)
        Symmetric matrix; only the upper triangle is read.
    tolerance : float, optional
        Relative discriminant tolerance forwarded to :func:`solve_cubic`.

    Returns
    -------
    np.ndarray
        Eigenvalues in descending order.
    """
    matrix = np.asarray(matrix, dtype=float)
    scale = np.max(np.abs(matrix))
    if scale == 0:
        return np.zeros(3)
    a, b, c, d = characteristic_coefficients(matrix / scale)
    p, q, shift = depress_cubic(a, b, c, d)
    # real symmetric matrices have three real roots, so p <= 0 and D <= 0;
    # clamp roundoff that would push the discriminant positive
    p = min(p, 0.0)
    q_limit = 2.0 * (-p / 3.0) ** 1.5
    q = float(np.clip(q, -q_limit, q_limit))
    roots = np.array(solve_cubic(p, q, tolerance)) + shift
    return np.sort(roots)[::-1] * scale


def _orient(vector):
    # largest component positive so repeated calls agree on the sign
    index = int(np.argmax(np.abs(vector)))
    if vector[index] < 0:
        return -vector
    return vector


def _complete_basis(constraints):
    """
    Unit vector orthogonal to the leading non-negligible constraint vectors.

    Constraints are taken in order until two independent directions are
    found; later ones are ignored so the result always exists.
    """
    basis = []
    for vector in constraints:
        if len(basis) == 2:
            break
        residual = np.array(vector, dtype=float)
        for b in basis:
            residual = residual - np.dot(residual, b) * b
        norm = np.linalg.norm(residual)
        if norm > 1e-8:
            basis.append(residual / norm)
    best = None
    best_norm = -1.0
    for e in np.eye(3):
        residual = e.copy()
        for b in basis:
            residual = residual - np.dot(residual, b) * b
        norm = np.linalg.norm(residual)
        if norm > best_norm:
            best, best_norm = residual, norm
    return best / best_norm


def null_vector(shifted, previous=(), tolerance=1e-10, scale=None):
    """
    Deterministic unit vector in the (numerical) null space of a 3×3 matrix.

    When the matrix has rank two the null vector is the largest cross product
    of two of its rows. When the rank is one or zero, as for a repeated
    eigenvalue, the null space is completed with the direction orthogonal to
    the ``previous`` eigenvectors and, where it still fits, the dominant row.
    With two ``previous`` eigenvectors the result is their cross product.

    Parameters
    ----------
    shifted : array-like of shape (3, 3)
        Matrix :math:`C - \\lambda I`.
    previous : sequence of array-like, optional
        Unit eigenvectors already extracted for other eigenvalues.
    tolerance : float, optional
        Relative size below which a cross product or row counts as zero.
    scale : float, optional
        Magnitude the tolerance is relative to, usually the largest entry of
        the unshifted matrix. Defaults to the largest entry of ``shifted``.

    Returns
    -------
    np.ndarray of shape (3,)
    """
    shifted = np.asarray(shifted, dtype=float)
    previous = [np.asarray(v, dtype=float) for v in previous]
    if len(previous) >= 2:
        # the last axis is fixed by the two already found
        vector = np.cross(previous[0], previous[1])
        return _orient(vector / np.linalg.norm(vector))
    if scale is None:
        scale = np.max(np.abs(shifted))
    scale = max(scale, np.finfo(float).tiny)
    crosses = np.array([
        np.cross(shifted[0], shifted[1]),
        np.cross(shifted[0], shifted[2]),
        np.cross(shifted[1], shifted[2]),
    ])
    norms = np.linalg.norm(crosses, axis=1)
    best = int(np.argmax(norms))
    if norms[best] > tolerance * scale * scale:
        vector = crosses[best] / norms[best]
        for v in previous:
            vector = vector - np.dot(vector, v) * v
        norm = np.linalg.norm(vector)
        if norm > 0.5:
            return _orient(vector / norm)
    row_norms = np.linalg.norm(shifted, axis=1)
    dominant = int(np.argmax(row_norms))
    constraints = list(previous)
    if row_norms[dominant] > tolerance * scale:
        constraints.append(shifted[dominant] / row_norms[dominant])
    return _orient(_complete_basis(constraints))


def random_null_vector(shifted, rng=None, pivot_epsilon=1e-10):
    """
    Randomized null-space approximation of a 3×3 matrix.

    The row with the smallest absolute row sum is solved for its own
    coordinate after the other two coordinates have been drawn uniformly
    from [-1, 1]; a diagonal entry that is exactly zero is replaced by
    ``pivot_epsilon``. The result is normalized.

    The vector satisfies only the selected row, so it is an eigenvector only
    when the other two rows are consistent with it. Results vary between
    calls unless ``rng`` is seeded.
    """
    shifted = np.asarray(shifted, dtype=float)
    rng = np.random.default_rng(rng)
    row_sums = np.sum(np.abs(shifted), axis=1)
    row = int(np.argmin(row_sums))
    free = [k for k in range(3) if k != row]
    vector = np.zeros(3)
    vector[free] = rng.uniform(-1.0, 1.0, size=2)
    pivot = shifted[row, row]
    if pivot == 0:
        pivot = pivot_epsilon
    vector[row] = -np.dot(shifted[row, free], vector[free]) / pivot
    return vector / np.linalg.norm(vector)


def compute_eigenvectors(matrix, eigenvalues, method="deterministic", rng=None, pivot_epsilon=1e-10):
    """
    Unit eigenvectors of a symmetric 3×3 matrix, one per eigenvalue.

    Parameters
    ----------
    matrix : array-like of shape (3, 3)
        Symmetric matrix.
    eigenvalues : array-like
        Eigenvalues, typically from :func:`compute_eigenvalues`.
    method : str, optional
        ``'deterministic'`` (default) returns mutually orthogonal vectors with
        a fixed sign convention. ``'random'`` uses
        :func:`random_null_vector` and is not reproducible unless ``rng`` is
        seeded.
    rng : None, int or numpy.random.Generator, optional
        Random source for the ``'random'`` method.
    pivot_epsilon : float, optional
        Divisor substitute for the ``'random'`` method.

    Returns
    -------
    np.ndarray of shape (len(eigenvalues), 3)
        Row ``i`` is the eigenvector for ``eigenvalues[i]``.
    """
    if method not in EIGENVECTOR_METHODS:
        raise ValueError("Unsupported eigenvector method: {}.".format(method))
    matrix = np.asarray(matrix, dtype=float)
    scale = np.max(np.abs(matrix))
    if method == "random":
        rng = np.random.default_rng(rng)
    vectors = []
    for eigenvalue in eigenvalues:
        shifted = matrix - eigenvalue * np.eye(3)
        if method == "random":
            vectors.append(random_null_vector(shifted, rng=rng, pivot_epsilon=pivot_epsilon))
        else:
            vectors.append(null_vector(shifted, previous=vectors, scale=scale))
    return np.array(vectors).reshape(-1, 3)
