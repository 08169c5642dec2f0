import pytest
import numpy as np
from scipy.linalg import eigh

from ptgeom.pca.eigen import compute_eigenvalues, compute_eigenvectors, null_vector, random_null_vector


def _random_covariance(seed):
    rng = np.random.default_rng(seed)
    points = rng.normal(size=(50, 3)) * [3.0, 1.5, 0.5]
    centered = points - points.mean(axis=0)
    return centered.T @ centered / points.shape[0]


def test_eigenvalues_match_scipy():
    for seed in range(5):
        covariance = _random_covariance(seed)
        expected = eigh(covariance, eigvals_only=True)[::-1]
        np.testing.assert_allclose(compute_eigenvalues(covariance), expected, rtol=1e-8, atol=1e-10)


def test_eigenvalues_descending():
    values = compute_eigenvalues(_random_covariance(7))
    assert values[0] >= values[1] >= values[2]


def test_eigenvalues_of_diagonal_matrix():
    np.testing.assert_allclose(compute_eigenvalues(np.diag([1.0, 5.0, 3.0])), [5.0, 3.0, 1.0], atol=1e-12)


def test_eigenvalues_repeated():
    np.testing.assert_allclose(compute_eigenvalues(np.diag([2.0, 2.0, 1.0])), [2.0, 2.0, 1.0], atol=1e-12)
    np.testing.assert_allclose(compute_eigenvalues(np.eye(3) * 4.0), [4.0, 4.0, 4.0], atol=1e-12)


def test_eigenvalues_of_zero_matrix():
    np.testing.assert_array_equal(compute_eigenvalues(np.zeros((3, 3))), np.zeros(3))


def test_eigenvectors_satisfy_definition():
    covariance = _random_covariance(11)
    values = compute_eigenvalues(covariance)
    vectors = compute_eigenvectors(covariance, values)
    for value, vector in zip(values, vectors):
        np.testing.assert_allclose(covariance @ vector, value * vector, atol=1e-8)
    np.testing.assert_allclose(vectors @ vectors.T, np.eye(3), atol=1e-8)


def test_eigenvectors_for_repeated_eigenvalue_are_orthonormal():
    """
    Every vector of the plane is an eigenvector for a double eigenvalue; the
    two returned for it must still be orthogonal.
    """
    rotation, _ = np.linalg.qr(np.random.default_rng(5).normal(size=(3, 3)))
    covariance = rotation @ np.diag([2.0, 2.0, 0.5]) @ rotation.T
    values = compute_eigenvalues(covariance)
    vectors = compute_eigenvectors(covariance, values)
    np.testing.assert_allclose(vectors @ vectors.T, np.eye(3), atol=1e-7)
    for value, vector in zip(values, vectors):
        np.testing.assert_allclose(covariance @ vector, value * vector, atol=1e-7)


@pytest.mark.parametrize("gap", [1e-9, 1e-8, 1e-7, 1e-6, 1e-5, 1e-4, 1e-3])
def test_eigenvectors_orthonormal_for_nearly_triple_eigenvalue(gap):
    """
    When the three eigenvalues almost coincide every shifted matrix is close
    to zero; the returned axes must still form an orthonormal frame.
    """
    rng = np.random.default_rng(17)
    for _ in range(100):
        rotation, _ = np.linalg.qr(rng.normal(size=(3, 3)))
        covariance = rotation @ np.diag(3.0 + gap * rng.uniform(size=3)) @ rotation.T
        values = compute_eigenvalues(covariance)
        vectors = compute_eigenvectors(covariance, values)
        np.testing.assert_allclose(vectors @ vectors.T, np.eye(3), atol=1e-8)


def test_eigenvectors_are_deterministic():
    covariance = _random_covariance(3)
    values = compute_eigenvalues(covariance)
    first = compute_eigenvectors(covariance, values)
    second = compute_eigenvectors(covariance, values)
    np.testing.assert_array_equal(first, second)
    # sign convention: the largest component of each vector is positive
    for vector in first:
        assert vector[np.argmax(np.abs(vector))] > 0


def test_null_vector_of_rank_two_matrix():
    shifted = np.diag([0.0, -1.0, -2.0])
    np.testing.assert_allclose(null_vector(shifted), [1.0, 0.0, 0.0])


def test_null_vector_respects_previous():
    shifted = np.diag([0.0, 0.0, 3.0])
    vector = null_vector(shifted, previous=[np.array([1.0, 0.0, 0.0])])
    np.testing.assert_allclose(vector, [0.0, 1.0, 0.0])


def test_null_vector_with_two_previous_is_their_cross_product():
    noise = 1e-12 * np.random.default_rng(4).normal(size=(3, 3))
    vector = null_vector(noise, previous=[[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]], scale=3.0)
    np.testing.assert_allclose(vector, [0.0, 0.0, 1.0])


def test_null_vector_noise_row_does_not_override_previous():
    noise = 1e-12 * np.random.default_rng(6).normal(size=(3, 3))
    previous = np.array([0.0, 0.6, 0.8])
    vector = null_vector(noise, previous=[previous], scale=3.0)
    assert np.linalg.norm(vector) == pytest.approx(1.0)
    assert np.dot(vector, previous) == pytest.approx(0.0, abs=1e-12)


def test_random_null_vector_solves_selected_row():
    """
    The row with the smallest absolute sum (row 0 here) is satisfied exactly.
    """
    shifted = np.array([[1.0, 0.5, 0.0],
                        [0.5, 3.0, 1.0],
                        [0.0, 1.0, 4.0]])
    vector = random_null_vector(shifted, rng=np.random.default_rng(0))
    assert np.linalg.norm(vector) == pytest.approx(1.0)
    assert np.dot(shifted[0], vector) == pytest.approx(0.0, abs=1e-12)


def test_random_null_vector_zero_pivot_substitution():
    """
    A zero diagonal entry on the selected row is replaced by a tiny epsilon
    instead of dividing by zero.
    """
    shifted = np.diag([0.0, -1.0, -2.0])
    vector = random_null_vector(shifted, rng=0)
    assert np.all(np.isfinite(vector))
    assert np.linalg.norm(vector) == pytest.approx(1.0)


def test_random_null_vector_keeps_sign_of_small_pivot():
    """
    Only an exactly zero pivot is substituted; a tiny negative one is divided
    by as it is.
    """
    shifted = np.array([[-1e-12, 1e-13, 0.0],
                        [0.0, 5.0, 0.0],
                        [0.0, 0.0, 5.0]])
    free = np.random.default_rng(3).uniform(-1.0, 1.0, size=2)
    expected = np.array([0.1 * free[0], free[0], free[1]])
    expected /= np.linalg.norm(expected)
    np.testing.assert_allclose(random_null_vector(shifted, rng=3), expected, rtol=1e-9, atol=1e-12)


def test_random_method_reproducible_with_seed():
    covariance = _random_covariance(2)
    values = compute_eigenvalues(covariance)
    first = compute_eigenvectors(covariance, values, method="random", rng=42)
    second = compute_eigenvectors(covariance, values, method="random", rng=42)
    np.testing.assert_array_equal(first, second)
    np.testing.assert_allclose(np.linalg.norm(first, axis=1), 1.0)


def test_unknown_method_raises():
    with pytest.raises(ValueError, match="Unsupported eigenvector method"):
        compute_eigenvectors(np.eye(3), [1.0, 1.0, 1.0], method="qr")
