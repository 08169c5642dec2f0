"""
The `pca` module derives the orientation and spread of an unordered 3D point cloud.

- **analysis**: Centroid, covariance matrix and the :func:`compute_pca` entry point returning a :class:`PCAResult`.
- **eigen**: Eigenvalues and eigenvectors of a symmetric 3×3 matrix.
- **cubic**: Characteristic polynomial and the analytic (Cardano / trigonometric) cubic root solver.

No general linear-algebra routine is used for the decomposition; the 3×3 case is solved in closed form.
"""
from ptgeom.pca.analysis import PCAResult, compute_pca, compute_centroid, compute_covariance
from ptgeom.pca.eigen import compute_eigenvalues, compute_eigenvectors, null_vector, random_null_vector
from ptgeom.pca.cubic import characteristic_coefficients, depress_cubic, solve_cubic
