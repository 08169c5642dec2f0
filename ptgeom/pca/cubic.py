import numpy as np


def characteristic_coefficients(matrix):
    r"""
    Coefficients of the characteristic polynomial of a symmetric 3×3 matrix.

    The eigenvalues of :math:`C` are the roots of

    .. math::

        a\lambda^3 + b\lambda^2 + c\lambda + d = 0

    with :math:`a = -1`, :math:`b = \operatorname{tr} C`,
    :math:`c = -(C_{00}C_{11} + C_{11}C_{22} + C_{22}C_{00}) + C_{01}^2 + C_{02}^2 + C_{12}^2`
    and :math:`d = \det C`. Only the upper triangle of ``matrix`` is read.

    Returns
    -------
    a, b, c, d : float
    """
    m = np.asarray(matrix, dtype=float)
    a = -1.0
    b = m[0, 0] + m[1, 1] + m[2, 2]
    c = (-(m[0, 0] * m[1, 1] + m[1, 1] * m[2, 2] + m[2, 2] * m[0, 0])
         + m[0, 1] * m[0, 1] + m[0, 2] * m[0, 2] + m[1, 2] * m[1, 2])
    d = (m[0, 0] * m[1, 1] * m[2, 2]
         + 2.0 * m[0, 1] * m[1, 2] * m[0, 2]
         - m[0, 0] * m[1, 2] * m[1, 2]
         - m[1, 1] * m[0, 2] * m[0, 2]
         - m[2, 2] * m[0, 1] * m[0, 1])
    return a, b, c, d


def depress_cubic(a, b, c, d):
    r"""
    Reduce :math:`a\lambda^3 + b\lambda^2 + c\lambda + d` to the depressed form
    :math:`t^3 + pt + q` through the substitution :math:`\lambda = t - b / (3a)`.

    Returns
    -------
    p, q, shift : float
        Depressed coefficients and the shift :math:`-b / (3a)` that maps a
        root ``t`` back to ``t + shift``.
    """
    p = (3.0 * a * c - b * b) / (3.0 * a * a)
    q = (2.0 * b * b * b - 9.0 * a * b * c + 27.0 * a * a * d) / (27.0 * a * a * a)
    return p, q, -b / (3.0 * a)


def solve_cubic(p, q, tolerance=1e-12):
    r"""
    Real roots of the depressed cubic :math:`t^3 + pt + q = 0`.

    The discriminant :math:`D = q^2/4 + p^3/27` selects the method:

    - :math:`D > 0`: one real root by Cardano's formula,
      :math:`\sqrt[3]{-q/2 + \sqrt{D}} + \sqrt[3]{-q/2 - \sqrt{D}}`.
    - :math:`D = 0`: a repeated root. With :math:`u = \sqrt[3]{-q/2}` the
      roots are :math:`2u` and the double root :math:`-u`, which is listed
      twice so that three values are returned.
    - :math:`D < 0`: three distinct real roots by the trigonometric method,
      :math:`r\cos(\varphi/3 + 2\pi k/3)` with :math:`r = 2\sqrt{-p/3}` and
      :math:`\varphi = \arccos\left(-q / (2\sqrt{-(p/3)^3})\right)`.

    Parameters
    ----------
    p, q : float
        Depressed cubic coefficients.
    tolerance : float, optional
        :math:`D` is treated as zero when
        :math:`|D| \le tolerance \cdot \max(q^2/4, |p^3/27|)`.

    Returns
    -------
    list of float
        One root when :math:`D > 0`, otherwise three (not sorted).
    """
    discriminant = q * q / 4.0 + p * p * p / 27.0
    magnitude = max(q * q / 4.0, abs(p * p * p) / 27.0)
    if abs(discriminant) <= tolerance * magnitude:
        u = np.cbrt(-q / 2.0)
        return [2.0 * u, -u, -u]
    elif discriminant > 0:
        u = np.cbrt(-q / 2.0 + np.sqrt(discriminant))
        v = np.cbrt(-q / 2.0 - np.sqrt(discriminant))
        return [u + v]
    else:
        argument = -q / (2.0 * np.sqrt(-(p / 3.0) ** 3))
        phi = np.arccos(np.clip(argument, -1.0, 1.0))
        r = 2.0 * np.sqrt(-p / 3.0)
        return [
            r * np.cos(phi / 3.0),
            r * np.cos((phi + 2.0 * np.pi) / 3.0),
            r * np.cos((phi + 4.0 * np.pi) / 3.0),
        ]
