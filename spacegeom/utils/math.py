from __future__ import annotations

import math

import numpy as np

# Exact comparison by default. Assigning positive values here switches every degeneracy test of the package
# (zero coefficients, dependence ratios, coincidence checks) to a tolerance based comparison.
EQ_TOL_REL = 0.0
EQ_TOL_ABS = 0.0


def isclose(a: float, b: float, rtol: float | None = None, atol: float | None = None) -> bool:
    """Compares two floats using the configured tolerances.

    For documentation of the tolerance parameters see :func:`numpy.isclose`. With both tolerances equal to zero,
    the comparison is exact floating point equality.

    Args:
        a, b: The numbers to compare.
        rtol: The relative tolerance parameter, defaults to `EQ_TOL_REL`.
        atol: The absolute tolerance parameter, defaults to `EQ_TOL_ABS`.

    Returns:
        True if the two numbers are considered equal.

    """
    if rtol is None:
        rtol = EQ_TOL_REL
    if atol is None:
        atol = EQ_TOL_ABS
    if rtol == 0 and atol == 0:
        return bool(a == b)
    return bool(np.isclose(a, b, rtol=rtol, atol=atol))


def is_zero(a: float, atol: float | None = None) -> bool:
    """Checks whether a number is zero using the configured absolute tolerance.

    Args:
        a: The number to check.
        atol: The absolute tolerance parameter, defaults to `EQ_TOL_ABS`.

    Returns:
        True if the number is considered zero.

    """
    return isclose(a, 0.0, rtol=0.0, atol=atol)


def acute_angle(angle: float) -> float:
    r"""Folds an angle in :math:`[0, \pi]` into :math:`[0, \pi / 2]`.

    Undirected lines and planes have no canonical orientation, so the angle between them is the smaller of the two
    supplementary angles.

    Args:
        angle: The angle in radians.

    Returns:
        The acute (or right) angle.

    """
    if angle > math.pi / 2:
        return math.pi - angle
    return angle
