"""
######################################
Bézier curves (:mod:`curvenum.bezier`)
######################################

.. currentmodule:: curvenum.bezier

This module measures cubic Bézier segments. A segment is given by four control
points, as an array-like of shape ``(4, 2)``.

.. autosummary::
    :toctree: generated/

    arclength
    parameter_at
    speed

"""

import math
from collections.abc import Callable

import numpy as np
import numpy.typing as npt

from curvenum.context import TOLERANCE
from curvenum.integrate.quad import integrate
from curvenum.optimize.rootfinding import findroot


def _asarray(points: npt.ArrayLike) -> npt.NDArray[np.float64]:
    result = np.asarray(points, dtype=np.float64)

    if result.shape != (4, 2):
        raise ValueError

    return result


def _order(a: float, b: float) -> int:
    return max(2, min(8, math.ceil(abs(b - a) * 32)))


def speed(points: npt.ArrayLike) -> Callable[[float], float]:
    """Return the speed :math:`t \\mapsto |B'(t)|` of the segment.

    Parameters
    ----------
    points : array_like, shape (4, 2)
        Control points.

    Examples
    --------
    >>> ds = speed([(0, 0), (1, 0), (2, 0), (3, 0)])
    >>> ds(0.25)
    3.0
    """
    p0, p1, p2, p3 = _asarray(points)
    ax, ay = (9 * (p1 - p2) + 3 * (p3 - p0)).tolist()
    bx, by = (6 * (p0 + p2) - 12 * p1).tolist()
    cx, cy = (3 * (p1 - p0)).tolist()

    def fun(t: float) -> float:
        dx = (ax * t + bx) * t + cx
        dy = (ay * t + by) * t + cy
        return math.hypot(dx, dy)

    return fun


def arclength(
    points: npt.ArrayLike, a: float = 0.0, b: float = 1.0, n: int | None = None
) -> float:
    """Return the arc length of the segment between the parameters `a` and `b`.

    Parameters
    ----------
    points : array_like, shape (4, 2)
        Control points.
    a : float, default=0.0
        Parameter at which measuring starts.
    b : float, default=1.0
        Parameter at which measuring ends.
    n : int, optional
        Number of quadrature nodes. By default, it grows with ``|b - a|``.

    See Also
    --------
    curvenum.integrate.integrate

    Examples
    --------
    >>> round(arclength([(0, 0), (1, 1), (2, 2), (3, 3)]), 6)
    4.242641
    """
    if n is None:
        n = _order(a, b)

    return integrate(speed(points), a, b, n)


def parameter_at(
    points: npt.ArrayLike,
    length: float,
    start: float = 0.0,
    max_iter: int = 32,
    tol: float = TOLERANCE,
) -> float:
    """Return the parameter at which the arc length measured from `start` equals
    `length`.

    Parameters
    ----------
    points : array_like, shape (4, 2)
        Control points.
    length : float
        Arc length. If `length` is negative, the curve is walked backwards from
        `start`.
    start : float, default=0.0
        Parameter at which measuring starts.
    max_iter : int, default=32
        Maximum number of iterations of the root finder.
    tol : float, default=1e-5
        Tolerance of the root finder.

    Returns
    -------
    float
        If `length` exceeds the length of the remaining curve, the end of the curve
        (``1.0`` or ``0.0``) is returned.

    See Also
    --------
    curvenum.optimize.findroot

    Examples
    --------
    >>> t = parameter_at([(0, 0), (1, 0), (2, 0), (3, 0)], 1.5)
    >>> abs(t - 0.5) < 1e-5
    True
    """
    if length == 0:
        return start

    points = _asarray(points)
    forward = length > 0
    a, b = (start, 1.0) if forward else (0.0, start)
    total = arclength(points, a, b)

    if abs(length) >= total:
        return b if forward else a

    return findroot(lambda t: arclength(points, start, t) - length, a, b, max_iter, tol)
