import numpy as np
import numpy.typing as npt

from curvenum.context import getcontext
from curvenum.typing import RealFunction

MIN_ORDER = 2
MAX_ORDER = 8

# fmt: off
_ABSCISSAS = (
    -0.5773502692, 0.5773502692,
    -0.7745966692, 0.7745966692, 0.0,
    -0.8611363116, 0.8611363116, -0.3399810436, 0.3399810436,
    -0.9061798459, 0.9061798459, -0.5384693101, 0.5384693101, 0.0,
    -0.9324695142, 0.9324695142, -0.6612093865, 0.6612093865, -0.2386191861,
    0.2386191861,
    -0.9491079123, 0.9491079123, -0.7415311856, 0.7415311856, -0.4058451514,
    0.4058451514, 0.0,
    -0.9602898565, 0.9602898565, -0.7966664774, 0.7966664774, -0.5255324099,
    0.5255324099, -0.1834346425, 0.1834346425,
)

_WEIGHTS = (
    1.0, 1.0,
    0.5555555556, 0.5555555556, 0.8888888888,
    0.3478548451, 0.3478548451, 0.6521451549, 0.6521451549,
    0.2369268851, 0.2369268851, 0.4786286705, 0.4786286705, 0.5688888888,
    0.1713244924, 0.1713244924, 0.3607615730, 0.3607615730, 0.4679139346,
    0.4679139346,
    0.1294849662, 0.1294849662, 0.2797053915, 0.2797053915, 0.3818300505,
    0.3818300505, 0.4179591837,
    0.1012285363, 0.1012285363, 0.2223810345, 0.2223810345, 0.3137066459,
    0.3137066459, 0.3626837834, 0.3626837834,
)
# fmt: on


def _readonly(values: tuple[float, ...]) -> npt.NDArray[np.float64]:
    result = np.array(values, dtype=np.float64)
    result.flags.writeable = False
    return result


ABSCISSAS = _readonly(_ABSCISSAS)
WEIGHTS = _readonly(_WEIGHTS)


def clamp_order(n: int) -> int:
    """Clamp the quadrature order `n` to [2, 8]."""
    return min(max(n, MIN_ORDER), MAX_ORDER)


def offset(n: int) -> int:
    """Return the index of the first node of order `n` in :data:`ABSCISSAS`.

    Examples
    --------
    >>> [offset(n) for n in range(2, 9)]
    [0, 2, 5, 9, 14, 20, 27]
    """
    return 0 if n == 2 else n * (n - 1) // 2 - 1


def gauss_legendre(
    n: int,
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """Return the Gauss-Legendre nodes and weights on [-1, 1].

    Parameters
    ----------
    n : int
        Number of nodes. It is clamped to [2, 8].

    Returns
    -------
    r0 : numpy.ndarray
        Read-only view of the abscissas.
    r1 : numpy.ndarray
        Read-only view of the weights, in the same order as `r0`.

    Examples
    --------
    >>> x, w = gauss_legendre(3)
    >>> x.tolist()
    [-0.7745966692, 0.7745966692, 0.0]
    >>> w.tolist()
    [0.5555555556, 0.5555555556, 0.8888888888]
    """
    n = clamp_order(n)
    start = offset(n)
    return ABSCISSAS[start : start + n], WEIGHTS[start : start + n]


def integrate(fun: RealFunction, a: float, b: float, n: int | None = None) -> float:
    r"""Integrate `fun` from `a` to `b` using the Gauss-Legendre rule.

    Parameters
    ----------
    fun : Callable
        Integrand. `fun` must be an univariate scalar-valued function.
    a : float
        Lower limit of integration.
    b : float
        Upper limit of integration. `b` may be smaller than `a`, in which case the
        result is the negated integral from `b` to `a`.
    n : int, optional
        Number of nodes, clamped to [2, 8] (the default is ``getcontext().order``).

    Returns
    -------
    float

    Notes
    -----
    The rule is exact for polynomials of degree at most :math:`2n-1`. `fun` is called
    exactly `n` times, and non-finite values propagate to the result.

    Examples
    --------
    >>> round(integrate(lambda x: x**2, 0.0, 3.0, 2), 6)
    9.0
    >>> integrate(lambda x: 1.0, 0.0, 1.0, 2)
    1.0
    """
    if n is None:
        n = getcontext().order

    n = clamp_order(n)
    start = offset(n)
    mul = 0.5 * (b - a)
    mid = mul + a
    total = 0.0

    for i in range(start, start + n):
        total += fun(mid + mul * float(ABSCISSAS[i])) * float(WEIGHTS[i])

    return mul * total
