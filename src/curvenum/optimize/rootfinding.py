import dataclasses
import logging
import math
from typing import Literal

from curvenum.context import TOLERANCE, getcontext
from curvenum.typing import RealFunction

DEFAULT_TOLERANCE = TOLERANCE

# Smallest positive subnormal double.
_EPS = math.ulp(0.0)

_logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class RootResult:
    """Output of :func:`brent`.

    Attributes
    ----------
    root : float
        Best estimate of the root. This is the value :func:`findroot` returns.
    converged : bool
        ``True`` if the bracket shrank below the tolerance or an exact root was hit
        before the iteration budget ran out.
    iterations : int
        Number of iterations executed.
    nfev : int
        Number of evaluations of the function, including the two at the endpoints.
    """

    root: float
    converged: bool
    iterations: int
    nfev: int

    @property
    def status(self) -> Literal["SUCCESS", "FAILURE"]:
        return "SUCCESS" if self.converged else "FAILURE"


def brent(
    fun: RealFunction,
    a: float,
    b: float,
    max_iter: int | None = None,
    tol: float | None = None,
) -> RootResult:
    """Find a root of univariate scalar-valued function by Brent's method.

    Parameters
    ----------
    fun : Callable
        Function to find a root of.
    a : float
        One end of the bracket.
    b : float
        The other end of the bracket.
    max_iter : int, optional
        Maximum number of iterations (the default is ``getcontext().max_iter``).
    tol : float, optional
        Absolute tolerance (the default is ``getcontext().tol``).

    Returns
    -------
    RootResult

    Warnings
    --------
    `fun(a)` and `fun(b)` should have opposite signs. The bracket is not validated; if
    it does not hold, the result is an estimate that need not be a root.

    See Also
    --------
    findroot

    Examples
    --------
    >>> r = brent(lambda x: x**2 - 2, 0.0, 2.0, 50, 1e-12)
    >>> r.status
    'SUCCESS'
    >>> abs(r.root - 2**0.5) <= 1e-12
    True
    """
    if max_iter is None:
        max_iter = getcontext().max_iter

    if tol is None:
        tol = getcontext().tol

    c = b
    d = e = 0.0
    fa = fun(a)
    fb = fun(b)
    fc = fb

    for i in range(max_iter):
        if (fb > 0 and fc > 0) or (fb < 0 and fc < 0):
            c = a
            fc = fa
            e = d = b - a

        if abs(fc) < abs(fb):
            a, b, c = b, c, b
            fa, fb, fc = fb, fc, fb

        tol1 = 2 * _EPS * abs(b) + 0.5 * tol
        xm = 0.5 * (c - b)

        if abs(xm) <= tol1 or fb == 0:
            return RootResult(b, True, i, i + 2)

        if abs(e) >= tol1 and abs(fa) > abs(fb):
            s = fb / fa

            if a == c:
                # secant
                p = 2 * xm * s
                q = 1 - s
            else:
                # inverse quadratic interpolation
                q = fa / fc
                r = fb / fc
                p = s * (2 * xm * q * (q - r) - (b - a) * (r - 1))
                q = (q - 1) * (r - 1) * (s - 1)

            if p > 0:
                q = -q

            p = abs(p)

            if 2 * p < min(3 * xm * q - abs(tol1 * q), abs(e * q)):
                e = d
                d = p / q
            else:
                d = e = xm
        else:
            d = e = xm

        a = b
        fa = fb

        if abs(d) > tol1:
            b += d
        else:
            b += abs(tol1) if xm >= 0 else -abs(tol1)

        fb = fun(b)

    _logger.debug(
        "no convergence within %d iterations (estimate %r, residual %r)",
        max_iter,
        b,
        fb,
    )
    return RootResult(b, False, max(max_iter, 0), max(max_iter, 0) + 2)


def findroot(
    fun: RealFunction,
    a: float,
    b: float,
    max_iter: int | None = None,
    tol: float | None = None,
) -> float:
    """Find a root of univariate scalar-valued function.

    This is the same as ``brent(fun, a, b, max_iter, tol).root``. An estimate is always
    returned, even if the iteration budget is exhausted before convergence.

    Parameters
    ----------
    fun : Callable
        Function to find a root of.
    a : float
        One end of the bracket.
    b : float
        The other end of the bracket.
    max_iter : int, optional
        Maximum number of iterations (the default is ``getcontext().max_iter``).
    tol : float, optional
        Absolute tolerance (the default is ``getcontext().tol``).

    Returns
    -------
    float

    See Also
    --------
    brent

    Examples
    --------
    >>> x = findroot(lambda x: x - 0.5, 0.0, 1.0, 100, 1e-6)
    >>> abs(x - 0.5) <= 1e-6
    True
    """
    return brent(fun, a, b, max_iter, tol).root


find_root = findroot
