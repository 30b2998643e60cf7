"""
#################################
Context (:mod:`curvenum.context`)
#################################

.. currentmodule:: curvenum.context

This module provides the defaults used when the quadrature order, the iteration
budget, or the tolerance is omitted.

.. autosummary::
    :toctree: generated/

    Context
    getcontext
    localcontext
    setcontext

"""

import contextlib
import contextvars
from typing import Self

TOLERANCE = 1e-5


class Context:
    """Create a new context.

    Parameters
    ----------
    order : int, default=8
        Number of Gauss-Legendre nodes used by :func:`curvenum.integrate.integrate`.
        Values outside [2, 8] are clamped when the context is used.
    max_iter : int, default=100
        Maximum number of iterations of :func:`curvenum.optimize.findroot`.
    tol : float, default=1e-5
        Convergence tolerance of :func:`curvenum.optimize.findroot`.

    Examples
    --------
    >>> ctx = Context(order=4)
    >>> ctx
    Context(order=4, max_iter=100, tol=1e-05)
    >>> ctx.replace(tol=1e-9).tol
    1e-09
    """

    __slots__ = ("_order", "_max_iter", "_tol")
    _order: int
    _max_iter: int
    _tol: float

    def __init__(self, order: int = 8, max_iter: int = 100, tol: float = TOLERANCE):
        if not (isinstance(order, int) and isinstance(max_iter, int)):
            raise TypeError

        if max_iter <= 0 or not tol > 0:
            raise ValueError

        self._order = order
        self._max_iter = max_iter
        self._tol = float(tol)

    @property
    def order(self) -> int:
        return self._order

    @property
    def max_iter(self) -> int:
        return self._max_iter

    @property
    def tol(self) -> float:
        return self._tol

    def copy(self) -> Self:
        return self.__class__(self._order, self._max_iter, self._tol)

    def replace(
        self,
        *,
        order: int | None = None,
        max_iter: int | None = None,
        tol: float | None = None,
    ) -> Self:
        """Return a copy of the context with the given fields replaced."""
        return self.__class__(
            self._order if order is None else order,
            self._max_iter if max_iter is None else max_iter,
            self._tol if tol is None else tol,
        )

    def __repr__(self):
        return (
            f"{type(self).__name__}(order={self._order!r}, "
            f"max_iter={self._max_iter!r}, tol={self._tol!r})"
        )

    def __eq__(self, rhs: object) -> bool:
        if not isinstance(rhs, Context):
            return NotImplemented

        return (self._order, self._max_iter, self._tol) == (
            rhs._order,
            rhs._max_iter,
            rhs._tol,
        )

    def __hash__(self):
        return hash((self._order, self._max_iter, self._tol))

    def __copy__(self) -> Self:
        return self.copy()


_var: contextvars.ContextVar[Context] = contextvars.ContextVar("curvenum")


def getcontext() -> Context:
    """Return the current context for the active thread."""
    if context := _var.get(None):
        return context

    context = Context()
    _var.set(context)
    return context


def setcontext(ctx: Context) -> None:
    """Set the current context for the active thread to `ctx`."""
    if not isinstance(ctx, Context):
        raise TypeError

    _var.set(ctx)


@contextlib.contextmanager
def localcontext(
    ctx: Context | None = None,
    *,
    order: int | None = None,
    max_iter: int | None = None,
    tol: float | None = None,
):
    """Return a context manager that will set the current context for the active thread
    to a copy of `ctx` on entry to the with-statement and restore the previous context
    when exiting the with-statement.

    Keyword arguments override the corresponding fields of the copy.

    Examples
    --------
    >>> with localcontext(order=2) as ctx:
    ...     getcontext().order
    2
    >>> getcontext().order
    8
    """
    if ctx is None:
        ctx = getcontext()

    ctx = ctx.replace(order=order, max_iter=max_iter, tol=tol)
    token = _var.set(ctx)

    try:
        yield ctx
    finally:
        _var.reset(token)
