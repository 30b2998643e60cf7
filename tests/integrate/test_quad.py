import math

import mpmath
import numpy as np
import pytest

from curvenum.context import localcontext
from curvenum.integrate.quad import (
    ABSCISSAS,
    WEIGHTS,
    gauss_legendre,
    integrate,
    offset,
)


def test_tables():
    assert len(ABSCISSAS) == len(WEIGHTS) == 35
    assert [offset(n) for n in range(2, 9)] == [0, 2, 5, 9, 14, 20, 27]

    for n in range(2, 9):
        x, w = gauss_legendre(n)
        assert len(x) == len(w) == n
        assert pytest.approx(float(w.sum()), abs=1e-9) == 2.0
        assert pytest.approx(float(x.sum()), abs=1e-12) == 0.0
        assert np.all(np.abs(x) < 1.0)


def test_tables_readonly():
    with pytest.raises(ValueError):
        ABSCISSAS[0] = 0.0

    x, _ = gauss_legendre(4)

    with pytest.raises(ValueError):
        x[0] = 0.0


def test_exactness():
    assert integrate(lambda x: 1.0, 0.0, 1.0, 2) == 1.0
    assert pytest.approx(integrate(lambda x: x * x, 0.0, 1.0, 2), 1e-9) == 1 / 3


@pytest.mark.parametrize("n", range(2, 9))
def test_polynomial(n):
    degree = 2 * n - 1
    fun = lambda x: sum((k + 1) * x**k for k in range(degree + 1))  # noqa: E731
    a, b = -0.5, 1.5
    expected = sum(b ** (k + 1) - a ** (k + 1) for k in range(degree + 1))
    assert pytest.approx(integrate(fun, a, b, n), 1e-8) == expected


def test_orientation():
    for n in range(2, 9):
        expected = -integrate(math.exp, 2.0, 0.3, n)
        assert pytest.approx(integrate(math.exp, 0.3, 2.0, n), 1e-14) == expected


def test_order_clamping():
    assert integrate(math.sin, 0.0, 2.0, 1) == integrate(math.sin, 0.0, 2.0, 2)
    assert integrate(math.sin, 0.0, 2.0, -5) == integrate(math.sin, 0.0, 2.0, 2)
    assert integrate(math.sin, 0.0, 2.0, 100) == integrate(math.sin, 0.0, 2.0, 8)


def test_evaluations():
    for n in range(1, 12):
        xs = []

        def fun(x):
            xs.append(x)
            return x

        integrate(fun, -1.0, 3.0, n)
        assert len(xs) == min(max(n, 2), 8)
        assert all(-1.0 < x < 3.0 for x in xs)


def test_smooth():
    expected = float(mpmath.quad(mpmath.exp, [0, 1]))
    assert pytest.approx(integrate(math.exp, 0.0, 1.0, 8), 1e-9) == expected

    expected = float(mpmath.quad(lambda x: 1 / (1 + x**2), [0, 1]))
    assert pytest.approx(integrate(lambda x: 1 / (1 + x**2), 0.0, 1.0, 8), 1e-7) == (
        expected
    )


def test_nonfinite():
    assert math.isnan(integrate(lambda x: math.nan, 0.0, 1.0, 4))
    assert math.isinf(integrate(lambda x: math.inf, 0.0, 1.0, 4))


def test_default_order():
    calls = []

    def fun(x):
        calls.append(x)
        return x

    integrate(fun, 0.0, 1.0)
    assert len(calls) == 8

    calls.clear()

    with localcontext(order=3):
        integrate(fun, 0.0, 1.0)

    assert len(calls) == 3


def test_idempotence():
    fun = lambda x: math.sin(x) * math.exp(-x)  # noqa: E731
    assert integrate(fun, 0.1, 4.2, 5) == integrate(fun, 0.1, 4.2, 5)
