import threading

import pytest

from curvenum.context import Context, getcontext, localcontext, setcontext


def test_defaults():
    ctx = Context()
    assert (ctx.order, ctx.max_iter, ctx.tol) == (8, 100, 1e-5)
    assert ctx == ctx.copy()
    assert ctx.replace(order=3) == Context(3)


def test_validation():
    with pytest.raises(TypeError):
        Context(order=2.5)  # type: ignore

    with pytest.raises(ValueError):
        Context(max_iter=0)

    with pytest.raises(ValueError):
        Context(tol=0.0)

    with pytest.raises(TypeError):
        setcontext(None)  # type: ignore


def test_localcontext():
    before = getcontext()

    with localcontext(order=4, tol=1e-8) as ctx:
        assert getcontext() is ctx
        assert (ctx.order, ctx.max_iter, ctx.tol) == (4, before.max_iter, 1e-8)

        with localcontext(max_iter=7):
            assert getcontext().order == 4
            assert getcontext().max_iter == 7

        assert getcontext() is ctx

    assert getcontext() is before


def test_setcontext():
    before = getcontext()

    try:
        setcontext(Context(order=5))
        assert getcontext().order == 5
    finally:
        setcontext(before)


def test_thread_local():
    result = []

    def target():
        result.append(getcontext().order)

    with localcontext(order=2):
        thread = threading.Thread(target=target)
        thread.start()
        thread.join()

    assert result == [8]
