"""
###############################
Typing (:mod:`curvenum.typing`)
###############################

This module provides type definitions commonly used between modules.

.. autoclass:: RealFunction
    :show-inheritance:
    :no-members:

"""

from abc import abstractmethod
from typing import Protocol


class RealFunction(Protocol):
    """Protocol for univariate real-valued functions.

    Objects implementing this protocol are called with one float and return a float.
    They are expected to be pure, since numerical routines may call them any number of
    times and in any order.
    """

    __slots__ = ()

    @abstractmethod
    def __call__(self, x: float, /) -> float: ...
