"""
######################################
Quadrature (:mod:`curvenum.integrate`)
######################################

.. currentmodule:: curvenum.integrate

This module provides fixed-order Gauss-Legendre quadrature.

Quadrature functions
====================

.. autosummary::
    :toctree: generated/

    integrate

Nodes and weights
=================

.. autosummary::
    :toctree: generated/

    gauss_legendre
    clamp_order
    offset

"""

from .quad import (
    ABSCISSAS,
    MAX_ORDER,
    MIN_ORDER,
    WEIGHTS,
    clamp_order,
    gauss_legendre,
    integrate,
    offset,
)

__all__ = [
    "ABSCISSAS",
    "MAX_ORDER",
    "MIN_ORDER",
    "WEIGHTS",
    "clamp_order",
    "gauss_legendre",
    "integrate",
    "offset",
]
