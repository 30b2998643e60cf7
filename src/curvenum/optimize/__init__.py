"""
#######################################
Root finding (:mod:`curvenum.optimize`)
#######################################

.. currentmodule:: curvenum.optimize

This module provides a bracketing root finder for univariate functions.

Root finding
============

.. autosummary::
    :toctree: generated/

    brent
    findroot

Miscellaneous
=============

.. autosummary::
    :toctree: generated/

    RootResult

"""

from .rootfinding import (
    DEFAULT_TOLERANCE,
    TOLERANCE,
    RootResult,
    brent,
    find_root,
    findroot,
)

__all__ = [
    "DEFAULT_TOLERANCE",
    "TOLERANCE",
    "RootResult",
    "brent",
    "find_root",
    "findroot",
]
