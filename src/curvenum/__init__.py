from . import bezier, context, integrate, optimize
from .optimize import DEFAULT_TOLERANCE, TOLERANCE, RootResult, brent, findroot

__all__ = [
    "bezier",
    "context",
    "integrate",
    "optimize",
    "DEFAULT_TOLERANCE",
    "TOLERANCE",
    "RootResult",
    "brent",
    "findroot",
]
