"""Right-hand side of the logistic growth equation."""

from typing import Callable

RHS = Callable[[float, float, float, float], float]


def logistic_rhs(t: float, y: float, r: float, K: float) -> float:
    """Return dy/dt = r * y * (1 - y / K).

    `t` is unused since the equation is autonomous; it stays in the signature
    so the integrators can drive any f(t, y, r, K).
    """
    return r * y * (1.0 - y / K)
