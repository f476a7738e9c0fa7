from __future__ import annotations

"""Closed-form solution of the logistic equation.

    y(t) = K * y0 / (y0 + (K - y0) * exp(-r * t))

At y0 = K the second denominator term vanishes and the solution is the
constant K; at y0 = 0 the numerator vanishes and the solution is 0.
"""

import math
from typing import List, Sequence


def exact_solution(t: float, r: float, K: float, y0: float) -> float:
    """Return K * y0 / (y0 + (K - y0) * exp(-r * t))."""
    numerator = K * y0
    if numerator == 0.0:
        # y0 = 0 stays at 0; the denominator K * exp(-r * t) underflows for large r * t
        return 0.0
    denominator = y0 + (K - y0) * math.exp(-r * t)
    if denominator == 0.0:
        # y0 < 0: the solution blows up in finite time
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def exact_trajectory(times: Sequence[float], r: float, K: float, y0: float) -> List[float]:
    """Evaluate `exact_solution` on every point of a time grid."""
    return [exact_solution(t, r, K, y0) for t in times]
