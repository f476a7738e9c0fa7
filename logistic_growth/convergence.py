from __future__ import annotations

"""
Observed order of accuracy by step halving.

For a method with global error C * h^p, halving h divides the error by 2^p,
so p ~ log2(e(h) / e(h/2)). The error used is the same maximum absolute
deviation from the analytic curve reported by the comparator.
"""

import logging
import math
from typing import Iterable, List

import pandas as pd

from .analytic import exact_trajectory
from .comparator import max_abs_error
from .integrators import METHODS, get_method

log = logging.getLogger(__name__)


def global_error(method: str, r: float, K: float, y0: float, tf: float, h: float) -> float:
    """Max |method - analytic| over the grid for a single initial condition."""
    points = get_method(method).integrator(r, K, y0, tf, h)
    times = [p.t for p in points]
    return max_abs_error([p.y for p in points], exact_trajectory(times, r, K, y0))


def observed_order(method: str, r: float, K: float, y0: float, tf: float, h: float, refinements: int = 1) -> List[float]:
    """Return one observed-order estimate per halving of `h`.

    `tf` should be a multiple of every step used, otherwise the grids end
    at different times and the estimates are polluted.
    """
    if refinements < 1:
        raise ValueError("refinements must be >= 1")
    errors = [global_error(method, r, K, y0, tf, h / 2**k) for k in range(refinements + 1)]
    orders: List[float] = []
    for coarse, fine in zip(errors, errors[1:]):
        if coarse == 0.0 or fine == 0.0:
            orders.append(math.nan)
        else:
            orders.append(math.log2(coarse / fine))
    log.debug("Observed order for %s: errors=%s orders=%s", method, errors, orders)
    return orders


def convergence_table(r: float, K: float, y0: float, tf: float, steps: Iterable[float]) -> pd.DataFrame:
    """Error of every method for each step size in `steps`.

    Columns: `h` followed by one column per method key.
    """
    rows = []
    for h in steps:
        row = {"h": float(h)}
        for key in METHODS:
            row[key] = global_error(key, r, K, y0, tf, h)
        rows.append(row)
    return pd.DataFrame(rows, columns=["h", *METHODS])
