from __future__ import annotations

"""Shared time grid.

Every trajectory (numerical or analytic) is sampled on the same grid
t_i = i * h, i = 0..floor(tf / h). Each t_i is computed directly from the
index instead of by repeated addition, and rounded to `TIME_DECIMALS`
digits before storage, so samples from different methods pair up by index.
"""

from typing import List

from .params import num_steps

TIME_DECIMALS = 6


def grid_time(i: int, h: float) -> float:
    return round(i * h, TIME_DECIMALS)


def time_grid(tf: float, h: float) -> List[float]:
    """Return [t_0, ..., t_n] with n = floor(tf / h) and t_0 = 0.0."""
    return [grid_time(i, h) for i in range(num_steps(tf, h) + 1)]
