from __future__ import annotations

"""
Fixed-step explicit integrators for the logistic equation.

Three schemes share one driver loop:
- `euler`          — first order, one RHS evaluation per step
- `improved_euler` — Heun predictor-corrector, second order, two evaluations
- `runge_kutta4`   — classical RK4, fourth order, four evaluations

Each integrator returns `floor(tf / h) + 1` `TrajectoryPoint`s whose time
coordinates come from `time_grid`, so all methods (and the analytic curve)
can be compared index by index. Only `t` is rounded; `y` is kept at full
precision.

`METHODS` is the registry the comparator, the convergence study and the
results writer iterate over.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, NamedTuple

from .params import num_steps, validate_run_inputs
from .rhs import RHS, logistic_rhs
from .time_grid import grid_time


class TrajectoryPoint(NamedTuple):
    t: float
    y: float


# step(rhs, t, y, h, r, K) -> y_next
Step = Callable[[RHS, float, float, float, float, float], float]
Integrator = Callable[..., List[TrajectoryPoint]]


def euler_step(rhs: RHS, t: float, y: float, h: float, r: float, K: float) -> float:
    return y + h * rhs(t, y, r, K)


def improved_euler_step(rhs: RHS, t: float, y: float, h: float, r: float, K: float) -> float:
    k1 = rhs(t, y, r, K)
    k2 = rhs(t + h, y + h * k1, r, K)
    return y + (h / 2.0) * (k1 + k2)


def rk4_step(rhs: RHS, t: float, y: float, h: float, r: float, K: float) -> float:
    half = h / 2.0
    k1 = rhs(t, y, r, K)
    k2 = rhs(t + half, y + half * k1, r, K)
    k3 = rhs(t + half, y + half * k2, r, K)
    k4 = rhs(t + h, y + h * k3, r, K)
    return y + (h / 6.0) * (k1 + 2.0 * k2 + 2.0 * k3 + k4)


def integrate(step: Step, r: float, K: float, y0: float, tf: float, h: float, rhs: RHS = logistic_rhs) -> List[TrajectoryPoint]:
    """Advance `y0` with `step` over the shared grid and collect every sample.

    Stage times are i * h computed from the step index, never accumulated.
    """
    r, K, y0, tf, h = validate_run_inputs(r, K, y0, tf, h)
    n = num_steps(tf, h)

    y = y0
    points = [TrajectoryPoint(0.0, y0)]
    for i in range(n):
        y = step(rhs, i * h, y, h, r, K)
        points.append(TrajectoryPoint(grid_time(i + 1, h), y))
    return points


def euler(r: float, K: float, y0: float, tf: float, h: float, rhs: RHS = logistic_rhs) -> List[TrajectoryPoint]:
    """Explicit Euler: y_{i+1} = y_i + h f(t_i, y_i). Global error O(h)."""
    return integrate(euler_step, r, K, y0, tf, h, rhs)


def improved_euler(r: float, K: float, y0: float, tf: float, h: float, rhs: RHS = logistic_rhs) -> List[TrajectoryPoint]:
    """Improved Euler (Heun). Global error O(h^2)."""
    return integrate(improved_euler_step, r, K, y0, tf, h, rhs)


def runge_kutta4(r: float, K: float, y0: float, tf: float, h: float, rhs: RHS = logistic_rhs) -> List[TrajectoryPoint]:
    """Classical fourth-order Runge-Kutta. Global error O(h^4)."""
    return integrate(rk4_step, r, K, y0, tf, h, rhs)


@dataclass(frozen=True)
class MethodInfo:
    key: str
    label: str
    order: int
    integrator: Integrator


METHODS: Dict[str, MethodInfo] = {
    "euler": MethodInfo("euler", "Euler (O1)", 1, euler),
    "euler_improved": MethodInfo("euler_improved", "Improved Euler (O2)", 2, improved_euler),
    "rk4": MethodInfo("rk4", "Runge-Kutta 4 (O4)", 4, runge_kutta4),
}

NUMERIC_METHODS = tuple(METHODS)
ANALYTIC = "analytic"
ALL_SERIES = (ANALYTIC,) + NUMERIC_METHODS


def get_method(key: str) -> MethodInfo:
    try:
        return METHODS[key]
    except KeyError:
        raise ValueError(f"Unknown method '{key}'. Expected one of: {', '.join(METHODS)}") from None
