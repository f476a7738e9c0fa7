"""Logistic growth: fixed-step integrators compared against the exact solution.

Exports the numeric core for convenient imports. The scenario loader,
results writer and convergence helpers live in their own submodules so
that importing the core does not pull in pandas or PyYAML.
"""

from .rhs import logistic_rhs
from .analytic import exact_solution, exact_trajectory
from .time_grid import TIME_DECIMALS, time_grid
from .params import (
    InitialCondition,
    InvalidParameterError,
    ParameterSet,
    default_initial_conditions,
)
from .integrators import (
    METHODS,
    TrajectoryPoint,
    euler,
    improved_euler,
    runge_kutta4,
)
from .comparator import (
    Comparison,
    ErrorSummary,
    TrajectorySet,
    compare_trajectories,
    error_ratio,
    select_series,
)

__all__ = [
    "logistic_rhs",
    "exact_solution",
    "exact_trajectory",
    "TIME_DECIMALS",
    "time_grid",
    "InitialCondition",
    "InvalidParameterError",
    "ParameterSet",
    "default_initial_conditions",
    "METHODS",
    "TrajectoryPoint",
    "euler",
    "improved_euler",
    "runge_kutta4",
    "Comparison",
    "ErrorSummary",
    "TrajectorySet",
    "compare_trajectories",
    "error_ratio",
    "select_series",
]
