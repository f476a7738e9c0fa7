from __future__ import annotations

"""
Trajectory comparison across integration methods.

Responsibilities
- For every ACTIVE initial condition, run the three integrators and evaluate
  the analytic solution on the same time grid (one `TrajectorySet` each).
- Flatten the sets into one record per time index, keyed
  `<series>_<condition index>` (e.g. `rk4_0`, `analytic_2`), for tables
  and charts.
- Reduce to an `ErrorSummary`: per numerical method, the maximum absolute
  deviation from the analytic value over every (condition, time index) pair.

Design notes
- Samples are paired by index, never interpolated; this relies on every
  series being produced from `time_grid(tf, h)`.
- A run is a pure function of a `ParameterSet` snapshot and a sequence of
  `InitialCondition`s. Nothing is cached between runs.
- With no active conditions the summary is all zeros (vacuous maximum).
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .analytic import exact_trajectory
from .integrators import ALL_SERIES, ANALYTIC, METHODS, NUMERIC_METHODS
from .params import InitialCondition, ParameterSet, active_conditions, as_conditions
from .time_grid import time_grid

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrajectorySet:
    index: int
    y0: float
    analytic: List[float]
    euler: List[float]
    euler_improved: List[float]
    rk4: List[float]

    def series(self, key: str) -> List[float]:
        """Return the y-values of `analytic` or of a method key."""
        if key == ANALYTIC or key in METHODS:
            return getattr(self, key)
        raise ValueError(f"Unknown series '{key}'")


@dataclass(frozen=True)
class ErrorSummary:
    euler: float = 0.0
    euler_improved: float = 0.0
    rk4: float = 0.0

    def as_dict(self) -> Dict[str, float]:
        return {key: getattr(self, key) for key in NUMERIC_METHODS}


@dataclass(frozen=True)
class Comparison:
    params: ParameterSet
    times: List[float]
    trajectory_sets: List[TrajectorySet]
    records: List[Dict[str, float]]
    errors: ErrorSummary


def series_key(method: str, index: int) -> str:
    return f"{method}_{index}"


def max_abs_error(numeric: Sequence[float], reference: Sequence[float]) -> float:
    """Max |numeric[i] - reference[i]|; 0.0 for empty sequences."""
    if len(numeric) != len(reference):
        raise ValueError(
            f"Cannot compare misaligned series: {len(numeric)} vs {len(reference)} samples"
        )
    return max((abs(a - b) for a, b in zip(numeric, reference)), default=0.0)


def compute_trajectory_set(params: ParameterSet, condition: InitialCondition, index: int, times: Sequence[float]) -> TrajectorySet:
    """Run every method for a single initial condition."""
    y0 = condition.y0
    values: Dict[str, List[float]] = {}
    for key, info in METHODS.items():
        points = info.integrator(params.r, params.K, y0, params.tf, params.h)
        values[key] = [p.y for p in points]
    analytic = exact_trajectory(times, params.r, params.K, y0)

    for key, ys in values.items():
        if len(ys) != len(times):
            raise RuntimeError(f"{key} produced {len(ys)} samples for a {len(times)}-point grid")

    return TrajectorySet(
        index=index,
        y0=y0,
        analytic=analytic,
        euler=values["euler"],
        euler_improved=values["euler_improved"],
        rk4=values["rk4"],
    )


def build_records(times: Sequence[float], trajectory_sets: Sequence[TrajectorySet]) -> List[Dict[str, float]]:
    """Merge all sets into one dict per time index."""
    records: List[Dict[str, float]] = []
    for i, t in enumerate(times):
        row: Dict[str, float] = {"t": t}
        for ts in trajectory_sets:
            row[series_key(ANALYTIC, ts.index)] = ts.analytic[i]
            for key in NUMERIC_METHODS:
                row[series_key(key, ts.index)] = ts.series(key)[i]
        records.append(row)
    return records


def summarize_errors(trajectory_sets: Iterable[TrajectorySet]) -> ErrorSummary:
    maxima = {key: 0.0 for key in NUMERIC_METHODS}
    for ts in trajectory_sets:
        for key in NUMERIC_METHODS:
            maxima[key] = max(maxima[key], max_abs_error(ts.series(key), ts.analytic))
    return ErrorSummary(**maxima)


def compare_trajectories(
    params: ParameterSet,
    conditions: Sequence[InitialCondition | float],
    *,
    max_workers: Optional[int] = None,
) -> Comparison:
    """Compare all methods against the analytic solution.

    `conditions` may mix `InitialCondition` objects and bare y0 numbers
    (treated as active). Inactive entries are skipped and the remaining ones
    are numbered 0..m-1 in input order.

    When `max_workers` > 1 the per-condition work runs in a thread pool;
    results are assembled in input order either way.
    """
    active = active_conditions(as_conditions(conditions))
    times = time_grid(params.tf, params.h)

    if max_workers and max_workers > 1 and len(active) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            futures = [
                pool.submit(compute_trajectory_set, params, cond, idx, times)
                for idx, cond in enumerate(active)
            ]
            trajectory_sets = [f.result() for f in futures]
    else:
        trajectory_sets = [
            compute_trajectory_set(params, cond, idx, times) for idx, cond in enumerate(active)
        ]

    errors = summarize_errors(trajectory_sets)
    log.debug(
        "Compared %d initial conditions on %d grid points (r=%g, K=%g, tf=%g, h=%g)",
        len(trajectory_sets),
        len(times),
        params.r,
        params.K,
        params.tf,
        params.h,
    )
    return Comparison(
        params=params,
        times=times,
        trajectory_sets=trajectory_sets,
        records=build_records(times, trajectory_sets),
        errors=errors,
    )


def error_ratio(errors: ErrorSummary, method: str) -> Optional[float]:
    """Ratio of `method`'s max error to the RK4 max error.

    Returns None when the RK4 error is exactly zero: the ratio is undefined.
    """
    if method not in METHODS:
        raise ValueError(f"Unknown method '{method}'")
    if errors.rk4 == 0.0:
        return None
    return getattr(errors, method) / errors.rk4


def format_ratio(ratio: Optional[float]) -> str:
    return "undefined" if ratio is None else f"{ratio:.0f}x"


def select_series(
    comparison: Comparison,
    methods: Optional[Iterable[str]] = None,
    conditions: Optional[Iterable[int]] = None,
) -> Mapping[Tuple[str, int], List[float]]:
    """Visibility filter over the trajectory sets.

    `methods` may include "analytic"; None selects everything. `conditions`
    holds indices among the active conditions; None selects all of them.
    """
    wanted_methods = list(methods) if methods is not None else list(ALL_SERIES)
    wanted_conditions = set(conditions) if conditions is not None else None

    selected: Dict[Tuple[str, int], List[float]] = {}
    for ts in comparison.trajectory_sets:
        if wanted_conditions is not None and ts.index not in wanted_conditions:
            continue
        for key in wanted_methods:
            selected[(key, ts.index)] = ts.series(key)
    return selected
