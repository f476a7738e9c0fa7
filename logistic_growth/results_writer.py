from __future__ import annotations

"""
Results tables & CSV writer.

Turns a `Comparison` into two pandas DataFrames and writes them under the
output directory:

- `logistic_trajectories.csv`: one row per grid time, column `t` followed by
  `<series>_<condition index>` columns in the order produced by the
  comparator (analytic, euler, euler_improved, rk4 for condition 0, then 1…)
- `logistic_error_summary.csv`: one row per numerical method with its
  label, nominal order, max absolute error and ratio to RK4. An undefined
  ratio (RK4 error of zero) is left empty.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from .comparator import Comparison, error_ratio, series_key
from .integrators import ALL_SERIES, METHODS
from .io_paths import OUTPUT_DIR

log = logging.getLogger(__name__)

TRAJECTORIES_CSV = "logistic_trajectories.csv"
ERROR_SUMMARY_CSV = "logistic_error_summary.csv"


def trajectory_columns(comparison: Comparison) -> List[str]:
    columns = ["t"]
    for ts in comparison.trajectory_sets:
        columns.extend(series_key(key, ts.index) for key in ALL_SERIES)
    return columns


def records_frame(comparison: Comparison) -> pd.DataFrame:
    """Flattened per-time-index records as a DataFrame with stable columns."""
    return pd.DataFrame(comparison.records, columns=trajectory_columns(comparison))


def error_summary_frame(comparison: Comparison) -> pd.DataFrame:
    rows: List[Dict[str, object]] = []
    for key, info in METHODS.items():
        ratio: Optional[float] = error_ratio(comparison.errors, key)
        rows.append(
            {
                "method": key,
                "label": info.label,
                "order": info.order,
                "max_abs_error": getattr(comparison.errors, key),
                "ratio_to_rk4": ratio,
            }
        )
    return pd.DataFrame(rows, columns=["method", "label", "order", "max_abs_error", "ratio_to_rk4"])


def write_results(comparison: Comparison, output_dir: Path | None = None) -> Path:
    """Write both CSVs and return the trajectory CSV path."""
    output_dir = Path(output_dir) if output_dir is not None else OUTPUT_DIR
    output_dir.mkdir(parents=True, exist_ok=True)

    traj_path = output_dir / TRAJECTORIES_CSV
    summary_path = output_dir / ERROR_SUMMARY_CSV

    records_frame(comparison).to_csv(traj_path, index=False)
    error_summary_frame(comparison).to_csv(summary_path, index=False)

    log.info("Wrote %d trajectory rows to %s", len(comparison.records), traj_path)
    log.info("Wrote error summary to %s", summary_path)
    return traj_path
