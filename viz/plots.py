from __future__ import annotations

"""
Visualization utilities.

Read-only plotting functions that consume the trajectory CSV written by
`logistic_growth.results_writer` and produce static PNGs under
`output/plots/`. They never call the integrators; series and condition
indices are discovered from the CSV header, so any number of initial
conditions works.

Usage:
    from viz.plots import generate_all_plots_from_csv
    generate_all_plots_from_csv(Path('output/logistic_trajectories.csv'))
"""

from pathlib import Path
from typing import Dict, List, Tuple

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402

from logistic_growth.integrators import ALL_SERIES, ANALYTIC, METHODS  # noqa: E402
from logistic_growth.io_paths import PLOTS_DIR  # noqa: E402

# Analytic dark dashed, Euler green, improved Euler blue, RK4 red
STYLES: Dict[str, Dict[str, object]] = {
    ANALYTIC: {"color": "#1f2937", "linestyle": "--", "linewidth": 2.0},
    "euler": {"color": "#22c55e", "linestyle": "-", "linewidth": 2.5},
    "euler_improved": {"color": "#3b82f6", "linestyle": "-", "linewidth": 2.0},
    "rk4": {"color": "#b91c1c", "linestyle": "-", "linewidth": 2.0},
}
LABELS = {ANALYTIC: "Exact solution", **{k: m.label for k, m in METHODS.items()}}


def _ensure_plots_dir(plots_dir: Path | None = None) -> Path:
    """Ensure the plots directory exists and return the path."""
    plots_dir = Path(plots_dir) if plots_dir is not None else PLOTS_DIR
    plots_dir.mkdir(parents=True, exist_ok=True)
    return plots_dir


def _read_results_csv(csv_path: Path | str) -> pd.DataFrame:
    """Load the trajectory CSV; the first column must be `t`."""
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"Results CSV not found: {csv_path}")
    df = pd.read_csv(csv_path)
    if df.columns.empty or df.columns[0] != "t":
        raise ValueError("Unexpected CSV format: first column must be 't'")
    return df


def _split_column(column: str) -> Tuple[str, int] | None:
    """`euler_improved_3` -> ("euler_improved", 3); None for foreign columns."""
    series, _, idx = column.rpartition("_")
    if series not in ALL_SERIES or not idx.isdigit():
        return None
    return series, int(idx)


def _condition_indices(df: pd.DataFrame) -> List[int]:
    found = {parsed[1] for parsed in map(_split_column, df.columns) if parsed}
    return sorted(found)


def _save_fig(fig: plt.Figure, plots_dir: Path, filename: str) -> Path:
    out_path = plots_dir / filename
    fig.savefig(out_path, bbox_inches="tight", dpi=150)
    plt.close(fig)
    return out_path


def plot_trajectories(df: pd.DataFrame, plots_dir: Path | None = None) -> Path:
    """All series for all conditions; one legend entry per method."""
    plots_dir = _ensure_plots_dir(plots_dir)
    fig, ax = plt.subplots(figsize=(10, 6))

    for n, idx in enumerate(_condition_indices(df)):
        for series in ALL_SERIES:
            column = f"{series}_{idx}"
            if column not in df.columns:
                continue
            ax.plot(
                df["t"],
                df[column],
                label=LABELS[series] if n == 0 else None,
                **STYLES[series],
            )

    ax.set_title("Logistic model: Euler, improved Euler and Runge-Kutta 4")
    ax.set_xlabel("t")
    ax.set_ylabel("y")
    ax.grid(True, alpha=0.3)
    if ax.get_legend_handles_labels()[0]:
        ax.legend(loc="best", fontsize=8)
    return _save_fig(fig, plots_dir, "trajectories.png")


def plot_abs_error(df: pd.DataFrame, plots_dir: Path | None = None) -> Path:
    """|numeric - analytic| over time for every method and condition (log scale)."""
    plots_dir = _ensure_plots_dir(plots_dir)
    fig, ax = plt.subplots(figsize=(10, 5))

    plotted_any = False
    for n, idx in enumerate(_condition_indices(df)):
        reference = df.get(f"{ANALYTIC}_{idx}")
        if reference is None:
            continue
        for key in METHODS:
            column = f"{key}_{idx}"
            if column not in df.columns:
                continue
            # Exact zeros cannot be drawn on a log axis
            err = (df[column] - reference).abs().where(lambda s: s > 0)
            ax.plot(df["t"], err, label=LABELS[key] if n == 0 else None, **STYLES[key])
            plotted_any = True

    ax.set_title("Absolute error against the exact solution")
    ax.set_xlabel("t")
    ax.set_ylabel("|y_method - y_exact|")
    if plotted_any:
        ax.set_yscale("log")
        ax.legend(loc="best", fontsize=8)
    ax.grid(True, alpha=0.3)
    return _save_fig(fig, plots_dir, "abs_error.png")


def generate_all_plots_from_csv(csv_path: Path | str, plots_dir: Path | None = None) -> list[Path]:
    """Load the trajectory CSV and generate every plot.

    Returns a list of output file paths for created images.
    """
    df = _read_results_csv(csv_path)
    outputs: list[Path] = []
    outputs.append(plot_trajectories(df, plots_dir))
    outputs.append(plot_abs_error(df, plots_dir))
    return outputs
