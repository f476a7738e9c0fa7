from __future__ import annotations

from pathlib import Path

import pytest

from logistic_growth.comparator import compare_trajectories
from logistic_growth.params import default_initial_conditions
from logistic_growth.results_writer import write_results


def test_generate_plots_smoke(tmp_path: Path, baseline_params):
    """Plots are produced from a freshly written trajectory CSV."""
    from viz.plots import generate_all_plots_from_csv

    csv_path = write_results(compare_trajectories(baseline_params, default_initial_conditions()), tmp_path)
    out_paths = generate_all_plots_from_csv(csv_path, tmp_path / "plots")
    assert [p.name for p in out_paths] == ["trajectories.png", "abs_error.png"]
    for p in out_paths:
        assert p.exists(), f"Plot not created: {p}"
        assert p.stat().st_size > 0, f"Plot file is empty: {p}"


def test_plots_without_conditions(tmp_path: Path, baseline_params):
    from viz.plots import generate_all_plots_from_csv

    csv_path = write_results(compare_trajectories(baseline_params, []), tmp_path)
    out_paths = generate_all_plots_from_csv(csv_path, tmp_path / "plots")
    assert all(p.exists() for p in out_paths)


def test_rejects_foreign_csv(tmp_path: Path):
    from viz.plots import generate_all_plots_from_csv

    bad = tmp_path / "bad.csv"
    bad.write_text("x,y\n1,2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        generate_all_plots_from_csv(bad, tmp_path / "plots")
    with pytest.raises(FileNotFoundError):
        generate_all_plots_from_csv(tmp_path / "missing.csv", tmp_path / "plots")
