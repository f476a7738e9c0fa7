"""
Pytest configuration for ensuring the project root is on sys.path.

This allows test modules to import the in-repo layout like:
    from logistic_growth.comparator import compare_trajectories
    from viz.plots import generate_all_plots_from_csv

without an editable install. Matplotlib is pinned to the Agg backend so
plotting tests never open a window.
"""

import os
import sys

import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

os.environ.setdefault("MPLBACKEND", "Agg")


@pytest.fixture
def baseline_params():
    from logistic_growth.params import ParameterSet

    return ParameterSet(r=0.05, K=1.0, tf=100.0, h=5.0)
