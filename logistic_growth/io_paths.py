from __future__ import annotations

"""Centralized path utilities for the project.

Absolute `Path` objects for the directories used by the runner, the
results writer and the plotting helpers.
"""

from pathlib import Path


# The package directory is one level below the project root
PROJECT_ROOT = Path(__file__).resolve().parents[1]

SCENARIOS_DIR = PROJECT_ROOT / "scenarios"
OUTPUT_DIR = PROJECT_ROOT / "output"
PLOTS_DIR = OUTPUT_DIR / "plots"
LOGS_DIR = PROJECT_ROOT / "logs"
