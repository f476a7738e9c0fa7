#!/usr/bin/env python3
from __future__ import annotations

"""
Runner for the logistic method comparison.

Responsibilities:
- Configure logging to both console and `logs/run.log`
- Load a YAML/JSON scenario (explicit path or preset under `scenarios/`)
- Apply command-line overrides of r, K, tf and h
- Echo the effective scenario to `logs/scenario_echo.json`
- Run the trajectory comparison and log the error summary, including the
  Euler/RK4 and improved-Euler/RK4 error ratios ("undefined" when the RK4
  error is exactly zero)
- Write the trajectory and error-summary CSVs
- Optionally render plots from the trajectory CSV (`--visualize`)
"""

import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path

from logistic_growth.comparator import compare_trajectories, error_ratio, format_ratio
from logistic_growth.integrators import METHODS
from logistic_growth.io_paths import LOGS_DIR, OUTPUT_DIR, SCENARIOS_DIR
from logistic_growth.results_writer import write_results
from logistic_growth.scenario_loader import Scenario, load_scenario, scenario_to_dict
from logistic_growth.utils_logging import configure_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the runner.

    Exactly one of `--scenario` or `--preset` may be provided; the default
    resolves to the baseline scenario file.
    """
    p = argparse.ArgumentParser(description="Logistic growth – Euler vs improved Euler vs RK4")
    group = p.add_mutually_exclusive_group()
    group.add_argument("--scenario", type=str, help="Path to a scenario YAML/JSON file")
    group.add_argument(
        "--preset",
        type=str,
        help="Scenario preset name (resolves to a file under 'scenarios/', e.g. 'baseline' or 'fine_step')",
    )
    p.add_argument("--r", type=float, help="Override the growth rate r")
    p.add_argument("--K", type=float, help="Override the carrying capacity K")
    p.add_argument("--tf", type=float, help="Override the final time")
    p.add_argument("--h", type=float, help="Override the step size")
    p.add_argument("--workers", type=int, default=1, help="Threads used across initial conditions")
    p.add_argument("--output-dir", type=str, help="Directory for CSV/PNG output (default: output/)")
    p.add_argument("--log-dir", type=str, help="Directory for run.log (default: logs/)")
    p.add_argument("--debug", action="store_true")
    p.add_argument(
        "--visualize",
        action="store_true",
        help="Generate plots from the trajectory CSV and save them under <output-dir>/plots/",
    )
    return p.parse_args(argv)


def _resolve_scenario_path(scenario: str | None, preset: str | None) -> Path:
    """Resolve the scenario file path from either an explicit path or a preset name.

    - If `scenario` is provided, return it as a `Path`.
    - If `preset` is provided, try `<preset>.yaml`, `<preset>.yml` then `<preset>.json` under `SCENARIOS_DIR`.
    - Otherwise default to `baseline.yaml` under `SCENARIOS_DIR`.
    """
    if scenario:
        return Path(scenario)
    if preset:
        for suffix in (".yaml", ".yml", ".json"):
            candidate = SCENARIOS_DIR / f"{preset}{suffix}"
            if candidate.exists():
                return candidate
        available = sorted({p.stem for p in SCENARIOS_DIR.glob("*.y*ml")} | {p.stem for p in SCENARIOS_DIR.glob("*.json")})
        raise FileNotFoundError(
            f"Preset '{preset}' not found under {SCENARIOS_DIR}. Available presets: {', '.join(available) or '(none)'}"
        )
    return SCENARIOS_DIR / "baseline.yaml"


def apply_cli_overrides(scenario: Scenario, args: argparse.Namespace) -> Scenario:
    changes = {key: getattr(args, key) for key in ("r", "K", "tf", "h") if getattr(args, key) is not None}
    if not changes:
        return scenario
    return replace(scenario, params=scenario.params.replace(**changes))


def echo_scenario(*, log_dir: Path, scenario: Scenario, log: logging.Logger) -> Path:
    """Write the effective scenario (after CLI overrides) next to the run log."""
    log_dir.mkdir(parents=True, exist_ok=True)
    echo_path = log_dir / "scenario_echo.json"
    echo_path.write_text(json.dumps(scenario_to_dict(scenario), indent=2), encoding="utf-8")
    log.debug("Scenario echo written to %s", echo_path)
    return echo_path


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    log_dir = Path(args.log_dir) if args.log_dir else LOGS_DIR
    output_dir = Path(args.output_dir) if args.output_dir else OUTPUT_DIR
    configure_logging(log_dir, debug=args.debug)
    log = logging.getLogger("runner")

    try:
        scenario_path = _resolve_scenario_path(args.scenario, args.preset)
        scenario = apply_cli_overrides(load_scenario(scenario_path), args)
    except Exception as e:
        log.error("Scenario load failed: %s", e)
        raise
    params = scenario.params
    log.info("Loaded scenario '%s' from %s", scenario.name, scenario_path)
    log.info(
        "Parameters: r %.4g, K %.4g, tf %.4g, h %.4g (%d steps)",
        params.r,
        params.K,
        params.tf,
        params.h,
        params.num_steps,
    )
    log.info("Initial conditions: %d (%d active)", len(scenario.conditions), scenario.active_count)
    echo_scenario(log_dir=log_dir, scenario=scenario, log=log)

    comparison = compare_trajectories(params, scenario.conditions, max_workers=args.workers)

    for key, info in METHODS.items():
        log.info("Max |error| %-20s %.6e", info.label, getattr(comparison.errors, key))
    for key in ("euler", "euler_improved"):
        log.info(
            "%s error vs RK4: %s",
            METHODS[key].label,
            format_ratio(error_ratio(comparison.errors, key)),
        )

    output_csv = write_results(comparison, output_dir)

    if args.visualize:
        try:
            from viz.plots import generate_all_plots_from_csv
        except Exception as e:
            log.error("Visualization dependencies missing or import failed: %s", e)
            raise

        try:
            outputs = generate_all_plots_from_csv(output_csv, output_dir / "plots")
            log.info("Visualization complete: %s", ", ".join(str(p) for p in outputs))
        except Exception as e:
            log.error("Visualization failed: %s", e)
            raise

    print(f"OK: compared {len(comparison.trajectory_sets)} initial conditions on {len(comparison.times)} grid points.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
