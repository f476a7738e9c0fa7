from __future__ import annotations

"""Run log for the method comparison.

`simulate_logistic` calls `configure_logging` once per run, before the
scenario is loaded, so load failures and the error summary both land in
`<log_dir>/run.log` next to `scenario_echo.json`.
The comparator and scenario loader log through `getLogger(__name__)` and
inherit this root setup.
"""

import logging
from pathlib import Path


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(log_dir: Path, debug: bool = False) -> Path:
    """Send INFO (DEBUG with `debug=True`) records to stderr and a fresh `run.log`.

    `force=True` replaces handlers left by a previous run in the same process.
    Returns the path of the log file.
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "run.log"

    level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_file, mode="w", encoding="utf-8"),
        ],
        force=True,
    )
    return log_file
