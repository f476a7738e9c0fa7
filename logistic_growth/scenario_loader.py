from __future__ import annotations

"""
Scenario Loader (YAML/JSON)

Responsibilities
- Load a single scenario file (YAML or JSON) with an optional `parameters`
  block (r, K, tf, h) and an optional `initial_conditions` list.
- Fill missing parameters from the defaults (r=0.05, K=1.0, tf=100, h=5.0)
  and a missing condition list with the five default y0 values.
- Coerce numeric strings to floats. Unknown keys are validation errors
  (strict policy), reported with the closest valid names.

Scenario shape::

    name: baseline
    parameters: {r: 0.05, K: 1.0, tf: 100, h: 5.0}
    initial_conditions:
      - {y0: 0.15, active: true}
      - 0.5

This module is pure; it returns a validated `Scenario` and never touches
the numeric core.
"""

from dataclasses import dataclass, field
import difflib
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

import yaml

from .params import (
    DEFAULT_H,
    DEFAULT_K,
    DEFAULT_R,
    DEFAULT_TF,
    InitialCondition,
    ParameterSet,
    default_initial_conditions,
)

log = logging.getLogger(__name__)

TOP_LEVEL_KEYS = {"name", "description", "parameters", "initial_conditions"}
PARAMETER_KEYS = ("r", "K", "tf", "h")
CONDITION_KEYS = {"y0", "active"}


@dataclass(frozen=True)
class Scenario:
    name: str
    params: ParameterSet
    conditions: List[InitialCondition] = field(default_factory=default_initial_conditions)
    description: str = ""

    @property
    def active_count(self) -> int:
        return sum(1 for c in self.conditions if c.active)


def _coerce_numeric(value: object, field_name: str) -> float:
    """Attempt to coerce an object to a primitive float.

    Accepts ints, floats and numeric strings. Booleans are rejected even
    though they are ints in Python, since `true` in a YAML number slot is
    almost always a typo.
    """
    if isinstance(value, bool):
        raise ValueError(f"Non-numeric value for '{field_name}': {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as exc:  # re-raise with context
            raise ValueError(f"Non-numeric value for '{field_name}': {value!r}") from exc
    raise ValueError(f"Non-numeric value for '{field_name}': {value!r}")


def _coerce_bool(value: object, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in {"true", "yes", "on", "1"}:
        return True
    if isinstance(value, str) and value.strip().lower() in {"false", "no", "off", "0"}:
        return False
    raise ValueError(f"Non-boolean value for '{field_name}': {value!r}")


def _nearest_matches(name: str, candidates: Iterable[str], n: int = 3) -> List[str]:
    # Case-insensitive so that `k` still points at `K`
    by_lower = {c.lower(): c for c in candidates}
    return [by_lower[m] for m in difflib.get_close_matches(name.lower(), list(by_lower), n=n)]


def _reject_unknown_keys(keys: Iterable[object], allowed: Iterable[str], where: str) -> None:
    allowed = list(allowed)
    unknown = [str(k) for k in keys if str(k) not in allowed]
    if not unknown:
        return
    hints = []
    for key in unknown:
        matches = _nearest_matches(key, allowed)
        hints.append(f"'{key}'" + (f" (did you mean: {', '.join(matches)}?)" if matches else ""))
    raise ValueError(f"Unknown key(s) in {where}: {'; '.join(hints)}. Allowed: {', '.join(sorted(allowed))}")


def _load_raw_scenario(path: Path) -> Dict[str, object]:
    """Load YAML/JSON as a plain dict; ensure the root is a mapping."""
    if not path.exists():
        raise FileNotFoundError(f"Scenario file not found: {path}")
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        # YAML for .yaml/.yml and unknown extensions
        data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError("Scenario file must deserialize to a mapping/dictionary at top level")
    return data


def _validate_parameters(raw_params: Optional[Mapping[str, object]]) -> ParameterSet:
    if raw_params is None:
        raw_params = {}
    if not isinstance(raw_params, Mapping):
        raise ValueError("parameters must be a mapping with keys r, K, tf, h")
    _reject_unknown_keys(raw_params.keys(), PARAMETER_KEYS, "parameters")
    defaults = {"r": DEFAULT_R, "K": DEFAULT_K, "tf": DEFAULT_TF, "h": DEFAULT_H}
    values = {
        key: _coerce_numeric(raw_params.get(key, defaults[key]), f"parameters.{key}")
        for key in PARAMETER_KEYS
    }
    # Domain checks (positivity, finiteness) raise InvalidParameterError
    return ParameterSet(**values)


def _validate_conditions(raw_conditions: Optional[object]) -> List[InitialCondition]:
    if raw_conditions is None:
        return default_initial_conditions()
    if not isinstance(raw_conditions, (list, tuple)):
        raise ValueError("initial_conditions must be a list of numbers or {y0, active} mappings")

    conditions: List[InitialCondition] = []
    for idx, entry in enumerate(raw_conditions):
        where = f"initial_conditions[{idx}]"
        if isinstance(entry, Mapping):
            _reject_unknown_keys(entry.keys(), CONDITION_KEYS, where)
            if "y0" not in entry:
                raise ValueError(f"{where} is missing 'y0'")
            y0 = _coerce_numeric(entry["y0"], f"{where}.y0")
            active = _coerce_bool(entry.get("active", True), f"{where}.active")
        else:
            y0 = _coerce_numeric(entry, f"{where}.y0")
            active = True
        conditions.append(InitialCondition(y0=y0, active=active))
    return conditions


def validate_scenario_dict(scenario_dict: Mapping[str, object], *, name_hint: str = "untitled") -> Scenario:
    """Validate an in-memory scenario dictionary and return a `Scenario`.

    Mirrors `load_scenario` without touching the filesystem.
    """
    if not isinstance(scenario_dict, Mapping):
        raise ValueError("scenario_dict must be a mapping/dict at the root")
    _reject_unknown_keys(scenario_dict.keys(), TOP_LEVEL_KEYS, "scenario")

    name = str(scenario_dict.get("name") or name_hint)
    params = _validate_parameters(scenario_dict.get("parameters"))
    conditions = _validate_conditions(scenario_dict.get("initial_conditions"))
    description = str(scenario_dict.get("description") or "")

    scenario = Scenario(name=name, params=params, conditions=conditions, description=description)
    log.debug(
        "Validated scenario '%s': %s, %d conditions (%d active)",
        scenario.name,
        scenario.params,
        len(scenario.conditions),
        scenario.active_count,
    )
    return scenario


def load_scenario(path: Path | str) -> Scenario:
    """Load a scenario file and validate it.

    The file stem is used as the name when the file does not set one.
    """
    path = Path(path)
    raw = _load_raw_scenario(path)
    return validate_scenario_dict(raw, name_hint=path.stem)


def scenario_to_dict(scenario: Scenario) -> Dict[str, object]:
    """Inverse of `validate_scenario_dict`, suitable for YAML/JSON dumps."""
    return {
        "name": scenario.name,
        "description": scenario.description,
        "parameters": {key: getattr(scenario.params, key) for key in PARAMETER_KEYS},
        "initial_conditions": [{"y0": c.y0, "active": c.active} for c in scenario.conditions],
    }
