from __future__ import annotations

"""
Parameter Set and Initial Condition value types.

Both are frozen dataclasses validated on construction, so any object that
reaches the integrators or the comparator already satisfies the admissible
domain: finite r, K, tf, h strictly positive and a finite y0.

Defaults: r=0.05, K=1.0, tf=100, h=5.0 and five active initial conditions
spanning both sides of K.
"""

from dataclasses import dataclass
import math
from typing import Iterable, List, Sequence, Tuple


DEFAULT_R = 0.05
DEFAULT_K = 1.0
DEFAULT_TF = 100.0
DEFAULT_H = 5.0
DEFAULT_Y0S: Tuple[float, ...] = (0.15, 0.50, 0.90, 1.20, 1.50)


class InvalidParameterError(ValueError):
    """Raised when a numeric input lies outside the admissible domain."""

    def __init__(self, field_name: str, value: object, reason: str):
        self.field_name = field_name
        self.value = value
        super().__init__(f"Invalid '{field_name}' = {value!r}: {reason}")


def require_finite(value: object, field_name: str) -> float:
    """Coerce `value` to float and reject NaN/inf and non-numeric inputs."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError(field_name, value, "must be a real number")
    out = float(value)
    if not math.isfinite(out):
        raise InvalidParameterError(field_name, value, "must be finite")
    return out


def require_positive(value: object, field_name: str) -> float:
    out = require_finite(value, field_name)
    if out <= 0.0:
        raise InvalidParameterError(field_name, value, "must be > 0")
    return out


@dataclass(frozen=True)
class ParameterSet:
    r: float = DEFAULT_R
    K: float = DEFAULT_K
    tf: float = DEFAULT_TF
    h: float = DEFAULT_H

    def __post_init__(self) -> None:
        # frozen: write the coerced floats back through object.__setattr__
        for name in ("r", "K", "tf", "h"):
            object.__setattr__(self, name, require_positive(getattr(self, name), name))

    @property
    def num_steps(self) -> int:
        """Number of integration steps, floor(tf / h)."""
        return num_steps(self.tf, self.h)

    def replace(self, **changes: float) -> "ParameterSet":
        values = {"r": self.r, "K": self.K, "tf": self.tf, "h": self.h}
        values.update(changes)
        return ParameterSet(**values)


@dataclass(frozen=True)
class InitialCondition:
    y0: float
    active: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "y0", require_finite(self.y0, "y0"))
        object.__setattr__(self, "active", bool(self.active))


def num_steps(tf: float, h: float) -> int:
    return int(math.floor(tf / h))


def default_initial_conditions() -> List[InitialCondition]:
    return [InitialCondition(y0=y0) for y0 in DEFAULT_Y0S]


def active_conditions(conditions: Iterable[InitialCondition]) -> List[InitialCondition]:
    """Return the active entries of `conditions`, preserving order."""
    return [c for c in conditions if c.active]


def validate_run_inputs(r: float, K: float, y0: float, tf: float, h: float) -> Tuple[float, float, float, float, float]:
    """Validate the scalar arguments of an integrator call.

    Returns the coerced floats in the same order they were given.
    """
    return (
        require_positive(r, "r"),
        require_positive(K, "K"),
        require_finite(y0, "y0"),
        require_positive(tf, "tf"),
        require_positive(h, "h"),
    )


def as_conditions(values: Sequence[object]) -> List[InitialCondition]:
    """Accept a mix of `InitialCondition` objects and bare y0 numbers."""
    out: List[InitialCondition] = []
    for v in values:
        if isinstance(v, InitialCondition):
            out.append(v)
        else:
            out.append(InitialCondition(y0=v))  # type: ignore[arg-type]
    return out
