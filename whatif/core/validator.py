"""Input validation for the simulation core."""

from __future__ import annotations

import math
from typing import Optional

from ..config import MAX_RUNS, SUPPORTED_FREQUENCIES
from ..models.parameters import SimulationParameters


class InvalidParameters(ValueError):
    """Raised when simulation inputs fall outside the supported domain."""


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(float(value)):
        raise InvalidParameters(f"{name} must be a finite number, got {value!r}")


def validate_parameters(params: SimulationParameters) -> None:
    """Reject parameters the simulator cannot honour; never clamps."""
    _require_finite("years", params.years)
    if isinstance(params.years, bool) or int(params.years) != params.years:
        raise InvalidParameters(f"years must be a whole number, got {params.years!r}")
    if params.years < 1:
        raise InvalidParameters(f"years must be at least 1, got {params.years}")

    _require_finite("amount", params.amount)
    if params.amount < 0:
        raise InvalidParameters(f"amount cannot be negative, got {params.amount}")

    if params.frequency not in SUPPORTED_FREQUENCIES:
        supported = ", ".join(str(f) for f in SUPPORTED_FREQUENCIES)
        raise InvalidParameters(
            f"Unsupported contribution frequency {params.frequency}; expected one of {supported}"
        )

    if not params.use_historical:
        _require_finite("fixed_rate", params.fixed_rate)
        if params.fixed_rate <= -1:
            raise InvalidParameters(
                f"fixed_rate must be greater than -100%, got {params.fixed_rate}"
            )


def validate_runs(runs: int, max_runs: Optional[int] = MAX_RUNS) -> None:
    """Ensure the requested ensemble size is positive and within the caller's bound."""
    if isinstance(runs, bool) or int(runs) != runs:
        raise InvalidParameters(f"runs must be a whole number, got {runs!r}")
    if runs < 1:
        raise InvalidParameters(f"runs must be at least 1, got {runs}")
    if max_runs is not None and runs > max_runs:
        raise InvalidParameters(f"runs must not exceed {max_runs}, got {runs}")


__all__ = ["InvalidParameters", "validate_parameters", "validate_runs"]
