"""Sanity checks for Monte Carlo ensemble output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence

import numpy as np

from ..models.results import EnsembleResult


@dataclass
class ValidationResult:
    """Basic container for validation outcomes."""

    status: str
    failed_checks: Sequence[str]
    warnings: Sequence[str]

    def to_dict(self) -> Dict[str, object]:
        return {
            "status": self.status,
            "failed_checks": list(self.failed_checks),
            "warnings": list(self.warnings),
        }


def validate_ensemble(result: EnsembleResult) -> ValidationResult:
    """Check band ordering and final-year extremes of an ensemble."""
    failed: list[str] = []
    warnings: list[str] = []

    bands = np.array([result.p10, result.median, result.p90], dtype=float)
    extremes = np.array([result.worst, result.best], dtype=float)
    if not np.all(np.isfinite(bands)) or not np.all(np.isfinite(extremes)):
        failed.append("nan_or_inf_values")
    else:
        if np.any(bands[0] > bands[1]) or np.any(bands[1] > bands[2]):
            failed.append("percentile_ordering")
        if not result.worst <= result.median[-1] <= result.best:
            failed.append("extremes_do_not_bracket_median")

    if result.runs < 100:
        warnings.append("low_run_count")
    if result.total_contributions > 0 and result.median[-1] < result.total_contributions:
        warnings.append("median_below_contributions")

    status = "PASS" if not failed else "FAIL"
    return ValidationResult(status=status, failed_checks=failed, warnings=warnings)


__all__ = ["ValidationResult", "validate_ensemble"]
