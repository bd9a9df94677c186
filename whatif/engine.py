"""High-level orchestration for what-if investment projections."""

from __future__ import annotations

import logging
from typing import Literal, Optional

import numpy as np

from .config import DEFAULT_RUNS, MAX_RUNS, RANDOM_SEED
from .core.adjustments import apply_end_tax, apply_inflation
from .core.monte_carlo import simulate_ensemble
from .core.monte_carlo_validation import validate_ensemble
from .core.path_simulator import simulate_path, total_contributions
from .core.returns import ReturnSampler
from .models.parameters import AdjustmentSettings, SimulationParameters
from .models.results import WhatIfOutcome

LOGGER = logging.getLogger(__name__)


def describe_mode(params: SimulationParameters, runs: Optional[int] = None) -> str:
    """Build the one-line run description, e.g. ``Single Path • 7.00% fixed • One-off``."""
    parts = ["Single Path" if runs is None else f"Monte Carlo x{runs}"]
    if params.use_historical:
        parts.append("Historical sampler")
    else:
        parts.append(f"{params.fixed_rate * 100:.2f}% fixed")
    parts.append(f"Recurring ({params.frequency_label})" if params.recurring else "One-off")
    return " • ".join(parts)


class WhatIfEngine:
    """Entry point that runs a projection and applies the requested adjustments."""

    def __init__(
        self,
        *,
        seed: Optional[int] = RANDOM_SEED,
        rng: Optional[np.random.Generator] = None,
        sampler: Optional[ReturnSampler] = None,
        max_runs: Optional[int] = MAX_RUNS,
    ) -> None:
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.sampler = sampler
        self.max_runs = max_runs

    # --------------------------------------------------------------- Execution
    def run(
        self,
        kind: Literal["single", "monte_carlo"],
        params: SimulationParameters,
        adjustments: Optional[AdjustmentSettings] = None,
        *,
        runs: int = DEFAULT_RUNS,
    ) -> WhatIfOutcome:
        """Dispatch to :meth:`run_single` or :meth:`run_monte_carlo`."""
        if kind == "single":
            return self.run_single(params, adjustments)
        if kind == "monte_carlo":
            return self.run_monte_carlo(params, runs, adjustments)
        raise ValueError(f"Unsupported run kind: {kind!r}")

    def run_single(
        self,
        params: SimulationParameters,
        adjustments: Optional[AdjustmentSettings] = None,
    ) -> WhatIfOutcome:
        """Simulate one path; tax uses that path's own contribution total."""
        adjustments = adjustments or AdjustmentSettings()
        label = describe_mode(params)
        LOGGER.info("Running %s over %d years", label, params.years)

        result = simulate_path(params, sampler=self.sampler, rng=self.rng)
        nominal = result.final_value
        return WhatIfOutcome(
            mode="single",
            label=label,
            years=params.years,
            nominal=nominal,
            real=self._real_value(nominal, params, adjustments),
            after_tax=self._after_tax_value(nominal, result.total_contributions, adjustments),
            total_contributions=result.total_contributions,
            path=result,
        )

    def run_monte_carlo(
        self,
        params: SimulationParameters,
        runs: int = DEFAULT_RUNS,
        adjustments: Optional[AdjustmentSettings] = None,
    ) -> WhatIfOutcome:
        """Simulate an ensemble; headline figures are taken from the final-year median."""
        adjustments = adjustments or AdjustmentSettings()
        label = describe_mode(params, runs)
        LOGGER.info("Running %s over %d years", label, params.years)

        ensemble = simulate_ensemble(
            params,
            runs,
            sampler=self.sampler,
            rng=self.rng,
            max_runs=self.max_runs,
        )
        validation = validate_ensemble(ensemble)
        if validation.failed_checks:
            LOGGER.warning("Ensemble validation failed: %s", ", ".join(validation.failed_checks))
        for warning in validation.warnings:
            LOGGER.info("Ensemble validation warning: %s", warning)

        nominal = ensemble.final_median
        contributions = total_contributions(params)
        return WhatIfOutcome(
            mode="monte_carlo",
            label=label,
            years=params.years,
            nominal=nominal,
            real=self._real_value(nominal, params, adjustments),
            after_tax=self._after_tax_value(nominal, contributions, adjustments),
            total_contributions=contributions,
            ensemble=ensemble,
        )

    # ----------------------------------------------------------------- Helpers
    @staticmethod
    def _real_value(
        nominal: float, params: SimulationParameters, adjustments: AdjustmentSettings
    ) -> Optional[float]:
        if not adjustments.inflation_enabled:
            return None
        return apply_inflation(nominal, adjustments.effective_inflation(), params.years)

    @staticmethod
    def _after_tax_value(
        nominal: float, contributions: float, adjustments: AdjustmentSettings
    ) -> Optional[float]:
        if not adjustments.tax_enabled:
            return None
        return apply_end_tax(nominal, contributions, adjustments.effective_tax())


__all__ = ["WhatIfEngine", "describe_mode"]
