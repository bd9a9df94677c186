"""Monte Carlo ensembles: repeated path simulation reduced to percentile bands."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from ..config import BAND_PERCENTILES, MAX_RUNS
from ..models.parameters import SimulationParameters
from ..models.results import EnsembleResult
from .path_simulator import simulate_paths, total_contributions
from .returns import ReturnSampler
from .validator import validate_parameters, validate_runs

LOGGER = logging.getLogger(__name__)


def percentile(values: Sequence[float], p: float) -> float:
    """
    Percentile with linear interpolation between order statistics.

    ``p`` is a fraction in [0, 1]; the fractional rank is ``(n - 1) * p``.
    Out-of-range ``p`` is pinned to the minimum or maximum and an empty input
    yields ``0.0``.
    """
    data = np.asarray(values, dtype=float)
    if data.size == 0:
        return 0.0
    if p <= 0:
        return float(data.min())
    if p >= 1:
        return float(data.max())
    return float(np.quantile(data, p, method="linear"))


def simulate_ensemble(
    params: SimulationParameters,
    runs: int,
    *,
    sampler: Optional[ReturnSampler] = None,
    rng: Optional[np.random.Generator] = None,
    max_runs: Optional[int] = MAX_RUNS,
) -> EnsembleResult:
    """
    Run ``runs`` independent paths and summarise them year by year.

    Bands are the 10th/50th/90th percentiles of the values at each year;
    ``best`` and ``worst`` come from the final-year values only. All runs are
    collected before any percentile is taken.
    """
    validate_parameters(params)
    validate_runs(runs, max_runs=max_runs)

    values = simulate_paths(params, runs, sampler=sampler, rng=rng)
    low, mid, high = np.quantile(values, BAND_PERCENTILES, axis=0, method="linear")
    final_values = values[:, -1]

    result = EnsembleResult(
        median=tuple(float(v) for v in mid),
        p10=tuple(float(v) for v in low),
        p90=tuple(float(v) for v in high),
        best=float(final_values.max()),
        worst=float(final_values.min()),
        runs=int(runs),
        total_contributions=total_contributions(params),
    )
    LOGGER.debug(
        "Simulated %d runs over %d years: median %.2f (p10 %.2f, p90 %.2f)",
        runs,
        params.years,
        result.median[-1],
        result.p10[-1],
        result.p90[-1],
    )
    return result


__all__ = ["percentile", "simulate_ensemble"]
