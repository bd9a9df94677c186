"""Year-by-year compounding of a lump sum or recurring contributions."""

from __future__ import annotations

from typing import Optional, Union

import numpy as np

from ..models.parameters import SimulationParameters
from ..models.results import PathResult
from .returns import ReturnSampler, build_sampler
from .validator import validate_parameters, validate_runs

ArrayLike = Union[float, np.ndarray]


def contribution_future_value(amount: float, annual_rate: ArrayLike, frequency: int) -> ArrayLike:
    """
    Year-end value of ``frequency`` equal payments made during one year.

    Each payment compounds at the sub-period rate ``r_p`` implied by the annual
    rate, ``(1 + r_p) ** frequency == 1 + annual_rate``, i.e. the future value of
    an ordinary annuity. With a zero rate the payments are simply summed.
    """
    rates = np.asarray(annual_rate, dtype=float)
    period_rate = np.power(1.0 + rates, 1.0 / frequency) - 1.0
    with np.errstate(divide="ignore", invalid="ignore"):
        annuity = amount * (np.power(1.0 + period_rate, frequency) - 1.0) / period_rate
    values = np.where(period_rate == 0.0, amount * frequency, annuity)
    if values.ndim == 0:
        return float(values)
    return values


def total_contributions(params: SimulationParameters) -> float:
    """Nominal amount paid in over the horizon (deterministic given the parameters)."""
    if params.recurring:
        return float(params.amount * params.frequency * params.years)
    return float(params.amount)


def simulate_paths(
    params: SimulationParameters,
    runs: int,
    *,
    sampler: Optional[ReturnSampler] = None,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """
    Simulate ``runs`` independent trajectories as one ``(runs, years + 1)`` array.

    Returns are drawn once per simulated year, laid out run by run, so a
    deterministic sampler feeds run 0 its first ``years`` values.
    """
    validate_parameters(params)
    validate_runs(runs, max_runs=None)
    if sampler is None:
        sampler = build_sampler(params, rng)

    years = int(params.years)
    draws = np.asarray(sampler.sample(runs * years), dtype=float).reshape(runs, years)

    values = np.zeros((runs, years + 1), dtype=float)
    balance = np.zeros(runs, dtype=float)
    if not params.recurring:
        balance[:] = params.amount
    values[:, 0] = balance

    for year in range(1, years + 1):
        year_returns = draws[:, year - 1]
        balance = balance * (1.0 + year_returns)
        if params.recurring:
            balance = balance + contribution_future_value(
                params.amount, year_returns, params.frequency
            )
        values[:, year] = balance
    return values


def simulate_path(
    params: SimulationParameters,
    *,
    sampler: Optional[ReturnSampler] = None,
    rng: Optional[np.random.Generator] = None,
) -> PathResult:
    """Simulate a single trajectory and report the contributions it required."""
    values = simulate_paths(params, 1, sampler=sampler, rng=rng)
    return PathResult(
        path=tuple(float(v) for v in values[0]),
        total_contributions=total_contributions(params),
    )


__all__ = [
    "contribution_future_value",
    "total_contributions",
    "simulate_paths",
    "simulate_path",
]
