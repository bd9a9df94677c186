"""Annual return samplers: fixed-rate and historical bootstrap."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, Tuple

import numpy as np

from ..models.parameters import SimulationParameters

# Annual index returns (decimal), oldest first.
HISTORICAL_RETURNS: Tuple[float, ...] = (
    0.103, 0.213, 0.133, 0.176, 0.244, 0.241,
    -0.124, -0.166, -0.198, 0.334, 0.104, 0.107,
    0.201, 0.096, -0.404, 0.301, 0.095, -0.053,
    0.161, 0.270, 0.056, -0.004, 0.082, 0.230,
    -0.085, 0.281, -0.089, 0.222, -0.185, 0.235,
)


class ReturnSampler(Protocol):
    """Supplies annual return fractions, one per simulated year."""

    def sample(self, size: int) -> np.ndarray:
        ...


class FixedReturnSampler:
    """Returns the same annual rate for every simulated year."""

    def __init__(self, rate: float) -> None:
        self.rate = float(rate)

    def sample(self, size: int) -> np.ndarray:
        return np.full(size, self.rate, dtype=float)

    def __repr__(self) -> str:
        return f"FixedReturnSampler(rate={self.rate!r})"


class HistoricalReturnSampler:
    """
    Bootstrap sampler over a fixed annual-return series.

    Every draw is uniform over the series with replacement; draws are
    independent, so consecutive years of one path carry no serial correlation.
    """

    def __init__(
        self,
        series: Sequence[float] = HISTORICAL_RETURNS,
        *,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both.")
        self.series = np.asarray(series, dtype=float)
        if self.series.size == 0:
            raise ValueError("Historical return series cannot be empty.")
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def sample(self, size: int) -> np.ndarray:
        return self.rng.choice(self.series, size=size, replace=True)


class SequenceReturnSampler:
    """Replays a fixed list of returns in order, wrapping around at the end."""

    def __init__(self, values: Sequence[float]) -> None:
        self.values = np.asarray(values, dtype=float)
        if self.values.size == 0:
            raise ValueError("SequenceReturnSampler requires at least one value.")
        self._position = 0

    def sample(self, size: int) -> np.ndarray:
        indices = (self._position + np.arange(size)) % self.values.size
        self._position = int((self._position + size) % self.values.size)
        return self.values[indices]


def build_sampler(
    params: SimulationParameters,
    rng: Optional[np.random.Generator] = None,
) -> ReturnSampler:
    """Return the sampler matching the parameters' return mode."""
    if params.use_historical:
        return HistoricalReturnSampler(rng=rng)
    return FixedReturnSampler(params.fixed_rate)


__all__ = [
    "HISTORICAL_RETURNS",
    "ReturnSampler",
    "FixedReturnSampler",
    "HistoricalReturnSampler",
    "SequenceReturnSampler",
    "build_sampler",
]
