"""Result data models returned by the simulation core and engine."""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional, Tuple

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field


class PathResult(BaseModel):
    """One simulated trajectory; ``path[i]`` is the value at the end of year ``i``."""

    model_config = ConfigDict(frozen=True)

    path: Tuple[float, ...] = Field(..., description="Values for years 0..horizon")
    total_contributions: float = Field(..., description="Nominal amount paid in")

    @property
    def years(self) -> int:
        return len(self.path) - 1

    @property
    def final_value(self) -> float:
        return self.path[-1]

    def to_frame(self) -> pd.DataFrame:
        """Return the trajectory as a ``year``/``value`` table."""
        return pd.DataFrame({"year": range(len(self.path)), "value": list(self.path)})


class EnsembleResult(BaseModel):
    """Per-year percentile bands and final-year extremes of a Monte Carlo ensemble."""

    model_config = ConfigDict(frozen=True)

    median: Tuple[float, ...]
    p10: Tuple[float, ...]
    p90: Tuple[float, ...]
    best: float = Field(..., description="Highest final-year value across runs")
    worst: float = Field(..., description="Lowest final-year value across runs")
    runs: int = Field(..., description="Number of simulated paths")
    total_contributions: float = Field(
        ..., description="Contribution total implied by the parameters (identical for every run)"
    )

    @property
    def years(self) -> int:
        return len(self.median) - 1

    @property
    def final_median(self) -> float:
        return self.median[-1]

    def to_frame(self) -> pd.DataFrame:
        """Return the bands as a ``year``/``p10``/``median``/``p90`` table."""
        return pd.DataFrame(
            {
                "year": range(len(self.median)),
                "p10": list(self.p10),
                "median": list(self.median),
                "p90": list(self.p90),
            }
        )


class WhatIfOutcome(BaseModel):
    """Headline figures for one what-if run, ready for presentation."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["single", "monte_carlo"]
    label: str = Field(..., description="Short description of the run configuration")
    years: int
    nominal: float = Field(..., description="Ending value (median for Monte Carlo)")
    real: Optional[float] = Field(None, description="Inflation-adjusted ending value")
    after_tax: Optional[float] = Field(None, description="Ending value after gains tax")
    total_contributions: float
    path: Optional[PathResult] = None
    ensemble: Optional[EnsembleResult] = None

    def summary(self) -> Dict[str, Any]:
        """Flatten the headline figures into a plain dictionary."""
        payload: Dict[str, Any] = {
            "mode": self.mode,
            "label": self.label,
            "years": self.years,
            "nominal": self.nominal,
            "real": self.real,
            "after_tax": self.after_tax,
            "total_contributions": self.total_contributions,
        }
        if self.ensemble is not None:
            payload.update(
                {
                    "p10": self.ensemble.p10[-1],
                    "median": self.ensemble.median[-1],
                    "p90": self.ensemble.p90[-1],
                    "best": self.ensemble.best,
                    "worst": self.ensemble.worst,
                    "runs": self.ensemble.runs,
                }
            )
        return payload


__all__ = ["PathResult", "EnsembleResult", "WhatIfOutcome"]
