"""What-if investment projections: compounding paths and Monte Carlo bands."""

from .core.adjustments import apply_end_tax, apply_inflation, future_value, future_value_series
from .core.monte_carlo import percentile, simulate_ensemble
from .core.path_simulator import simulate_path
from .core.returns import HISTORICAL_RETURNS
from .core.validator import InvalidParameters
from .engine import WhatIfEngine
from .models.parameters import AdjustmentSettings, ContributionFrequency, SimulationParameters
from .models.results import EnsembleResult, PathResult, WhatIfOutcome

__all__ = [
    "HISTORICAL_RETURNS",
    "InvalidParameters",
    "SimulationParameters",
    "AdjustmentSettings",
    "ContributionFrequency",
    "PathResult",
    "EnsembleResult",
    "WhatIfOutcome",
    "WhatIfEngine",
    "simulate_path",
    "simulate_ensemble",
    "percentile",
    "apply_inflation",
    "apply_end_tax",
    "future_value",
    "future_value_series",
]
