"""Runtime defaults for the what-if calculator (overridable via environment)."""

from __future__ import annotations

import os
from typing import Optional, Tuple


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return int(value)


SUPPORTED_FREQUENCIES: Tuple[int, ...] = (12, 52, 365)

DEFAULT_RUNS = _env_int("WHATIF_DEFAULT_RUNS", 1000)
MIN_RUNS = _env_int("WHATIF_MIN_RUNS", 100)
MAX_RUNS = _env_int("WHATIF_MAX_RUNS", 5000)
RANDOM_SEED = _env_int("WHATIF_RANDOM_SEED", None)

BAND_PERCENTILES: Tuple[float, float, float] = (0.10, 0.50, 0.90)


__all__ = [
    "SUPPORTED_FREQUENCIES",
    "DEFAULT_RUNS",
    "MIN_RUNS",
    "MAX_RUNS",
    "RANDOM_SEED",
    "BAND_PERCENTILES",
]
