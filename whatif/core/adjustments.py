"""Closed-form growth helpers plus inflation and end-of-horizon tax adjustments."""

from __future__ import annotations

from typing import Optional


def future_value(pv: float, rate: float, years: float) -> float:
    """Value of a single payment ``pv`` compounded annually for ``years``."""
    return float(pv * (1.0 + rate) ** years)


def future_value_series(pmt: float, rate: float, years: float, frequency: int) -> float:
    """
    Future value of ``pmt`` paid ``frequency`` times a year at nominal rate ``rate``.

    The period rate is ``rate / frequency``; a zero rate sums the payments.
    """
    periods = years * frequency
    period_rate = rate / frequency
    if period_rate == 0:
        return float(pmt * periods)
    return float(pmt * ((1.0 + period_rate) ** periods - 1.0) / period_rate)


def apply_inflation(value: float, inflation_rate: Optional[float], years: int) -> float:
    """Deflate a nominal value by compounding inflation over ``years``."""
    if not inflation_rate:
        return float(value)
    return float(value / (1.0 + inflation_rate) ** years)


def apply_end_tax(ending_value: float, total_contributions: float, tax_rate: Optional[float]) -> float:
    """Tax the realised gain only; principal and losses are never taxed."""
    if not tax_rate:
        return float(ending_value)
    gain = max(0.0, ending_value - total_contributions)
    return float(ending_value - gain * tax_rate)


__all__ = ["future_value", "future_value_series", "apply_inflation", "apply_end_tax"]
