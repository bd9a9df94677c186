"""Numeric helper functions shared across the application."""

from __future__ import annotations

from typing import Optional


def from_percent(value: Optional[float]) -> Optional[float]:
    """Convert a percentage input (``7`` for 7%) to a decimal while preserving None."""
    if value is None:
        return None
    return float(value) / 100.0


def clamp(value: float, lower: float, upper: float) -> float:
    """Pin ``value`` into ``[lower, upper]``."""
    return max(lower, min(upper, value))


def format_currency(value: Optional[float], symbol: str = "€") -> str:
    """Format a whole-currency amount for display, e.g. ``€19,672``."""
    if value is None:
        return "—"
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.0f}"


__all__ = ["from_percent", "clamp", "format_currency"]
