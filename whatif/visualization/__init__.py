"""Visualization utilities for what-if projections."""

from __future__ import annotations

from .charts import build_fan_chart, build_path_figure
from .themes import DEFAULT_THEME, get_theme

__all__ = ["build_fan_chart", "build_path_figure", "DEFAULT_THEME", "get_theme"]
