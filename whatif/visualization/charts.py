"""Plotly figures for single projections and Monte Carlo fan charts."""

from __future__ import annotations

from typing import Optional

import plotly.graph_objects as go

from ..models.results import EnsembleResult, PathResult
from .themes import DEFAULT_THEME


def _apply_layout(figure: go.Figure, theme: dict, title: str) -> go.Figure:
    figure.update_layout(
        template=theme["plotly_template"],
        title=title,
        hovermode="x unified",
        margin=dict(l=80, r=20, t=60, b=60),
        xaxis=dict(title="Year", dtick=5, rangemode="tozero"),
        yaxis=dict(title="Value", tickprefix="€", tickformat=",.0f", rangemode="tozero"),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1.0),
    )
    return figure


def build_path_figure(
    result: PathResult,
    *,
    theme: Optional[dict] = None,
    title: str = "Projected Value",
) -> go.Figure:
    """Line chart of one simulated trajectory."""
    theme = theme or DEFAULT_THEME
    palette = theme["palette"]
    figure = go.Figure()
    figure.add_trace(
        go.Scatter(
            x=list(range(len(result.path))),
            y=list(result.path),
            mode="lines",
            line=dict(color=palette["single_path"], width=3),
            name="Projection",
            hovertemplate="Year %{x}<br>€%{y:,.0f}<extra></extra>",
        )
    )
    return _apply_layout(figure, theme, title)


def build_fan_chart(
    result: EnsembleResult,
    *,
    theme: Optional[dict] = None,
    title: str = "Monte Carlo Projection",
) -> go.Figure:
    """
    Construct a fan chart: the p10–p90 band shaded behind the median line.
    """
    theme = theme or DEFAULT_THEME
    palette = theme["palette"]
    years = list(range(len(result.median)))

    figure = go.Figure()
    figure.add_trace(
        go.Scatter(
            x=years,
            y=list(result.p90),
            line=dict(width=1, color=palette["band_edge"]),
            name="P90",
            hovertemplate="Year %{x}<br>P90 €%{y:,.0f}<extra></extra>",
            showlegend=False,
        )
    )
    figure.add_trace(
        go.Scatter(
            x=years,
            y=list(result.p10),
            line=dict(width=1, color=palette["band_edge"]),
            fill="tonexty",
            fillcolor=palette["band_fill"],
            name="P10 to P90",
            hovertemplate="Year %{x}<br>P10 €%{y:,.0f}<extra></extra>",
        )
    )
    figure.add_trace(
        go.Scatter(
            x=years,
            y=list(result.median),
            line=dict(color=palette["median"], width=3),
            name="Median",
            hovertemplate="Year %{x}<br>Median €%{y:,.0f}<extra></extra>",
        )
    )
    return _apply_layout(figure, theme, f"{title} ({result.runs} runs)")


__all__ = ["build_path_figure", "build_fan_chart"]
