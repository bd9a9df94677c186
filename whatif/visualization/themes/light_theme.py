"""Light theme configuration for projection charts."""

from __future__ import annotations

from typing import Dict


PROJECTION_GREEN = "#1B998B"
MEDIAN_INK = "#23395B"
BAND_RGB = "35, 57, 91"
AXIS_GRAY = "#8D99AE"
PAPER = "#FFFFFF"
INK = "#2B2D42"
GRID = "#EDF2F4"


LIGHT_THEME: Dict[str, object] = {
    "name": "light",
    "palette": {
        "single_path": PROJECTION_GREEN,
        "median": MEDIAN_INK,
        "band_fill": f"rgba({BAND_RGB}, 0.15)",
        "band_edge": f"rgba({BAND_RGB}, 0.30)",
        "neutral": AXIS_GRAY,
    },
    "plotly_template": {
        "layout": {
            "font": {"family": "Inter, Helvetica, Arial, sans-serif", "size": 13, "color": INK},
            "paper_bgcolor": PAPER,
            "plot_bgcolor": PAPER,
            "separators": ".,",
            "colorway": [PROJECTION_GREEN, MEDIAN_INK, AXIS_GRAY],
            "title": {"font": {"size": 18, "color": MEDIAN_INK}, "x": 0.02},
            "hoverlabel": {"bgcolor": PAPER, "bordercolor": AXIS_GRAY, "font": {"color": INK}},
            "legend": {"bgcolor": "rgba(255, 255, 255, 0)"},
            "xaxis": {"showgrid": False, "linecolor": AXIS_GRAY, "ticks": "outside"},
            "yaxis": {"gridcolor": GRID, "zeroline": False, "linecolor": AXIS_GRAY},
        }
    },
}
