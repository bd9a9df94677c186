"""Green-on-black terminal theme."""

from __future__ import annotations

from typing import Dict


BACKGROUND = "#050806"
TEXT_COLOR = "#C8FFE6"
AXIS_COLOR = "rgba(0, 255, 156, 0.45)"
GRID_COLOR = "rgba(120, 255, 180, 0.18)"


MATRIX_THEME: Dict[str, object] = {
    "name": "matrix",
    "palette": {
        "single_path": "#87F7CF",
        "median": "#7ED0FF",
        "band_fill": "rgba(126, 208, 255, 0.18)",
        "band_edge": "rgba(126, 208, 255, 0.28)",
        "neutral": "#00FF9C",
    },
    "plotly_template": {
        "layout": {
            "font": {"family": "Consolas, monospace", "color": TEXT_COLOR},
            "paper_bgcolor": BACKGROUND,
            "plot_bgcolor": BACKGROUND,
            "title": {"font": {"size": 20, "color": TEXT_COLOR}},
            "legend": {"bgcolor": BACKGROUND, "bordercolor": AXIS_COLOR},
            "xaxis": {"gridcolor": GRID_COLOR, "linecolor": AXIS_COLOR, "zerolinecolor": GRID_COLOR},
            "yaxis": {"gridcolor": GRID_COLOR, "linecolor": AXIS_COLOR, "zerolinecolor": GRID_COLOR},
        }
    },
}
