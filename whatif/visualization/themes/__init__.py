"""Chart theme utilities."""

from typing import Dict

from .light_theme import LIGHT_THEME
from .matrix_theme import MATRIX_THEME

DEFAULT_THEME = LIGHT_THEME

THEMES: Dict[str, dict] = {
    "light": LIGHT_THEME,
    "matrix": MATRIX_THEME,
}


def get_theme(name: str) -> dict:
    """Look up a theme by name."""
    try:
        return THEMES[name.lower()]
    except KeyError as exc:
        raise ValueError(
            f"Unknown theme {name!r}; choose from {', '.join(sorted(THEMES))}"
        ) from exc


__all__ = ["LIGHT_THEME", "MATRIX_THEME", "DEFAULT_THEME", "THEMES", "get_theme"]
