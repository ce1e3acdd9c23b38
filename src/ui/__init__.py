"""Module UI - Descripteurs d'affichage et formatage."""

from src.ui.formatting import (
    format_duration,
    format_kda,
    get_streak_display,
    get_momentum_display,
    get_tilt_display,
)

__all__ = [
    "format_duration",
    "format_kda",
    "get_streak_display",
    "get_momentum_display",
    "get_tilt_display",
]
