# -*- coding: utf-8 -*-
"""Fonctions de formatage pour la couche de présentation.

Ce module centralise :
- Les descripteurs d'affichage (texte, emoji, couleur) des séries, du
  momentum et du tilt
- Les durées (m:ss) et les lignes K/D/A
"""
from __future__ import annotations

import math
from typing import Any, Dict

from src.config import DASHBOARD_COLORS
from src.models import StreakResult

__all__ = [
    "format_duration",
    "format_kda",
    "get_streak_display",
    "get_momentum_display",
    "get_tilt_display",
]


def format_duration(seconds: float | None) -> str:
    """Formate une durée en m:ss (minutes non bornées : 75 min -> "75:00")."""
    if seconds is None:
        return "-"
    try:
        s = float(seconds)
    except (TypeError, ValueError):
        return "-"
    if math.isnan(s) or s < 0:
        return "-"
    total = int(round(s))
    return f"{total // 60}:{total % 60:02d}"


def format_kda(kills: Any, deaths: Any, assists: Any) -> str:
    """Formate une ligne K/D/A ("7/2/11"), valeurs manquantes -> 0."""
    def _n(v: Any) -> int:
        try:
            return int(v or 0)
        except (TypeError, ValueError):
            return 0

    return f"{_n(kills)}/{_n(deaths)}/{_n(assists)}"


_NO_STREAK = {
    "text": "No streak",
    "emoji": "➖",
    "color": DASHBOARD_COLORS.grey,
}


def get_streak_display(streak: StreakResult | None) -> Dict[str, str]:
    """Descripteur d'affichage d'une série.

    Returns:
        Dict avec text ("3W" / "2L"), emoji, color et description ;
        pas de série -> "No streak".
    """
    if streak is None or streak.streak_type not in ("win", "loss") or not streak.current_streak:
        return dict(_NO_STREAK)

    count = streak.current_streak
    streak_type = streak.streak_type

    if streak_type == "win":
        return {
            "text": f"{count}W",
            "emoji": "🔥",
            "color": DASHBOARD_COLORS.green,
            "description": f"{count} game win streak",
        }
    return {
        "text": f"{count}L",
        "emoji": "🧊",
        "color": DASHBOARD_COLORS.blue,
        "description": f"{count} game loss streak",
    }


_MOMENTUM_DISPLAYS: Dict[str, Dict[str, str]] = {
    "improving": {"text": "Improving", "emoji": "📈", "color": DASHBOARD_COLORS.green},
    "declining": {"text": "Declining", "emoji": "📉", "color": DASHBOARD_COLORS.red},
    "neutral": {"text": "Stable", "emoji": "➖", "color": DASHBOARD_COLORS.yellow},
    "positive": {"text": "Positive", "emoji": "📈", "color": DASHBOARD_COLORS.green},
    "negative": {"text": "Negative", "emoji": "📉", "color": DASHBOARD_COLORS.red},
}


def get_momentum_display(momentum: str | None) -> Dict[str, str]:
    """Descripteur d'affichage d'un momentum (héros ou global), "neutral" par défaut."""
    return dict(_MOMENTUM_DISPLAYS.get(momentum or "", _MOMENTUM_DISPLAYS["neutral"]))


_TILT_DISPLAYS: Dict[str, Dict[str, str]] = {
    "flow": {"text": "Flow", "emoji": "🧘", "color": DASHBOARD_COLORS.cyan},
    "good": {"text": "Good", "emoji": "🙂", "color": DASHBOARD_COLORS.green},
    "neutral": {"text": "Neutral", "emoji": "😐", "color": DASHBOARD_COLORS.yellow},
    "warning": {"text": "Tilting", "emoji": "😤", "color": DASHBOARD_COLORS.orange},
    "danger": {"text": "Danger", "emoji": "🛑", "color": DASHBOARD_COLORS.red},
    "stable": {"text": "No data", "emoji": "➖", "color": DASHBOARD_COLORS.grey},
}


def get_tilt_display(status: str | None) -> Dict[str, str]:
    """Descripteur d'affichage d'un statut de tilt ("stable" = pas assez de données)."""
    return dict(_TILT_DISPLAYS.get(status or "", _TILT_DISPLAYS["stable"]))
