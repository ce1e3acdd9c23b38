"""Tendance de performance d'un héros (fenêtre récente vs fenêtre précédente)."""

from __future__ import annotations

from typing import Any, Sequence

from src.analysis.analytics_config import TREND_CONFIG, TrendConfig
from src.analysis.numeric import round_half_up
from src.analysis.outcome import as_match_list, win_fraction
from src.analysis.streaks import select_hero_window
from src.models import MatchRecord, TrendResult


def _default_trend(trend: str) -> TrendResult:
    return TrendResult(trend=trend, direction="none", strength=0, confidence="low")


def _strength(abs_difference: float, config: TrendConfig) -> tuple[int, str]:
    for threshold, strength, confidence in config.strength_bands:
        if abs_difference >= threshold:
            return strength, confidence
    return 0, config.default_confidence


def analyze_trend(
    matches: Sequence[MatchRecord],
    hero_id: Any,
    window_size: int | None = None,
    *,
    config: TrendConfig = TREND_CONFIG,
) -> TrendResult:
    """Compare le win rate des ``window_size`` derniers matchs du héros au précédent bloc.

    Args:
        matches: Matchs récents (plus récent d'abord attendu, non imposé).
        hero_id: Héros à analyser.
        window_size: Taille de chaque fenêtre (défaut: 5).
        config: Bandes de force/confiance et seuil de direction.

    Returns:
        TrendResult. Moins de ``window_size`` matchs -> "insufficient_data" ;
        fenêtre précédente incomplète (ou entrée invalide) -> "stable".
    """
    match_list = as_match_list(matches)
    if match_list is None:
        return _default_trend("stable")

    if window_size is None:
        window_size = config.window_size

    hero_matches = select_hero_window(
        match_list,
        hero_id,
        window_size * 2,
        sort_before_slice=config.sort_before_slice,
    )
    if len(hero_matches) < window_size or not hero_matches:
        return _default_trend("insufficient_data")

    recent_window = hero_matches[:window_size]
    older_window = hero_matches[window_size : window_size * 2]
    if len(older_window) < window_size:
        return _default_trend("stable")

    recent_rate = win_fraction(recent_window)
    older_rate = win_fraction(older_window)
    difference = recent_rate - older_rate

    strength, confidence = _strength(abs(difference), config)

    if difference > config.direction_threshold:
        trend, direction = "improving", "up"
    elif difference < -config.direction_threshold:
        trend, direction = "declining", "down"
    else:
        trend, direction = "stable", "none"

    return TrendResult(
        trend=trend,
        direction=direction,
        strength=strength,
        confidence=confidence,
        recent_win_rate=round_half_up(recent_rate * 100),
        older_win_rate=round_half_up(older_rate * 100),
        improvement=round_half_up(difference * 100),
    )
