from __future__ import annotations

from typing import Sequence

from src.analysis.analytics_config import PEI_CONFIG, PerformanceIndexConfig
from src.analysis.numeric import clamp, round_half_up
from src.analysis.outcome import as_match_list, count_wins, is_win
from src.models import MatchRecord, PerformanceIndex


# =============================================================================
# Performance Efficiency Index (PEI) 0-100
# =============================================================================
#
# Score multi-facteurs sur les 20 derniers matchs :
# - KDA moyen (plafonné à 10 par match)      -> 25 pts pour un KDA de 4
# - GPM moyen (plafonné à 1000)              -> 20 pts pour 600 GPM
# - XPM moyen (plafonné à 1000)              -> 15 pts pour 700 XPM
# - Win rate                                 -> 40 pts pour 100 %
#
# Les facteurs peuvent dépasser leur poids nominal ; seul le total est borné.
# =============================================================================


def grade_for_score(score: float, config: PerformanceIndexConfig = PEI_CONFIG) -> str:
    """Retourne la note (S+ ... F) d'un score, premier seuil atteint."""
    for threshold, grade in config.grade_thresholds:
        if score >= threshold:
            return grade
    return config.floor_grade


def _trend(window: list[MatchRecord], config: PerformanceIndexConfig) -> str:
    half = config.half_window
    newer_wins = count_wins(window[:half])
    older_wins = count_wins(window[half : half * 2])

    if newer_wins > older_wins + config.trend_margin:
        return "improving"
    if older_wins > newer_wins + config.trend_margin:
        return "declining"
    return "stable"


def compute_performance_components(
    window: Sequence[MatchRecord],
    config: PerformanceIndexConfig = PEI_CONFIG,
) -> dict[str, float]:
    """Moyennes plafonnées (kda, gpm, xpm) et win rate (%) d'une fenêtre.

    Returns:
        Dict avec avg_kda, avg_gpm, avg_xpm, win_rate. Fenêtre vide -> zéros.
    """
    n = len(window)
    if n == 0:
        return {"avg_kda": 0.0, "avg_gpm": 0.0, "avg_xpm": 0.0, "win_rate": 0.0}

    total_kda = 0.0
    total_gpm = 0.0
    total_xpm = 0.0
    wins = 0
    for match in window:
        kda = (match.kills + match.assists) / max(match.deaths, 1)
        total_kda += min(kda, config.kda_cap)
        total_gpm += min(match.gold_per_min, config.gpm_cap)
        total_xpm += min(match.xp_per_min, config.xpm_cap)
        if is_win(match):
            wins += 1

    return {
        "avg_kda": total_kda / n,
        "avg_gpm": total_gpm / n,
        "avg_xpm": total_xpm / n,
        "win_rate": wins / n * 100.0,
    }


def calculate_performance_index(
    matches: Sequence[MatchRecord],
    *,
    config: PerformanceIndexConfig = PEI_CONFIG,
) -> PerformanceIndex:
    """Calcule le PEI (score, note, tendance) sur les 20 derniers matchs.

    Args:
        matches: Matchs récents, du plus récent au plus ancien.
        config: Plafonds, références, poids et seuils de note.

    Returns:
        PerformanceIndex. Moins de 5 matchs (ou entrée invalide) ->
        ``score=50, grade="C", trend="stable"``.
    """
    match_list = as_match_list(matches)
    if match_list is None or len(match_list) < config.min_matches:
        return PerformanceIndex(
            score=config.default_score,
            grade=config.default_grade,
            trend="stable",
        )

    window = match_list[: config.window]
    c = compute_performance_components(window, config)

    raw = (
        (c["avg_kda"] / config.kda_reference) * config.kda_weight
        + (c["avg_gpm"] / config.gpm_reference) * config.gpm_weight
        + (c["avg_xpm"] / config.xpm_reference) * config.xpm_weight
        + (c["win_rate"] / 100.0) * config.win_rate_weight
    )
    score = int(clamp(round_half_up(raw), 0, 100))

    return PerformanceIndex(
        score=score,
        grade=grade_for_score(score, config),
        trend=_trend(window, config),
    )
