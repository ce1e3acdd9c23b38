"""Séries de victoires/défaites par héros et momentum global.

Trois niveaux :
- ``analyze_hero_streak`` : série en cours, forme récente et momentum d'un héros ;
- ``find_hot_streak_heroes`` / ``find_cold_spell_heroes`` : héros en série ;
- ``get_overall_momentum`` : indicateur unique pour le bandeau du dashboard.
"""

from __future__ import annotations

from typing import Any, Sequence

from src.analysis.analytics_config import STREAK_CONFIG, StreakConfig
from src.analysis.outcome import as_match_list, count_wins, is_win, sort_most_recent_first, win_fraction
from src.analysis.numeric import round_half_up
from src.models import (
    HeroStatRecord,
    HeroStreakEntry,
    MatchRecord,
    MomentumSummary,
    StreakResult,
    WinLossRecord,
)


def select_hero_window(
    matches: Sequence[MatchRecord],
    hero_id: Any,
    size: int,
    *,
    sort_before_slice: bool = False,
) -> list[MatchRecord]:
    """Sélectionne la fenêtre de matchs d'un héros, du plus récent au plus ancien.

    Par défaut, on garde les ``size`` PREMIERS matchs de la liste puis on les
    trie. Ce n'est correct que si l'appelant fournit déjà une liste triée
    (plus récent d'abord) : sur une liste désordonnée, des matchs récents
    peuvent être exclus. ``sort_before_slice=True`` trie avant de découper.
    """
    hero_matches = [m for m in matches if getattr(m, "hero_id", None) == hero_id]
    if sort_before_slice:
        return sort_most_recent_first(hero_matches)[: max(0, size)]
    return sort_most_recent_first(hero_matches[: max(0, size)])


def _recent_form(win_rate: float, config: StreakConfig) -> str:
    for threshold, label in config.form_thresholds:
        if win_rate >= threshold:
            return label
    return config.form_floor


def _momentum(window: list[MatchRecord], config: StreakConfig) -> str:
    if len(window) < config.momentum_min_games:
        return "neutral"

    half = len(window) // 2
    recent_rate = win_fraction(window[:half])
    older_rate = win_fraction(window[half:])
    difference = recent_rate - older_rate

    if difference > config.momentum_threshold:
        return "improving"
    if difference < -config.momentum_threshold:
        return "declining"
    return "neutral"


def _empty_streak(recent_form: str) -> StreakResult:
    return StreakResult(
        current_streak=0,
        streak_type="none",
        recent_form=recent_form,
        win_loss_record=WinLossRecord(wins=0, losses=0),
        momentum="neutral",
        win_rate=0,
        games_analyzed=0,
    )


def analyze_hero_streak(
    matches: Sequence[MatchRecord],
    hero_id: Any,
    lookback_games: int | None = None,
    *,
    config: StreakConfig = STREAK_CONFIG,
) -> StreakResult:
    """Analyse la série en cours d'un héros sur ses derniers matchs.

    Args:
        matches: Matchs récents (plus récent d'abord attendu, non imposé).
        hero_id: Héros à analyser.
        lookback_games: Nombre de matchs du héros considérés (défaut: 10).
        config: Seuils de forme et de momentum.

    Returns:
        StreakResult. Entrée invalide -> forme "unknown" ; aucun match du
        héros -> forme "no_data". Ne lève jamais d'exception.
    """
    match_list = as_match_list(matches)
    if match_list is None:
        return _empty_streak("unknown")

    if lookback_games is None:
        lookback_games = config.lookback_games

    window = select_hero_window(
        match_list,
        hero_id,
        lookback_games,
        sort_before_slice=config.sort_before_slice,
    )
    if not window:
        return _empty_streak("no_data")

    # Série en cours : on s'arrête au premier résultat différent.
    most_recent_win = is_win(window[0])
    current_streak = 0
    for match in window:
        if is_win(match) != most_recent_win:
            break
        current_streak += 1

    wins = count_wins(window)
    losses = len(window) - wins
    win_rate = wins / len(window) * 100.0

    return StreakResult(
        current_streak=current_streak,
        streak_type="win" if most_recent_win else "loss",
        recent_form=_recent_form(win_rate, config),
        win_loss_record=WinLossRecord(wins=wins, losses=losses),
        momentum=_momentum(window, config),
        win_rate=round_half_up(win_rate),
        games_analyzed=len(window),
    )


# =============================================================================
# Héros en série (chaude / froide)
# =============================================================================


def _scan_heroes(
    matches: Sequence[MatchRecord],
    hero_stats: Sequence[HeroStatRecord],
    streak_type: str,
    min_streak: int,
    config: StreakConfig,
) -> list[HeroStreakEntry]:
    if not isinstance(hero_stats, (list, tuple)):
        return []

    entries: list[HeroStreakEntry] = []
    for hero in hero_stats:
        hero_id = getattr(hero, "hero_id", None)
        streak = analyze_hero_streak(matches, hero_id, config=config)
        if streak.streak_type != streak_type or streak.current_streak < min_streak:
            continue
        name = getattr(hero, "name", None)
        entries.append(
            HeroStreakEntry(
                hero_id=hero_id,
                hero_name=name or f"Hero {hero_id}",
                streak=streak.current_streak,
                recent_form=streak.recent_form,
                win_rate=streak.win_rate,
                momentum=streak.momentum,
            )
        )

    # Tri stable : plus longue série d'abord.
    entries.sort(key=lambda e: e.streak, reverse=True)
    return entries


def find_hot_streak_heroes(
    matches: Sequence[MatchRecord],
    hero_stats: Sequence[HeroStatRecord],
    min_streak: int | None = None,
    *,
    config: StreakConfig = STREAK_CONFIG,
) -> list[HeroStreakEntry]:
    """Héros sur une série de victoires d'au moins ``min_streak`` (défaut: 3)."""
    if min_streak is None:
        min_streak = config.min_streak
    return _scan_heroes(matches, hero_stats, "win", min_streak, config)


def find_cold_spell_heroes(
    matches: Sequence[MatchRecord],
    hero_stats: Sequence[HeroStatRecord],
    min_streak: int | None = None,
    *,
    config: StreakConfig = STREAK_CONFIG,
) -> list[HeroStreakEntry]:
    """Héros sur une série de défaites d'au moins ``min_streak`` (défaut: 3)."""
    if min_streak is None:
        min_streak = config.min_streak
    return _scan_heroes(matches, hero_stats, "loss", min_streak, config)


def get_overall_momentum(
    matches: Sequence[MatchRecord],
    hero_stats: Sequence[HeroStatRecord],
    *,
    config: StreakConfig = STREAK_CONFIG,
) -> MomentumSummary:
    """Résume les séries chaudes/froides en un indicateur de momentum global.

    Règle de majorité sur les NOMBRES de héros (pas sur la longueur des
    séries) : plus de héros chauds -> "positive", plus de froids -> "negative".
    """
    hot = find_hot_streak_heroes(matches, hero_stats, config=config)
    cold = find_cold_spell_heroes(matches, hero_stats, config=config)

    if len(hot) > len(cold):
        momentum = "positive"
    elif len(cold) > len(hot):
        momentum = "negative"
    else:
        momentum = "neutral"

    return MomentumSummary(
        hot_streak=hot[0] if hot else None,
        cold_spell=cold[0] if cold else None,
        total_hot_heroes=len(hot),
        total_cold_heroes=len(cold),
        momentum=momentum,
    )
