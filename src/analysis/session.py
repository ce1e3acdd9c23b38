"""Résumé de la session de jeu du jour."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from src.analysis.analytics_config import SESSION_CONFIG, SessionConfig
from src.analysis.outcome import as_match_list, count_wins, is_win, sort_most_recent_first
from src.models import MatchRecord, SessionSummary


def start_of_day_timestamp(now: datetime | None = None) -> float:
    """Timestamp Unix de minuit (heure locale, ou fuseau de ``now`` s'il en a un)."""
    if now is None:
        now = datetime.now().astimezone()
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight.timestamp()


def calculate_today_session(
    matches: Sequence[MatchRecord],
    *,
    now: datetime | None = None,
    config: SessionConfig = SESSION_CONFIG,
) -> SessionSummary:
    """Calcule le bilan des matchs joués depuis minuit.

    Args:
        matches: Matchs récents (ordre quelconque, ils sont triés ici).
        now: Instant de référence (défaut: maintenant, heure locale).
        config: Gain/perte de MMR estimé par match et cycle de comportement.

    Returns:
        SessionSummary. La variation de MMR est une estimation
        (+/- ``mmr_per_game`` par match), pas une valeur lue dans l'API.
    """
    match_list = as_match_list(matches)
    if match_list is None:
        return SessionSummary(games_until_behavior_update=config.behavior_update_games)

    cutoff = start_of_day_timestamp(now)
    today = sort_most_recent_first(
        [m for m in match_list if (m.start_time or 0) >= cutoff]
    )

    wins = count_wins(today)
    losses = len(today) - wins

    current_streak = 0
    streak_type = "none"
    if today:
        last_result = is_win(today[0])
        streak_type = "win" if last_result else "loss"
        for match in today:
            if is_win(match) != last_result:
                break
            current_streak += 1

    return SessionSummary(
        wins=wins,
        losses=losses,
        mmr_change=(wins - losses) * config.mmr_per_game,
        current_streak=current_streak,
        streak_type=streak_type,
        games_until_behavior_update=max(0, config.behavior_update_games - len(today)),
    )
