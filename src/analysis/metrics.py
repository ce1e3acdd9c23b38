"""Métriques clés du dashboard et tableau récapitulatif par héros."""

from __future__ import annotations

from typing import List, Optional, Sequence

import pandas as pd

from src.analysis.numeric import round_half_up, round_to
from src.data.parsers import matches_to_frame
from src.models import CoreMetric, HeroStatRecord, MatchRecord, WinLossRecord


# (seuil "up", seuil "same") : en dessous du second -> "down".
CORE_METRIC_TRENDS = {
    "kda": (3.0, 2.0),
    "win_rate": (55.0, 45.0),
    "gpm": (500.0, 400.0),
    "xpm": (600.0, 500.0),
    "cs_per_min": (60.0, 40.0),
}

HERO_BREAKDOWN_COLUMNS = [
    "hero_id",
    "hero_name",
    "games",
    "wins",
    "losses",
    "win_rate",
    "avg_kills",
    "avg_deaths",
    "avg_assists",
    "avg_gpm",
    "avg_xpm",
]


def _trend_label(value: float, key: str) -> str:
    up, same = CORE_METRIC_TRENDS[key]
    if value >= up:
        return "up"
    if value >= same:
        return "same"
    return "down"


def compute_core_metrics(
    matches: Sequence[MatchRecord],
    win_loss: Optional[WinLossRecord] = None,
) -> List[CoreMetric]:
    """Calcule les métriques clés (KDA, win rate, GPM, XPM, CS/min).

    Args:
        matches: Matchs récents.
        win_loss: Bilan global du joueur (pour le win rate).

    Returns:
        Liste de CoreMetric ; les métriques sans données sont omises.
    """
    metrics: List[CoreMetric] = []
    df = matches_to_frame(matches) if isinstance(matches, (list, tuple)) else pd.DataFrame()

    if not df.empty:
        kills = float(df["kills"].sum())
        deaths = float(df["deaths"].sum())
        assists = float(df["assists"].sum())
        kda = (kills + assists) / deaths if deaths > 0 else kills + assists
        metrics.append(CoreMetric("KDA Ratio", round_to(kda, 2), _trend_label(kda, "kda")))

    if win_loss is not None and win_loss.total > 0:
        win_rate = win_loss.wins / win_loss.total * 100.0
        metrics.append(
            CoreMetric("Win Rate", round_to(win_rate, 1), _trend_label(win_rate, "win_rate"), "%")
        )

    if not df.empty:
        avg_gpm = float(df["gold_per_min"].mean())
        metrics.append(CoreMetric("GPM", round_half_up(avg_gpm), _trend_label(avg_gpm, "gpm")))

        avg_xpm = float(df["xp_per_min"].mean())
        metrics.append(CoreMetric("XPM", round_half_up(avg_xpm), _trend_label(avg_xpm, "xpm")))

        timed = df.loc[df["duration"] > 0]
        if not timed.empty:
            last_hits = pd.to_numeric(timed["last_hits"], errors="coerce").fillna(0)
            cs_per_min = float((last_hits / (timed["duration"] / 60.0)).mean())
            metrics.append(
                CoreMetric("CS/Min", round_to(cs_per_min, 1), _trend_label(cs_per_min, "cs_per_min"))
            )

    return metrics


def compute_hero_breakdown(
    hero_stats: Sequence[HeroStatRecord],
    *,
    min_games: int = 5,
    limit: int = 10,
) -> pd.DataFrame:
    """Calcule le tableau des héros les plus joués.

    Args:
        hero_stats: Statistiques agrégées par héros.
        min_games: Nombre minimum de parties pour apparaître.
        limit: Nombre maximum de lignes.

    Returns:
        DataFrame avec colonnes HERO_BREAKDOWN_COLUMNS, trié par parties
        décroissantes (win_rate en %, moyennes par partie).
    """
    if not isinstance(hero_stats, (list, tuple)) or not hero_stats:
        return pd.DataFrame(columns=HERO_BREAKDOWN_COLUMNS)

    rows: List[dict] = []
    for hero in hero_stats:
        if hero.games < min_games or hero.games <= 0:
            continue
        games = hero.games
        rows.append(
            {
                "hero_id": hero.hero_id,
                "hero_name": hero.display_name,
                "games": int(games),
                "wins": int(hero.win),
                "losses": int(hero.losses),
                "win_rate": hero.win_rate,
                "avg_kills": hero.sum_kills / games,
                "avg_deaths": hero.sum_deaths / games,
                "avg_assists": hero.sum_assists / games,
                "avg_gpm": hero.sum_gold_per_min / games,
                "avg_xpm": hero.sum_xp_per_min / games,
            }
        )

    if not rows:
        return pd.DataFrame(columns=HERO_BREAKDOWN_COLUMNS)

    out = pd.DataFrame(rows, columns=HERO_BREAKDOWN_COLUMNS)
    out = out.sort_values("games", ascending=False, kind="stable").head(limit)
    return out.reset_index(drop=True)
