"""Snapshot : tous les signaux dérivés du dashboard en un seul appel."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Sequence

from src.analysis.analytics_config import ANALYTICS_CONFIG, AnalyticsConfig
from src.analysis.outcome import as_match_list, sort_most_recent_first
from src.analysis.performance_index import calculate_performance_index
from src.analysis.session import calculate_today_session
from src.analysis.streaks import get_overall_momentum
from src.analysis.tilt import calculate_tilt_score
from src.models import AnalyticsSnapshot, HeroStatRecord, MatchRecord

logger = logging.getLogger(__name__)


def build_analytics_snapshot(
    matches: Sequence[MatchRecord],
    hero_stats: Sequence[HeroStatRecord],
    *,
    now: datetime | None = None,
    config: AnalyticsConfig = ANALYTICS_CONFIG,
) -> AnalyticsSnapshot:
    """Calcule tilt, PEI, momentum et session du jour.

    Les matchs sont triés du plus récent au plus ancien avant d'être passés
    aux calculateurs : le snapshot ne dépend donc pas de l'ordre fourni.
    Rien n'est mis en cache ici ; c'est à l'appelant de le faire si besoin.
    """
    match_list = as_match_list(matches)
    ordered = sort_most_recent_first(match_list) if match_list is not None else None

    snapshot = AnalyticsSnapshot(
        tilt=calculate_tilt_score(ordered, config=config.tilt),
        performance_index=calculate_performance_index(ordered, config=config.performance_index),
        momentum=get_overall_momentum(ordered, hero_stats, config=config.streak),
        session=calculate_today_session(ordered, now=now, config=config.session),
        matches_analyzed=len(ordered) if ordered is not None else 0,
    )
    logger.debug(
        "Snapshot: %d match(s), tilt=%d (%s), PEI=%d (%s), momentum=%s",
        snapshot.matches_analyzed,
        snapshot.tilt.level,
        snapshot.tilt.status,
        snapshot.performance_index.score,
        snapshot.performance_index.grade,
        snapshot.momentum.momentum,
    )
    return snapshot
