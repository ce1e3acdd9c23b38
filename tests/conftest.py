"""Fixtures partagées : fabrique de matchs."""

from __future__ import annotations

import pytest

from src.models import MatchRecord

BASE_TIME = 1_700_000_000


def build_match(
    win: bool = True,
    *,
    hero_id: int = 1,
    start_time: int = BASE_TIME,
    match_id: int | None = None,
    kills: int = 5,
    deaths: int = 2,
    assists: int = 5,
    gpm: float = 450.0,
    xpm: float = 550.0,
    duration: float = 1800.0,
    last_hits: int | None = None,
) -> MatchRecord:
    """Match côté Radiant gagné (slot 0) ou perdu (slot 128, Radiant gagne)."""
    return MatchRecord(
        match_id=match_id if match_id is not None else start_time,
        start_time=start_time,
        radiant_win=True,
        player_slot=0 if win else 128,
        hero_id=hero_id,
        kills=kills,
        deaths=deaths,
        assists=assists,
        duration=duration,
        gold_per_min=gpm,
        xp_per_min=xpm,
        last_hits=last_hits,
    )


def build_history(results: str, *, hero_id: int = 1, start: int = BASE_TIME, **kwargs) -> list[MatchRecord]:
    """Construit une liste du plus récent au plus ancien depuis "WWL...".

    Le premier caractère est le match le plus récent.
    """
    return [
        build_match(r == "W", hero_id=hero_id, start_time=start - i * 3600, **kwargs)
        for i, r in enumerate(results)
    ]


@pytest.fixture
def make_match():
    return build_match


@pytest.fixture
def make_history():
    return build_history
