"""Fonctions de parsing des réponses de l'API de stats (format OpenDota).

Les enregistrements mal formés sont ignorés (avec un warning) : le moteur
d'analyse ne reçoit que des MatchRecord / HeroStatRecord valides.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, fields
from typing import Any, Iterable, Mapping, Optional

import pandas as pd

from src.models import HeroStatRecord, MatchRecord

logger = logging.getLogger(__name__)


# Clés acceptées pour chaque champ : snake_case (API) puis camelCase.
_MATCH_KEYS: dict[str, tuple[str, ...]] = {
    "match_id": ("match_id", "matchId", "id"),
    "start_time": ("start_time", "startTime"),
    "radiant_win": ("radiant_win", "radiantWin"),
    "player_slot": ("player_slot", "playerSlot"),
    "hero_id": ("hero_id", "heroId"),
    "kills": ("kills",),
    "deaths": ("deaths",),
    "assists": ("assists",),
    "duration": ("duration",),
    "gold_per_min": ("gold_per_min", "goldPerMin"),
    "xp_per_min": ("xp_per_min", "xpPerMin"),
    "last_hits": ("last_hits", "lastHits"),
    "game_mode": ("game_mode", "gameMode"),
    "party_size": ("party_size", "partySize"),
}

_HERO_KEYS: dict[str, tuple[str, ...]] = {
    "hero_id": ("hero_id", "heroId", "id"),
    "games": ("games",),
    "win": ("win", "wins"),
    "name": ("name", "localized_name", "heroName"),
    "sum_kills": ("sum_kills",),
    "sum_deaths": ("sum_deaths",),
    "sum_assists": ("sum_assists",),
    "sum_gold_per_min": ("sum_gold_per_min",),
    "sum_xp_per_min": ("sum_xp_per_min",),
    "sum_last_hits": ("sum_last_hits",),
}


def _pick(obj: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for k in keys:
        if k in obj:
            v = obj.get(k)
            if v is None:
                continue
            if isinstance(v, float) and math.isnan(v):
                continue
            return v
    return None


def coerce_number(v: Any) -> Optional[float]:
    """Convertit une valeur en float de manière robuste.

    Gère les nombres directs, les chaînes numériques et les NaN (pandas).

    Returns:
        La valeur en float, ou None si la conversion échoue.
    """
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, (int, float)):
        f = float(v)
        return None if math.isnan(f) else f
    if isinstance(v, str):
        try:
            f = float(v.strip())
        except ValueError:
            return None
        return None if math.isnan(f) else f
    try:
        # Types numpy (int64, float64...)
        f = float(v)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(f) else f


def _coerce_count(v: Any) -> int:
    n = coerce_number(v)
    if n is None or n < 0:
        return 0
    return int(n)


def _coerce_rate(v: Any) -> float:
    n = coerce_number(v)
    if n is None or n < 0:
        return 0.0
    return n


def _coerce_optional_int(v: Any) -> Optional[int]:
    n = coerce_number(v)
    return int(n) if n is not None else None


def _coerce_bool(v: Any) -> Optional[bool]:
    if v is None:
        return None
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)) and not (isinstance(v, float) and math.isnan(v)):
        return bool(v)
    if isinstance(v, str):
        s = v.strip().lower()
        if s in ("true", "1", "yes"):
            return True
        if s in ("false", "0", "no"):
            return False
        return None
    try:
        # numpy.bool_
        return bool(v)
    except (TypeError, ValueError):
        return None


def coerce_hero_id(v: Any) -> Any:
    """Normalise un identifiant de héros ("14" -> 14) pour les comparaisons."""
    if v is None or isinstance(v, bool):
        return None
    n = coerce_number(v)
    if n is not None and float(n).is_integer():
        return int(n)
    return v


def parse_match_record(obj: Any) -> Optional[MatchRecord]:
    """Construit un MatchRecord depuis un dict de l'API.

    Args:
        obj: Dict au format OpenDota (snake_case) ou camelCase.

    Returns:
        MatchRecord, ou None si l'objet n'est pas exploitable (pas un dict,
        match_id / hero_id / start_time manquants).
    """
    if not isinstance(obj, Mapping):
        return None

    match_id = _pick(obj, _MATCH_KEYS["match_id"])
    hero_id = coerce_hero_id(_pick(obj, _MATCH_KEYS["hero_id"]))
    start_time = coerce_number(_pick(obj, _MATCH_KEYS["start_time"]))
    if match_id is None or hero_id is None or start_time is None:
        return None

    return MatchRecord(
        match_id=match_id,
        start_time=int(start_time),
        radiant_win=_coerce_bool(_pick(obj, _MATCH_KEYS["radiant_win"])),
        player_slot=_coerce_optional_int(_pick(obj, _MATCH_KEYS["player_slot"])),
        hero_id=hero_id,
        kills=_coerce_count(_pick(obj, _MATCH_KEYS["kills"])),
        deaths=_coerce_count(_pick(obj, _MATCH_KEYS["deaths"])),
        assists=_coerce_count(_pick(obj, _MATCH_KEYS["assists"])),
        duration=_coerce_rate(_pick(obj, _MATCH_KEYS["duration"])),
        gold_per_min=_coerce_rate(_pick(obj, _MATCH_KEYS["gold_per_min"])),
        xp_per_min=_coerce_rate(_pick(obj, _MATCH_KEYS["xp_per_min"])),
        last_hits=_coerce_optional_int(_pick(obj, _MATCH_KEYS["last_hits"])),
        game_mode=_coerce_optional_int(_pick(obj, _MATCH_KEYS["game_mode"])),
        party_size=_coerce_optional_int(_pick(obj, _MATCH_KEYS["party_size"])),
    )


def parse_match_records(objs: Iterable[Any]) -> list[MatchRecord]:
    """Parse une liste de matchs en ignorant (et en loggant) les entrées invalides.

    Les doublons de match_id sont écartés (première occurrence conservée).
    """
    out: list[MatchRecord] = []
    seen: set[Any] = set()
    skipped = 0
    for i, obj in enumerate(objs or []):
        rec = parse_match_record(obj)
        if rec is None:
            skipped += 1
            logger.warning("Match #%d ignoré : enregistrement mal formé", i)
            continue
        if rec.match_id in seen:
            logger.debug("Match %s en double ignoré", rec.match_id)
            continue
        seen.add(rec.match_id)
        out.append(rec)
    if skipped:
        logger.warning("%d match(s) ignoré(s) sur %d", skipped, skipped + len(out))
    return out


def parse_hero_stat(obj: Any, hero_names: Mapping[Any, str] | None = None) -> Optional[HeroStatRecord]:
    """Construit un HeroStatRecord depuis un dict de l'API.

    Args:
        obj: Dict avec hero_id, games, win et les compteurs sum_*.
        hero_names: Table optionnelle hero_id -> nom lisible.

    Returns:
        HeroStatRecord, ou None si hero_id est absent.
    """
    if not isinstance(obj, Mapping):
        return None
    hero_id = coerce_hero_id(_pick(obj, _HERO_KEYS["hero_id"]))
    if hero_id is None:
        return None

    name = _pick(obj, _HERO_KEYS["name"])
    if not name and hero_names:
        name = hero_names.get(hero_id)
    name = str(name).strip() if name else None

    return HeroStatRecord(
        hero_id=hero_id,
        games=_coerce_count(_pick(obj, _HERO_KEYS["games"])),
        win=_coerce_count(_pick(obj, _HERO_KEYS["win"])),
        name=name or None,
        sum_kills=_coerce_rate(_pick(obj, _HERO_KEYS["sum_kills"])),
        sum_deaths=_coerce_rate(_pick(obj, _HERO_KEYS["sum_deaths"])),
        sum_assists=_coerce_rate(_pick(obj, _HERO_KEYS["sum_assists"])),
        sum_gold_per_min=_coerce_rate(_pick(obj, _HERO_KEYS["sum_gold_per_min"])),
        sum_xp_per_min=_coerce_rate(_pick(obj, _HERO_KEYS["sum_xp_per_min"])),
        sum_last_hits=_coerce_rate(_pick(obj, _HERO_KEYS["sum_last_hits"])),
    )


def parse_hero_stats(
    objs: Iterable[Any],
    hero_names: Mapping[Any, str] | None = None,
) -> list[HeroStatRecord]:
    """Parse une liste de stats par héros en ignorant les entrées invalides."""
    out: list[HeroStatRecord] = []
    for i, obj in enumerate(objs or []):
        rec = parse_hero_stat(obj, hero_names)
        if rec is None:
            logger.warning("Stat héros #%d ignorée : hero_id manquant", i)
            continue
        out.append(rec)
    return out


# =============================================================================
# Conversion DataFrame <-> MatchRecord
# =============================================================================

MATCH_COLUMNS = [f.name for f in fields(MatchRecord)]


def matches_to_frame(matches: Iterable[MatchRecord]) -> pd.DataFrame:
    """Convertit des MatchRecord en DataFrame (une ligne par match).

    Ajoute les colonnes dérivées ``win`` (bool) et ``kda``.
    """
    from src.analysis.outcome import is_win

    matches = list(matches or [])
    rows = [asdict(m) for m in matches]
    if not rows:
        return pd.DataFrame(columns=MATCH_COLUMNS + ["win", "kda"])

    df = pd.DataFrame(rows, columns=MATCH_COLUMNS)
    df["win"] = [is_win(m) for m in matches]
    df["kda"] = (df["kills"] + df["assists"]) / df["deaths"].clip(lower=1)
    return df


def matches_from_frame(df: pd.DataFrame) -> list[MatchRecord]:
    """Reconstruit des MatchRecord depuis un DataFrame (colonnes snake_case ou camelCase)."""
    if df is None or df.empty:
        return []
    return parse_match_records(df.to_dict(orient="records"))
