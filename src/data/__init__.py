"""Frontière de données : parsing des réponses API et chargement des exports."""

from src.data.parsers import (
    coerce_number,
    coerce_hero_id,
    parse_match_record,
    parse_match_records,
    parse_hero_stat,
    parse_hero_stats,
    matches_to_frame,
    matches_from_frame,
)
from src.data.loaders import (
    DataLoadError,
    load_matches_json,
    load_hero_stats_json,
    load_hero_names,
)

__all__ = [
    "coerce_number",
    "coerce_hero_id",
    "parse_match_record",
    "parse_match_records",
    "parse_hero_stat",
    "parse_hero_stats",
    "matches_to_frame",
    "matches_from_frame",
    "DataLoadError",
    "load_matches_json",
    "load_hero_stats_json",
    "load_hero_names",
]
