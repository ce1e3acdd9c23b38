"""Chargement des exports JSON (matchs récents, stats par héros, noms de héros)."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

from src.data.parsers import coerce_hero_id, parse_hero_stats, parse_match_records
from src.models import HeroStatRecord, MatchRecord

logger = logging.getLogger(__name__)


class DataLoadError(ValueError):
    """Fichier d'export illisible ou de forme inattendue."""


def _read_json(path: str) -> Any:
    if not path or not os.path.exists(path):
        raise DataLoadError(f"Fichier introuvable: {path!r}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise DataLoadError(f"JSON invalide dans {path!r}: {e}") from e
    except OSError as e:
        raise DataLoadError(f"Lecture impossible de {path!r}: {e}") from e


def _as_list(payload: Any, path: str, *wrapper_keys: str) -> list:
    """Accepte une liste brute ou un objet qui l'enveloppe (ex: {"matches": [...]})."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for k in wrapper_keys:
            if isinstance(payload.get(k), list):
                return payload[k]
    raise DataLoadError(f"Liste attendue dans {path!r}, reçu {type(payload).__name__}")


def load_matches_json(path: str) -> list[MatchRecord]:
    """Charge un export de matchs récents (réponse /players/{id}/matches).

    Raises:
        DataLoadError: Fichier absent, JSON invalide ou forme inattendue.
    """
    payload = _read_json(path)
    matches = parse_match_records(_as_list(payload, path, "matches", "recentMatches"))
    logger.debug("%d match(s) chargé(s) depuis %s", len(matches), path)
    return matches


def load_hero_names(path: str) -> Dict[Any, str]:
    """Charge la table des héros (id -> nom lisible).

    Formats acceptés :
    - liste d'objets {"id": 1, "localized_name": "Anti-Mage"} (réponse /heroes) ;
    - dict {"1": "Anti-Mage"} ;
    - dict {"1": {"localized_name": "Anti-Mage"}} (réponse /constants/heroes).
    """
    payload = _read_json(path)
    names: Dict[Any, str] = {}

    if isinstance(payload, list):
        items = [(h.get("id"), h) for h in payload if isinstance(h, dict)]
    elif isinstance(payload, dict):
        items = list(payload.items())
    else:
        raise DataLoadError(f"Table de héros inattendue dans {path!r}")

    for raw_id, value in items:
        hero_id = coerce_hero_id(raw_id)
        if hero_id is None:
            continue
        if isinstance(value, dict):
            name = value.get("localized_name") or value.get("name")
        else:
            name = value
        if isinstance(name, str) and name.strip():
            names[hero_id] = name.strip()
    return names


def load_hero_stats_json(path: str, heroes_path: Optional[str] = None) -> list[HeroStatRecord]:
    """Charge un export de stats par héros (réponse /players/{id}/heroes).

    Args:
        path: Fichier des stats par héros.
        heroes_path: Table optionnelle des noms de héros.

    Raises:
        DataLoadError: Fichier absent, JSON invalide ou forme inattendue.
    """
    payload = _read_json(path)
    hero_names = load_hero_names(heroes_path) if heroes_path else None
    heroes = parse_hero_stats(_as_list(payload, path, "heroes", "heroStats"), hero_names)
    logger.debug("%d héros chargé(s) depuis %s", len(heroes), path)
    return heroes
