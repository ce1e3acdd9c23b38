"""Résolution du résultat (victoire/défaite) d'un match."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from src.config import RADIANT_SLOT_LIMIT
from src.models import MatchRecord


def is_win(match: MatchRecord) -> bool:
    """Retourne True si le joueur a gagné le match.

    Le résultat n'est jamais stocké : il est dérivé de ``radiant_win`` et du
    camp du joueur (``player_slot`` < 128 = Radiant). Un slot absent compte
    comme le slot 0 ; un ``radiant_win`` absent n'est jamais une victoire.
    """
    radiant_win = getattr(match, "radiant_win", None)
    if radiant_win is None:
        return False
    player_slot = getattr(match, "player_slot", None) or 0
    return bool(radiant_win) == (player_slot < RADIANT_SLOT_LIMIT)


def count_wins(matches: Sequence[MatchRecord]) -> int:
    """Nombre de victoires dans une séquence de matchs."""
    return sum(1 for m in matches if is_win(m))


def win_fraction(matches: Sequence[MatchRecord]) -> float:
    """Part de victoires (0-1), 0 pour une séquence vide."""
    if not matches:
        return 0.0
    return count_wins(matches) / len(matches)


def as_match_list(matches: Any) -> Optional[list[MatchRecord]]:
    """Valide la forme de l'entrée à la frontière du moteur.

    Returns:
        Une copie sous forme de liste, ou None si l'entrée n'est pas une
        séquence de matchs (None, dict, chaîne, ...).
    """
    if not isinstance(matches, (list, tuple)):
        return None
    return list(matches)


def sort_most_recent_first(matches: Sequence[MatchRecord]) -> list[MatchRecord]:
    """Trie les matchs du plus récent au plus ancien (tri stable)."""
    return sorted(matches, key=lambda m: m.start_time or 0, reverse=True)
