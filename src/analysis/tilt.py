"""Tilt-o-mètre : score 0-100 de la qualité de jeu à court terme.

Chaque match récent vote +1 / 0 / -1 sur quatre axes (KDA, farm, expérience,
résultat). Les votes sont pondérés par la récence : poids 1.0 pour le dernier
match, puis -0.1 par match (0.1 pour le dixième, jamais ramené à zéro).
"""

from __future__ import annotations

from typing import Sequence

from src.analysis.analytics_config import TILT_CONFIG, TiltConfig
from src.analysis.numeric import clamp, round_half_up
from src.analysis.outcome import as_match_list, is_win
from src.models import MatchRecord, TiltScore


def _vote(value: float, high: float, low: float) -> int:
    if value > high:
        return 1
    if value < low:
        return -1
    return 0


def _status(level: float, config: TiltConfig) -> tuple[str, str]:
    for threshold, status, message in config.status_bands:
        if level >= threshold:
            return status, message
    return config.floor_status, config.floor_message


def compute_tilt_components(
    matches: Sequence[MatchRecord],
    config: TiltConfig = TILT_CONFIG,
) -> dict[str, float]:
    """Calcule les totaux pondérés par axe (kda, farm, experience, results).

    ``matches`` est pris tel quel : l'index 0 est le match le plus récent.
    """
    totals = {"kda": 0.0, "farm": 0.0, "experience": 0.0, "results": 0.0}
    for index, match in enumerate(matches[: config.window]):
        weight = 1.0 - index * config.weight_step

        kda = (match.kills + match.assists) / max(match.deaths, 1)
        totals["kda"] += _vote(kda, config.kda_high, config.kda_low) * weight
        totals["farm"] += _vote(match.gold_per_min, config.gpm_high, config.gpm_low) * weight
        totals["experience"] += _vote(match.xp_per_min, config.xpm_high, config.xpm_low) * weight
        totals["results"] += (1 if is_win(match) else -1) * weight
    return totals


def calculate_tilt_score(
    matches: Sequence[MatchRecord],
    *,
    config: TiltConfig = TILT_CONFIG,
) -> TiltScore:
    """Calcule le score de tilt sur les 10 derniers matchs.

    Args:
        matches: Matchs récents, du plus récent au plus ancien.
        config: Seuils des votes, facteurs et bandes de statut.

    Returns:
        TiltScore. Moins de 3 matchs (ou entrée invalide) ->
        ``level=0, status="stable", message="Not enough data"``.
    """
    match_list = as_match_list(matches)
    if match_list is None or len(match_list) < config.min_matches:
        return TiltScore(
            level=0,
            status=config.insufficient_status,
            message=config.insufficient_message,
        )

    totals = compute_tilt_components(match_list, config)
    raw = (
        config.base_score
        + totals["kda"] * config.kda_factor
        + totals["farm"] * config.farm_factor
        + totals["experience"] * config.experience_factor
        + totals["results"] * config.result_factor
    )
    tilt_score = clamp(raw, 0.0, 100.0)
    status, message = _status(tilt_score, config)

    return TiltScore(level=round_half_up(tilt_score), status=status, message=message)
