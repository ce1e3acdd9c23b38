"""Maîtrise des héros : palier (Bronze ... Diamond) et progression.

Calculée sur les stats cumulées par héros (parties, victoires, sommes
K/D/A). Un héros est au palier le plus haut dont il remplit les trois
seuils ; s'il n'en remplit aucun, il reste au premier palier.
"""

from __future__ import annotations

from typing import Optional, Sequence

from src.analysis.analytics_config import MASTERY_CONFIG, MasteryConfig
from src.analysis.numeric import round_half_up, round_to
from src.models import HeroMastery, HeroStatRecord, MasteryRequirements, MasterySummary


def _meets(req: MasteryRequirements, games: int, win_rate: float, kda: float) -> bool:
    return games >= req.games and win_rate >= req.win_rate and kda >= req.kda


def calculate_hero_mastery(
    hero: Optional[HeroStatRecord],
    *,
    config: MasteryConfig = MASTERY_CONFIG,
) -> HeroMastery:
    """Calcule le palier de maîtrise d'un héros.

    Args:
        hero: Stats cumulées du héros.
        config: Paliers et seuils.

    Returns:
        HeroMastery. Aucun match joué -> niveau 0, progression 0, prochain
        palier = premier palier. Palier maximum -> progression 100,
        ``next_tier=None``.
    """
    first = config.tiers[0]
    hero_id = getattr(hero, "hero_id", None)
    hero_name = hero.display_name if hero is not None else f"Hero {hero_id}"
    games = getattr(hero, "games", 0) or 0

    if games <= 0:
        return HeroMastery(
            hero_id=hero_id,
            hero_name=hero_name,
            tier=first.key,
            level=0,
            progress=0,
            next_tier=first.key,
            next_requirements=first.requirements,
            meets_requirements=False,
        )

    win_rate = hero.win / games * 100.0
    kda = (hero.sum_kills + hero.sum_assists) / max(hero.sum_deaths, 1)

    current = 0
    for index in range(len(config.tiers) - 1, -1, -1):
        if _meets(config.tiers[index].requirements, games, win_rate, kda):
            current = index
            break

    tier = config.tiers[current]
    if current == len(config.tiers) - 1:
        progress = 100.0
        next_tier = None
        next_requirements = None
        meets = True
    else:
        next_data = config.tiers[current + 1]
        req = next_data.requirements
        # Le critère le plus en retard fixe la progression.
        progress = min(
            min(100.0, games / req.games * 100.0),
            min(100.0, win_rate / req.win_rate * 100.0),
            min(100.0, kda / req.kda * 100.0),
        )
        next_tier = next_data.key
        next_requirements = req
        meets = _meets(req, games, win_rate, kda)

    return HeroMastery(
        hero_id=hero_id,
        hero_name=hero_name,
        tier=tier.key,
        level=tier.level,
        progress=round_half_up(progress),
        next_tier=next_tier,
        next_requirements=next_requirements,
        meets_requirements=meets,
        games=games,
        win_rate=round_to(win_rate, 1),
        kda=round_to(kda, 2),
    )


def compute_hero_masteries(
    hero_stats: Sequence[HeroStatRecord],
    *,
    config: MasteryConfig = MASTERY_CONFIG,
) -> list[HeroMastery]:
    """Maîtrise de chaque héros, dans l'ordre fourni ([] si entrée invalide)."""
    if not isinstance(hero_stats, (list, tuple)):
        return []
    return [calculate_hero_mastery(hero, config=config) for hero in hero_stats]


def sort_heroes_by_mastery(masteries: Sequence[HeroMastery]) -> list[HeroMastery]:
    """Classe les héros : niveau, puis progression, puis nombre de parties."""
    return sorted(masteries, key=lambda m: (-m.level, -m.progress, -m.games))


def calculate_mastery_summary(
    masteries: Sequence[HeroMastery],
    *,
    config: MasteryConfig = MASTERY_CONFIG,
) -> MasterySummary:
    """Bilan global : répartition par palier, niveau moyen et score de maîtrise.

    Le score additionne le niveau du PALIER de chaque héros : un héros sans
    partie (niveau 0, palier bronze) compte comme un bronze.
    """
    if not masteries:
        return MasterySummary()

    distribution: dict[str, int] = {}
    total_level = 0
    max_level = 0
    top_tier = config.tiers[0].key
    for m in masteries:
        distribution[m.tier] = distribution.get(m.tier, 0) + 1
        total_level += m.level
        if m.level > max_level:
            max_level = m.level
            top_tier = m.tier

    score = sum(config.tier(key).level * count for key, count in distribution.items())

    return MasterySummary(
        total_heroes=len(masteries),
        average_level=round_to(total_level / len(masteries), 2),
        tier_distribution=distribution,
        top_tier=top_tier,
        mastery_score=score,
        max_level=max_level,
    )
