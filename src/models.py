"""Modèles de données (dataclasses) du projet."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from src.config import RADIANT_SLOT_LIMIT


# =============================================================================
# Entrées (fournies par la couche de données)
# =============================================================================

@dataclass(frozen=True)
class MatchRecord:
    """Représente un match terminé, du point de vue du joueur.

    Attributes:
        match_id: Identifiant unique (opaque) du match.
        start_time: Début du match en secondes depuis l'epoch.
        radiant_win: True si le camp Radiant a gagné (None si inconnu).
        player_slot: Slot du joueur (< 128 = Radiant). None = slot 0.
        hero_id: Identifiant du héros joué.
        kills: Nombre de frags.
        deaths: Nombre de morts.
        assists: Nombre d'assistances.
        duration: Durée du match en secondes.
        gold_per_min: Or par minute.
        xp_per_min: Expérience par minute.
        last_hits: Derniers coups (optionnel).
        game_mode: Code du mode de jeu (optionnel).
        party_size: Taille du groupe (optionnel).
    """
    match_id: Any
    start_time: int
    radiant_win: Optional[bool]
    player_slot: Optional[int]
    hero_id: Any
    kills: int = 0
    deaths: int = 0
    assists: int = 0
    duration: float = 0.0
    gold_per_min: float = 0.0
    xp_per_min: float = 0.0

    last_hits: Optional[int] = None
    game_mode: Optional[int] = None
    party_size: Optional[int] = None

    @property
    def kda(self) -> float:
        """Ratio (K + A) / max(D, 1)."""
        return (self.kills + self.assists) / max(self.deaths, 1)

    @property
    def is_radiant(self) -> bool:
        """True si le joueur était côté Radiant."""
        return (self.player_slot or 0) < RADIANT_SLOT_LIMIT


@dataclass(frozen=True)
class HeroStatRecord:
    """Statistiques agrégées d'un héros (cumul sur toutes les parties)."""
    hero_id: Any
    games: int = 0
    win: int = 0
    name: Optional[str] = None
    sum_kills: float = 0.0
    sum_deaths: float = 0.0
    sum_assists: float = 0.0
    sum_gold_per_min: float = 0.0
    sum_xp_per_min: float = 0.0
    sum_last_hits: float = 0.0

    @property
    def losses(self) -> int:
        return max(0, self.games - self.win)

    @property
    def win_rate(self) -> Optional[float]:
        """Win rate en pourcentage, ou None si aucune partie."""
        if self.games <= 0:
            return None
        return self.win / self.games * 100.0

    @property
    def display_name(self) -> str:
        return self.name or f"Hero {self.hero_id}"


# =============================================================================
# Résultats (immutables, sans référence aux entrées)
# =============================================================================

class _AsDictMixin:
    def as_dict(self) -> Dict[str, Any]:
        """Retourne le résultat sous forme de dictionnaire (récursif)."""
        return asdict(self)  # type: ignore[call-overload]


@dataclass(frozen=True)
class WinLossRecord(_AsDictMixin):
    """Bilan victoires / défaites."""
    wins: int = 0
    losses: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.losses


@dataclass(frozen=True)
class StreakResult(_AsDictMixin):
    """Série en cours, forme récente et momentum d'un héros."""
    current_streak: int
    streak_type: str
    recent_form: str
    win_loss_record: WinLossRecord
    momentum: str
    win_rate: int = 0
    games_analyzed: int = 0


@dataclass(frozen=True)
class HeroStreakEntry(_AsDictMixin):
    """Entrée de la liste des héros en série (chaude ou froide)."""
    hero_id: Any
    hero_name: str
    streak: int
    recent_form: str
    win_rate: int
    momentum: str


@dataclass(frozen=True)
class MomentumSummary(_AsDictMixin):
    """Indicateur de momentum global pour le bandeau du dashboard."""
    hot_streak: Optional[HeroStreakEntry]
    cold_spell: Optional[HeroStreakEntry]
    total_hot_heroes: int
    total_cold_heroes: int
    momentum: str


@dataclass(frozen=True)
class TrendResult(_AsDictMixin):
    """Tendance d'un héros (fenêtre récente vs fenêtre précédente).

    Les taux sont des pourcentages entiers ; ``improvement`` est l'écart en
    points. Ils valent None dans les variantes par défaut.
    """
    trend: str
    direction: str
    strength: int
    confidence: str
    recent_win_rate: Optional[int] = None
    older_win_rate: Optional[int] = None
    improvement: Optional[int] = None


@dataclass(frozen=True)
class TiltScore(_AsDictMixin):
    """Score de tilt 0-100 avec statut et conseil."""
    level: int
    status: str
    message: str


@dataclass(frozen=True)
class PerformanceIndex(_AsDictMixin):
    """Performance Efficiency Index : score 0-100, note et tendance."""
    score: int
    grade: str
    trend: str


@dataclass(frozen=True)
class MasteryRequirements(_AsDictMixin):
    """Seuils d'un palier de maîtrise (tous requis)."""
    games: int
    win_rate: float
    kda: float


@dataclass(frozen=True)
class HeroMastery(_AsDictMixin):
    """Palier de maîtrise d'un héros et progression vers le suivant.

    ``next_tier`` vaut None au palier maximum ; ``progress`` (0-100) est
    celle du critère le plus en retard.
    """
    hero_id: Any
    hero_name: str
    tier: str
    level: int
    progress: int
    next_tier: Optional[str]
    next_requirements: Optional[MasteryRequirements]
    meets_requirements: bool
    games: int = 0
    win_rate: float = 0.0
    kda: float = 0.0


@dataclass(frozen=True)
class MasterySummary(_AsDictMixin):
    """Bilan de maîtrise sur l'ensemble des héros."""
    total_heroes: int = 0
    average_level: float = 0.0
    tier_distribution: Dict[str, int] = field(default_factory=dict)
    top_tier: str = "bronze"
    mastery_score: int = 0
    max_level: int = 0


@dataclass(frozen=True)
class SessionSummary(_AsDictMixin):
    """Résumé de la session du jour."""
    wins: int = 0
    losses: int = 0
    mmr_change: int = 0
    current_streak: int = 0
    streak_type: str = "none"
    games_until_behavior_update: int = 15

    @property
    def games_played(self) -> int:
        return self.wins + self.losses

    @property
    def win_rate(self) -> Optional[float]:
        if self.games_played <= 0:
            return None
        return self.wins / self.games_played * 100.0


@dataclass(frozen=True)
class CoreMetric(_AsDictMixin):
    """Métrique clé affichée en tête du dashboard."""
    label: str
    value: float
    trend: str
    suffix: str = ""


@dataclass(frozen=True)
class AnalyticsSnapshot(_AsDictMixin):
    """Ensemble des signaux dérivés pour un rafraîchissement du dashboard."""
    tilt: TiltScore
    performance_index: PerformanceIndex
    momentum: MomentumSummary
    session: SessionSummary
    matches_analyzed: int
