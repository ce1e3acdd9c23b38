"""Configuration centralisée des calculs d'analyse (séries, tendance, tilt, PEI).

Ce module définit tous les seuils utilisés par les calculateurs pour assurer
la cohérence dans toute l'application. Chaque calculateur accepte une config
explicite (argument ``config``) : les valeurs ci-dessous ne sont que les
valeurs par défaut.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from src.models import MasteryRequirements


# =============================================================================
# Types énumérés (ensembles fermés)
# =============================================================================

StreakType = Literal["none", "win", "loss"]
RecentForm = Literal["unknown", "no_data", "excellent", "good", "average", "poor", "terrible"]
Momentum = Literal["improving", "declining", "neutral"]
OverallMomentum = Literal["positive", "negative", "neutral"]
Trend = Literal["insufficient_data", "stable", "improving", "declining"]
Direction = Literal["none", "up", "down"]
Confidence = Literal["low", "medium", "high"]
TiltStatus = Literal["flow", "good", "neutral", "warning", "danger", "stable"]
Grade = Literal["S+", "S", "A+", "A", "B+", "B", "C+", "C", "D", "F"]
IndexTrend = Literal["improving", "declining", "stable"]


# =============================================================================
# Séries par héros
# =============================================================================

@dataclass(frozen=True)
class StreakConfig:
    """Seuils de l'analyse de série par héros."""

    lookback_games: int = 10
    min_streak: int = 3

    # Forme récente : (seuil de win rate en %, label), évalués dans l'ordre.
    form_thresholds: tuple[tuple[float, RecentForm], ...] = (
        (70.0, "excellent"),
        (60.0, "good"),
        (40.0, "average"),
        (30.0, "poor"),
    )
    form_floor: RecentForm = "terrible"

    momentum_min_games: int = 4
    momentum_threshold: float = 0.2
    """Écart de win rate (fraction) entre les deux moitiés de la fenêtre."""

    sort_before_slice: bool = False
    """False = on découpe la fenêtre PUIS on trie (comportement historique)."""


# =============================================================================
# Tendance par héros
# =============================================================================

@dataclass(frozen=True)
class TrendConfig:
    """Seuils de l'analyse de tendance (fenêtre récente vs fenêtre précédente)."""

    window_size: int = 5

    # (écart absolu minimum, force, confiance), évalués dans l'ordre.
    strength_bands: tuple[tuple[float, int, Confidence], ...] = (
        (0.4, 3, "high"),
        (0.2, 2, "medium"),
        (0.1, 1, "low"),
    )
    default_confidence: Confidence = "medium"
    direction_threshold: float = 0.1
    sort_before_slice: bool = False


# =============================================================================
# Tilt-o-mètre
# =============================================================================

@dataclass(frozen=True)
class TiltConfig:
    """Paramètres du score de tilt pondéré par la récence."""

    window: int = 10
    min_matches: int = 3
    weight_step: float = 0.1
    base_score: float = 50.0

    kda_high: float = 2.0
    kda_low: float = 1.0
    gpm_high: float = 400.0
    gpm_low: float = 300.0
    xpm_high: float = 500.0
    xpm_low: float = 400.0

    kda_factor: float = 10.0
    farm_factor: float = 8.0
    experience_factor: float = 7.0
    result_factor: float = 15.0

    # (seuil minimum, statut, message), évalués dans l'ordre.
    status_bands: tuple[tuple[float, TiltStatus, str], ...] = (
        (80.0, "flow", "IN THE ZONE! Keep playing!"),
        (60.0, "good", "Playing well, maintain focus"),
        (40.0, "neutral", "Stable performance"),
        (20.0, "warning", "Consider taking a break"),
    )
    floor_status: TiltStatus = "danger"
    floor_message: str = "STOP PLAYING NOW!"

    insufficient_status: TiltStatus = "stable"
    insufficient_message: str = "Not enough data"


# =============================================================================
# Performance Efficiency Index (PEI)
# =============================================================================

@dataclass(frozen=True)
class PerformanceIndexConfig:
    """Paramètres de l'indice d'efficacité (PEI)."""

    window: int = 20
    min_matches: int = 5
    half_window: int = 10

    kda_cap: float = 10.0
    gpm_cap: float = 1000.0
    xpm_cap: float = 1000.0

    # Référence de normalisation et poids de chaque facteur.
    kda_reference: float = 4.0
    gpm_reference: float = 600.0
    xpm_reference: float = 700.0
    kda_weight: float = 25.0
    gpm_weight: float = 20.0
    xpm_weight: float = 15.0
    win_rate_weight: float = 40.0

    grade_thresholds: tuple[tuple[int, Grade], ...] = (
        (90, "S+"),
        (85, "S"),
        (80, "A+"),
        (75, "A"),
        (70, "B+"),
        (65, "B"),
        (60, "C+"),
        (55, "C"),
        (50, "D"),
    )
    floor_grade: Grade = "F"

    trend_margin: int = 1
    """Écart de victoires au-delà duquel la tendance n'est plus stable."""

    default_score: int = 50
    default_grade: Grade = "C"


# =============================================================================
# Session du jour
# =============================================================================

@dataclass(frozen=True)
class SessionConfig:
    """Paramètres du résumé de la session du jour."""

    mmr_per_game: int = 25
    behavior_update_games: int = 15


# =============================================================================
# Maîtrise des héros
# =============================================================================

@dataclass(frozen=True)
class MasteryTier:
    """Palier de maîtrise : niveau, libellé et seuils requis."""

    key: str
    level: int
    name: str
    emoji: str
    color: str
    requirements: MasteryRequirements


@dataclass(frozen=True)
class MasteryConfig:
    """Paliers de maîtrise, du plus bas au plus haut."""

    tiers: tuple[MasteryTier, ...] = (
        MasteryTier("bronze", 1, "Bronze", "🥉", "#CD7F32", MasteryRequirements(5, 40.0, 1.0)),
        MasteryTier("silver", 2, "Silver", "🥈", "#C0C0C0", MasteryRequirements(10, 50.0, 1.5)),
        MasteryTier("gold", 3, "Gold", "🥇", "#FFD700", MasteryRequirements(15, 55.0, 2.0)),
        MasteryTier("platinum", 4, "Platinum", "⭐", "#E5E4E2", MasteryRequirements(25, 60.0, 2.5)),
        MasteryTier("diamond", 5, "Diamond", "💎", "#B9F2FF", MasteryRequirements(40, 65.0, 3.0)),
    )

    def tier(self, key: str) -> MasteryTier:
        """Palier par clé ; clé inconnue -> premier palier."""
        for t in self.tiers:
            if t.key == key:
                return t
        return self.tiers[0]


# =============================================================================
# Regroupement
# =============================================================================

@dataclass(frozen=True)
class AnalyticsConfig:
    """Regroupe toutes les configs (utilisé par le snapshot)."""

    streak: StreakConfig = field(default_factory=StreakConfig)
    trend: TrendConfig = field(default_factory=TrendConfig)
    tilt: TiltConfig = field(default_factory=TiltConfig)
    performance_index: PerformanceIndexConfig = field(default_factory=PerformanceIndexConfig)
    session: SessionConfig = field(default_factory=SessionConfig)


STREAK_CONFIG = StreakConfig()
TREND_CONFIG = TrendConfig()
TILT_CONFIG = TiltConfig()
PEI_CONFIG = PerformanceIndexConfig()
SESSION_CONFIG = SessionConfig()
MASTERY_CONFIG = MasteryConfig()
ANALYTICS_CONFIG = AnalyticsConfig()
