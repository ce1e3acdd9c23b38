"""Module d'analyse des données (moteur de séries, tendance, tilt et PEI)."""

from src.analysis.outcome import (
    is_win,
    count_wins,
    win_fraction,
    sort_most_recent_first,
)
from src.analysis.streaks import (
    select_hero_window,
    analyze_hero_streak,
    find_hot_streak_heroes,
    find_cold_spell_heroes,
    get_overall_momentum,
)
from src.analysis.trends import analyze_trend
from src.analysis.tilt import calculate_tilt_score, compute_tilt_components
from src.analysis.performance_index import (
    calculate_performance_index,
    compute_performance_components,
    grade_for_score,
)
from src.analysis.session import calculate_today_session
from src.analysis.metrics import compute_core_metrics, compute_hero_breakdown
from src.analysis.mastery import (
    calculate_hero_mastery,
    compute_hero_masteries,
    sort_heroes_by_mastery,
    calculate_mastery_summary,
)
from src.analysis.snapshot import build_analytics_snapshot
from src.analysis.analytics_config import (
    ANALYTICS_CONFIG,
    AnalyticsConfig,
    MASTERY_CONFIG,
    MasteryConfig,
    PEI_CONFIG,
    PerformanceIndexConfig,
    SESSION_CONFIG,
    SessionConfig,
    STREAK_CONFIG,
    StreakConfig,
    TILT_CONFIG,
    TiltConfig,
    TREND_CONFIG,
    TrendConfig,
)

__all__ = [
    "is_win",
    "count_wins",
    "win_fraction",
    "sort_most_recent_first",
    "select_hero_window",
    "analyze_hero_streak",
    "find_hot_streak_heroes",
    "find_cold_spell_heroes",
    "get_overall_momentum",
    "analyze_trend",
    "calculate_tilt_score",
    "compute_tilt_components",
    "calculate_performance_index",
    "compute_performance_components",
    "grade_for_score",
    "calculate_today_session",
    "compute_core_metrics",
    "compute_hero_breakdown",
    "calculate_hero_mastery",
    "compute_hero_masteries",
    "sort_heroes_by_mastery",
    "calculate_mastery_summary",
    "build_analytics_snapshot",
    "ANALYTICS_CONFIG",
    "AnalyticsConfig",
    "MASTERY_CONFIG",
    "MasteryConfig",
    "PEI_CONFIG",
    "PerformanceIndexConfig",
    "SESSION_CONFIG",
    "SessionConfig",
    "STREAK_CONFIG",
    "StreakConfig",
    "TILT_CONFIG",
    "TiltConfig",
    "TREND_CONFIG",
    "TrendConfig",
]
