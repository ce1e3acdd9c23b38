"""Tests pour analyze_trend."""

from src.analysis.trends import analyze_trend
from src.models import TrendResult


class TestAnalyzeTrend:
    """Tests pour la comparaison fenêtre récente / fenêtre précédente."""

    def test_improving_default_window(self, make_history):
        result = analyze_trend(make_history("WWWWWLLLLL"), 1)
        assert result == TrendResult(
            trend="improving",
            direction="up",
            strength=3,
            confidence="high",
            recent_win_rate=100,
            older_win_rate=0,
            improvement=100,
        )

    def test_declining_default_window(self, make_history):
        result = analyze_trend(make_history("LLLLLWWWWW"), 1)
        assert result.trend == "declining"
        assert result.direction == "down"
        assert result.strength == 3
        assert result.improvement == -100

    def test_insufficient_data(self, make_history):
        result = analyze_trend(make_history("WWW"), 1)
        assert result == TrendResult(trend="insufficient_data", direction="none", strength=0, confidence="low")
        assert result.recent_win_rate is None

    def test_incomplete_older_window_is_stable(self, make_history):
        result = analyze_trend(make_history("WWWWWLL"), 1)
        assert result.trend == "stable"
        assert result.direction == "none"
        assert result.strength == 0
        assert result.confidence == "low"
        assert result.improvement is None

    def test_not_a_list(self):
        assert analyze_trend(None, 1).trend == "stable"
        assert analyze_trend("matches", 1).confidence == "low"

    def test_medium_strength(self, make_history):
        """0.50 vs 0.25 -> force 2, confiance medium."""
        result = analyze_trend(make_history("WWLLWLLL"), 1, window_size=4)
        assert result.trend == "improving"
        assert result.strength == 2
        assert result.confidence == "medium"
        assert result.recent_win_rate == 50
        assert result.older_win_rate == 25
        assert result.improvement == 25

    def test_high_strength_boundary(self, make_history):
        """0.75 vs 0.25 -> écart 0.5, force 3."""
        result = analyze_trend(make_history("WWWLWLLL"), 1, window_size=4)
        assert result.strength == 3
        assert result.confidence == "high"

    def test_low_strength_and_rounding(self, make_history):
        """5/8 vs 4/8 -> écart 0.125, force 1 ; 62.5 % arrondi à 63."""
        result = analyze_trend(make_history("WWWWWLLL" + "WWWWLLLL"), 1, window_size=8)
        assert result.trend == "improving"
        assert result.strength == 1
        assert result.confidence == "low"
        assert result.recent_win_rate == 63
        assert result.older_win_rate == 50
        assert result.improvement == 13

    def test_equal_windows_are_stable(self, make_history):
        result = analyze_trend(make_history("WWLLWLWL"), 1, window_size=4)
        assert result.trend == "stable"
        assert result.direction == "none"
        assert result.strength == 0
        assert result.confidence == "medium"
        assert result.improvement == 0

    def test_only_first_two_windows_used(self, make_history):
        # Les matchs au-delà de 2 * window_size sont ignorés.
        base = analyze_trend(make_history("WWWWWLLLLL"), 1)
        extended = analyze_trend(make_history("WWWWWLLLLL" + "WWWWW"), 1)
        assert base == extended

    def test_other_heroes_ignored(self, make_history):
        matches = make_history("WWWWWLLLLL", hero_id=1) + make_history("LLLL", hero_id=2, start=1)
        assert analyze_trend(matches, 1).trend == "improving"
        assert analyze_trend(matches, 2).trend == "insufficient_data"
