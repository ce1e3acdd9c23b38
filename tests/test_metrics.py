"""Tests pour les métriques clés et le tableau par héros."""

import pandas as pd
import pytest

from src.analysis.metrics import HERO_BREAKDOWN_COLUMNS, compute_core_metrics, compute_hero_breakdown
from src.models import CoreMetric, HeroStatRecord, WinLossRecord


class TestCoreMetrics:
    """Tests pour compute_core_metrics."""

    def test_all_metrics(self, make_history):
        matches = make_history("W", kills=10, deaths=5, assists=5, gpm=450.0, xpm=500.0,
                               duration=1200.0, last_hits=120)
        matches += make_history("L", start=1, kills=10, deaths=5, assists=5, gpm=550.0, xpm=500.0,
                                duration=1200.0, last_hits=120)
        metrics = compute_core_metrics(matches, WinLossRecord(wins=6, losses=4))

        assert [m.label for m in metrics] == ["KDA Ratio", "Win Rate", "GPM", "XPM", "CS/Min"]
        by_label = {m.label: m for m in metrics}
        assert by_label["KDA Ratio"] == CoreMetric("KDA Ratio", 3.0, "up")
        assert by_label["Win Rate"] == CoreMetric("Win Rate", 60.0, "up", "%")
        assert by_label["GPM"] == CoreMetric("GPM", 500, "up")
        assert by_label["XPM"] == CoreMetric("XPM", 500, "same")
        assert by_label["CS/Min"].value == pytest.approx(6.0)
        assert by_label["CS/Min"].trend == "down"

    def test_averages_round_half_up(self, make_history):
        """Moyenne GPM 450.5 -> 451, XPM 600.5 -> 601."""
        matches = make_history("W", gpm=450.0, xpm=600.0) + make_history("L", start=1, gpm=451.0, xpm=601.0)
        by_label = {m.label: m for m in compute_core_metrics(matches)}
        assert by_label["GPM"].value == 451
        assert by_label["XPM"].value == 601

    def test_win_rate_one_decimal_half_up(self):
        # 3 / 16 = 18.75 % -> 18.8
        metrics = compute_core_metrics([], WinLossRecord(wins=3, losses=13))
        assert metrics[0].value == pytest.approx(18.8)

    def test_zero_deaths(self, make_history):
        metrics = compute_core_metrics(make_history("W", kills=2, deaths=0, assists=1))
        assert metrics[0] == CoreMetric("KDA Ratio", 3.0, "up")

    def test_win_rate_only(self):
        metrics = compute_core_metrics([], WinLossRecord(wins=4, losses=6))
        assert metrics == [CoreMetric("Win Rate", 40.0, "down", "%")]

    def test_nothing_to_show(self):
        assert compute_core_metrics([]) == []
        assert compute_core_metrics(None, WinLossRecord(wins=0, losses=0)) == []

    def test_cs_skips_untimed_matches(self, make_history):
        matches = make_history("W", duration=600.0, last_hits=50) + make_history(
            "W", start=1, duration=0.0, last_hits=500
        )
        by_label = {m.label: m for m in compute_core_metrics(matches)}
        assert by_label["CS/Min"].value == pytest.approx(5.0)

    def test_no_timed_match(self, make_history):
        metrics = compute_core_metrics(make_history("W", duration=0.0))
        assert "CS/Min" not in [m.label for m in metrics]


class TestHeroBreakdown:
    """Tests pour compute_hero_breakdown."""

    def _heroes(self):
        return [
            HeroStatRecord(hero_id=1, games=3, win=2, name="Axe"),
            HeroStatRecord(hero_id=2, games=10, win=6, name="Lion", sum_kills=50.0, sum_gold_per_min=4500.0),
            HeroStatRecord(hero_id=3, games=20, win=5, sum_deaths=100.0),
        ]

    def test_sorted_and_filtered(self):
        df = compute_hero_breakdown(self._heroes())
        assert list(df.columns) == HERO_BREAKDOWN_COLUMNS
        assert df["hero_id"].tolist() == [3, 2]
        assert df.loc[0, "hero_name"] == "Hero 3"
        assert df.loc[0, "win_rate"] == pytest.approx(25.0)
        assert df.loc[0, "losses"] == 15
        assert df.loc[0, "avg_deaths"] == pytest.approx(5.0)
        assert df.loc[1, "avg_kills"] == pytest.approx(5.0)
        assert df.loc[1, "avg_gpm"] == pytest.approx(450.0)

    def test_limit_and_min_games(self):
        df = compute_hero_breakdown(self._heroes(), min_games=1, limit=2)
        assert df["hero_id"].tolist() == [3, 2]
        df = compute_hero_breakdown(self._heroes(), min_games=1)
        assert len(df) == 3

    def test_empty(self):
        for value in ([], None, [HeroStatRecord(hero_id=1, games=1)]):
            df = compute_hero_breakdown(value)
            assert isinstance(df, pd.DataFrame)
            assert df.empty
            assert list(df.columns) == HERO_BREAKDOWN_COLUMNS
