"""Tests pour les fonctions de formatage et les descripteurs d'affichage."""

from src.config import DASHBOARD_COLORS
from src.models import StreakResult, WinLossRecord
from src.ui.formatting import (
    format_duration,
    format_kda,
    get_momentum_display,
    get_streak_display,
    get_tilt_display,
)


def _streak(count, streak_type):
    return StreakResult(
        current_streak=count,
        streak_type=streak_type,
        recent_form="good",
        win_loss_record=WinLossRecord(wins=count, losses=0),
        momentum="neutral",
    )


class TestFormatDuration:
    def test_basic(self):
        assert format_duration(125) == "2:05"
        assert format_duration(0) == "0:00"
        assert format_duration(4500) == "75:00"

    def test_invalid(self):
        assert format_duration(None) == "-"
        assert format_duration(-3) == "-"
        assert format_duration("abc") == "-"
        assert format_duration(float("nan")) == "-"


class TestFormatKda:
    def test_basic(self):
        assert format_kda(7, 2, 11) == "7/2/11"
        assert format_kda(None, "x", 3) == "0/0/3"


class TestStreakDisplay:
    def test_win(self):
        assert get_streak_display(_streak(3, "win")) == {
            "text": "3W",
            "emoji": "🔥",
            "color": DASHBOARD_COLORS.green,
            "description": "3 game win streak",
        }

    def test_loss(self):
        disp = get_streak_display(_streak(2, "loss"))
        assert disp["text"] == "2L"
        assert disp["emoji"] == "🧊"
        assert disp["color"] == DASHBOARD_COLORS.blue

    def test_no_streak(self):
        expected = {"text": "No streak", "emoji": "➖", "color": DASHBOARD_COLORS.grey}
        assert get_streak_display(None) == expected
        assert get_streak_display(_streak(0, "none")) == expected

    def test_returns_copy(self):
        get_streak_display(None)["text"] = "changed"
        assert get_streak_display(None)["text"] == "No streak"


class TestMomentumAndTiltDisplay:
    def test_momentum(self):
        assert get_momentum_display("improving")["emoji"] == "📈"
        assert get_momentum_display("declining")["color"] == DASHBOARD_COLORS.red
        assert get_momentum_display("positive")["text"] == "Positive"
        assert get_momentum_display("whatever") == get_momentum_display("neutral")
        assert get_momentum_display(None)["text"] == "Stable"

    def test_tilt(self):
        assert get_tilt_display("warning")["text"] == "Tilting"
        assert get_tilt_display("danger")["color"] == DASHBOARD_COLORS.red
        assert get_tilt_display("stable")["text"] == "No data"
        assert get_tilt_display(None) == get_tilt_display("stable")
