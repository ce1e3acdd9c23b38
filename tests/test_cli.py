"""Tests pour le rapport en ligne de commande et la configuration."""

import json
import os
from pathlib import Path

import src.config

from src.cli import _print_text, build_parser, build_report, main
from src.config import (
    OUTCOME_LABELS,
    get_default_matches_path,
    get_repo_root,
)
from src.models import HeroStatRecord


def _export(tmp_path, make_history):
    matches = [
        {
            "match_id": m.match_id,
            "hero_id": m.hero_id,
            "start_time": m.start_time,
            "radiant_win": m.radiant_win,
            "player_slot": m.player_slot,
            "kills": m.kills,
            "deaths": m.deaths,
            "assists": m.assists,
            "gold_per_min": m.gold_per_min,
            "xp_per_min": m.xp_per_min,
        }
        for m in make_history("WWWWWLLLLL", hero_id=14) + make_history("LLL", hero_id=2, start=1_000_000)
    ]
    matches_path = tmp_path / "matches.json"
    matches_path.write_text(json.dumps({"matches": matches}), encoding="utf-8")
    heroes_path = tmp_path / "heroes.json"
    heroes_path.write_text(
        json.dumps([{"hero_id": 14, "games": 12, "win": 7}, {"hero_id": 2, "games": 3, "win": 0}]),
        encoding="utf-8",
    )
    names_path = tmp_path / "names.json"
    names_path.write_text(json.dumps({"14": "Pudge", "2": "Axe"}), encoding="utf-8")
    return str(matches_path), str(heroes_path), str(names_path)


class TestMain:
    def test_json_report(self, tmp_path, make_history, capsys):
        matches, heroes, names = _export(tmp_path, make_history)
        code = main([matches, "--heroes", heroes, "--hero-names", names, "--hero-id", "14", "--json"])
        assert code == 0
        report = json.loads(capsys.readouterr().out)
        assert report["matches_analyzed"] == 13
        assert report["momentum"]["hot_streak"]["hero_name"] == "Pudge"
        assert report["momentum"]["cold_spell"]["hero_name"] == "Axe"
        assert report["hero"]["trend"]["trend"] == "improving"
        assert report["hero_trends"][0]["hero_name"] == "Pudge"
        assert [h["hero_id"] for h in report["top_heroes"]] == [14]
        assert report["hero"]["streak_display"]["text"] == "5W"
        assert report["mastery"]["summary"]["total_heroes"] == 2
        assert report["mastery"]["heroes"][0]["hero_id"] == 14

    def test_text_report(self, tmp_path, make_history, capsys):
        matches, heroes, names = _export(tmp_path, make_history)
        assert main([matches, "--heroes", heroes, "--hero-names", names, "--hero-id", "14"]) == 0
        out = capsys.readouterr().out
        assert "13 match(s)" in out
        assert "PEI:" in out
        assert "Pudge" in out
        assert OUTCOME_LABELS.WIN in out
        assert "🔥 5W" in out
        assert "Maîtrise" in out

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "absent.json")]) == 1
        assert "❌" in capsys.readouterr().err

    def test_no_path(self, monkeypatch, capsys):
        monkeypatch.delenv("DOTA_MATCHES_PATH", raising=False)
        monkeypatch.delenv("DOTA_HEROES_PATH", raising=False)
        assert main([]) == 1
        assert "DOTA_MATCHES_PATH" in capsys.readouterr().err

    def test_env_default_path(self, tmp_path, make_history, monkeypatch, capsys):
        matches, _, _ = _export(tmp_path, make_history)
        monkeypatch.setenv("DOTA_MATCHES_PATH", matches)
        monkeypatch.delenv("DOTA_HEROES_PATH", raising=False)
        assert main(["--json"]) == 0
        assert json.loads(capsys.readouterr().out)["momentum"]["total_hot_heroes"] == 0


class TestBuildReport:
    def test_sorts_input(self, make_history):
        matches = make_history("WWWWWLLLLL", hero_id=1)
        heroes = [HeroStatRecord(hero_id=1, games=10, win=5)]
        assert build_report(list(reversed(matches)), heroes) == build_report(matches, heroes)

    def test_text_from_report_only(self, make_history, capsys):
        report = build_report(make_history("LLWW", hero_id=3), [], hero_id=3)
        assert report["hero"]["streak"]["current_streak"] == 2
        _print_text(json.loads(json.dumps(report, default=str)))
        out = capsys.readouterr().out
        assert "🧊 2L" in out
        assert "Maîtrise" not in out

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.matches is None
        assert args.hero_id is None
        assert args.json is False


class TestConfig:
    def test_env_path_absolute(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DOTA_MATCHES_PATH", str(tmp_path / "m.json"))
        assert get_default_matches_path() == str(tmp_path / "m.json")

    def test_env_path_relative_to_repo(self, monkeypatch):
        monkeypatch.setenv("DOTA_MATCHES_PATH", "data/m.json")
        assert get_default_matches_path() == os.path.join(get_repo_root(), "data/m.json")

    def test_env_path_unset(self, monkeypatch):
        monkeypatch.setenv("DOTA_MATCHES_PATH", "  ")
        assert get_default_matches_path() == ""

    def test_repo_root(self):
        assert os.path.isfile(os.path.join(get_repo_root(), "pyproject.toml"))
        assert get_repo_root() == str(Path(src.config.__file__).resolve().parent.parent)

    def test_outcome_labels(self):
        assert OUTCOME_LABELS.to_label(True) == "Victory"
        assert OUTCOME_LABELS.to_label(False) == "Defeat"
