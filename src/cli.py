"""Rapport d'analyse en ligne de commande à partir d'exports JSON.

Usage:
    python scripts/analyze_matches.py <matches.json> [--heroes F] [--hero-names F]
                                      [--hero-id N] [--json] [-v]

Les chemins par défaut peuvent être fournis via les variables
DOTA_MATCHES_PATH, DOTA_HEROES_PATH et DOTA_HERO_NAMES_PATH.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from tqdm import tqdm

from src.analysis import (
    MASTERY_CONFIG,
    analyze_hero_streak,
    analyze_trend,
    build_analytics_snapshot,
    calculate_mastery_summary,
    compute_hero_breakdown,
    compute_hero_masteries,
    sort_heroes_by_mastery,
    sort_most_recent_first,
)
from src.config import (
    OUTCOME_LABELS,
    get_default_hero_names_path,
    get_default_heroes_path,
    get_default_matches_path,
)
from src.data import DataLoadError, load_hero_stats_json, load_matches_json
from src.models import HeroStatRecord, MatchRecord
from src.ui.formatting import get_momentum_display, get_streak_display, get_tilt_display

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Analyse l'historique de matchs (séries, tendance, tilt, PEI).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "matches",
        nargs="?",
        default=None,
        help="Export JSON des matchs récents (défaut: $DOTA_MATCHES_PATH)",
    )
    parser.add_argument("--heroes", default=None, help="Export JSON des stats par héros")
    parser.add_argument("--hero-names", default=None, help="Table JSON des noms de héros")
    parser.add_argument("--hero-id", type=int, default=None, help="Détail d'un héros")
    parser.add_argument("--json", action="store_true", help="Sortie JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Logs détaillés")
    return parser


def _hero_report(matches: list[MatchRecord], hero_id: int) -> dict[str, Any]:
    streak = analyze_hero_streak(matches, hero_id)
    return {
        "hero_id": hero_id,
        "streak": streak.as_dict(),
        "streak_display": get_streak_display(streak),
        "trend": analyze_trend(matches, hero_id).as_dict(),
    }


def _hero_trends(matches: list[MatchRecord], heroes: list[HeroStatRecord]) -> list[dict[str, Any]]:
    rows = []
    for hero in tqdm(heroes, desc="Héros", disable=not sys.stderr.isatty()):
        trend = analyze_trend(matches, hero.hero_id)
        if trend.trend in ("improving", "declining"):
            rows.append({"hero_id": hero.hero_id, "hero_name": hero.display_name, **trend.as_dict()})
    return rows


def build_report(
    matches: list[MatchRecord],
    heroes: list[HeroStatRecord],
    hero_id: int | None = None,
) -> dict[str, Any]:
    """Assemble le rapport (dict sérialisable en JSON)."""
    ordered = sort_most_recent_first(matches)
    snapshot = build_analytics_snapshot(ordered, heroes)
    report: dict[str, Any] = snapshot.as_dict()
    report["hero_trends"] = _hero_trends(ordered, heroes)
    report["top_heroes"] = compute_hero_breakdown(heroes).to_dict(orient="records")
    masteries = sort_heroes_by_mastery(compute_hero_masteries(heroes))
    report["mastery"] = {
        "summary": calculate_mastery_summary(masteries).as_dict(),
        "heroes": [m.as_dict() for m in masteries[:5]],
    }
    if hero_id is not None:
        report["hero"] = _hero_report(ordered, hero_id)
    return report


def _print_text(report: dict[str, Any]) -> None:
    tilt = report["tilt"]
    pei = report["performance_index"]
    momentum = report["momentum"]
    session = report["session"]

    tilt_disp = get_tilt_display(tilt["status"])
    mom_disp = get_momentum_display(momentum["momentum"])

    print(f"📊 {report['matches_analyzed']} match(s) analysé(s)")
    print(f"   Tilt: {tilt['level']}/100 {tilt_disp['emoji']} {tilt['message']}")
    print(f"   PEI: {pei['score']}/100 ({pei['grade']}, {pei['trend']})")
    print(
        f"   Momentum: {mom_disp['emoji']} {mom_disp['text']} "
        f"({momentum['total_hot_heroes']} chaud(s) / {momentum['total_cold_heroes']} froid(s))"
    )
    if momentum["hot_streak"]:
        hot = momentum["hot_streak"]
        print(f"   🔥 {hot['hero_name']}: {hot['streak']}W")
    if momentum["cold_spell"]:
        cold = momentum["cold_spell"]
        print(f"   🧊 {cold['hero_name']}: {cold['streak']}L")
    print(
        f"   Aujourd'hui: {session['wins']}V / {session['losses']}D "
        f"(MMR estimé {session['mmr_change']:+d})"
    )

    mastery = report["mastery"]["summary"]
    if mastery["total_heroes"]:
        top = MASTERY_CONFIG.tier(mastery["top_tier"])
        print(
            f"   Maîtrise: {top.emoji} {top.name} (score {mastery['mastery_score']}, "
            f"niveau moyen {mastery['average_level']})"
        )

    for row in report["hero_trends"]:
        arrow = "↗" if row["direction"] == "up" else "↘"
        print(f"   {arrow} {row['hero_name']}: {row['older_win_rate']}% -> {row['recent_win_rate']}%")

    hero = report.get("hero")
    if hero:
        streak = hero["streak"]
        disp = hero["streak_display"]
        print()
        last = OUTCOME_LABELS.to_label(streak["streak_type"] == "win") if streak["games_analyzed"] else "-"
        print(
            f"🎯 Héros {hero['hero_id']}: {disp['emoji']} {disp['text']}, "
            f"forme {streak['recent_form']}, dernier match: {last}"
        )
        trend = hero["trend"]
        print(f"   Tendance: {trend['trend']} (force {trend['strength']}, confiance {trend['confidence']})")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    matches_path = args.matches or get_default_matches_path()
    heroes_path = args.heroes or get_default_heroes_path()
    names_path = args.hero_names or get_default_hero_names_path()

    if not matches_path:
        print("❌ Aucun export de matchs (argument ou DOTA_MATCHES_PATH)", file=sys.stderr)
        return 1

    try:
        matches = load_matches_json(matches_path)
        heroes = load_hero_stats_json(heroes_path, names_path or None) if heroes_path else []
    except DataLoadError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    logger.debug("%d match(s), %d héros chargés", len(matches), len(heroes))

    report = build_report(matches, heroes, hero_id=args.hero_id)
    if args.json:
        print(json.dumps(report, ensure_ascii=False, indent=2, default=str))
    else:
        _print_text(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
