#!/usr/bin/env python
"""Rapport d'analyse (séries, tendance, tilt, PEI) depuis des exports JSON.

Usage:
    python scripts/analyze_matches.py <matches.json> [--heroes F] [--hero-names F]
                                      [--hero-id N] [--json] [-v]

Exemple:
    python scripts/analyze_matches.py data/matches.json --heroes data/heroes.json --hero-id 14
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ajouter le dossier parent au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.cli import main


if __name__ == "__main__":
    sys.exit(main())
