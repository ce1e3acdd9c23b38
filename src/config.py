"""Configuration centralisée et constantes du projet."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict


def get_repo_root() -> str:
    """Retourne le dossier qui contient pyproject.toml (parent de src/ à défaut)."""
    here = Path(__file__).resolve().parent
    for p in (here, *here.parents):
        if (p / "pyproject.toml").exists():
            return str(p)
    return str(here.parent)


# =============================================================================
# Chemins par défaut (exports JSON de l'API)
# =============================================================================

def _env_path(name: str) -> str:
    value = (os.environ.get(name) or "").strip()
    if not value:
        return ""
    if not os.path.isabs(value):
        value = os.path.join(get_repo_root(), value)
    return value


def get_default_matches_path() -> str:
    """Retourne le chemin par défaut de l'export des matchs récents."""
    return _env_path("DOTA_MATCHES_PATH")


def get_default_heroes_path() -> str:
    """Retourne le chemin par défaut de l'export des stats par héros."""
    return _env_path("DOTA_HEROES_PATH")


def get_default_hero_names_path() -> str:
    """Retourne le chemin par défaut de la table des noms de héros."""
    return _env_path("DOTA_HERO_NAMES_PATH")


# =============================================================================
# Résultat d'un match
# =============================================================================

RADIANT_SLOT_LIMIT = 128
"""Un player_slot strictement inférieur appartient au camp Radiant."""


@dataclass(frozen=True)
class OutcomeLabels:
    """Libellés des résultats de match."""
    WIN: str = "Victory"
    LOSS: str = "Defeat"

    def to_label(self, won: bool) -> str:
        """Convertit un résultat en label lisible."""
        return self.WIN if won else self.LOSS


OUTCOME_LABELS = OutcomeLabels()


# =============================================================================
# Palette de couleurs (descripteurs d'affichage)
# =============================================================================

@dataclass(frozen=True)
class DashboardColors:
    """Palette utilisée par les descripteurs de série et de momentum."""
    green: str = "#52c41a"
    blue: str = "#1890ff"
    red: str = "#ff4d4f"
    yellow: str = "#fadb14"
    orange: str = "#fa8c16"
    cyan: str = "#13c2c2"
    grey: str = "#666666"

    def as_dict(self) -> Dict[str, str]:
        """Retourne les couleurs sous forme de dictionnaire."""
        return {
            "green": self.green,
            "blue": self.blue,
            "red": self.red,
            "yellow": self.yellow,
            "orange": self.orange,
            "cyan": self.cyan,
            "grey": self.grey,
        }


DASHBOARD_COLORS = DashboardColors()
