"""Helpers numériques partagés par les calculateurs."""

from __future__ import annotations

import math


def clamp(value: float, lo: float = 0.0, hi: float = 100.0) -> float:
    return max(lo, min(hi, value))


def round_half_up(value: float) -> int:
    """Arrondi à l'entier, les demis vers le haut (62.5 -> 63, -12.5 -> -12)."""
    return int(math.floor(value + 0.5))


def round_to(value: float, digits: int = 0) -> float:
    """Arrondi à ``digits`` décimales, les demis vers le haut (3.125 -> 3.13)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor
