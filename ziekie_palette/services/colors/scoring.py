"""
Vibrancy scoring and candidate ranking.
"""

import math
from typing import List

from ziekie_palette.config import Config, config as default_config
from .color import Color
from .quantize import Candidate


def vibrancy_score(color: Color, cfg: Config = None) -> float:
    """
    Calculate how vibrant/appealing a color is for UI use.

    Rewards saturation, brightness near the optimum and penalizes colors with
    large channel spread (the balance term).

    Args:
        color: Color to score
        cfg: Weights and optimum (default from config)

    Returns:
        Score roughly in [0, 1]
    """
    cfg = cfg or default_config
    r, g, b = color.rgb

    saturation_score = color.saturation
    brightness_score = 1.0 - abs(color.brightness - cfg.OPTIMAL_BRIGHTNESS) / cfg.OPTIMAL_BRIGHTNESS
    balance_score = max(0.0, 1.0 - abs(r - g) - abs(g - b) - abs(b - r))

    return (
        cfg.SATURATION_WEIGHT * saturation_score
        + cfg.BRIGHTNESS_WEIGHT * brightness_score
        + cfg.BALANCE_WEIGHT * balance_score
    )


def rank_score(candidate: Candidate, cfg: Config = None) -> int:
    """Frequency weighted by the integer vibrancy percentage."""
    return candidate.count * math.floor(vibrancy_score(candidate.color, cfg) * 100)


def rank_candidates(candidates: List[Candidate], cfg: Config = None) -> List[Candidate]:
    """
    Sort candidates by rank, descending.

    Equal ranks keep first-seen bucket order.
    """
    ordered = sorted(candidates, key=lambda c: c.first_seen)
    return sorted(ordered, key=lambda c: rank_score(c, cfg), reverse=True)
