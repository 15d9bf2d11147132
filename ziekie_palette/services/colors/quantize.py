"""
Color quantization into frequency candidates.
"""

import math
from dataclasses import dataclass
from typing import Dict, List, Tuple

import numpy as np

from ziekie_palette.config import Config, config as default_config
from .color import Color


@dataclass
class Candidate:
    """A representative bucket color with its sample frequency."""
    color: Color
    count: int
    first_seen: int  # Bucket insertion index, the ranking tie-breaker


def bucket_key(r: float, g: float, b: float, levels: int = 10) -> Tuple[int, int, int]:
    """Round each channel half-up to 1/levels precision."""
    return (
        math.floor(r * levels + 0.5),
        math.floor(g * levels + 0.5),
        math.floor(b * levels + 0.5),
    )


def quantize_samples(samples: np.ndarray, cfg: Config = None) -> List[Candidate]:
    """
    Group samples into rounded buckets, keeping the first sample of each bucket.

    Args:
        samples: RGB samples (N, 3) float in scan order
        cfg: Quantization settings (default from config)

    Returns:
        Candidates in first-seen bucket order
    """
    cfg = cfg or default_config
    # dict preserves insertion order, which pins tie-breaks in ranking
    buckets: Dict[Tuple[int, int, int], Candidate] = {}

    for r, g, b in samples.tolist():
        key = bucket_key(r, g, b, cfg.QUANT_LEVELS)
        existing = buckets.get(key)
        if existing is None:
            buckets[key] = Candidate(color=Color(r, g, b, 1.0), count=1, first_seen=len(buckets))
        else:
            existing.count += 1

    return list(buckets.values())
