"""
Uniqueness filtering of ranked candidates into a fixed-size color pool.
"""

from typing import List, Sequence

from loguru import logger

from ziekie_palette.config import Config, config as default_config
from .color import Color
from .quantize import Candidate
from .palette import DEFAULT_SWATCHES


def select_unique_colors(ranked: Sequence[Candidate], cfg: Config = None) -> List[Color]:
    """
    Greedily accept ranked candidates that are distinct from every accepted one.

    Args:
        ranked: Candidates in rank order
        cfg: Pool size and distance threshold (default from config)

    Returns:
        Up to POOL_SIZE colors, still in rank order
    """
    cfg = cfg or default_config
    unique: List[Color] = []

    for candidate in ranked:
        if len(unique) >= cfg.POOL_SIZE:
            break
        color = candidate.color
        if all(color.distance_to(existing) > cfg.UNIQUE_DISTANCE for existing in unique):
            unique.append(color)

    return unique


def pad_with_defaults(colors: List[Color], cfg: Config = None,
                      swatches: Sequence[Color] = DEFAULT_SWATCHES) -> List[Color]:
    """
    Fill a short pool from the fixed swatch list.

    Slot i of the pool is filled with swatch i, so a pool holding k found
    colors continues at swatch k. Stops at POOL_SIZE or when the swatches
    run out.
    """
    cfg = cfg or default_config
    pool = list(colors)
    while len(pool) < cfg.POOL_SIZE and len(pool) < len(swatches):
        pool.append(swatches[len(pool)])

    if len(pool) > len(colors):
        logger.debug(f"Padded unique pool with {len(pool) - len(colors)} default swatches")
    return pool


def build_color_pool(ranked: Sequence[Candidate], cfg: Config = None,
                     swatches: Sequence[Color] = DEFAULT_SWATCHES) -> List[Color]:
    """Unique candidates followed by default padding."""
    return pad_with_defaults(select_unique_colors(ranked, cfg), cfg, swatches)
