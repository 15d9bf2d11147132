"""
Role Assignment Module

Maps the unique color pool onto the five palette roles. Every role has an
ordered fallback chain, so assignment always resolves, even for an empty pool.
"""

from typing import List, Optional, Sequence

from loguru import logger

from ziekie_palette.config import Config, config as default_config
from .color import Color, WHITE, BLACK
from .palette import Palette, SYSTEM_BLUE, SYSTEM_MINT, SYSTEM_PURPLE
from .quantize import Candidate


def select_primary(pool: Sequence[Color], cfg: Config = None) -> int:
    """
    Index of the primary color in the pool, or -1 when the pool is empty.

    Prefers the first vibrant color that is neither too dark nor too light.
    """
    cfg = cfg or default_config
    for i, color in enumerate(pool):
        if (cfg.PRIMARY_MIN_BRIGHTNESS < color.brightness < cfg.PRIMARY_MAX_BRIGHTNESS
                and color.saturation > cfg.PRIMARY_MIN_SATURATION):
            return i
    return 0 if pool else -1


def select_secondary(pool: Sequence[Color], primary: Color, taken: Sequence[int],
                     cfg: Config = None) -> Optional[int]:
    """Index of the first untaken color far enough from the primary."""
    cfg = cfg or default_config
    for i, color in enumerate(pool):
        if i in taken:
            continue
        if color.distance_to(primary) > cfg.SECONDARY_MIN_DISTANCE:
            return i
    return None


def select_accent(pool: Sequence[Color], avoid: Sequence[Color], taken: Sequence[int],
                  cfg: Config = None) -> Optional[int]:
    """Index of the first untaken bright, saturated color distinct from ``avoid``."""
    cfg = cfg or default_config
    for i, color in enumerate(pool):
        if i in taken:
            continue
        is_unique = all(color.distance_to(other) > cfg.ACCENT_MIN_DISTANCE for other in avoid)
        if (is_unique
                and color.saturation > cfg.ACCENT_MIN_SATURATION
                and color.brightness > cfg.ACCENT_MIN_BRIGHTNESS):
            return i
    return None


def select_background(candidates: Sequence[Candidate], cfg: Config = None) -> Color:
    """
    Lightest candidate of the full quantized set if light enough, else white.

    Searches every candidate, not only the unique pool.
    """
    cfg = cfg or default_config
    lightest: Optional[Color] = None
    for candidate in candidates:
        if lightest is None or candidate.color.brightness > lightest.brightness:
            lightest = candidate.color

    if lightest is not None and lightest.brightness > cfg.BACKGROUND_MIN_BRIGHTNESS:
        return lightest
    return WHITE


def select_text(background: Color, cfg: Config = None) -> Color:
    """Black on light backgrounds, white otherwise."""
    cfg = cfg or default_config
    return BLACK if background.brightness > cfg.DARK_TEXT_BACKGROUND_BRIGHTNESS else WHITE


def assign_roles(pool: Sequence[Color], candidates: Sequence[Candidate],
                 cfg: Config = None) -> Palette:
    """
    Build a palette from the ranked color pool.

    Args:
        pool: Unique colors in rank order (possibly padded with swatches)
        candidates: Full quantized candidate set, for the background search
        cfg: Role thresholds (default from config)

    Returns:
        A complete five-role Palette
    """
    cfg = cfg or default_config
    taken: List[int] = []

    primary_index = select_primary(pool, cfg)
    if primary_index >= 0:
        primary = pool[primary_index]
        taken.append(primary_index)
    else:
        primary = SYSTEM_BLUE

    secondary_index = select_secondary(pool, primary, taken, cfg)
    if secondary_index is not None:
        secondary = pool[secondary_index]
        taken.append(secondary_index)
    else:
        secondary = primary.complementary() or SYSTEM_MINT
        logger.debug(f"No distinct secondary in pool, using {secondary.hex}")

    accent_index = select_accent(pool, [primary, secondary], taken, cfg)
    if accent_index is not None:
        accent = pool[accent_index]
    else:
        accent = SYSTEM_PURPLE
        logger.debug("No vibrant accent in pool, using default accent")

    background = select_background(candidates, cfg)
    text = select_text(background, cfg)

    return Palette(
        primary=primary,
        secondary=secondary,
        accent=accent,
        background=background,
        text=text,
    )
