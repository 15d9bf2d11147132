"""
Pixel sampling for palette extraction.

Reads a strided grid of pixels from the sampling canvas and drops pixels that
carry no theme information: transparent ones and near-black/near-white
borders or letterboxing.
"""

import numpy as np
from loguru import logger

from ziekie_palette.config import Config, config as default_config


def sample_pixels(canvas_rgba: np.ndarray, cfg: Config = None) -> np.ndarray:
    """
    Sample and filter canvas pixels for color analysis.

    Args:
        canvas_rgba: Canvas image (H, W, 4) float in [0, 1]
        cfg: Thresholds and stride settings (default from config)

    Returns:
        Filtered RGB samples (N, 3) float, in row-major scan order
    """
    cfg = cfg or default_config
    height, width = canvas_rgba.shape[:2]
    stride = cfg.sample_stride(width)

    grid = canvas_rgba[::stride, ::stride].reshape(-1, 4)
    rgb = grid[:, :3]
    alpha = grid[:, 3]
    brightness = rgb.mean(axis=1)

    keep_mask = alpha >= cfg.MIN_ALPHA
    logger.debug(f"Alpha filter: kept {np.sum(keep_mask)}/{len(keep_mask)} samples")

    keep_mask &= (brightness >= cfg.MIN_SAMPLE_BRIGHTNESS) & (brightness <= cfg.MAX_SAMPLE_BRIGHTNESS)

    samples = rgb[keep_mask]
    logger.debug(f"Sampling {width}×{height} canvas at stride {stride}: "
                 f"{len(grid)} → {len(samples)} samples")
    return samples
