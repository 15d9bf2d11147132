"""
Palette extraction service for playlist and song artwork.

This module implements the full extraction pipeline: canvas resampling,
pixel sampling, quantization, vibrancy ranking, uniqueness filtering and
role assignment, plus the fallback and async entry points used by callers.
"""

import asyncio
import time
from concurrent.futures import Executor
from typing import Any, Optional

from ziekie_palette.config import Config, config as default_config
from ziekie_palette.services.imaging import (
    InvalidInputError, ImageSource, validate_image, resize_to_canvas, load_image
)
from ziekie_palette.utils.ids import generate_extraction_id
from ziekie_palette.utils.logging import get_logger
from ziekie_palette.utils.metrics import get_metrics
from .palette import Palette, DEFAULT_PALETTE
from .sampling import sample_pixels
from .quantize import quantize_samples
from .scoring import rank_candidates
from .uniqueness import build_color_pool
from .roles import assign_roles


def _elapsed_ms(start_time: float) -> float:
    return (time.time() - start_time) * 1000


def extract_palette(image: Any, cfg: Config = None) -> Palette:
    """
    Extract a five-role palette from a decoded image.

    Pure and synchronous. Degenerate images (monochrome, fully transparent,
    too few distinct colors) resolve through fallbacks, never errors.

    Args:
        image: RGBA or RGB pixel buffer, see ``validate_image``
        cfg: Tunables (default from config)

    Returns:
        Palette with primary, secondary, accent, background and text colors

    Raises:
        InvalidInputError: If the image is empty or its pixels are unreadable
        ValueError: If CANVAS_SIZE or POOL_SIZE is out of range
    """
    cfg = cfg or default_config
    extraction_id = generate_extraction_id()
    log = get_logger(extraction_id=extraction_id)
    metrics = get_metrics() if cfg.METRICS_ENABLED else None
    start_time = time.time()

    # Validate tunables
    if not cfg.validate_canvas_size(cfg.CANVAS_SIZE):
        raise ValueError(f"Invalid CANVAS_SIZE: {cfg.CANVAS_SIZE}")
    if not cfg.validate_pool_size(cfg.POOL_SIZE):
        raise ValueError(f"Invalid POOL_SIZE: {cfg.POOL_SIZE}")

    try:
        rgba = validate_image(image)
    except InvalidInputError as e:
        log.error(f"Palette extraction rejected input: {e}")
        if metrics:
            metrics.increment_invalid_input_count()
        raise

    if metrics:
        metrics.increment_extraction_count()

    # Stage 1: resample and sample pixels
    stage_start = time.time()
    canvas = resize_to_canvas(rgba, cfg.CANVAS_SIZE)
    samples = sample_pixels(canvas, cfg)
    if metrics:
        metrics.record_timing("sampling", _elapsed_ms(stage_start))

    if len(samples) == 0:
        log.bind(width=rgba.shape[1], height=rgba.shape[0]).info(
            "No usable pixels sampled, using default palette")
        if metrics:
            metrics.increment_default_palette_count()
        return DEFAULT_PALETTE

    # Stage 2: quantize and rank
    stage_start = time.time()
    candidates = quantize_samples(samples, cfg)
    ranked = rank_candidates(candidates, cfg)
    if metrics:
        metrics.record_timing("ranking", _elapsed_ms(stage_start))

    # Stage 3: unique pool and roles
    stage_start = time.time()
    pool = build_color_pool(ranked, cfg)
    palette = assign_roles(pool, candidates, cfg)
    if metrics:
        metrics.record_timing("role_assignment", _elapsed_ms(stage_start))
        metrics.record_timing("total", _elapsed_ms(start_time))

    log.bind(
        sampled_pixels=len(samples),
        candidate_count=len(candidates),
        pool_size=len(pool),
        duration_ms=round(_elapsed_ms(start_time), 2),
    ).info(f"Created palette: {palette.hex_summary()}")

    return palette


def extract_palette_with_fallback(image: Optional[Any], cfg: Config = None) -> Palette:
    """
    Extract a palette, answering with the default palette instead of failing.

    Intended for product flows where a missing or broken image must not block
    the user.
    """
    log = get_logger()
    if image is None:
        log.warning("No image provided, using default palette")
        return DEFAULT_PALETTE

    try:
        return extract_palette(image, cfg)
    except InvalidInputError as e:
        log.warning(f"Palette extraction failed, using default palette: {e}")
        cfg = cfg or default_config
        if cfg.METRICS_ENABLED:
            get_metrics().increment_default_palette_count()
        return DEFAULT_PALETTE


def extract_palette_from_file(source: ImageSource, cfg: Config = None) -> Palette:
    """
    Decode an encoded image (path, bytes or PIL image) and extract its palette.

    Raises:
        InvalidInputError: If the source cannot be read or decoded
    """
    try:
        rgba = load_image(source)
    except InvalidInputError as e:
        get_logger().error(f"Failed to load image for palette extraction: {e}")
        raise
    return extract_palette(rgba, cfg)


async def extract_palette_async(image: Any, executor: Optional[Executor] = None,
                                cfg: Config = None) -> Palette:
    """
    Run extraction off the event loop and await its result.

    Args:
        image: Pixel buffer accepted by ``extract_palette``
        executor: Worker pool; the loop's default executor when None
        cfg: Tunables (default from config)
    """
    return await asyncio.get_running_loop().run_in_executor(
        executor, extract_palette, image, cfg
    )
