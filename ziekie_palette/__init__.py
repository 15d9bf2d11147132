"""
Ziekie Palette

Deterministic five-role color palette extraction for playlist and song
artwork: primary, secondary, accent, background and text.
"""

__version__ = "1.0.0"

from ziekie_palette.services.imaging import InvalidInputError, load_image
from ziekie_palette.services.colors.color import Color
from ziekie_palette.services.colors.palette import Palette, DEFAULT_PALETTE, effective_palette
from ziekie_palette.services.colors.extraction import (
    extract_palette,
    extract_palette_with_fallback,
    extract_palette_from_file,
    extract_palette_async,
)
from ziekie_palette.schemas import ColorRecord, PaletteRecord
from ziekie_palette.utils.logging import configure_logging

__all__ = [
    'InvalidInputError',
    'load_image',
    'Color',
    'Palette',
    'DEFAULT_PALETTE',
    'effective_palette',
    'extract_palette',
    'extract_palette_with_fallback',
    'extract_palette_from_file',
    'extract_palette_async',
    'ColorRecord',
    'PaletteRecord',
    'configure_logging',
]
