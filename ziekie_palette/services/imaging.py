"""
Ziekie Palette Imaging Utilities
Handles image decoding, validation and canvas resampling for extraction.
"""
import io
from pathlib import Path
from typing import Any, Union

import cv2
import numpy as np
from PIL import Image, UnidentifiedImageError

from ziekie_palette.config import config


class InvalidInputError(ValueError):
    """Raised when an image is empty, malformed or cannot be read."""


ImageSource = Union[bytes, bytearray, str, Path, Image.Image]


def validate_image(image: Any) -> np.ndarray:
    """
    Validate a decoded image buffer and normalize it to RGBA floats.

    Args:
        image: Array-like of shape (H, W, 3) or (H, W, 4). uint8/uint16 values
            are scaled to [0, 1]; float values must already be in [0, 1].

    Returns:
        float64 array of shape (H, W, 4) in [0, 1]

    Raises:
        InvalidInputError: For missing, empty or unreadable buffers
    """
    if image is None:
        raise InvalidInputError("No image provided")

    try:
        pixels = np.asarray(image)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Unreadable pixel buffer: {str(e)}") from e

    if pixels.ndim != 3:
        raise InvalidInputError(f"Expected an (H, W, C) pixel buffer, got shape {pixels.shape}")

    height, width, channels = pixels.shape
    if width == 0 or height == 0:
        raise InvalidInputError(f"Image has zero dimension: {width}×{height}")

    if channels not in (3, 4):
        raise InvalidInputError(f"Expected 3 or 4 channels, got {channels}")

    if pixels.dtype == np.uint8:
        rgba = pixels.astype(np.float64) / 255.0
    elif pixels.dtype == np.uint16:
        rgba = pixels.astype(np.float64) / 65535.0
    elif np.issubdtype(pixels.dtype, np.floating):
        rgba = pixels.astype(np.float64)
        if not np.all(np.isfinite(rgba)):
            raise InvalidInputError("Pixel buffer contains non-finite values")
        if rgba.min() < 0.0 or rgba.max() > 1.0:
            raise InvalidInputError("Float pixel values must be normalized to [0, 1]")
    else:
        raise InvalidInputError(f"Unsupported pixel dtype: {pixels.dtype}")

    if channels == 3:
        alpha = np.ones((height, width, 1), dtype=np.float64)
        rgba = np.concatenate([rgba, alpha], axis=2)

    return np.ascontiguousarray(rgba)


def resize_to_canvas(rgba: np.ndarray, size: int = None) -> np.ndarray:
    """
    Stretch an RGBA image onto a square sampling canvas.

    Nearest-neighbour resampling keeps every canvas pixel an actual source
    color, so sampled buckets never contain blends of neighbouring regions.

    Args:
        rgba: Validated (H, W, 4) float image
        size: Canvas edge in pixels (default from config)

    Returns:
        (size, size, 4) float image
    """
    if size is None:
        size = config.CANVAS_SIZE

    height, width = rgba.shape[:2]
    if width == size and height == size:
        return rgba

    return cv2.resize(rgba, (size, size), interpolation=cv2.INTER_NEAREST)


def _read_source_bytes(source: Union[str, Path]) -> bytes:
    try:
        return Path(source).read_bytes()
    except OSError as e:
        raise InvalidInputError(f"Failed to read image file {source}: {str(e)}") from e


def load_image(source: ImageSource) -> np.ndarray:
    """
    Decode an encoded image into an RGBA uint8 array.

    Args:
        source: Encoded bytes, a file path, or an already opened PIL image

    Returns:
        numpy array of shape (H, W, 4), dtype uint8

    Raises:
        InvalidInputError: For empty, oversized or undecodable input
    """
    if isinstance(source, Image.Image):
        pil_image = source
    else:
        if isinstance(source, (str, Path)):
            file_bytes = _read_source_bytes(source)
        elif isinstance(source, (bytes, bytearray)):
            file_bytes = bytes(source)
        else:
            raise InvalidInputError(f"Unsupported image source type: {type(source).__name__}")

        if not file_bytes:
            raise InvalidInputError("Image data is empty")

        if len(file_bytes) > config.MAX_FILE_MB * 1024 * 1024:
            raise InvalidInputError(f"File too large. Maximum size: {config.MAX_FILE_MB}MB")

        try:
            pil_image = Image.open(io.BytesIO(file_bytes))
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            raise InvalidInputError(f"Failed to decode image: {str(e)}") from e

    try:
        # Convert to RGBA so transparency survives into sampling
        if pil_image.mode != 'RGBA':
            pil_image = pil_image.convert('RGBA')
        rgba_array = np.array(pil_image)
    except (Image.DecompressionBombError, OSError, ValueError) as e:
        raise InvalidInputError(f"Failed to decode image: {str(e)}") from e

    return rgba_array
