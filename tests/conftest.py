"""
Test configuration and fixtures for palette extraction tests.
"""
import numpy as np
import pytest


def solid_image(rgba, width=100, height=100, dtype=np.float64):
    """Create an image filled with one RGBA color."""
    img = np.zeros((height, width, 4), dtype=dtype)
    img[:, :] = rgba
    return img


def stripes_image(colors, width=120, height=60):
    """Create an opaque float image of equal vertical stripes."""
    img = np.ones((height, width, 4), dtype=np.float64)
    stripe = width // len(colors)
    for i, rgb in enumerate(colors):
        img[:, i * stripe:(i + 1) * stripe, :3] = rgb
    return img


@pytest.fixture
def red_image():
    """Fully opaque, uniformly red 100×100 uint8 image."""
    return solid_image((255, 0, 0, 255), dtype=np.uint8)


@pytest.fixture
def checkerboard_image():
    """Opaque blue/orange checkerboard alternating pixel-for-pixel."""
    img = np.ones((100, 100, 4), dtype=np.float64)
    ys, xs = np.indices((100, 100))
    blue = (ys + xs) % 2 == 0
    img[blue, :3] = (0.0, 0.0, 1.0)
    img[~blue, :3] = (1.0, 0.5, 0.0)
    return img


@pytest.fixture
def transparent_image():
    """50×50 image with alpha = 0 everywhere."""
    return solid_image((0.3, 0.6, 0.9, 0.0), width=50, height=50)


@pytest.fixture
def noise_image():
    """Deterministic random opaque RGB image."""
    rng = np.random.default_rng(42)
    return rng.integers(0, 256, size=(80, 120, 3), dtype=np.uint8)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Reset metrics before each test."""
    from ziekie_palette.utils.metrics import reset_metrics
    reset_metrics()
