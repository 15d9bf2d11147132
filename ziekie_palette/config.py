"""
Ziekie Palette Configuration
Manages environment variables and algorithm constants for palette extraction.
"""
import os


class Config:
    """Configuration class for the palette extraction engine."""

    # Logging and metrics
    LOG_LEVEL: str = os.environ.get("ZIEKIE_LOG_LEVEL", "INFO")
    METRICS_ENABLED: bool = bool(int(os.environ.get("ZIEKIE_METRICS_ENABLED", "1")))

    # Input limits
    MAX_FILE_MB: int = int(os.environ.get("ZIEKIE_MAX_FILE_MB", "10"))

    # Sampling canvas
    CANVAS_SIZE: int = int(os.environ.get("ZIEKIE_CANVAS_SIZE", "150"))
    STRIDE_DIVISOR: int = 20
    STRIDE_MIN: int = 1
    STRIDE_MAX: int = 10

    # Pixel filters
    MIN_ALPHA: float = 0.5
    MIN_SAMPLE_BRIGHTNESS: float = 0.05
    MAX_SAMPLE_BRIGHTNESS: float = 0.95

    # Quantization (levels per channel unit)
    QUANT_LEVELS: int = 10

    # Vibrancy weights
    SATURATION_WEIGHT: float = 0.4
    BRIGHTNESS_WEIGHT: float = 0.3
    BALANCE_WEIGHT: float = 0.3
    OPTIMAL_BRIGHTNESS: float = 0.6

    # Uniqueness pool
    POOL_SIZE: int = int(os.environ.get("ZIEKIE_POOL_SIZE", "8"))
    UNIQUE_DISTANCE: float = 0.15

    # Role thresholds
    PRIMARY_MIN_BRIGHTNESS: float = 0.25
    PRIMARY_MAX_BRIGHTNESS: float = 0.85
    PRIMARY_MIN_SATURATION: float = 0.4
    SECONDARY_MIN_DISTANCE: float = 0.3
    ACCENT_MIN_DISTANCE: float = 0.25
    ACCENT_MIN_SATURATION: float = 0.6
    ACCENT_MIN_BRIGHTNESS: float = 0.4
    BACKGROUND_MIN_BRIGHTNESS: float = 0.85
    DARK_TEXT_BACKGROUND_BRIGHTNESS: float = 0.6

    @classmethod
    def validate_canvas_size(cls, size: int) -> bool:
        """Validate sampling canvas edge."""
        return 1 <= size <= 1024

    @classmethod
    def validate_pool_size(cls, size: int) -> bool:
        """Validate unique pool size."""
        return 1 <= size <= 32

    def sample_stride(self, canvas_width: int) -> int:
        """Stride that keeps the sample count roughly constant across canvas sizes."""
        return max(self.STRIDE_MIN, min(self.STRIDE_MAX, canvas_width // self.STRIDE_DIVISOR))


# Global config instance
config = Config()
