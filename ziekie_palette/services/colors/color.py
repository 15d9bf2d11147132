"""
Color value type and HSB utilities.

Colors are stored as normalized RGBA floats. Brightness used by the palette
heuristics is the channel mean; hue and saturation come from the standard
HSB (HSV) model.
"""

import colorsys
import math
from dataclasses import dataclass
from typing import Optional, Tuple


def _clamp_channel(value: float, name: str) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Color channel {name} must be finite, got {value}")
    return min(1.0, max(0.0, value))


def rgb_to_hsb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert RGB to HSB.

    Args:
        r, g, b: Channels in [0, 1]

    Returns:
        Tuple of (H, S, B) where H ∈ [0,1), S ∈ [0,1], B ∈ [0,1]
    """
    return colorsys.rgb_to_hsv(r, g, b)


def hsb_to_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSB to RGB.

    Args:
        h: Hue [0, 1), wrapped if outside
        s: Saturation [0, 1]
        v: Brightness (HSB value) [0, 1]

    Returns:
        Tuple of (R, G, B) channels in [0, 1]
    """
    return colorsys.hsv_to_rgb(h % 1.0, s, v)


def rotate_hue(h: float, turns: float) -> float:
    """Rotate hue by a fraction of a full turn, wrapping to [0, 1)."""
    return (h + turns) % 1.0


@dataclass(frozen=True)
class Color:
    """An RGBA color with channels clamped to [0, 1]."""
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "red", _clamp_channel(self.red, "red"))
        object.__setattr__(self, "green", _clamp_channel(self.green, "green"))
        object.__setattr__(self, "blue", _clamp_channel(self.blue, "blue"))
        object.__setattr__(self, "alpha", _clamp_channel(self.alpha, "alpha"))

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int, alpha: float = 1.0) -> "Color":
        """Build a color from 8-bit channel values."""
        return cls(r / 255.0, g / 255.0, b / 255.0, alpha)

    @classmethod
    def from_hsb(cls, h: float, s: float, v: float, alpha: float = 1.0) -> "Color":
        r, g, b = hsb_to_rgb(h, s, v)
        return cls(r, g, b, alpha)

    @property
    def rgb(self) -> Tuple[float, float, float]:
        return (self.red, self.green, self.blue)

    @property
    def brightness(self) -> float:
        """Mean of the three color channels."""
        return (self.red + self.green + self.blue) / 3.0

    @property
    def hsb(self) -> Tuple[float, float, float]:
        return rgb_to_hsb(self.red, self.green, self.blue)

    @property
    def hue(self) -> float:
        return self.hsb[0]

    @property
    def saturation(self) -> float:
        return self.hsb[1]

    @property
    def hex(self) -> str:
        """Hex string ``#RRGGBB`` for logs and debugging."""
        r, g, b = (int(c * 255) for c in self.rgb)
        return f"#{r:02X}{g:02X}{b:02X}"

    def distance_to(self, other: "Color") -> float:
        """Euclidean distance over RGB, ignoring alpha."""
        return math.sqrt(
            (self.red - other.red) ** 2
            + (self.green - other.green) ** 2
            + (self.blue - other.blue) ** 2
        )

    def complementary(self) -> Optional["Color"]:
        """
        Opposite hue with the same saturation, HSB value and alpha.

        Returns None for achromatic colors, whose hue is undefined.
        """
        h, s, v = self.hsb
        if s == 0.0:
            return None
        return Color.from_hsb(rotate_hue(h, 0.5), s, v, self.alpha)


# Fixed reference colors
WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)
