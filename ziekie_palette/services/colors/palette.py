"""
Palette record and the fixed fallback colors.

The default palette and swatches mirror the platform system colors the app
themes with when an image gives no usable signal.
"""

from dataclasses import dataclass, fields
from typing import Dict, Optional, Tuple

from .color import Color, WHITE, BLACK


ROLES = ("primary", "secondary", "accent", "background", "text")


@dataclass(frozen=True)
class Palette:
    """Five named theme colors derived from one image."""
    primary: Color
    secondary: Color
    accent: Color
    background: Color
    text: Color

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        """Serialize to five ``{r, g, b, a}`` records keyed by role."""
        return {
            f.name: {
                "r": getattr(self, f.name).red,
                "g": getattr(self, f.name).green,
                "b": getattr(self, f.name).blue,
                "a": getattr(self, f.name).alpha,
            }
            for f in fields(self)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Dict[str, float]]) -> "Palette":
        """Inverse of :meth:`to_dict`. Raises KeyError if a role is missing."""
        return cls(**{
            role: Color(data[role]["r"], data[role]["g"], data[role]["b"], data[role].get("a", 1.0))
            for role in ROLES
        })

    def hex_summary(self) -> str:
        return ", ".join(f"{role}={getattr(self, role).hex}" for role in ROLES)


# Platform system colors (light appearance)
SYSTEM_BLUE = Color.from_rgb8(0, 122, 255)
SYSTEM_MINT = Color.from_rgb8(0, 199, 190)
SYSTEM_PURPLE = Color.from_rgb8(175, 82, 222)
SYSTEM_ORANGE = Color.from_rgb8(255, 149, 0)
SYSTEM_GREEN = Color.from_rgb8(52, 199, 89)
SYSTEM_RED = Color.from_rgb8(255, 59, 48)
SYSTEM_YELLOW = Color.from_rgb8(255, 204, 0)
SYSTEM_PINK = Color.from_rgb8(255, 45, 85)
SYSTEM_INDIGO = Color.from_rgb8(88, 86, 214)
SYSTEM_TEAL = Color.from_rgb8(48, 176, 199)

# Padding order for the unique candidate pool
DEFAULT_SWATCHES: Tuple[Color, ...] = (
    SYSTEM_BLUE,
    SYSTEM_MINT,
    SYSTEM_PURPLE,
    SYSTEM_ORANGE,
    SYSTEM_GREEN,
    SYSTEM_RED,
    SYSTEM_YELLOW,
    SYSTEM_PINK,
    SYSTEM_INDIGO,
    SYSTEM_TEAL,
)

DEFAULT_PALETTE = Palette(
    primary=SYSTEM_BLUE,
    secondary=SYSTEM_MINT,
    accent=SYSTEM_PURPLE,
    background=WHITE,
    text=BLACK,
)


def effective_palette(palette: Optional[Palette]) -> Palette:
    """Palette to theme with for a record that may not have one stored yet."""
    return palette if palette is not None else DEFAULT_PALETTE
