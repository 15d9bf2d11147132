"""
Ziekie Palette Schemas
Pydantic models for persisting extracted palettes alongside playlist and song records.
"""
from pydantic import BaseModel, ConfigDict, Field

from ziekie_palette.services.colors.color import Color
from ziekie_palette.services.colors.palette import Palette


class ColorRecord(BaseModel):
    """Single RGBA color with normalized channels."""
    model_config = ConfigDict(frozen=True)

    r: float = Field(..., ge=0.0, le=1.0, description="Red channel [0, 1]")
    g: float = Field(..., ge=0.0, le=1.0, description="Green channel [0, 1]")
    b: float = Field(..., ge=0.0, le=1.0, description="Blue channel [0, 1]")
    a: float = Field(1.0, ge=0.0, le=1.0, description="Alpha channel [0, 1]")

    @classmethod
    def from_color(cls, color: Color) -> "ColorRecord":
        return cls(r=color.red, g=color.green, b=color.blue, a=color.alpha)

    def to_color(self) -> Color:
        return Color(self.r, self.g, self.b, self.a)


class PaletteRecord(BaseModel):
    """Stored five-role palette."""
    model_config = ConfigDict(frozen=True)

    primary: ColorRecord = Field(..., description="Main dominant color")
    secondary: ColorRecord = Field(..., description="Secondary color, distinct from primary")
    accent: ColorRecord = Field(..., description="Bright highlight color")
    background: ColorRecord = Field(..., description="Background color (usually light)")
    text: ColorRecord = Field(..., description="Text color, black or white for contrast")

    @classmethod
    def from_palette(cls, palette: Palette) -> "PaletteRecord":
        return cls(
            primary=ColorRecord.from_color(palette.primary),
            secondary=ColorRecord.from_color(palette.secondary),
            accent=ColorRecord.from_color(palette.accent),
            background=ColorRecord.from_color(palette.background),
            text=ColorRecord.from_color(palette.text),
        )

    def to_palette(self) -> Palette:
        return Palette(
            primary=self.primary.to_color(),
            secondary=self.secondary.to_color(),
            accent=self.accent.to_color(),
            background=self.background.to_color(),
            text=self.text.to_color(),
        )
