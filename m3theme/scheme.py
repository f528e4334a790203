"""
Palette generation from a seed color.

ChromePalette holds the six tonal palettes a theme is built from.
Error is fixed and ignores both seed and variant.
"""

from dataclasses import dataclass

from .color import Color, rgb_to_hct
from .palette import TonalPalette, make_palette
from .variants import Variant, VARIANT_CONFIGS

ERROR_PALETTE = TonalPalette(hue=25.0, chroma=84.0)


@dataclass(frozen=True)
class ChromePalette:
    primary: TonalPalette
    secondary: TonalPalette
    tertiary: TonalPalette
    neutral: TonalPalette
    neutral_variant: TonalPalette
    error: TonalPalette = ERROR_PALETTE

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, variant: Variant = Variant.TONAL_SPOT) -> "ChromePalette":
        """Derive all six palettes from the seed's hue."""
        hue = rgb_to_hct(r, g, b).hue
        config = VARIANT_CONFIGS[variant]

        return cls(
            primary=make_palette(hue, config.primary),
            secondary=make_palette(hue, config.secondary),
            tertiary=make_palette(hue, config.tertiary),
            neutral=make_palette(hue, config.neutral),
            neutral_variant=make_palette(hue, config.neutral_variant),
        )

    def roles(self) -> dict[str, TonalPalette]:
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "tertiary": self.tertiary,
            "neutral": self.neutral,
            "neutral_variant": self.neutral_variant,
            "error": self.error,
        }


def generate_palette(seed: Color, variant: Variant = Variant.TONAL_SPOT) -> ChromePalette:
    return ChromePalette.from_rgb(seed.r, seed.g, seed.b, variant)
