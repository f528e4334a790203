"""
Variant presets for palette generation.

Values match Chromium's palette_factory.cc configurations.
"""

from dataclasses import dataclass
from enum import Enum

from .palette import HueTable, Transform


class Variant(Enum):
    TONAL_SPOT = "tonal_spot"
    VIBRANT = "vibrant"
    NEUTRAL = "neutral"
    EXPRESSIVE = "expressive"


@dataclass(frozen=True)
class VariantConfig:
    primary: Transform
    secondary: Transform
    tertiary: Transform
    neutral: Transform
    neutral_variant: Transform


def _table(hues: tuple[float, ...], values: tuple[float, ...]) -> HueTable:
    return tuple(zip(hues, values))


VIBRANT_HUES = (0, 41, 61, 101, 131, 181, 251, 301, 360)
VIBRANT_SECONDARY_ROTATIONS = _table(VIBRANT_HUES, (18, 15, 10, 12, 15, 18, 15, 12, 12))
VIBRANT_TERTIARY_ROTATIONS = _table(VIBRANT_HUES, (35, 30, 20, 25, 30, 35, 30, 25, 25))

EXPRESSIVE_HUES = (0, 21, 51, 121, 151, 191, 271, 321, 360)
EXPRESSIVE_SECONDARY_ROTATIONS = _table(EXPRESSIVE_HUES, (45, 95, 45, 20, 45, 90, 45, 45, 45))
EXPRESSIVE_TERTIARY_ROTATIONS = _table(EXPRESSIVE_HUES, (120, 120, 20, 45, 20, 15, 20, 120, 120))

NEUTRAL_PRIMARY_CHROMA = _table((0, 260, 315, 360), (12.0, 12.0, 20.0, 12.0))


VARIANT_CONFIGS: dict[Variant, VariantConfig] = {
    Variant.TONAL_SPOT: VariantConfig(
        primary=Transform(chroma=40.0),
        secondary=Transform(chroma=16.0),
        tertiary=Transform(hue_rotation=60.0, chroma=24.0),
        neutral=Transform(chroma=6.0),
        neutral_variant=Transform(chroma=8.0),
    ),
    Variant.VIBRANT: VariantConfig(
        primary=Transform(chroma=200.0),
        secondary=Transform(chroma=24.0, hues_to_rotations=VIBRANT_SECONDARY_ROTATIONS),
        tertiary=Transform(chroma=32.0, hues_to_rotations=VIBRANT_TERTIARY_ROTATIONS),
        neutral=Transform(chroma=8.0),
        neutral_variant=Transform(chroma=12.0),
    ),
    Variant.NEUTRAL: VariantConfig(
        primary=Transform(hues_to_chroma=NEUTRAL_PRIMARY_CHROMA),
        secondary=Transform(chroma=8.0),
        tertiary=Transform(chroma=16.0),
        neutral=Transform(chroma=2.0),
        neutral_variant=Transform(chroma=2.0),
    ),
    Variant.EXPRESSIVE: VariantConfig(
        primary=Transform(hue_rotation=-90.0, chroma=40.0),
        secondary=Transform(chroma=24.0, hues_to_rotations=EXPRESSIVE_SECONDARY_ROTATIONS),
        tertiary=Transform(chroma=32.0, hues_to_rotations=EXPRESSIVE_TERTIARY_ROTATIONS),
        neutral=Transform(chroma=8.0),
        neutral_variant=Transform(chroma=12.0),
    ),
}
