"""
Tonal palettes and the per-role transforms that derive them from a seed hue.

A transform either applies fixed values or looks them up in a table of
(reference hue, value) pairs. Lookups pick the reference hue with the
smallest plain arithmetic distance to the seed hue (0 and 360 are
separate breakpoints, there is no wrap-around). Tables are tuples so
ties always resolve to the first declared entry.
"""

from dataclasses import dataclass
from typing import Optional

from .color import Color, Hct, hct_to_rgb, sanitize_degrees

# Ordered (reference hue, value) pairs
HueTable = tuple[tuple[float, float], ...]


@dataclass(frozen=True)
class TonalPalette:
    """A fixed hue/chroma locus queried at any tone."""
    hue: float
    chroma: float

    def tone(self, tone: int) -> Color:
        """
        Color at the given tone (0-100).

        Tones outside 0-100 are not rejected; they run through the same
        conversion and end up clamped per channel.
        """
        return hct_to_rgb(Hct(hue=self.hue, chroma=self.chroma, tone=float(tone)))


@dataclass(frozen=True)
class Transform:
    """How one role's hue and chroma follow from the seed hue."""
    hue_rotation: float = 0.0
    chroma: float = 0.0
    hues_to_rotations: Optional[HueTable] = None
    hues_to_chroma: Optional[HueTable] = None


def nearest_value(source_hue: float, table: HueTable) -> float:
    """Value of the breakpoint closest to source_hue."""
    if len(table) == 1:
        return table[0][1]

    best_value = 0.0
    min_diff = 360.0
    for hue, value in table:
        diff = abs(source_hue - hue)
        if diff < min_diff:
            min_diff = diff
            best_value = value

    return best_value


def rotated_hue(source_hue: float, hues_to_rotations: HueTable) -> float:
    return sanitize_degrees(source_hue + nearest_value(source_hue, hues_to_rotations))


def adjusted_chroma(source_hue: float, hues_to_chroma: HueTable) -> float:
    return nearest_value(source_hue, hues_to_chroma)


def make_palette(hue: float, transform: Transform) -> TonalPalette:
    """Apply a transform to the seed hue."""
    # Chroma is looked up against the seed hue before any rotation
    chroma = transform.chroma
    if transform.hues_to_chroma is not None:
        chroma = adjusted_chroma(hue, transform.hues_to_chroma)

    if transform.hues_to_rotations is not None:
        hue = rotated_hue(hue, transform.hues_to_rotations)
    else:
        hue = sanitize_degrees(hue + transform.hue_rotation)

    return TonalPalette(hue=hue, chroma=chroma)
