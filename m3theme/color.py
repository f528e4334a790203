"""
Color primitives and the HSV-based HCT approximation.

The Hct type here is not CAM16: hue is the HSV hue, chroma is HSV
saturation scaled to 120 and tone is HSV value scaled to 100. Output
must stay byte-compatible with the existing themes, so channel values
are truncated, never rounded.
"""

import math
from dataclasses import dataclass

# Saturation 1.0 maps to this chroma
CHROMA_SCALE = 120.0


class SeedColorError(ValueError):
    """Raised when a seed color string cannot be parsed."""
    pass


@dataclass(frozen=True)
class Color:
    """8-bit RGBA color."""
    r: int
    g: int
    b: int
    a: int = 255

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True)
class Hct:
    """Hue (0-360), chroma (0-~200) and tone (0-100)."""
    hue: float
    chroma: float
    tone: float

    def to_rgb(self) -> Color:
        return hct_to_rgb(self)


def parse_rgb(text: str) -> Color:
    """
    Parse an "R,G,B" string into a Color.

    Raises:
        SeedColorError: wrong component count, non-integer or out-of-range value
    """
    parts = text.split(",")
    if len(parts) != 3:
        raise SeedColorError("invalid RGB format. Use R,G,B (e.g., 28,32,39)")

    values = []
    for name, part in zip(("red", "green", "blue"), parts):
        try:
            value = int(part.strip())
        except ValueError:
            raise SeedColorError(f"invalid {name} value: {part}") from None
        if value < 0 or value > 255:
            raise SeedColorError(f"invalid {name} value: {part}")
        values.append(value)

    return Color(*values)


def rgb_to_hct(r: int, g: int, b: int) -> Hct:
    """Convert 8-bit RGB to Hct through HSV."""
    rf = r / 255.0
    gf = g / 255.0
    bf = b / 255.0

    max_c = max(rf, gf, bf)
    min_c = min(rf, gf, bf)
    delta = max_c - min_c

    if delta == 0:
        hue = 0.0
    elif max_c == rf:
        hue = 60 * math.fmod((gf - bf) / delta, 6)
    elif max_c == gf:
        hue = 60 * ((bf - rf) / delta + 2)
    else:
        hue = 60 * ((rf - gf) / delta + 4)

    if hue < 0:
        hue += 360

    saturation = delta / max_c if max_c != 0 else 0.0

    return Hct(hue=hue, chroma=saturation * CHROMA_SCALE, tone=max_c * 100.0)


def _to_channel(value: float) -> int:
    # int() truncates toward zero; clamp keeps out-of-range tones valid
    return min(max(int(value * 255), 0), 255)


def hct_to_rgb(hct: Hct) -> Color:
    """Convert Hct back to an opaque 8-bit color through HSV."""
    hue = hct.hue
    saturation = min(hct.chroma / CHROMA_SCALE, 1.0)
    value = hct.tone / 100.0

    c = value * saturation
    x = c * (1 - abs(math.fmod(hue / 60.0, 2) - 1))
    m = value - c

    if hue < 60:
        r, g, b = c, x, 0.0
    elif hue < 120:
        r, g, b = x, c, 0.0
    elif hue < 180:
        r, g, b = 0.0, c, x
    elif hue < 240:
        r, g, b = 0.0, x, c
    elif hue < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return Color(_to_channel(r + m), _to_channel(g + m), _to_channel(b + m), 255)


def sanitize_degrees(degrees: float) -> float:
    """Reduce degrees into [0, 360)."""
    degrees = math.fmod(degrees, 360.0)
    if degrees < 0:
        degrees += 360.0
    return degrees
