"""
Theme token generation.

Turns a seed color and a variant name into the named hex colors the GTK
stylesheet uses. Chrome draws its toolbar from the neutral palette
(kColorSysBase, neutral tone 98), so "base" and "on_base" come from
Neutral rather than Primary.

Supported variant names:
- tonal_spot: Default Material You scheme (also used for unknown names)
- vibrant: High-chroma primary with hue-dependent accent rotation
- expressive: Primary rotated -90 degrees, wide accent rotation
- neutral: Low chroma everywhere
- monochrome: Alias for neutral
"""

from .color import Color
from .scheme import ChromePalette, generate_palette
from .variants import Variant

VARIANT_NAMES = ["tonal_spot", "vibrant", "expressive", "neutral", "monochrome"]

_VARIANT_ALIASES = {
    "tonal_spot": Variant.TONAL_SPOT,
    "vibrant": Variant.VIBRANT,
    "expressive": Variant.EXPRESSIVE,
    "neutral": Variant.NEUTRAL,
    "monochrome": Variant.NEUTRAL,
}


def resolve_variant(name: str) -> Variant:
    """Map a CLI variant name to a Variant, defaulting to tonal spot."""
    key = name.strip().lower().replace("-", "_")
    return _VARIANT_ALIASES.get(key, Variant.TONAL_SPOT)


def substitute_black(seed: Color) -> Color:
    """Chrome replaces pure black with near-black to avoid pink tones."""
    if seed.r == 0 and seed.g == 0 and seed.b == 0:
        return Color(1, 1, 1, 255)
    return seed


def light_scheme(palette: ChromePalette) -> dict[str, str]:
    """
    Light-mode token map used by the GTK stylesheet.

    Args:
        palette: Generated tonal palettes

    Returns:
        Dictionary of color token names to hex values
    """
    primary = palette.primary
    neutral = palette.neutral
    neutral_variant = palette.neutral_variant

    return {
        # Primary
        "primary": primary.tone(40).to_hex(),
        "on_primary": primary.tone(100).to_hex(),
        "primary_container": primary.tone(90).to_hex(),
        "on_primary_container": primary.tone(10).to_hex(),
        "primary_80": primary.tone(80).to_hex(),
        "primary_90": primary.tone(90).to_hex(),
        # Browser frame
        "base": neutral.tone(98).to_hex(),
        "on_base": neutral.tone(10).to_hex(),
        # Surface
        "surface": neutral.tone(99).to_hex(),
        "on_surface": neutral.tone(10).to_hex(),
        "surface_variant": neutral_variant.tone(90).to_hex(),
        "on_surface_variant": neutral_variant.tone(30).to_hex(),
        "outline_variant": neutral_variant.tone(80).to_hex(),
    }


def generate_theme(seed: Color, variant_name: str = "tonal_spot") -> dict[str, str]:
    """Seed color and variant name to the light token map."""
    seed = substitute_black(seed)
    palette = generate_palette(seed, resolve_variant(variant_name))
    return light_scheme(palette)
