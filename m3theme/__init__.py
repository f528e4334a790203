"""
Material 3 palette derivation and GTK theme generation.

This package provides:
- color: RGB <-> HCT conversion (HSV-based approximation)
- palette: Tonal palettes and per-role transforms
- variants: Tonal spot, vibrant, neutral and expressive presets
- scheme: Palette generation from a seed color
- theme: Named color tokens for the GTK stylesheet
- gtk: gtk.css and index.theme rendering
- install: Theme installation and live GTK refresh
"""

from .color import Color, Hct, SeedColorError, parse_rgb, rgb_to_hct, hct_to_rgb, sanitize_degrees
from .palette import TonalPalette, Transform, make_palette, nearest_value, rotated_hue, adjusted_chroma
from .variants import Variant, VariantConfig, VARIANT_CONFIGS
from .scheme import ChromePalette, ERROR_PALETTE, generate_palette
from .theme import generate_theme, light_scheme, resolve_variant, substitute_black, VARIANT_NAMES
from .gtk import generate_gtk_theme, render_gtk_css, render_index_theme
from .install import apply_theme, get_themes_dir, write_theme, switch_gtk_theme, ThemeInstallError

__all__ = [
    # Color
    'Color', 'Hct', 'SeedColorError', 'parse_rgb', 'rgb_to_hct', 'hct_to_rgb', 'sanitize_degrees',
    # Palette
    'TonalPalette', 'Transform', 'make_palette', 'nearest_value', 'rotated_hue', 'adjusted_chroma',
    # Variants
    'Variant', 'VariantConfig', 'VARIANT_CONFIGS',
    # Scheme
    'ChromePalette', 'ERROR_PALETTE', 'generate_palette',
    # Theme
    'generate_theme', 'light_scheme', 'resolve_variant', 'substitute_black', 'VARIANT_NAMES',
    # GTK
    'generate_gtk_theme', 'render_gtk_css', 'render_index_theme',
    # Install
    'apply_theme', 'get_themes_dir', 'write_theme', 'switch_gtk_theme', 'ThemeInstallError',
]
