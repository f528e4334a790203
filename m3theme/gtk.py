"""
GTK 3 stylesheet and index.theme rendering.

Chrome picks up GTK colors when "Use GTK+ theme" is enabled, so the rules
target both regular GTK widgets and the selectors Chrome's frame uses.
"""

from datetime import datetime
from string import Template
from typing import Optional

from .color import Color
from .theme import generate_theme, substitute_black

GTK_CSS_TEMPLATE = Template("""\
/*
 * Material 3 GTK Theme - Auto-generated using Material Color Utilities
 * Seed: RGB($seed_r,$seed_g,$seed_b)
 * Variant: $variant
 * Generated: $generated
 *
 * This theme uses Google's Material Design 3 color system
 * with proper HCT color space calculations for harmonious colors
 */

/* Base window styling */
window {
    background-color: $surface;      /* Material 3 surface */
    color: $on_surface;                  /* Material 3 on-surface */
    background-image: none;
}

/* Header bar - Chrome uses neutral base (tone 98) for toolbar */
headerbar {
    background-color: $base;       /* Chrome kColorSysBase (neutral98) */
    color: $on_base;                  /* Chrome kColorSysOnBase (neutral10) */
    background-image: none;
    border-color: $primary;           /* Primary accent for borders */
}

/* Button styling - Chrome uses light base with primary accents */
button {
    background-color: $base;       /* Light base background */
    color: $on_base;                  /* Dark text */
    background-image: none;
    border-color: $primary;           /* Primary accent border */
    border-radius: 4px;
}

button:hover {
    background-color: $primary_container;       /* Primary container on hover */
    color: $on_primary_container;                  /* On primary container */
    background-image: none;
}

button:active {
    background-color: $primary;       /* Primary accent when pressed */
    color: $on_primary;                  /* White on primary */
    background-image: none;
}

/* Entry fields - Chrome uses for address bar and input styling */
entry {
    background-color: $surface_variant;       /* Material 3 surface variant */
    color: $on_surface;                  /* Material 3 on-surface */
    border-color: $primary;           /* Material 3 primary */
    background-image: none;
}

entry:focus {
    border-color: $primary_80;           /* Material 3 primary (tone 80) */
    box-shadow: 0 0 0 1px $primary;
}

/* Chrome-targeted selectors */
.titlebar {
    background-color: $base;       /* Chrome neutral base */
    color: $on_base;                  /* Chrome on-base */
    background-image: none;
}

/* Menu and toolbar styling - match Chrome's light base */
menubar {
    background-color: $base;       /* Chrome neutral base */
    color: $on_base;                  /* Chrome on-base */
    background-image: none;
}

toolbar {
    background-color: $base;       /* Chrome neutral base */
    color: $on_base;                  /* Chrome on-base */
    background-image: none;
}

/* Selection colors */
selection {
    background-color: $primary_container;       /* Material 3 primary container */
    color: $on_primary_container;                  /* Material 3 on-primary container */
}

/* Scrollbar styling */
scrollbar {
    background-color: $surface;       /* Material 3 surface */
}

scrollbar slider {
    background-color: $outline_variant;       /* Material 3 outline variant */
    border-radius: 8px;
}

scrollbar slider:hover {
    background-color: $primary;       /* Material 3 primary */
}

/* Tab styling - important for Chrome tabs */
notebook {
    background-color: $surface;       /* Material 3 surface */
}

notebook header {
    background-color: $primary;       /* Material 3 primary */
    background-image: none;
}

notebook tab {
    background-color: $surface_variant;       /* Material 3 surface variant */
    color: $on_surface_variant;                  /* Material 3 on-surface variant */
    background-image: none;
}

notebook tab:checked {
    background-color: $primary_container;       /* Material 3 primary container */
    color: $on_primary_container;                  /* Material 3 on-primary container */
    background-image: none;
}

/* Chrome-specific Material 3 additions */
headerbar.titlebar {
    background-color: $base;       /* Chrome neutral base for frame */
}

/* Use Material 3 tones for inactive elements */
.tab:not(:checked) {
    background-color: $primary_90;       /* Material 3 primary tone 90 */
    color: $on_surface;                  /* Material 3 on-surface */
}

/* Ensure all backgrounds are solid colors */
* {
    background-image: none;
}
""")

INDEX_THEME_TEMPLATE = Template("""\
[Desktop Entry]
Type=X-GNOME-Metatheme
Name=$name
Comment=$comment - RGB($seed_r,$seed_g,$seed_b)
Encoding=UTF-8

[X-GNOME-Metatheme]
GtkTheme=$name
IconTheme=Adwaita
CursorTheme=Adwaita
""")


def format_timestamp(moment: datetime) -> str:
    """Format like `date`: Mon Jan 2 15:04:05 MST 2006."""
    zone = moment.strftime("%Z") or "UTC"
    return f"{moment:%a %b} {moment.day} {moment:%H:%M:%S} {zone} {moment.year}"


def render_gtk_css(
    seed: Color,
    variant_name: str,
    tokens: dict[str, str],
    generated: Optional[datetime] = None
) -> str:
    """
    Render the GTK 3 stylesheet.

    Args:
        seed: Seed color shown in the header (after black substitution)
        variant_name: Variant name as requested, shown in the header
        tokens: Token map from theme.light_scheme()
        generated: Timestamp for the header (now if omitted)

    Returns:
        CSS text
    """
    if generated is None:
        generated = datetime.now().astimezone()

    return GTK_CSS_TEMPLATE.substitute(
        tokens,
        seed_r=seed.r,
        seed_g=seed.g,
        seed_b=seed.b,
        variant=variant_name,
        generated=format_timestamp(generated),
    )


def render_index_theme(name: str, seed: Color, comment: str = "Material 3 Theme") -> str:
    return INDEX_THEME_TEMPLATE.substitute(
        name=name,
        comment=comment,
        seed_r=seed.r,
        seed_g=seed.g,
        seed_b=seed.b,
    )


def generate_gtk_theme(seed: Color, variant_name: str = "tonal_spot", generated: Optional[datetime] = None) -> str:
    """Seed color to complete gtk.css text."""
    seed = substitute_black(seed)
    tokens = generate_theme(seed, variant_name)
    return render_gtk_css(seed, variant_name, tokens, generated)
