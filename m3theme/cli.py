"""
m3theme - Material 3 GTK theme generator.

Derives a Material 3 palette from a single seed color and writes it as a
GTK 3 stylesheet that Chrome (with "Use GTK+ theme") picks up.

Supported variants:
- tonal_spot: Default Material You scheme (recommended)
- vibrant: High-chroma primary, hue-dependent accent rotation
- expressive: Primary rotated -90 degrees, playful accents
- neutral: Low chroma, almost grayscale
- monochrome: Same as neutral

Usage:
    m3theme [OPTIONS] R,G,B

Example:
    m3theme 28,32,39
    m3theme --variant vibrant --apply 255,0,0
    m3theme 28,32,39 -o ~/.themes/Custom/gtk-3.0/gtk.css
    m3theme 28,32,39 --json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from .color import parse_rgb, SeedColorError
from .gtk import generate_gtk_theme
from .install import apply_theme, DEFAULT_THEME_NAME, ThemeInstallError
from .theme import generate_theme, VARIANT_NAMES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='m3theme',
        description='Generate a Material 3 GTK theme from a seed color',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  m3theme 28,32,39                              # tonal_spot (default), CSS to stdout
  m3theme --variant vibrant --apply 255,0,0     # install and switch GTK theme
  m3theme 28,32,39 -o gtk.css                   # write CSS to file
  m3theme 28,32,39 --json                       # print token map as JSON
        """
    )

    parser.add_argument(
        'rgb_arg',
        nargs='?',
        metavar='R,G,B',
        help='Seed color as R,G,B (e.g., 28,32,39)'
    )

    parser.add_argument(
        '--rgb',
        help='Seed color as R,G,B (takes precedence over the positional value)'
    )

    parser.add_argument(
        '--variant',
        choices=VARIANT_NAMES,
        default='tonal_spot',
        help='Material 3 variant (default: tonal_spot)'
    )

    parser.add_argument(
        '--output', '-o',
        type=Path,
        help='Write CSS to file (stdout if omitted)'
    )

    parser.add_argument(
        '--apply',
        action='store_true',
        help='Install the theme under ~/.themes and switch GTK to it via gsettings'
    )

    parser.add_argument(
        '--theme-name',
        default=DEFAULT_THEME_NAME,
        help=f'Theme name used with --apply (default: {DEFAULT_THEME_NAME})'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the color token map as JSON instead of CSS'
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    rgb_input = args.rgb or args.rgb_arg
    if not rgb_input:
        parser.print_usage(sys.stderr)
        print("\nExample: m3theme 28,32,39", file=sys.stderr)
        print("         m3theme --variant vibrant --apply 255,0,0", file=sys.stderr)
        return 1

    try:
        seed = parse_rgb(rgb_input)
    except SeedColorError as e:
        print(f"Error parsing RGB: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(generate_theme(seed, args.variant), indent=2))
        return 0

    css = generate_gtk_theme(seed, args.variant)

    if args.output:
        try:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(css)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
        print(f"Theme written to {args.output}")
    elif not args.apply:
        print(css, end='')

    if args.apply:
        try:
            asyncio.run(apply_theme(css, seed, args.variant, args.theme_name))
        except ThemeInstallError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
