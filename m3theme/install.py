"""
Theme installation and live GTK refresh.

GTK applications only reload gtk.css when the theme name changes, so the
stylesheet is written to two themes and the desktop is switched to the
temporary one and back. Switching between our own themes avoids the
flicker of going through Adwaita.
"""

import asyncio
import os
import shutil
import sys
from pathlib import Path
from typing import Optional

from .color import Color
from .gtk import render_index_theme

DEFAULT_THEME_NAME = "OmarchyTheme"
TEMP_SUFFIX = "Temp"


class ThemeInstallError(OSError):
    """Raised when theme files cannot be written."""
    pass


def get_themes_dir() -> Path:
    # 1. project-specific override
    if value := os.environ.get("M3THEME_THEMES_DIR"):
        return Path(value).expanduser()

    # 2. fallback
    return Path.home() / ".themes"


def write_theme(themes_dir: Path, name: str, css: str, seed: Color, comment: str = "Material 3 Theme") -> Path:
    """
    Write <themes_dir>/<name>/gtk-3.0/gtk.css and index.theme.

    Returns:
        Path of the written gtk.css

    Raises:
        ThemeInstallError: directory or file could not be written
    """
    theme_dir = themes_dir / name
    gtk_css = theme_dir / "gtk-3.0" / "gtk.css"

    try:
        gtk_css.parent.mkdir(parents=True, exist_ok=True)
        gtk_css.write_text(css)
        (theme_dir / "index.theme").write_text(render_index_theme(name, seed, comment))
    except OSError as e:
        raise ThemeInstallError(f"Failed to write theme {name} in {themes_dir}: {e}") from e

    return gtk_css


async def run_command(*args) -> bool:
    process = await asyncio.create_subprocess_exec(
        *args, stdout=asyncio.subprocess.PIPE, stderr=asyncio.subprocess.PIPE
    )
    _, stderr = await process.communicate()
    if process.returncode != 0:
        print(f"Warning: {' '.join(args)} failed: {stderr.decode().strip()}", file=sys.stderr)
        return False
    return True


async def switch_gtk_theme(name: str) -> bool:
    """Set the desktop GTK theme via gsettings, or dconf when gsettings is missing."""
    if shutil.which("gsettings"):
        return await run_command("gsettings", "set", "org.gnome.desktop.interface", "gtk-theme", name)

    if shutil.which("dconf"):
        return await run_command("dconf", "write", "/org/gnome/desktop/interface/gtk-theme", f"'{name}'")

    print("No gsettings or dconf found, skip GTK theme switch", file=sys.stderr)
    return False


async def apply_theme(
    css: str,
    seed: Color,
    variant_name: str,
    name: str = DEFAULT_THEME_NAME,
    themes_dir: Optional[Path] = None,
    delay: float = 1.0
) -> bool:
    """
    Install the stylesheet and make the desktop reload it.

    Returns:
        True if both theme switches succeeded
    """
    if themes_dir is None:
        themes_dir = get_themes_dir()

    temp_name = f"{name}{TEMP_SUFFIX}"
    write_theme(themes_dir, temp_name, css, seed, comment="Material 3 Theme Temp")
    write_theme(themes_dir, name, css, seed)

    print(f"Material 3 theme created with RGB({seed.r},{seed.g},{seed.b})")
    print(f"   Variant: {variant_name}")
    print(f"   Seed color: {seed.to_hex()}")
    print(f"Themes saved to {themes_dir / name} and {themes_dir / temp_name}")

    print("Triggering theme reload...")
    switched_temp = await switch_gtk_theme(temp_name)

    # Let the desktop register the first switch
    await asyncio.sleep(delay)

    switched_main = await switch_gtk_theme(name)

    print("Chrome should now display with your Material 3 colors!")
    print("\nTo use this theme permanently, make sure 'Use GTK+ theme' is enabled")
    print("in chrome://settings/appearance")
    return switched_temp and switched_main
