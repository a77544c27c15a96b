# figures/themes/infographic.py
"""
Built-in themes and palettes of the infographic backend.

The backend cannot be queried from Python, so the lists are kept here
statically. Source: getThemes() and getPalettes() of @antv/infographic.
"""

from typing import List, Optional

from . import DiagramPalette, DiagramTheme, to_display_name

BUILTIN_THEMES = ("default", "dark", "hand-drawn")

BUILTIN_PALETTES = ("antv", "spectral")

DEFAULT_THEME = "default"

infographic_themes: List[DiagramTheme] = [
    DiagramTheme(id=theme_id, name=to_display_name(theme_id), is_dark=theme_id == "dark")
    for theme_id in BUILTIN_THEMES
]

infographic_palettes: List[DiagramPalette] = [
    DiagramPalette(id=palette_id, name=to_display_name(palette_id))
    for palette_id in BUILTIN_PALETTES
]


def is_valid_theme(theme: Optional[str]) -> bool:
    return theme in BUILTIN_THEMES


def is_valid_palette(palette: Optional[str]) -> bool:
    return palette in BUILTIN_PALETTES
