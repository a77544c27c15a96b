# figures/themes/mermaid.py
"""
Colour themes understood by the mermaid backend.

The keys are the theme names accepted by beautiful-mermaid; the colours are
forwarded to the renderer unchanged. An empty theme id means "no override":
the backend's own default colours apply.
"""

from typing import Dict, List, Optional

from . import DiagramTheme, to_display_name

THEMES: Dict[str, Dict[str, str]] = {
    "zinc-light": {"bg": "#ffffff", "fg": "#27272a"},
    "zinc-dark": {"bg": "#18181b", "fg": "#fafafa"},
    "tokyo-night": {"bg": "#1a1b26", "fg": "#a9b1d6", "accent": "#7aa2f7"},
    "tokyo-night-storm": {"bg": "#24283b", "fg": "#a9b1d6", "accent": "#7aa2f7"},
    "tokyo-night-light": {"bg": "#d5d6db", "fg": "#343b58", "accent": "#34548a"},
    "catppuccin-mocha": {"bg": "#1e1e2e", "fg": "#cdd6f4", "accent": "#cba6f7"},
    "catppuccin-latte": {"bg": "#eff1f5", "fg": "#4c4f69", "accent": "#8839ef"},
    "nord": {"bg": "#2e3440", "fg": "#d8dee9", "accent": "#88c0d0"},
    "nord-light": {"bg": "#eceff4", "fg": "#2e3440", "accent": "#5e81ac"},
    "dracula": {"bg": "#282a36", "fg": "#f8f8f2", "accent": "#bd93f9"},
    "github-light": {"bg": "#ffffff", "fg": "#1f2328", "accent": "#0969da"},
    "github-dark": {"bg": "#0d1117", "fg": "#e6edf3", "accent": "#4493f8"},
    "solarized-light": {"bg": "#fdf6e3", "fg": "#657b83", "accent": "#268bd2"},
    "solarized-dark": {"bg": "#002b36", "fg": "#839496", "accent": "#268bd2"},
    "one-dark": {"bg": "#282c34", "fg": "#abb2bf", "accent": "#61afef"},
}


def is_valid_theme(theme: Optional[str]) -> bool:
    return bool(theme) and theme in THEMES


def get_theme_colors(theme: Optional[str]) -> Optional[Dict[str, str]]:
    """Colours for a known theme, None for anything else."""
    if not is_valid_theme(theme):
        return None
    return THEMES[theme]


def is_dark_theme(colors: Dict[str, str]) -> bool:
    """
    Judge a theme by the relative luminance (ITU-R BT.709) of its background.
    """
    hex_value = colors["bg"].lstrip("#")
    r = int(hex_value[0:2], 16)
    g = int(hex_value[2:4], 16)
    b = int(hex_value[4:6], 16)
    luminance = (0.2126 * r + 0.7152 * g + 0.0722 * b) / 255
    return luminance < 0.5


def _build_theme_list() -> List[DiagramTheme]:
    themes = [DiagramTheme(id="", name="Default", is_dark=False)]
    for theme_id in sorted(THEMES):
        themes.append(
            DiagramTheme(
                id=theme_id,
                name=to_display_name(theme_id),
                is_dark=is_dark_theme(THEMES[theme_id]),
            )
        )
    return themes


# Default entry first, then library themes alphabetically
mermaid_themes: List[DiagramTheme] = _build_theme_list()

mermaid_theme_ids: List[str] = [theme.id for theme in mermaid_themes]
