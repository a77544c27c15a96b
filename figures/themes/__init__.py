# figures/themes/__init__.py
"""Theme and palette catalogs for the diagram renderers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DiagramTheme:
    id: str
    name: str
    is_dark: bool = False


@dataclass(frozen=True)
class DiagramPalette:
    id: str
    name: str


def to_display_name(theme_id: str) -> str:
    """'tokyo-night-storm' -> 'Tokyo Night Storm'"""
    return " ".join(word[:1].upper() + word[1:] for word in theme_id.split("-"))
