# figures/markdown/postprocessors/mermaid_renderer.py
"""
Render ```mermaid code blocks as inline SVG flowcharts.

The backend output is already a bare <svg>, so no extraction step is
needed. The rendered SVG keeps its native height and stretches to at least
the full width of its container.
"""

from dataclasses import dataclass
from typing import Optional

from bs4 import Tag

from figures import backends
from figures.themes.mermaid import get_theme_colors

from .svg_renderer import SvgRendererConfig, create_svg_renderer_plugin


@dataclass(frozen=True)
class MermaidOptions:
    # Key of figures.themes.mermaid.THEMES; anything else keeps backend colours
    theme: Optional[str] = None


def adjust_svg_style(svg_node: Tag) -> None:
    """Drop the fixed width and let the SVG fill its container."""
    existing_style = svg_node.get("style")
    if not isinstance(existing_style, str):
        existing_style = ""

    svg_node.attrs.pop("width", None)

    if existing_style:
        svg_node["style"] = f"{existing_style};min-width:100%;max-width:unset;"
    else:
        svg_node["style"] = "min-width:100%"


async def render(code: str, options: Optional[MermaidOptions] = None) -> str:
    options = options or MermaidOptions()
    return await backends.render_mermaid(code, get_theme_colors(options.theme))


mermaid_config = SvgRendererConfig(
    language_id="mermaid",
    figure_class_name="figure-mermaid",
    render=render,
    adjust_svg_style=adjust_svg_style,
)

mermaid_renderer = create_svg_renderer_plugin(mermaid_config)
