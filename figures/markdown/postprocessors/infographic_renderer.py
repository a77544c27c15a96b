# figures/markdown/postprocessors/infographic_renderer.py
"""
Render ```infographic code blocks as inline SVG.

Unless the author declares a theme inside the block, the configured theme
(and palette, when one is set) is appended to the syntax before rendering:

    infographic list-row-simple-horizontal-arrow
    data
      items
        - label Step 1
    theme dark
      palette antv

The server-side renderer wraps its SVG in an XML declaration and a
stylesheet reference; only the <svg> element is kept.
"""

import re
from dataclasses import dataclass
from typing import Optional

from bs4 import Tag

from figures import backends
from figures.exceptions import SvgInputError, SvgNotFoundError
from figures.themes.infographic import DEFAULT_THEME, is_valid_palette, is_valid_theme

from .svg_renderer import SvgRendererConfig, create_svg_renderer_plugin

THEME_LINE_PATTERN = re.compile(r"^\s*theme\b")

# Greedy: from the first <svg to the last </svg>
SVG_PATTERN = re.compile(r"<svg[\s\S]*</svg>", re.IGNORECASE)

SVG_STYLE = "max-width:100%;height:auto;visibility:visible;"


@dataclass(frozen=True)
class InfographicOptions:
    theme: Optional[str] = None
    palette: Optional[str] = None


def extract_svg_content(svg_string: str) -> str:
    """
    Strip the SSR envelope and return the bare <svg> markup.

    Raises:
        SvgInputError: If the input is empty or not a string
        SvgNotFoundError: If the input holds no <svg> element
    """
    if not svg_string or not isinstance(svg_string, str):
        raise SvgInputError("Invalid SVG string: empty or non-string input")

    match = SVG_PATTERN.search(svg_string)
    if not match:
        raise SvgNotFoundError("Invalid SVG string: no <svg> element found")

    return match.group(0)


def adjust_svg_style(svg_node: Tag) -> None:
    """Remove fixed dimensions, keep any existing style."""
    existing_style = svg_node.get("style")
    if not isinstance(existing_style, str):
        existing_style = ""

    svg_node.attrs.pop("width", None)
    svg_node.attrs.pop("height", None)

    svg_node["style"] = f"{existing_style};{SVG_STYLE}" if existing_style else SVG_STYLE


def build_syntax(code: str, options: Optional[InfographicOptions] = None) -> str:
    """
    Append the configured theme and palette unless the block sets its own.

    An invalid or missing theme falls back to "default"; an invalid or
    missing palette is left out.
    """
    options = options or InfographicOptions()

    if any(THEME_LINE_PATTERN.match(line) for line in code.split("\n")):
        return code

    theme = options.theme if is_valid_theme(options.theme) else DEFAULT_THEME
    theme_config = [f"theme {theme}"]
    if is_valid_palette(options.palette):
        theme_config.append(f"  palette {options.palette}")

    return code + "\n" + "\n".join(theme_config)


async def render(code: str, options: Optional[InfographicOptions] = None) -> str:
    return await backends.render_infographic(build_syntax(code, options))


infographic_config = SvgRendererConfig(
    language_id="infographic",
    figure_class_name="figure-infographic",
    render=render,
    extract_svg=extract_svg_content,
    adjust_svg_style=adjust_svg_style,
)

infographic_renderer = create_svg_renderer_plugin(infographic_config)
