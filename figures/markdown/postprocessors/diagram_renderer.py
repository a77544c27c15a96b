# figures/markdown/postprocessors/diagram_renderer.py
"""
Postprocessor that renders diagram code blocks into inline SVG figures.

Runs every configured diagram plugin (mermaid, infographic) over one shared
soup. Options are read from the render context first and fall back to the
project settings:

    context key            setting
    mermaid_theme          FIGURES_MERMAID_THEME
    infographic_theme      FIGURES_INFOGRAPHIC_THEME
    infographic_palette    FIGURES_INFOGRAPHIC_PALETTE

This must run after sanitize_html: the sanitizer's allow-list only covers
inline icons, not arbitrary generated SVG.
"""

import asyncio
from dataclasses import replace

from asgiref.sync import async_to_sync

from figures.conf import get_setting

from .infographic_renderer import InfographicOptions, infographic_config
from .mermaid_renderer import MermaidOptions, mermaid_config
from .svg_renderer import create_svg_renderer_plugin
from .utils import get_shared_soup, soup_to_html


def _mermaid_options(context: dict) -> MermaidOptions:
    return MermaidOptions(
        theme=context.get("mermaid_theme", get_setting("FIGURES_MERMAID_THEME")),
    )


def _infographic_options(context: dict) -> InfographicOptions:
    return InfographicOptions(
        theme=context.get("infographic_theme", get_setting("FIGURES_INFOGRAPHIC_THEME")),
        palette=context.get("infographic_palette", get_setting("FIGURES_INFOGRAPHIC_PALETTE")),
    )


# (backend config, options builder) pairs, one per diagram language
DIAGRAM_RENDERERS = [
    (mermaid_config, _mermaid_options),
    (infographic_config, _infographic_options),
]


async def render_diagrams(html: str, context: dict) -> str:
    """
    Replace diagram code blocks in ``html`` with rendered figures.

    Blocks of all languages render concurrently; the coroutine returns once
    every block holds either its figure or an error figure.
    """
    soup = get_shared_soup(html, context)
    timeout = get_setting("FIGURES_RENDER_TIMEOUT")

    transformers = [
        create_svg_renderer_plugin(replace(config, timeout=timeout))(build_options(context))
        for config, build_options in DIAGRAM_RENDERERS
    ]
    await asyncio.gather(*(transformer(soup) for transformer in transformers))

    return soup_to_html(context, soup)


def diagram_renderer_default(html: str, context: dict) -> str:
    """
    Default instance of the diagram renderer postprocessor.

    Synchronous like the other postprocessors; asgiref runs the coroutine,
    so it must not be called from inside a running event loop.
    """
    return async_to_sync(render_diagrams)(html, context)
