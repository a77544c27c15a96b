# figures/conf.py
"""
Django settings used by the diagram figures app.

Every setting is optional; a project only needs to override what differs
from the defaults below, e.g. in settings.py:

    FIGURES_NODE_COMMAND = "/usr/local/bin/node"
    FIGURES_MERMAID_THEME = "tokyo-night"
    FIGURES_RENDER_TIMEOUT = 15
"""

from django.conf import settings

DEFAULTS = {
    # Executable used to run the bundled rendering scripts
    "FIGURES_NODE_COMMAND": "node",
    # Site-wide diagram options, overridable per render through the context
    "FIGURES_MERMAID_THEME": "",
    "FIGURES_INFOGRAPHIC_THEME": "default",
    "FIGURES_INFOGRAPHIC_PALETTE": "",
    # Seconds allowed per diagram; None waits for the backend indefinitely
    "FIGURES_RENDER_TIMEOUT": None,
    # Pandoc arguments used by render_markdown
    "FIGURES_PANDOC_EXTRA_ARGS": [
        "--from=markdown+autolink_bare_uris+strikeout+superscript+subscript+task_lists+smart+pipe_tables+grid_tables+definition_lists+footnotes+abbreviations+fenced_code_blocks+fenced_code_attributes+raw_html+header_attributes+implicit_header_references+fancy_lists+tex_math_dollars",
        "--mathjax",
    ],
}


def get_setting(name):
    """Return a FIGURES_* setting, falling back to the module default."""
    if name not in DEFAULTS:
        raise KeyError(f"Unknown figures setting: {name}")
    return getattr(settings, name, DEFAULTS[name])
