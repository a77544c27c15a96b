# figures/markdown/postprocessors/__init__.py

from .code_block_classes import code_block_classes_default
from .diagram_renderer import diagram_renderer_default
from .sanitizer import sanitize_html

POSTPROCESSORS = [
    sanitize_html,
    code_block_classes_default,  # Move pandoc's <pre> language class onto <code>
    diagram_renderer_default,  # Render mermaid/infographic blocks to inline SVG
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
