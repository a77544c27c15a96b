"""Helpers shared by the test modules."""

# Source of the flowchart used across tests, and its HTML-escaped form
MERMAID_SOURCE = "flowchart TD\nA-->B"
MERMAID_SOURCE_HTML = "flowchart TD\nA--&gt;B"

INFOGRAPHIC_SOURCE = "infographic list-row-simple-horizontal-arrow\ndata\n  items\n    - label Step 1"

# What the infographic SSR renderer returns: the SVG inside an envelope
INFOGRAPHIC_ENVELOPE = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<?xml-stylesheet href="infographic.css" type="text/css"?>\n'
    '<svg xmlns="http://www.w3.org/2000/svg" width="720" height="360" style="background:#fff">\n'
    '  <g><rect width="10" height="10"></rect></g>\n'
    "</svg>\n"
)


def code_block(source: str, cls: str = "language-mermaid") -> str:
    """A fenced block as the markdown converter emits it."""
    return f'<pre><code class="{cls}">{source}</code></pre>'
