# figures/markdown/postprocessors/code_block_classes.py
"""
Postprocessor that puts the language class of fenced code blocks on <code>.

Pandoc marks a fenced block's language on the <pre> element:

    <pre class="mermaid"><code>flowchart TD</code></pre>

while the diagram renderers look for the CommonMark convention of a
``language-*`` class on the <code> element. This postprocessor rewrites the
first form into:

    <pre class="mermaid"><code class="language-mermaid">flowchart TD</code></pre>

Blocks whose <code> already carries a ``language-*`` class are left alone.
"""

from bs4 import Tag

from .utils import get_shared_soup, soup_to_html

# Classes pandoc adds to highlighted blocks that are not language names
PANDOC_CODE_CLASSES = {"sourceCode", "numberSource", "numberLines"}


def code_block_classes(html: str, context: dict) -> str:
    """
    Copy the language class of each <pre> onto its <code> child.

    Args:
        html: HTML string to process
        context: Context dictionary (used for the shared soup cache)

    Returns:
        Processed HTML
    """
    soup = get_shared_soup(html, context)

    for pre in soup.find_all("pre"):
        code = pre.find("code", recursive=False)
        if not isinstance(code, Tag):
            continue

        code_classes = code.get("class", [])
        if any(cls.startswith("language-") for cls in code_classes):
            continue

        languages = [cls for cls in pre.get("class", []) if cls not in PANDOC_CODE_CLASSES]
        if not languages:
            continue

        code["class"] = list(code_classes) + [f"language-{languages[0]}"]

    return soup_to_html(context, soup)


def code_block_classes_default(html: str, context: dict) -> str:
    """Default instance of the code block class postprocessor"""
    return code_block_classes(html, context)
