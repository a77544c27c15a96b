# figures/markdown/postprocessors/sanitizer.py

import logging
from functools import lru_cache

import bleach

logger = logging.getLogger(__name__)


GLOBAL_ATTRIBUTES = {"class", "id", "title"}
GLOBAL_ATTRIBUTE_PREFIXES = ("data-", "aria-")


def _allow_global_attribute(tag, name, value):
    # bleach matches attribute lists by exact name, so prefixes need a callable
    return name in GLOBAL_ATTRIBUTES or name.startswith(GLOBAL_ATTRIBUTE_PREFIXES)


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache bleach configuration for better performance."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "div",
            "span",
            "section",
            "sup",
            "sub",
            "del",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "ol",
            "li",
            "hr",
            "dl",
            "dt",
            "dd",
            # code (diagram sources arrive as pre/code)
            "pre",
            "code",
            # tables
            "table",
            "thead",
            "tbody",
            "tr",
            "th",
            "td",
            # media and figures
            "img",
            "figure",
            "figcaption",
            # forms (for task lists)
            "input",
        }
    )

    allowed_attrs = {
        "*": _allow_global_attribute,
        "a": ["href", "title", "rel", "target"],
        "img": ["src", "alt", "title", "width", "height", "loading"],
        "code": ["class"],
        "pre": ["class"],
        # rendered diagrams and their error state
        "figure": ["class", "data-error"],
        "th": ["colspan", "rowspan", "scope"],
        "td": ["colspan", "rowspan"],
        "input": ["type", "checked", "disabled"],
        "ol": ["start", "type", "class"],
    }

    allowed_protocols = ["http", "https", "mailto", "tel"]

    return allowed_tags, allowed_attrs, allowed_protocols


def sanitize_html(html, context):
    """
    Sanitize converter output using bleach.

    This is the FIRST post-processor. Diagram figures are produced after it
    runs, so the allow-list only needs the code blocks they are made from
    and the figure vocabulary for documents that are re-sanitized later.
    """
    allowed_tags, allowed_attrs, allowed_protocols = _get_bleach_config()

    try:
        return bleach.clean(
            html,
            tags=allowed_tags,
            attributes=allowed_attrs,
            protocols=allowed_protocols,
            strip=False,  # Escape disallowed tags instead of dropping their text
        )
    except Exception as e:
        logger.error(f"Bleach sanitization failed: {e}", exc_info=True)
        return html
