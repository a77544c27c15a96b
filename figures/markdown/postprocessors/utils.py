# figures/markdown/postprocessors/utils.py
"""Utilities to share one BeautifulSoup tree between postprocessors."""

from __future__ import annotations

from bs4 import BeautifulSoup

_SHARED_SOUP_KEY = "__shared_soup"
_SHARED_SOURCE_KEY = "__shared_soup_source"


def get_shared_soup(html: str, context: dict) -> BeautifulSoup:
    """Return the cached soup for ``html``, parsing it if needed.

    The soup is cached in the render context together with the HTML it was
    parsed from. A postprocessor that returns a string not produced by
    ``soup_to_html`` (e.g. the sanitizer) invalidates the cache, and the
    next caller parses afresh.
    """
    soup = context.get(_SHARED_SOUP_KEY)
    source = context.get(_SHARED_SOURCE_KEY)
    if soup is None or source != html:
        soup = BeautifulSoup(html, "html.parser")
        context[_SHARED_SOUP_KEY] = soup
        context[_SHARED_SOURCE_KEY] = html
    return soup


def soup_to_html(context: dict, soup: BeautifulSoup | None = None) -> str:
    """Serialise the shared soup back to HTML and update the cache."""
    if soup is None:
        soup = context.get(_SHARED_SOUP_KEY)
    html = str(soup) if soup is not None else ""
    context[_SHARED_SOURCE_KEY] = html
    context[_SHARED_SOUP_KEY] = soup
    return html


def clear_shared_soup(context: dict) -> None:
    """Drop the cached soup, e.g. before handing the context to templates."""
    context.pop(_SHARED_SOUP_KEY, None)
    context.pop(_SHARED_SOURCE_KEY, None)
