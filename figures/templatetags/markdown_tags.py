# figures/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from figures.markdown.renderer import render_markdown

register = template.Library()

# Template variables forwarded to the diagram renderers
DIAGRAM_CONTEXT_KEYS = ("mermaid_theme", "infographic_theme", "infographic_palette")


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value))


@register.simple_tag(takes_context=True)
def markdown_with_context(context, value):
    """Template tag that passes diagram options from the template context"""
    processor_context = {
        key: context.get(key)
        for key in DIAGRAM_CONTEXT_KEYS
        if context.get(key) is not None
    }
    return mark_safe(render_markdown(value, context=processor_context))
