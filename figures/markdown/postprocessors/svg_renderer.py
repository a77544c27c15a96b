# figures/markdown/postprocessors/svg_renderer.py
"""
Generic SVG renderer plugin for fenced diagram code blocks.

A plugin is built from an ``SvgRendererConfig`` and applied to a parsed
BeautifulSoup tree. Fenced code blocks arrive from the markdown converter as:

    <pre><code class="language-mermaid">flowchart TD
    A-->B</code></pre>

and are replaced, in place, by either:

    <figure class="figure-mermaid"><svg style="min-width:100%">...</svg></figure>

or, when the backend fails:

    <figure class="figure-mermaid figure-mermaid-error" data-error="parse error">
        <pre class="mermaid-error"><code>flowchart TD
    A-->B</code></pre>
    </figure>

Rendering happens in two phases. The scan phase walks the tree once and
records a task (parent, index, source) for every matching block without
touching the tree. The render phase then starts every task at once and
waits for all of them. Each task writes its result back into its own slot;
a result always replaces exactly one node, so the recorded indexes of the
other tasks stay valid whatever order the backends finish in.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from figures.exceptions import BackendError, SvgParseError

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Render failed"

RenderCallable = Callable[[str, Any], Awaitable[str]]
Transformer = Callable[[Tag], Awaitable[None]]


@dataclass(frozen=True)
class SvgRendererConfig:
    """Binding of the plugin to one rendering backend."""

    # Language token matched against the code element's classes ('mermaid')
    language_id: str
    # Class of the generated figure, also the prefix of its error class
    figure_class_name: str
    # Coroutine turning diagram source into SVG text
    render: RenderCallable
    # Pulls the bare <svg> out of the backend output (default: use as-is)
    extract_svg: Optional[Callable[[str], str]] = None
    # Mutates the parsed <svg> element's presentation attributes
    adjust_svg_style: Optional[Callable[[Tag], None]] = None
    # Seconds allowed per render call; None waits indefinitely
    timeout: Optional[float] = None


@dataclass
class SvgRendererTask:
    parent: Tag
    index: int
    code: str


def _find_code_child(pre: Tag) -> Optional[Tag]:
    return pre.find("code", recursive=False)


def _class_list(tag: Tag) -> List[str]:
    classes = tag.get("class")
    if isinstance(classes, str):
        return classes.split()
    return list(classes or [])


def is_code_block(node: Tag, language_id: str) -> bool:
    """
    Check whether ``node`` is a ``<pre><code>`` block for ``language_id``.

    Any class token containing the language id counts, so both
    ``language-mermaid`` and ``mermaid`` match "mermaid".
    """
    if not isinstance(node, Tag) or node.name != "pre":
        return False
    code = _find_code_child(node)
    if code is None:
        return False
    return any(language_id in cls for cls in _class_list(code))


def extract_text(pre: Tag) -> str:
    """
    Return the source held by a ``<pre><code>`` block.

    Only the direct text children of <code> are joined; inline markup nested
    inside it is ignored.
    """
    code = _find_code_child(pre)
    if code is None:
        return ""
    return "".join(
        str(child)
        for child in code.contents
        if isinstance(child, NavigableString) and not isinstance(child, PreformattedString)
    )


def parse_svg(svg: str) -> Tag:
    """
    Parse an SVG string and return its top-level ``<svg>`` element.

    All top-level nodes are searched since whitespace, comments or an XML
    declaration may come first. html5lib keeps the case of SVG names
    (viewBox, linearGradient, clipPath) that html.parser would lowercase;
    it wraps the fragment in html/body, so the body holds the top level.
    """
    fragment = BeautifulSoup(svg, "html5lib")
    top_level = fragment.body.contents if fragment.body else fragment.contents
    for child in top_level:
        if isinstance(child, Tag) and child.name == "svg":
            return child
    raise SvgParseError("Failed to parse SVG: no svg element in parsed result")


def _new_tag(name: str, attrs: Optional[dict] = None) -> Tag:
    return BeautifulSoup("", "html.parser").new_tag(name, attrs=attrs or {})


def create_figure(figure_class_name: str, svg_node: Tag) -> Tag:
    """Wrap a rendered SVG element in its figure."""
    figure = _new_tag("figure", {"class": [figure_class_name]})
    figure.append(svg_node)
    return figure


def create_error_figure(figure_class_name: str, error_message: str, code: str) -> Tag:
    """Build the figure shown in place of a block that failed to render."""
    figure = _new_tag(
        "figure",
        {
            "class": [figure_class_name, f"{figure_class_name}-error"],
            "data-error": error_message,
        },
    )
    language = figure_class_name.replace("figure-", "", 1)
    pre = _new_tag("pre", {"class": [f"{language}-error"]})
    code_tag = _new_tag("code")
    code_tag.append(NavigableString(code))
    pre.append(code_tag)
    figure.append(pre)
    return figure


def replace_child(parent: Tag, index: int, node: Tag) -> None:
    """Swap the child at ``index`` for ``node``; the child count is unchanged."""
    parent.contents[index].replace_with(node)


def collect_tasks(tree: Tag, language_id: str) -> List[SvgRendererTask]:
    """
    Scan ``tree`` depth-first and record one task per non-empty block.

    Matching blocks are not descended into: their content is source text.
    The walk keeps its own stack of open elements, so nesting depth is not
    bounded by the interpreter's recursion limit.
    """
    tasks: List[SvgRendererTask] = []
    stack = [(tree, iter(enumerate(tree.contents)))]

    while stack:
        parent, children = stack[-1]
        for index, child in children:
            if not isinstance(child, Tag):
                continue
            if is_code_block(child, language_id):
                code = extract_text(child)
                if code.strip():
                    tasks.append(SvgRendererTask(parent=parent, index=index, code=code))
                    continue
            stack.append((child, iter(enumerate(child.contents))))
            break
        else:
            stack.pop()

    return tasks


def _error_message(error: BaseException) -> str:
    return str(error) or DEFAULT_ERROR_MESSAGE


async def _call_backend(config: SvgRendererConfig, code: str, options: Any) -> str:
    if config.timeout is None:
        return await config.render(code, options)
    try:
        return await asyncio.wait_for(config.render(code, options), timeout=config.timeout)
    except asyncio.TimeoutError as e:
        raise BackendError(
            f"{config.language_id} render timed out after {config.timeout}s"
        ) from e


async def _render_task(config: SvgRendererConfig, task: SvgRendererTask, options: Any) -> None:
    try:
        svg_raw = await _call_backend(config, task.code, options)
        svg = config.extract_svg(svg_raw) if config.extract_svg else svg_raw
        svg_node = parse_svg(svg)

        if config.adjust_svg_style:
            config.adjust_svg_style(svg_node)

        replace_child(task.parent, task.index, create_figure(config.figure_class_name, svg_node))
        logger.debug(f"Rendered {config.language_id} block at index {task.index}")
    except Exception as e:
        logger.error(f"{config.language_id} render error: {e}", exc_info=True)
        replace_child(
            task.parent,
            task.index,
            create_error_figure(config.figure_class_name, _error_message(e), task.code),
        )


def create_svg_renderer_plugin(config: SvgRendererConfig) -> Callable[..., Transformer]:
    """
    Create an SVG renderer plugin from a backend configuration.

    The returned plugin takes the backend options and gives back the
    transformer coroutine that rewrites a tree in place:

        transformer = mermaid_renderer(MermaidOptions(theme="nord"))
        await transformer(soup)

    Args:
        config: Backend binding (language id, figure class, callbacks)

    Returns:
        Plugin callable ``plugin(options=None) -> transformer``
    """

    def plugin(options: Any = None) -> Transformer:
        async def transformer(tree: Tag) -> None:
            tasks = collect_tasks(tree, config.language_id)
            if not tasks:
                return

            await asyncio.gather(*(_render_task(config, task, options) for task in tasks))

        return transformer

    return plugin
