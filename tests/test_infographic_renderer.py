"""Tests for the infographic renderer."""

from unittest.mock import AsyncMock, patch

import pytest

from figures.exceptions import SvgExtractionError, SvgInputError, SvgNotFoundError
from figures.markdown.postprocessors.infographic_renderer import (
    SVG_STYLE,
    InfographicOptions,
    adjust_svg_style,
    build_syntax,
    extract_svg_content,
    infographic_config,
    infographic_renderer,
)
from figures.markdown.postprocessors.svg_renderer import parse_svg
from tests.utils import INFOGRAPHIC_ENVELOPE, INFOGRAPHIC_SOURCE, code_block

pytestmark = pytest.mark.unit


class TestBuildSyntax:
    """Tests for theme and palette injection."""

    @pytest.mark.parametrize("theme_line", ["theme dark", "  theme dark", "\ttheme hand-drawn"])
    def test_author_theme_is_kept(self, theme_line):
        code = f"infographic list\n{theme_line}\ndata"
        options = InfographicOptions(theme="default", palette="spectral")
        assert build_syntax(code, options) == code

    def test_appends_theme_and_palette(self):
        options = InfographicOptions(theme="dark", palette="antv")
        assert build_syntax(INFOGRAPHIC_SOURCE, options) == INFOGRAPHIC_SOURCE + "\ntheme dark\n  palette antv"

    def test_invalid_theme_falls_back_to_default(self):
        options = InfographicOptions(theme="neon")
        assert build_syntax(INFOGRAPHIC_SOURCE, options) == INFOGRAPHIC_SOURCE + "\ntheme default"

    def test_invalid_palette_is_omitted(self):
        options = InfographicOptions(theme="hand-drawn", palette="rainbow")
        assert build_syntax(INFOGRAPHIC_SOURCE, options) == INFOGRAPHIC_SOURCE + "\ntheme hand-drawn"

    def test_palette_without_theme_uses_default_theme(self):
        options = InfographicOptions(palette="spectral")
        assert build_syntax("x", options) == "x\ntheme default\n  palette spectral"

    def test_missing_options(self):
        assert build_syntax("x") == "x\ntheme default"

    def test_word_starting_with_theme_is_not_a_theme_line(self):
        code = "infographic list\nthemes are nice"
        assert build_syntax(code) == code + "\ntheme default"


class TestExtractSvgContent:
    """Tests for stripping the SSR envelope."""

    def test_returns_bare_svg(self):
        svg = extract_svg_content(INFOGRAPHIC_ENVELOPE)

        assert svg.startswith("<svg ")
        assert svg.endswith("</svg>")
        assert "<?xml" not in svg
        assert "<g><rect" in svg

    def test_is_case_insensitive(self):
        assert extract_svg_content("junk<SVG></SVG>junk") == "<SVG></SVG>"

    @pytest.mark.parametrize("value", ["", None, 42, b"<svg></svg>"])
    def test_empty_or_non_string_input(self, value):
        with pytest.raises(SvgInputError, match="empty or non-string input"):
            extract_svg_content(value)

    def test_no_svg_element(self):
        with pytest.raises(SvgNotFoundError, match="no <svg> element found") as excinfo:
            extract_svg_content('<?xml version="1.0"?><div>nothing</div>')

        assert not isinstance(excinfo.value, SvgInputError)
        assert isinstance(excinfo.value, SvgExtractionError)

    def test_spans_from_first_open_to_last_close(self):
        raw = "<svg id='a'></svg>\n<svg id='b'></svg>"
        assert extract_svg_content(raw) == raw


class TestAdjustSvgStyle:
    """Tests for the infographic SVG style adjustment."""

    def test_removes_dimensions(self):
        svg = parse_svg('<svg width="720" height="360"></svg>')
        adjust_svg_style(svg)

        assert "width" not in svg.attrs
        assert "height" not in svg.attrs
        assert svg["style"] == SVG_STYLE == "max-width:100%;height:auto;visibility:visible;"

    def test_keeps_existing_style(self):
        svg = parse_svg('<svg style="background:#fff"></svg>')
        adjust_svg_style(svg)
        assert svg["style"] == "background:#fff;max-width:100%;height:auto;visibility:visible;"


class TestInfographicRenderer:
    """End-to-end tests of the infographic plugin on a parsed document."""

    def test_config(self):
        assert infographic_config.language_id == "infographic"
        assert infographic_config.figure_class_name == "figure-infographic"
        assert infographic_config.extract_svg is extract_svg_content

    @pytest.mark.asyncio
    async def test_renders_figure_from_envelope(self, make_soup):
        soup = make_soup(f"<div>{code_block(INFOGRAPHIC_SOURCE, cls='language-infographic')}</div>")
        backend = AsyncMock(return_value=INFOGRAPHIC_ENVELOPE)

        with patch("figures.backends.render_infographic", new=backend):
            await infographic_renderer(InfographicOptions(theme="dark", palette="antv"))(soup)

        backend.assert_awaited_once_with(INFOGRAPHIC_SOURCE + "\ntheme dark\n  palette antv")
        figure = soup.div.figure
        assert figure["class"] == ["figure-infographic"]
        svg = figure.svg
        assert "width" not in svg.attrs
        assert "height" not in svg.attrs
        assert svg["style"] == "background:#fff;" + SVG_STYLE

    @pytest.mark.asyncio
    async def test_empty_backend_output_is_an_error(self, make_soup):
        soup = make_soup(code_block(INFOGRAPHIC_SOURCE, cls="language-infographic"))

        with patch("figures.backends.render_infographic", new=AsyncMock(return_value="")):
            await infographic_renderer()(soup)

        figure = soup.figure
        assert figure["class"] == ["figure-infographic", "figure-infographic-error"]
        assert figure["data-error"] == "Invalid SVG string: empty or non-string input"
        assert figure.pre["class"] == ["infographic-error"]
        assert figure.code.get_text() == INFOGRAPHIC_SOURCE

    @pytest.mark.asyncio
    async def test_missing_svg_is_an_error(self, make_soup):
        soup = make_soup(code_block(INFOGRAPHIC_SOURCE, cls="language-infographic"))

        with patch("figures.backends.render_infographic", new=AsyncMock(return_value="<?xml?>")):
            await infographic_renderer()(soup)

        assert soup.figure["data-error"] == "Invalid SVG string: no <svg> element found"
