# figures/exceptions.py
"""Errors raised while turning diagram source into SVG figures.

Every one of these is caught per code block by the SVG renderer plugin and
shown to the reader as an error figure; none of them aborts a render.
"""


class FiguresError(Exception):
    """Base class for diagram figure errors."""


class SvgParseError(FiguresError):
    """Markup could not be parsed into an ``<svg>`` element."""


class SvgExtractionError(FiguresError):
    """Raw backend output holds no recoverable SVG region."""


class SvgInputError(SvgExtractionError):
    """Backend output was empty or not text."""


class SvgNotFoundError(SvgExtractionError):
    """Backend output contains no ``<svg>`` element."""


class BackendError(FiguresError):
    """A rendering backend failed or could not be started."""
