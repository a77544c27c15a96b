# figures/__init__.py
"""Render diagram code blocks in markdown output as inline SVG figures."""

__version__ = "0.3.0"
