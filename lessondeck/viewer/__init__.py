"""
lessondeck Viewer - Rendering components for lesson display.

This module provides:
- Plain text, Markdown and HTML rendering of lesson units
- CSS for the HTML fragment
"""

from .render import (
    RenderFormat,
    RenderedOutput,
    DeckRenderer,
    EXTENSIONS,
    get_deck_css,
    parse_format,
    supported_formats,
    render_plain,
    render_markdown,
    render_html,
    render,
)

__all__ = [
    "RenderFormat",
    "RenderedOutput",
    "DeckRenderer",
    "EXTENSIONS",
    "get_deck_css",
    "parse_format",
    "supported_formats",
    "render_plain",
    "render_markdown",
    "render_html",
    "render",
]
