"""
lessondeck - Ordered lesson deck loader, navigator and renderer.

Turns a folder of numbered lesson pages (or a playground book) into an
ordered deck that can be listed, walked page by page, and rendered as
plain text, Markdown or HTML.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("lessondeck")
except PackageNotFoundError:
    __version__ = "0+unknown"

__all__ = ["__version__"]
