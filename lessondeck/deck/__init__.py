"""
lessondeck Deck - Runtime components for loading and navigating lessons.

This module provides:
- DeckIndex: Ordered, immutable collection of lesson units
- DeckNavigator: Next/previous traversal with boundary sentinels
- Loaders: Directory, playground bundle and manifest sources
"""

from .index import (
    DeckIndex,
    sort_key,
)

from .navigator import (
    DeckNavigator,
    Boundary,
    StartOfDeck,
    EndOfDeck,
)

from .loader import (
    load_directory,
    load_playground,
    load_manifest,
    load_sources,
    load_deck,
    DEFAULT_SUFFIXES,
)

__all__ = [
    # Index
    "DeckIndex",
    "sort_key",
    # Navigator
    "DeckNavigator",
    "Boundary",
    "StartOfDeck",
    "EndOfDeck",
    # Loader
    "load_directory",
    "load_playground",
    "load_manifest",
    "load_sources",
    "load_deck",
    "DEFAULT_SUFFIXES",
]
