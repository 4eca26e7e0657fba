"""
lessondeck Schemas - Pydantic models for lesson decks.

This module exports all schema classes for:
- Unit: source descriptors and lesson units
- Manifest: explicit deck ordering files
"""

# Unit schemas
from .unit import (
    SourceDescriptor,
    LessonUnit,
)

# Manifest schemas
from .manifest import (
    ManifestEntry,
    DeckManifest,
)

__all__ = [
    # Unit
    'SourceDescriptor',
    'LessonUnit',
    # Manifest
    'ManifestEntry',
    'DeckManifest',
]
