"""
Manifest loader utility for lessondeck.

Loads a YAML deck manifest that lists lesson files in an explicit order.
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from lessondeck.errors import SourceError
from lessondeck.schemas import DeckManifest


MANIFEST_NAME = "deck.yaml"


def resolve_manifest_path(path: Path) -> Path | None:
    """
    Find the manifest for a source path.

    Args:
        path: Either a manifest file or a directory that may contain one

    Returns:
        Path to the manifest, or None if the path has no manifest
    """
    if path.is_file() and path.suffix in (".yaml", ".yml"):
        return path
    if path.is_dir():
        for candidate in (MANIFEST_NAME, "deck.yml"):
            manifest = path / candidate
            if manifest.is_file():
                return manifest
    return None


def load_manifest_file(file_path: Path) -> DeckManifest:
    """
    Load and validate a deck manifest.

    Args:
        file_path: Path to a deck.yaml file

    Returns:
        Validated DeckManifest

    Raises:
        SourceError: If the file is missing, is not valid YAML, or does
            not match the manifest schema
    """
    if not file_path.is_file():
        raise SourceError("Manifest not found", str(file_path))

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SourceError(f"Invalid manifest YAML: {e}", str(file_path)) from e

    if not isinstance(raw, dict):
        raise SourceError("Manifest must be a mapping with a 'lessons' list", str(file_path))

    try:
        return DeckManifest.model_validate(raw)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise SourceError(f"Invalid manifest at '{location}': {first['msg']}", str(file_path)) from e
