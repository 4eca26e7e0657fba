"""
Source loaders - Turn lesson storage into SourceDescriptors.

Supported layouts:
- Plain directory: one lesson per file, name = file stem
- Playground bundle: Pages/<name>.xcplaygroundpage/Contents.swift
- Manifest: deck.yaml listing lesson files in explicit order

load_deck() picks the right loader for a path and builds a fresh DeckIndex
every time it is called; that is the only way a deck is reloaded.
"""

import logging
from pathlib import Path
from typing import Optional

from lessondeck.errors import SourceError
from lessondeck.schemas import SourceDescriptor
from lessondeck.utils import load_manifest_file, resolve_manifest_path

from .index import DeckIndex


logger = logging.getLogger(__name__)


DEFAULT_SUFFIXES = (".swift", ".md", ".txt", ".py")
PLAYGROUND_PAGE_SUFFIX = ".xcplaygroundpage"
PLAYGROUND_CONTENTS = "Contents.swift"

# File suffix to code language hint
LANGUAGE_BY_SUFFIX = {
    ".swift": "swift",
    ".py": "python",
    ".md": "markdown",
    ".txt": None,
}


def _read_text(path: Path) -> str:
    """Read a lesson file, tolerating a UTF-8 BOM."""
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"Cannot read lesson file: {e}", str(path)) from e


def _list_dir(path: Path) -> list[Path]:
    """List a directory in name order."""
    try:
        return sorted(path.iterdir())
    except OSError as e:
        raise SourceError(f"Cannot list directory: {e}", str(path)) from e


# -----------------------------------------------------------------------------
# Loaders
# -----------------------------------------------------------------------------

def load_directory(path: Path, suffixes: tuple[str, ...] = DEFAULT_SUFFIXES) -> list[SourceDescriptor]:
    """
    Load every lesson file in a directory (non-recursive).

    Args:
        path: Directory containing lesson files
        suffixes: Accepted file suffixes

    Returns:
        One descriptor per file, in filename order
    """
    if not path.is_dir():
        raise SourceError("Lesson directory not found", str(path))

    sources = []
    for file_path in _list_dir(path):
        if not file_path.is_file() or file_path.suffix.lower() not in suffixes:
            logger.debug(f"Skipping {file_path.name}")
            continue
        sources.append(SourceDescriptor(
            name=file_path.stem,
            text=_read_text(file_path),
            origin=str(file_path),
            language=LANGUAGE_BY_SUFFIX.get(file_path.suffix.lower()),
        ))

    logger.info(f"Loaded {len(sources)} lesson files from {path}")
    return sources


def _pages_dir(path: Path) -> Optional[Path]:
    """Find the Pages directory of a playground bundle, if path is one."""
    if path.name == "Pages" and path.is_dir():
        return path
    pages = path / "Pages"
    if pages.is_dir() and any(child.suffix == PLAYGROUND_PAGE_SUFFIX for child in _list_dir(pages)):
        return pages
    return None


def load_playground(path: Path) -> list[SourceDescriptor]:
    """
    Load the pages of a playground bundle.

    Args:
        path: The .playground directory or its Pages directory

    Returns:
        One descriptor per page, name = page directory stem ("03. Collection")
    """
    pages = _pages_dir(path)
    if pages is None:
        raise SourceError("Not a playground bundle (no Pages directory)", str(path))

    sources = []
    for page_dir in _list_dir(pages):
        if not page_dir.is_dir() or page_dir.suffix != PLAYGROUND_PAGE_SUFFIX:
            logger.debug(f"Skipping {page_dir.name}")
            continue
        contents = page_dir / PLAYGROUND_CONTENTS
        if not contents.is_file():
            logger.warning(f"Playground page without {PLAYGROUND_CONTENTS}: {page_dir}")
            continue
        sources.append(SourceDescriptor(
            name=page_dir.stem,
            text=_read_text(contents),
            origin=str(contents),
            language="swift",
        ))

    logger.info(f"Loaded {len(sources)} playground pages from {pages}")
    return sources


def load_manifest(path: Path) -> tuple[list[SourceDescriptor], Optional[str]]:
    """
    Load lessons listed in a deck manifest.

    Entries without an explicit order get their 1-based list position, so
    manifest order always wins over numbers in file names.

    Args:
        path: A deck.yaml file or a directory containing one

    Returns:
        Tuple of (descriptors, deck title)
    """
    manifest_path = resolve_manifest_path(path)
    if manifest_path is None:
        raise SourceError("No deck manifest found", str(path))

    manifest = load_manifest_file(manifest_path)
    base_dir = manifest_path.parent

    sources = []
    for position, entry in enumerate(manifest.lessons, start=1):
        file_path = base_dir / entry.file
        if not file_path.is_file():
            raise SourceError(f"Manifest lists missing file '{entry.file}'", str(manifest_path))
        sources.append(SourceDescriptor(
            name=entry.name or file_path.stem,
            text=_read_text(file_path),
            origin=str(file_path),
            language=LANGUAGE_BY_SUFFIX.get(file_path.suffix.lower()),
            title=entry.title,
            order=entry.order if entry.order is not None else position,
        ))

    logger.info(f"Loaded {len(sources)} lessons from manifest {manifest_path}")
    return sources, manifest.title


def load_sources(path: Path) -> tuple[list[SourceDescriptor], Optional[str]]:
    """
    Detect the layout at path and load its lessons.

    Detection order: manifest, playground bundle, plain directory.

    Returns:
        Tuple of (descriptors, deck title or None)
    """
    path = Path(path)
    if not path.exists():
        raise SourceError("Lesson source not found", str(path))

    if resolve_manifest_path(path) is not None:
        return load_manifest(path)

    if path.is_dir():
        if _pages_dir(path) is not None:
            return load_playground(path), _playground_title(path)
        return load_directory(path), None

    raise SourceError("Lesson source must be a directory or a deck manifest", str(path))


def _playground_title(path: Path) -> Optional[str]:
    """Title of a playground bundle, from its directory name."""
    bundle = path.parent if path.name == "Pages" else path
    if bundle.suffix == ".playground":
        return bundle.stem
    return None


def load_deck(path: Path) -> DeckIndex:
    """Load sources from path and build a new DeckIndex."""
    sources, title = load_sources(path)
    return DeckIndex.build(sources, title=title)
