"""lessondeck utilities."""

from .naming import slugify, parse_order, derive_title
from .manifest_loader import load_manifest_file, resolve_manifest_path, MANIFEST_NAME

__all__ = [
    "slugify",
    "parse_order",
    "derive_title",
    "load_manifest_file",
    "resolve_manifest_path",
    "MANIFEST_NAME",
]
