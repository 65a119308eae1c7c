"""Manifest rows, identifier generation and CSV serialization."""

from .builder import ManifestBuilder, ManifestRow

__all__ = ["ManifestBuilder", "ManifestRow"]
