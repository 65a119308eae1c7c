"""Themes, themed lookup tables and per-submission content synthesis."""

from .source import ContentSource
from .themes import Theme, resolve_theme

__all__ = ["ContentSource", "Theme", "resolve_theme"]
