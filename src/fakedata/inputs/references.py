"""Submission reference collection.

References arrive in two shapes:

* an inline comma separated list (``--refs``) with no per-entry theme;
* a text file with one reference per line, optionally followed by a
  ``// theme`` annotation, e.g. ``AJKD1234OMJU // financial``.

Blank entries are skipped.  Entries failing validation are logged and dropped.
When both shapes are supplied the inline list comes first.  A reference that
appears twice keeps its first position; a later theme annotation replaces an
earlier one.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Final

from ..content.themes import Theme, resolve_theme
from ..io.readers.txt_reader import read_text
from ..utils.logging import get_logger
from .validation import is_valid_reference

logger = get_logger(__name__)

COMMENT_MARKER: Final = "//"
INLINE_SOURCE: Final = "<inline>"


@dataclass(frozen=True)
class SubmissionReference:
    """A validated reference with its optional theme.

    ``theme`` is ``None`` when no annotation was given; the batch default then
    applies.  ``line`` is the 1-based line number for file entries.
    """

    ref: str
    theme: Theme | None = None
    source: str = INLINE_SOURCE
    line: int | None = None


def parse_inline_refs(text: str | None, pattern: str | re.Pattern[str]) -> list[SubmissionReference]:
    """Parse a comma separated list of references."""

    refs: list[SubmissionReference] = []
    if not text:
        return refs
    for raw in text.split(","):
        candidate = raw.strip()
        if not candidate:
            continue
        if not is_valid_reference(candidate, pattern):
            logger.warning("Invalid submission reference '%s', skipping", candidate)
            continue
        refs.append(SubmissionReference(candidate))
    return refs


def split_annotation(line: str) -> tuple[str, str | None]:
    """Split ``line`` into the reference part and the raw theme annotation."""

    ref, marker, comment = line.partition(COMMENT_MARKER)
    if not marker:
        return ref.strip(), None
    comment = comment.strip()
    return ref.strip(), comment or None


def parse_reference_lines(
    text: str,
    pattern: str | re.Pattern[str],
    *,
    source: str,
) -> list[SubmissionReference]:
    """Parse the contents of a references file."""

    refs: list[SubmissionReference] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        if not raw.strip():
            continue
        candidate, annotation = split_annotation(raw)
        if not is_valid_reference(candidate, pattern):
            logger.warning(
                "Invalid submission reference '%s' at %s line %d, skipping",
                candidate,
                source,
                lineno,
            )
            continue
        theme = resolve_theme(annotation) if annotation is not None else None
        refs.append(SubmissionReference(candidate, theme, source, lineno))
    return refs


def read_reference_file(
    path: str | os.PathLike[str],
    pattern: str | re.Pattern[str],
) -> list[SubmissionReference]:
    """Read and parse a references file.

    ``FileNotFoundError`` and other I/O errors propagate to the caller.
    """

    text = read_text(path)
    return parse_reference_lines(text, pattern, source=os.fspath(path))


def merge_references(*groups: Iterable[SubmissionReference]) -> list[SubmissionReference]:
    """Concatenate ``groups`` removing duplicate references.

    The first occurrence fixes the position.  A later occurrence that carries a
    theme replaces the stored theme.
    """

    merged: dict[str, SubmissionReference] = {}
    for group in groups:
        for item in group:
            existing = merged.get(item.ref)
            if existing is None:
                merged[item.ref] = item
            elif item.theme is not None:
                merged[item.ref] = replace(existing, theme=item.theme)
    return list(merged.values())


__all__ = [
    "COMMENT_MARKER",
    "INLINE_SOURCE",
    "SubmissionReference",
    "merge_references",
    "parse_inline_refs",
    "parse_reference_lines",
    "read_reference_file",
    "split_annotation",
]
