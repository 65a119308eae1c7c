"""Content themes and free-form theme resolution.

A theme selects which canned names, sentences and tables a
:class:`~fakedata.content.source.ContentSource` samples from.  Theme strings
arrive from the ``--theme`` flag or from ``// comment`` annotations in a
references file and are mapped onto the closed :class:`Theme` set by
:func:`resolve_theme`.

Resolution never fails: unrecognized strings quietly become
:attr:`Theme.DEFAULT`.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class Theme(Enum):
    """Enumeration of supported content themes."""

    FINANCIAL = "FINANCIAL"
    ENTERTAINMENT = "ENTERTAINMENT"
    HEALTHCARE = "HEALTHCARE"
    TECHNOLOGY = "TECHNOLOGY"
    LEGAL = "LEGAL"
    EDUCATION = "EDUCATION"
    RETAIL = "RETAIL"
    DEFAULT = "DEFAULT"


# Checked in order; the first rule with a matching token wins.
THEME_ALIASES: Final[tuple[tuple[tuple[str, ...], Theme], ...]] = (
    (("MEDIA", "ENTERTAINMENT"), Theme.ENTERTAINMENT),
    (("FINANCE", "FINANCIAL", "BANKING"), Theme.FINANCIAL),
    (("HEALTH", "MEDICAL", "PHARMA"), Theme.HEALTHCARE),
    (("TECH", "SOFTWARE", "IT"), Theme.TECHNOLOGY),
    (("LAW", "LEGAL"), Theme.LEGAL),
    (("EDU", "SCHOOL", "UNIVERSITY"), Theme.EDUCATION),
    (("RETAIL", "STORE", "SHOP"), Theme.RETAIL),
)


def normalize_theme_name(raw: str) -> str:
    """Return ``raw`` stripped, upper-cased and with separators as ``_``."""

    normalized = raw.strip().upper()
    for sep in (" ", "&", "-"):
        normalized = normalized.replace(sep, "_")
    return normalized


def resolve_theme(raw: str | None) -> Theme:
    """Map a free-form theme string onto a :class:`Theme`.

    Substring aliases are applied before the exact member-name lookup, so
    ``"entertainment & media"`` and ``"Media"`` both resolve to
    :attr:`Theme.ENTERTAINMENT`.  Matching is by substring, so the ``IT``
    alias also claims strings such as ``"hospitality"``.
    """

    if raw is None or not raw.strip():
        return Theme.DEFAULT

    normalized = normalize_theme_name(raw)
    for tokens, theme in THEME_ALIASES:
        if any(token in normalized for token in tokens):
            return theme

    try:
        return Theme[normalized]
    except KeyError:
        return Theme.DEFAULT


__all__ = ["THEME_ALIASES", "Theme", "normalize_theme_name", "resolve_theme"]
