"""Submission reference validation.

References are opaque identifiers checked against a user-configurable regular
expression that must match the whole (stripped) candidate.  The default accepts
exactly twelve ASCII letters or digits.
"""

from __future__ import annotations

import re
from typing import Final

DEFAULT_PATTERN: Final = r"^[A-Za-z0-9]{12}$"


def is_compilable(pattern: str) -> bool:
    """Return ``True`` when ``pattern`` is a valid regular expression."""

    try:
        re.compile(pattern)
    except (re.error, TypeError):
        return False
    return True


def is_valid_reference(candidate: str | None, pattern: str | re.Pattern[str]) -> bool:
    """Return ``True`` if ``candidate`` fully matches ``pattern``.

    ``None``, empty and whitespace-only candidates are never valid, whatever the
    pattern.  Surrounding whitespace is stripped before matching.

    Raises
    ------
    re.error
        If ``pattern`` is a string that does not compile.  Callers guard with
        :func:`is_compilable` first.
    """

    if candidate is None:
        return False
    stripped = candidate.strip()
    if not stripped:
        return False
    return re.fullmatch(pattern, stripped) is not None


__all__ = ["DEFAULT_PATTERN", "is_compilable", "is_valid_reference"]
