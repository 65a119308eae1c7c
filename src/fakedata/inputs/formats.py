"""Format specification parsing.

A format specification is a comma separated list of ``key[:count]`` tokens such
as ``"pdf:2,xlsx,docx:3"``.  Parsing is lenient: bad counts fall back to one,
unknown keys are dropped, both with a warning.  Whether an empty result is
fatal is decided by the caller.
"""

from __future__ import annotations

from enum import Enum

from ..utils.logging import get_logger

logger = get_logger(__name__)


class FormatKey(str, Enum):
    """Closed set of output formats.  The value doubles as the file extension."""

    PDF = "pdf"
    JPEG = "jpeg"
    XLSX = "xlsx"
    XLS = "xls"
    ODS = "ods"
    DOCX = "docx"
    ODT = "odt"
    PPTX = "pptx"
    ODP = "odp"


VALID_FORMATS: tuple[str, ...] = tuple(key.value for key in FormatKey)


def _parse_count(token: str, raw: str) -> int:
    try:
        count = int(raw.strip())
    except ValueError:
        logger.warning("Invalid count in '%s', using 1", token)
        return 1
    if count < 1:
        logger.warning("Invalid count in '%s', using 1", token)
        return 1
    return count


def parse_format_spec(spec: str | None) -> dict[str, int]:
    """Parse ``spec`` into an insertion-ordered ``{format: count}`` mapping.

    Tokens are stripped and lower-cased, empty tokens are skipped and each
    token is split once on its first colon.  Repeated keys accumulate their
    counts and keep their first position.

    >>> parse_format_spec("PDF:2, xlsx,pdf")
    {'pdf': 3, 'xlsx': 1}
    """

    counts: dict[str, int] = {}
    if not spec:
        return counts

    for raw_token in spec.split(","):
        token = raw_token.strip().lower()
        if not token:
            continue
        key, sep, raw_count = token.partition(":")
        key = key.strip()
        count = _parse_count(token, raw_count) if sep else 1
        if key not in VALID_FORMATS:
            logger.warning(
                "Unknown format '%s', skipping. Valid formats: %s",
                key,
                ", ".join(VALID_FORMATS),
            )
            continue
        counts[key] = counts.get(key, 0) + count
    return counts


__all__ = ["FormatKey", "VALID_FORMATS", "parse_format_spec"]
