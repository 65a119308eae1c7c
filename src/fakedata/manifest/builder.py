"""Manifest construction and serialization.

The manifest is a headerless, unquoted CSV with one row per generated file::

    <primaryId>,<secondaryId>,<ref>_<seq>_<descriptiveName>.<ext>

Rows are kept in the order they were recorded; nothing is sorted or
de-duplicated.
"""

from __future__ import annotations

import csv
import io
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .ids import new_id


@dataclass(frozen=True)
class ManifestRow:
    primary_id: str
    secondary_id: str
    filename: str


class ManifestBuilder:
    """Append-only collection of :class:`ManifestRow` objects.

    Parameters
    ----------
    shared_ids:
        Reuse the primary identifier as the secondary one.  Off by default so
        each row carries two independent identifiers.
    leading_blank_line:
        Emit an empty first line when serializing, for consumers that expect
        the layout of earlier manifest files.
    id_factory:
        Callable returning a fresh identifier.
    """

    def __init__(
        self,
        *,
        shared_ids: bool = False,
        leading_blank_line: bool = False,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self.shared_ids = shared_ids
        self.leading_blank_line = leading_blank_line
        self._id_factory = id_factory
        self._rows: list[ManifestRow] = []

    @staticmethod
    def compose(ref: str, seq: int, filename: str) -> str:
        """Return the on-disk name ``{ref}_{seq}_{filename}``."""

        return f"{ref}_{seq}_{filename}"

    def record(self, ref: str, seq: int, filename: str) -> str:
        """Append a row for ``filename`` and return the composed name."""

        composed = self.compose(ref, seq, filename)
        primary = self._id_factory()
        secondary = primary if self.shared_ids else self._id_factory()
        self._rows.append(ManifestRow(primary, secondary, composed))
        return composed

    @property
    def rows(self) -> tuple[ManifestRow, ...]:
        return tuple(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def serialize(self) -> str:
        """Render the rows as CSV text with ``\\n`` line endings."""

        buf = io.StringIO()
        if self.leading_blank_line:
            buf.write("\n")
        writer = csv.writer(buf, quoting=csv.QUOTE_NONE, escapechar="\\", lineterminator="\n")
        for row in self._rows:
            writer.writerow((row.primary_id, row.secondary_id, row.filename))
        return buf.getvalue()

    def write(self, path: str | os.PathLike[str]) -> Path:
        """Write :meth:`serialize` output to ``path`` and return it."""

        target = Path(path)
        with target.open("w", encoding="utf-8", newline="") as fh:
            fh.write(self.serialize())
        return target


__all__ = ["ManifestBuilder", "ManifestRow"]
