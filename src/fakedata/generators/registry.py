"""Format generator registry.

Every :class:`~fakedata.inputs.formats.FormatKey` maps to exactly one
:class:`FormatGenerator`.  A generator pairs a themed name accessor with an
outline builder and hands the outline to the extension-keyed writer registry
in :mod:`fakedata.io`.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from ..content.source import ContentSource
from ..inputs.formats import FormatKey
from ..io import write_file
from . import builders
from .outline import Outline


@dataclass(frozen=True)
class GeneratedArtifact:
    """A file written by a generator: its absolute path and bare file name."""

    path: Path
    filename: str


@dataclass(frozen=True)
class FormatGenerator:
    key: FormatKey
    extension: str
    name_accessor: Callable[[ContentSource], str]
    build_outline: Callable[[ContentSource], Outline]

    def suggest_filename(self, source: ContentSource) -> str:
        """Descriptive base name for the next file, without extension."""

        return self.name_accessor(source)

    def generate(
        self,
        output_dir: str | os.PathLike[str],
        base_filename: str,
        source: ContentSource,
    ) -> GeneratedArtifact:
        """Build an outline and write ``{base_filename}.{extension}``.

        A file left behind by a failed write is removed before the exception
        propagates.
        """

        filename = f"{base_filename}.{self.extension}"
        path = Path(output_dir) / filename
        outline = self.build_outline(source)
        try:
            write_file(path, outline)
        except BaseException:
            path.unlink(missing_ok=True)
            raise
        return GeneratedArtifact(path.resolve(), filename)


def _spec(
    key: FormatKey,
    name_accessor: Callable[[ContentSource], str],
    build_outline: Callable[[ContentSource], Outline],
) -> FormatGenerator:
    return FormatGenerator(key, key.value, name_accessor, build_outline)


def build_registry() -> Mapping[str, FormatGenerator]:
    """Return an immutable ``{format key: generator}`` mapping."""

    generators = (
        _spec(FormatKey.PDF, ContentSource.pdf_name, builders.build_report),
        _spec(FormatKey.JPEG, ContentSource.image_name, builders.build_image),
        _spec(FormatKey.XLSX, ContentSource.spreadsheet_name, builders.build_workbook),
        _spec(FormatKey.XLS, ContentSource.spreadsheet_name, builders.build_workbook),
        _spec(FormatKey.ODS, ContentSource.spreadsheet_name, builders.build_compact_workbook),
        _spec(FormatKey.DOCX, ContentSource.document_name, builders.build_document),
        _spec(FormatKey.ODT, ContentSource.document_name, builders.build_document),
        _spec(FormatKey.PPTX, ContentSource.presentation_name, builders.build_deck),
        _spec(FormatKey.ODP, ContentSource.presentation_name, builders.build_deck),
    )
    return MappingProxyType({g.key.value: g for g in generators})


__all__ = ["FormatGenerator", "GeneratedArtifact", "build_registry"]
