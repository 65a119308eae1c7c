"""Tests for the format generator registry."""

from __future__ import annotations

from pathlib import Path

import pytest

from fakedata.content import tables
from fakedata.content.source import ContentSource
from fakedata.content.themes import Theme
from fakedata.generators.registry import FormatGenerator, build_registry
from fakedata.inputs.formats import FormatKey
from fakedata.io import register_writer

NAME_TABLES = {
    "pdf": tables.REPORT_NAMES,
    "jpeg": tables.IMAGE_NAMES,
    "xlsx": tables.SPREADSHEET_NAMES,
    "xls": tables.SPREADSHEET_NAMES,
    "ods": tables.SPREADSHEET_NAMES,
    "docx": tables.DOCUMENT_NAMES,
    "odt": tables.DOCUMENT_NAMES,
    "pptx": tables.PRESENTATION_NAMES,
    "odp": tables.PRESENTATION_NAMES,
}


def test_every_format_key_registered() -> None:
    registry = build_registry()
    assert set(registry) == {key.value for key in FormatKey}
    for key, generator in registry.items():
        assert generator.key.value == key
        assert generator.extension == key


def test_registry_is_immutable() -> None:
    registry = build_registry()
    with pytest.raises(TypeError):
        registry["csv"] = registry["pdf"]  # type: ignore[index]


@pytest.mark.parametrize("key", sorted(NAME_TABLES))
def test_suggested_names_use_format_table(key: str) -> None:
    source = ContentSource(Theme.HEALTHCARE, seed=5)
    name = build_registry()[key].suggest_filename(source)
    assert name in tables.lookup(NAME_TABLES[key], Theme.HEALTHCARE)


def test_failed_write_removes_partial_file(tmp_path: Path) -> None:
    def half_write(path: Path, _outline: object) -> None:
        Path(path).write_bytes(b"partial")
        raise RuntimeError("disk full")

    register_writer(".halfwrite", half_write)
    generator = FormatGenerator(FormatKey.DOCX, "halfwrite", ContentSource.document_name, lambda s: object())
    source = ContentSource(Theme.DEFAULT, seed=1)
    with pytest.raises(RuntimeError):
        generator.generate(tmp_path, "AJKD1234OMJU_1_Broken", source)
    assert list(tmp_path.iterdir()) == []


def test_generate_returns_absolute_artifact(tmp_path: Path) -> None:
    register_writer(".stub", lambda path, outline: Path(path).write_text("ok"))
    generator = FormatGenerator(FormatKey.PDF, "stub", ContentSource.pdf_name, lambda s: object())
    artifact = generator.generate(tmp_path, "AJKD1234OMJU_1_Name", ContentSource(Theme.DEFAULT))
    assert artifact.filename == "AJKD1234OMJU_1_Name.stub"
    assert artifact.path.is_absolute()
    assert artifact.path.read_text() == "ok"
