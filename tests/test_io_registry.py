"""Tests for the extension-based writer registry."""

from __future__ import annotations

from pathlib import Path

import pytest

from fakedata.io import get_extension, register_writer, registered_extensions, write_file
from fakedata.utils.errors import IOFormatError, UnsupportedFormatError


def test_unknown_extension_raises(tmp_path: Path) -> None:
    with pytest.raises(UnsupportedFormatError):
        write_file(tmp_path / "file.unknown", object())
    assert issubclass(UnsupportedFormatError, IOFormatError)


def test_get_extension() -> None:
    assert get_extension("a/b/Report.PDF") == ".pdf"
    assert get_extension("noext") == ""


def test_default_writers_registered() -> None:
    exts = set(registered_extensions())
    assert {".pdf", ".jpeg", ".xlsx", ".xls", ".ods", ".docx", ".odt", ".pptx", ".odp"} <= exts


def test_custom_writer_case_insensitive(tmp_path: Path) -> None:
    seen: list[tuple[Path, object]] = []

    def writer(path: Path, outline: object) -> None:
        seen.append((Path(path), outline))

    register_writer(".TESTFMT", writer)
    marker = object()
    write_file(tmp_path / "x.testfmt", marker)
    assert seen == [(tmp_path / "x.testfmt", marker)]
