"""Tests for reference parsing, theme annotations and de-duplication."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from fakedata.content.themes import Theme
from fakedata.inputs.references import (
    SubmissionReference,
    merge_references,
    parse_inline_refs,
    parse_reference_lines,
    read_reference_file,
    split_annotation,
)
from fakedata.inputs.validation import DEFAULT_PATTERN


def test_inline_list() -> None:
    refs = parse_inline_refs(" AJKD1234OMJU, ,GENERIC12345 ", DEFAULT_PATTERN)
    assert [r.ref for r in refs] == ["AJKD1234OMJU", "GENERIC12345"]
    assert all(r.theme is None for r in refs)


def test_inline_invalid_warned(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        refs = parse_inline_refs("BAD,AJKD1234OMJU", DEFAULT_PATTERN)
    assert [r.ref for r in refs] == ["AJKD1234OMJU"]
    assert "BAD" in caplog.text


def test_file_lines_with_annotations() -> None:
    text = "AJKD1234OMJU // financial\nGENERIC12345\n"
    refs = parse_reference_lines(text, DEFAULT_PATTERN, source="refs.txt")
    assert refs == [
        SubmissionReference("AJKD1234OMJU", Theme.FINANCIAL, "refs.txt", 1),
        SubmissionReference("GENERIC12345", None, "refs.txt", 2),
    ]


def test_blank_lines_skipped_and_invalid_warned_with_line(caplog: pytest.LogCaptureFixture) -> None:
    text = "\n   \nAJKD1234OMJU\nnot-valid // media\r\nZZZZ99998888 //\n"
    with caplog.at_level(logging.WARNING):
        refs = parse_reference_lines(text, DEFAULT_PATTERN, source="refs.txt")
    assert [(r.ref, r.line, r.theme) for r in refs] == [
        ("AJKD1234OMJU", 3, None),
        ("ZZZZ99998888", 5, None),
    ]
    assert "line 4" in caplog.text


def test_unknown_annotation_resolves_to_default() -> None:
    refs = parse_reference_lines("AJKD1234OMJU // aerospace", DEFAULT_PATTERN, source="f")
    assert refs[0].theme is Theme.DEFAULT


def test_split_annotation() -> None:
    assert split_annotation("ABC // Retail Store ") == ("ABC", "Retail Store")
    assert split_annotation("ABC") == ("ABC", None)
    assert split_annotation("ABC //   ") == ("ABC", None)


def test_read_reference_file_handles_bom(tmp_path: Path) -> None:
    path = tmp_path / "refs.csv"
    path.write_bytes("\ufeffAJKD1234OMJU // tech\n".encode("utf-8"))
    refs = read_reference_file(path, DEFAULT_PATTERN)
    assert refs[0].ref == "AJKD1234OMJU"
    assert refs[0].theme is Theme.TECHNOLOGY
    assert refs[0].source == str(path)


def test_read_reference_file_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_reference_file(tmp_path / "missing.txt", DEFAULT_PATTERN)


def test_merge_keeps_first_position_and_latest_theme() -> None:
    inline = [SubmissionReference("AAAAAAAAAAAA"), SubmissionReference("BBBBBBBBBBBB")]
    from_file = [
        SubmissionReference("BBBBBBBBBBBB", Theme.LEGAL, "f", 1),
        SubmissionReference("CCCCCCCCCCCC", None, "f", 2),
        SubmissionReference("AAAAAAAAAAAA", Theme.RETAIL, "f", 3),
        SubmissionReference("AAAAAAAAAAAA", None, "f", 4),
    ]
    merged = merge_references(inline, from_file)
    assert [(r.ref, r.theme) for r in merged] == [
        ("AAAAAAAAAAAA", Theme.RETAIL),
        ("BBBBBBBBBBBB", Theme.LEGAL),
        ("CCCCCCCCCCCC", None),
    ]
