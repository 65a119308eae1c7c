"""Tests for manifest rows, identifiers and serialization."""

from __future__ import annotations

import csv
import itertools
import re
from pathlib import Path

import pytest

from fakedata.manifest.builder import ManifestBuilder
from fakedata.manifest.ids import ID_ALPHABET, ID_LENGTH, new_id

ID_RE = re.compile(r"[a-z0-9]{16}")


def test_new_id_shape() -> None:
    for _ in range(50):
        assert ID_RE.fullmatch(new_id())
    assert set(ID_ALPHABET) == set("abcdefghijklmnopqrstuvwxyz0123456789")
    assert ID_LENGTH == 16


def test_new_id_rejects_bad_length() -> None:
    with pytest.raises(ValueError):
        new_id(0)


def test_compose() -> None:
    assert ManifestBuilder.compose("AJKD1234OMJU", 3, "Budget.xlsx") == "AJKD1234OMJU_3_Budget.xlsx"


def test_record_returns_composed_name_and_distinct_ids() -> None:
    builder = ManifestBuilder()
    name = builder.record("AJKD1234OMJU", 1, "Annual_Audit_Report.pdf")
    assert name == "AJKD1234OMJU_1_Annual_Audit_Report.pdf"
    row = builder.rows[0]
    assert ID_RE.fullmatch(row.primary_id)
    assert ID_RE.fullmatch(row.secondary_id)
    assert row.primary_id != row.secondary_id
    assert row.filename == name


def test_shared_ids() -> None:
    builder = ManifestBuilder(shared_ids=True)
    builder.record("AJKD1234OMJU", 1, "a.pdf")
    row = builder.rows[0]
    assert row.primary_id == row.secondary_id


def test_serialize_order_without_header_or_quotes() -> None:
    counter = itertools.count()
    builder = ManifestBuilder(id_factory=lambda: f"id{next(counter):014d}")
    builder.record("BBBBBBBBBBBB", 1, "z.pdf")
    builder.record("AAAAAAAAAAAA", 1, "a.pdf")
    builder.record("BBBBBBBBBBBB", 1, "z.pdf")
    assert builder.serialize() == (
        "id00000000000000,id00000000000001,BBBBBBBBBBBB_1_z.pdf\n"
        "id00000000000002,id00000000000003,AAAAAAAAAAAA_1_a.pdf\n"
        "id00000000000004,id00000000000005,BBBBBBBBBBBB_1_z.pdf\n"
    )
    assert len(builder) == 3


def test_leading_blank_line() -> None:
    builder = ManifestBuilder(leading_blank_line=True)
    builder.record("AJKD1234OMJU", 1, "a.pdf")
    text = builder.serialize()
    assert text.startswith("\n")
    assert text.count("\n") == 2


def test_empty_manifest() -> None:
    assert ManifestBuilder().serialize() == ""


def test_write(tmp_path: Path) -> None:
    builder = ManifestBuilder()
    builder.record("AJKD1234OMJU", 1, "Investment_Memo.docx")
    builder.record("AJKD1234OMJU", 2, "Fund_Overview.pptx")
    path = builder.write(tmp_path / "manifest.csv")
    with path.open(newline="", encoding="utf-8") as fh:
        rows = list(csv.reader(fh))
    assert [r[2] for r in rows] == [
        "AJKD1234OMJU_1_Investment_Memo.docx",
        "AJKD1234OMJU_2_Fund_Overview.pptx",
    ]
    assert all(len(r) == 3 for r in rows)
