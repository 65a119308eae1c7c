"""Round-trip tests: generate each format and reopen it with its library."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path

import pytest
from docx import Document
from odf import teletype
from odf.draw import Page
from odf.opendocument import load as load_odf
from odf.table import Table
from openpyxl import load_workbook
from PIL import Image
from pptx import Presentation
from pypdf import PdfReader

from fakedata.content.source import ContentSource
from fakedata.content.themes import Theme
from fakedata.generators.registry import build_registry
from fakedata.io.writers.odf_writer import to_openformula

BASE = "AJKD1234OMJU_1_Sample"


def _generate(tmp_path: Path, key: str, seed: int = 3) -> Path:
    tmp_path.mkdir(parents=True, exist_ok=True)
    source = ContentSource(Theme.FINANCIAL, seed=seed)
    artifact = build_registry()[key].generate(tmp_path, BASE, source)
    assert artifact.filename == f"{BASE}.{key}"
    assert artifact.path.exists()
    return artifact.path


def test_pdf_contains_report_sections(tmp_path: Path) -> None:
    path = _generate(tmp_path, "pdf")
    assert path.read_bytes().startswith(b"%PDF")
    text = "\n".join(page.extract_text() for page in PdfReader(str(path)).pages)
    assert "Executive Summary" in text
    assert "Financial Overview" in text


@pytest.mark.parametrize("key", ["xlsx", "xls"])
def test_workbook_sheets_and_formulas(tmp_path: Path, key: str) -> None:
    path = _generate(tmp_path, key)
    wb = load_workbook(BytesIO(path.read_bytes()))
    assert wb.sheetnames == ["Summary", "Revenue Details", "Expenses"]
    summary = wb["Summary"]
    assert "Financial Summary" in summary["A1"].value
    assert summary["A3"].value == "Category"
    assert summary["F4"].value == "=SUM(B4:E4)"
    assert summary["A11"].value == "TOTAL"
    assert summary["B11"].value == "=SUM(B4:B9)"
    assert "A1:F1" in {str(rng) for rng in summary.merged_cells.ranges}
    expenses = wb["Expenses"]
    assert expenses["E2"].value == "=C2-D2"


def test_docx_headings_and_table(tmp_path: Path) -> None:
    doc = Document(str(_generate(tmp_path, "docx")))
    text = [p.text for p in doc.paragraphs]
    assert "Executive Summary" in text
    assert "Next Steps" in text
    assert len(doc.tables) == 1
    assert [c.text for c in doc.tables[0].rows[0].cells] == ["Item", "Status", "Priority"]
    assert doc.sections[0].footer.paragraphs[0].text.startswith("Confidential - ")


def test_pptx_has_eight_slides(tmp_path: Path) -> None:
    prs = Presentation(str(_generate(tmp_path, "pptx")))
    slides = list(prs.slides)
    assert len(slides) == 8
    assert slides[1].shapes.title.text == "Agenda"
    assert slides[-1].shapes.title.text == "Thank You"


def test_jpeg_dimensions(tmp_path: Path) -> None:
    with Image.open(_generate(tmp_path, "jpeg")) as img:
        assert img.format == "JPEG"
        assert img.size == (1200, 800)


def test_ods_sheets(tmp_path: Path) -> None:
    doc = load_odf(str(_generate(tmp_path, "ods")))
    names = [t.getAttribute("name") for t in doc.spreadsheet.getElementsByType(Table)]
    assert names == ["Summary", "Expenses"]


def test_odt_text(tmp_path: Path) -> None:
    doc = load_odf(str(_generate(tmp_path, "odt")))
    text = teletype.extractText(doc.text)
    assert "Executive Summary" in text
    assert "Recommendations" in text


def test_odp_pages(tmp_path: Path) -> None:
    doc = load_odf(str(_generate(tmp_path, "odp")))
    pages = doc.presentation.getElementsByType(Page)
    assert len(pages) == 8
    assert "Agenda" in teletype.extractText(pages[1])


def test_same_seed_same_workbook_values(tmp_path: Path) -> None:
    a = load_workbook(BytesIO(_generate(tmp_path / "a", "xlsx", seed=11).read_bytes()))
    b = load_workbook(BytesIO(_generate(tmp_path / "b", "xlsx", seed=11).read_bytes()))
    rows_a = [[c.value for c in row] for row in a["Summary"].iter_rows()]
    rows_b = [[c.value for c in row] for row in b["Summary"].iter_rows()]
    assert rows_a == rows_b


@pytest.mark.parametrize(
    ("formula", "expected"),
    [
        ("=SUM(B4:E4)", "of:=SUM([.B4:.E4])"),
        ("=C2-D2", "of:=[.C2]-[.D2]"),
        ('=IF(E5>=0,"Under Budget","Over Budget")', 'of:=IF([.E5]>=0;"Under Budget";"Over Budget")'),
        ('=IF(A1="B2, C3",1,0)', 'of:=IF([.A1]="B2, C3";1;0)'),
    ],
)
def test_to_openformula(formula: str, expected: str) -> None:
    assert to_openformula(formula) == expected
