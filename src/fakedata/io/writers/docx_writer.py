"""Word document writer built on python-docx."""

from __future__ import annotations

import os

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt, RGBColor

from ...generators.outline import DocumentOutline, TableBlock

ACCENT = RGBColor(0x42, 0x85, 0xF4)
MUTED = RGBColor(0x66, 0x66, 0x66)
FAINT = RGBColor(0x99, 0x99, 0x99)


def _add_table(doc, block: TableBlock) -> None:
    table = doc.add_table(rows=1, cols=len(block.header))
    table.style = "Table Grid"
    for cell, text in zip(table.rows[0].cells, block.header):
        cell.text = ""
        run = cell.paragraphs[0].add_run(text)
        run.bold = True
    for values in block.rows:
        cells = table.add_row().cells
        for cell, text in zip(cells, values):
            cell.text = text


def write_docx(path: str | os.PathLike[str], outline: DocumentOutline) -> None:
    """Render ``outline`` as a ``.docx`` file at ``path``."""

    doc = Document()

    title = doc.add_paragraph()
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER
    run = title.add_run(outline.title)
    run.bold = True
    run.font.size = Pt(24)
    run.font.color.rgb = ACCENT

    if outline.subtitle:
        subtitle = doc.add_paragraph()
        subtitle.alignment = WD_ALIGN_PARAGRAPH.CENTER
        run = subtitle.add_run(outline.subtitle)
        run.font.size = Pt(14)
        run.font.color.rgb = MUTED

    meta = doc.add_paragraph()
    for i, line in enumerate(outline.meta):
        run = meta.add_run(line)
        run.font.size = Pt(10)
        run.font.color.rgb = MUTED
        if i < len(outline.meta) - 1:
            run.add_break()

    for section in outline.sections:
        doc.add_heading(section.heading, level=2)
        for text in section.paragraphs:
            doc.add_paragraph(text)
        for text in section.bullets:
            doc.add_paragraph(text, style="List Bullet")
        for text in section.numbered:
            doc.add_paragraph(text, style="List Number")
        if section.table is not None:
            _add_table(doc, section.table)

    if outline.footer:
        footer = doc.sections[0].footer.paragraphs[0]
        footer.alignment = WD_ALIGN_PARAGRAPH.CENTER
        run = footer.add_run(outline.footer)
        run.italic = True
        run.font.size = Pt(8)
        run.font.color.rgb = FAINT

    doc.save(os.fspath(path))


__all__ = ["write_docx"]
