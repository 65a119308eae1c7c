"""PDF report writer.

Renders a :class:`~fakedata.generators.outline.DocumentOutline` with the
reportlab platypus layer on US-letter pages.  Text is escaped before being
handed to :class:`~reportlab.platypus.Paragraph`, which parses inline markup.
"""

from __future__ import annotations

import os
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, StyleSheet1, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import (
    ListFlowable,
    ListItem,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from ...generators.outline import DocumentOutline, TableBlock

ACCENT = colors.HexColor("#4285F4")
BODY = colors.HexColor("#333333")
MUTED = colors.HexColor("#666666")
FAINT = colors.HexColor("#999999")
ALT_ROW = colors.HexColor("#F5F5F5")
GAIN = colors.Color(15 / 255, 157 / 255, 88 / 255)
LOSS = colors.Color(219 / 255, 68 / 255, 55 / 255)


def _styles() -> StyleSheet1:
    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(
        name="ReportTitle",
        parent=styles["Title"],
        fontSize=22,
        textColor=ACCENT,
        alignment=TA_CENTER,
        spaceAfter=12,
    ))
    styles.add(ParagraphStyle(
        name="ReportSubtitle",
        parent=styles["Normal"],
        fontSize=13,
        textColor=MUTED,
        alignment=TA_CENTER,
        spaceAfter=10,
    ))
    styles.add(ParagraphStyle(
        name="SectionHeading",
        parent=styles["Heading2"],
        fontSize=14,
        textColor=ACCENT,
        spaceBefore=14,
        spaceAfter=6,
    ))
    styles.add(ParagraphStyle(
        name="Body",
        parent=styles["Normal"],
        fontSize=10.5,
        leading=15,
        textColor=BODY,
        spaceAfter=8,
    ))
    styles.add(ParagraphStyle(
        name="Meta",
        parent=styles["Normal"],
        fontSize=10,
        textColor=MUTED,
    ))
    styles.add(ParagraphStyle(
        name="Footer",
        parent=styles["Normal"],
        fontSize=8,
        textColor=FAINT,
        alignment=TA_CENTER,
    ))
    return styles


def _table(block: TableBlock) -> Table:
    data = [block.header, *block.rows]
    table = Table(data, hAlign="CENTER")
    commands = [
        ("BACKGROUND", (0, 0), (-1, 0), ACCENT),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 10),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#CCCCCC")),
        ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("TOPPADDING", (0, 0), (-1, -1), 5),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 5),
    ]
    for i in range(1, len(data)):
        if i % 2 == 0:
            commands.append(("BACKGROUND", (0, i), (-1, i), ALT_ROW))
        if block.trend_column is not None:
            color = LOSS if data[i][block.trend_column].startswith("-") else GAIN
            commands.append(("TEXTCOLOR", (block.trend_column, i), (block.trend_column, i), color))
    table.setStyle(TableStyle(commands))
    return table


def write_pdf(path: str | os.PathLike[str], outline: DocumentOutline) -> None:
    """Render ``outline`` as a PDF at ``path``."""

    styles = _styles()
    doc = SimpleDocTemplate(
        os.fspath(path),
        pagesize=letter,
        leftMargin=0.8 * inch,
        rightMargin=0.8 * inch,
        topMargin=0.8 * inch,
        bottomMargin=0.8 * inch,
        title=outline.title,
    )

    story: list = [Paragraph(escape(outline.title), styles["ReportTitle"])]
    if outline.subtitle:
        story.append(Paragraph(escape(outline.subtitle), styles["ReportSubtitle"]))
    for line in outline.meta:
        label, _, value = line.partition(": ")
        story.append(Paragraph(f"<b>{escape(label)}:</b> {escape(value)}", styles["Meta"]))
    story.append(Spacer(1, 0.2 * inch))

    for section in outline.sections:
        story.append(Paragraph(escape(section.heading), styles["SectionHeading"]))
        for text in section.paragraphs:
            story.append(Paragraph(escape(text), styles["Body"]))
        if section.bullets:
            story.append(ListFlowable(
                [ListItem(Paragraph(escape(b), styles["Body"])) for b in section.bullets],
                bulletType="bullet",
                start="•",
            ))
        if section.numbered:
            story.append(ListFlowable(
                [ListItem(Paragraph(escape(n), styles["Body"])) for n in section.numbered],
                bulletType="1",
            ))
        if section.table is not None:
            story.append(_table(section.table))

    if outline.footer:
        story.append(Spacer(1, 0.4 * inch))
        story.append(Paragraph(escape(outline.footer), styles["Footer"]))

    doc.build(story)


__all__ = ["write_pdf"]
