"""Outline builders: turn a :class:`ContentSource` into document outlines.

One builder serves each family of formats.  Every random choice goes through
the source so a seeded source reproduces the same outline.
"""

from __future__ import annotations

from datetime import date
from typing import Final

from ..content.source import ContentSource
from .charts import build_chart
from .outline import (
    Bullet,
    Cell,
    ChartOutline,
    DeckOutline,
    DocumentOutline,
    Section,
    SheetOutline,
    Slide,
    TableBlock,
    WorkbookOutline,
)

REPORT_METRICS: Final = (
    "Revenue",
    "Expenses",
    "Profit",
    "Growth Rate",
    "Market Share",
    "Customer Retention",
)
STATUS_ITEMS: Final = ("Project Timeline", "Resource Allocation", "Budget Review", "Risk Assessment")
STATUSES: Final = ("Complete", "In Progress", "Pending", "Under Review")
PRIORITIES: Final = ("High", "Medium", "Low", "Critical")
PRODUCTS: Final = (
    "Enterprise License",
    "Professional License",
    "Basic License",
    "Support Contract",
    "Consulting",
    "Training",
)
REGIONS: Final = ("North America", "Europe", "Asia Pacific", "Latin America")
BUDGET_DEPARTMENTS: Final = ("Finance", "Marketing", "Sales", "Operations", "IT")
AGENDA: Final = (
    "Executive Overview",
    "Market Analysis",
    "Key Metrics",
    "Strategic Initiatives",
    "Q&A",
)
QUARTER_COLUMNS: Final = ("B", "C", "D", "E")


def _meta(source: ContentSource) -> list[str]:
    return [
        f"Prepared by: {source.full_name()}",
        f"Department: {source.department()}",
        f"Date: {date.today().isoformat()}",
    ]


# ---------------------------------------------------------------------------
# Text documents
# ---------------------------------------------------------------------------


def build_report(source: ContentSource) -> DocumentOutline:
    """Quarterly report with a financial overview table (PDF)."""

    company = source.company_name()
    rows = []
    for metric in REPORT_METRICS:
        current = source.amount(1, 10)
        previous = source.amount(1, 10)
        change = source.amount(-15, 25)
        rows.append([metric, f"${current:.2f}M", f"${previous:.2f}M", f"{change:+.1f}%"])

    return DocumentOutline(
        title=source.report_title(),
        meta=_meta(source),
        sections=[
            Section("Executive Summary", paragraphs=[source.executive_summary()]),
            Section("Key Highlights", bullets=source.bullet_points(5)),
            Section("Detailed Analysis", paragraphs=[source.paragraph() for _ in range(3)]),
            Section(
                "Financial Overview",
                table=TableBlock(["Metric", "Current", "Previous", "Change"], rows, trend_column=3),
            ),
            Section("Recommendations", numbered=source.bullet_points(4)),
        ],
        footer=f"Confidential - {company}",
    )


def build_document(source: ContentSource) -> DocumentOutline:
    """Business document with a status table (DOCX, ODT)."""

    title = source.document_name().replace("_", " ")
    company = source.company_name()
    status_rows = [[item, source.pick(STATUSES), source.pick(PRIORITIES)] for item in STATUS_ITEMS]

    return DocumentOutline(
        title=title,
        subtitle=company,
        meta=_meta(source),
        sections=[
            Section("Executive Summary", paragraphs=[source.executive_summary()]),
            Section("Background", paragraphs=[source.paragraph(), source.paragraph()]),
            Section("Key Points", bullets=source.bullet_points(5)),
            Section("Analysis", paragraphs=[source.paragraph()]),
            Section("Summary Data", table=TableBlock(["Item", "Status", "Priority"], status_rows)),
            Section("Recommendations", numbered=source.bullet_points(4)),
            Section("Next Steps", paragraphs=[source.paragraph()]),
        ],
        footer=f"Confidential - {company} - {date.today().year}",
    )


# ---------------------------------------------------------------------------
# Workbooks
# ---------------------------------------------------------------------------


def _summary_sheet(source: ContentSource, company: str, year: int) -> SheetOutline:
    sheet = SheetOutline("Summary", column_widths=[28, 15, 15, 15, 15, 17, 14])
    sheet.append(Cell(f"{company} - Financial Summary {year}", "title"))
    sheet.merges.append("A1:F1")
    sheet.blank()
    sheet.append(*(Cell(h, "header") for h in source.financial_headers()))

    streams = source.revenue_streams()
    first = len(sheet.rows) + 1
    for stream, row in zip(streams, source.financial_rows(len(streams))):
        r = len(sheet.rows) + 1
        sheet.append(
            Cell(stream),
            *(Cell(round(q, 2), "currency") for q in row.quarters),
            Cell(f"=SUM(B{r}:E{r})", "currency"),
            Cell(round(row.growth / 100, 4), "percent"),
        )
    last = len(sheet.rows)
    sheet.blank()
    sheet.append(
        Cell("TOTAL", "total"),
        *(Cell(f"=SUM({c}{first}:{c}{last})", "currency") for c in (*QUARTER_COLUMNS, "F")),
    )
    return sheet


def _revenue_sheet(source: ContentSource) -> SheetOutline:
    sheet = SheetOutline("Revenue Details", column_widths=[24, 18, 14, 14, 14, 14, 16])
    sheet.append(*(Cell(h, "header") for h in ("Product", "Region", "Q1", "Q2", "Q3", "Q4", "Total")))
    for product in PRODUCTS:
        for region in REGIONS:
            r = len(sheet.rows) + 1
            quarters = [Cell(round(source.amount(10_000, 50_000), 2), "currency") for _ in range(4)]
            sheet.append(Cell(product), Cell(region), *quarters, Cell(f"=SUM(C{r}:F{r})", "currency"))
    return sheet


def _expense_sheet(source: ContentSource) -> SheetOutline:
    sheet = SheetOutline("Expenses", column_widths=[24, 16, 15, 15, 15, 16])
    sheet.append(
        *(Cell(h, "header") for h in ("Category", "Department", "Budget", "Actual", "Variance", "Status"))
    )
    for category in source.expense_categories():
        for _ in range(2):
            r = len(sheet.rows) + 1
            budget = source.amount(20_000, 80_000)
            actual = budget * source.amount(0.85, 1.15)
            sheet.append(
                Cell(category),
                Cell(source.pick(BUDGET_DEPARTMENTS)),
                Cell(round(budget, 2), "currency"),
                Cell(round(actual, 2), "currency"),
                Cell(f"=C{r}-D{r}", "currency"),
                Cell(f'=IF(E{r}>=0,"Under Budget","Over Budget")'),
            )
    return sheet


def _compact_expense_sheet(source: ContentSource) -> SheetOutline:
    sheet = SheetOutline("Expenses", column_widths=[24, 15, 15, 15])
    sheet.append(*(Cell(h, "header") for h in ("Category", "Budget", "Actual", "Variance")))
    for category in source.expense_categories():
        r = len(sheet.rows) + 1
        budget = source.amount(20_000, 80_000)
        actual = budget * source.amount(0.85, 1.15)
        sheet.append(
            Cell(category),
            Cell(round(budget, 2), "currency"),
            Cell(round(actual, 2), "currency"),
            Cell(f"=B{r}-C{r}", "currency"),
        )
    return sheet


def build_workbook(source: ContentSource) -> WorkbookOutline:
    """Three-sheet financial workbook (XLSX, XLS)."""

    company = source.company_name()
    year = source.year()
    return WorkbookOutline(
        title=f"{company} - Financial Summary {year}",
        sheets=[_summary_sheet(source, company, year), _revenue_sheet(source), _expense_sheet(source)],
    )


def build_compact_workbook(source: ContentSource) -> WorkbookOutline:
    """Summary and per-category expenses (ODS)."""

    company = source.company_name()
    year = source.year()
    return WorkbookOutline(
        title=f"{company} - Financial Summary {year}",
        sheets=[_summary_sheet(source, company, year), _compact_expense_sheet(source)],
    )


# ---------------------------------------------------------------------------
# Presentations
# ---------------------------------------------------------------------------


def build_deck(source: ContentSource) -> DeckOutline:
    """Title, agenda, four content slides, takeaways and a closing slide."""

    title = source.presentation_name().replace("_", " ")
    company = source.company_name()
    presenter = source.full_name()
    slides = [
        Slide(title, "title", subtitle=f"{company}\n{presenter} | {source.quarter()} {source.year()}"),
        Slide("Agenda", bullets=[Bullet(item) for item in AGENDA]),
    ]
    for _ in range(4):
        points = source.slide_content()
        bullets = [Bullet(p) for p in points]
        if len(points) > 2:
            bullets.insert(2, Bullet(source.sentence(), level=1))
        slides.append(Slide(source.slide_title(), bullets=bullets))
    slides.append(
        Slide(
            "Key Takeaways",
            bullets=[Bullet(f"{i}. {p}") for i, p in enumerate(source.bullet_points(4), start=1)],
        )
    )
    slides.append(Slide("Thank You", "title", subtitle=f"Questions?\n{presenter}\n{source.email()}"))
    return DeckOutline(title=title, slides=slides)


# ---------------------------------------------------------------------------
# Images
# ---------------------------------------------------------------------------


def build_image(source: ContentSource) -> ChartOutline:
    """A bar, pie or line chart chosen at random."""

    return build_chart(source)


__all__ = [
    "build_compact_workbook",
    "build_deck",
    "build_document",
    "build_image",
    "build_report",
    "build_workbook",
]
