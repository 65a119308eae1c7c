"""OpenDocument writers (ODS, ODT, ODP) built on odfpy.

Formulas in :class:`~fakedata.generators.outline.Cell` values use spreadsheet
A1 syntax (``=SUM(B4:B9)``) and are converted to OpenFormula
(``of:=SUM([.B4:.B9])``) before being stored.
"""

from __future__ import annotations

import os
import re

from odf.draw import Frame, Page, TextBox
from odf.number import CurrencyStyle, CurrencySymbol, Number, PercentageStyle
from odf.number import Text as NumberText
from odf.opendocument import (
    OpenDocumentPresentation,
    OpenDocumentSpreadsheet,
    OpenDocumentText,
)
from odf.style import (
    Footer,
    GraphicProperties,
    MasterPage,
    PageLayout,
    PageLayoutProperties,
    ParagraphProperties,
    Style,
    TableCellProperties,
    TableColumnProperties,
    TextProperties,
)
from odf.table import CoveredTableCell, Table, TableCell, TableColumn, TableRow
from odf.text import H, List, ListItem, ListLevelStyleBullet, ListLevelStyleNumber, ListStyle, P
from openpyxl.utils.cell import range_boundaries

from ...generators.outline import Cell, DeckOutline, DocumentOutline, TableBlock, WorkbookOutline

ACCENT = "#4285F4"
MUTED = "#666666"
FAINT = "#999999"

_REF_RE = re.compile(r"(?<![A-Za-z.\[])([A-Z]{1,3}[0-9]+)(?::([A-Z]{1,3}[0-9]+))?")


def to_openformula(formula: str) -> str:
    """Convert an A1-style ``=`` formula to OpenFormula syntax.

    Cell references and ranges outside string literals are wrapped as
    ``[.A1]`` / ``[.A1:.B2]`` and argument separators become ``;``.

    >>> to_openformula('=IF(E5>=0,"Under, Budget","Over")')
    'of:=IF([.E5]>=0;"Under, Budget";"Over")'
    """

    body = formula[1:] if formula.startswith("=") else formula
    parts = body.split('"')
    for i in range(0, len(parts), 2):
        converted = _REF_RE.sub(
            lambda m: f"[.{m.group(1)}:.{m.group(2)}]" if m.group(2) else f"[.{m.group(1)}]",
            parts[i],
        )
        parts[i] = converted.replace(",", ";")
    return "of:=" + '"'.join(parts)


# ---------------------------------------------------------------------------
# Spreadsheet
# ---------------------------------------------------------------------------


class _SheetStyles:
    def __init__(self, doc: OpenDocumentSpreadsheet) -> None:
        currency = CurrencyStyle(name="fd-currency")
        currency.addElement(CurrencySymbol(language="en", country="US", text="$"))
        currency.addElement(Number(decimalplaces=2, minintegerdigits=1, grouping="true"))
        percent = PercentageStyle(name="fd-percent")
        percent.addElement(Number(decimalplaces=1, minintegerdigits=1))
        percent.addElement(NumberText(text="%"))
        doc.automaticstyles.addElement(currency)
        doc.automaticstyles.addElement(percent)

        self.currency = Style(name="fd-currency-cell", family="table-cell", datastylename="fd-currency")
        self.percent = Style(name="fd-percent-cell", family="table-cell", datastylename="fd-percent")
        self.header = Style(name="fd-header-cell", family="table-cell")
        self.header.addElement(TableCellProperties(backgroundcolor=ACCENT))
        self.header.addElement(TextProperties(fontweight="bold", color="#FFFFFF"))
        self.title = Style(name="fd-title-cell", family="table-cell")
        self.title.addElement(TextProperties(fontweight="bold", fontsize="14pt"))
        self.total = Style(name="fd-total-cell", family="table-cell")
        self.total.addElement(TableCellProperties(backgroundcolor="#F5F5F5"))
        self.total.addElement(TextProperties(fontweight="bold"))
        for style in (self.currency, self.percent, self.header, self.title, self.total):
            doc.automaticstyles.addElement(style)

        self._doc = doc
        self._columns: dict[float, Style] = {}

    def column(self, width: float) -> Style:
        style = self._columns.get(width)
        if style is None:
            style = Style(name=f"fd-col-{len(self._columns)}", family="table-column")
            style.addElement(TableColumnProperties(columnwidth=f"{width * 0.08:.2f}in"))
            self._doc.automaticstyles.addElement(style)
            self._columns[width] = style
        return style

    def for_cell(self, cell: Cell) -> Style | None:
        return {
            "currency": self.currency,
            "percent": self.percent,
            "header": self.header,
            "title": self.title,
            "total": self.total,
        }.get(cell.style)


def _table_cell(cell: Cell | None, styles: _SheetStyles, span: int) -> TableCell:
    kwargs = {}
    if span > 1:
        kwargs["numbercolumnsspanned"] = span
    if cell is None:
        return TableCell(**kwargs)
    style = styles.for_cell(cell)
    if style is not None:
        kwargs["stylename"] = style

    if cell.is_formula:
        valuetype = "string" if cell.value.startswith("=IF(") else "float"
        return TableCell(formula=to_openformula(cell.value), valuetype=valuetype, **kwargs)
    if isinstance(cell.value, (int, float)):
        if cell.style == "currency":
            tc = TableCell(valuetype="currency", currency="USD", value=cell.value, **kwargs)
            tc.addElement(P(text=f"${cell.value:,.2f}"))
        elif cell.style == "percent":
            tc = TableCell(valuetype="percentage", value=cell.value, **kwargs)
            tc.addElement(P(text=f"{cell.value * 100:.1f}%"))
        else:
            tc = TableCell(valuetype="float", value=cell.value, **kwargs)
            tc.addElement(P(text=str(cell.value)))
        return tc
    tc = TableCell(valuetype="string", **kwargs)
    tc.addElement(P(text="" if cell.value is None else str(cell.value)))
    return tc


def write_ods(path: str | os.PathLike[str], outline: WorkbookOutline) -> None:
    """Render ``outline`` as an ``.ods`` spreadsheet at ``path``."""

    doc = OpenDocumentSpreadsheet()
    styles = _SheetStyles(doc)

    for sheet in outline.sheets:
        table = Table(name=sheet.name)
        for width in sheet.column_widths:
            table.addElement(TableColumn(stylename=styles.column(width)))

        spans: dict[tuple[int, int], int] = {}
        covered: set[tuple[int, int]] = set()
        for rng in sheet.merges:
            min_col, min_row, max_col, _ = range_boundaries(rng)
            spans[(min_row, min_col)] = max_col - min_col + 1
            covered.update((min_row, c) for c in range(min_col + 1, max_col + 1))

        for r, row in enumerate(sheet.rows, start=1):
            tr = TableRow()
            width = max(len(row), max((c for rr, c in covered if rr == r), default=0))
            for c in range(1, width + 1):
                if (r, c) in covered:
                    tr.addElement(CoveredTableCell())
                    continue
                cell = row[c - 1] if c <= len(row) else None
                tr.addElement(_table_cell(cell, styles, spans.get((r, c), 1)))
            if width == 0:
                tr.addElement(TableCell())
            table.addElement(tr)
        doc.spreadsheet.addElement(table)

    doc.save(os.fspath(path))


# ---------------------------------------------------------------------------
# Text document
# ---------------------------------------------------------------------------


def _paragraph_style(name: str, **text_props: str) -> Style:
    style = Style(name=name, family="paragraph")
    style.addElement(TextProperties(**text_props))
    return style


def _text_table(block: TableBlock, header_style: Style, index: int) -> Table:
    table = Table(name=f"Table{index}")
    table.addElement(TableColumn(numbercolumnsrepeated=len(block.header)))
    tr = TableRow()
    for text in block.header:
        tc = TableCell(valuetype="string")
        tc.addElement(P(stylename=header_style, text=text))
        tr.addElement(tc)
    table.addElement(tr)
    for values in block.rows:
        tr = TableRow()
        for text in values:
            tc = TableCell(valuetype="string")
            tc.addElement(P(text=text))
            tr.addElement(tc)
        table.addElement(tr)
    return table


def write_odt(path: str | os.PathLike[str], outline: DocumentOutline) -> None:
    """Render ``outline`` as an ``.odt`` document at ``path``."""

    doc = OpenDocumentText()

    title_style = _paragraph_style("fd-title", fontsize="24pt", fontweight="bold", color=ACCENT)
    title_style.addElement(ParagraphProperties(textalign="center"))
    subtitle_style = _paragraph_style("fd-subtitle", fontsize="14pt", color=MUTED)
    subtitle_style.addElement(ParagraphProperties(textalign="center"))
    meta_style = _paragraph_style("fd-meta", fontsize="10pt", color=MUTED)
    heading_style = _paragraph_style("fd-heading", fontsize="14pt", fontweight="bold", color=ACCENT)
    bold_style = _paragraph_style("fd-bold", fontweight="bold")
    footer_style = _paragraph_style("fd-footer", fontsize="8pt", fontstyle="italic", color=FAINT)
    footer_style.addElement(ParagraphProperties(textalign="center"))
    for style in (title_style, subtitle_style, meta_style, heading_style, bold_style):
        doc.automaticstyles.addElement(style)
    doc.styles.addElement(footer_style)

    bullets = ListStyle(name="fd-bullets")
    bullets.addElement(ListLevelStyleBullet(level=1, bulletchar="•"))
    numbers = ListStyle(name="fd-numbers")
    numbers.addElement(ListLevelStyleNumber(level=1, numformat="1", numsuffix="."))
    doc.automaticstyles.addElement(bullets)
    doc.automaticstyles.addElement(numbers)

    if outline.footer:
        layout = PageLayout(name="fd-page")
        layout.addElement(PageLayoutProperties(pagewidth="8.5in", pageheight="11in", margin="0.8in"))
        doc.automaticstyles.addElement(layout)
        master = MasterPage(name="Standard", pagelayoutname=layout)
        footer = Footer()
        footer.addElement(P(stylename=footer_style, text=outline.footer))
        master.addElement(footer)
        doc.masterstyles.addElement(master)

    doc.text.addElement(P(stylename=title_style, text=outline.title))
    if outline.subtitle:
        doc.text.addElement(P(stylename=subtitle_style, text=outline.subtitle))
    for line in outline.meta:
        doc.text.addElement(P(stylename=meta_style, text=line))

    for index, section in enumerate(outline.sections, start=1):
        doc.text.addElement(H(outlinelevel=2, stylename=heading_style, text=section.heading))
        for text in section.paragraphs:
            doc.text.addElement(P(text=text))
        for items, list_style in ((section.bullets, bullets), (section.numbered, numbers)):
            if not items:
                continue
            lst = List(stylename=list_style)
            for text in items:
                item = ListItem()
                item.addElement(P(text=text))
                lst.addElement(item)
            doc.text.addElement(lst)
        if section.table is not None:
            doc.text.addElement(_text_table(section.table, bold_style, index))

    doc.save(os.fspath(path))


# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------


def write_odp(path: str | os.PathLike[str], outline: DeckOutline) -> None:
    """Render ``outline`` as an ``.odp`` presentation at ``path``."""

    doc = OpenDocumentPresentation()

    layout = PageLayout(name="fd-slide")
    layout.addElement(PageLayoutProperties(
        margin="0cm", pagewidth="28cm", pageheight="21cm", printorientation="landscape"
    ))
    doc.automaticstyles.addElement(layout)
    master = MasterPage(name="fd-master", pagelayoutname=layout)
    doc.masterstyles.addElement(master)

    title_style = Style(name="fd-slide-title", family="presentation")
    title_style.addElement(ParagraphProperties(textalign="center"))
    title_style.addElement(TextProperties(fontsize="32pt", fontweight="bold", color=ACCENT))
    title_style.addElement(GraphicProperties(stroke="none", fill="none"))
    body_style = Style(name="fd-slide-body", family="presentation")
    body_style.addElement(TextProperties(fontsize="18pt", color="#333333"))
    body_style.addElement(GraphicProperties(stroke="none", fill="none"))
    doc.styles.addElement(title_style)
    doc.styles.addElement(body_style)

    for number, spec in enumerate(outline.slides, start=1):
        page = Page(name=f"Slide{number}", masterpagename=master)
        title_y = "7cm" if spec.kind == "title" else "1cm"
        frame = Frame(stylename=title_style, width="24cm", height="3cm", x="2cm", y=title_y)
        box = TextBox()
        box.addElement(P(text=spec.title))
        frame.addElement(box)
        page.addElement(frame)

        lines = spec.subtitle.split("\n") if spec.subtitle else []
        lines.extend(("    – " if b.level else "• ") + b.text for b in spec.bullets)
        if lines:
            body_y = "10.5cm" if spec.kind == "title" else "4.5cm"
            frame = Frame(stylename=body_style, width="24cm", height="14cm", x="2cm", y=body_y)
            box = TextBox()
            for line in lines:
                box.addElement(P(text=line))
            frame.addElement(box)
            page.addElement(frame)
        doc.presentation.addElement(page)

    doc.save(os.fspath(path))


__all__ = ["to_openformula", "write_odp", "write_ods", "write_odt"]
