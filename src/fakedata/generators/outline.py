"""Library-neutral outlines of generated documents.

Outline builders (:mod:`fakedata.generators.builders`) fill these structures
from a :class:`~fakedata.content.source.ContentSource`; writers under
:mod:`fakedata.io.writers` render them with a concrete library.  Keeping the
two apart lets the content of every format be tested without opening the
produced file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union

RGB = tuple[int, int, int]

# ---------------------------------------------------------------------------
# Text documents (pdf, docx, odt)
# ---------------------------------------------------------------------------


@dataclass
class TableBlock:
    """A simple grid with a header row.

    ``trend_column`` names the column whose signed values are coloured as
    gains or losses by writers that support it.
    """

    header: list[str]
    rows: list[list[str]]
    trend_column: int | None = None


@dataclass
class Section:
    heading: str
    paragraphs: list[str] = field(default_factory=list)
    bullets: list[str] = field(default_factory=list)
    numbered: list[str] = field(default_factory=list)
    table: TableBlock | None = None


@dataclass
class DocumentOutline:
    title: str
    subtitle: str | None = None
    meta: list[str] = field(default_factory=list)
    sections: list[Section] = field(default_factory=list)
    footer: str | None = None

    def iter_text(self) -> list[str]:
        """All visible strings in reading order."""

        parts = [self.title]
        if self.subtitle:
            parts.append(self.subtitle)
        parts.extend(self.meta)
        for section in self.sections:
            parts.append(section.heading)
            parts.extend(section.paragraphs)
            parts.extend(section.bullets)
            parts.extend(section.numbered)
            if section.table is not None:
                parts.extend(section.table.header)
                for row in section.table.rows:
                    parts.extend(row)
        if self.footer:
            parts.append(self.footer)
        return parts


# ---------------------------------------------------------------------------
# Workbooks (xlsx, xls, ods)
# ---------------------------------------------------------------------------

CellStyle = Literal["text", "title", "header", "currency", "percent", "total"]
CellValue = Union[str, int, float, None]


@dataclass(frozen=True)
class Cell:
    """One spreadsheet cell.  A string starting with ``=`` is a formula."""

    value: CellValue
    style: CellStyle = "text"

    @property
    def is_formula(self) -> bool:
        return isinstance(self.value, str) and self.value.startswith("=")


@dataclass
class SheetOutline:
    """Rows of cells; ``None`` leaves a cell empty.

    ``merges`` holds A1-style ranges such as ``"A1:F1"``.  ``column_widths``
    is indexed from column A in character units.
    """

    name: str
    rows: list[list[Cell | None]] = field(default_factory=list)
    column_widths: list[float] = field(default_factory=list)
    merges: list[str] = field(default_factory=list)

    def append(self, *cells: Cell | None) -> int:
        """Append a row and return its 1-based row number."""

        self.rows.append(list(cells))
        return len(self.rows)

    def blank(self) -> int:
        return self.append()


@dataclass
class WorkbookOutline:
    title: str
    sheets: list[SheetOutline] = field(default_factory=list)

    def sheet(self, name: str) -> SheetOutline:
        """Return the sheet called ``name``."""

        for sheet in self.sheets:
            if sheet.name == name:
                return sheet
        raise KeyError(name)


# ---------------------------------------------------------------------------
# Presentations (pptx, odp)
# ---------------------------------------------------------------------------

SlideKind = Literal["title", "content"]


@dataclass(frozen=True)
class Bullet:
    text: str
    level: int = 0


@dataclass
class Slide:
    title: str
    kind: SlideKind = "content"
    subtitle: str | None = None
    bullets: list[Bullet] = field(default_factory=list)


@dataclass
class DeckOutline:
    title: str
    slides: list[Slide] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Charts (jpeg)
# ---------------------------------------------------------------------------

ChartKind = Literal["bar", "pie", "line"]


@dataclass(frozen=True)
class Bar:
    label: str
    value: float
    box: tuple[int, int, int, int]
    color: RGB


@dataclass(frozen=True)
class PieSlice:
    label: str
    value: float
    share: float
    start: float
    end: float
    color: RGB


@dataclass(frozen=True)
class LineSeries:
    name: str
    values: list[float]
    points: list[tuple[int, int]]
    color: RGB


@dataclass(frozen=True)
class Tick:
    """An axis label drawn at pixel position ``pos``."""

    pos: int
    label: str


@dataclass
class ChartOutline:
    """A rendered chart described in pixel coordinates.

    Angles of pie slices are degrees measured clockwise from three o'clock,
    matching :meth:`PIL.ImageDraw.ImageDraw.pieslice`.
    """

    kind: ChartKind
    width: int
    height: int
    title: str
    subtitle: str
    footer: str
    plot: tuple[int, int, int, int] = (0, 0, 0, 0)
    bars: list[Bar] = field(default_factory=list)
    slices: list[PieSlice] = field(default_factory=list)
    series: list[LineSeries] = field(default_factory=list)
    x_ticks: list[Tick] = field(default_factory=list)
    y_ticks: list[Tick] = field(default_factory=list)
    pie_center: tuple[int, int] = (0, 0)
    pie_radius: int = 0


Outline = Union[DocumentOutline, WorkbookOutline, DeckOutline, ChartOutline]

__all__ = [
    "Bar",
    "Bullet",
    "Cell",
    "CellStyle",
    "CellValue",
    "ChartKind",
    "ChartOutline",
    "DeckOutline",
    "DocumentOutline",
    "LineSeries",
    "Outline",
    "PieSlice",
    "RGB",
    "Section",
    "SheetOutline",
    "Slide",
    "TableBlock",
    "Tick",
    "WorkbookOutline",
]
