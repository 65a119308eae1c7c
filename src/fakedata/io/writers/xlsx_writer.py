"""Spreadsheet writer built on openpyxl.

Serves both ``.xlsx`` and ``.xls`` targets; the latter receives the same
Office Open XML content under the legacy extension.
"""

from __future__ import annotations

import os

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from ...generators.outline import Cell, WorkbookOutline

CURRENCY_FORMAT = "$#,##0.00"
PERCENT_FORMAT = "0.0%"

_HEADER_FILL = PatternFill(start_color="4285F4", end_color="4285F4", fill_type="solid")
_TOTAL_FILL = PatternFill(start_color="F5F5F5", end_color="F5F5F5", fill_type="solid")


def _apply_style(target, cell: Cell) -> None:
    if cell.style == "title":
        target.font = Font(bold=True, size=14)
        target.alignment = Alignment(horizontal="center")
    elif cell.style == "header":
        target.font = Font(bold=True, color="FFFFFF")
        target.fill = _HEADER_FILL
        target.alignment = Alignment(horizontal="center")
    elif cell.style == "total":
        target.font = Font(bold=True)
        target.fill = _TOTAL_FILL
    elif cell.style == "currency":
        target.number_format = CURRENCY_FORMAT
    elif cell.style == "percent":
        target.number_format = PERCENT_FORMAT


def write_xlsx(path: str | os.PathLike[str], outline: WorkbookOutline) -> None:
    """Render ``outline`` as a workbook at ``path``."""

    wb = Workbook()
    wb.remove(wb.active)
    wb.properties.title = outline.title

    for sheet in outline.sheets:
        ws = wb.create_sheet(title=sheet.name)
        for r, row in enumerate(sheet.rows, start=1):
            for c, cell in enumerate(row, start=1):
                if cell is None:
                    continue
                target = ws.cell(row=r, column=c, value=cell.value)
                _apply_style(target, cell)
        for rng in sheet.merges:
            ws.merge_cells(rng)
        for i, width in enumerate(sheet.column_widths, start=1):
            ws.column_dimensions[get_column_letter(i)].width = width

    wb.save(os.fspath(path))


__all__ = ["CURRENCY_FORMAT", "PERCENT_FORMAT", "write_xlsx"]
