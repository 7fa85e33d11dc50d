"""Write puzzle hints to an XLSX file."""

from __future__ import annotations

import openpyxl
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from engine import Hint, PuzzleEngine
from models import Mark


def write_hints_xlsx(
    engine: PuzzleEngine,
    output_path: str,
    include_solution: bool = False,
) -> None:
    """Write row and column hints to an Excel workbook.

    Each hint line is one row: the line index in column A, then one run
    length per cell.  If *include_solution* is set, a third sheet holds the
    solution grid as 1/0.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Rows"
    _write_hint_sheet(ws, "ROW", engine.row_hints)

    ws2 = wb.create_sheet(title="Columns")
    _write_hint_sheet(ws2, "COLUMN", engine.col_hints)

    if include_solution:
        ws3 = wb.create_sheet(title="Solution")
        for r, row in enumerate(engine.solution, start=1):
            for c, mark in enumerate(row, start=1):
                ws3.cell(row=r, column=c, value=1 if mark == Mark.FILLED else 0)
        for c in range(1, engine.size.cols + 1):
            ws3.column_dimensions[get_column_letter(c)].width = 4

    wb.save(output_path)


def _write_hint_sheet(ws, label: str, hints: tuple[Hint, ...]) -> None:
    header_font = Font(bold=True, size=12)
    ws.cell(row=1, column=1, value=label).font = header_font
    ws.cell(row=1, column=2, value="HINTS").font = header_font

    for i, hint in enumerate(hints, start=2):
        ws.cell(row=i, column=1, value=i - 2)
        for j, run in enumerate(hint, start=2):
            ws.cell(row=i, column=j, value=run)

    ws.column_dimensions["A"].width = 10
