"""Read a solution grid from an XLSX workbook."""

from __future__ import annotations

import sys
import zipfile
from pathlib import Path

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from models import Mark, PuzzleFormatError


def read_solution_xlsx(path: str | Path) -> list[list[Mark]]:
    """Open *path* and turn the active sheet's used range into a solution grid.

    Empty cells and zeros are EMPTY, every other value is FILLED.
    """
    path = Path(path)
    if not path.exists():
        raise PuzzleFormatError(f"File not found: {path}")

    try:
        wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    except (zipfile.BadZipFile, InvalidFileException, KeyError, OSError) as e:
        raise PuzzleFormatError(f"Cannot read workbook {path}: {e}") from None
    ws = wb.active
    rows = [
        list(row)
        for row in ws.iter_rows(
            min_row=1, max_row=ws.max_row, max_col=ws.max_column, values_only=True
        )
    ]
    wb.close()

    if not any(v is not None for row in rows for v in row):
        raise PuzzleFormatError(f"Sheet is empty: {path}")

    width = max(len(row) for row in rows)
    solution: list[list[Mark]] = []
    text_cells = 0
    for row in rows:
        row = row + [None] * (width - len(row))
        marks = []
        for value in row:
            mark = _cell_mark(value)
            if mark == Mark.FILLED and isinstance(value, str) and not _is_number(value):
                text_cells += 1
            marks.append(mark)
        solution.append(marks)

    if text_cells:
        print(
            f"Warning: {text_cells} non-numeric cell(s) in {path.name} treated as filled",
            file=sys.stderr,
        )
    return solution


def _cell_mark(value) -> Mark:
    if value is None:
        return Mark.EMPTY
    if isinstance(value, str):
        value = value.strip()
        if value == "" or (_is_number(value) and float(value) == 0):
            return Mark.EMPTY
        return Mark.FILLED
    return Mark.FILLED if value else Mark.EMPTY


def _is_number(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True
