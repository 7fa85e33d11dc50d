"""Read and write the plain-text puzzle description.

Format::

    rows cols
    <rows lines of cols whitespace-separated tokens>

A token of ``0`` is an empty cell, any other token a filled one.  Nothing may
follow the last grid line.
"""

from __future__ import annotations

from pathlib import Path

from models import Mark, PuzzleFormatError

Solution = list[list[Mark]]


def load_solution(path: str | Path) -> Solution:
    """Load a solution grid, picking the reader by file suffix."""
    path = Path(path)
    if path.suffix.lower() == ".xlsx":
        from xlsx_reader import read_solution_xlsx
        return read_solution_xlsx(path)
    return read_puzzle(path)


def read_puzzle(path: str | Path) -> Solution:
    path = Path(path)
    if not path.exists():
        raise PuzzleFormatError(f"File not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        raise PuzzleFormatError(f"Cannot read {path}: {e}") from None
    return parse_puzzle(text)


def parse_puzzle(text: str) -> Solution:
    """Parse a textual puzzle description into a grid of marks."""
    lines = text.splitlines()
    if not lines:
        raise PuzzleFormatError("Invalid format: missing size line")

    rows, cols = _parse_size(lines[0])
    body = lines[1:]
    if len(body) < rows:
        raise PuzzleFormatError(
            f"Invalid format: expected {rows} grid lines, found {len(body)}"
        )
    if len(body) > rows:
        raise PuzzleFormatError(
            f"Invalid format: unexpected content after line {rows + 1}"
        )

    solution: Solution = []
    for i, line in enumerate(body, start=2):
        tokens = line.split()
        if len(tokens) != cols:
            raise PuzzleFormatError(
                f"Invalid format: line {i} has {len(tokens)} cells, expected {cols}"
            )
        solution.append([Mark.EMPTY if t == "0" else Mark.FILLED for t in tokens])
    return solution


def format_puzzle(solution: Solution) -> str:
    """Inverse of :func:`parse_puzzle`, writing ``1`` for filled cells."""
    rows = len(solution)
    cols = len(solution[0]) if rows else 0
    out = [f"{rows} {cols}"]
    for row in solution:
        out.append(" ".join("1" if m == Mark.FILLED else "0" for m in row))
    return "\n".join(out) + "\n"


def write_puzzle(solution: Solution, output_path: str | Path) -> None:
    Path(output_path).write_text(format_puzzle(solution), encoding="utf-8")


def _parse_size(line: str) -> tuple[int, int]:
    parts = line.split()
    if len(parts) != 2:
        raise PuzzleFormatError(
            f"Invalid format: size line must be 'rows cols', got {line!r}"
        )
    try:
        rows, cols = int(parts[0]), int(parts[1])
    except ValueError:
        raise PuzzleFormatError(f"Invalid format: bad size {line!r}") from None
    if rows < 1 or cols < 1:
        raise PuzzleFormatError(f"Invalid format: size must be positive, got {line!r}")
    return rows, cols
