"""Render a toroidal nonogram as standalone SVG."""

from __future__ import annotations

from engine import PuzzleEngine
from models import Mark


def render_svg(
    engine: PuzzleEngine,
    output_path: str,
    show_answers: bool = False,
    cell_size: float | None = None,
) -> None:
    """Write hints and grid to an SVG file.

    Row hints sit left of the grid, column hints above it, one hint per
    cell-sized slot.
    """
    size = engine.size
    row_slots = hint_slots(engine.row_hints)
    col_slots = hint_slots(engine.col_hints)
    if cell_size is None:
        cell_size = _default_cell_size(max(size.rows + col_slots, size.cols + row_slots))

    hint_font = cell_size * 0.5
    width = cell_size * (row_slots + size.cols)
    height = cell_size * (col_slots + size.rows)
    gx = cell_size * row_slots
    gy = cell_size * col_slots

    parts: list[str] = []
    parts.append(
        f'<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">\n'
    )

    for r, hint in enumerate(engine.row_hints):
        first = row_slots - len(hint)
        for i, run in enumerate(hint):
            cx = (first + i + 0.5) * cell_size
            cy = gy + (r + 0.5) * cell_size
            parts.append(_hint_text(cx, cy, hint_font, run))

    for c, hint in enumerate(engine.col_hints):
        first = col_slots - len(hint)
        for i, run in enumerate(hint):
            cx = gx + (c + 0.5) * cell_size
            cy = (first + i + 0.5) * cell_size
            parts.append(_hint_text(cx, cy, hint_font, run))

    for r in range(size.rows):
        for c in range(size.cols):
            x = gx + c * cell_size
            y = gy + r * cell_size
            filled = show_answers and engine.solution[r][c] == Mark.FILLED
            fill = "black" if filled else "white"
            parts.append(
                f'  <rect x="{x}" y="{y}" width="{cell_size}" '
                f'height="{cell_size}" fill="{fill}" '
                f'stroke="black" stroke-width="0.5"/>\n'
            )

    # Grid border; dashed to show the board wraps around
    parts.append(
        f'  <rect x="{gx}" y="{gy}" width="{cell_size * size.cols}" '
        f'height="{cell_size * size.rows}" fill="none" stroke="black" '
        f'stroke-width="1.5" stroke-dasharray="4,2"/>\n'
    )
    parts.append('</svg>\n')

    with open(output_path, 'w', encoding='utf-8') as f:
        f.writelines(parts)


def render_puzzle_svg(engine: PuzzleEngine, output_path: str) -> None:
    """Render hints and an empty grid to SVG."""
    render_svg(engine, output_path, show_answers=False)


def render_answer_svg(engine: PuzzleEngine, output_path: str) -> None:
    """Render hints and the filled solution to SVG."""
    render_svg(engine, output_path, show_answers=True)


def hint_slots(hints) -> int:
    """Number of slots needed to show the longest hint list."""
    return max((len(h) for h in hints), default=1)


def _hint_text(cx: float, cy: float, font_size: float, run: int) -> str:
    return (
        f'  <text x="{cx}" y="{cy}" '
        f'text-anchor="middle" dominant-baseline="central" '
        f'font-family="Helvetica, Arial, sans-serif" '
        f'font-size="{font_size}" fill="black">{run}</text>\n'
    )


def _default_cell_size(span: int) -> float:
    if span <= 15:
        return 24.0
    elif span <= 25:
        return 18.0
    else:
        return 12.0
