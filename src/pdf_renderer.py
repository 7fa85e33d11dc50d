"""Render a toroidal nonogram to a printable PDF using ReportLab.

Layout: title banner at the top, the grid below it with row hints on the
left and column hints above, one hint per cell-sized slot.  Page 2 repeats
the board with the solution filled in.
"""

from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib.pagesizes import letter
from reportlab.pdfbase.pdfmetrics import stringWidth

from engine import PuzzleEngine
from models import Mark
from svg_renderer import hint_slots

PAGE_W, PAGE_H = letter  # 612 x 792
MARGIN = 36
MAX_CELL_SIZE = 24.0


@dataclass
class LayoutParams:
    """All computed layout measurements."""

    page_w: float = PAGE_W
    page_h: float = PAGE_H
    margin: float = MARGIN
    usable_w: float = PAGE_W - 2 * MARGIN
    usable_h: float = PAGE_H - 2 * MARGIN

    # Board
    rows: int = 10
    cols: int = 10
    row_slots: int = 1
    col_slots: int = 1
    cell_size: float = MAX_CELL_SIZE
    grid_x: float = 0.0
    grid_y: float = 0.0  # top of grid in page coords

    # Title banner
    banner_h: float = 28.0
    banner_y: float = 0.0

    hint_font_size: float = 12.0
    title: str = "TORUS NONOGRAM"


def render_pdf(engine: PuzzleEngine, title: str, output_path: str) -> None:
    """Compute layout, draw page 1 (puzzle) + page 2 (answer key)."""
    from reportlab.pdfgen.canvas import Canvas

    layout = _compute_layout(engine, title)

    c = Canvas(output_path, pagesize=letter)

    # --- Page 1: Puzzle ---
    _draw_title_banner(c, layout)
    _draw_hints(c, engine, layout)
    _draw_grid(c, engine, layout, show_answers=False)
    c.showPage()

    # --- Page 2: Answer Key ---
    ak_layout = _compute_layout(engine, "ANSWER KEY")
    _draw_title_banner(c, ak_layout)
    _draw_hints(c, engine, ak_layout)
    _draw_grid(c, engine, ak_layout, show_answers=True)
    c.showPage()

    c.save()


def _compute_layout(engine: PuzzleEngine, title: str) -> LayoutParams:
    """Calculate all positions and sizes so the board fits the page."""
    lp = LayoutParams(
        rows=engine.size.rows,
        cols=engine.size.cols,
        row_slots=hint_slots(engine.row_hints),
        col_slots=hint_slots(engine.col_hints),
        title=title,
    )

    lp.banner_y = lp.page_h - lp.margin - lp.banner_h
    board_top = lp.banner_y - 8
    available_h = board_top - lp.margin

    span_w = lp.cols + lp.row_slots
    span_h = lp.rows + lp.col_slots
    lp.cell_size = min(MAX_CELL_SIZE, lp.usable_w / span_w, available_h / span_h)
    lp.hint_font_size = lp.cell_size * 0.5

    # Centre hints + grid horizontally
    board_x = (lp.page_w - span_w * lp.cell_size) / 2
    lp.grid_x = board_x + lp.row_slots * lp.cell_size
    lp.grid_y = board_top - lp.col_slots * lp.cell_size
    return lp


# ─── Drawing functions ──────────────────────────────────────────────────────


def _draw_title_banner(c, layout: LayoutParams) -> None:
    """Black rect + white centered bold text."""
    x = layout.margin
    y = layout.banner_y
    w = layout.usable_w
    h = layout.banner_h

    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y, w, h, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 16)
    text_w = stringWidth(layout.title, "Helvetica-Bold", 16)
    tx = x + (w - text_w) / 2
    ty = y + (h - 16) / 2 + 2
    c.drawString(tx, ty, layout.title)


def _draw_hints(c, engine: PuzzleEngine, layout: LayoutParams) -> None:
    """Row hints right-aligned left of the grid, column hints bottom-aligned above."""
    cs = layout.cell_size
    fs = layout.hint_font_size
    c.setFillColorRGB(0, 0, 0)
    c.setFont("Helvetica", fs)

    for r, hint in enumerate(engine.row_hints):
        baseline = layout.grid_y - (r + 0.5) * cs - fs * 0.35
        for i, run in enumerate(reversed(hint)):
            cx = layout.grid_x - (i + 0.5) * cs
            c.drawCentredString(cx, baseline, str(run))

    for col, hint in enumerate(engine.col_hints):
        cx = layout.grid_x + (col + 0.5) * cs
        for i, run in enumerate(reversed(hint)):
            baseline = layout.grid_y + (i + 0.5) * cs - fs * 0.35
            c.drawCentredString(cx, baseline, str(run))


def _draw_grid(c, engine: PuzzleEngine, layout: LayoutParams, show_answers: bool) -> None:
    """Draw the board: white cells, black where the answer is filled."""
    x0 = layout.grid_x
    y0 = layout.grid_y
    cs = layout.cell_size

    c.setStrokeColorRGB(0, 0, 0)
    c.setLineWidth(0.5)
    for r in range(layout.rows):
        for col in range(layout.cols):
            cx = x0 + col * cs
            cy = y0 - (r + 1) * cs
            if show_answers and engine.solution[r][col] == Mark.FILLED:
                c.setFillColorRGB(0, 0, 0)
            else:
                c.setFillColorRGB(1, 1, 1)
            c.rect(cx, cy, cs, cs, fill=1, stroke=1)

    # Dashed outer border: the board wraps around
    c.setLineWidth(1.5)
    c.setDash([4, 2])
    c.rect(x0, y0 - layout.rows * cs, layout.cols * cs, layout.rows * cs, fill=0, stroke=1)
    c.setDash()
