"""Curses front end: draws the board around the cursor and feeds it key presses.

The board is a torus, so the view scrolls with the cursor: the cursor's row
and column are always drawn in the middle of the screen and the rest of the
board wraps around them.
"""

from __future__ import annotations

import curses
from dataclasses import dataclass, field

from controller import CursorController
from models import CellState, Point

GLYPHS = {
    CellState.UNMARKED: " .",
    CellState.MARKED_FILLED: "[]",
    CellState.MARKED_EMPTY: " !",
}

BANNER = "congratulations!"
HELP = "h/j/k/l move  d fill  f mark empty  m mistakes  q quit"

KEY_ACTIONS = {
    ord("h"): "move_west",
    ord("j"): "move_south",
    ord("k"): "move_north",
    ord("l"): "move_east",
    curses.KEY_LEFT: "move_west",
    curses.KEY_DOWN: "move_south",
    curses.KEY_UP: "move_north",
    curses.KEY_RIGHT: "move_east",
    ord("d"): "mark_filled",
    ord("f"): "mark_empty",
}
QUIT_KEY = ord("q")
MISTAKES_KEY = ord("m")


@dataclass
class BoardCell:
    text: str
    is_cursor: bool = False
    is_wrong: bool = False


@dataclass
class BoardView:
    """Everything needed to draw one frame, in screen order."""

    banner: str
    hint_width: int
    cell_width: int = 2
    col_hint_lines: list[str] = field(default_factory=list)
    row_hint_texts: list[str] = field(default_factory=list)
    cells: list[list[BoardCell]] = field(default_factory=list)


def view_order(center: int, length: int) -> list[int]:
    """Line indices in display order, with *center* in the middle slot."""
    start = center - length // 2
    return [(start + i) % length for i in range(length)]


def row_hints_width(row_hints) -> int:
    return max(len(" ".join(str(run) for run in hint)) for hint in row_hints)


def column_hints_height(col_hints) -> int:
    return max(len(hint) for hint in col_hints)


def column_slot_width(col_hints) -> int:
    """Screen columns per board column; one space wider than the longest run."""
    longest = max(len(str(run)) for hint in col_hints for run in hint)
    return max(2, longest + 1)


def build_view(controller: CursorController, show_mistakes: bool = False) -> BoardView:
    size = controller.board_size()
    cursor = controller.cursor_position()
    row_hints = controller.row_hints()
    col_hints = controller.col_hints()
    rows = view_order(cursor.row, size.rows)
    cols = view_order(cursor.col, size.cols)
    wrong = set(controller.wrong_points()) if show_mistakes else set()

    width = row_hints_width(row_hints)
    height = column_hints_height(col_hints)
    slot = column_slot_width(col_hints)

    view = BoardView(
        banner=BANNER if controller.is_solved() else "",
        hint_width=width,
        cell_width=slot,
    )

    # Column hints are bottom-aligned: line 0 is the top of the stack.
    for i in range(height):
        depth = height - 1 - i
        parts = []
        for c in cols:
            hint = col_hints[c]
            if depth < len(hint):
                parts.append(str(hint[len(hint) - 1 - depth]).rjust(slot))
            else:
                parts.append(" " * slot)
        view.col_hint_lines.append("".join(parts))

    for r in rows:
        view.row_hint_texts.append(
            " ".join(str(run) for run in row_hints[r]).rjust(width)
        )
        line = []
        for c in cols:
            point = Point(r, c)
            line.append(
                BoardCell(
                    text=GLYPHS[controller.working_at(point)].rjust(slot),
                    is_cursor=point == cursor,
                    is_wrong=point in wrong,
                )
            )
        view.cells.append(line)

    return view


class TerminalApp:
    """Interactive loop around one :class:`CursorController`."""

    def __init__(self, controller: CursorController):
        self.controller = controller
        self.show_mistakes = False

    def handle_key(self, key: int) -> bool:
        """Apply one key press. Returns False when the player quits."""
        if key == QUIT_KEY:
            return False
        if key == MISTAKES_KEY:
            self.show_mistakes = not self.show_mistakes
            return True
        action = KEY_ACTIONS.get(key)
        if action is not None:
            getattr(self.controller, action)()
        return True

    def run(self, stdscr) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        while True:
            self.draw(stdscr)
            if not self.handle_key(stdscr.getch()):
                return

    def draw(self, stdscr) -> None:
        view = build_view(self.controller, self.show_mistakes)
        stdscr.erase()

        _put(stdscr, 0, 0, view.banner, curses.A_BOLD | curses.A_BLINK)

        top = 1
        for i, line in enumerate(view.col_hint_lines):
            _put(stdscr, top + i, view.hint_width, line)

        top += len(view.col_hint_lines)
        for i, (hint_text, cells) in enumerate(zip(view.row_hint_texts, view.cells)):
            y = top + i
            _put(stdscr, y, 0, hint_text)
            for j, cell in enumerate(cells):
                attr = curses.A_NORMAL
                if cell.is_cursor:
                    attr |= curses.A_REVERSE
                if cell.is_wrong:
                    attr |= curses.A_UNDERLINE | curses.A_BOLD
                _put(stdscr, y, view.hint_width + view.cell_width * j, cell.text, attr)

        _put(stdscr, top + len(view.cells) + 1, 0, HELP, curses.A_DIM)
        stdscr.refresh()


def play(controller: CursorController) -> None:
    """Run the interactive player until 'q' is pressed."""
    curses.wrapper(TerminalApp(controller).run)


def _put(stdscr, y: int, x: int, text: str, attr: int = curses.A_NORMAL) -> None:
    if not text:
        return
    try:
        stdscr.addstr(y, x, text, attr)
    except curses.error:
        # Terminal too small for this line; draw what fits.
        pass
