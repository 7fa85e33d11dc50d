"""Cursor controller: turns move/mark commands into engine mutations."""

from __future__ import annotations

import random

from engine import Hint, PuzzleEngine
from models import CellState, Direction, Mark, Point, Size


class CursorController:
    """Owns a :class:`PuzzleEngine` and a cursor that lives on the torus.

    Moves only add a unit delta to the raw cursor; it is wrapped onto the
    board lazily, when a mark is applied or the position is reported.
    """

    def __init__(self, engine: PuzzleEngine, rng: random.Random | None = None):
        if rng is None:
            rng = random.Random()
        self.engine = engine
        size = engine.size
        self.cursor = Point(rng.randrange(size.rows), rng.randrange(size.cols))

    # ── Commands ─────────────────────────────────────────────────────

    def move(self, direction: Direction) -> None:
        self.cursor = self.cursor + direction.delta

    def move_north(self) -> None:
        self.move(Direction.NORTH)

    def move_east(self) -> None:
        self.move(Direction.EAST)

    def move_south(self) -> None:
        self.move(Direction.SOUTH)

    def move_west(self) -> None:
        self.move(Direction.WEST)

    def mark_filled(self) -> None:
        self.mark(Mark.FILLED)

    def mark_empty(self) -> None:
        self.mark(Mark.EMPTY)

    def mark(self, target: Mark) -> None:
        """Toggle *target* on the cursor cell.

        Pressing the same mark twice clears the cell; pressing the other mark
        switches to it directly.
        """
        self.cursor = self.cursor.normalize(self.engine.size)
        current = self.engine.working_at(self.cursor)
        if current.mark == target:
            new_state = CellState.UNMARKED
        else:
            new_state = CellState.marked(target)
        self.engine.set_working(self.cursor, new_state)

    # ── Read-through accessors ───────────────────────────────────────

    def board_size(self) -> Size:
        return self.engine.size

    def working_at(self, point: Point) -> CellState:
        return self.engine.working_at(point.normalize(self.engine.size))

    def row_hints(self) -> tuple[Hint, ...]:
        return self.engine.row_hints

    def col_hints(self) -> tuple[Hint, ...]:
        return self.engine.col_hints

    def cursor_position(self) -> Point:
        return self.cursor.normalize(self.engine.size)

    def wrong_points(self) -> list[Point]:
        return self.engine.wrong_points()

    def is_solved(self) -> bool:
        return self.engine.is_solved()
