"""Puzzle engine: hidden solution, derived hints and the player's working grid."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Sequence

from hints import col_hints, row_hints
from models import CellState, Mark, Point, PuzzleError, Size

Hint = tuple[int, ...]


@dataclass
class PuzzleEngine:
    """One toroidal nonogram session.

    ``solution`` and the hints never change after :meth:`build`; only the
    working grid is mutated, one cell at a time through :meth:`set_working`.
    Points passed in must already be normalized onto the board.
    """

    solution: tuple[tuple[Mark, ...], ...]
    row_hints: tuple[Hint, ...]
    col_hints: tuple[Hint, ...]
    size: Size
    working: list[list[CellState]] = field(default_factory=list)

    @classmethod
    def build(
        cls,
        solution: Sequence[Sequence],
        rng: random.Random | None = None,
    ) -> PuzzleEngine:
        """Validate *solution*, derive the hints and start an all-UNMARKED grid.

        Cells may be :class:`Mark` values or anything truthy/falsy.
        Raises PuzzleError if the grid is empty or not rectangular.
        """
        if rng is None:
            rng = random.Random()

        if not solution:
            raise PuzzleError("Solution grid has no rows")
        cols = len(solution[0])
        if cols == 0:
            raise PuzzleError("Solution grid has no columns")
        for r, row in enumerate(solution):
            if len(row) != cols:
                raise PuzzleError(
                    f"Solution grid is not rectangular: row {r} has "
                    f"{len(row)} cells, expected {cols}"
                )

        frozen = tuple(tuple(Mark.of(v) for v in row) for row in solution)
        size = Size(rows=len(frozen), cols=cols)
        working = [[CellState.UNMARKED] * cols for _ in range(size.rows)]

        return cls(
            solution=frozen,
            row_hints=row_hints(frozen, rng),
            col_hints=col_hints(frozen, rng),
            size=size,
            working=working,
        )

    def solution_at(self, point: Point) -> Mark:
        self._check_bounds(point)
        return self.solution[point.row][point.col]

    def working_at(self, point: Point) -> CellState:
        self._check_bounds(point)
        return self.working[point.row][point.col]

    def set_working(self, point: Point, state: CellState) -> None:
        self._check_bounds(point)
        self.working[point.row][point.col] = state

    def wrong_points(self) -> list[Point]:
        """Points where the working grid disagrees with the solution.

        UNMARKED and MARKED_EMPTY both count as "not filled".
        """
        wrong: list[Point] = []
        for point in self.size.points():
            filled = self.solution[point.row][point.col] == Mark.FILLED
            if filled != self.working[point.row][point.col].is_filled:
                wrong.append(point)
        return wrong

    def is_solved(self) -> bool:
        return not self.wrong_points()

    def _check_bounds(self, point: Point) -> None:
        if not (0 <= point.row < self.size.rows and 0 <= point.col < self.size.cols):
            raise IndexError(
                f"Point ({point.row},{point.col}) outside "
                f"{self.size.rows}x{self.size.cols} board"
            )
