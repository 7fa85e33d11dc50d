"""Data models for the toroidal nonogram engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class Mark(Enum):
    FILLED = "FILLED"
    EMPTY = "EMPTY"

    @classmethod
    def of(cls, value) -> Mark:
        """Coerce a Mark or any truthy/falsy value (bool, 0/1) to a Mark."""
        if isinstance(value, Mark):
            return value
        return cls.FILLED if value else cls.EMPTY


class CellState(Enum):
    """Player-visible state of one working-grid cell."""

    UNMARKED = "UNMARKED"
    MARKED_FILLED = "MARKED_FILLED"
    MARKED_EMPTY = "MARKED_EMPTY"

    @classmethod
    def marked(cls, mark: Mark) -> CellState:
        if mark == Mark.FILLED:
            return cls.MARKED_FILLED
        return cls.MARKED_EMPTY

    @property
    def mark(self) -> Mark | None:
        """The player's mark, or None when the cell was never marked."""
        if self == CellState.MARKED_FILLED:
            return Mark.FILLED
        if self == CellState.MARKED_EMPTY:
            return Mark.EMPTY
        return None

    @property
    def is_filled(self) -> bool:
        """Truth value used for win checks: only MARKED_FILLED counts as filled."""
        return self == CellState.MARKED_FILLED


@dataclass(frozen=True)
class Size:
    rows: int
    cols: int

    def points(self) -> Iterator[Point]:
        """All in-bounds points in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield Point(row, col)


@dataclass(frozen=True)
class Point:
    """A signed grid coordinate; may lie outside the board until normalized."""

    row: int
    col: int

    def __add__(self, other: Point) -> Point:
        return Point(self.row + other.row, self.col + other.col)

    def __sub__(self, other: Point) -> Point:
        return Point(self.row - other.row, self.col - other.col)

    def normalize(self, size: Size) -> Point:
        return normalize(self, size)


class Direction(Enum):
    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    @property
    def delta(self) -> Point:
        return Point(*self.value)


def normalize(point: Point, size: Size) -> Point:
    """Wrap *point* onto the torus ``[0, rows) x [0, cols)``."""
    # Python's % already yields a non-negative result for a positive modulus.
    return Point(point.row % size.rows, point.col % size.cols)


class PuzzleError(Exception):
    """Fatal error while building a puzzle."""


class PuzzleFormatError(PuzzleError):
    """A puzzle description could not be parsed."""
