"""Tests for controller.py."""

import random

import pytest

from controller import CursorController
from engine import PuzzleEngine
from models import CellState, Direction, Mark, Point, Size

F = Mark.FILLED
E = Mark.EMPTY


def _controller(rows=3, cols=4, seed=0):
    solution = [[F if (r + c) % 2 == 0 else E for c in range(cols)] for r in range(rows)]
    engine = PuzzleEngine.build(solution, random.Random(seed))
    return CursorController(engine, random.Random(seed))


def _place_cursor(controller, row, col):
    controller.cursor = Point(row, col)


class TestConstruction:
    def test_cursor_in_bounds(self):
        for seed in range(25):
            pos = _controller(seed=seed).cursor_position()
            assert 0 <= pos.row < 3
            assert 0 <= pos.col < 4

    def test_default_rng(self):
        controller = CursorController(PuzzleEngine.build([[F]]))
        assert controller.cursor_position() == Point(0, 0)


class TestMoves:
    def test_unit_deltas(self):
        controller = _controller()
        _place_cursor(controller, 1, 1)
        controller.move_north()
        assert controller.cursor_position() == Point(0, 1)
        controller.move_east()
        assert controller.cursor_position() == Point(0, 2)
        controller.move_south()
        assert controller.cursor_position() == Point(1, 2)
        controller.move_west()
        assert controller.cursor_position() == Point(1, 1)

    def test_moves_are_not_clamped(self):
        controller = _controller()
        _place_cursor(controller, 0, 0)
        for _ in range(7):
            controller.move_north()
        assert controller.cursor == Point(-7, 0)
        assert controller.cursor_position() == Point(2, 0)

    def test_north_from_top_wraps(self):
        controller = _controller()
        _place_cursor(controller, 0, 2)
        controller.move_north()
        assert controller.cursor_position() == Point(2, 2)

    def test_east_from_right_edge_wraps(self):
        controller = _controller()
        _place_cursor(controller, 1, 3)
        controller.move_east()
        assert controller.cursor_position() == Point(1, 0)

    @pytest.mark.parametrize("direction", list(Direction))
    def test_full_lap_returns_home(self, direction):
        controller = _controller(rows=4, cols=4)
        start = controller.cursor_position()
        for _ in range(4):
            controller.move(direction)
        assert controller.cursor_position() == start


class TestMark:
    def test_fill_twice_clears(self):
        controller = _controller()
        _place_cursor(controller, 1, 2)
        controller.mark_filled()
        assert controller.working_at(Point(1, 2)) == CellState.MARKED_FILLED
        controller.mark_filled()
        assert controller.working_at(Point(1, 2)) == CellState.UNMARKED

    def test_fill_then_empty_switches(self):
        controller = _controller()
        _place_cursor(controller, 1, 2)
        controller.mark_filled()
        controller.mark_empty()
        assert controller.working_at(Point(1, 2)) == CellState.MARKED_EMPTY

    def test_empty_twice_clears(self):
        controller = _controller()
        _place_cursor(controller, 0, 0)
        controller.mark_empty()
        controller.mark_empty()
        assert controller.working_at(Point(0, 0)) == CellState.UNMARKED

    def test_mark_normalizes_cursor_in_place(self):
        controller = _controller()
        _place_cursor(controller, -1, 9)
        controller.mark_filled()
        assert controller.cursor == Point(2, 1)
        assert controller.working_at(Point(2, 1)) == CellState.MARKED_FILLED

    def test_mark_only_touches_cursor_cell(self):
        controller = _controller()
        _place_cursor(controller, 0, 0)
        controller.mark(Mark.FILLED)
        marked = [
            p for p in controller.board_size().points()
            if controller.working_at(p) != CellState.UNMARKED
        ]
        assert marked == [Point(0, 0)]


class TestReadThrough:
    def test_accessors(self):
        controller = _controller()
        engine = controller.engine
        assert controller.board_size() == Size(3, 4)
        assert controller.row_hints() is engine.row_hints
        assert controller.col_hints() is engine.col_hints

    def test_working_at_wraps(self):
        controller = _controller()
        _place_cursor(controller, 0, 0)
        controller.mark_filled()
        assert controller.working_at(Point(-3, 4)) == CellState.MARKED_FILLED

    def test_solve_through_controller(self):
        engine = PuzzleEngine.build([[F, E], [E, F]], random.Random(3))
        controller = CursorController(engine, random.Random(3))
        _place_cursor(controller, 0, 0)
        assert controller.is_solved() is False
        controller.mark_filled()
        controller.move_east()
        controller.mark_empty()
        controller.move_south()
        controller.mark_filled()
        controller.move_west()
        controller.mark_empty()
        assert controller.wrong_points() == []
        assert controller.is_solved() is True
