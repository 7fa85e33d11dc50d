"""Tests for hints.py."""

import random

import pytest

from models import Mark
from hints import circular_runs, col_hints, line_hint, linear_runs, rotate_left, row_hints

F = Mark.FILLED
E = Mark.EMPTY


class FixedRotation:
    """Stands in for random.Random, always rotating by *k*."""

    def __init__(self, k):
        self.k = k

    def randrange(self, n):
        return self.k % n


def _line(pattern: str):
    """'##.#' -> [F, F, E, F]"""
    return [F if ch == "#" else E for ch in pattern]


class TestLinearRuns:
    def test_basic(self):
        assert linear_runs(_line("##.#")) == [2, 1]

    def test_empty_line(self):
        assert linear_runs(_line("....")) == []

    def test_trailing_run_counted(self):
        assert linear_runs(_line("#..#")) == [1, 1]


class TestCircularRuns:
    def test_no_wrap_when_first_cell_empty(self):
        assert circular_runs(_line(".##.#")) == [2, 1]

    def test_no_wrap_when_last_cell_empty(self):
        assert circular_runs(_line("##.#.")) == [2, 1]

    def test_trailing_single_merges_into_leading_pair(self):
        assert circular_runs(_line("##.#")) == [3]

    def test_wrap_merges_ends(self):
        assert circular_runs(_line("#..#")) == [2]

    def test_wrap_merges_into_first_run(self):
        assert circular_runs(_line("##.#..###")) == [5, 1]

    def test_all_empty(self):
        assert circular_runs(_line(".....")) == [0]

    def test_all_filled(self):
        assert circular_runs(_line("####")) == [4]

    def test_single_cell(self):
        assert circular_runs(_line("#")) == [1]
        assert circular_runs(_line(".")) == [0]

    @pytest.mark.parametrize("pattern", ["#.#.#", "##..#.##", "#..##.#", "###.#"])
    def test_wrap_drops_one_run(self, pattern):
        line = _line(pattern)
        assert len(circular_runs(line)) == len(linear_runs(line)) - 1

    def test_sum_matches_filled_count(self):
        rng = random.Random(7)
        for _ in range(200):
            line = [F if rng.random() < 0.5 else E for _ in range(rng.randint(1, 12))]
            assert sum(circular_runs(line)) == line.count(F)


class TestRotateLeft:
    def test_rotate(self):
        assert rotate_left([1, 2, 3], 1) == [2, 3, 1]

    def test_rotate_zero(self):
        assert rotate_left([1, 2, 3], 0) == [1, 2, 3]

    def test_rotate_wraps_k(self):
        assert rotate_left([1, 2, 3], 4) == [2, 3, 1]

    def test_rotate_empty(self):
        assert rotate_left([], 2) == []


class TestLineHint:
    def test_fixed_rotation(self):
        line = _line(".##.#.###")
        assert line_hint(line, FixedRotation(0)) == (2, 1, 3)
        assert line_hint(line, FixedRotation(1)) == (1, 3, 2)
        assert line_hint(line, FixedRotation(2)) == (3, 2, 1)

    def test_rotation_is_permutation(self):
        line = _line("#.##...#.###.")
        expected = sorted(circular_runs(line))
        for seed in range(20):
            assert sorted(line_hint(line, random.Random(seed))) == expected

    def test_empty_line_hint(self):
        assert line_hint(_line("...."), random.Random(1)) == (0,)


class TestGridHints:
    def test_rows_and_columns(self):
        solution = [
            _line("#..#"),
            _line("...."),
            _line("##.."),
        ]
        assert row_hints(solution, FixedRotation(0)) == ((2,), (0,), (2,))
        assert col_hints(solution, FixedRotation(0)) == ((2,), (1,), (0,), (1,))
