"""Run-length hints for toroidal nonogram lines.

A line (row or column) of a toroidal board is circular: its last cell touches
its first.  A filled run that crosses the seam is one run, so the hint for the
line is computed from a linear scan and then the run left open at the end is
folded into the run that opened at the start.

Circular hints have no natural first element.  Each hint list is rotated by a
random amount so that hint index 0 says nothing about where the scan started.
"""

from __future__ import annotations

import random
from typing import Sequence

from models import Mark


def linear_runs(line: Sequence[Mark]) -> list[int]:
    """Lengths of maximal FILLED runs scanning left to right, ignoring the wrap."""
    runs: list[int] = []
    length = 0
    for cell in line:
        if cell == Mark.FILLED:
            length += 1
        elif length:
            runs.append(length)
            length = 0
    if length:
        runs.append(length)
    return runs


def circular_runs(line: Sequence[Mark]) -> list[int]:
    """Run lengths of *line* treated as a ring, starting from the scan origin.

    An all-EMPTY line yields ``[0]``; an all-FILLED line yields ``[len(line)]``.
    """
    runs: list[int] = []
    length = 0
    for cell in line:
        if cell == Mark.FILLED:
            length += 1
        elif length:
            runs.append(length)
            length = 0

    if not runs:
        # Either nothing was filled, or the whole line is one unbroken run.
        return [length]
    if line[0] == Mark.FILLED:
        runs[0] += length
    elif length:
        runs.append(length)
    return runs


def rotate_left(hints: Sequence[int], k: int) -> list[int]:
    """Rotate *hints* left by *k* positions."""
    if not hints:
        return []
    k %= len(hints)
    return list(hints[k:]) + list(hints[:k])


def line_hint(line: Sequence[Mark], rng: random.Random) -> tuple[int, ...]:
    """Circular hint for *line*, rotated by ``rng.randrange(len(hint))``."""
    runs = circular_runs(line)
    k = rng.randrange(len(runs))
    return tuple(rotate_left(runs, k))


def row_hints(
    solution: Sequence[Sequence[Mark]], rng: random.Random
) -> tuple[tuple[int, ...], ...]:
    return tuple(line_hint(row, rng) for row in solution)


def col_hints(
    solution: Sequence[Sequence[Mark]], rng: random.Random
) -> tuple[tuple[int, ...], ...]:
    cols = len(solution[0])
    return tuple(
        line_hint([row[c] for row in solution], rng) for c in range(cols)
    )
