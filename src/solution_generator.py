"""Random solution grids for generated puzzles."""

from __future__ import annotations

import random

from models import Mark, PuzzleError


def generate_solution(
    rows: int,
    cols: int,
    density: float = 0.5,
    rng: random.Random | None = None,
) -> list[list[Mark]]:
    """Fill each cell independently with probability *density*.

    No uniqueness check is made; the hints of a random grid may admit
    several solutions.
    """
    if rows < 1 or cols < 1:
        raise PuzzleError(f"Grid size must be positive, got {rows}x{cols}")
    if not 0.0 <= density <= 1.0:
        raise PuzzleError(f"Density must be between 0 and 1, got {density}")
    if rng is None:
        rng = random.Random()

    return [
        [Mark.FILLED if rng.random() < density else Mark.EMPTY for _ in range(cols)]
        for _ in range(rows)
    ]
