"""
Win Detector - Finds a completed run on an N x N board.

Cells are addressed row-major (index = row * size + col). A match is
won by `required_run(size)` identical marks in a straight line, which
is 3 on a 3x3 board and 4 on anything larger; bigger boards do not ask
for longer runs.

Candidate lines are enumerated in a fixed order:
1. Rows, top to bottom, each scanned left to right
2. Columns, left to right, each scanned top to bottom
3. Diagonals, by starting row top to bottom; within a starting row,
   the down-right windows left to right, then the down-left windows
   left to right

When several lines are complete at once, the first one in that order
is the one reported.
"""

from __future__ import annotations
from functools import lru_cache
from typing import Sequence

from .state import Cell, GameResult

MIN_BOARD_SIZE = 3
MAX_REQUIRED_RUN = 4


def required_run(size: int) -> int:
    """Number of consecutive marks needed to win on a board of this size."""
    if size < MIN_BOARD_SIZE:
        raise ValueError(f"Board size must be at least {MIN_BOARD_SIZE}, got {size}")
    return min(size, MAX_REQUIRED_RUN)


@lru_cache(maxsize=None)
def candidate_lines(size: int) -> tuple[tuple[int, ...], ...]:
    """
    Every contiguous window of `required_run(size)` cells that stays on
    the board, in detection order.

    The result only depends on the size, so it is computed once per
    size and reused.
    """
    run = required_run(size)
    span = size - run + 1
    lines: list[tuple[int, ...]] = []

    # Rows
    for row in range(size):
        for col in range(span):
            lines.append(tuple(row * size + col + i for i in range(run)))

    # Columns
    for col in range(size):
        for row in range(span):
            lines.append(tuple((row + i) * size + col for i in range(run)))

    # Diagonals, both directions per starting row
    for row in range(span):
        for col in range(span):
            lines.append(tuple((row + i) * size + col + i for i in range(run)))
        for col in range(run - 1, size):
            lines.append(tuple((row + i) * size + col - i for i in range(run)))

    return tuple(lines)


def detect_win(cells: Sequence[Cell], size: int) -> GameResult | None:
    """
    Return a won GameResult for the first complete line, or None.

    None covers both "nobody has won yet" and a draw; telling those
    apart is up to the caller (see `is_full`). The board is only read.
    """
    if len(cells) != size * size:
        raise ValueError(f"Expected {size * size} cells for size {size}, got {len(cells)}")

    for line in candidate_lines(size):
        first = cells[line[0]]
        if first is None:
            continue
        if all(cells[index] == first for index in line):
            return GameResult.win(first, line)

    return None


def is_full(cells: Sequence[Cell]) -> bool:
    return all(cell is not None for cell in cells)
