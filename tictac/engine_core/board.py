"""
Board State - The live per-match state machine.

Holds the cells, whose turn it is and the match result. All cell
changes go through apply_move(); reset() starts a fresh match.

States:
    IN_PROGRESS --(move completes a line)--> WON
    IN_PROGRESS --(move fills the board)---> DRAWN
    WON / DRAWN --(reset)------------------> IN_PROGRESS

Recording finished or abandoned matches is not done here; the
GameController finalizes a match into the ledger before calling reset().
"""

from __future__ import annotations

from .state import Cell, GameResult, Player
from .action import MoveError, MoveResult
from .win_detector import detect_win, is_full, required_run


class BoardState:
    """
    Mutable board for a single match.

    Invariant: len(cells) == size * size at all times.
    """

    def __init__(self, size: int = 3):
        self._size = size
        self.required_run = required_run(size)
        self._cells: list[Cell] = [None] * (size * size)
        self._current_player = Player.X
        self._result = GameResult.in_progress()

    @property
    def size(self) -> int:
        return self._size

    @property
    def cells(self) -> tuple[Cell, ...]:
        """Snapshot of the cells in row-major order."""
        return tuple(self._cells)

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def is_terminal(self) -> bool:
        return self._result.is_terminal

    @property
    def winning_line(self) -> tuple[int, ...]:
        return self._result.line

    @property
    def move_count(self) -> int:
        return sum(1 for cell in self._cells if cell is not None)

    @property
    def has_marks(self) -> bool:
        return any(cell is not None for cell in self._cells)

    @property
    def is_full(self) -> bool:
        return is_full(self._cells)

    def empty_indices(self) -> list[int]:
        """Legal move targets. Empty once the match is over."""
        if self.is_terminal:
            return []
        return [i for i, cell in enumerate(self._cells) if cell is None]

    def snapshot(self) -> tuple[Cell, ...]:
        return self.cells

    def apply_move(self, index: int) -> MoveResult:
        """
        Place the current player's mark at `index`.

        Checks, in order: match already over, index on the board, cell
        empty. A rejected move changes nothing.
        """
        if self.is_terminal:
            return MoveResult.failure(
                "Game is over - start a new game",
                MoveError.GAME_ALREADY_OVER,
                index=index,
            )

        if not 0 <= index < len(self._cells):
            return MoveResult.failure(
                f"Index {index} is outside a {self._size}x{self._size} board",
                MoveError.INDEX_OUT_OF_RANGE,
                index=index,
            )

        if self._cells[index] is not None:
            return MoveResult.failure(
                f"Cell {index} is already taken by {self._cells[index].value}",
                MoveError.CELL_OCCUPIED,
                index=index,
            )

        player = self._current_player
        self._cells[index] = player
        changes = [f"{player.value} played cell {index}"]

        win = detect_win(self._cells, self._size)
        if win is not None:
            self._result = win
            changes.append(f"{player.value} wins on {list(win.line)}")
        elif is_full(self._cells):
            self._result = GameResult.draw()
            changes.append("Board full - draw")
        else:
            self._current_player = player.other

        return MoveResult.ok(index, player, self._result, changes)

    def reset(self, new_size: int | None = None) -> None:
        """Clear the board for a new match, optionally at a new size."""
        if new_size is not None and new_size != self._size:
            self.required_run = required_run(new_size)
            self._size = new_size
        self._cells = [None] * (self._size * self._size)
        self._current_player = Player.X
        self._result = GameResult.in_progress()
