"""
Match Ledger - History of finished matches plus running scores.

The ledger is append-only:
- Records are kept oldest first and never change once created
- Scores only ever go up
- A record tells whether it was counted towards the scores

Matches abandoned before a win or draw (manual reset or a board size
change with marks on the board) are logged with a draw label so they
show up in the history, but they are not counted. Only wins and full
board draws move the scores.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Sequence
import time

from .state import Cell, GameResult, GameStatus, Player, cell_value
from .win_detector import is_full

# How many records history views show unless asked otherwise
DEFAULT_HISTORY_LIMIT = 5


@dataclass
class Scores:
    """Running tallies for a session."""
    x: int = 0
    o: int = 0
    draws: int = 0

    def credit(self, result: GameResult) -> None:
        """Count one terminal result."""
        if result.status == GameStatus.WON:
            if result.winner is Player.X:
                self.x += 1
            else:
                self.o += 1
        elif result.status == GameStatus.DRAWN:
            self.draws += 1

    def copy(self) -> Scores:
        return Scores(x=self.x, o=self.o, draws=self.draws)

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "o": self.o, "draws": self.draws}


@dataclass(frozen=True)
class MatchRecord:
    """
    A finished (or abandoned) match.

    Note: `result` is always a win or a draw. Abandoned matches carry
    a draw with `counted=False`.
    """
    board_size: int
    final_board: tuple[Cell, ...]
    result: GameResult
    counted: bool = True
    created_at: float = field(default_factory=time.time)

    @property
    def timestamp(self) -> str:
        """Local time the match was recorded, for display."""
        return datetime.fromtimestamp(self.created_at).strftime("%Y-%m-%d %H:%M:%S")

    @property
    def result_label(self) -> str:
        return self.result.label

    @property
    def winner(self) -> Player | None:
        return self.result.winner

    def to_dict(self) -> dict[str, Any]:
        return {
            "board_size": self.board_size,
            "final_board": [cell_value(c) for c in self.final_board],
            "result": self.result_label,
            "winning_line": list(self.result.line),
            "counted": self.counted,
            "created_at": self.created_at,
            "timestamp": self.timestamp,
        }


def finalize(
    cells: Sequence[Cell],
    board_size: int,
    winner: Player | None,
    line: Sequence[int] = (),
) -> MatchRecord | None:
    """
    Freeze a board into a MatchRecord.

    - winner given -> win, counted
    - board full -> draw, counted
    - otherwise -> draw label only, not counted
    - no marks at all -> None, nothing to record
    """
    snapshot = tuple(cells)
    if all(cell is None for cell in snapshot):
        return None

    if winner is not None:
        return MatchRecord(board_size, snapshot, GameResult.win(winner, line))
    if is_full(snapshot):
        return MatchRecord(board_size, snapshot, GameResult.draw())
    return MatchRecord(board_size, snapshot, GameResult.draw(), counted=False)


class MatchLedger:
    """
    Append-only match history and score keeper.

    Usage:
        ledger = MatchLedger()
        record = finalize(board.cells, board.size, winner)
        if record:
            ledger.commit(record)

        ledger.scores.x
        ledger.recent(5)  # newest first
    """

    def __init__(self):
        self._records: list[MatchRecord] = []
        self._scores = Scores()

    def commit(self, record: MatchRecord) -> None:
        """Append a record and credit the scores if it counts."""
        if not record.result.is_terminal:
            raise ValueError("Only finished matches can be recorded")
        self._records.append(record)
        if record.counted:
            self._scores.credit(record.result)

    @property
    def scores(self) -> Scores:
        """Copy of the current tallies."""
        return self._scores.copy()

    @property
    def records(self) -> tuple[MatchRecord, ...]:
        """All records, oldest first."""
        return tuple(self._records)

    def recent(self, k: int = DEFAULT_HISTORY_LIMIT) -> list[MatchRecord]:
        """The last `k` records, newest first."""
        if k <= 0:
            return []
        return list(reversed(self._records[-k:]))

    def __len__(self) -> int:
        return len(self._records)

    def to_dict(self) -> dict[str, Any]:
        return {
            "records": [r.to_dict() for r in self._records],
            "scores": self._scores.to_dict(),
        }
