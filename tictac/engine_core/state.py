"""
Game State - Value types shared by every part of the engine.

Design principles:
- Cells are plain values: a Player mark or None for empty
- Results are immutable and carry their own winning line
- Serializable: marks render as "X" / "O", empty cells as None
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence


class Player(Enum):
    """The two marks. X always moves first."""
    X = "X"
    O = "O"

    @property
    def other(self) -> Player:
        return Player.O if self is Player.X else Player.X


# A cell is either a player's mark or empty (None)
Cell = Optional[Player]


class GameStatus(Enum):
    """High-level match status."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class GameResult:
    """
    Outcome of a match at a point in time.

    `line` holds the ordered cell indices of the winning run and is
    empty for anything but a win.
    """
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Player | None = None
    line: tuple[int, ...] = ()

    @classmethod
    def in_progress(cls) -> GameResult:
        return cls()

    @classmethod
    def win(cls, player: Player, line: Sequence[int]) -> GameResult:
        """Factory for a won result."""
        return cls(status=GameStatus.WON, winner=player, line=tuple(line))

    @classmethod
    def draw(cls) -> GameResult:
        """Factory for a drawn result."""
        return cls(status=GameStatus.DRAWN)

    @property
    def is_terminal(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def label(self) -> str | None:
        """Winner mark ("X" / "O"), "draw", or None while the match is open."""
        if self.status == GameStatus.WON:
            return self.winner.value
        if self.status == GameStatus.DRAWN:
            return "draw"
        return None


def cell_value(cell: Cell) -> str | None:
    """Serialize a cell for display or transport."""
    return cell.value if cell is not None else None
