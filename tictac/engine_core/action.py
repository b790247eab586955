"""
Move Results - Explicit success/failure values for moves.

A rejected move never raises. It comes back as a MoveResult with
`success=False` and a machine-readable `error_code`, and leaves the
board exactly as it was.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .state import GameResult, Player


class MoveError(str, Enum):
    """Reasons a move can be rejected."""
    # Target cell already holds a mark; treat as a no-op
    CELL_OCCUPIED = "CELL_OCCUPIED"
    # Match is won or drawn; start a new game first
    GAME_ALREADY_OVER = "GAME_ALREADY_OVER"
    # Index outside the current board; caller bug
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"


@dataclass
class MoveResult:
    """
    Result of applying a move.

    Contains:
    - Whether the move was accepted
    - Who moved where, and the match result after the move
    - Error message and code (if rejected)
    """
    success: bool
    index: int | None = None
    player: Player | None = None
    result: GameResult | None = None
    error: str | None = None
    error_code: MoveError | None = None

    # Human-readable changes, for logs and clients
    changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, error_code: MoveError, index: int | None = None) -> MoveResult:
        """Create a failure result."""
        return cls(success=False, index=index, error=error, error_code=error_code)

    @classmethod
    def ok(
        cls,
        index: int,
        player: Player,
        result: GameResult,
        changes: list[str] | None = None,
    ) -> MoveResult:
        """Create a success result."""
        return cls(
            success=True,
            index=index,
            player=player,
            result=result,
            changes=changes or [],
        )
