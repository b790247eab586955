"""
Engine Core - Board state, win detection and match bookkeeping.

The engine is the part of the system with game logic in it:
1. BoardState holds the live cells, the turn and the result
2. The win detector scans candidate lines for a completed run
3. The ledger records finished matches and keeps the scores

Everything outside this package (API, CLI, share text) only reads
state and issues commands through a GameController.
"""

from .state import Player, Cell, GameStatus, GameResult, cell_value
from .board import BoardState
from .action import MoveError, MoveResult
from .win_detector import required_run, candidate_lines, detect_win, is_full
from .ledger import Scores, MatchRecord, MatchLedger, finalize, DEFAULT_HISTORY_LIMIT
from .events import EventType, GameEvent

__all__ = [
    "Player",
    "Cell",
    "GameStatus",
    "GameResult",
    "cell_value",
    "BoardState",
    "MoveError",
    "MoveResult",
    "required_run",
    "candidate_lines",
    "detect_win",
    "is_full",
    "Scores",
    "MatchRecord",
    "MatchLedger",
    "finalize",
    "DEFAULT_HISTORY_LIMIT",
    "EventType",
    "GameEvent",
]
