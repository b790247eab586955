"""
Game Controller - Orchestrates one tic-tac-toe session.

The controller owns the only mutable state of a session:
- The live BoardState
- The MatchLedger (history + scores)

Every command goes through it:
    move(index)          apply a move, record the match if it ends
    new_game()           finalize the current match, fresh board
    set_board_size(n)    finalize the current match, fresh n x n board

A match is recorded exactly once. Wins and draws are committed (and
scored) the moment the deciding move lands. A board with marks that is
reset before it ends is committed as an uncounted draw.

Not thread-safe: callers serialize commands.
"""

from __future__ import annotations
from typing import Callable, Iterable
import logging

from ..engine_core.action import MoveError, MoveResult
from ..engine_core.board import BoardState
from ..engine_core.events import EventType, GameEvent
from ..engine_core.ledger import DEFAULT_HISTORY_LIMIT, MatchLedger, MatchRecord, Scores, finalize
from ..engine_core.state import Cell, GameResult, GameStatus, Player

logger = logging.getLogger(__name__)

SUPPORTED_SIZES = (3, 4)

Listener = Callable[[GameEvent], None]


class GameController:
    """
    Single-session game driver.

    Usage:
        game = GameController()
        result = game.move(4)
        if not result.success:
            print(result.error_code)

        game.board, game.current_player, game.result
        game.scores, game.history(5)
    """

    def __init__(
        self,
        board_size: int = 3,
        supported_sizes: Iterable[int] = SUPPORTED_SIZES,
        ledger: MatchLedger | None = None,
    ):
        self.supported_sizes = tuple(sorted(set(supported_sizes)))
        self._check_size(board_size)
        self._board = BoardState(board_size)
        self._ledger = ledger if ledger is not None else MatchLedger()
        self._recorded = False
        self._listeners: list[Listener] = []

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def board_size(self) -> int:
        return self._board.size

    @property
    def required_run(self) -> int:
        return self._board.required_run

    @property
    def board(self) -> tuple[Cell, ...]:
        return self._board.cells

    @property
    def current_player(self) -> Player:
        return self._board.current_player

    @property
    def result(self) -> GameResult:
        return self._board.result

    @property
    def is_terminal(self) -> bool:
        return self._board.is_terminal

    @property
    def winning_line(self) -> tuple[int, ...]:
        return self._board.winning_line

    @property
    def scores(self) -> Scores:
        return self._ledger.scores

    @property
    def ledger(self) -> MatchLedger:
        return self._ledger

    def legal_moves(self) -> list[int]:
        return self._board.empty_indices()

    def history(self, k: int = DEFAULT_HISTORY_LIMIT) -> list[MatchRecord]:
        """Most recent `k` matches, newest first."""
        return self._ledger.recent(k)

    # =========================================================================
    # Commands
    # =========================================================================

    def move(self, index: int) -> MoveResult:
        """Apply a move for the current player. Failures leave state untouched."""
        result = self._board.apply_move(index)

        if not result.success:
            if result.error_code == MoveError.INDEX_OUT_OF_RANGE:
                logger.warning("Rejected move: %s", result.error)
            else:
                logger.debug("Rejected move at %s: %s", index, result.error_code.value)
            return result

        logger.debug("%s", "; ".join(result.changes))
        self._emit(EventType.MOVE_MADE, index=index, player=result.player.value)

        outcome = result.result
        if outcome.status == GameStatus.WON:
            logger.info("%s wins on %dx%d board, line %s",
                        outcome.winner.value, self.board_size, self.board_size, list(outcome.line))
            self._emit(EventType.GAME_WON, winner=outcome.winner.value, line=list(outcome.line))
            self._record()
        elif outcome.status == GameStatus.DRAWN:
            logger.info("Draw on %dx%d board", self.board_size, self.board_size)
            self._emit(EventType.GAME_DRAWN)
            self._record()

        return result

    def new_game(self) -> None:
        """Finalize the current match (if any marks) and start over at the same size."""
        self._finalize_current()
        self._board.reset()
        self._recorded = False
        self._emit(EventType.GAME_RESET, board_size=self.board_size)

    def set_board_size(self, size: int) -> None:
        """Finalize the current match and start a fresh board of `size`."""
        self._check_size(size)
        previous = self.board_size
        self._finalize_current()
        self._board.reset(size)
        self._recorded = False
        if size != previous:
            logger.info("Board resized from %dx%d to %dx%d", previous, previous, size, size)
            self._emit(EventType.BOARD_RESIZED, previous=previous, board_size=size)
        self._emit(EventType.GAME_RESET, board_size=size)

    # =========================================================================
    # Listeners
    # =========================================================================

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # =========================================================================
    # Internals
    # =========================================================================

    def _check_size(self, size: int) -> None:
        if size not in self.supported_sizes:
            raise ValueError(
                f"Unsupported board size {size}; expected one of {list(self.supported_sizes)}"
            )

    def _finalize_current(self) -> None:
        if self._recorded:
            return
        record = finalize(self._board.cells, self.board_size, None)
        if record is None:
            return
        logger.info("Abandoned %dx%d match after %d moves, logged as draw (not scored)",
                    self.board_size, self.board_size, self._board.move_count)
        self._commit(record)

    def _record(self) -> None:
        outcome = self._board.result
        record = finalize(self._board.cells, self.board_size, outcome.winner, outcome.line)
        self._commit(record)

    def _commit(self, record: MatchRecord) -> None:
        self._ledger.commit(record)
        self._recorded = True
        self._emit(
            EventType.MATCH_RECORDED,
            result=record.result_label,
            counted=record.counted,
            scores=self._ledger.scores.to_dict(),
        )

    def _emit(self, event_type: EventType, **data) -> None:
        event = GameEvent(type=event_type, data=data)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Listener failed on %s", event_type.name)
