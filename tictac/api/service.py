"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to controller commands
2. Manages sessions
3. Formats controller state as response models

This layer is framework-agnostic. Failures come back as ErrorResponse
values rather than exceptions, so any web framework can map them.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .schemas import (
    ErrorCode,
    ErrorResponse,
    GameStateResponse,
    HistoryResponse,
    MatchRecordInfo,
    MatchStatus,
    ScoresInfo,
    SummaryResponse,
)
from ..engine_core.ledger import DEFAULT_HISTORY_LIMIT, MatchRecord
from ..engine_core.state import cell_value
from ..session import GameController, Session, SessionManager
from ..summary import history_line, share_summary, status_message


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        state = service.create_session(board_size=3)
        state = service.make_move(state.session_id, 4)
        summary = service.get_summary(state.session_id)
    """
    session_manager: SessionManager = field(default_factory=SessionManager)
    history_limit: int = DEFAULT_HISTORY_LIMIT

    def create_session(self, board_size: int = 3) -> GameStateResponse | ErrorResponse:
        try:
            session = self.session_manager.create_session(board_size=board_size)
        except ValueError as e:
            return ErrorResponse(
                error=str(e),
                error_code=ErrorCode.UNSUPPORTED_BOARD_SIZE,
                details={"supported_sizes": list(self.session_manager.supported_sizes)},
            )
        return self._state_response(session)

    def get_game_state(self, session_id: str) -> GameStateResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return self._state_response(session)

    def make_move(self, session_id: str, index: int) -> GameStateResponse | ErrorResponse:
        """Apply a move. Rejected moves map to their MoveError code."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        session.touch()
        result = session.controller.move(index)
        if not result.success:
            return ErrorResponse(
                error=result.error,
                error_code=ErrorCode(result.error_code.value),
                details={"index": index},
            )
        return self._state_response(session)

    def new_game(self, session_id: str) -> GameStateResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        session.touch()
        session.controller.new_game()
        return self._state_response(session)

    def set_board_size(self, session_id: str, board_size: int) -> GameStateResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        session.touch()
        try:
            session.controller.set_board_size(board_size)
        except ValueError as e:
            return ErrorResponse(
                error=str(e),
                error_code=ErrorCode.UNSUPPORTED_BOARD_SIZE,
                details={"supported_sizes": list(session.controller.supported_sizes)},
            )
        return self._state_response(session)

    def get_history(self, session_id: str, limit: int | None = None) -> HistoryResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        controller = session.controller
        k = self.history_limit if limit is None else limit
        return HistoryResponse(
            session_id=session_id,
            records=[self._record_info(r) for r in controller.history(k)],
            total=len(controller.ledger),
        )

    def get_summary(self, session_id: str) -> SummaryResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return SummaryResponse(session_id=session_id, message=share_summary(session.controller))

    def end_session(self, session_id: str, reason: str = "user_ended") -> bool:
        return self.session_manager.end_session(session_id, reason)

    def list_sessions(self) -> list[str]:
        return self.session_manager.list_active_sessions()

    # =========================================================================
    # Formatting
    # =========================================================================

    def _not_found(self, session_id: str) -> ErrorResponse:
        return ErrorResponse(
            error=f"Session {session_id} not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
        )

    def _state_response(self, session: Session) -> GameStateResponse:
        controller: GameController = session.controller
        result = controller.result
        scores = controller.scores
        return GameStateResponse(
            session_id=session.session_id,
            board_size=controller.board_size,
            required_run=controller.required_run,
            board=[cell_value(c) for c in controller.board],
            current_player=controller.current_player.value,
            status=MatchStatus(result.status.value),
            winner=result.winner.value if result.winner else None,
            winning_line=list(controller.winning_line),
            legal_moves=controller.legal_moves(),
            scores=ScoresInfo(x=scores.x, o=scores.o, draws=scores.draws),
            history=[self._record_info(r) for r in controller.history(self.history_limit)],
            status_message=status_message(controller),
        )

    def _record_info(self, record: MatchRecord) -> MatchRecordInfo:
        return MatchRecordInfo(
            board_size=record.board_size,
            board=[cell_value(c) for c in record.final_board],
            result=record.result_label,
            winning_line=list(record.result.line),
            counted=record.counted,
            timestamp=record.timestamp,
            summary=history_line(record),
        )
