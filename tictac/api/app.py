"""
FastAPI Application - REST API over the game controller.

Endpoints:
    POST   /api/v1/sessions                      Create game session
    GET    /api/v1/sessions                      List active sessions
    GET    /api/v1/sessions/{id}                 Get game state
    DELETE /api/v1/sessions/{id}                 End session
    POST   /api/v1/sessions/{id}/moves           Play a move
    POST   /api/v1/sessions/{id}/new-game        Finalize match, fresh board
    PUT    /api/v1/sessions/{id}/board-size      Finalize match, resize board
    GET    /api/v1/sessions/{id}/history         Recent matches, newest first
    GET    /api/v1/sessions/{id}/summary         Shareable score text

Rejected moves are 409 (occupied cell, game over) or 422 (index off
the board). All responses are JSON with explicit Pydantic schemas.
"""

from typing import Annotated, Optional, Union
import os

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..session import SessionManager, SUPPORTED_SIZES
from ..session.manager import DEFAULT_MAX_IDLE_SECONDS
from ..engine_core.ledger import DEFAULT_HISTORY_LIMIT
from .service import APIService
from .schemas import (
    # Request models
    CreateSessionRequest,
    MoveRequest,
    BoardSizeRequest,
    # Response models
    GameStateResponse,
    HistoryResponse,
    SummaryResponse,
    SessionListResponse,
    EndSessionResponse,
    HealthResponse,
    ErrorResponse,
    # Enums
    ErrorCode,
)

# Environment configuration
TICTAC_ENV = os.getenv("TICTAC_ENV", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
TICTAC_HISTORY_LIMIT = int(os.getenv("TICTAC_HISTORY_LIMIT", str(DEFAULT_HISTORY_LIMIT)))
TICTAC_SESSION_TTL = int(os.getenv("TICTAC_SESSION_TTL", str(DEFAULT_MAX_IDLE_SECONDS)))
TICTAC_BOARD_SIZES = tuple(
    int(s) for s in os.getenv("TICTAC_BOARD_SIZES", ",".join(map(str, SUPPORTED_SIZES))).split(",")
    if s.strip()
)

ERROR_STATUS = {
    ErrorCode.CELL_OCCUPIED: 409,
    ErrorCode.GAME_ALREADY_OVER: 409,
    ErrorCode.INDEX_OUT_OF_RANGE: 422,
    ErrorCode.UNSUPPORTED_BOARD_SIZE: 422,
    ErrorCode.SESSION_NOT_FOUND: 404,
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.INTERNAL_ERROR: 500,
}


def create_app(service: Optional[APIService] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Tictac Engine API",
        description="""
Configurable-size tic-tac-toe rules engine.

A 3x3 board needs 3 in a row; 4x4 and larger need 4 in a row.
X always moves first. Wins and full-board draws are scored; a board
abandoned mid-game is kept in the history as an unscored draw.

## Error Codes

| Code | Description |
|------|-------------|
| `CELL_OCCUPIED` | Target cell already has a mark |
| `GAME_ALREADY_OVER` | Match is finished, start a new game |
| `INDEX_OUT_OF_RANGE` | Index is not on the current board |
| `UNSUPPORTED_BOARD_SIZE` | Board size is not offered |
| `SESSION_NOT_FOUND` | Session does not exist |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService(
        session_manager=SessionManager(
            supported_sizes=TICTAC_BOARD_SIZES,
            max_idle_seconds=TICTAC_SESSION_TTL,
        ),
        history_limit=TICTAC_HISTORY_LIMIT,
    )
    app.state.service = api_service

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(error: ErrorResponse) -> JSONResponse:
        """Turn a service ErrorResponse into a JSON response with its status."""
        status_code = ERROR_STATUS.get(error.error_code, 400)
        return JSONResponse(status_code=status_code, content=error.model_dump(mode="json"))

    def respond(response):
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=GameStateResponse,
        status_code=201,
        responses={422: {"model": ErrorResponse, "description": "Unsupported board size"}},
        tags=["Sessions"],
        summary="Create a new game session",
    )
    async def create_session(
        request: Optional[CreateSessionRequest] = None,
    ) -> Union[GameStateResponse, JSONResponse]:
        """Start a session with an empty board. X moves first."""
        board_size = request.board_size if request else 3
        return respond(api_service.create_session(board_size=board_size))

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List active sessions",
    )
    async def list_sessions() -> SessionListResponse:
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get game state",
    )
    async def get_session(session_id: str) -> Union[GameStateResponse, JSONResponse]:
        return respond(api_service.get_game_state(session_id))

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(
        session_id: str,
        reason: Annotated[str, Query(description="Reason for ending")] = "user_ended",
    ) -> EndSessionResponse:
        """End a session. Its board, history and scores are discarded."""
        success = api_service.end_session(session_id, reason)
        return EndSessionResponse(success=success, session_id=session_id)

    # =========================================================================
    # Game Commands
    # =========================================================================

    @app.post(
        "/api/v1/sessions/{session_id}/moves",
        response_model=GameStateResponse,
        responses={
            404: {"model": ErrorResponse, "description": "Session not found"},
            409: {"model": ErrorResponse, "description": "Cell occupied or game over"},
            422: {"model": ErrorResponse, "description": "Index off the board"},
        },
        tags=["Game"],
        summary="Play a move for the current player",
    )
    async def make_move(session_id: str, request: MoveRequest) -> Union[GameStateResponse, JSONResponse]:
        return respond(api_service.make_move(session_id, request.index))

    @app.post(
        "/api/v1/sessions/{session_id}/new-game",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Start a new game at the same size",
    )
    async def new_game(session_id: str) -> Union[GameStateResponse, JSONResponse]:
        """An unfinished board with marks is logged as an unscored draw."""
        return respond(api_service.new_game(session_id))

    @app.put(
        "/api/v1/sessions/{session_id}/board-size",
        response_model=GameStateResponse,
        responses={
            404: {"model": ErrorResponse},
            422: {"model": ErrorResponse, "description": "Unsupported board size"},
        },
        tags=["Game"],
        summary="Change board size",
    )
    async def set_board_size(
        session_id: str,
        request: BoardSizeRequest,
    ) -> Union[GameStateResponse, JSONResponse]:
        """Finalizes the current match the same way new-game does, then resizes."""
        return respond(api_service.set_board_size(session_id, request.board_size))

    # =========================================================================
    # Queries
    # =========================================================================

    @app.get(
        "/api/v1/sessions/{session_id}/history",
        response_model=HistoryResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Recent matches, newest first",
    )
    async def get_history(
        session_id: str,
        limit: Annotated[Optional[int], Query(ge=0, description="Number of records")] = None,
    ) -> Union[HistoryResponse, JSONResponse]:
        return respond(api_service.get_history(session_id, limit))

    @app.get(
        "/api/v1/sessions/{session_id}/summary",
        response_model=SummaryResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Shareable score summary",
    )
    async def get_summary(session_id: str) -> Union[SummaryResponse, JSONResponse]:
        return respond(api_service.get_summary(session_id))

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(status="healthy", service="tictac-engine", version=__version__)

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Tictac Engine API",
            "version": __version__,
            "env": TICTAC_ENV,
            "docs": "/api/docs",
            "health": "/health",
        }

    return app


# For running directly: uvicorn tictac.api.app:app
app = create_app()
