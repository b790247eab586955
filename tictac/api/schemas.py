"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between clients and the engine.
Board cells are serialized as "X", "O" or null, row-major.

Error Codes:
- CELL_OCCUPIED: Move targets a cell that already has a mark
- GAME_ALREADY_OVER: Move after the match was won or drawn
- INDEX_OUT_OF_RANGE: Move index is not on the current board
- UNSUPPORTED_BOARD_SIZE: Requested board size is not offered
- SESSION_NOT_FOUND: Session does not exist or has expired
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class MatchStatus(str, Enum):
    """Status of the current match."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


class ErrorCode(str, Enum):
    """Structured error codes."""
    CELL_OCCUPIED = "CELL_OCCUPIED"
    GAME_ALREADY_OVER = "GAME_ALREADY_OVER"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
    UNSUPPORTED_BOARD_SIZE = "UNSUPPORTED_BOARD_SIZE"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Start a new session."""
    board_size: int = Field(3, description="Board dimension N for an N x N board")


class MoveRequest(BaseModel):
    """Place the current player's mark."""
    index: int = Field(..., description="Row-major cell index (row * N + col)")


class BoardSizeRequest(BaseModel):
    """Switch board size; the current match is finalized first."""
    board_size: int = Field(..., description="New board dimension N")


# =============================================================================
# Shared Models
# =============================================================================

class ScoresInfo(BaseModel):
    """Running score tallies."""
    x: int = 0
    o: int = 0
    draws: int = 0

    model_config = {"from_attributes": True}


class MatchRecordInfo(BaseModel):
    """One finished match from the history."""
    board_size: int
    board: list[Optional[str]]
    result: str = Field(..., description="X, O or draw")
    winning_line: list[int] = Field(default_factory=list)
    counted: bool = Field(True, description="Whether this match changed the scores")
    timestamp: str
    summary: str


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class GameStateResponse(BaseModel):
    """Complete game state for display."""
    session_id: str
    board_size: int
    required_run: int
    board: list[Optional[str]]
    current_player: str
    status: MatchStatus
    winner: Optional[str] = None
    winning_line: list[int] = Field(default_factory=list)
    legal_moves: list[int] = Field(default_factory=list)
    scores: ScoresInfo
    history: list[MatchRecordInfo] = Field(default_factory=list)
    status_message: str
    api_version: str = "v1"


class HistoryResponse(BaseModel):
    """Recent matches, newest first."""
    session_id: str
    records: list[MatchRecordInfo] = Field(default_factory=list)
    total: int = 0
    api_version: str = "v1"


class SummaryResponse(BaseModel):
    """Shareable text summary."""
    session_id: str
    title: str = "Tic Tac Toe Scores"
    message: str
    api_version: str = "v1"


class SessionListResponse(BaseModel):
    """List of active sessions."""
    sessions: list[str] = Field(default_factory=list)
    count: int = 0


class EndSessionResponse(BaseModel):
    """Response from ending a session."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
