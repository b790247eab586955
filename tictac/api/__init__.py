"""
API Module - HTTP interface for game clients.

Exposes the game controller via a REST API:
1. Create a session (board size)
2. Play moves, start new games, change board size
3. Read state, history and a shareable summary

All state is session-scoped. No persistent user accounts required.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    MoveRequest,
    BoardSizeRequest,
    # Responses
    GameStateResponse,
    HistoryResponse,
    SummaryResponse,
    ErrorResponse,
    # Shared
    ScoresInfo,
    MatchRecordInfo,
    ErrorCode,
    MatchStatus,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "MoveRequest",
    "BoardSizeRequest",
    # Responses
    "GameStateResponse",
    "HistoryResponse",
    "SummaryResponse",
    "ErrorResponse",
    # Shared
    "ScoresInfo",
    "MatchRecordInfo",
    "ErrorCode",
    "MatchStatus",
    # Service
    "APIService",
    "create_app",
]
