"""
Session Module - Owns game controllers for the API.

A session is one player pair's sitting at the board:
- Created when a client starts playing
- Holds exactly one GameController (board, history, scores)
- Destroyed when the client ends it or it goes stale

Sessions are EPHEMERAL: in-memory only, nothing is persisted.
"""

from .controller import GameController, SUPPORTED_SIZES
from .manager import SessionManager, Session

__all__ = [
    "GameController",
    "SUPPORTED_SIZES",
    "SessionManager",
    "Session",
]
