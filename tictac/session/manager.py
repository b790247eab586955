"""
Session Manager - Creates and tracks game sessions.

PERSISTENCE RULES:
- No database; sessions live in memory only
- Ending a session drops its board, history and scores
- Each session owns its own GameController, nothing is shared
- Sessions idle longer than `max_idle_seconds` are dropped the next
  time a session is created
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable
import logging
import time
import uuid

from .controller import GameController, SUPPORTED_SIZES

logger = logging.getLogger(__name__)

DEFAULT_MAX_IDLE_SECONDS = 3600


@dataclass
class Session:
    """
    An ephemeral game session.

    The controller is the only thing with game logic; the session just
    adds identity and bookkeeping for the manager.
    """
    session_id: str
    controller: GameController
    created_at: float = field(default_factory=time.time)
    last_active: float = field(default_factory=time.time)

    def touch(self) -> None:
        self.last_active = time.time()


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions with a fresh controller
    - Look sessions up by ID
    - Drop ended and stale sessions
    """

    def __init__(
        self,
        supported_sizes: Iterable[int] = SUPPORTED_SIZES,
        max_idle_seconds: int = DEFAULT_MAX_IDLE_SECONDS,
    ):
        self.supported_sizes = tuple(supported_sizes)
        self.max_idle_seconds = max_idle_seconds
        self._sessions: dict[str, Session] = {}

    def create_session(self, board_size: int = 3) -> Session:
        """
        Create a new game session.

        Stale sessions are cleaned up first, so the map cannot grow
        without bound on a long-running server.

        Raises:
            ValueError: If board_size is not supported
        """
        self.cleanup_stale_sessions(self.max_idle_seconds)
        controller = GameController(board_size=board_size, supported_sizes=self.supported_sizes)
        session = Session(session_id=str(uuid.uuid4()), controller=controller)
        self._sessions[session.session_id] = session
        logger.info("Created session %s (%dx%d)", session.session_id, board_size, board_size)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """Remove a session. Returns False if it did not exist."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        logger.info("Ended session %s (%s)", session_id, reason)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of live sessions."""
        return list(self._sessions)

    def cleanup_stale_sessions(self, max_idle_seconds: int | None = None) -> int:
        """
        Drop sessions idle for longer than max_idle_seconds.

        Returns the number of sessions removed.
        """
        limit = self.max_idle_seconds if max_idle_seconds is None else max_idle_seconds
        now = time.time()
        stale = [
            sid for sid, session in self._sessions.items()
            if now - session.last_active > limit
        ]
        for session_id in stale:
            self.end_session(session_id, reason="stale")
        return len(stale)
