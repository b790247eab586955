"""
Game events - Notifications for committed state changes.

Presentation layers (animations, share buttons, websockets) subscribe
to a GameController and react to these instead of polling. Events are
only emitted after the state change has been applied.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
import time


class EventType(Enum):
    """Types of game events."""
    MOVE_MADE = "move_made"
    GAME_WON = "game_won"
    GAME_DRAWN = "game_drawn"
    MATCH_RECORDED = "match_recorded"
    GAME_RESET = "game_reset"
    BOARD_RESIZED = "board_resized"


@dataclass
class GameEvent:
    """
    A single state change notification.

    Attributes:
        type: What happened
        data: Event-specific payload
        timestamp: When the event was created
    """
    type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: float = field(default_factory=time.time)

    def __str__(self) -> str:
        return f"{self.type.name}: {self.data}"
