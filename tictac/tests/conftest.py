"""
Pytest fixtures for Tictac tests.
"""

import pytest

from ..engine_core.board import BoardState
from ..engine_core.state import Player
from ..session import GameController


X, O = Player.X, Player.O


def play(target, moves):
    """Apply moves in order to a BoardState or GameController, returning the last result."""
    apply = target.apply_move if isinstance(target, BoardState) else target.move
    result = None
    for index in moves:
        result = apply(index)
        assert result.success, f"move {index} failed: {result.error}"
    return result


# X:0 O:3 X:1 O:4 X:2 -> X wins on the top row
CLASSIC_WIN = [0, 3, 1, 4, 2]

# Ends at [O,X,O,X,O,X,X,O,X]; no line anywhere
DRAW_MOVES = [1, 0, 3, 2, 5, 4, 6, 7, 8]


@pytest.fixture
def board() -> BoardState:
    """Empty 3x3 board."""
    return BoardState(3)


@pytest.fixture
def board4() -> BoardState:
    """Empty 4x4 board."""
    return BoardState(4)


@pytest.fixture
def controller() -> GameController:
    """Fresh 3x3 controller."""
    return GameController(board_size=3)


@pytest.fixture
def events(controller):
    """Collects every event the controller emits."""
    received = []
    controller.subscribe(received.append)
    return received
