"""
Summary - Human-readable text built from a controller's state.

Used by the share endpoint and the terminal client. Nothing here
changes game state; it only formats what the controller reports.
"""

from __future__ import annotations
from typing import Sequence, TYPE_CHECKING

from .engine_core.ledger import MatchRecord
from .engine_core.state import Cell, GameResult, GameStatus

if TYPE_CHECKING:
    from .session.controller import GameController


def result_text(result: GameResult) -> str:
    """Current game line of the share text."""
    if result.status == GameStatus.WON:
        return f"{result.winner.value} wins!"
    if result.status == GameStatus.DRAWN:
        return "Draw"
    return "In progress"


def share_summary(controller: GameController) -> str:
    """Scores and current game, as shared with other apps."""
    size = controller.board_size
    scores = controller.scores
    return (
        f"Tic Tac Toe Scores ({size}x{size}):\n"
        f"\n"
        f"Player X: {scores.x}\n"
        f"Player O: {scores.o}\n"
        f"Draws: {scores.draws}\n"
        f"\n"
        f"Current game: {result_text(controller.result)}"
    )


def status_message(controller: GameController) -> str:
    result = controller.result
    if result.status == GameStatus.WON:
        return f"Player {result.winner.value} wins!"
    if result.status == GameStatus.DRAWN:
        return "Game ended in a draw!"
    return f"Next player: {controller.current_player.value}"


def history_line(record: MatchRecord) -> str:
    size = record.board_size
    outcome = "Draw" if record.result.status == GameStatus.DRAWN else f"{record.winner.value} won"
    return f"{size}x{size}: {outcome} - {record.timestamp}"


def render_board(cells: Sequence[Cell], size: int, winning_line: Sequence[int] = ()) -> str:
    """
    Plain-text grid. Empty cells show their index so a player can type
    it; winning cells are wrapped in brackets.
    """
    width = len(str(size * size - 1)) + 2
    highlight = set(winning_line)
    rows = []
    for row in range(size):
        parts = []
        for col in range(size):
            index = row * size + col
            cell = cells[index]
            text = cell.value if cell is not None else str(index)
            if index in highlight:
                text = f"[{text}]"
            parts.append(text.center(width))
        rows.append("|".join(parts))
    separator = "\n" + "+".join(["-" * width] * size) + "\n"
    return separator.join(rows)
