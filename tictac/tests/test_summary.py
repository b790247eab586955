"""
Tests for share text and terminal rendering.
"""

from ..engine_core.state import Player
from ..summary import history_line, render_board, share_summary, status_message
from .conftest import CLASSIC_WIN, DRAW_MOVES, play


X, O = Player.X, Player.O


class TestShareSummary:
    """Tests for the share text."""

    def test_fresh_game(self, controller):
        assert share_summary(controller) == (
            "Tic Tac Toe Scores (3x3):\n"
            "\n"
            "Player X: 0\n"
            "Player O: 0\n"
            "Draws: 0\n"
            "\n"
            "Current game: In progress"
        )

    def test_after_win(self, controller):
        play(controller, CLASSIC_WIN)
        text = share_summary(controller)

        assert "Player X: 1" in text
        assert text.endswith("Current game: X wins!")

    def test_after_draw(self, controller):
        play(controller, DRAW_MOVES)
        assert share_summary(controller).endswith("Current game: Draw")

    def test_board_size_in_title(self, controller):
        controller.set_board_size(4)
        assert share_summary(controller).startswith("Tic Tac Toe Scores (4x4):")


class TestStatusMessage:
    """Tests for the status line."""

    def test_next_player(self, controller):
        assert status_message(controller) == "Next player: X"
        controller.move(0)
        assert status_message(controller) == "Next player: O"

    def test_win(self, controller):
        play(controller, CLASSIC_WIN)
        assert status_message(controller) == "Player X wins!"

    def test_draw(self, controller):
        play(controller, DRAW_MOVES)
        assert status_message(controller) == "Game ended in a draw!"


class TestHistoryLine:
    def test_win_and_abandon(self, controller):
        play(controller, CLASSIC_WIN)
        controller.new_game()
        controller.move(0)
        controller.set_board_size(4)

        newest, oldest = controller.history()
        assert history_line(oldest).startswith("3x3: X won - ")
        assert history_line(newest).startswith("3x3: Draw - ")


class TestRenderBoard:
    def test_empty_cells_show_index(self):
        text = render_board([None] * 9, 3)
        lines = text.splitlines()

        assert len(lines) == 5
        assert lines[0].split("|") == [" 0 ", " 1 ", " 2 "]

    def test_winning_cells_bracketed(self):
        cells = [X, X, X, O, O, None, None, None, None]
        first_row = render_board(cells, 3, (0, 1, 2)).splitlines()[0]

        assert first_row.count("[X]") == 3

    def test_four_by_four_width(self):
        lines = render_board([None] * 16, 4).splitlines()
        assert len(lines) == 7
        assert "15" in lines[-1]
