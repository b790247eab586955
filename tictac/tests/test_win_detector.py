"""
Tests for win detection.

Tests:
- Required run per board size
- Candidate line enumeration and order
- First-match tie-break
- No false positives
"""

import pytest

from ..engine_core.state import GameStatus, Player
from ..engine_core.win_detector import candidate_lines, detect_win, is_full, required_run


X, O = Player.X, Player.O


def board_with(size, marks):
    """Build a cell list from {index: player}."""
    cells = [None] * (size * size)
    for index, player in marks.items():
        cells[index] = player
    return cells


class TestRequiredRun:
    """Tests for run length policy."""

    def test_three_by_three_needs_three(self):
        assert required_run(3) == 3

    def test_larger_boards_need_four(self):
        """Run length stops growing at 4."""
        assert required_run(4) == 4
        assert required_run(5) == 4
        assert required_run(9) == 4

    def test_too_small_board_rejected(self):
        with pytest.raises(ValueError):
            required_run(2)


class TestCandidateLines:
    """Tests for line enumeration."""

    def test_classic_eight_lines(self):
        """3x3 has exactly 3 rows, 3 columns and 2 diagonals, in that order."""
        assert candidate_lines(3) == (
            (0, 1, 2), (3, 4, 5), (6, 7, 8),
            (0, 3, 6), (1, 4, 7), (2, 5, 8),
            (0, 4, 8),
            (2, 4, 6),
        )

    def test_four_by_four_lines(self):
        """4x4 with run 4: full rows, full columns, both long diagonals."""
        lines = candidate_lines(4)
        assert len(lines) == 10
        assert lines[0] == (0, 1, 2, 3)
        assert lines[4] == (0, 4, 8, 12)
        assert lines[8] == (0, 5, 10, 15)
        assert lines[9] == (3, 6, 9, 12)

    def test_five_by_five_windows(self):
        """Each row, column and diagonal direction has sliding windows."""
        lines = candidate_lines(5)
        # 10 row windows, 10 column windows, 4 + 4 diagonal windows
        assert len(lines) == 28
        assert lines[0] == (0, 1, 2, 3)
        assert lines[1] == (1, 2, 3, 4)
        assert (4, 8, 12, 16) in lines
        assert (9, 13, 17, 21) in lines

    def test_all_lines_stay_on_board(self):
        for size in (3, 4, 5, 6):
            run = required_run(size)
            for line in candidate_lines(size):
                assert len(line) == run
                assert all(0 <= i < size * size for i in line)

    def test_lines_are_cached_per_size(self):
        assert candidate_lines(4) is candidate_lines(4)


class TestDetectWin:
    """Tests for detect_win."""

    @pytest.mark.parametrize("line", candidate_lines(3))
    def test_every_classic_line_wins(self, line):
        result = detect_win(board_with(3, {i: O for i in line}), 3)

        assert result is not None
        assert result.status == GameStatus.WON
        assert result.winner == O
        assert result.line == line

    def test_empty_board_has_no_winner(self):
        assert detect_win([None] * 9, 3) is None

    def test_mixed_line_is_not_a_win(self):
        assert detect_win(board_with(3, {0: X, 1: X, 2: O}), 3) is None

    def test_three_in_a_row_on_four_by_four_is_not_a_win(self):
        cells = board_with(4, {0: X, 1: X, 2: X, 5: X, 10: X})
        assert detect_win(cells, 4) is None

    def test_four_in_a_row_on_four_by_four(self):
        result = detect_win(board_with(4, {4: O, 5: O, 6: O, 7: O}), 4)
        assert result.winner == O
        assert result.line == (4, 5, 6, 7)

    def test_four_by_four_column_and_diagonals(self):
        assert detect_win(board_with(4, {i: X for i in (1, 5, 9, 13)}), 4).line == (1, 5, 9, 13)
        assert detect_win(board_with(4, {i: X for i in (0, 5, 10, 15)}), 4).line == (0, 5, 10, 15)
        assert detect_win(board_with(4, {i: X for i in (3, 6, 9, 12)}), 4).line == (3, 6, 9, 12)

    def test_four_run_on_five_by_five(self):
        """A 5x5 board is won by 4, not 5."""
        result = detect_win(board_with(5, {i: X for i in (6, 7, 8, 9)}), 5)
        assert result.line == (6, 7, 8, 9)

    def test_draw_board_has_no_winner(self):
        """A full board with no line is not a win; calling it a draw is the caller's job."""
        cells = [X, O, X, O, X, O, O, X, O]
        assert detect_win(cells, 3) is None
        assert is_full(cells)

    def test_wrong_length_rejected(self):
        with pytest.raises(ValueError):
            detect_win([None] * 9, 4)

    def test_board_not_mutated(self):
        cells = board_with(3, {0: X, 1: X, 2: X})
        before = list(cells)
        detect_win(cells, 3)
        assert cells == before


class TestTieBreak:
    """When several lines are complete, the first in scan order wins."""

    def test_row_before_column(self):
        cells = board_with(3, {0: X, 1: X, 2: X, 3: X, 6: X})
        assert detect_win(cells, 3).line == (0, 1, 2)

    def test_column_before_diagonal(self):
        cells = board_with(3, {0: X, 3: X, 6: X, 4: X, 2: X})
        assert detect_win(cells, 3).line == (0, 3, 6)

    def test_down_right_before_down_left(self):
        cells = board_with(3, {0: X, 4: X, 8: X, 2: X, 6: X})
        assert detect_win(cells, 3).line == (0, 4, 8)

    def test_earlier_row_first(self):
        cells = board_with(3, {3: O, 4: O, 5: O, 6: X, 7: X, 8: X})
        result = detect_win(cells, 3)
        assert result.winner == O
        assert result.line == (3, 4, 5)

    def test_leftmost_window_first(self):
        cells = board_with(5, {i: X for i in range(5)})
        assert detect_win(cells, 5).line == (0, 1, 2, 3)

    def test_diagonals_grouped_by_starting_row(self):
        """On 5x5 a down-left run from row 0 beats a down-right run from row 1."""
        cells = board_with(5, {i: X for i in (3, 7, 11, 15, 5, 17, 23)})
        assert detect_win(cells, 5).line == (3, 7, 11, 15)

    def test_five_by_five_diagonal_order(self):
        diagonals = candidate_lines(5)[20:]
        assert diagonals == (
            (0, 6, 12, 18), (1, 7, 13, 19),
            (3, 7, 11, 15), (4, 8, 12, 16),
            (5, 11, 17, 23), (6, 12, 18, 24),
            (8, 12, 16, 20), (9, 13, 17, 21),
        )

    def test_full_large_board(self):
        cells = [O] * 16
        assert detect_win(cells, 4).line == (0, 1, 2, 3)
