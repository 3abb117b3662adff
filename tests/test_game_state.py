"""Tests for game state functionality."""

import pytest

from t3_sim.models.game.board import Board
from t3_sim.models.game.components import GameStateCheckerComponent, WIN_LINES
from t3_sim.models.game.game_state import GameResult, GameState, WinResult
from t3_sim.models.game.move_log import Move, MoveLog
from t3_sim.models.game.move_queue import MoveQueue
from t3_sim.models.game.player import Player
from tests.helpers import EVICTION_SEQUENCE, TOP_ROW_WIN_SEQUENCE, state_from_moves


@pytest.fixture
def game_state():
    """Create a fresh game state for testing."""
    return GameState.initial()


@pytest.fixture
def checker():
    return GameStateCheckerComponent()


def board_with(player, indices):
    board = Board()
    for idx in indices:
        board.set(idx, player)
    return board


class TestGameState:
    """Test GameState functionality."""

    def test_game_state_creation(self, game_state):
        """Test creating a fresh game state."""
        assert game_state.board == Board()
        assert game_state.current is Player.X
        assert game_state.win is None
        assert game_state.winner is None
        assert game_state.version == 0
        assert game_state.max_marks == 3
        assert len(game_state.move_log) == 0
        assert game_state.history_for(Player.X) == []
        assert game_state.history_for(Player.O) == []
        assert game_state.game_result == GameResult.PLAYING
        assert not game_state.is_game_over()

    def test_game_state_validation(self):
        with pytest.raises(ValueError, match="max_marks must be at least 1"):
            GameState(max_marks=0)
        with pytest.raises(ValueError, match="does not match max_marks"):
            GameState(max_marks=3, x_queue=MoveQueue(4))

    def test_queues_follow_max_marks(self):
        game_state = GameState.initial(max_marks=4)
        assert game_state.queue_for(Player.X).capacity == 4
        assert game_state.queue_for(Player.O).capacity == 4

    def test_initial_states_are_equal(self):
        assert GameState.initial() == GameState.initial()
        assert GameState.initial() is not GameState.initial()

    def test_copy_is_independent(self):
        game_state = state_from_moves([0, 4])
        clone = game_state.copy()

        clone.board.set(8, Player.X)
        clone.queue_for(Player.X).push(8)
        clone.move_log.append(Move(Player.X, 8))

        assert not game_state.board.is_occupied(8)
        assert game_state.history_for(Player.X) == [0]
        assert len(game_state.move_log) == 2
        assert clone != game_state

    def test_won_state(self):
        game_state = state_from_moves(TOP_ROW_WIN_SEQUENCE)

        assert game_state.game_result == GameResult.WON
        assert game_state.is_game_over()
        assert game_state.winner is Player.X
        assert game_state.is_winning_cell(1)
        assert not game_state.is_winning_cell(3)


class TestInvariantChecks:
    """Test check_invariants on hand-built states."""

    def test_played_states_are_consistent(self):
        state_from_moves(EVICTION_SEQUENCE).check_invariants()
        state_from_moves(TOP_ROW_WIN_SEQUENCE).check_invariants()

    def test_queue_board_mismatch(self):
        game_state = GameState(
            board=board_with(Player.X, [0]),
            x_queue=MoveQueue(3, [1]),
            move_log=MoveLog([Move(Player.X, 1)]),
        )
        with pytest.raises(ValueError, match="does not match board cells"):
            game_state.check_invariants()

    def test_log_mismatch(self):
        game_state = GameState(
            board=board_with(Player.X, [0]),
            x_queue=MoveQueue(3, [0]),
        )
        with pytest.raises(ValueError, match="Move log does not match"):
            game_state.check_invariants()

    def test_stale_log_entries_are_ignored(self):
        game_state = GameState(
            board=board_with(Player.X, [0]),
            x_queue=MoveQueue(3, [0]),
            move_log=MoveLog([Move(Player.O, 5), Move(Player.X, 0)]),
            current=Player.O,
        )
        game_state.check_invariants()

    def test_bad_win_cells(self):
        game_state = GameState(
            board=board_with(Player.X, [0, 1]),
            x_queue=MoveQueue(3, [0, 1]),
            move_log=MoveLog([Move(Player.X, 0), Move(Player.X, 1)]),
            win=WinResult(Player.X, (0, 1, 2)),
        )
        with pytest.raises(ValueError, match="not all held"):
            game_state.check_invariants()

    def test_win_cells_must_form_a_line(self):
        game_state = GameState(
            board=board_with(Player.X, [0, 1, 5]),
            x_queue=MoveQueue(3, [0, 1, 5]),
            move_log=MoveLog([Move(Player.X, 0), Move(Player.X, 1), Move(Player.X, 5)]),
            win=WinResult(Player.X, (0, 1, 5)),
        )
        with pytest.raises(ValueError, match="not the first complete line"):
            game_state.check_invariants()

    def test_complete_line_needs_a_recorded_win(self):
        game_state = state_from_moves(TOP_ROW_WIN_SEQUENCE)
        game_state.win = None
        game_state.current = Player.O

        with pytest.raises(ValueError, match=r"complete line \(0, 1, 2\)"):
            game_state.check_invariants()


class TestWinDetection:
    """Test the game state checker component."""

    def test_empty_board_has_no_winner(self, checker):
        assert checker.find_winner(Board()) is None

    @pytest.mark.parametrize("line", WIN_LINES)
    @pytest.mark.parametrize("player", [Player.X, Player.O])
    def test_every_line_wins(self, checker, line, player):
        win = checker.find_winner(board_with(player, line))
        assert win == WinResult(player, line)

    def test_mixed_line_does_not_win(self, checker):
        board = board_with(Player.X, [0, 1])
        board.set(2, Player.O)
        assert checker.find_winner(board) is None

    def test_first_line_in_scan_order_wins(self, checker):
        # Top row and left column both complete
        board = board_with(Player.X, [0, 1, 2, 3, 6])
        assert checker.find_winner(board).cells == (0, 1, 2)

    def test_scans_whole_board_not_just_mover(self, checker):
        board = board_with(Player.X, [0, 1])
        for idx in (6, 7, 8):
            board.set(idx, Player.O)
        assert checker.find_winner(board) == WinResult(Player.O, (6, 7, 8))

    def test_check_game_state_records_win(self):
        game_state = GameState(
            board=board_with(Player.O, [2, 4, 6]),
            o_queue=MoveQueue(3, [2, 4, 6]),
        )
        game_state.check_game_state()

        assert game_state.win == WinResult(Player.O, (2, 4, 6))
        assert game_state.is_game_over()
