"""Tests for move validation."""

from t3_sim.engine.move_validator import (
    CELL_OCCUPIED, GAME_OVER, NO_MOVES_TO_UNDO, OUT_OF_RANGE, MoveValidator
)
from t3_sim.models.game.game_state import GameState
from tests.helpers import EVICTION_SEQUENCE, TOP_ROW_WIN_SEQUENCE, state_from_moves


class TestMoveValidator:
    """Test MoveValidator functionality."""

    def test_fresh_game(self):
        validator = MoveValidator(GameState.initial())

        assert validator.get_legal_cells() == list(range(9))
        assert validator.validate_place(4) == (True, None)
        assert validator.validate_undo() == (False, NO_MOVES_TO_UNDO)
        assert not validator.can_undo()

    def test_occupied_and_out_of_range(self):
        validator = MoveValidator(state_from_moves([4]))

        assert validator.validate_place(4) == (False, CELL_OCCUPIED)
        assert validator.validate_place(9) == (False, OUT_OF_RANGE)
        assert validator.validate_place("4") == (False, OUT_OF_RANGE)
        assert validator.can_undo()

    def test_legal_cells_exclude_occupied(self):
        validator = MoveValidator(state_from_moves(EVICTION_SEQUENCE))
        # X holds 1, 3, 5 and O holds 4, 7, 8
        assert validator.get_legal_cells() == [0, 2, 6]

    def test_legal_cells_agree_with_can_place(self):
        validator = MoveValidator(state_from_moves([0, 4, 8]))

        assert validator.get_legal_cells() == [1, 2, 3, 5, 6, 7]
        assert all(validator.can_place(idx) for idx in validator.get_legal_cells())
        assert not validator.can_place(4)
        assert not validator.can_place(-1)

    def test_game_over_blocks_everything(self):
        validator = MoveValidator(state_from_moves(TOP_ROW_WIN_SEQUENCE))

        assert validator.get_legal_cells() == []
        assert validator.validate_place(8) == (False, GAME_OVER)
        # Game over is reported ahead of other problems
        assert validator.validate_place(0) == (False, GAME_OVER)
        assert validator.validate_undo() == (False, GAME_OVER)
