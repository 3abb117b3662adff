"""Move validation for T3 gameplay."""

from typing import Any, List, Optional, Tuple

from ..models.game.board import CELL_COUNT, in_range
from ..models.game.game_state import GameState


# Rejection reasons reported alongside no-op transitions
GAME_OVER = "game_over"
OUT_OF_RANGE = "out_of_range"
CELL_OCCUPIED = "cell_occupied"
NO_MOVES_TO_UNDO = "no_moves_to_undo"


class MoveValidator:
    """Validates placements and undo requests against a game state."""

    def __init__(self, game_state: GameState):
        self.game_state = game_state

    def get_legal_cells(self) -> List[int]:
        """Get every index the current player may place on."""
        return [idx for idx in range(CELL_COUNT) if self.can_place(idx)]

    def validate_place(self, idx: Any) -> Tuple[bool, Optional[str]]:
        """Check whether the current player may place at idx.

        Returns:
            (True, None) if allowed, else (False, reason).
        """
        if self.game_state.is_game_over():
            return False, GAME_OVER
        if not in_range(idx):
            return False, OUT_OF_RANGE
        if self.game_state.board.is_occupied(idx):
            return False, CELL_OCCUPIED
        return True, None

    def validate_undo(self) -> Tuple[bool, Optional[str]]:
        """Check whether the last move may be undone."""
        if self.game_state.is_game_over():
            return False, GAME_OVER
        if len(self.game_state.move_log) == 0:
            return False, NO_MOVES_TO_UNDO
        return True, None

    def can_place(self, idx: Any) -> bool:
        return self.validate_place(idx)[0]

    def can_undo(self) -> bool:
        return self.validate_undo()[0]
