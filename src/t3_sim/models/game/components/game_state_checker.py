"""Game state checking component for GameState."""

from typing import Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..board import Board
    from ..game_state import GameState, WinResult


# Rows, columns, then diagonals. Scan order decides which line is reported.
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


class GameStateCheckerComponent:
    """Handles win detection for the game state."""

    def find_winner(self, board: "Board") -> Optional["WinResult"]:
        """Return the first complete line on the board, checking both players."""
        from ..game_state import WinResult

        for line in WIN_LINES:
            a, b, c = line
            cell = board.get(a)
            if not cell.is_empty and cell is board.get(b) and cell is board.get(c):
                return WinResult(player=cell.owner, cells=line)
        return None

    def check_game_state(self, game_state: "GameState") -> None:
        """Record a win on the state if the board holds a complete line."""
        if game_state.win is not None:
            return  # Game already over
        game_state.win = self.find_winner(game_state.board)

    def is_game_over(self, game_state: "GameState") -> bool:
        return game_state.win is not None
