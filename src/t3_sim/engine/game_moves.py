"""Move types and the state reducer."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.game.game_state import GameState


@dataclass
class GameMove:
    """Base class for all game moves."""
    pass


@dataclass
class PlaceMove(GameMove):
    """Move to put the current player's mark on a cell."""
    idx: int


@dataclass
class UndoMove(GameMove):
    """Move to take back the most recent placement."""
    pass


@dataclass
class ResetMove(GameMove):
    """Move to start a fresh game."""
    pass


def apply_move(game_state: "GameState", move: GameMove) -> "GameState":
    """Reduce (state, move) to the next state.

    Raises:
        TypeError: If move is not a known GameMove.
    """
    from .game_engine import place, undo, reset

    if isinstance(move, PlaceMove):
        return place(game_state, move.idx)
    if isinstance(move, UndoMove):
        return undo(game_state)
    if isinstance(move, ResetMove):
        return reset(game_state.max_marks)
    raise TypeError(f"Unknown move type: {type(move).__name__}")
