"""Shared test helpers and utilities for all test files."""

from typing import Iterable

from t3_sim.engine.game_engine import place
from t3_sim.models.game.game_state import GameState


# X: 0, 1, 3 then 5 evicts 0. O: 4, 8, 7. Nobody completes a line.
EVICTION_SEQUENCE = [0, 4, 1, 8, 3, 7, 5]

# X takes the top row on its third move.
TOP_ROW_WIN_SEQUENCE = [0, 3, 1, 4, 2]


def play_sequence(game_state: GameState, indices: Iterable[int]) -> GameState:
    """Apply placements in order, alternating players as the engine decides."""
    for idx in indices:
        game_state = place(game_state, idx)
    return game_state


def state_from_moves(indices: Iterable[int], max_marks: int = 3) -> GameState:
    """Helper to build a state by playing indices from a fresh game."""
    return play_sequence(GameState.initial(max_marks), indices)


def mark_count(game_state: GameState) -> int:
    """Number of marks on the board."""
    return game_state.board.mark_count
