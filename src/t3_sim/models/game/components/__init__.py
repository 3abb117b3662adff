"""Game state components package."""

from .game_state_checker import GameStateCheckerComponent, WIN_LINES

__all__ = [
    'GameStateCheckerComponent',
    'WIN_LINES'
]
