"""Game models for T3 simulation."""

from .player import Player, Cell
from .board import Board, BOARD_SIZE, CELL_COUNT, in_range
from .move_queue import MoveQueue
from .move_log import Move, MoveLog
from .game_state import GameState, GameResult, WinResult

__all__ = [
    "Player",
    "Cell",
    "Board",
    "BOARD_SIZE",
    "CELL_COUNT",
    "in_range",
    "MoveQueue",
    "Move",
    "MoveLog",
    "GameState",
    "GameResult",
    "WinResult",
]
