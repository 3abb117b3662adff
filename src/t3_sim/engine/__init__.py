"""Engine package for game rules and logic."""

from .move_validator import MoveValidator
from .game_engine import GameEngine, place, undo, reset, derive_about_to_vanish
from .game_moves import GameMove, PlaceMove, UndoMove, ResetMove, apply_move
from .action_result import ActionResult, ActionResultType
from .state_serializer import GameStateSerializer, SerializationError

__all__ = [
    'MoveValidator',
    'GameEngine',
    'place',
    'undo',
    'reset',
    'derive_about_to_vanish',
    'GameMove',
    'PlaceMove',
    'UndoMove',
    'ResetMove',
    'apply_move',
    'ActionResult',
    'ActionResultType',
    'GameStateSerializer',
    'SerializationError',
]
