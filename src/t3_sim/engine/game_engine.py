"""Game engine: state transitions for place, undo and reset."""

from typing import Any, Dict, List, Optional, Tuple

from ..models.game.game_state import GameState
from ..models.game.move_log import Move
from ..models.game.move_queue import DEFAULT_CAPACITY
from ..models.game.player import Cell
from ..utils.logging_config import get_game_logger
from .action_result import ActionResult, ActionResultType
from .game_moves import GameMove, PlaceMove, UndoMove, ResetMove
from .move_validator import MoveValidator

logger = get_game_logger(__name__)


def _place(game_state: GameState, idx: Any) -> Tuple[GameState, Optional[int]]:
    """Place the current player's mark, returning the new state and any evicted index."""
    ok, reason = MoveValidator(game_state).validate_place(idx)
    if not ok:
        logger.debug(f"Rejected place at {idx!r}: {reason}")
        return game_state, None

    new_state = game_state.copy()
    player = new_state.current

    new_state.board.set(idx, player)
    new_state.move_log.append(Move(player, idx))
    evicted = new_state.queue_for(player).push(idx)
    logger.debug(f"{player.value} placed at {idx}")

    if evicted is not None:
        new_state.board.clear(evicted)
        new_state.move_log.remove_last_match(Move(player, evicted))
        logger.debug(f"{player.value} mark at {evicted} vanished")

    new_state.check_game_state()
    if new_state.win is None:
        new_state.current = player.other
    else:
        logger.debug(f"{new_state.win.player.value} completed {list(new_state.win.cells)}")

    new_state.version += 1
    return new_state, evicted


def _undo(game_state: GameState) -> Tuple[GameState, Optional[Move]]:
    """Take back the last logged move, returning the new state and the undone move."""
    ok, reason = MoveValidator(game_state).validate_undo()
    if not ok:
        logger.debug(f"Rejected undo: {reason}")
        return game_state, None

    new_state = game_state.copy()
    last = new_state.move_log.pop()

    if new_state.board.get(last.idx) is Cell.of(last.player):
        new_state.board.clear(last.idx)
    new_state.queue_for(last.player).remove_last(last.idx)

    # A mark evicted by the undone move stays gone
    new_state.current = last.player
    new_state.win = None
    new_state.version += 1
    logger.debug(f"Undid {last.player.value} at {last.idx}")
    return new_state, last


def place(game_state: GameState, idx: Any) -> GameState:
    """Place the current player's mark at idx.

    Occupied cells, out-of-range indices and finished games leave the state
    untouched and the same object is returned.
    """
    return _place(game_state, idx)[0]


def undo(game_state: GameState) -> GameState:
    """Undo the most recent placement. No-op when the log is empty or the game is won."""
    return _undo(game_state)[0]


def reset(max_marks: int = DEFAULT_CAPACITY) -> GameState:
    """Return a fresh initial state."""
    return GameState.initial(max_marks)


def derive_about_to_vanish(game_state: GameState) -> Optional[int]:
    """Index the current player loses on their next placement, if any."""
    queue = game_state.queue_for(game_state.current)
    if len(queue) >= game_state.max_marks:
        return queue.oldest()
    return None


class GameEngine:
    """Owns a single live game and reports each action as an ActionResult.

    Not thread-safe: one caller at a time, or one lock per engine.
    """

    def __init__(self, game_state: Optional[GameState] = None, max_marks: int = DEFAULT_CAPACITY):
        self.game_state = game_state if game_state is not None else GameState.initial(max_marks)

    @property
    def validator(self) -> MoveValidator:
        return MoveValidator(self.game_state)

    def place(self, idx: Any) -> ActionResult:
        """Place the current player's mark at idx."""
        ok, reason = self.validator.validate_place(idx)
        if not ok:
            return ActionResult.failure_result("place", reason)

        player = self.game_state.current
        self.game_state, evicted = _place(self.game_state, idx)
        win = self.game_state.win

        if win is not None:
            return ActionResult.success_result(
                "place", ActionResultType.GAME_WON,
                player=player, idx=idx, evicted=evicted, win=win
            )
        if evicted is not None:
            return ActionResult.success_result(
                "place", ActionResultType.MARK_EVICTED,
                player=player, idx=idx, evicted=evicted
            )
        return ActionResult.success_result(
            "place", ActionResultType.MARK_PLACED, player=player, idx=idx
        )

    def undo(self) -> ActionResult:
        """Undo the most recent placement."""
        ok, reason = self.validator.validate_undo()
        if not ok:
            return ActionResult.failure_result("undo", reason)

        self.game_state, move = _undo(self.game_state)
        return ActionResult.success_result("undo", ActionResultType.MOVE_UNDONE, move=move)

    def reset(self) -> ActionResult:
        """Start a fresh game with the same mark limit."""
        self.game_state = reset(self.game_state.max_marks)
        logger.debug("Game reset")
        return ActionResult.success_result("reset", ActionResultType.GAME_RESET)

    def apply_move(self, move: GameMove) -> ActionResult:
        """Dispatch a move object to the matching action."""
        if isinstance(move, PlaceMove):
            return self.place(move.idx)
        elif isinstance(move, UndoMove):
            return self.undo()
        elif isinstance(move, ResetMove):
            return self.reset()
        raise TypeError(f"Unknown move type: {type(move).__name__}")

    def about_to_vanish(self) -> Optional[int]:
        return derive_about_to_vanish(self.game_state)

    def legal_moves(self) -> List[int]:
        return self.validator.get_legal_cells()

    def get_view(self) -> Dict[str, Any]:
        """Presentation view of the current state."""
        from .state_serializer import GameStateSerializer
        return GameStateSerializer().serialize(self.game_state)
