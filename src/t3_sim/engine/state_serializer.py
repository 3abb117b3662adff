"""State serialization: the presentation view of a game."""

import json
from typing import Any, Dict, List, Optional

from ..models.game.board import Board, CELL_COUNT
from ..models.game.game_state import GameState, WinResult
from ..models.game.move_log import Move, MoveLog
from ..models.game.move_queue import MoveQueue
from ..models.game.player import Cell, Player
from ..utils.logging_config import get_game_logger

logger = get_game_logger(__name__)


class SerializationError(Exception):
    """Raised when serialization fails."""
    pass


class GameStateSerializer:
    """Converts game states to and from JSON-compatible views."""

    def serialize(self, game_state: GameState) -> Dict[str, Any]:
        """Serialize a game state to the view a presentation layer renders."""
        from .game_engine import derive_about_to_vanish

        return {
            'type': 'GameState',
            'board': game_state.board.to_list(),
            'current': game_state.current.value,
            'winner': self._serialize_win(game_state.win),
            'history': {
                player.value: game_state.history_for(player) for player in Player
            },
            'moves': [move.to_dict() for move in game_state.move_log],
            'about_to_vanish': derive_about_to_vanish(game_state),
            'status': self._status_line(game_state),
            'version': game_state.version,
            'max_marks': game_state.max_marks,
        }

    def deserialize(self, data: Dict[str, Any]) -> GameState:
        """Rebuild a game state from a serialized view.

        Raises:
            SerializationError: If the data is malformed or inconsistent.
        """
        if not isinstance(data, dict):
            raise SerializationError(f"Expected a dict, got {type(data).__name__}")

        try:
            max_marks = int(data.get('max_marks', 3))
            board = self._deserialize_board(data['board'])
            current = self._player(data['current'])
            history = data['history']
            queues = {
                player: self._deserialize_queue(history.get(player.value, []), max_marks)
                for player in Player
            }
            move_log = MoveLog(
                Move(self._player(entry['player']), self._index(entry['idx']))
                for entry in data.get('moves', [])
            )
            win = self._deserialize_win(data.get('winner'))
            game_state = GameState(
                max_marks=max_marks,
                board=board,
                x_queue=queues[Player.X],
                o_queue=queues[Player.O],
                move_log=move_log,
                current=current,
                win=win,
                version=int(data.get('version', 0)),
            )
            game_state.check_invariants()
        except SerializationError:
            raise
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.debug(f"Rejected serialized state: {e}")
            raise SerializationError(f"Invalid game state data: {e}") from e

        return game_state

    def to_json(self, game_state: GameState, indent: Optional[int] = None) -> str:
        """Serialize a game state's view to a JSON string."""
        return json.dumps(self.serialize(game_state), indent=indent)

    def from_json(self, text: str) -> GameState:
        """Rebuild a game state from a JSON view.

        Raises:
            SerializationError: If the text is not JSON or the view is invalid.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SerializationError(f"Invalid JSON: {e}") from e
        return self.deserialize(data)

    def _serialize_win(self, win: WinResult) -> Any:
        if win is None:
            return None
        return {'player': win.player.value, 'cells': list(win.cells)}

    def _status_line(self, game_state: GameState) -> str:
        if game_state.win is not None:
            return f"Winner: {game_state.win.player.value}"
        return f"Current: {game_state.current.value}"

    def _deserialize_board(self, values: List[str]) -> Board:
        if not isinstance(values, list) or len(values) != CELL_COUNT:
            raise SerializationError(f"Board must be a list of {CELL_COUNT} cells")
        try:
            return Board([Cell(value or "") for value in values])
        except ValueError as e:
            raise SerializationError(f"Unknown cell value in {values}") from e

    def _deserialize_queue(self, indices: List[int], max_marks: int) -> MoveQueue:
        if len(indices) > max_marks:
            raise SerializationError(f"History {indices} exceeds {max_marks} marks")
        return MoveQueue(max_marks, [self._index(idx) for idx in indices])

    def _deserialize_win(self, data: Any) -> Any:
        if data is None:
            return None
        cells = tuple(self._index(idx) for idx in data['cells'])
        if len(cells) != 3:
            raise SerializationError(f"Winning line must have 3 cells, got {list(cells)}")
        return WinResult(player=self._player(data['player']), cells=cells)

    def _player(self, value: Any) -> Player:
        try:
            return Player(value)
        except ValueError as e:
            raise SerializationError(f"Unknown player: {value!r}") from e

    def _index(self, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < CELL_COUNT:
            raise SerializationError(f"Invalid cell index: {value!r}")
        return value
