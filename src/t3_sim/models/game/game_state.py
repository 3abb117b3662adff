"""Game state model for T3."""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .board import Board, in_range
from .move_log import MoveLog
from .move_queue import DEFAULT_CAPACITY, MoveQueue
from .player import Cell, Player
from .components import GameStateCheckerComponent


class GameResult(Enum):
    """Macro-states of a game."""
    PLAYING = "playing"  # place and undo accepted
    WON = "won"          # only reset accepted


@dataclass(frozen=True)
class WinResult:
    """A completed line and the player who owns it."""
    player: Player
    cells: Tuple[int, ...]


@dataclass
class GameState:
    """Tracks the complete state of a T3 game."""
    # Most marks a player may hold at once
    max_marks: int = DEFAULT_CAPACITY

    # Board and per-player live marks
    board: Board = field(default_factory=Board)
    x_queue: Optional[MoveQueue] = None
    o_queue: Optional[MoveQueue] = None

    # Undo history
    move_log: MoveLog = field(default_factory=MoveLog)

    # Turn and result
    current: Player = Player.X
    win: Optional[WinResult] = None

    # Count of accepted transitions since the last reset
    version: int = 0

    _game_state_checker: GameStateCheckerComponent = field(
        default_factory=GameStateCheckerComponent, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Validate game state after creation."""
        if self.max_marks < 1:
            raise ValueError("max_marks must be at least 1")
        if self.x_queue is None:
            self.x_queue = MoveQueue(self.max_marks)
        if self.o_queue is None:
            self.o_queue = MoveQueue(self.max_marks)
        for queue in (self.x_queue, self.o_queue):
            if queue.capacity != self.max_marks:
                raise ValueError(
                    f"Queue capacity {queue.capacity} does not match max_marks {self.max_marks}"
                )

    @classmethod
    def initial(cls, max_marks: int = DEFAULT_CAPACITY) -> "GameState":
        """Create a fresh game: empty board, X to move."""
        return cls(max_marks=max_marks)

    def queue_for(self, player: Player) -> MoveQueue:
        """Get the live-mark queue of a player."""
        return self.x_queue if player is Player.X else self.o_queue

    def history_for(self, player: Player) -> List[int]:
        """Cell indices a player currently holds, oldest first."""
        return self.queue_for(player).to_list()

    @property
    def game_result(self) -> GameResult:
        return GameResult.WON if self.win is not None else GameResult.PLAYING

    @property
    def winner(self) -> Optional[Player]:
        return self.win.player if self.win is not None else None

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self._game_state_checker.is_game_over(self)

    def check_game_state(self) -> None:
        """Check and update the win result from the board."""
        self._game_state_checker.check_game_state(self)

    def is_winning_cell(self, idx: int) -> bool:
        """Check if a cell belongs to the winning line."""
        return self.win is not None and idx in self.win.cells

    def copy(self) -> "GameState":
        """Independent copy; the win result is immutable and shared."""
        return GameState(
            max_marks=self.max_marks,
            board=self.board.copy(),
            x_queue=self.x_queue.copy(),
            o_queue=self.o_queue.copy(),
            move_log=self.move_log.copy(),
            current=self.current,
            win=self.win,
            version=self.version,
        )

    def check_invariants(self) -> None:
        """Verify board, queues, log and result agree.

        Raises:
            ValueError: Describing the first inconsistency found.
        """
        for player in Player:
            queue = self.queue_for(player)
            if len(queue) > self.max_marks:
                raise ValueError(f"{player.value} holds {len(queue)} marks, limit is {self.max_marks}")
            queued = queue.to_list()
            if any(not in_range(idx) for idx in queued):
                raise ValueError(f"{player.value} queue has an invalid index: {queued}")
            if len(set(queued)) != len(queued):
                raise ValueError(f"{player.value} queue has duplicate indices: {queued}")
            if sorted(queued) != self.board.occupied_by(player):
                raise ValueError(
                    f"{player.value} queue {queued} does not match board cells "
                    f"{self.board.occupied_by(player)}"
                )

        live_moves = Counter(
            (move.player, move.idx) for move in self.move_log
            if in_range(move.idx) and self.board.get(move.idx) is Cell.of(move.player)
        )
        queued_moves = Counter(
            (player, idx) for player in Player for idx in self.queue_for(player)
        )
        if live_moves != queued_moves:
            raise ValueError("Move log does not match the live marks on the board")

        board_win = self._game_state_checker.find_winner(self.board)
        if self.win is not None:
            if any(self.board.owner(idx) is not self.win.player for idx in self.win.cells):
                raise ValueError(f"Win cells {self.win.cells} are not all held by {self.win.player.value}")
            if self.win != board_win:
                raise ValueError(f"Win {self.win.cells} is not the first complete line on the board")
        elif board_win is not None:
            raise ValueError(f"Board has a complete line {board_win.cells} but no winner is recorded")
