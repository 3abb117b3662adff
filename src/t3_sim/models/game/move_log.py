"""Chronological log of live placements, used for undo."""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional

from .player import Player


@dataclass(frozen=True)
class Move:
    """One placement event."""
    player: Player
    idx: int

    def to_dict(self) -> Dict[str, object]:
        return {'player': self.player.value, 'idx': self.idx}


class MoveLog:
    """Append-only history with tail-first removal."""

    def __init__(self, moves: Iterable[Move] = ()):
        self._moves: List[Move] = list(moves)

    def append(self, move: Move) -> None:
        self._moves.append(move)

    def pop(self) -> Move:
        """Remove and return the most recent move.

        Raises:
            IndexError: If the log is empty.
        """
        if not self._moves:
            raise IndexError("pop from empty MoveLog")
        return self._moves.pop()

    def last(self) -> Optional[Move]:
        return self._moves[-1] if self._moves else None

    def remove_last_match(self, move: Move) -> bool:
        """Delete the most recent entry equal to move, scanning from the tail.

        Returns:
            True if an entry was removed.
        """
        for i in range(len(self._moves) - 1, -1, -1):
            if self._moves[i] == move:
                del self._moves[i]
                return True
        return False

    def to_list(self) -> List[Move]:
        return list(self._moves)

    def copy(self) -> "MoveLog":
        return MoveLog(self._moves)

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MoveLog):
            return NotImplemented
        return self._moves == other._moves

    def __repr__(self) -> str:
        return f"MoveLog({self._moves!r})"
