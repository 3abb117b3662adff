"""Player and cell markers for T3."""

from enum import Enum
from typing import Optional


class Player(Enum):
    """The two participants. X always moves first."""
    X = "X"
    O = "O"

    @property
    def other(self) -> "Player":
        """Get the opposing player."""
        return Player.O if self is Player.X else Player.X


class Cell(Enum):
    """Contents of a single board position."""
    EMPTY = ""
    X = "X"
    O = "O"

    @classmethod
    def of(cls, player: Player) -> "Cell":
        """Get the cell marker for a player."""
        return cls(player.value)

    @property
    def is_empty(self) -> bool:
        return self is Cell.EMPTY

    @property
    def owner(self) -> Optional[Player]:
        """Player holding this cell, or None when empty."""
        if self is Cell.EMPTY:
            return None
        return Player(self.value)
