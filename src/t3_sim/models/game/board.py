"""Board model for T3."""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .player import Cell, Player


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


def in_range(idx: Any) -> bool:
    """Check that idx is an integer cell index in [0, 8]."""
    # bool is an int subclass but never a valid index
    if isinstance(idx, bool) or not isinstance(idx, int):
        return False
    return 0 <= idx < CELL_COUNT


@dataclass
class Board:
    """3x3 grid stored row-major: index = row * 3 + col."""
    cells: List[Cell] = field(default_factory=lambda: [Cell.EMPTY] * CELL_COUNT)

    def __post_init__(self) -> None:
        """Validate board after creation."""
        if len(self.cells) != CELL_COUNT:
            raise ValueError(f"Board must have {CELL_COUNT} cells, got {len(self.cells)}")
        if not all(isinstance(cell, Cell) for cell in self.cells):
            raise ValueError("Board cells must be Cell values")

    def get(self, idx: int) -> Cell:
        """Get the contents of a cell."""
        return self.cells[idx]

    def owner(self, idx: int) -> Optional[Player]:
        """Get the player holding a cell, or None."""
        return self.cells[idx].owner

    def set(self, idx: int, player: Player) -> None:
        """Put a player's mark on a cell."""
        self.cells[idx] = Cell.of(player)

    def clear(self, idx: int) -> None:
        """Empty a cell."""
        self.cells[idx] = Cell.EMPTY

    def is_occupied(self, idx: int) -> bool:
        return not self.cells[idx].is_empty

    def empty_indices(self) -> List[int]:
        """Indices of all empty cells, ascending."""
        return [i for i, cell in enumerate(self.cells) if cell.is_empty]

    def occupied_by(self, player: Player) -> List[int]:
        """Indices of all cells holding the player's mark, ascending."""
        marker = Cell.of(player)
        return [i for i, cell in enumerate(self.cells) if cell is marker]

    @property
    def mark_count(self) -> int:
        """Number of occupied cells."""
        return CELL_COUNT - len(self.empty_indices())

    def rows(self) -> List[List[Cell]]:
        """The board as three rows of three cells."""
        return [self.cells[r * BOARD_SIZE:(r + 1) * BOARD_SIZE] for r in range(BOARD_SIZE)]

    def copy(self) -> "Board":
        return Board(list(self.cells))

    def to_list(self) -> List[str]:
        """Cell symbols, "" for empty."""
        return [cell.value for cell in self.cells]
