"""Action result system for structured game engine responses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Optional


class ActionResultType(Enum):
    """Types of action results."""
    # Placements
    MARK_PLACED = "mark_placed"
    MARK_EVICTED = "mark_evicted"  # placed, and the player's oldest mark vanished
    GAME_WON = "game_won"

    # History
    MOVE_UNDONE = "move_undone"
    GAME_RESET = "game_reset"

    # Errors
    ACTION_FAILED = "action_failed"


@dataclass
class ActionResult:
    """Structured result from executing a game action."""
    success: bool
    action_type: str
    result_type: ActionResultType
    data: Dict[str, Any] = field(default_factory=dict)
    error_message: Optional[str] = None

    @classmethod
    def success_result(cls, action_type: str, result_type: ActionResultType, **data) -> 'ActionResult':
        """Create a successful action result."""
        return cls(
            success=True,
            action_type=action_type,
            result_type=result_type,
            data=data
        )

    @classmethod
    def failure_result(cls, action_type: str, error_message: str) -> 'ActionResult':
        """Create a failed action result."""
        return cls(
            success=False,
            action_type=action_type,
            result_type=ActionResultType.ACTION_FAILED,
            error_message=error_message
        )
