"""Scripted game example showing the three-mark window, undo and a win.

This example shows:
- Marks vanishing once a player places a fourth
- The about-to-vanish hint for the player to move
- Undo not bringing back a vanished mark
- The presentation view after the game is won
"""

import sys
import os
import json
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from t3_sim.engine.game_engine import GameEngine
from t3_sim.engine.game_moves import PlaceMove, UndoMove


SCRIPT = [
    PlaceMove(0), PlaceMove(4), PlaceMove(1), PlaceMove(8),
    PlaceMove(3), PlaceMove(7),
    PlaceMove(5),   # X's mark at 0 vanishes
    UndoMove(),     # 5 is taken back, 0 stays empty
    PlaceMove(0),   # X again holds 1, 3, 0
    PlaceMove(2),   # O's mark at 4 vanishes
    PlaceMove(4),   # X's mark at 1 vanishes
    PlaceMove(6),   # O's mark at 8 vanishes
    PlaceMove(8),   # X's mark at 3 vanishes and X completes the diagonal
]


def format_board(view):
    """Render the board as three text rows."""
    cells = [value or str(i) for i, value in enumerate(view['board'])]
    rows = [" | ".join(cells[r * 3:r * 3 + 3]) for r in range(3)]
    return "\n".join(rows)


def main():
    engine = GameEngine()

    for move in SCRIPT:
        hint = engine.about_to_vanish()
        result = engine.apply_move(move)
        view = engine.get_view()

        print(f"{move} -> {result.result_type.value}"
              + (f" (hint was {hint})" if hint is not None else ""))
        print(format_board(view))
        print(view['status'])
        print()

    print(json.dumps(engine.get_view(), indent=2))


if __name__ == "__main__":
    main()
