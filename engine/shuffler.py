"""Random shuffling through the regular move path."""

import random
from typing import List, Optional

from .grid_model import GridModel
from .move_engine import Direction, MoveEngine


SHUFFLE_MOVES = 1000

# Left, Up, Right, Down; drawn by index
SHUFFLE_DIRECTIONS = (Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN)


class Shuffler:
    """
    Scrambles a grid with uniformly random directional inputs.

    Every input goes through MoveEngine.apply_move, so edge moves are
    no-ops and the result is always reachable from the solved grid.
    Listeners on the engine see each swap just as they would during play.
    """

    def __init__(self, engine: MoveEngine, moves: int = SHUFFLE_MOVES,
                 rng: Optional[random.Random] = None):
        if moves < 0:
            raise ValueError(f"Shuffle move count must be non-negative, got {moves}")
        self.engine = engine
        self.moves = moves
        self.rng = rng if rng is not None else random.Random()

    def shuffle(self) -> List[Direction]:
        """
        Issue the configured number of random moves.
        
        Returns:
            The directions issued, in order (including edge no-ops)
        """
        issued = []
        for _ in range(self.moves):
            direction = SHUFFLE_DIRECTIONS[self.rng.randrange(4)]
            self.engine.apply_move(direction)
            issued.append(direction)
        return issued


def shuffle_grid(grid: GridModel, moves: int = SHUFFLE_MOVES,
                 rng: Optional[random.Random] = None) -> List[Direction]:
    """Shuffle a grid in place with a throwaway engine."""
    return Shuffler(MoveEngine(grid), moves=moves, rng=rng).shuffle()
