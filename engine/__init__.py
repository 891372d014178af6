"""
Sliding puzzle grid engine.

The grid permutation is the whole game state:
1. GridModel - cell index -> tile identity, plus the runner position
2. MoveEngine - directional input -> one swap (or a no-op)
3. Shuffler - random moves through the same MoveEngine path

Usage:
    from engine import GridModel, MoveEngine, Shuffler

    grid = GridModel.create(3)
    engine = MoveEngine(grid)
    Shuffler(engine).shuffle()
    result = engine.apply_move("Left")
"""
from .grid_model import GridModel, InvalidIndex, RUNNER
from .move_engine import Direction, MoveEngine, MoveResult, parse_direction
from .shuffler import Shuffler, shuffle_grid, SHUFFLE_MOVES
