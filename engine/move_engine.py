"""
Directional moves for the sliding puzzle.

The runner moves one cell per input. Edge detection uses row/column
arithmetic on the runner index; a move off the grid clamps to the
runner's own cell and nothing is swapped (no wrap-around).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .grid_model import GridModel


class Direction(Enum):
    LEFT = "Left"
    UP = "Up"
    RIGHT = "Right"
    DOWN = "Down"

    @property
    def opposite(self) -> 'Direction':
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

# Browser key names, Tkinter keysyms and enum names all map here
_ALIASES = {}
for _d in Direction:
    _ALIASES[_d.value] = _d
    _ALIASES[_d.name] = _d
    _ALIASES["Arrow" + _d.value] = _d


def parse_direction(value) -> Optional[Direction]:
    """Map an input (Direction, 'Left', 'LEFT', 'ArrowLeft') to a Direction, or None."""
    if isinstance(value, Direction):
        return value
    if isinstance(value, str):
        return _ALIASES.get(value)
    return None


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a single directional input.
    
    Attributes:
        direction: Parsed direction, None for unrecognized input
        recognized: Whether the input was one of the four directions
        swapped: Whether a swap took place
        cells: (target, previous runner index) that were exchanged, or None
    """
    direction: Optional[Direction]
    recognized: bool
    swapped: bool
    cells: Optional[Tuple[int, int]] = None


MoveListener = Callable[[MoveResult], None]


class MoveEngine:
    """Applies directional input to a GridModel."""

    def __init__(self, grid: GridModel):
        self.grid = grid
        self._listeners: List[MoveListener] = []

    def add_listener(self, listener: MoveListener) -> None:
        """Register a callback invoked with the MoveResult of every swap."""
        self._listeners.append(listener)

    def remove_listener(self, listener: MoveListener) -> None:
        self._listeners.remove(listener)

    def target_index(self, direction: Direction) -> int:
        """
        Cell the runner would move to.
        
        Returns the runner index itself when the runner sits on the
        edge the direction points at.
        """
        runner = self.grid.runner_index
        size = self.grid.size
        total = self.grid.total_cells

        if direction is Direction.LEFT:
            return runner if runner % size == 0 else runner - 1
        if direction is Direction.UP:
            return runner if runner < size else runner - size
        if direction is Direction.RIGHT:
            return runner if runner % size == size - 1 else runner + 1
        if direction is Direction.DOWN:
            return runner if runner >= total - size else runner + size
        raise ValueError(f"Unknown direction: {direction!r}")

    def can_move(self, direction) -> bool:
        parsed = parse_direction(direction)
        if parsed is None:
            return False
        return self.target_index(parsed) != self.grid.runner_index

    def apply_move(self, direction) -> MoveResult:
        """
        Move the runner one cell.
        
        Args:
            direction: Direction member or key name; anything else is ignored
        
        Returns:
            MoveResult describing whether (and which) cells were swapped
        """
        parsed = parse_direction(direction)
        if parsed is None:
            return MoveResult(direction=None, recognized=False, swapped=False)

        runner = self.grid.runner_index
        target = self.target_index(parsed)
        if target == runner:
            return MoveResult(direction=parsed, recognized=True, swapped=False)

        self.grid.swap(target, runner)
        result = MoveResult(direction=parsed, recognized=True, swapped=True,
                            cells=(target, runner))

        for listener in list(self._listeners):
            listener(result)

        return result

    def apply_moves(self, directions) -> List[MoveResult]:
        return [self.apply_move(d) for d in directions]
