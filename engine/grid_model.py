"""Grid state for the sliding puzzle."""

from typing import List, Tuple, Union, Optional


class InvalidIndex(IndexError):
    """Raised when a swap refers to a cell outside the grid."""


class _Runner:
    """Sentinel tile for the empty cell."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "Runner"

    def __reduce__(self):
        return (_Runner, ())


RUNNER = _Runner()

Tile = Union[int, _Runner]


class GridModel:
    """
    N x N grid of image tiles with a single runner cell.

    Attributes:
        size: Number of cells per row/column
        total_cells: size * size
        runner_index: Current position of the runner
    """

    def __init__(self, size: int, cells: List[Tile]):
        if size < 2:
            raise ValueError(f"Grid size must be at least 2, got {size}")
        if len(cells) != size * size:
            raise ValueError(f"Expected {size * size} cells, got {len(cells)}")

        runners = [i for i, tile in enumerate(cells) if tile is RUNNER]
        if len(runners) != 1:
            raise ValueError(f"Grid must hold exactly one runner, found {len(runners)}")
        if sorted(t for t in cells if t is not RUNNER) != list(range(size * size - 1)):
            raise ValueError("Cells must be a permutation of the tile identities")

        self._size = size
        self._cells = list(cells)
        self._runner_index = runners[0]

    @classmethod
    def create(cls, size: int, total_cells: Optional[int] = None) -> 'GridModel':
        """
        Build a solved grid.
        
        Args:
            size: Grid dimension
            total_cells: Number of cells, must equal size * size when given
        
        Returns:
            GridModel with tiles 0..total_cells-2 in place and the runner last
        """
        if total_cells is None:
            total_cells = size * size
        if total_cells != size * size:
            raise ValueError(f"total_cells must be {size * size} for a {size}x{size} grid, got {total_cells}")

        cells: List[Tile] = list(range(total_cells - 1))
        cells.append(RUNNER)
        return cls(size, cells)

    @property
    def size(self) -> int:
        return self._size

    @property
    def total_cells(self) -> int:
        return self._size * self._size

    @property
    def runner_index(self) -> int:
        return self._runner_index

    @property
    def cells(self) -> Tuple[Tile, ...]:
        return tuple(self._cells)

    def tile_at(self, index: int) -> Tile:
        self._check_index(index)
        return self._cells[index]

    def position_of(self, index: int) -> Tuple[int, int]:
        """(row, col) of a cell index."""
        self._check_index(index)
        return index // self._size, index % self._size

    def origin(self, tile: Tile) -> Tuple[int, int]:
        """(row, col) the tile occupies in the original image."""
        original = self.total_cells - 1 if tile is RUNNER else tile
        return original // self._size, original % self._size

    def snapshot(self) -> Tuple[int, Tuple[Tile, ...], int]:
        return self._size, self.cells, self._runner_index

    def swap(self, a: int, b: int) -> None:
        """
        Exchange the tiles at positions a and b.
        
        Raises:
            InvalidIndex: If either position is outside the grid
        """
        self._check_index(a)
        self._check_index(b)

        cells = self._cells
        cells[a], cells[b] = cells[b], cells[a]

        if cells[a] is RUNNER:
            self._runner_index = a
        elif cells[b] is RUNNER:
            self._runner_index = b

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.total_cells:
            raise InvalidIndex(f"Cell index {index} outside [0, {self.total_cells})")

    def __eq__(self, other):
        if not isinstance(other, GridModel):
            return NotImplemented
        return self._size == other._size and self._cells == other._cells

    def __repr__(self):
        return f"GridModel(size={self._size}, cells={self._cells!r})"
