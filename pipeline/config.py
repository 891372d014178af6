"""Puzzle settings."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PuzzleConfig:
    """
    Settings shared by the GUI, the CLI and the pipeline.
    
    Attributes:
        image_size: Side length images are resized to (pixels)
        grid_size: Default level (grid dimension)
        shuffle_moves: Random moves issued per shuffle
        cache_limit: Prepared images kept in the image cache
        level_choices: Grid sizes offered by the level selector
        debounce_ms: Delay before a level change rebuilds the grid
        runner_color: BGR fill of the runner cell
    """
    image_size: int = 800
    grid_size: int = 3
    shuffle_moves: int = 1000
    cache_limit: int = 10
    level_choices: Tuple[int, ...] = (2, 3, 4, 5, 6, 7, 8)
    debounce_ms: int = 150
    runner_color: Tuple[int, int, int] = (62, 33, 22)

    def __post_init__(self):
        if self.grid_size < 2:
            raise ValueError(f"Grid size must be at least 2, got {self.grid_size}")
        if self.image_size < self.grid_size:
            raise ValueError(f"Image size {self.image_size} too small for a {self.grid_size}x{self.grid_size} grid")
        if self.shuffle_moves < 0:
            raise ValueError(f"Shuffle moves must be non-negative, got {self.shuffle_moves}")
        if self.cache_limit < 1:
            raise ValueError(f"Cache limit must be at least 1, got {self.cache_limit}")
        if any(level < 2 for level in self.level_choices):
            raise ValueError(f"Levels must be at least 2, got {self.level_choices}")


DEFAULT_CONFIG = PuzzleConfig()
