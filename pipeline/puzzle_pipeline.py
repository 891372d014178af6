"""
Puzzle Pipeline

Orchestrates one game:
1. Load image → square crop + resize (cached by file content)
2. Split into tiles, build a solved GridModel
3. Shuffle / move through the MoveEngine
4. Render the current board from the tiles
"""

import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import cv2
import numpy as np

from core.image_cache import ImageCache
from core.image_utils import load_image_bytes, resize_square
from core.splitting import split_image
from engine import GridModel, MoveEngine, MoveResult, RUNNER, Shuffler
from .config import PuzzleConfig, DEFAULT_CONFIG


def load_puzzle_image(image_path: str, cache: Optional[ImageCache] = None,
                      config: PuzzleConfig = DEFAULT_CONFIG,
                      verbose: bool = False) -> np.ndarray:
    """
    Load an image file and prepare it for play.
    
    Args:
        image_path: Path to the image
        cache: Optional cache keyed by file content
        config: Puzzle settings (image_size)
        verbose: Print progress info
    
    Returns:
        Square BGR image of config.image_size pixels
    
    Raises:
        ValueError: If the image cannot be decoded
    """
    data = Path(image_path).read_bytes()

    def prepare(raw: bytes) -> np.ndarray:
        try:
            img = load_image_bytes(raw)
        except ValueError as e:
            raise ValueError(f"Could not load image: {image_path}") from e
        if verbose:
            print(f"Loaded: {image_path}")
            print(f"Size: {img.shape[1]}x{img.shape[0]}")
        return resize_square(img, config.image_size)

    if cache is None:
        return prepare(data)

    if verbose and cache.key_for(data) in cache:
        print(f"Cache hit: {image_path}")
    return cache.get_or_create(data, prepare)


def is_solved(grid: GridModel) -> bool:
    """Check if every tile is back at its original index."""
    cells = grid.cells
    if cells[-1] is not RUNNER:
        return False
    return list(cells[:-1]) == list(range(grid.total_cells - 1))


def render_board(tiles: List[np.ndarray], grid: GridModel,
                 runner_color=DEFAULT_CONFIG.runner_color,
                 show_numbers: bool = False) -> np.ndarray:
    """
    Compose the current board image.
    
    Args:
        tiles: Row-major tiles of the original image
        grid: Current grid state
        runner_color: BGR fill for the runner cell
        show_numbers: Overlay original tile numbers (1-based)
    
    Returns:
        BGR board image
    """
    if len(tiles) != grid.total_cells:
        raise ValueError(f"Expected {grid.total_cells} tiles, got {len(tiles)}")

    size = grid.size
    # Cell edges follow the tile sizes of the solved layout
    ys = np.concatenate(([0], np.cumsum([tiles[r * size].shape[0] for r in range(size)])))
    xs = np.concatenate(([0], np.cumsum([tiles[c].shape[1] for c in range(size)])))
    output = np.zeros((ys[-1], xs[-1], 3), dtype=np.uint8)

    for index, tile in enumerate(grid.cells):
        r, c = grid.position_of(index)
        y1, y2 = ys[r], ys[r + 1]
        x1, x2 = xs[c], xs[c + 1]
        if tile is RUNNER:
            output[y1:y2, x1:x2] = runner_color
            continue
        patch = tiles[tile]
        if patch.shape[:2] != (y2 - y1, x2 - x1):
            patch = cv2.resize(patch, (int(x2 - x1), int(y2 - y1)), interpolation=cv2.INTER_AREA)
        output[y1:y2, x1:x2] = patch

    if show_numbers:
        font = cv2.FONT_HERSHEY_SIMPLEX
        font_scale = min(xs[1], ys[1]) / 80.0
        thickness = max(2, int(font_scale * 2))
        for index, tile in enumerate(grid.cells):
            if tile is RUNNER:
                continue
            r, c = grid.position_of(index)
            text = str(tile + 1)
            (text_w, text_h), _ = cv2.getTextSize(text, font, font_scale, thickness)
            text_x = int(xs[c] + xs[c + 1]) // 2 - text_w // 2
            text_y = int(ys[r] + ys[r + 1]) // 2 + text_h // 2
            cv2.putText(output, text, (text_x, text_y), font, font_scale, (0, 0, 0), thickness + 2)
            cv2.putText(output, text, (text_x, text_y), font, font_scale, (255, 255, 255), thickness)

    return output


@dataclass
class PuzzleSession:
    """
    One puzzle: a prepared image, its tiles and the grid engine.

    Replaced wholesale when a new image is loaded or the level changes.
    """
    image: np.ndarray
    tiles: List[np.ndarray]
    grid: GridModel
    engine: MoveEngine
    shuffler: Shuffler
    config: PuzzleConfig = field(default=DEFAULT_CONFIG)

    @property
    def size(self) -> int:
        return self.grid.size

    def move(self, direction) -> MoveResult:
        return self.engine.apply_move(direction)

    def shuffle(self):
        return self.shuffler.shuffle()

    def snapshot(self):
        return self.grid.snapshot()

    def is_solved(self) -> bool:
        return is_solved(self.grid)

    def render(self, show_numbers: bool = False) -> np.ndarray:
        return render_board(self.tiles, self.grid, self.config.runner_color, show_numbers)


def new_puzzle(image: np.ndarray, grid_size: Optional[int] = None,
               config: PuzzleConfig = DEFAULT_CONFIG,
               rng: Optional[random.Random] = None,
               verbose: bool = False) -> PuzzleSession:
    """
    Build a fresh, solved puzzle from a prepared image.
    
    Args:
        image: Square BGR image
        grid_size: Grid dimension (config.grid_size if not given)
        config: Puzzle settings
        rng: Random source for shuffling
        verbose: Print progress info
    """
    if grid_size is None:
        grid_size = config.grid_size

    grid = GridModel.create(grid_size)
    tiles = split_image(image, grid_size)
    engine = MoveEngine(grid)
    shuffler = Shuffler(engine, moves=config.shuffle_moves, rng=rng)

    if verbose:
        print(f"Grid: {grid_size}x{grid_size} ({grid.total_cells} cells)")

    return PuzzleSession(image=image, tiles=tiles, grid=grid, engine=engine,
                         shuffler=shuffler, config=config)


def load_puzzle(image_path: str, grid_size: Optional[int] = None,
                cache: Optional[ImageCache] = None,
                config: PuzzleConfig = DEFAULT_CONFIG,
                rng: Optional[random.Random] = None,
                verbose: bool = False) -> PuzzleSession:
    """Convenience: load_puzzle_image + new_puzzle."""
    image = load_puzzle_image(image_path, cache=cache, config=config, verbose=verbose)
    return new_puzzle(image, grid_size, config=config, rng=rng, verbose=verbose)


def save_board(board: np.ndarray, output_path: str, verbose: bool = False) -> None:
    output_dir = Path(output_path).parent
    if output_dir and str(output_dir) != '.':
        output_dir.mkdir(parents=True, exist_ok=True)
    if not cv2.imwrite(str(output_path), board):
        raise ValueError(f"Could not write image: {output_path}")
    if verbose:
        print(f"\nSaved: {output_path}")
