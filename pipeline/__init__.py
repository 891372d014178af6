"""
Pipeline orchestration modules.

1. load_puzzle_image() - decode, crop and resize (cached)
2. new_puzzle() - split into tiles and build the grid engine
3. render_board() - compose the current board from tiles
"""
from .config import PuzzleConfig, DEFAULT_CONFIG
from .puzzle_pipeline import (
    PuzzleSession,
    load_puzzle_image,
    new_puzzle,
    load_puzzle,
    render_board,
    save_board,
    is_solved
)
