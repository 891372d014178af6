"""Display utilities for puzzle boards."""

import cv2
import numpy as np
import matplotlib.pyplot as plt
from typing import Optional, List
from pathlib import Path


def _to_rgb(image: np.ndarray) -> np.ndarray:
    if len(image.shape) == 3 and image.shape[2] == 3:
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
    return image


def _comparison_figure(original: np.ndarray, board: np.ndarray,
                       title_original: str, title_board: str,
                       figsize: tuple):
    fig, axes = plt.subplots(1, 2, figsize=figsize)
    
    axes[0].imshow(_to_rgb(original))
    axes[0].set_title(title_original)
    axes[0].axis('off')
    
    axes[1].imshow(_to_rgb(board))
    axes[1].set_title(title_board)
    axes[1].axis('off')
    
    plt.tight_layout()
    return fig


def display_comparison(original: np.ndarray, board: np.ndarray,
                       solved: Optional[bool] = None,
                       title_original: str = "Original",
                       title_board: str = "Board",
                       figsize: tuple = (12, 6)):
    """
    Display the original image and the current board side by side.
    
    Args:
        original: Prepared (square) original image
        board: Rendered board
        solved: Optional solved flag appended to the board title
        title_original: Title for original image
        title_board: Title for the board
        figsize: Figure size
    """
    if solved is not None:
        title_board = f"{title_board} ({'Solved' if solved else 'Scrambled'})"
    _comparison_figure(original, board, title_original, title_board, figsize)
    plt.show()


def save_comparison(original: np.ndarray, board: np.ndarray,
                    output_path: str, solved: Optional[bool] = None,
                    dpi: int = 150):
    """
    Save comparison image to file.
    
    Args:
        original: Prepared (square) original image
        board: Rendered board
        output_path: Path to save the comparison
        solved: Optional solved flag appended to the board title
        dpi: Output DPI
    """
    title = "Board"
    if solved is not None:
        title = f"Board ({'Solved' if solved else 'Scrambled'})"
    fig = _comparison_figure(original, board, "Original", title, (12, 6))
    
    output_dir = Path(output_path).parent
    if output_dir and str(output_dir) != '.':
        output_dir.mkdir(parents=True, exist_ok=True)
    
    fig.savefig(output_path, dpi=dpi, bbox_inches='tight')
    plt.close(fig)


def display_tiles(tiles: List[np.ndarray], grid_size: int,
                  figsize: Optional[tuple] = None):
    """
    Display tiles in a grid with their original index.
    
    Args:
        tiles: Row-major list of tiles
        grid_size: Grid dimension
        figsize: Figure size
    """
    if figsize is None:
        figsize = (grid_size * 2, grid_size * 2)
    
    fig, axes = plt.subplots(grid_size, grid_size, figsize=figsize)
    axes = np.array(axes).reshape(grid_size, grid_size)
    
    for idx, tile in enumerate(tiles[:grid_size * grid_size]):
        ax = axes[idx // grid_size, idx % grid_size]
        tile = _to_rgb(tile)
        ax.imshow(tile, cmap='gray' if len(tile.shape) == 2 else None)
        ax.set_title(f"Tile {idx}", fontsize=8)
        ax.axis('off')
    
    plt.tight_layout()
    plt.show()
