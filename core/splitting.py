"""Image splitting into puzzle tiles."""

import numpy as np


def tile_edges(length, grid_size):
    """Cut positions along one axis; the last tile absorbs any remainder."""
    return np.linspace(0, length, grid_size + 1).astype(int)


def split_image(image_data, grid_size):
    """
    Split image into grid_size x grid_size tiles covering the whole image.
    
    Args:
        image_data: Input image as numpy array
        grid_size: Number of divisions per dimension
    
    Returns:
        List of tiles in row-major order, so tile i is the sub-region at
        row i // grid_size, column i % grid_size. When the side does not
        divide evenly, tiles differ by at most one pixel.
    """
    if image_data is None:
        return []
    if grid_size < 1:
        raise ValueError(f"Grid size must be positive, got {grid_size}")

    height, width = image_data.shape[:2]
    ys = tile_edges(height, grid_size)
    xs = tile_edges(width, grid_size)

    return [image_data[ys[r]:ys[r + 1], xs[c]:xs[c + 1]].copy()
            for r in range(grid_size) for c in range(grid_size)]
