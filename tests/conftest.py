import os
import random
import sys

os.environ.setdefault("MPLBACKEND", "Agg")

import numpy as np
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from engine import GridModel, MoveEngine


@pytest.fixture
def grid_3x3():
    return GridModel.create(3)


@pytest.fixture
def engine_3x3(grid_3x3):
    return MoveEngine(grid_3x3)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def gradient_image():
    """Non-square BGR image with distinct content in every region."""
    h, w = 300, 400
    ys, xs = np.mgrid[0:h, 0:w]
    img = np.zeros((h, w, 3), dtype=np.uint8)
    img[..., 0] = (xs * 255 // w).astype(np.uint8)
    img[..., 1] = (ys * 255 // h).astype(np.uint8)
    img[..., 2] = 128
    return img
