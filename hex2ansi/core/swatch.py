"""Render the 216-colour cube as a PNG swatch.

Rows are red levels 0-5, columns run through green (major) and blue (minor),
so reading the image left-to-right, top-to-bottom follows the same order as
the terminal grid. Each cell is drawn at the RGB value xterm uses for it.
"""

import os

import numpy as np
from PIL import Image

from hex2ansi.core.palette import CUBE_LEVELS


def cube_array(block: int = 16) -> np.ndarray:
    """Return a (6*block, 36*block, 3) uint8 image of the colour cube."""
    if block < 1:
        raise ValueError(f'block size must be >= 1: {block}')
    levels = np.array(CUBE_LEVELS, dtype=np.uint8)
    r, g, b = np.indices((6, 6, 6))
    cells = np.stack([levels[r], levels[g], levels[b]], axis=-1)  # (6, 6, 6, 3)
    grid = cells.reshape(6, 36, 3)
    return np.repeat(np.repeat(grid, block, axis=0), block, axis=1)


def save_cube_png(path: str, block: int = 16) -> str:
    """Write the cube swatch to path. Returns the path written."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    Image.fromarray(cube_array(block)).save(path, format='PNG')
    return path
