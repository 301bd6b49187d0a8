"""
Visualization utilities for rendering an OverlapGrid.

This module provides:
    • render_overlap_map(grid, threshold)
    • save_overlap_map(path, grid, threshold)

It is used by:
    - main.py (--save-map)
"""

import numpy as np

from config import COLOR_EMPTY, COLOR_SINGLE, COLOR_OVERLAP, OVERLAP_THRESHOLD
from models.overlap_grid import OverlapGrid
from utils.record_io import save_image


# ---------------------------------------------------------------------
#  Render the grid as a BGR image
# ---------------------------------------------------------------------

def render_overlap_map(grid: OverlapGrid, threshold: int = OVERLAP_THRESHOLD) -> np.ndarray:
    """
    Paints every cell by coverage:

        0 lines          → COLOR_EMPTY
        below threshold  → COLOR_SINGLE
        >= threshold     → COLOR_OVERLAP

    Returns:
        uint8 array of shape (size, size, 3); row = y, column = x
    """
    image = np.empty((grid.size, grid.size, 3), dtype=np.uint8)
    image[:] = COLOR_EMPTY
    image[grid.counts > 0] = COLOR_SINGLE
    image[grid.counts >= threshold] = COLOR_OVERLAP
    return image


# ---------------------------------------------------------------------
#  Save to disk
# ---------------------------------------------------------------------

def save_overlap_map(path: str, grid: OverlapGrid, threshold: int = OVERLAP_THRESHOLD):
    """
    Renders the grid and writes it to path (format from the extension).
    """
    save_image(path, render_overlap_map(grid, threshold))
