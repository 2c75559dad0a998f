# file: src/module4_placement/finder.py

"""
Finder and clock patterns.

Every data region is framed by a solid L (left column, bottom row) and an
alternating clock track (top row, right column).
"""

import numpy as np

from module2_symbol_size import SizeClass


def draw_finder_patterns(grid: np.ndarray, size_class: SizeClass) -> None:
    """
    Draw the finder patterns of every data region into `grid` in place.

    Args:
        grid: Boolean array of shape (matrix_height, matrix_width)
        size_class: Selected symbol size
    """
    width = size_class.matrix_width
    height = size_class.matrix_height
    region_w = size_class.region_width
    region_h = size_class.region_height

    # Horizontal: clock track on top, solid line at bottom of each region row
    for top in range(0, height, region_h + 2):
        grid[top + region_h + 1, :] = True
        grid[top, 0:width:2] = True

    # Vertical: solid line on the left, clock track on the right of each region column
    rows = np.arange(size_class.data_height)
    shifted = rows + (rows // region_h) * 2
    odd = rows[rows % 2 == 1]
    for left in range(0, width, region_w + 2):
        grid[shifted + 1, left] = True
        grid[odd + (odd // region_h) * 2, left + region_w + 1] = True
