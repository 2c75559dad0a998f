# file: src/module4_placement/placement.py

"""
ECC200 module placement.

Codewords are laid out as 8-module "utah" shapes along diagonals running
up and to the right, then down and to the left, across the nominal data
area (all data regions joined, finder patterns removed). Near the borders
four corner shapes replace the nominal one. Nominal coordinates are then
mapped into the real grid by skipping the two finder modules at each region
boundary.

Offset tables list (dx, dy) pairs relative to the cursor, one per bit,
least significant bit first.
"""

import logging
from typing import Optional, Sequence, Tuple

import numpy as np

from module2_symbol_size import SizeClass
from .finder import draw_finder_patterns

logger = logging.getLogger(__name__)

Layout = Tuple[Tuple[int, int], ...]

NOMINAL_LAYOUT: Layout = (
    (0, 0), (-1, 0), (-2, 0), (0, -1), (-1, -1), (-2, -1), (-1, -2), (-2, -2),
)


def corner_a(w: int, h: int) -> Layout:
    return (
        (w, 6 - h), (w, 5 - h), (w, 4 - h), (w, 3 - h),
        (w - 1, 3 - h), (3, 2), (2, 2), (1, 2),
    )


def corner_b(w: int, h: int) -> Layout:
    return (
        (w - 1, 3 - h), (w - 1, 2 - h), (w - 2, 2 - h), (w - 3, 2 - h),
        (w - 4, 2 - h), (0, 1), (0, 0), (0, -1),
    )


def corner_c(w: int, h: int) -> Layout:
    return (
        (w - 1, 5 - h), (w - 1, 4 - h), (w - 1, 3 - h), (w - 1, 2 - h),
        (w - 2, 2 - h), (0, 1), (0, 0), (0, -1),
    )


def corner_d(w: int, h: int) -> Layout:
    return (
        (w - 2, -h), (w - 3, -h), (w - 4, -h), (w - 2, -1 - h),
        (w - 3, -1 - h), (w - 4, -1 - h), (w - 2, -2), (-1, -2),
    )


class _Cursor:
    """Diagonal walk over the nominal data area."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.row = 4
        self.col = 0
        self.step = 2

    def outside(self) -> bool:
        return self.row < 0 or self.col >= self.width or self.row >= self.height or self.col < 0

    def advance(self) -> None:
        self.row -= self.step
        self.col += self.step

    def turn(self) -> None:
        """Reverse direction and move onto the next diagonal inside the area."""
        self.step = -self.step
        self.row += 2 + self.step // 2
        self.col += 2 - self.step // 2
        while self.outside():
            self.advance()

    def layout(self) -> Optional[Layout]:
        """
        Shape for the current position, or None if the position is skipped.

        May move the cursor onto the next diagonal.
        """
        w, h = self.width, self.height
        r, c = self.row, self.col
        corner_d_shape = w % 8 == 0 and h % 8 == 6

        if r == h - 3 and c == -1:
            return corner_a(w, h)
        if r == h + 1 and c == 1 and corner_d_shape:
            return corner_d(w, h)
        if r == 0 and c == w - 2 and w % 4:
            return None
        if self.outside():
            self.turn()
            r, c = self.row, self.col
        if r == h - 2 and c == 0 and w % 4:
            return corner_b(w, h)
        if r == h - 2 and c == 0 and w % 8 == 4:
            return corner_c(w, h)
        if r == 1 and c == w - 1 and corner_d_shape:
            return None
        return NOMINAL_LAYOUT


def _to_grid(x: int, y: int, size_class: SizeClass) -> Tuple[int, int]:
    """Nominal (x, y) to grid (column, row), skipping finder patterns."""
    return (
        x + 2 * (x // size_class.region_width) + 1,
        y + 2 * (y // size_class.region_height) + 1,
    )


def place_codewords(grid: np.ndarray, codewords: Sequence[int], size_class: SizeClass) -> None:
    """
    Place every bit of `codewords` into `grid` in place.

    Args:
        grid: Boolean array of shape (matrix_height, matrix_width)
        codewords: Data + interleaved correction codewords, exactly
            size_class.total_codewords of them
        size_class: Selected symbol size

    Raises:
        ValueError: If the codeword count does not match the size class
    """
    if len(codewords) != size_class.total_codewords:
        raise ValueError(
            f"Expected {size_class.total_codewords} codewords, got {len(codewords)}"
        )

    w = size_class.data_width
    h = size_class.data_height
    cursor = _Cursor(w, h)

    index = 0
    while index < len(codewords):
        layout = cursor.layout()
        if layout is None:
            cursor.advance()
            continue

        value = codewords[index]
        index += 1
        for bit, (dx, dy) in enumerate(layout):
            if not (value >> bit) & 1:
                continue
            x = cursor.col + dx
            y = cursor.row + dy
            # Wrap around the nominal area
            if x < 0:
                x += w
                y += 4 - ((w + 4) & 7)
            if y < 0:
                y += h
                x += 4 - ((h + 4) & 7)
            column, row = _to_grid(x, y, size_class)
            grid[row, column] = True
        cursor.advance()

    # Unfilled lower right corner of sizes whose width is not a multiple of 4
    i = w
    while i & 3:
        grid[i, i] = True
        i -= 1


def build_matrix(codewords: Sequence[int], size_class: SizeClass) -> np.ndarray:
    """
    Build the complete module grid for a symbol.

    Returns:
        Fresh boolean array of shape (matrix_height, matrix_width)
    """
    grid = np.zeros((size_class.matrix_height, size_class.matrix_width), dtype=bool)
    draw_finder_patterns(grid, size_class)
    place_codewords(grid, codewords, size_class)
    logger.debug(
        "Placed %d codewords in %dx%d grid",
        len(codewords), size_class.matrix_height, size_class.matrix_width,
    )
    return grid
