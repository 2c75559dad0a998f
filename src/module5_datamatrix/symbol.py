# file: src/module5_datamatrix/symbol.py

"""
Encoded Data Matrix symbol.
"""

from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

from module2_symbol_size import SizeClass


@dataclass(frozen=True)
class Symbol:
    """
    Immutable result of encoding a message.

    Attributes:
        scheme: Compaction scheme that produced the data codewords
        size_class: Selected symbol size
        data_codewords: Compacted message before padding
        codewords: Every codeword placed in the grid (data, pad, correction)

    Renderers only need `width`, `height` and `bit_at(x, y)`.
    """
    scheme: str
    size_class: SizeClass
    data_codewords: Tuple[int, ...]
    codewords: Tuple[int, ...]
    grid: np.ndarray = field(repr=False, compare=False)

    def __post_init__(self):
        grid = np.array(self.grid, dtype=bool, copy=True)
        grid.flags.writeable = False
        object.__setattr__(self, 'grid', grid)

    @property
    def width(self) -> int:
        return self.grid.shape[1]

    @property
    def height(self) -> int:
        return self.grid.shape[0]

    def bit_at(self, x: int, y: int) -> bool:
        """
        Module value at column `x`, row `y` (origin top left).

        Raises:
            IndexError: If (x, y) lies outside the symbol
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} symbol")
        return bool(self.grid[y, x])

    def to_array(self) -> np.ndarray:
        """Writable copy of the module grid, shape (height, width)."""
        return self.grid.copy()

    def to_int(self) -> int:
        """Grid as one integer, row-major, top left module most significant."""
        value = 0
        for bit in self.grid.ravel():
            value = (value << 1) | int(bit)
        return value

    def __eq__(self, other):
        if not isinstance(other, Symbol):
            return NotImplemented
        return (
            self.scheme == other.scheme
            and self.codewords == other.codewords
            and np.array_equal(self.grid, other.grid)
        )

    def __hash__(self):
        return hash((self.scheme, self.codewords))

    def __repr__(self) -> str:
        return f"<Symbol {self.width}x{self.height}@{self.scheme}>"
