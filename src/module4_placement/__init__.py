# file: src/module4_placement/__init__.py

"""
Module 4: Placement

Lays out finder patterns and codeword bits into the Data Matrix module grid.
"""

from .finder import draw_finder_patterns
from .placement import (
    build_matrix,
    place_codewords,
    NOMINAL_LAYOUT,
    corner_a,
    corner_b,
    corner_c,
    corner_d,
)

__all__ = [
    "build_matrix",
    "place_codewords",
    "draw_finder_patterns",
    "NOMINAL_LAYOUT",
    "corner_a",
    "corner_b",
    "corner_c",
    "corner_d",
]
