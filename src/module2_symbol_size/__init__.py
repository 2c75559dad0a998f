# file: src/module2_symbol_size/__init__.py

"""
Module 2: Symbol Size

Chooses the Data Matrix size for a codeword count and pads the data
codewords to the chosen capacity.
"""

from .size_table import (
    SizeClass,
    SQUARE_SIZES,
    RECTANGULAR_SIZES,
    select_size_class,
)
from .padding import pad_codewords, pad_codeword, END_OF_MESSAGE

__all__ = [
    "SizeClass",
    "SQUARE_SIZES",
    "RECTANGULAR_SIZES",
    "select_size_class",
    "pad_codewords",
    "pad_codeword",
    "END_OF_MESSAGE",
]
