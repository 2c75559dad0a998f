# file: tests/test_module2_symbol_size.py

"""
Unit tests for Module 2: Symbol Size.

Test coverage:
    - Square and rectangular size tables against ECC200 capacities
    - Size selection, rectangular limit and square fallback
    - End-of-message and randomised padding
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from module1_compaction import EncodingError
from module2_symbol_size import (
    SQUARE_SIZES,
    RECTANGULAR_SIZES,
    select_size_class,
    pad_codewords,
    pad_codeword,
    END_OF_MESSAGE,
)

# (symbol side, data capacity, blocks, regions per side)
SQUARE_EXPECTED = [
    (10, 3, 1, 1), (12, 5, 1, 1), (14, 8, 1, 1), (16, 12, 1, 1),
    (18, 18, 1, 1), (20, 22, 1, 1), (22, 30, 1, 1), (24, 36, 1, 1),
    (26, 44, 1, 1), (32, 62, 1, 2), (36, 86, 1, 2), (40, 114, 1, 2),
    (44, 144, 1, 2), (48, 174, 1, 2), (52, 204, 2, 2), (64, 280, 2, 4),
    (72, 368, 4, 4), (80, 456, 4, 4), (88, 576, 4, 4), (96, 696, 4, 4),
    (104, 816, 6, 4), (120, 1050, 6, 6), (132, 1304, 8, 6), (144, 1558, 10, 6),
]

# (height, width, data capacity, horizontal regions)
RECTANGULAR_EXPECTED = [
    (8, 18, 5, 1), (8, 32, 10, 2), (12, 26, 16, 1),
    (12, 36, 22, 2), (16, 36, 32, 2), (16, 48, 49, 2),
]


class TestSizeTable:
    """Test the generated size tables."""

    def test_square_sizes(self):
        """Square sizes match the ECC200 table."""
        actual = [
            (s.matrix_width, s.data_capacity, s.blocks, s.regions_x)
            for s in SQUARE_SIZES
        ]
        assert actual == SQUARE_EXPECTED
        assert all(s.matrix_width == s.matrix_height for s in SQUARE_SIZES)
        assert not any(s.rectangular for s in SQUARE_SIZES)

    def test_rectangular_sizes(self):
        """Rectangular sizes match the ECC200 table."""
        actual = [
            (s.matrix_height, s.matrix_width, s.data_capacity, s.regions_x)
            for s in RECTANGULAR_SIZES
        ]
        assert actual == RECTANGULAR_EXPECTED
        assert all(s.rectangular and s.regions_y == 1 for s in RECTANGULAR_SIZES)

    def test_matrix_includes_finder_borders(self):
        """Matrix size is the data area plus two modules per region."""
        for size in SQUARE_SIZES + RECTANGULAR_SIZES:
            assert size.matrix_width == size.data_width + 2 * size.regions_x
            assert size.matrix_height == size.data_height + 2 * size.regions_y
            assert size.region_width * size.regions_x == size.data_width
            assert size.region_height * size.regions_y == size.data_height

    def test_capacity_accounting(self):
        """Data and correction codewords fill the grid exactly."""
        for size in SQUARE_SIZES + RECTANGULAR_SIZES:
            assert size.data_capacity + size.ecc_codewords == size.total_codewords
            assert size.total_codewords == size.data_width * size.data_height // 8

    def test_ascending_capacity(self):
        """Tables are ordered by increasing capacity."""
        for table in (SQUARE_SIZES, RECTANGULAR_SIZES):
            capacities = [s.data_capacity for s in table]
            assert capacities == sorted(capacities)

    def test_largest_symbol_ecc(self):
        """144x144 uses ten blocks of 62 correction codewords."""
        largest = SQUARE_SIZES[-1]
        assert largest.blocks == 10
        assert largest.ecc_per_block == 62


class TestSizeSelection:
    """Test size class selection."""

    def test_smallest_fitting_square(self):
        """The first class with enough capacity is chosen."""
        assert select_size_class(3).matrix_width == 10
        assert select_size_class(4).matrix_width == 12
        assert select_size_class(5).matrix_width == 12
        assert select_size_class(6).matrix_width == 14

    def test_rectangular(self):
        """Rectangular sizes are used when requested."""
        size = select_size_class(5, rectangular=True)
        assert (size.matrix_height, size.matrix_width) == (8, 18)
        size = select_size_class(49, rectangular=True)
        assert (size.matrix_height, size.matrix_width) == (16, 48)

    def test_rectangular_falls_back_to_square(self):
        """Counts of 50 or more use the square table even if rectangular is requested."""
        size = select_size_class(50, rectangular=True)
        assert not size.rectangular
        assert size.matrix_width == 32

    def test_maximum_capacity(self):
        """1558 codewords fit, 1559 do not."""
        assert select_size_class(1558).matrix_width == 144
        with pytest.raises(EncodingError, match="too long"):
            select_size_class(1559)


class TestPadding:
    """Test padding to data capacity."""

    def test_single_end_of_message(self):
        """One free slot takes only the end-of-message codeword."""
        assert pad_codewords([85, 70, 84, 85], 5) == [85, 70, 84, 85, END_OF_MESSAGE]

    def test_randomised_pad(self):
        """Further slots use the 253-state pad sequence by position."""
        assert pad_codewords([1], 4) == [1, 129, 70, 220]

    def test_full_buffer_untouched(self):
        """A message that exactly fills capacity gets no padding."""
        assert pad_codewords([1, 2, 3], 3) == [1, 2, 3]

    def test_length_equals_capacity(self):
        """Padded length always equals capacity."""
        for count in range(0, 30):
            assert len(pad_codewords([65] * count, 30)) == 30

    def test_input_not_modified(self):
        """Padding returns a new list."""
        codewords = [1, 2]
        pad_codewords(codewords, 10)
        assert codewords == [1, 2]

    def test_overflow(self):
        """More codewords than capacity is an error."""
        with pytest.raises(ValueError):
            pad_codewords([1, 2, 3], 2)

    def test_double_modulo_wraps_to_zero(self):
        """A pad value of 254 wraps to 0."""
        wrapping = [p for p in range(1, 1559) if (149 * p) % 253 + 130 == 254]
        assert wrapping
        assert all(pad_codeword(p) == 0 for p in wrapping)
        assert all(0 <= pad_codeword(p) <= 253 for p in range(1, 1559))
