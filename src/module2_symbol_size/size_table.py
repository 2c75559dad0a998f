# file: src/module2_symbol_size/size_table.py

"""
Data Matrix ECC200 symbol sizes.

The square and rectangular tables are built once at import time from the
growth rule of the standard's size progression and are read-only afterwards.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from module1_compaction.exceptions import EncodingError

logger = logging.getLogger(__name__)

# Total error correction codewords per square size, smallest first
_SQUARE_ECC = (
    5, 7, 10, 12, 14, 18, 20, 24, 28, 36, 42, 48,
    56, 68, 84, 112, 144, 192, 224, 272, 336, 408, 496, 620,
)

# (nominal data width, error correction codewords) per rectangular size
_RECTANGULAR = ((16, 7), (28, 11), (24, 14), (32, 18), (32, 24), (44, 28))

RECTANGULAR_LIMIT = 50


@dataclass(frozen=True)
class SizeClass:
    """
    One symbol size.

    Attributes:
        rectangular: Whether this is a rectangular size
        data_width: Width of the data area without finder patterns
        data_height: Height of the data area without finder patterns
        regions_x: Data regions per row
        regions_y: Data regions per column
        ecc_per_block: Error correction codewords per interleaved block
        blocks: Number of interleaved Reed-Solomon blocks
        total_codewords: Data + error correction codewords the grid holds
    """
    rectangular: bool
    data_width: int
    data_height: int
    regions_x: int
    regions_y: int
    ecc_per_block: int
    blocks: int
    total_codewords: int

    @property
    def matrix_width(self) -> int:
        return self.data_width + 2 * self.regions_x

    @property
    def matrix_height(self) -> int:
        return self.data_height + 2 * self.regions_y

    @property
    def region_width(self) -> int:
        return self.data_width // self.regions_x

    @property
    def region_height(self) -> int:
        return self.data_height // self.regions_y

    @property
    def ecc_codewords(self) -> int:
        return self.ecc_per_block * self.blocks

    @property
    def data_capacity(self) -> int:
        return self.total_codewords - self.ecc_codewords


def _build_square_sizes() -> Tuple[SizeClass, ...]:
    sizes = []
    side = 6
    step = 2
    for ecc in _SQUARE_ECC:
        if side > 11 * step:
            step = (4 + step) & 12
        side += step
        total = (side * side) >> 3
        regions = 2 * (side // 54) + 2 if side > 27 else 1
        blocks = 2 * (total >> 9) + 2 if total > 255 else 1
        sizes.append(SizeClass(
            rectangular=False,
            data_width=side,
            data_height=side,
            regions_x=regions,
            regions_y=regions,
            ecc_per_block=ecc // blocks,
            blocks=blocks,
            total_codewords=total,
        ))
    return tuple(sizes)


def _build_rectangular_sizes() -> Tuple[SizeClass, ...]:
    sizes = []
    for index, (width, ecc) in enumerate(_RECTANGULAR):
        height = 6 + (2 * index & 12)
        sizes.append(SizeClass(
            rectangular=True,
            data_width=width,
            data_height=height,
            regions_x=2 if width > 25 else 1,
            regions_y=1,
            ecc_per_block=ecc,
            blocks=1,
            total_codewords=width * height // 8,
        ))
    return tuple(sizes)


SQUARE_SIZES = _build_square_sizes()
RECTANGULAR_SIZES = _build_rectangular_sizes()


def select_size_class(codeword_count: int, rectangular: bool = False) -> SizeClass:
    """
    Select the smallest size whose data capacity holds `codeword_count`.

    Rectangular sizes are only searched when requested and the count is
    below RECTANGULAR_LIMIT; otherwise the square table is used.

    Raises:
        EncodingError: If the message is too long for every square size
    """
    if rectangular and codeword_count < RECTANGULAR_LIMIT:
        table = RECTANGULAR_SIZES
    else:
        if rectangular:
            logger.debug(
                "%d codewords exceed rectangular limit, using square sizes", codeword_count
            )
        table = SQUARE_SIZES

    for size_class in table:
        if size_class.data_capacity >= codeword_count:
            logger.debug(
                "Selected %dx%d symbol for %d codewords (capacity %d)",
                size_class.matrix_height, size_class.matrix_width,
                codeword_count, size_class.data_capacity,
            )
            return size_class

    raise EncodingError(
        f"Message too long: {codeword_count} codewords exceed maximum capacity "
        f"of {table[-1].data_capacity}"
    )
