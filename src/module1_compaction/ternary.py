# file: src/module1_compaction/ternary.py

"""
C40, TEXT and X12 compaction.

The three schemes share one state machine. Each character maps to one or two
values in 0..39; every three values are packed into a 16-bit word
(1600*v1 + 40*v2 + v3 + 1) and emitted as two codewords, high byte first.
Which values a byte maps to is fully described by a TernaryTable, so the
schemes differ only in the table they pass in.
"""

from dataclasses import dataclass
from typing import List, Tuple

from .ascii import ascii_encode

# Shift classes
SHIFT_1 = 0
SHIFT_2 = 1
SHIFT_3 = 2
BASIC = 9
ILLEGAL = 8

UNLATCH = 254
UPPER_SHIFT_VALUE = 30


@dataclass(frozen=True)
class TernaryTable:
    """
    Declarative character table for one ternary scheme.

    Attributes:
        latch: Codeword that switches the symbol into this scheme
        ranges: (upper_bound, shift_class, offset) triples, ascending by
            upper_bound; a byte falls into the first range whose bound it does
            not exceed and maps to the value byte - offset
        upper_shift: Whether bytes above 127 may be reached via Shift 2 /
            Upper Shift
        pad_partial: Whether a trailing group of two values is completed
            with a zero value
    """
    latch: int
    ranges: Tuple[Tuple[int, int, int], ...]
    upper_shift: bool = True
    pad_partial: bool = True

    def lookup(self, byte: int) -> Tuple[int, int]:
        for upper_bound, shift_class, offset in self.ranges:
            if byte <= upper_bound:
                return shift_class, offset
        return ILLEGAL, 0


C40_TABLE = TernaryTable(
    latch=230,
    ranges=(
        (31, SHIFT_1, 0),
        (32, BASIC, 29),
        (47, SHIFT_2, 33),
        (57, BASIC, 44),
        (64, SHIFT_2, 43),
        (90, BASIC, 51),
        (95, SHIFT_2, 69),
        (127, SHIFT_3, 96),
        (255, SHIFT_2, 0),
    ),
)

TEXT_TABLE = TernaryTable(
    latch=239,
    ranges=(
        (31, SHIFT_1, 0),
        (32, BASIC, 29),
        (47, SHIFT_2, 33),
        (57, BASIC, 44),
        (64, SHIFT_2, 43),
        (90, SHIFT_3, 64),
        (95, SHIFT_2, 69),
        (122, BASIC, 83),
        (127, SHIFT_3, 96),
        (255, SHIFT_2, 0),
    ),
)

# X12 has no shift sets; its own unlatch makes a padded final group unnecessary
X12_TABLE = TernaryTable(
    latch=238,
    ranges=(
        (12, ILLEGAL, 0),
        (13, BASIC, 13),
        (31, ILLEGAL, 0),
        (32, BASIC, 29),
        (41, ILLEGAL, 0),
        (42, BASIC, 41),
        (47, ILLEGAL, 0),
        (57, BASIC, 44),
        (64, ILLEGAL, 0),
        (90, BASIC, 51),
        (255, ILLEGAL, 0),
    ),
    upper_shift=False,
    pad_partial=False,
)


class _TripletPacker:
    """Accumulates values and flushes every third one as two codewords."""

    def __init__(self, output: List[int]):
        self.output = output
        self.pending = 0
        self.word = 0

    def push(self, value: int) -> None:
        self.word = 40 * self.word + value
        self.pending += 1
        if self.pending == 3:
            self.word += 1
            self.output.append(self.word >> 8)
            self.output.append(self.word & 255)
            self.pending = 0
            self.word = 0


def ternary_encode(data: bytes, table: TernaryTable) -> List[int]:
    """
    Encode bytes with a ternary scheme described by `table`.

    Args:
        data: Message bytes
        table: One of C40_TABLE, TEXT_TABLE, X12_TABLE

    Returns:
        Codewords starting with the scheme latch, or an empty list if the
        message contains a byte the scheme cannot represent

    Notes:
        - Bytes that do not fill a complete triplet at end of data are
          re-encoded in ASCII after the unlatch codeword.
    """
    data = bytes(data)
    result = [table.latch]
    packer = _TripletPacker(result)
    length = len(data)

    i = 0
    while i < length:
        last = i == length - 1
        if packer.pending == 0 and last:
            break

        byte = data[i]
        if byte > 127 and table.upper_shift:
            packer.push(SHIFT_2)
            packer.push(UPPER_SHIFT_VALUE)
            byte -= 128

        shift_class, offset = table.lookup(byte)
        if shift_class == ILLEGAL:
            return []
        if shift_class == BASIC and packer.pending == 0 and last:
            return []
        if shift_class != BASIC and packer.pending == 2 and last:
            break

        if shift_class != BASIC:
            packer.push(shift_class)
        packer.push(byte - offset)
        i += 1

    if packer.pending == 2 and table.pad_partial:
        packer.push(0)

    result.append(UNLATCH)
    if packer.pending > 0 or i < length:
        result.extend(ascii_encode(data[i - packer.pending:]))

    return result


def c40_encode(data: bytes) -> List[int]:
    return ternary_encode(data, C40_TABLE)


def txt_encode(data: bytes) -> List[int]:
    return ternary_encode(data, TEXT_TABLE)


def x12_encode(data: bytes) -> List[int]:
    return ternary_encode(data, X12_TABLE)
