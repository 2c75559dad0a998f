# file: src/module2_symbol_size/padding.py

"""
Data codeword padding.

Unused data capacity is filled with one end-of-message codeword followed by
the 253-state randomised pad sequence. The expression keeps its double modulo
so that a pad value of 254 wraps to 0 exactly as existing symbols do.
"""

from typing import List, Sequence

END_OF_MESSAGE = 129


def pad_codeword(position: int) -> int:
    """Pad codeword for 1-based stream `position`."""
    return ((149 * position) % 253 + 130) % 254


def pad_codewords(codewords: Sequence[int], capacity: int) -> List[int]:
    """
    Pad `codewords` up to `capacity`.

    Args:
        codewords: Compacted data codewords
        capacity: Data capacity of the selected size class

    Returns:
        New list of exactly `capacity` codewords (input is not modified)

    Raises:
        ValueError: If there are more codewords than capacity
    """
    if len(codewords) > capacity:
        raise ValueError(f"{len(codewords)} codewords exceed capacity {capacity}")

    padded = list(codewords)
    if len(padded) < capacity:
        padded.append(END_OF_MESSAGE)
    while len(padded) < capacity:
        padded.append(pad_codeword(len(padded) + 1))
    return padded
